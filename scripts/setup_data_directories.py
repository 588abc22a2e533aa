"""
Setup data directories for the floor-plan project.

Creates the raw (CSV exports) and processed (reports) directories under
the configured data directory.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from msm_floorplan.config import PROCESSED_DIR, RAW_DIR

REQUIRED_DIRECTORIES = [RAW_DIR, PROCESSED_DIR]


def setup_data_directories() -> None:
    """Create missing data directories and print what was done."""
    created_dirs = []
    existing_dirs = []

    for path in REQUIRED_DIRECTORIES:
        if path.exists():
            existing_dirs.append(path)
        else:
            path.mkdir(parents=True, exist_ok=True)
            created_dirs.append(path)

    print("=" * 60)
    print("MSM FLOOR PLAN - DATA DIRECTORY SETUP")
    print("=" * 60)

    if created_dirs:
        print("[CREATED] Directories:")
        for path in created_dirs:
            print(f"  - {path}")
    else:
        print("[INFO] No new directories created (all already exist)")

    if existing_dirs:
        print("[EXISTING] Directories:")
        for path in existing_dirs:
            print(f"  - {path}")

    print("=" * 60)
    print(f"Total directories checked: {len(REQUIRED_DIRECTORIES)}")
    print(f"Created: {len(created_dirs)}")
    print(f"Already existed: {len(existing_dirs)}")
    print("=" * 60)


if __name__ == "__main__":
    setup_data_directories()
