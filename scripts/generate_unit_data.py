"""
Script to generate a full unit inventory in the GET /api/units seed format.

Every block gets ``count`` units of a fixed size; status is drawn at random
(60% available, 20% reserved, 20% sold) and the price follows the
placeholder policy (size × TL/m²). Units are laid out on a simple
rectangle grid for the master-plan overview.

Output: data/processed/unit_data.json by default. The served seed
(data/unit_data.json, a hand-picked sample with occupant names) is left
alone; pass an explicit path or point MSM_UNIT_DATA at the output to serve
the generated inventory.

Usage:
    python scripts/generate_unit_data.py [output.json] [seed]
"""

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

import numpy as np

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from msm_floorplan.config import PROCESSED_DIR
from msm_floorplan.pricing import PricingPolicy

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# (block, unit count, m²)
BLOCKS = [
    ("M", 24, 120),
    ("L", 20, 155),
    ("K", 20, 155),
    ("H", 20, 150),
    ("G", 20, 150),
    ("F", 22, 145),
    ("A", 48, 160),
    ("B", 43, 165),
    ("C", 25, 180),
    ("D", 20, 200),
    ("E", 20, 200),
]

STATUSES = ["available", "reserved", "sold"]
STATUS_WEIGHTS = [0.6, 0.2, 0.2]

CELL_WIDTH = 60
CELL_HEIGHT = 40
UNITS_PER_ROW = 12
ORIGIN_X = 40
ORIGIN_Y = 60
BLOCK_GAP = 20

DEFAULT_OUTPUT = PROCESSED_DIR / "unit_data.json"


def generate_units(seed: int = 42) -> List[Dict[str, object]]:
    """
    Generate seed units for every block.

    Args:
        seed: Random seed, so the same seed gives the same file.

    Returns:
        Unit dictionaries in the camelCase seed format.
    """
    rng = np.random.default_rng(seed)
    pricing = PricingPolicy()
    units = []
    y = ORIGIN_Y

    for block, count, size in BLOCKS:
        statuses = rng.choice(STATUSES, size=count, p=STATUS_WEIGHTS)
        price, _ = pricing.prices_for_area(size)
        for i in range(count):
            units.append({
                "unitNumber": f"{block}-{i + 1}",
                "blockName": block,
                "size": size,
                "status": str(statuses[i]),
                "price": price,
                "companyName": None,
                "x": ORIGIN_X + (i % UNITS_PER_ROW) * CELL_WIDTH,
                "y": y + (i // UNITS_PER_ROW) * CELL_HEIGHT,
                "width": CELL_WIDTH,
                "height": CELL_HEIGHT,
            })
        rows = -(-count // UNITS_PER_ROW)
        y += rows * CELL_HEIGHT + BLOCK_GAP

    return units


def write_unit_data(output_path: Path = DEFAULT_OUTPUT, seed: int = 42) -> Path:
    units = generate_units(seed)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(units, f, indent=2, ensure_ascii=False)

    counts = {status: sum(1 for u in units if u["status"] == status) for status in STATUSES}
    logger.info(f"Generated {len(units)} units ({counts}) -> {output_path}")
    return output_path


if __name__ == "__main__":
    output = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_OUTPUT
    write_unit_data(output, seed=int(sys.argv[2]) if len(sys.argv) > 2 else 42)
