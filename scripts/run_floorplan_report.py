"""
Script to build floor-plan datasets for every phase.

Generates:
1. floorplan_{phase}.json per phase (units, firms, block summaries)
2. block_summary.csv with one row per (phase, block)

Usage:
    python scripts/run_floorplan_report.py          # all phases
    python scripts/run_floorplan_report.py 3        # single phase
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from msm_floorplan.config import PHASES, PROCESSED_DIR, SOURCE
from msm_floorplan.pipeline import FloorPlanDataset, run_pipeline

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def run_floorplan_report(
    phases: Optional[List[str]] = None,
    source: str = SOURCE,
    output_dir: Path = PROCESSED_DIR,
) -> List[FloorPlanDataset]:
    """
    Build and save the datasets of the given phases.

    Args:
        phases: Phase ids to process. Defaults to every configured phase.
        source: Directory or base URL of the CSV exports.
        output_dir: Directory for the JSON and CSV outputs.

    Returns:
        The built datasets, in phase order.
    """
    phases = phases or list(PHASES)
    output_dir = Path(output_dir)

    logger.info("=" * 80)
    logger.info("FLOOR PLAN REPORT")
    logger.info("=" * 80)
    logger.info(f"Source: {source}")
    logger.info(f"Phases: {', '.join(phases)}")

    datasets = []
    for phase in phases:
        dataset = run_pipeline(phase, source=source, output_dir=output_dir, save_results=True)
        datasets.append(dataset)

        logger.info("")
        logger.info(f"[SUMMARY] Phase {phase}")
        for block, summary in dataset.block_summaries().items():
            logger.info(
                f"  Block {block}: {summary.total} units, {summary.sold} sold, "
                f"{summary.reserved} reserved, occupancy {summary.occupancy_rate}%"
            )
        for key, claimants in dataset.overlapping_claims().items():
            names = ", ".join(firm.firma for firm in claimants)
            logger.warning(f"  Unit {key} claimed by: {names}")

    frames = [dataset.summary_frame() for dataset in datasets if not dataset.is_empty]
    if frames:
        summary_df = pd.concat(frames, ignore_index=True)
        summary_path = output_dir / "block_summary.csv"
        summary_df.to_csv(summary_path, index=False, encoding="utf-8-sig")
        logger.info(f"Block summary saved to: {summary_path}")

    # Final summary
    logger.info("=" * 80)
    logger.info("FLOOR PLAN REPORT COMPLETE")
    logger.info("=" * 80)
    total_units = sum(len(dataset.units) for dataset in datasets)
    logger.info(f"Phases processed: {len(datasets)}")
    logger.info(f"Total units: {total_units}")
    logger.info("=" * 80)

    return datasets


if __name__ == "__main__":
    selected = sys.argv[1:] or None
    results = run_floorplan_report(phases=selected)

    if any(not dataset.is_empty for dataset in results):
        logger.info("\n✓ Floor plan report completed successfully!")
    else:
        logger.warning("\n⚠ No units were loaded.")
