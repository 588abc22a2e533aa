"""
End-to-end floor-plan pipeline.

Orchestrates the data flow for one phase: load the three CSV sources,
parse them, enrich units with override data, and derive block summaries.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from msm_floorplan.config import PROCESSED_DIR, SOURCE
from msm_floorplan.enrichment import (
    enrich_units,
    find_overlapping_claims,
    get_firm_info_for_unit,
    get_firms_for_block,
    get_firms_for_phase,
)
from msm_floorplan.layout import GridCell, compute_grid_cells, get_block_geometry
from msm_floorplan.loader import FloorPlanDataLoader
from msm_floorplan.models import BlockSummary, FirmInfo, Unit
from msm_floorplan.parsing.units import get_phase_layout
from msm_floorplan.pricing import PricingPolicy
from msm_floorplan.summary import get_all_blocks, get_block_summary

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class FloorPlanDataset:
    """
    Parsed and enriched data of one phase.

    Attributes:
        phase: Phase id.
        units: Enriched units, in source order.
        firms: Firm records of this phase.
    """

    def __init__(self, phase: str, units: List[Unit], firms: List[FirmInfo]) -> None:
        self.phase = str(phase)
        self.units = units
        self.firms = firms

    @property
    def blocks(self) -> List[str]:
        return get_all_blocks(self.units)

    @property
    def is_empty(self) -> bool:
        return not self.units

    def units_in_block(self, block: str) -> List[Unit]:
        return [unit for unit in self.units if unit.block == block]

    def get_unit(self, block: str, unit_number: str) -> Optional[Unit]:
        for unit in self.units:
            if unit.block == block and unit.unit_number == unit_number:
                return unit
        return None

    def block_summary(self, block: str) -> BlockSummary:
        return get_block_summary(self.units, block)

    def block_summaries(self) -> Dict[str, BlockSummary]:
        return {block: self.block_summary(block) for block in self.blocks}

    def firms_for_block(self, block: str) -> List[FirmInfo]:
        return get_firms_for_block(self.firms, block, self.phase)

    def firm_for_unit(self, block: str, unit_number: str) -> Optional[FirmInfo]:
        return get_firm_info_for_unit(self.firms, block, unit_number, self.phase)

    def block_layout(self, block: str) -> List[GridCell]:
        return compute_grid_cells(self.units_in_block(block), get_block_geometry(block))

    def overlapping_claims(self) -> Dict[str, List[FirmInfo]]:
        """Overlapping firm claims keyed by "{block}-{unit}"."""
        return {
            f"{block}-{number}": claimants
            for (_, block, number), claimants in find_overlapping_claims(self.firms).items()
        }

    def to_dict(self) -> Dict[str, object]:
        return {
            "phase": self.phase,
            "units": [unit.to_dict() for unit in self.units],
            "firms": [firm.to_dict() for firm in self.firms],
            "blocks": {
                block: summary.to_dict() for block, summary in self.block_summaries().items()
            },
            "overlapping_claims": {
                key: [firm.sira_no for firm in claimants]
                for key, claimants in self.overlapping_claims().items()
            },
        }

    def summary_frame(self) -> pd.DataFrame:
        """Block summaries as a DataFrame, one row per block."""
        rows = [
            {"phase": self.phase, "block": block, **summary.to_dict()}
            for block, summary in self.block_summaries().items()
        ]
        columns = [
            "phase", "block", "total", "sold", "available", "reserved",
            "total_area", "avg_area", "occupancy_rate",
        ]
        return pd.DataFrame(rows, columns=columns)


class FloorPlanPipeline:
    """
    Builds a FloorPlanDataset for one phase.

    Orchestrates:
    1. Loading the inventory, override and firm exports
    2. Parsing each export
    3. Enriching units with override areas and prices
    4. Scoping firms to the phase and reporting overlapping claims
    """

    def __init__(
        self,
        phase: str,
        loader: Optional[FloorPlanDataLoader] = None,
        pricing: Optional[PricingPolicy] = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            phase: Phase id ("1".."5").
            loader: Data loader. Defaults to the configured source.
            pricing: Placeholder pricing policy for override records.

        Raises:
            UnknownPhaseError: If ``phase`` is not recognized.
        """
        get_phase_layout(phase)
        self.phase = str(phase)
        self.loader = loader or FloorPlanDataLoader()
        self.pricing = pricing or PricingPolicy()

    def run(self) -> FloorPlanDataset:
        logger.info(f"Loading floor plan data for phase {self.phase} from {self.loader.source}")

        units = self.loader.load_units(self.phase)
        overrides = self.loader.load_overrides(self.pricing)
        units = enrich_units(units, overrides)
        firms = get_firms_for_phase(self.loader.load_firms(), self.phase)

        dataset = FloorPlanDataset(self.phase, units, firms)

        if dataset.is_empty:
            logger.warning(f"Phase {self.phase}: no units loaded")
        enriched = sum(1 for unit in units if unit.is_enriched)
        logger.info(
            f"Phase {self.phase}: {len(units)} units ({enriched} enriched), "
            f"{len(firms)} firms, blocks: {', '.join(dataset.blocks) or '-'}"
        )

        overlaps = dataset.overlapping_claims()
        if overlaps:
            logger.warning(
                f"Phase {self.phase}: {len(overlaps)} unit(s) claimed by more than one firm, "
                f"first match is used: {', '.join(sorted(overlaps))}"
            )
        return dataset


def run_pipeline(
    phase: str,
    source: str | Path = SOURCE,
    output_dir: Optional[str | Path] = None,
    save_results: bool = False,
) -> FloorPlanDataset:
    """
    Convenience function to build one phase dataset.

    Args:
        phase: Phase id ("1".."5").
        source: Directory or http(s) base URL holding the exports.
        output_dir: Where to save results. Defaults to data/processed.
        save_results: Whether to write floorplan_{phase}.json.

    Returns:
        The phase dataset.

    Example:
        >>> dataset = run_pipeline("3", source="data/raw")
        >>> dataset.block_summary("K").occupancy_rate
    """
    pipeline = FloorPlanPipeline(phase, loader=FloorPlanDataLoader(source=source))
    dataset = pipeline.run()

    if save_results:
        output_dir = Path(output_dir) if output_dir else PROCESSED_DIR
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / f"floorplan_{dataset.phase}.json"
        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(dataset.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Results saved to: {output_file}")

    return dataset
