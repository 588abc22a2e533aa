"""
Block summary aggregation.

Counts units by status for one block and derives average net area and
occupancy rate (sold share of total, as a whole percentage).
"""

from typing import Dict, List

import numpy as np

from msm_floorplan.models import (
    STATUS_AVAILABLE,
    STATUS_RESERVED,
    STATUS_SOLD,
    BlockSummary,
    Unit,
)
from msm_floorplan.pricing import round_half_up


def get_block_summary(units: List[Unit], block: str) -> BlockSummary:
    """
    Summarize the units of one block.

    Args:
        units: Units of one phase dataset.
        block: Block name, compared exactly.

    Returns:
        BlockSummary; an unknown block gives an all-zero summary.
    """
    block_units = [unit for unit in units if unit.block == block]
    total = len(block_units)
    statuses = [unit.status for unit in block_units]

    sold = statuses.count(STATUS_SOLD)
    available = statuses.count(STATUS_AVAILABLE)
    reserved = statuses.count(STATUS_RESERVED)

    total_area = float(np.sum([unit.net_area for unit in block_units])) if block_units else 0.0

    return BlockSummary(
        total=total,
        sold=sold,
        available=available,
        reserved=reserved,
        total_area=total_area,
        avg_area=round_half_up(total_area / total) if total > 0 else 0,
        occupancy_rate=round_half_up(sold / total * 100) if total > 0 else 0,
    )


def get_all_blocks(units: List[Unit]) -> List[str]:
    """Distinct block names, sorted."""
    return sorted({unit.block for unit in units})


def summarize_blocks(units: List[Unit]) -> Dict[str, BlockSummary]:
    return {block: get_block_summary(units, block) for block in get_all_blocks(units)}
