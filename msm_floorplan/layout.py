"""
Floor-plan grid layout.

Places the units of one block on a grid for the floor-plan view. One
parameterized function covers every block; per-block differences live in
``BlockGeometry`` descriptors loaded from configuration.

Generic layout (default 8 columns × 10 rows):
- Units 1..18 are paired on rows 1..9: odd numbers on the left half,
  even numbers on the right half.
- Remaining units share the last row, split into a left and a right half
  with an equal column span per unit.
"""

import logging
import math
from typing import Dict, List, Optional

from msm_floorplan.config import BLOCK_GRIDS, DEFAULT_GRID, UNITS_PER_COLUMN
from msm_floorplan.models import Unit

logger = logging.getLogger(__name__)


class BlockGeometry:
    """Grid dimensions of one block's floor plan."""

    def __init__(self, columns: int = 8, rows: int = 10, paired_rows: int = 9) -> None:
        if columns < 2 or columns % 2:
            raise ValueError("columns must be an even number >= 2")
        if paired_rows >= rows:
            raise ValueError("paired_rows must leave at least one bottom row")
        self.columns = columns
        self.rows = rows
        self.paired_rows = paired_rows

    @property
    def half(self) -> int:
        return self.columns // 2

    @property
    def paired_capacity(self) -> int:
        return self.paired_rows * 2

    def to_dict(self) -> Dict[str, int]:
        return {"columns": self.columns, "rows": self.rows, "paired_rows": self.paired_rows}


def get_block_geometry(block: str) -> BlockGeometry:
    """Configured geometry for ``block``, falling back to the default grid."""
    return BlockGeometry(**BLOCK_GRIDS.get(str(block).strip().upper(), DEFAULT_GRID))


class GridCell:
    """Placement of one unit: 1-based row and column plus column span."""

    def __init__(self, unit: Unit, row: int, column: int, span: int) -> None:
        self.unit = unit
        self.row = row
        self.column = column
        self.span = span

    def to_dict(self) -> Dict[str, object]:
        return {
            "unit_number": self.unit.unit_number,
            "status": self.unit.status,
            "display_area": self.unit.display_area,
            "row": self.row,
            "column": self.column,
            "span": self.span,
        }


def sort_units_by_ordinal(units: List[Unit]) -> List[Unit]:
    """Sort by the integer recovered from each unit number (stable)."""
    return sorted(units, key=lambda unit: unit.ordinal)


def arrange_in_columns(units: List[Unit], per_column: int = UNITS_PER_COLUMN) -> List[Unit]:
    """
    Arrange units column by column, bottom to top.

    Units are sorted by ordinal, cut into columns of ``per_column`` and each
    column is reversed so its lowest number ends up at the bottom.
    """
    if per_column < 1:
        raise ValueError("per_column must be at least 1")
    ordered = sort_units_by_ordinal(units)
    num_columns = max(1, math.ceil(len(ordered) / per_column))
    arranged = []
    for col in range(num_columns):
        column_units = ordered[col * per_column:(col + 1) * per_column]
        arranged.extend(reversed(column_units))
    return arranged


def compute_grid_cells(
    units: List[Unit],
    geometry: Optional[BlockGeometry] = None,
) -> List[GridCell]:
    """
    Place the units of one block on the grid.

    Args:
        units: Units of a single block.
        geometry: Grid descriptor. Defaults to the 8 × 10 grid.

    Returns:
        One GridCell per unit: paired rows first, then the bottom row.
        Units numbered 0 (no digits) go to the bottom row.
    """
    geometry = geometry or BlockGeometry()
    ordered = sort_units_by_ordinal(units)

    cells = []
    bottom = []
    for unit in ordered:
        number = unit.ordinal
        if 1 <= number <= geometry.paired_capacity:
            is_odd = number % 2 != 0
            cells.append(
                GridCell(
                    unit=unit,
                    row=(number - 1) // 2 + 1,
                    column=1 if is_odd else geometry.half + 1,
                    span=geometry.half,
                )
            )
        else:
            bottom.append(unit)

    total_bottom = len(bottom)
    left_count = math.ceil(total_bottom / 2)
    for index, unit in enumerate(bottom):
        is_left = index < left_count
        index_in_side = index if is_left else index - left_count
        count_in_side = left_count if is_left else total_bottom - left_count
        span = max(1, geometry.half // count_in_side)
        side_start = 1 if is_left else geometry.half + 1
        cells.append(
            GridCell(
                unit=unit,
                row=geometry.rows,
                column=side_start + index_in_side * span,
                span=span,
            )
        )

    if total_bottom > geometry.columns:
        logger.warning(
            f"{total_bottom} units share the bottom row of a {geometry.columns}-column grid"
        )
    return cells
