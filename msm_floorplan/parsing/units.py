"""
Unit inventory parser.

Each sales phase (etap) exports its unit inventory with nearly the same
columns. Phase 2 carries an extra leading ID column and a price column; the
other phases share a six-column layout. The differences are described by a
``PhaseLayout`` per phase and parsed by one function.
"""

import logging
from typing import Dict, List, Optional

from msm_floorplan.config import PHASES
from msm_floorplan.errors import UnknownPhaseError
from msm_floorplan.models import (
    STATUS_AVAILABLE,
    STATUS_RESERVED,
    STATUS_SOLD,
    Unit,
)
from msm_floorplan.parsing.csv_line import iter_data_rows
from msm_floorplan.parsing.values import parse_float, turkish_casefold

logger = logging.getLogger(__name__)

# Checked in order; the first keyword found decides the status
STATUS_KEYWORDS = (
    ("satıldı", STATUS_SOLD),
    ("satışa kapalı", STATUS_RESERVED),
    ("satılık", STATUS_AVAILABLE),
)


class PhaseLayout:
    """
    Column positions of one phase's inventory export.

    Attributes:
        section: Index of "Bölüm Adı".
        block: Index of "Blok No".
        unit: Index of "Daire No".
        gross: Index of "Brüt m²".
        net: Index of "Net M²".
        status: Index of "Durumu".
        price: Index of "Fiyat", None when the phase has no price column.
    """

    def __init__(
        self,
        section: int,
        block: int,
        unit: int,
        gross: int,
        net: int,
        status: int,
        price: Optional[int] = None,
    ) -> None:
        self.section = section
        self.block = block
        self.unit = unit
        self.gross = gross
        self.net = net
        self.status = status
        self.price = price

    @property
    def min_fields(self) -> int:
        indexes = [self.section, self.block, self.unit, self.gross, self.net, self.status]
        if self.price is not None:
            indexes.append(self.price)
        return max(indexes) + 1


# Bölüm Adı, Blok No, Daire No, Brüt m², Net M², Durumu
STANDARD_LAYOUT = PhaseLayout(section=0, block=1, unit=2, gross=3, net=4, status=5)
# ID, Bölüm Adı, Blok No, Daire No, Brüt m², Net M², Fiyat, Durumu
PHASE_2_LAYOUT = PhaseLayout(section=1, block=2, unit=3, gross=4, net=5, status=7, price=6)

PHASE_LAYOUTS: Dict[str, PhaseLayout] = {
    phase: (PHASE_2_LAYOUT if phase == "2" else STANDARD_LAYOUT)
    for phase in PHASES
}


def get_phase_layout(phase: str) -> PhaseLayout:
    """
    Return the column layout for a phase.

    Raises:
        UnknownPhaseError: If ``phase`` is not a recognized phase id.
    """
    layout = PHASE_LAYOUTS.get(str(phase))
    if layout is None:
        raise UnknownPhaseError(
            f"Unknown phase: {phase!r} (expected one of {', '.join(PHASES)})"
        )
    return layout


def classify_status(status_text: str) -> str:
    """
    Map free-text "Durumu" to a unit status.

    Matching is case-insensitive by substring; "satıldı" wins over every
    other keyword and unmatched text is treated as available.
    """
    folded = turkish_casefold(status_text or "")
    for keyword, status in STATUS_KEYWORDS:
        if keyword in folded:
            return status
    return STATUS_AVAILABLE


def parse_units_csv(content: str, phase: str = "1") -> List[Unit]:
    """
    Parse a unit inventory export into Unit records.

    Args:
        content: Full CSV text including the header row.
        phase: Phase id selecting the column layout.

    Returns:
        Units in file order. Rows with too few columns are dropped.

    Raises:
        UnknownPhaseError: If ``phase`` is not recognized.
    """
    layout = get_phase_layout(phase)
    units = []
    dropped = 0

    for fields in iter_data_rows(content):
        if len(fields) < layout.min_fields:
            dropped += 1
            continue

        list_price = None
        if layout.price is not None:
            list_price = parse_float(fields[layout.price])

        units.append(
            Unit(
                section=fields[layout.section],
                block=fields[layout.block],
                unit_number=fields[layout.unit],
                gross_area=parse_float(fields[layout.gross]),
                net_area=parse_float(fields[layout.net]),
                status=classify_status(fields[layout.status]),
                list_price=list_price,
            )
        )

    if dropped:
        logger.debug(f"Phase {phase}: dropped {dropped} short row(s)")
    logger.debug(f"Phase {phase}: parsed {len(units)} units")
    return units
