"""
Data model for the floor-plan subsystem.

Plain containers for parsed units, firm records, payment plan lines and
block summaries. Every container converts to a JSON-friendly dictionary.
"""

import re
from typing import Dict, List, Optional, Union

STATUS_AVAILABLE = "available"
STATUS_SOLD = "sold"
STATUS_RESERVED = "reserved"

UNIT_STATUSES = (STATUS_AVAILABLE, STATUS_SOLD, STATUS_RESERVED)

_NON_DIGIT = re.compile(r"\D")


def unit_ordinal(unit_number: str) -> int:
    """
    Recover the ordering integer of a unit label.

    Non-digit characters are stripped ("A-12" -> 12); labels without
    digits yield 0.
    """
    digits = _NON_DIGIT.sub("", str(unit_number))
    return int(digits) if digits else 0


class Unit:
    """
    One sellable/occupiable space in the development.

    Attributes:
        section: Sub-area label, free text from the export.
        block: Block identifier, scoped per phase.
        unit_number: Unit label within the block.
        gross_area: Gross area in m² (0 when unparsable).
        net_area: Net area in m² (0 when unparsable).
        status: One of available, sold, reserved.
        ground_floor_area: Ground floor m² from the override dataset.
        normal_floor_area: Upper floor m² from the override dataset.
        price_tl: Price in TL from the override dataset.
        price_usd: Price in USD from the override dataset.
        list_price: Price column of the phase-2 inventory export.
    """

    def __init__(
        self,
        section: str,
        block: str,
        unit_number: str,
        gross_area: float = 0.0,
        net_area: float = 0.0,
        status: str = STATUS_AVAILABLE,
        ground_floor_area: Optional[float] = None,
        normal_floor_area: Optional[float] = None,
        price_tl: Optional[float] = None,
        price_usd: Optional[float] = None,
        list_price: Optional[float] = None,
    ) -> None:
        self.section = section
        self.block = block
        self.unit_number = unit_number
        self.gross_area = gross_area
        self.net_area = net_area
        self.status = status
        self.ground_floor_area = ground_floor_area
        self.normal_floor_area = normal_floor_area
        self.price_tl = price_tl
        self.price_usd = price_usd
        self.list_price = list_price

    @property
    def key(self) -> str:
        """Composite join key shared with the override dataset."""
        return f"{self.block}-{self.unit_number}"

    @property
    def ordinal(self) -> int:
        return unit_ordinal(self.unit_number)

    @property
    def is_enriched(self) -> bool:
        return self.ground_floor_area is not None or self.normal_floor_area is not None

    @property
    def display_area(self) -> float:
        """
        Area shown on floor-plan labels.

        Ground + normal floor area from the override dataset when present
        and non-zero, otherwise the inventory net area.
        """
        if self.is_enriched:
            total = (self.ground_floor_area or 0) + (self.normal_floor_area or 0)
            if total > 0:
                return round(total)
        return self.net_area

    def copy(self, **changes) -> "Unit":
        fields = self.to_dict(include_derived=False)
        fields.update(changes)
        return Unit(**fields)

    def to_dict(self, include_derived: bool = True) -> Dict[str, Union[str, float, int, None]]:
        data = {
            "section": self.section,
            "block": self.block,
            "unit_number": self.unit_number,
            "gross_area": self.gross_area,
            "net_area": self.net_area,
            "status": self.status,
            "ground_floor_area": self.ground_floor_area,
            "normal_floor_area": self.normal_floor_area,
            "price_tl": self.price_tl,
            "price_usd": self.price_usd,
            "list_price": self.list_price,
        }
        if include_derived:
            data["display_area"] = self.display_area
            data["ordinal"] = self.ordinal
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.to_dict(include_derived=False) == other.to_dict(include_derived=False)

    def __repr__(self) -> str:
        return f"Unit(block={self.block!r}, unit_number={self.unit_number!r}, status={self.status!r})"


class FirmInfo:
    """
    Occupancy/ownership record for one or more units of a block.

    ``unit_no`` is a dash-separated list of unit numbers ("3-4-6"); it is
    not a range, so "3-4-6" does not cover "5".
    """

    def __init__(
        self,
        sira_no: int,
        etap: str,
        block: str,
        unit_no: str,
        firma: str,
        kiraci: str,
        is_kolu: str,
    ) -> None:
        self.sira_no = sira_no
        self.etap = etap
        self.block = block
        self.unit_no = unit_no
        self.firma = firma
        self.kiraci = kiraci
        self.is_kolu = is_kolu

    @property
    def unit_numbers(self) -> List[str]:
        return [n.strip() for n in self.unit_no.split("-")]

    def covers(self, unit_number: str) -> bool:
        return str(unit_number) in self.unit_numbers

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {
            "sira_no": self.sira_no,
            "etap": self.etap,
            "block": self.block,
            "unit_no": self.unit_no,
            "firma": self.firma,
            "kiraci": self.kiraci,
            "is_kolu": self.is_kolu,
        }

    def __repr__(self) -> str:
        return f"FirmInfo(etap={self.etap!r}, block={self.block!r}, unit_no={self.unit_no!r}, firma={self.firma!r})"


class OverrideRecord:
    """Area breakdown and pricing for one unit from the CRM export."""

    def __init__(
        self,
        ground: float,
        normal: float,
        price_tl: Optional[float] = None,
        price_usd: Optional[float] = None,
    ) -> None:
        self.ground = ground
        self.normal = normal
        self.price_tl = price_tl
        self.price_usd = price_usd

    @property
    def total_area(self) -> float:
        return self.ground + self.normal

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            "ground": self.ground,
            "normal": self.normal,
            "price_tl": self.price_tl,
            "price_usd": self.price_usd,
        }


class PaymentPlanItem:
    """
    One scheduled cash-flow line.

    ``installment_no`` 0 is the down payment, 1..N are monthly installments.
    """

    def __init__(
        self,
        installment_no: int,
        date: str,
        amount: float,
        description: str,
    ) -> None:
        self.installment_no = installment_no
        self.date = date
        self.amount = amount
        self.description = description

    @property
    def is_down_payment(self) -> bool:
        return self.installment_no == 0

    def to_dict(self) -> Dict[str, Union[str, int, float]]:
        return {
            "installment_no": self.installment_no,
            "date": self.date,
            "amount": self.amount,
            "description": self.description,
        }

    def __repr__(self) -> str:
        return f"PaymentPlanItem({self.installment_no}, {self.date}, {self.amount})"


class BlockSummary:
    """Per-block occupancy counts, derived on demand."""

    def __init__(
        self,
        total: int,
        sold: int,
        available: int,
        reserved: int,
        total_area: float,
        avg_area: int,
        occupancy_rate: int,
    ) -> None:
        self.total = total
        self.sold = sold
        self.available = available
        self.reserved = reserved
        self.total_area = total_area
        self.avg_area = avg_area
        self.occupancy_rate = occupancy_rate

    def to_dict(self) -> Dict[str, Union[int, float]]:
        return {
            "total": self.total,
            "sold": self.sold,
            "available": self.available,
            "reserved": self.reserved,
            "total_area": self.total_area,
            "avg_area": self.avg_area,
            "occupancy_rate": self.occupancy_rate,
        }
