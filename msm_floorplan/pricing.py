"""
Placeholder pricing for units whose CRM export has no sale prices.

price_tl = area × TL/m², price_usd = price_tl / TL-per-USD. A unit with no
area breakdown is priced as if it had ``fallback_area`` m².
"""

import logging
from typing import Tuple

from msm_floorplan.config import FALLBACK_AREA, PRICE_TL_PER_SQM, TL_PER_USD

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -round_half_up(-value)
    return int(value + 0.5)


class PricingPolicy:
    """Area-based mock pricing used by the override dataset."""

    def __init__(
        self,
        tl_per_sqm: float = PRICE_TL_PER_SQM,
        tl_per_usd: float = TL_PER_USD,
        fallback_area: float = FALLBACK_AREA,
    ) -> None:
        if tl_per_usd <= 0:
            raise ValueError("tl_per_usd must be greater than 0")
        self.tl_per_sqm = tl_per_sqm
        self.tl_per_usd = tl_per_usd
        self.fallback_area = fallback_area

    def price_tl(self, area: float) -> int:
        if not area:
            area = self.fallback_area
        return round_half_up(area * self.tl_per_sqm)

    def price_usd(self, price_tl: float) -> int:
        return round_half_up(price_tl / self.tl_per_usd)

    def prices_for_area(self, area: float) -> Tuple[int, int]:
        """Return (price_tl, price_usd) for a unit of ``area`` m²."""
        price_tl = self.price_tl(area)
        return price_tl, self.price_usd(price_tl)
