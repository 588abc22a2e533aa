"""
Area/price override parser for the CRM spreadsheet export (ZK NK).

The export has 14 columns; block and unit are at 5 and 6, ground floor and
normal floor areas at 12 and 13. Areas use a decimal comma.
"""

import logging
from typing import Dict, Optional

from msm_floorplan.models import OverrideRecord
from msm_floorplan.parsing.csv_line import iter_data_rows
from msm_floorplan.parsing.values import parse_decimal_comma
from msm_floorplan.pricing import PricingPolicy

logger = logging.getLogger(__name__)

OVERRIDE_MIN_FIELDS = 14
BLOCK_INDEX = 5
UNIT_INDEX = 6
GROUND_INDEX = 12
NORMAL_INDEX = 13


def override_key(block: str, unit: str) -> str:
    return f"{block}-{unit}"


def parse_override_csv(
    content: str,
    pricing: Optional[PricingPolicy] = None,
) -> Dict[str, OverrideRecord]:
    """
    Parse the override export into records keyed by "{block}-{unit}".

    Args:
        content: Full CSV text including the header row.
        pricing: Policy used to derive price_tl/price_usd. Defaults to the
                 configured placeholder policy.

    Returns:
        Mapping of composite key to OverrideRecord. A repeated key keeps
        the last row.
    """
    pricing = pricing or PricingPolicy()
    records = {}

    for fields in iter_data_rows(content):
        if len(fields) < OVERRIDE_MIN_FIELDS:
            continue

        block = fields[BLOCK_INDEX].strip()
        unit = fields[UNIT_INDEX].strip()
        ground = parse_decimal_comma(fields[GROUND_INDEX])
        normal = parse_decimal_comma(fields[NORMAL_INDEX])
        price_tl, price_usd = pricing.prices_for_area(ground + normal)

        records[override_key(block, unit)] = OverrideRecord(
            ground=ground,
            normal=normal,
            price_tl=price_tl,
            price_usd=price_usd,
        )

    logger.debug(f"Parsed {len(records)} override records")
    return records
