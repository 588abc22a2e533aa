"""
Join and lookup across the three CSV sources.

Units are enriched from the override dataset by "{block}-{unit}" key;
firms are looked up by block, optional phase and exact membership of the
unit number in the firm's dash-separated unit list.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Mapping, Optional, Tuple

from msm_floorplan.models import FirmInfo, OverrideRecord, Unit

logger = logging.getLogger(__name__)


def enrich_units(
    units: List[Unit],
    overrides: Mapping[str, OverrideRecord],
) -> List[Unit]:
    """
    Left-outer merge override data into units.

    Matched units get ground/normal floor areas and both prices; unmatched
    units are returned unchanged. Input units are not modified.
    """
    enriched = []
    matched = 0

    for unit in units:
        record = overrides.get(unit.key)
        if record is None:
            enriched.append(unit)
            continue
        matched += 1
        enriched.append(
            unit.copy(
                ground_floor_area=record.ground,
                normal_floor_area=record.normal,
                price_tl=record.price_tl,
                price_usd=record.price_usd,
            )
        )

    logger.debug(f"Enriched {matched}/{len(units)} units from override data")
    return enriched


def _normalize_block(block: str) -> str:
    return str(block).strip().upper()


def _phase_matches(firm: FirmInfo, etap: Optional[str]) -> bool:
    return not etap or str(firm.etap) == str(etap)


def get_firm_info_for_unit(
    firms: List[FirmInfo],
    block: str,
    unit_number: str,
    etap: Optional[str] = None,
) -> Optional[FirmInfo]:
    """
    Find the firm occupying a unit.

    Linear scan, first match wins. Overlapping claims are not resolved here;
    see ``find_overlapping_claims``.

    Args:
        firms: Parsed firm records.
        block: Block letter (compared trimmed and upper-cased).
        unit_number: Unit label, matched exactly against the firm's list.
        etap: Optional phase filter.

    Returns:
        The first matching FirmInfo, or None.
    """
    target_block = _normalize_block(block)
    for firm in firms:
        if _normalize_block(firm.block) != target_block or not _phase_matches(firm, etap):
            continue
        if firm.covers(str(unit_number)):
            return firm
    return None


def get_all_firms_for_unit(
    firms: List[FirmInfo],
    block: str,
    unit_number: str,
    etap: Optional[str] = None,
) -> List[FirmInfo]:
    """Every firm claiming a unit, in source order."""
    target_block = _normalize_block(block)
    return [
        firm for firm in firms
        if _normalize_block(firm.block) == target_block
        and _phase_matches(firm, etap)
        and firm.covers(str(unit_number))
    ]


def get_firms_for_block(
    firms: List[FirmInfo],
    block: str,
    etap: Optional[str] = None,
) -> List[FirmInfo]:
    target_block = _normalize_block(block)
    return [
        firm for firm in firms
        if _normalize_block(firm.block) == target_block and _phase_matches(firm, etap)
    ]


def get_firms_for_phase(firms: List[FirmInfo], etap: str) -> List[FirmInfo]:
    return [firm for firm in firms if str(firm.etap) == str(etap)]


def find_overlapping_claims(
    firms: List[FirmInfo],
) -> Dict[Tuple[str, str, str], List[FirmInfo]]:
    """
    Report units claimed by more than one firm record.

    Returns:
        Mapping of (etap, block, unit_number) to the claiming firms, in
        source order. Only units with two or more claims are included.
    """
    claims = defaultdict(list)
    for firm in firms:
        for number in firm.unit_numbers:
            if number:
                claims[(str(firm.etap), _normalize_block(firm.block), number)].append(firm)
    return {key: claimants for key, claimants in claims.items() if len(claimants) > 1}
