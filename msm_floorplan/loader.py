"""
Data source loader for the floor-plan CSV exports.

Reads the unit inventory, firm and override exports from a local directory
or over HTTP(S). A source that cannot be read is logged and treated as an
empty dataset so callers can render a "no data" state instead of failing.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional
from urllib.parse import quote

import requests

from msm_floorplan.config import (
    FETCH_TIMEOUT,
    FIRM_SOURCE,
    OVERRIDE_SOURCE,
    PHASE_SOURCES,
    SOURCE,
)
from msm_floorplan.models import FirmInfo, OverrideRecord, Unit
from msm_floorplan.parsing.firms import parse_firms_csv
from msm_floorplan.parsing.overrides import parse_override_csv
from msm_floorplan.parsing.units import get_phase_layout, parse_units_csv
from msm_floorplan.pricing import PricingPolicy

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class FloorPlanDataLoader:
    """
    Loads and parses the three CSV sources.

    The source is either a directory or an http(s) base URL; file names come
    from configuration and can be overridden per instance.
    """

    def __init__(
        self,
        source: str | Path = SOURCE,
        phase_sources: Optional[Dict[str, str]] = None,
        firm_source: str = FIRM_SOURCE,
        override_source: str = OVERRIDE_SOURCE,
        timeout: float = FETCH_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the loader.

        Args:
            source: Directory or http(s) base URL holding the exports.
            phase_sources: Phase id -> inventory file name.
            firm_source: File name of the firm export.
            override_source: File name of the override export.
            timeout: HTTP timeout in seconds.
            session: Optional requests session (reused across fetches).
        """
        self.source = str(source)
        self.phase_sources = dict(phase_sources or PHASE_SOURCES)
        self.firm_source = firm_source
        self.override_source = override_source
        self.timeout = timeout
        self.session = session

        if not _is_url(self.source) and not Path(self.source).is_dir():
            logger.warning(f"Source directory not found: {self.source}")

    def _fetch(self, name: str) -> str:
        url = f"{self.source.rstrip('/')}/{quote(name)}"
        getter = self.session.get if self.session is not None else requests.get
        response = getter(url, timeout=self.timeout)
        response.raise_for_status()
        response.encoding = "utf-8"
        return response.text

    def _read_file(self, name: str) -> str:
        return (Path(self.source) / name).read_text(encoding="utf-8")

    def read_text(self, name: str) -> str:
        """
        Read one source file.

        Returns:
            File content without a UTF-8 BOM, or "" if the file could not
            be read.
        """
        try:
            content = self._fetch(name) if _is_url(self.source) else self._read_file(name)
        except (OSError, UnicodeDecodeError, requests.RequestException) as e:
            logger.warning(f"Could not load {name} from {self.source}: {e}")
            return ""
        return content.lstrip("\ufeff")

    def load_units(self, phase: str) -> List[Unit]:
        """Parse the inventory export of ``phase`` (unknown phase raises)."""
        get_phase_layout(phase)
        name = self.phase_sources.get(str(phase))
        if not name:
            logger.warning(f"No inventory source configured for phase {phase}")
            return []
        return parse_units_csv(self.read_text(name), phase)

    def load_firms(self) -> List[FirmInfo]:
        return parse_firms_csv(self.read_text(self.firm_source))

    def load_overrides(
        self,
        pricing: Optional[PricingPolicy] = None,
    ) -> Dict[str, OverrideRecord]:
        return parse_override_csv(self.read_text(self.override_source), pricing)
