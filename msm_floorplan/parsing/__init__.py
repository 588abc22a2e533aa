"""
Parsing module for msm_floorplan.

Decodes the unit inventory, firm and override CSV exports.
"""

from msm_floorplan.parsing.csv_line import decode_csv_line, iter_data_rows
from msm_floorplan.parsing.firms import parse_firms_csv
from msm_floorplan.parsing.overrides import override_key, parse_override_csv
from msm_floorplan.parsing.units import (
    PHASE_LAYOUTS,
    PhaseLayout,
    classify_status,
    get_phase_layout,
    parse_units_csv,
)

__all__ = [
    "decode_csv_line",
    "iter_data_rows",
    "parse_units_csv",
    "classify_status",
    "get_phase_layout",
    "PhaseLayout",
    "PHASE_LAYOUTS",
    "parse_firms_csv",
    "parse_override_csv",
    "override_key",
]
