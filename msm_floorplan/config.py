"""
Configuration for the floor-plan data subsystem.

Paths are resolved relative to the project root; every value can be
overridden with an environment variable.
"""

import os
from pathlib import Path

# msm_floorplan -> kök
_PROJECT_ROOT = Path(__file__).resolve().parent.parent

DATA_DIR = Path(os.environ.get("MSM_DATA_DIR", _PROJECT_ROOT / "data"))
RAW_DIR = DATA_DIR / "raw"
PROCESSED_DIR = DATA_DIR / "processed"

# Directory or http(s) base URL holding the CSV exports
SOURCE = os.environ.get("MSM_SOURCE", str(RAW_DIR))

UNIT_DATA_PATH = Path(os.environ.get("MSM_UNIT_DATA", DATA_DIR / "unit_data.json"))
LOCATIONS_PATH = Path(os.environ.get("MSM_LOCATIONS", DATA_DIR / "locations.json"))

FETCH_TIMEOUT = float(os.environ.get("MSM_FETCH_TIMEOUT", "10"))

PHASES = ("1", "2", "3", "4", "5")

# Unit inventory export per phase (etap)
PHASE_SOURCES = {
    "1": "1.etab - 1.etab.csv",
    "2": "2.etab - 2.etab.csv",
    "3": "3.etab - 3.etab.csv",
    "4": "4.etab - 4.etab.csv",
    "5": "5.etab - 5.etab.csv",
}
FIRM_SOURCE = "MSM FİRMA BİLGİLERİ - Sayfa1.csv"
OVERRIDE_SOURCE = "zknk_data.csv"

# Placeholder pricing used until the CRM export carries real prices
PRICE_TL_PER_SQM = 35000
TL_PER_USD = 35
FALLBACK_AREA = 100

# Payment plan terms
DOWN_PAYMENT_RATIO = 0.30
INSTALLMENT_COUNT = 20

# Grid geometry per block; blocks not listed use the default
DEFAULT_GRID = {"columns": 8, "rows": 10, "paired_rows": 9}
BLOCK_GRIDS: dict = {}
UNITS_PER_COLUMN = 6
