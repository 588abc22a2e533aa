"""
Script to fill placeholder prices into the CRM override export.

Reads the ZK NK spreadsheet (xlsx or csv), computes
price_tl = (ground + normal m²) × TL/m² and price_usd = price_tl / rate for
rows whose "Satış Fiyatı 01" / "Satış Fiyatı 02" cells are empty, and
writes the result as zknk_data.csv.

Usage:
    python scripts/apply_override_pricing.py input.xlsx [output.csv]
"""

import logging
import sys
from pathlib import Path

import pandas as pd

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from msm_floorplan.config import OVERRIDE_SOURCE, RAW_DIR
from msm_floorplan.parsing.values import parse_decimal_comma
from msm_floorplan.pricing import PricingPolicy

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

PRICE_TL_COLUMN = "Satış Fiyatı 01"
PRICE_USD_COLUMN = "Satış Fiyatı 02"
GROUND_COLUMN = "Zemin Kat m²"
NORMAL_COLUMN = "Normal Kat m²"


def _is_blank(value) -> bool:
    return pd.isna(value) or str(value).strip() == ""


def _area(value) -> float:
    if _is_blank(value):
        return 0.0
    return parse_decimal_comma(str(value))


def apply_override_pricing(
    input_path: str | Path,
    output_path: str | Path = RAW_DIR / OVERRIDE_SOURCE,
    pricing: PricingPolicy = None,
) -> pd.DataFrame:
    """
    Fill empty price cells of the override export.

    Args:
        input_path: .xlsx or .csv export of the CRM sheet.
        output_path: Where to write the priced CSV.
        pricing: Pricing policy. Defaults to the configured placeholder.

    Returns:
        The priced DataFrame.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    pricing = pricing or PricingPolicy()

    logger.info("=" * 80)
    logger.info("OVERRIDE PRICING")
    logger.info("=" * 80)
    logger.info(f"Input: {input_path}")

    if input_path.suffix.lower() in (".xlsx", ".xls"):
        df = pd.read_excel(input_path, dtype=str)
    else:
        df = pd.read_csv(input_path, dtype=str, encoding="utf-8-sig")

    missing = [c for c in (GROUND_COLUMN, NORMAL_COLUMN) if c not in df.columns]
    if missing:
        raise ValueError(f"Missing area column(s): {', '.join(missing)}")
    for column in (PRICE_TL_COLUMN, PRICE_USD_COLUMN):
        if column not in df.columns:
            df[column] = ""

    priced = 0
    for index, row in df.iterrows():
        if not (_is_blank(row[PRICE_TL_COLUMN]) or _is_blank(row[PRICE_USD_COLUMN])):
            continue
        area = _area(row[GROUND_COLUMN]) + _area(row[NORMAL_COLUMN])
        price_tl, price_usd = pricing.prices_for_area(area)
        if _is_blank(row[PRICE_TL_COLUMN]):
            df.at[index, PRICE_TL_COLUMN] = str(price_tl)
        if _is_blank(row[PRICE_USD_COLUMN]):
            df.at[index, PRICE_USD_COLUMN] = str(price_usd)
        priced += 1

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False, encoding="utf-8")

    logger.info(f"Rows: {len(df)}, priced: {priced}")
    logger.info(f"Output: {output_path}")
    logger.info("=" * 80)
    return df


if __name__ == "__main__":
    if len(sys.argv) < 2:
        logger.error("Usage: python scripts/apply_override_pricing.py input.xlsx [output.csv]")
        sys.exit(1)

    if len(sys.argv) > 2:
        apply_override_pricing(sys.argv[1], sys.argv[2])
    else:
        apply_override_pricing(sys.argv[1])
