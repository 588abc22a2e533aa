"""
Tabular export of payment plans (CSV and Excel).

PDF and Word documents are produced by the presentation layer; this module
only covers the spreadsheet-style outputs.
"""

import io
import logging
from pathlib import Path
from typing import List

import pandas as pd

from msm_floorplan.errors import UnsupportedExportFormat
from msm_floorplan.models import PaymentPlanItem

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["Taksit No", "Tarih", "Tutar", "Para Birimi", "Açıklama"]
SHEET_NAME = "Ödeme Planı"

MEDIA_TYPES = {
    "csv": "text/csv; charset=utf-8",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}
SUPPORTED_FORMATS = tuple(MEDIA_TYPES)


def _check_format(fmt: str) -> str:
    fmt = (fmt or "").lower().lstrip(".")
    if fmt not in SUPPORTED_FORMATS:
        raise UnsupportedExportFormat(
            f"Unsupported export format: {fmt or '(none)'} "
            f"(expected one of {', '.join(SUPPORTED_FORMATS)})"
        )
    return fmt


def export_filename(block: str, unit_number: str, fmt: str) -> str:
    return f"Odeme_Plani_{block}_{unit_number}.{_check_format(fmt)}"


def payment_plan_to_dataframe(
    plan: List[PaymentPlanItem],
    currency: str = "TL",
) -> pd.DataFrame:
    """
    Tabulate a plan with the Turkish column headers used in the exports.

    The down payment row is labelled "Peşinat" instead of 0.
    """
    rows = [
        {
            "Taksit No": "Peşinat" if item.is_down_payment else item.installment_no,
            "Tarih": item.date,
            "Tutar": item.amount,
            "Para Birimi": currency,
            "Açıklama": item.description,
        }
        for item in plan
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def render_payment_plan(
    plan: List[PaymentPlanItem],
    fmt: str,
    currency: str = "TL",
) -> bytes:
    """
    Render a plan as CSV (UTF-8 with BOM, for Excel) or XLSX bytes.

    Raises:
        UnsupportedExportFormat: If ``fmt`` is not csv or xlsx.
    """
    fmt = _check_format(fmt)
    df = payment_plan_to_dataframe(plan, currency)
    if fmt == "csv":
        return df.to_csv(index=False).encode("utf-8-sig")
    buffer = io.BytesIO()
    df.to_excel(buffer, index=False, sheet_name=SHEET_NAME)
    return buffer.getvalue()


def export_payment_plan(
    plan: List[PaymentPlanItem],
    path: str | Path,
    currency: str = "TL",
) -> Path:
    """
    Write a plan to ``path``; the suffix selects CSV or Excel.

    Raises:
        UnsupportedExportFormat: If the suffix is not .csv or .xlsx.
    """
    path = Path(path)
    content = render_payment_plan(plan, path.suffix, currency)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    logger.info(f"Payment plan exported to: {path}")
    return path
