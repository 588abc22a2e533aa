"""
Lenient value parsing for spreadsheet-exported text.

Numbers are read from the leading numeric prefix of a field ("120 m²" ->
120.0) and anything unreadable becomes 0 instead of failing the row.
"""

import re
from typing import Optional

_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_float(value: Optional[str], default: float = 0.0) -> float:
    """Parse the leading number of ``value``; ``default`` when there is none."""
    if value is None:
        return default
    match = _LEADING_FLOAT.match(str(value))
    if not match:
        return default
    return float(match.group(1))


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``value``; None when there is none."""
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_decimal_comma(value: Optional[str], default: float = 0.0) -> float:
    """
    Parse a number written with the European decimal convention.

    "12,5" -> 12.5 and "1.234,5" -> 1234.5. Values without a comma are read
    as-is.
    """
    if value is None:
        return default
    text = str(value).strip()
    if "," in text:
        # dots are thousands separators once a decimal comma is present
        text = text.replace(".", "").replace(",", ".", 1)
    return parse_float(text, default)


def turkish_casefold(text: str) -> str:
    """Lower-case text with Turkish dotted/dotless I rules ("SATILDI" -> "satıldı")."""
    return text.replace("İ", "i").replace("I", "ı").lower()
