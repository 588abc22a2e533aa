"""
CSV line decoding for the floor-plan exports.

The exports are simple enough that a one-pass tokenizer is used instead of
the csv module: a double quote toggles quoted mode and a comma inside quotes
belongs to the field. Doubled quotes ("") are not treated as an escaped
quote; the sources never contain them.
"""

from typing import Iterator, List


def decode_csv_line(line: str) -> List[str]:
    """
    Split one CSV line into trimmed field values.

    Args:
        line: A single non-empty line of CSV text.

    Returns:
        Ordered list of fields. The trailing field is always emitted.

    Example:
        >>> decode_csv_line('A,"B, C",D')
        ['A', 'B, C', 'D']
    """
    fields = []
    current = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def iter_data_rows(content: str) -> Iterator[List[str]]:
    """
    Yield decoded rows of a CSV payload, skipping the header and blank lines.
    """
    lines = content.split("\n")
    for line in lines[1:]:
        line = line.strip()
        if not line:
            continue
        yield decode_csv_line(line)
