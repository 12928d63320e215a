"""
Helper functions for delimited text parsing shared by the parser implementations.
"""

import re
from typing import List, Optional


# Optionally signed decimal literal with optional exponent: 12, -3.5, .5, 4., 1e3 (ASCII digits only)
_DECIMAL_PATTERN = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


def split_keep_empty(line: str, delimiter: str) -> List[str]:
    """
    Split a line on every occurrence of the delimiter, keeping empty fields.

    Leading, consecutive and trailing delimiters all produce empty fields, so
    joining the result with the delimiter gives back the original line. Quotes
    are not interpreted.

    Args:
        line: Raw text line
        delimiter: Single delimiter character

    Returns:
        List of fields
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    return line.split(delimiter)


def normalize_column_names(headers: List[str]) -> List[str]:
    """
    Trim whitespace around each header.

    Args:
        headers: List of column header strings

    Returns:
        List of normalized header strings
    """
    return [header.strip() for header in headers]


def parse_decimal(raw: Optional[str], decimal_separator: str = ',') -> Optional[float]:
    """
    Parse a cell as a decimal number, accepting ',' as decimal separator.

    The cell is trimmed and every decimal separator is replaced by '.' before parsing. Blank
    or non-numeric cells give None (a gap) instead of raising.

    Args:
        raw: Cell content, or None for a cell missing from a short row
        decimal_separator: Character accepted in place of '.'

    Returns:
        The parsed value, or None
    """
    if raw is None:
        return None

    normalized = raw.strip().replace(decimal_separator, '.')
    if not _DECIMAL_PATTERN.fullmatch(normalized):
        return None
    return float(normalized)


def field_at(row: List[str], index: int) -> str:
    """Returns the field at index, or '' when the row is too short."""
    if 0 <= index < len(row):
        return row[index]
    return ''


def is_numeric_column(values: List[Optional[float]]) -> bool:
    """
    Check whether a parsed column holds at least one number.

    Args:
        values: Parsed column values

    Returns:
        True if any value is present, False if the column is all gaps
    """
    return any(value is not None for value in values)
