"""
Parsers package for CSV Charts.
This package contains the parser used to turn delimited text files into parsed tables.

Available modules:
- parser_standard: Header + units row + numeric rows parser
- parser_helpers: Tokenizing and numeric conversion helpers
"""

__version__ = "1.0.0"

from .parser_helpers import split_keep_empty, parse_decimal, normalize_column_names, field_at, is_numeric_column
from .parser_standard import StandardParser, split_lines

__all__ = [
    'StandardParser',
    'split_lines',
    'split_keep_empty',
    'parse_decimal',
    'normalize_column_names',
    'field_at',
    'is_numeric_column',
]
