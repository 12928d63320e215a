"""
Data Package for CSV Charts

This package provides the loading, parsing and grouping pipeline that turns
delimited text files into chart-ready data. Core components include:

1. Data Loading
   - Multi-file selection and reading
   - Display name resolution
   - Per-file error isolation

2. Parsing
   - Delimiter detection on the header line
   - Optional units row
   - Numeric conversion with ',' or '.' decimal separator, gaps for anything else

3. Grouping
   - Fixed groups of related engine columns
   - One chart per remaining column
"""

from .errors import CsvChartsError, ReadFailureError, EmptyInputError
from .models import ParsedTable, Series, ChartGroup, LoadedFile
from .csv_dialect import ParseOptions, detect_delimiter
from .grouper import CHART_GROUPS, build_groups
from .loader import load_file, load_multiple_files, resolve_display_name, select_files

__all__ = [
    # Errors
    'CsvChartsError',
    'ReadFailureError',
    'EmptyInputError',

    # Data model
    'ParsedTable',
    'Series',
    'ChartGroup',
    'LoadedFile',

    # Parsing
    'ParseOptions',
    'detect_delimiter',

    # Grouping
    'CHART_GROUPS',
    'build_groups',

    # Loader functions
    'load_file',
    'load_multiple_files',
    'resolve_display_name',
    'select_files',
]
