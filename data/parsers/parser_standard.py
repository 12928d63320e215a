"""
Standard delimited-text parser implementation.

This parser reads the layout produced by the engine data loggers:
- line 1: column names, separated by one of ; , : TAB |
- line 2 (optional): the unit of each column
- following lines: one numeric sample per column, '.' or ',' as decimal separator

Any cell that is not a number becomes a gap (None) in its column. Only an
input without a single line is rejected.
"""

import re
from datetime import datetime
from typing import Dict, List, Optional

from data.csv_dialect import ParseOptions, detect_delimiter
from data.errors import EmptyInputError
from data.models import ParsedTable
from data.parsers.parser_helpers import (
    field_at, is_numeric_column, normalize_column_names, parse_decimal, split_keep_empty
)
from utils.logger import Logger

_LINE_BREAK = re.compile(r'\r\n|\r|\n')


def split_lines(text: str) -> List[str]:
    """
    Split text on \\n, \\r\\n and \\r line endings.

    A final line ending does not start an extra empty line, so empty text has
    zero lines and a text made of a single line ending has one empty line.
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == '':
        lines.pop()
    return lines


class StandardParser:
    """
    Parser for header + optional units row + numeric rows files.
    """

    def __init__(self, options: Optional[ParseOptions] = None):
        """Initialize the standard parser."""
        self.options = options or ParseOptions()

    def parse_text(self, text: str, file_name: str = "fichier", loaded_at: Optional[datetime] = None) -> ParsedTable:
        """
        Parse the full decoded text of one file.

        Args:
            text: File content
            file_name: Display name of the file
            loaded_at: Load time shown in the title, defaults to now

        Returns:
            ParsedTable with headers, units and numeric columns

        Raises:
            EmptyInputError: If the text has no line at all
        """
        lines = split_lines(text)
        if not lines:
            Logger.log_message_static(f"Parser-Standard: File '{file_name}' is empty", Logger.WARNING)
            raise EmptyInputError(file_name)

        delimiter = detect_delimiter(lines[0], self.options.candidate_delimiters, self.options.default_delimiter)

        headers = normalize_column_names(split_keep_empty(lines[0], delimiter))
        units = normalize_column_names(split_keep_empty(lines[1], delimiter)) if len(lines) > 1 else []

        # Header line ending with the delimiter: no final column
        if headers and not headers[-1]:
            headers.pop()
            if len(units) >= len(headers) + 1:
                units.pop()
            Logger.log_message_static("Parser-Standard: Dropped trailing empty header", Logger.DEBUG)

        unit_map = {header: field_at(units, idx) for idx, header in enumerate(headers)}

        rows = [split_keep_empty(line, delimiter) for line in lines[2:]]
        Logger.log_message_static(
            f"Parser-Standard: '{file_name}' has {len(headers)} columns and {len(rows)} data rows", Logger.DEBUG)

        columns: Dict[str, List[Optional[float]]] = {}
        for idx, header in enumerate(headers):
            columns[header] = [parse_decimal(field_at(row, idx), self.options.decimal_separator) for row in rows]

        empty_columns = [header for header, values in columns.items() if not is_numeric_column(values)]
        if rows and empty_columns:
            Logger.log_message_static(
                f"Parser-Standard: Columns without any numeric value: {', '.join(empty_columns)}", Logger.DEBUG)

        table = ParsedTable(
            file_name=file_name,
            headers=headers,
            units=unit_map,
            columns=columns,
            display_title=self.build_display_title(file_name, loaded_at),
            delimiter=delimiter,
        )
        Logger.log_message_static(f"Parser-Standard: Successfully parsed {len(headers)} columns from '{file_name}'",
                                  Logger.INFO)
        return table

    def build_display_title(self, file_name: str, loaded_at: Optional[datetime] = None) -> str:
        """Label shown above the charts of one file, e.g. 'Chargé pour affichage le 24_05_17_14h03 - run.csv'."""
        if loaded_at is None:
            loaded_at = datetime.now()
        timestamp = loaded_at.strftime(self.options.title_time_format)
        return self.options.title_template.format(timestamp=timestamp, file_name=file_name)
