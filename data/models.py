"""
Data structures shared by the parser, the grouper and the UI.

A ParsedTable is built once per file and never modified afterwards. ChartGroup
and Series values are derived from it on demand and only live as long as the
charts that display them.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple

import numpy as np
import pandas as pd


class Series(NamedTuple):
    """One curve: its legend label and its values aligned on the row index."""
    label: str
    values: Tuple[Optional[float], ...]


class ChartGroup(NamedTuple):
    """A bundle of series drawn together on one chart."""
    title: str
    unit: Optional[str]
    series: Tuple[Series, ...]

    @property
    def has_data(self) -> bool:
        return len(self.series) > 0


class ParsedTable:
    """
    Immutable result of parsing one delimited text file.

    Attributes:
        file_name (str): Display name of the source file
        headers (tuple): Column names in file order, trimmed, duplicates kept
        units (Mapping[str, str]): Header -> unit string ('' when none)
        columns (Mapping[str, tuple]): Header -> one Optional[float] per data row
        display_title (str): Load timestamp and file name, shown above the charts
        delimiter (str): Delimiter detected on the header line
    """

    __slots__ = ('_file_name', '_headers', '_units', '_columns', '_display_title', '_delimiter')

    def __init__(self, file_name: str, headers: Sequence[str], units: Dict[str, str],
                 columns: Dict[str, Sequence[Optional[float]]], display_title: str, delimiter: str = ';'):
        self._file_name = file_name
        self._headers = tuple(headers)
        self._units = MappingProxyType(dict(units))
        self._columns = MappingProxyType({name: tuple(values) for name, values in columns.items()})
        self._display_title = display_title
        self._delimiter = delimiter

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def headers(self) -> Tuple[str, ...]:
        return self._headers

    @property
    def units(self) -> Mapping[str, str]:
        return self._units

    @property
    def columns(self) -> Mapping[str, Tuple[Optional[float], ...]]:
        return self._columns

    @property
    def display_title(self) -> str:
        return self._display_title

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def row_count(self) -> int:
        """Number of data rows (lines after the header and units rows)."""
        for values in self._columns.values():
            return len(values)
        return 0

    def column_as_array(self, name: str) -> np.ndarray:
        """
        Returns a column as a float64 array with NaN in place of gaps.

        Raises:
            KeyError: If the table has no such column
        """
        values = self._columns[name]
        return np.array([np.nan if v is None else v for v in values], dtype=np.float64)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Returns the numeric columns as a DataFrame indexed by row number.
        Gaps become NaN; units are kept in DataFrame.attrs['units'].
        """
        df = pd.DataFrame(
            {name: self.column_as_array(name) for name in self._columns},
            index=pd.RangeIndex(self.row_count, name="row"),
        )
        df.attrs['units'] = dict(self._units)
        df.attrs['file_name'] = self._file_name
        return df

    def __repr__(self):
        return (f"ParsedTable(file_name={self._file_name!r}, headers={list(self._headers)!r}, "
                f"rows={self.row_count})")


class LoadedFile(NamedTuple):
    """A successfully parsed file together with the chart groups built from it."""
    table: ParsedTable
    groups: List[ChartGroup]
