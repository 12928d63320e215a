"""
Exceptions raised by the loading and parsing pipeline.

Both errors are per-file: the loader catches them, logs them and skips the
file, so one bad file never stops the others from loading. A cell that is
not a number is not an error at all; it becomes a gap (None) in its column.
"""


class CsvChartsError(Exception):
    """Base class for every error raised by the data package."""


class ReadFailureError(CsvChartsError, IOError):
    """The file could not be opened, read or decoded as UTF-8."""

    def __init__(self, file_path, reason):
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Cannot read file '{file_path}': {reason}")


class EmptyInputError(CsvChartsError, ValueError):
    """The decoded file contains zero lines."""

    def __init__(self, file_name="fichier"):
        self.file_name = file_name
        super().__init__(f"Empty file: {file_name}")
