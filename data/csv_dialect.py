"""
CSV Dialect Module

This module holds the format parameters used when reading delimited text files
and the delimiter detection applied to each file's header line:
- Candidate field delimiters (semicolon, comma, colon, tab, pipe)
- Default delimiter when the header line contains none of them
- File encoding
- Format of the "loaded at" label shown above each file's charts

Detection is intentionally naive: the single delimiter found on the first line
is used for the whole file, and quoted fields are not recognised.

Classes:
    ParseOptions: Container for parsing configuration

Functions:
    detect_delimiter: Picks the most frequent candidate delimiter in a line
"""

from utils.logger import Logger


class ParseOptions:
    """
    Stores parsing configuration options.

    Attributes:
        candidate_delimiters (tuple): Delimiters tried on the header line, in tie-break order
        default_delimiter (str): Delimiter used when the header line contains no candidate
        encoding (str): File encoding
        decimal_separator (str): Decimal separator accepted besides '.'
        title_time_format (str): strftime format of the load timestamp
        title_template (str): Template of the label shown above the charts of one file
    """

    CANDIDATE_DELIMITERS = (';', ',', ':', '\t', '|')
    DEFAULT_DELIMITER = ';'

    def __init__(self):
        self.candidate_delimiters = ParseOptions.CANDIDATE_DELIMITERS
        self.default_delimiter = ParseOptions.DEFAULT_DELIMITER
        # UTF-8, a leading byte order mark is dropped
        self.encoding = "utf-8-sig"
        self.decimal_separator = ','
        self.title_time_format = "%y_%m_%d_%Hh%M"
        self.title_template = "Chargé pour affichage le {timestamp} - {file_name}"


def detect_delimiter(sample_line, candidates=None, default=None):
    """
    Chooses the delimiter occurring most often in the sample line.

    Ties go to the candidate listed first. A line with none of the candidates
    yields the default delimiter.

    Args:
        sample_line (str): Usually the header line of the file
        candidates (Sequence[str]): Candidate delimiters, in priority order
        default (str): Returned when no candidate occurs in the line

    Returns:
        str: The detected delimiter character
    """
    if candidates is None:
        candidates = ParseOptions.CANDIDATE_DELIMITERS
    if default is None:
        default = ParseOptions.DEFAULT_DELIMITER

    best_delimiter = default
    best_count = 0
    for delimiter in candidates:
        count = sample_line.count(delimiter)
        # Strict comparison keeps the earliest candidate on ties
        if count > best_count:
            best_delimiter = delimiter
            best_count = count

    if best_count == 0:
        Logger.log_message_static(f"CSV-Dialect: No candidate delimiter found, defaulting to {default!r}",
                                  Logger.DEBUG)
    else:
        Logger.log_message_static(
            f"CSV-Dialect: Detected delimiter {best_delimiter!r} ({best_count} occurrences)", Logger.DEBUG)
    return best_delimiter
