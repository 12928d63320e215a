"""
Data loader module for handling file operations.

This module turns user-selected files into chart-ready data:
- File selection through a multi-file dialog (any extension is accepted)
- Reading each file fully into memory and decoding it as UTF-8
- Display name resolution (metadata name, then path fragment, then placeholder)
- Parsing with StandardParser and grouping with build_groups
- Per-file error isolation: a file that cannot be read or is empty is skipped

Files are independent of each other, so they may be parsed in a thread pool;
results always come back in selection order.

Functions:
    select_files: Open the file dialog and return the chosen paths
    resolve_display_name: Pick the name shown for a file
    read_file_text: Read and decode one file
    load_file: Read, parse and group one file
    load_multiple_files: Load several files, skipping the ones that fail
"""

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Sequence

from PySide6.QtWidgets import QFileDialog

from data.errors import CsvChartsError, ReadFailureError
from data.grouper import build_groups
from data.models import LoadedFile
from data.parsers.parser_standard import StandardParser
from utils.logger import Logger

DEFAULT_FILE_NAME = "fichier"
FILE_DIALOG_FILTER = "Tous les fichiers (*);;Fichiers texte (*.csv *.txt *.dat)"


def select_files(parent=None) -> List[str]:
    """
    Opens a dialog to select one or more files.

    Returns:
        list[str]: Selected paths, empty if the user cancelled.
    """
    Logger.log_message_static("Data-Loader: Opening file dialog to select files.", Logger.DEBUG)
    file_paths, _ = QFileDialog.getOpenFileNames(parent, "Sélectionner des fichiers", "", FILE_DIALOG_FILTER)
    if not file_paths:
        Logger.log_message_static("Data-Loader: No files selected. Operation canceled.", Logger.DEBUG)
        return []
    return list(file_paths)


def _name_from_metadata(path: str, metadata_name: Optional[str]) -> Optional[str]:
    return metadata_name or None


def _name_from_path(path: str, metadata_name: Optional[str]) -> Optional[str]:
    if not path:
        return None
    fragment = path.replace(os.sep, '/').rstrip('/').rsplit('/', 1)[-1]
    return fragment or None


NAME_LOOKUPS: Sequence[Callable[[str, Optional[str]], Optional[str]]] = (
    _name_from_metadata,
    _name_from_path,
)


def resolve_display_name(path: str, metadata_name: Optional[str] = None) -> str:
    """
    Returns the name shown for a file: the first lookup that succeeds wins.

    Args:
        path (str): Path of the file
        metadata_name (str, optional): Name reported by the file source, if any

    Returns:
        str: Display name, DEFAULT_FILE_NAME if no lookup gives one.
    """
    for lookup in NAME_LOOKUPS:
        try:
            name = lookup(path, metadata_name)
        except (TypeError, ValueError, AttributeError) as e:
            Logger.log_message_static(f"Data-Loader: Name lookup {lookup.__name__} failed: {e}", Logger.DEBUG)
            continue
        if name:
            return name
    return DEFAULT_FILE_NAME


def read_file_text(path: str, encoding: str = "utf-8-sig") -> str:
    """
    Reads a whole file and decodes it.

    Raises:
        ReadFailureError: If the file cannot be opened, read or decoded.
    """
    try:
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        raise ReadFailureError(path, e.strerror or str(e)) from e

    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise ReadFailureError(path, f"not valid {encoding.upper()} text ({e.reason})") from e


def load_file(path: str, display_name: Optional[str] = None, parser: Optional[StandardParser] = None) -> LoadedFile:
    """
    Reads, parses and groups one file.

    Args:
        path (str): Path of the file
        display_name (str, optional): Name reported by the file source
        parser (StandardParser, optional): Parser to use, a default one otherwise

    Returns:
        LoadedFile: The parsed table and its chart groups.

    Raises:
        ReadFailureError: If the file cannot be read.
        EmptyInputError: If the file has no line.
    """
    parser = parser or StandardParser()
    name = resolve_display_name(path, display_name)

    Logger.log_message_static(f"Data-Loader: Loading file '{name}'", Logger.DEBUG)
    text = read_file_text(path, parser.options.encoding)
    table = parser.parse_text(text, file_name=name)
    groups = build_groups(table)
    return LoadedFile(table=table, groups=groups)


def _load_or_none(path: str, display_name: Optional[str], parser: StandardParser) -> Optional[LoadedFile]:
    try:
        loaded = load_file(path, display_name, parser)
    except CsvChartsError as e:
        Logger.log_message_static(f"Data-Loader: Skipping file '{os.path.basename(path)}': {e}", Logger.WARNING)
        return None
    except Exception as e:
        Logger.log_message_static(
            f"Data-Loader: Failed to load file '{os.path.basename(path)}'. Exception: {e}", Logger.ERROR)
        return None

    Logger.log_message_static(
        f"Data-Loader: Successfully loaded file '{loaded.table.file_name}' with "
        f"{len(loaded.table.headers)} columns and {len(loaded.groups)} groups.", Logger.DEBUG)
    return loaded


def load_multiple_files(file_paths: Optional[Iterable[str]] = None, display_names: Optional[Sequence[str]] = None,
                        max_workers: Optional[int] = None, parent=None) -> List[LoadedFile]:
    """
    Loads several files independently and keeps the ones that succeed.

    Args:
        file_paths (Iterable[str], optional): Paths to load. If None, a file dialog is shown.
        display_names (Sequence[str], optional): Name per path from the file source, same order.
        max_workers (int, optional): Parse in a thread pool of this size when greater than 1.
        parent: Parent widget of the file dialog.

    Returns:
        list[LoadedFile]: One entry per successfully loaded file, in selection order.
    """
    if file_paths is None:
        file_paths = select_files(parent)
    file_paths = list(file_paths)
    if not file_paths:
        return []

    if display_names is None:
        display_names = [None] * len(file_paths)
    names = list(display_names) + [None] * (len(file_paths) - len(display_names))

    parser = StandardParser()
    if max_workers and max_workers > 1 and len(file_paths) > 1:
        Logger.log_message_static(
            f"Data-Loader: Parsing {len(file_paths)} files with {max_workers} workers", Logger.DEBUG)
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="csv-loader") as pool:
            # map() yields results in submission order
            results = list(pool.map(_load_or_none, file_paths, names, [parser] * len(file_paths)))
    else:
        results = [_load_or_none(path, name, parser) for path, name in zip(file_paths, names)]

    loaded = [result for result in results if result is not None]
    Logger.log_message_static(
        f"Data-Loader: Successfully loaded {len(loaded)} of {len(file_paths)} files.", Logger.INFO)
    return loaded
