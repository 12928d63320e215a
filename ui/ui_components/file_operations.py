"""
File loading, drag-drop and chart list operations for the ChartViewer.
"""
import os

from PySide6.QtWidgets import QFrame, QLabel

from data.loader import load_multiple_files, select_files
from .chart_card import build_chart_card
from .control_panel import loaded_count_text


def load_data(self):
    """
    Asks the user for files and displays the ones that load.
    Replaces whatever was displayed before; cancelling keeps it.
    """
    file_paths = select_files(self)
    if not file_paths:
        self.log_message("No file selected", self.DEBUG)
        return
    self.load_files(file_paths)


def load_files(self, file_paths):
    """
    Loads the given files and shows their charts.

    Args:
        file_paths (list[str]): Paths in selection order
    """
    self.log_message(f"Loading {len(file_paths)} file(s)...", self.INFO)
    loaded = load_multiple_files(file_paths, max_workers=self.loader_workers)

    if not loaded:
        self.log_message("No data was loaded - every selected file failed", self.WARNING)

    self.loaded_files = loaded
    self.show_loaded_files()


def show_loaded_files(self):
    """
    Rebuilds the chart list: for each file its title, one card per group, then a separator.
    """
    self.clear_charts()

    self.count_label.setText(loaded_count_text(len(self.loaded_files)))
    self.empty_hint_btn.setVisible(not self.loaded_files)
    self.scroll.setVisible(bool(self.loaded_files))

    for loaded in self.loaded_files:
        title = QLabel(loaded.table.display_title)
        title.setStyleSheet("font-size: 18px; font-weight: 600;")
        self.scroll_layout.addWidget(title)

        for group in loaded.groups:
            self.scroll_layout.addWidget(build_chart_card(group))

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setFrameShadow(QFrame.Sunken)
        self.scroll_layout.addWidget(separator)

        self.log_message(f"Displayed {len(loaded.groups)} charts for '{loaded.table.file_name}'", self.DEBUG)


def clear_charts(self):
    """
    Removes every widget from the chart list.
    """
    for i in reversed(range(self.scroll_layout.count())):
        widget = self.scroll_layout.itemAt(i).widget()
        if widget:
            widget.setParent(None)
            widget.deleteLater()


def drag_enter_event(self, event):
    """
    Accept drag events if they contain files.
    """
    if event.mimeData().hasUrls():
        self.log_message(f"File drag detected with {len(event.mimeData().urls())} items", self.DEBUG)
        event.accept()
    else:
        event.ignore()


def drop_event(self, event):
    """
    Handle file drop events and load the dropped files.
    """
    files = [url.toLocalFile() for url in event.mimeData().urls() if url.isLocalFile()]
    if files:
        self.log_message(f"Files dropped: {[os.path.basename(f) for f in files]}", self.INFO)
        self.load_files(files)
