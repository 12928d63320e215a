"""
Setup functions for the header bar and the chart list of the ChartViewer.
"""
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QVBoxLayout, QHBoxLayout, QPushButton, QLabel, QScrollArea, QWidget
)

APP_TITLE = "Visualisation graphique de fichiers CSV"
SELECT_FILES_TEXT = "Sélectionner des fichiers"
EMPTY_HINT_TEXT = ("Importez un ou plusieurs fichiers (même sans extension CSV) "
                   "pour afficher les graphiques.")


def loaded_count_text(count):
    """Status text next to the select button, empty when nothing is loaded."""
    if count <= 0:
        return ""
    return f"{count} fichier(s) chargé(s)"


def setup_control_panel(viewer):
    """Sets up the title, the button row and the scrollable chart list."""
    layout = QVBoxLayout(viewer.central_widget)
    layout.setContentsMargins(16, 16, 16, 16)

    title = QLabel(APP_TITLE)
    title.setStyleSheet("font-size: 22px; font-weight: bold;")
    layout.addWidget(title)
    layout.addSpacing(12)

    setup_button_section(viewer, layout)
    layout.addSpacing(16)

    viewer.empty_hint_btn = QPushButton(EMPTY_HINT_TEXT)
    viewer.empty_hint_btn.setFlat(True)
    viewer.empty_hint_btn.setStyleSheet("text-align: left; padding: 6px; border: 1px solid #aaa; border-radius: 8px;")
    viewer.empty_hint_btn.clicked.connect(lambda: viewer.load_data())
    layout.addWidget(viewer.empty_hint_btn)

    viewer.scroll = QScrollArea()
    viewer.scroll.setWidgetResizable(True)
    viewer.scroll_content = QWidget()
    viewer.scroll.setWidget(viewer.scroll_content)
    viewer.scroll_layout = QVBoxLayout(viewer.scroll_content)
    viewer.scroll_layout.setAlignment(Qt.AlignTop)
    viewer.scroll.setVisible(False)
    layout.addWidget(viewer.scroll, 1)


def setup_button_section(viewer, layout):
    """Sets up the file selection button, the loaded-files counter and the log toggle."""
    button_layout = QHBoxLayout()

    load_btn = QPushButton(SELECT_FILES_TEXT)
    load_btn.clicked.connect(lambda: viewer.load_data())
    load_btn.setToolTip("Open file dialog to select and load one or more files")
    button_layout.addWidget(load_btn)
    button_layout.addSpacing(12)

    viewer.count_label = QLabel(loaded_count_text(0))
    button_layout.addWidget(viewer.count_label)
    button_layout.addStretch(1)

    viewer.toggle_log_btn = QPushButton("Journal")
    viewer.toggle_log_btn.setCheckable(True)
    viewer.toggle_log_btn.toggled.connect(viewer.toggle_log_window)
    viewer.toggle_log_btn.setToolTip("Show or hide the log window")
    button_layout.addWidget(viewer.toggle_log_btn)

    layout.addLayout(button_layout)
