"""
Log window implementation for CSV Charts.
"""
from html import escape

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QTextEdit, QCheckBox, QPushButton


class LogWindow(QDialog):
    """
    A window to display log messages with different severity levels:
    DEBUG (0), INFO (1), WARNING (2), ERROR (3)

    Messages may come from loader worker threads; they are queued to the GUI
    thread through message_received.
    """
    # Log levels
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    message_received = Signal(str, int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Journal")
        self.resize(600, 400)

        self.layout = QVBoxLayout(self)
        self.log_view = QTextEdit(self)
        self.log_view.setReadOnly(True)
        self.layout.addWidget(self.log_view)

        control_layout = QHBoxLayout()

        self.debug_checkbox = QCheckBox("Afficher le debug", self)
        self.debug_checkbox.setChecked(True)
        self.debug_checkbox.setToolTip("Show detailed debug messages")
        control_layout.addWidget(self.debug_checkbox)

        self.autoscroll_checkbox = QCheckBox("Défilement auto", self)
        self.autoscroll_checkbox.setChecked(True)
        self.autoscroll_checkbox.setToolTip("Automatically scroll to newest messages")
        control_layout.addWidget(self.autoscroll_checkbox)

        clear_button = QPushButton("Effacer", self)
        clear_button.setToolTip("Clear all log messages")
        clear_button.clicked.connect(self.clear_log)
        control_layout.addWidget(clear_button)

        self.layout.addLayout(control_layout)

        self.message_received.connect(self._append_message)

    def add_message(self, message, level=INFO):
        """
        Queue a message for display; safe to call from any thread.

        Args:
            message (str): The message to add.
            level (int): Message level (DEBUG=0, INFO=1, WARNING=2, ERROR=3)
        """
        self.message_received.emit(message, level)

    def _append_message(self, message, level):
        if level == LogWindow.DEBUG and not self.debug_checkbox.isChecked():
            return

        message = escape(message)

        if level == LogWindow.ERROR:
            html = f'<span style="color:#c00000;font-weight:bold;">{message}</span>'
        elif level == LogWindow.WARNING:
            html = f'<span style="color:#b36b00;font-weight:bold;">{message}</span>'
        elif level == LogWindow.INFO:
            html = f'<span style="color:black;">{message}</span>'
        else:  # DEBUG
            html = f'<span style="color:#808080;">{message}</span>'

        self.log_view.append(html)

        if self.autoscroll_checkbox.isChecked():
            scrollbar = self.log_view.verticalScrollBar()
            scrollbar.setValue(scrollbar.maximum())

    def clear_log(self):
        """
        Clears all log messages from the log view.
        """
        self.log_view.clear()
