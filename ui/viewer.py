"""
Main window of CSV Charts: file selection and the list of chart cards.
"""
from pyqtgraph import setConfigOption

from PySide6.QtWidgets import QMainWindow, QWidget, QStatusBar

from .ui_components.control_panel import APP_TITLE, setup_control_panel
from .ui_components.log_window import LogWindow
from utils.logger import Logger
from utils.signal_colors import SignalColors


class ChartViewer(QMainWindow):
    """
    Main application window.

    Attributes:
        loaded_files (list[LoadedFile]): Files currently displayed, in selection order.
        loader_workers (int): Thread pool size used to parse several files.
        log_window (LogWindow): Window receiving the Logger output.
    """

    # Class-level constants for log levels
    DEBUG = Logger.DEBUG
    INFO = Logger.INFO
    WARNING = Logger.WARNING
    ERROR = Logger.ERROR

    def __init__(self, loader_workers=4):
        super().__init__()

        self.logger = Logger.get_instance()
        SignalColors.initialize()

        setConfigOption('useOpenGL', False)
        setConfigOption('antialias', True)
        setConfigOption('foreground', 'k')

        self.setWindowTitle(APP_TITLE)
        self.resize(1000, 800)

        self.log_window = LogWindow(self)
        self.logger.set_log_window(self.log_window)
        self.log_window.finished.connect(lambda _: self.toggle_log_btn.setChecked(False))

        self.setAcceptDrops(True)

        self.loaded_files = []
        self.loader_workers = loader_workers

        self.log_message("Viewer: Application starting", Logger.INFO)

        self.init_ui()

    def init_ui(self):
        """
        Initializes the UI: title, button row, hint chip and scrollable chart list.
        """
        self.log_message("Viewer: Initializing main UI components", Logger.DEBUG)

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        setup_control_panel(self)

        self.setStatusBar(QStatusBar())

    def toggle_log_window(self, visible):
        """
        Shows or hides the log window.
        """
        if visible:
            self.log_window.show()
        else:
            self.log_window.hide()

    def log_message(self, message, level=Logger.INFO):
        """
        Logs a message using the Logger class.
        """
        self.logger.log_message(message, level)

    def closeEvent(self, event):
        self.logger.set_log_window(None)
        super().closeEvent(event)

    from .ui_components.file_operations import (
        load_data, load_files, show_loaded_files, clear_charts, drag_enter_event, drop_event
    )

    dragEnterEvent = drag_enter_event
    dropEvent = drop_event
