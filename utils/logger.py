import os
import datetime
import threading


class Logger:
    # Log levels
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    LEVEL_NAMES = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR"
    }

    # Filter for log detail level (0-5, higher = more detail)
    debug_filter = 0
    # Whether to display thread name in log messages
    display_thread_name = True
    # Session log file settings
    log_to_file = True
    logs_dir = "_logs"

    _instance = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self.log_window = None
        self._log_file_path = None
        self._write_lock = threading.Lock()
        if Logger.log_to_file:
            self._setup_log_file()

    def set_log_window(self, log_window):
        self.log_window = log_window

    def log_message(self, message, level=INFO, logLevel=5):
        """
        Logs a message to the log window, console, and optionally a file.

        Args:
            message (str): The message to log.
            level (int): Message level (DEBUG=0, INFO=1, WARNING=2, ERROR=3)
            logLevel (int): Detail level from 0 (least detailed) to 5 (most detailed)
                            Only DEBUG messages with logLevel <= debug_filter are emitted
        """
        if level == Logger.DEBUG and logLevel > Logger.debug_filter:
            return

        formatted_message = self.format_message(message, level)

        with self._write_lock:
            print(formatted_message)

            if self.log_window:
                self.log_window.add_message(formatted_message, level)

            if self._log_file_path:
                with open(self._log_file_path, "a", encoding="utf-8") as log_file:
                    log_file.write(formatted_message + "\n")

    @classmethod
    def format_message(cls, message, level=INFO):
        """Builds the '[timestamp] LEVEL: message' line, with the thread name if enabled."""
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        level_name = cls.LEVEL_NAMES.get(level, "INFO")

        if cls.display_thread_name:
            thread_name = threading.current_thread().name
            return f"[{timestamp}] {level_name}: {message}; Thread: {thread_name}"
        return f"[{timestamp}] {level_name}: {message}"

    def _setup_log_file(self):
        """Create the logs directory and set up the log file path based on the current date-time."""
        if not os.path.exists(Logger.logs_dir):
            os.makedirs(Logger.logs_dir, exist_ok=True)

        timestamp = datetime.datetime.now().strftime("%Y-%m-%d_%H-%M")
        self._log_file_path = os.path.join(Logger.logs_dir, f"Session_{timestamp}.log")

    @staticmethod
    def log_message_static(message, level=INFO, logLevel=5):
        """
        Static method to log messages globally.
        Can be called from anywhere in the code.

        Args:
            message (str): The message to log.
            level (int): Message level (DEBUG=0, INFO=1, WARNING=2, ERROR=3)
            logLevel (int): Detail level from 0 (least detailed) to 5 (most detailed)
        """
        instance = Logger.get_instance()
        instance.log_message(message, level, logLevel)

    @classmethod
    def get_instance(cls):
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = Logger()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drops the global instance so the next call picks up changed class settings."""
        with cls._instance_lock:
            cls._instance = None
