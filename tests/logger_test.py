#!/usr/bin/env python3
"""
Test script for the Logger singleton
"""
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

# Add parent directory to import path
parent_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(parent_dir))

from utils.logger import Logger
Logger.log_to_file = False


class LoggerTest(unittest.TestCase):

    def setUp(self):
        self._saved = (Logger.debug_filter, Logger.display_thread_name, Logger.log_to_file, Logger.logs_dir)
        Logger.reset_instance()

    def tearDown(self):
        Logger.debug_filter, Logger.display_thread_name, Logger.log_to_file, Logger.logs_dir = self._saved
        Logger.reset_instance()

    def test_format_message(self):
        Logger.display_thread_name = False
        line = Logger.format_message("Parser-Standard: done", Logger.WARNING)
        self.assertRegex(line, r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] WARNING: Parser-Standard: done$")

    def test_thread_name_suffix(self):
        Logger.display_thread_name = True
        line = Logger.format_message("hello", Logger.INFO)
        self.assertTrue(line.endswith("; Thread: MainThread"))

    def test_singleton(self):
        self.assertIs(Logger.get_instance(), Logger.get_instance())

    def test_debug_filter(self):
        Logger.debug_filter = 0
        window = mock.MagicMock()
        logger = Logger.get_instance()
        logger.set_log_window(window)

        with mock.patch('builtins.print'):
            logger.log_message("detail", Logger.DEBUG, logLevel=3)
            logger.log_message("kept", Logger.DEBUG, logLevel=0)
            logger.log_message("info", Logger.INFO)

        messages = [c.args[0] for c in window.add_message.call_args_list]
        self.assertEqual(len(messages), 2)
        self.assertIn("DEBUG: kept", messages[0])
        self.assertEqual(window.add_message.call_args_list[1].args[1], Logger.INFO)

    def test_session_log_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            Logger.log_to_file = True
            Logger.logs_dir = os.path.join(tmp_dir, "_logs")
            Logger.display_thread_name = False

            with mock.patch('builtins.print'):
                Logger.log_message_static("Data-Loader: written", Logger.ERROR)

            files = os.listdir(Logger.logs_dir)
            self.assertEqual(len(files), 1)
            self.assertTrue(files[0].startswith("Session_"))
            with open(os.path.join(Logger.logs_dir, files[0]), encoding="utf-8") as f:
                self.assertIn("ERROR: Data-Loader: written", f.read())
            Logger.reset_instance()


if __name__ == '__main__':
    unittest.main()
