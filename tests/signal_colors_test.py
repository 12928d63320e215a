#!/usr/bin/env python3
"""
Test script for SignalColors

Tests palette generation and color consistency per series label.
"""
import re
import sys
import unittest
from pathlib import Path

# Add parent directory to import path
parent_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(parent_dir))

from utils.logger import Logger
Logger.log_to_file = False

from utils.signal_colors import SignalColors

HEX_COLOR = re.compile(r"^#[0-9a-f]{6}$")


class SignalColorsTest(unittest.TestCase):

    def setUp(self):
        SignalColors.reset()

    def tearDown(self):
        SignalColors.reset()

    def test_same_name_same_color(self):
        first = SignalColors.get_color_for_name("EGT1 (°C)")
        self.assertEqual(SignalColors.get_color_for_name("EGT1 (°C)"), first)
        self.assertRegex(first, HEX_COLOR)

    def test_distinct_names_distinct_colors(self):
        colors = [SignalColors.get_color_for_name(f"EGT{i}") for i in range(1, 9)]
        self.assertEqual(len(set(colors)), len(colors))

    def test_beyond_palette(self):
        SignalColors.palette_size = 3
        try:
            colors = [SignalColors.get_color_for_name(f"S{i}") for i in range(5)]
        finally:
            SignalColors.palette_size = 30
        self.assertEqual(len(colors), 5)
        for color in colors:
            self.assertRegex(color, HEX_COLOR)


if __name__ == '__main__':
    unittest.main()
