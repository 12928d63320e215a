"""
UI package for CSV Charts.

This package provides the graphical user interface: the main window with its
file selection controls and the chart cards built from the chart groups.
"""

from .viewer import ChartViewer

from .ui_components.control_panel import setup_control_panel
from .ui_components.chart_card import build_chart_card, series_points

__version__ = "1.0.0"
