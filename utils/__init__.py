"""
Utilities package for CSV Charts.

This package provides the logging singleton and the series color palette
used throughout the application.
"""

from .logger import Logger
from .signal_colors import SignalColors

__version__ = "1.0.0"

__all__ = [
    'Logger',
    'SignalColors',

    '__version__'
]
