"""
Module with predefined colors for chart series.
Provides a set of colors that stay distinguishable when several series share one chart.
"""
from distinctipy import get_colors
import numpy as np

from utils.logger import Logger


class SignalColors:
    """
    Palette of visually distinct series colors.

    A series keeps the same color for its whole lifetime, keyed by its label,
    so a column drawn in several files keeps one color across their charts.
    """
    _color_map = {}
    _palette = []
    _used_colors = []
    _next_index = 0
    _initialized = False
    _fallback_color = "#FF3300"
    palette_size = 30

    @classmethod
    def initialize(cls):
        """
        Builds the base palette of distinct colors, once.
        """
        if cls._initialized:
            Logger.log_message_static("SignalColors already initialized", Logger.DEBUG)
            return

        Logger.log_message_static(f"Initializing base palette with {cls.palette_size} colors", Logger.INFO)
        # Light background: exclude near-white candidates
        base_colors = get_colors(cls.palette_size, exclude_colors=[(1.0, 1.0, 1.0)])
        for color in base_colors:
            cls._palette.append(cls._rgb_to_hex(color))
            cls._used_colors.append(tuple(color))
        cls._initialized = True

    @classmethod
    def get_color_for_name(cls, name: str) -> str:
        """
        Returns a consistent color for the given series label.
        Unknown labels take the next unused palette entry, then freshly generated colors.
        """
        if name in cls._color_map:
            return cls._color_map[name]

        cls.initialize()
        try:
            if cls._next_index < len(cls._palette):
                hex_color = cls._palette[cls._next_index]
                cls._next_index += 1
            else:
                new_color = cls._generate_distinct_color()
                cls._used_colors.append(new_color)
                hex_color = cls._rgb_to_hex(new_color)
            cls._color_map[name] = hex_color
            Logger.log_message_static(f"Color assigned to '{name}': {hex_color}", Logger.DEBUG)
            return hex_color
        except Exception as e:
            Logger.log_message_static(f"Color assignment failed for '{name}': {e}", Logger.ERROR)
            return cls._fallback_color

    @classmethod
    def reset(cls):
        """Forgets every assigned color and the generated palette."""
        cls._color_map = {}
        cls._palette = []
        cls._used_colors = []
        cls._next_index = 0
        cls._initialized = False

    @staticmethod
    def _rgb_to_hex(rgb) -> str:
        return '#{:02x}{:02x}{:02x}'.format(
            int(rgb[0] * 255),
            int(rgb[1] * 255),
            int(rgb[2] * 255)
        )

    @classmethod
    def _generate_distinct_color(cls) -> tuple:
        """
        Generate a color maximally distinct from _used_colors, rejecting too-light
        candidates (unreadable on a white chart background).
        """
        for attempt in range(5):
            candidates = np.random.rand(1000, 3)

            # Rec. 709 luminance
            luminance = candidates @ np.array([0.2126, 0.7152, 0.0722])
            candidates = candidates[luminance <= 0.8]

            if len(candidates) == 0:
                Logger.log_message_static("All candidates filtered out (too light), retrying...", Logger.WARNING)
                continue

            used = np.array(cls._used_colors)
            if len(used) == 0:
                return tuple(candidates[0])

            dists = np.min(np.linalg.norm(candidates[:, None, :] - used[None, :, :], axis=2), axis=1)
            return tuple(candidates[np.argmax(dists)])

        Logger.log_message_static("Failed to find suitable color after filtering, returning fallback", Logger.ERROR)
        return (1.0, 0.2, 0.0)
