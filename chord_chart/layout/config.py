"""Display-tuning parameters for the paged chord chart.

The thresholds below were tuned by eye for a Hebrew chord site on phones,
tablets and desktops. They are layout heuristics, not correctness rules,
so every one of them can be overridden.

Examples
--------
>>> config = LayoutConfig()
>>> config.column_count(1280, 800)
3
>>> config.column_count(390, 844)
2
>>> LayoutConfig(desktop_min_width=1400).column_count(1280, 800)
2
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DisplayMode = Literal["portrait", "landscape", "desktop"]


@dataclass(frozen=True)
class LayoutConfig:
    """Tunable layout parameters.

    Parameters
    ----------
    line_height_factor : float
        Rendered line height as a multiple of the font size.
    desktop_min_width : float
        Minimum container width for the desktop layout.
    landscape_max_height : float
        Containers at most this tall (and wider than tall) are landscape.
    portrait_columns, landscape_columns, desktop_columns, fallback_columns : int
        Columns per page in each display mode.
    portrait_safety_lines, landscape_safety_lines, desktop_safety_lines : float
        Bottom safety margin, in line heights, per display mode.
    portrait_padding, landscape_padding, desktop_padding : float
        Horizontal padding of one column side, in pixels.
    divider_width : float
        Width of the divider between columns.
    min_measure_width : float
        Lower bound for the off-screen measuring width.
    min_font_scale : float
        Smallest automatic font scale when rows overflow their column.
    font_scale_margin : float
        Extra shrink applied to the computed scale.
    min_font_size, max_font_size, font_size_step : float
        Font size bounds and step, in pixels.
    max_transposition, transposition_step : float
        Transposition bound and step, in tone units.
    """

    line_height_factor: float = 1.8
    desktop_min_width: float = 900
    landscape_max_height: float = 700
    portrait_columns: int = 2
    landscape_columns: int = 3
    desktop_columns: int = 3
    fallback_columns: int = 2
    portrait_safety_lines: float = 1.5
    landscape_safety_lines: float = 2.0
    desktop_safety_lines: float = 2.5
    portrait_padding: float = 4.0
    landscape_padding: float = 1.6
    desktop_padding: float = 8.0
    divider_width: float = 1.0
    min_measure_width: float = 120
    min_font_scale: float = 0.7
    font_scale_margin: float = 0.97
    min_font_size: float = 12
    max_font_size: float = 24
    font_size_step: float = 1
    max_transposition: float = 2.5
    transposition_step: float = 0.5

    def display_mode(self, width: float, height: float) -> DisplayMode | None:
        """Classify a container by its size.

        Returns None for a wide container that is neither landscape nor
        wide enough for the desktop layout.
        """
        if height > width:
            return "portrait"
        if height <= self.landscape_max_height:
            return "landscape"
        if width >= self.desktop_min_width:
            return "desktop"
        return None

    def column_count(self, width: float, height: float) -> int:
        """Number of columns per page for a container size."""
        if width >= self.desktop_min_width and height > self.landscape_max_height:
            return self.desktop_columns
        if height > width:
            return self.portrait_columns
        if height <= self.landscape_max_height:
            return self.landscape_columns
        return self.fallback_columns

    def line_height(self, font_size: float) -> float:
        """Nominal rendered height of one text line."""
        return font_size * self.line_height_factor

    def safety_margin(self, width: float, height: float, font_size: float) -> float:
        """Bottom margin kept free so the last line is never clipped.

        Examples
        --------
        >>> LayoutConfig().safety_margin(400, 800, 10)
        27.0
        """
        mode = self.display_mode(width, height)
        if mode == "portrait":
            lines = self.portrait_safety_lines
        elif mode == "landscape":
            lines = self.landscape_safety_lines
        else:
            lines = self.desktop_safety_lines
        return self.line_height(font_size) * lines

    def available_height(
        self,
        width: float,
        height: float,
        font_size: float,
        padding_top: float = 0.0,
        padding_bottom: float = 0.0,
    ) -> float:
        """Usable column height after padding and safety margin, at least 0."""
        usable = height - padding_top - padding_bottom - self.safety_margin(width, height, font_size)
        return max(0.0, usable)

    def column_padding(self, width: float, height: float) -> float:
        """Horizontal padding of one side of a column."""
        mode = self.display_mode(width, height)
        if mode == "portrait":
            return self.portrait_padding
        if mode == "landscape":
            return self.landscape_padding
        return self.desktop_padding

    def column_width(self, width: float, columns: int) -> int:
        """Whole-pixel width of one column."""
        return int(width // max(1, columns))

    def measure_width(self, width: float, height: float, columns: int) -> float:
        """Width lines are measured at: column width minus padding and divider.

        Examples
        --------
        >>> LayoutConfig().measure_width(1200, 900, 3)
        383.0
        """
        inner = self.column_width(width, columns) - (self.column_padding(width, height) * 2 + self.divider_width)
        return max(self.min_measure_width, inner)

    def font_scale(self, column_width: float, widest_row: float) -> float:
        """Shrink factor that lets the widest row fit its column.

        Examples
        --------
        >>> LayoutConfig().font_scale(300, 250)
        1.0
        >>> round(LayoutConfig().font_scale(300, 400), 4)
        0.7275
        >>> LayoutConfig().font_scale(100, 400)
        0.7
        """
        if widest_row <= column_width or widest_row <= 0:
            return 1.0
        scale = (column_width / widest_row) * self.font_scale_margin
        return max(self.min_font_scale, scale)
