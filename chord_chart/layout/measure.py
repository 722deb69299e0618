"""Line height measurement.

The hosting UI owns rendering, so the height of a line is obtained
through a caller-supplied measurer. A measurer that fails for one line
must not abort the layout: that line simply counts as zero height.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Protocol

from chord_chart.layout.models import Lyrics, SongLine

logger = logging.getLogger(__name__)


class Measurer(Protocol):
    """Render a line off-screen and return its height in pixels."""

    def __call__(self, line: SongLine, width: float, font_size: float) -> float | None: ...


def measure_line(measurer: Measurer, line: SongLine, width: float, font_size: float) -> float:
    """Measure one line, degrading any failure to 0.

    Examples
    --------
    >>> from chord_chart.layout.models import EmptyLine
    >>> measure_line(lambda line, width, font_size: None, EmptyLine(), 300, 16)
    0.0
    """
    try:
        height = measurer(line, width, font_size)
    except Exception:
        logger.warning("Measuring %r failed; using height 0", line, exc_info=True)
        return 0.0

    if height is None:
        return 0.0
    try:
        value = float(height)
    except (TypeError, ValueError):
        logger.warning("Measurer returned %r for %r; using height 0", height, line)
        return 0.0
    if not math.isfinite(value) or value < 0:
        logger.warning("Measurer returned %r for %r; using height 0", height, line)
        return 0.0
    return value


def measure_lines(
    lines: Sequence[SongLine],
    measurer: Measurer,
    width: float,
    font_size: float,
) -> list[float]:
    """Measure every line of a document at one width and font size.

    Parameters
    ----------
    lines : Sequence[SongLine]
        The document in order.
    measurer : Measurer
        Callable returning the rendered height of a line.
    width : float
        Measuring width in pixels.
    font_size : float
        Font size in pixels.

    Returns
    -------
    list[float]
        One non-negative height per line, in order.
    """
    return [measure_line(measurer, line, width, font_size) for line in lines]


def estimate_height(line: SongLine, width: float, font_size: float, line_height_factor: float = 1.8) -> float:
    """Rough height estimate for hosts without a layout engine.

    Lyric lines with chords take two text rows (chords above text),
    chords-only lines and sections take one, empty lines take one. Long
    lyrics wrap at about ``width / (font_size * 0.55)`` characters.

    Examples
    --------
    >>> from chord_chart.layout.models import Lyrics, ChordPosition
    >>> estimate_height(Lyrics("hello", (ChordPosition("C", 0),)), 300, 10)
    36.0
    """
    row = font_size * line_height_factor
    if not isinstance(line, Lyrics):
        return row

    chars_per_row = max(1, int(width // (font_size * 0.55)))
    rows = max(1, math.ceil(len(line.lyrics) / chars_per_row))
    if line.chords:
        rows *= 2
    return row * rows
