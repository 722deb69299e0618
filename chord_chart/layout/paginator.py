"""Height-based pagination of song lines into balanced columns.

This module partitions an ordered sequence of measured lines into pages
of ``column_count`` columns. A greedy pass fixes the minimum number of
columns and which lines belong to which page; a balance pass then evens
out column heights inside each page without letting any column grow past
the container height.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from chord_chart.layout.models import Column, Page, PageLayout, SongLine

logger = logging.getLogger(__name__)


def sanitize_heights(heights: Sequence[float | None], count: int) -> np.ndarray:
    """Return exactly ``count`` usable line heights.

    Missing entries, None, NaN, infinite and negative values become 0 so
    that a failed measurement never aborts pagination.

    Examples
    --------
    >>> sanitize_heights([10, None, float("nan"), -4], 5).tolist()
    [10.0, 0.0, 0.0, 0.0, 0.0]
    """
    values = [0.0 if h is None else h for h in list(heights)[:count]]
    values.extend([0.0] * (count - len(values)))
    array = np.asarray(values, dtype=float)
    array = np.nan_to_num(array, nan=0.0, posinf=0.0, neginf=0.0)
    return np.clip(array, 0.0, None)


def greedy_breaks(heights: np.ndarray, container_height: float) -> list[int]:
    """Compute column start indices by packing lines greedily.

    A column is closed when adding the next line would exceed the
    container height. A line taller than the container still gets a
    column of its own.

    Parameters
    ----------
    heights : np.ndarray
        Line heights in document order.
    container_height : float
        Maximum column height.

    Returns
    -------
    list[int]
        Index of the first line of every column (empty for no lines).

    Examples
    --------
    >>> greedy_breaks(np.array([50.0] * 5), 120)
    [0, 2, 4]
    """
    starts: list[int] = []
    column_height = 0.0

    for i, height in enumerate(heights):
        if not starts or column_height + height > container_height:
            starts.append(i)
            column_height = 0.0
        column_height += height

    return starts


def columns_needed(heights: np.ndarray, container_height: float) -> int:
    """Minimum number of columns the given lines need, keeping order.

    Examples
    --------
    >>> columns_needed(np.array([50.0, 50.0, 50.0]), 100)
    2
    """
    return len(greedy_breaks(heights, container_height))


def balance_breaks(heights: np.ndarray, container_height: float, columns: int) -> list[int]:
    """Redistribute one page's lines over at most ``columns`` columns.

    Each column aims at ``total / columns``. A line starts the next
    column when it does not fit, or when it would overshoot the target
    while enough lines remain for the remaining columns and those lines
    still fit in them.

    Parameters
    ----------
    heights : np.ndarray
        Heights of the page's lines in order.
    container_height : float
        Maximum column height.
    columns : int
        Columns the greedy pass used for this page.

    Returns
    -------
    list[int]
        Index (within the page) of the first line of every column.

    Examples
    --------
    >>> balance_breaks(np.array([50.0] * 6), 220, 2)
    [0, 3]
    """
    if len(heights) == 0:
        return []
    if columns <= 1:
        return [0]

    target = float(heights.sum()) / columns
    starts = [0]
    column_height = 0.0

    for i, height in enumerate(heights):
        if i == 0:
            column_height = height
            continue

        remaining_columns = columns - len(starts)
        if remaining_columns <= 0:
            column_height += height
            continue

        rest = heights[i:]
        fits_after_break = columns_needed(rest, container_height) <= remaining_columns
        must_break = column_height + height > container_height
        overshoots = column_height + height > target
        enough_lines = len(rest) >= remaining_columns

        if fits_after_break and (must_break or (overshoots and enough_lines)):
            starts.append(i)
            column_height = height
        else:
            column_height += height

    return starts


def _split(lines: Sequence[SongLine], starts: list[int]) -> list[Column]:
    """Cut lines into columns at the given start indices."""
    ends = starts[1:] + [len(lines)]
    return [tuple(lines[start:end]) for start, end in zip(starts, ends)]


def _pad(columns: list[Column], column_count: int) -> Page:
    """Pad a page with empty columns up to ``column_count``."""
    return tuple(columns) + tuple(() for _ in range(column_count - len(columns)))


def paginate(
    lines: Sequence[SongLine],
    heights: Sequence[float | None],
    container_height: float,
    column_count: int,
    *,
    balance: bool = True,
) -> PageLayout:
    """Partition lines into pages of balanced columns.

    Parameters
    ----------
    lines : Sequence[SongLine]
        The document in order.
    heights : Sequence[float | None]
        Rendered height of each line; degenerate values count as 0.
    container_height : float
        Usable height of one column.
    column_count : int
        Columns per page.
    balance : bool
        Run the balance pass after the greedy pass (default True).

    Returns
    -------
    PageLayout
        Pages padded to ``column_count`` columns. Flattening it yields
        ``lines`` unchanged. No lines give one page of empty columns.

    Raises
    ------
    ValueError
        If ``column_count`` is below 1 or ``container_height`` is negative.

    Examples
    --------
    >>> from chord_chart.layout.models import SectionLine
    >>> lines = [SectionLine(text=str(i)) for i in range(4)]
    >>> layout = paginate(lines, [50] * 4, 120, 2)
    >>> [[len(column) for column in page] for page in layout.pages]
    [[2, 2]]
    """
    if column_count < 1:
        msg = f"column_count must be at least 1, got {column_count}"
        raise ValueError(msg)
    if container_height < 0:
        msg = f"container_height must not be negative, got {container_height}"
        raise ValueError(msg)

    lines = list(lines)
    if not lines:
        return PageLayout(pages=(_pad([], column_count),), column_count=column_count)

    values = sanitize_heights(heights, len(lines))
    column_starts = greedy_breaks(values, container_height)
    oversized = np.flatnonzero(values > container_height)
    if oversized.size:
        logger.debug("Lines %s are taller than the container (%.1fpx)", oversized.tolist(), container_height)

    pages: list[Page] = []
    for first in range(0, len(column_starts), column_count):
        page_starts = column_starts[first : first + column_count]
        page_begin = page_starts[0]
        next_index = first + column_count
        page_end = column_starts[next_index] if next_index < len(column_starts) else len(lines)

        page_lines = lines[page_begin:page_end]
        if balance:
            local_starts = balance_breaks(values[page_begin:page_end], container_height, len(page_starts))
        else:
            local_starts = [start - page_begin for start in page_starts]

        pages.append(_pad(_split(page_lines, local_starts), column_count))

    logger.debug(
        "Paginated %d lines into %d pages (%d columns, %.1fpx)",
        len(lines),
        len(pages),
        column_count,
        container_height,
    )
    return PageLayout(pages=tuple(pages), column_count=column_count)


def flatten(layout: PageLayout) -> list[SongLine]:
    """Return every line of a layout in page, column, position order."""
    return layout.flatten()


def column_heights(layout: PageLayout, lines: Sequence[SongLine], heights: Sequence[float | None]) -> list[list[float]]:
    """Summed height of every column, page by page.

    Lines are matched to heights by document position, so identical line
    values on different rows are told apart.
    """
    values = sanitize_heights(heights, len(lines))
    cumulative = np.concatenate(([0.0], np.cumsum(values)))
    result: list[list[float]] = []
    position = 0
    for page in layout.pages:
        page_heights: list[float] = []
        for column in page:
            end = position + len(column)
            page_heights.append(float(cumulative[end] - cumulative[position]))
            position = end
        result.append(page_heights)
    return result
