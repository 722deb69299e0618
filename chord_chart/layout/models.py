"""Data models for chord chart layout.

This module defines the normalized song document handed over by the
scraping layer (one ``SongLine`` per displayed line), the display segments
produced for lyric lines, and the paged column layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Placeholder text keeping zero-width segments visible
NBSP = "\u00a0"


@dataclass(frozen=True)
class ChordPosition:
    """A chord anchored at a character offset of a lyric line.

    Parameters
    ----------
    chord : str
        The raw chord label, possibly several glued chords (e.g., "E7Am").
    at : int
        Zero-based code point offset into the lyrics; the chord sits just
        before the character at this offset. Out-of-range values are
        clamped by consumers.

    Examples
    --------
    >>> ChordPosition(chord="Am", at=0)
    ChordPosition(chord='Am', at=0)
    """

    chord: str
    at: int


@dataclass(frozen=True)
class Lyrics:
    """A sung line with zero or more chord anchors.

    Parameters
    ----------
    lyrics : str
        The lyric text as scraped.
    chords : tuple[ChordPosition, ...]
        Chord anchors, in no particular order.
    """

    lyrics: str
    chords: tuple[ChordPosition, ...] = ()


@dataclass(frozen=True)
class ChordsOnly:
    """An instrumental or transition line of chords without lyrics.

    Parameters
    ----------
    chords : tuple[str, ...]
        Chord labels in left-to-right document order.
    """

    chords: tuple[str, ...] = ()


@dataclass(frozen=True)
class SectionLine:
    """A structural marker such as "Chorus:".

    Parameters
    ----------
    text : str
        The marker text.
    """

    text: str


@dataclass(frozen=True)
class EmptyLine:
    """A blank separator line."""

    pass


SongLine = Union[Lyrics, ChordsOnly, SectionLine, EmptyLine]


@dataclass(frozen=True)
class Segment:
    """A display unit: an optional stack of chord labels above a text run.

    Parameters
    ----------
    text : str
        The lyric text run (a non-breaking space when the run is empty).
    chords : tuple[str, ...] | None
        Rendered (tokenized and transposed) chord labels, or None for a
        plain text run.

    Examples
    --------
    >>> Segment(text="world", chords=("C",)).has_chords
    True
    """

    text: str
    chords: tuple[str, ...] | None = None

    @property
    def has_chords(self) -> bool:
        """Whether this segment carries at least one chord label."""
        return bool(self.chords)


Column = tuple[SongLine, ...]
Page = tuple[Column, ...]


@dataclass(frozen=True)
class PageLayout:
    """Lines distributed over pages of fixed-count columns.

    Parameters
    ----------
    pages : tuple[Page, ...]
        Every page holds exactly ``column_count`` columns (possibly empty).
    column_count : int
        Columns per page.
    """

    pages: tuple[Page, ...]
    column_count: int

    @property
    def total_pages(self) -> int:
        """Number of pages, at least 1."""
        return max(1, len(self.pages))

    def page(self, index: int) -> Page:
        """Return the columns of a page, clamping the index into range.

        An empty layout yields ``column_count`` empty columns.
        """
        if not self.pages:
            return tuple(() for _ in range(self.column_count))
        index = min(max(0, index), len(self.pages) - 1)
        return self.pages[index]

    def flatten(self) -> list[SongLine]:
        """Return all lines in page, column, position order."""
        return [line for page in self.pages for column in page for line in column]


@dataclass(frozen=True)
class ChordGroup:
    """Chords sharing one snapped offset of a lyric line.

    Parameters
    ----------
    start : int
        The snapped code point offset.
    chords : tuple[str, ...]
        Raw chord labels in ascending original offset order.
    """

    start: int
    chords: tuple[str, ...]

    @property
    def is_merged(self) -> bool:
        """Whether several chords collapsed onto this offset."""
        return len(self.chords) > 1
