"""Chord-to-text segmentation for lyric lines.

This module splits a lyric line into display segments, each pairing an
optional stack of chord labels with the run of text the chords sit above.
Chord offsets are snapped back to word starts so that a line wrap never
strands a few letters of a word in their own segment.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from chord_chart.layout.models import (
    NBSP,
    ChordGroup,
    ChordPosition,
    ChordsOnly,
    EmptyLine,
    Lyrics,
    Segment,
    SectionLine,
    SongLine,
)
from chord_chart.layout.tokenizer import tokenize_chord_label
from chord_chart.pitch_class import transpose_chord

logger = logging.getLogger(__name__)

WORD_SEPARATOR = " "


def clamp_offset(at: int, length: int) -> int:
    """Clamp a chord offset into ``[0, length]``.

    Examples
    --------
    >>> clamp_offset(-3, 10), clamp_offset(4, 10), clamp_offset(99, 10)
    (0, 4, 10)
    """
    return min(max(0, at), length)


def snap_offset(lyrics: str, at: int, floor: int = 0) -> int:
    """Snap a chord offset back to the start of the word it falls in.

    The word start is the position after the nearest space before ``at``
    (or the line start). The snap only happens when that position is at or
    after ``floor``, the start of the previous chord group.

    Parameters
    ----------
    lyrics : str
        The lyric line.
    at : int
        Raw chord offset; clamped into range first.
    floor : int
        Lowest offset the chord may move back to.

    Returns
    -------
    int
        The snapped offset.

    Examples
    --------
    >>> snap_offset("hello world", 7)
    6
    >>> snap_offset("hello world", 6)
    6
    >>> snap_offset("hello world", 8, floor=7)
    8
    """
    at = clamp_offset(at, len(lyrics))
    word_start = lyrics.rfind(WORD_SEPARATOR, 0, at) + 1
    if floor <= word_start < at:
        return word_start
    return at


def group_chords(lyrics: str, chords: Iterable[ChordPosition]) -> list[ChordGroup]:
    """Snap chord offsets and merge chords landing on the same offset.

    Chords are processed in ascending raw offset order (stable for ties).
    The resulting groups have strictly increasing start offsets. Several
    chords inside one word all snap to its start and stack there, so the
    exact chord change inside a word is not kept.

    Parameters
    ----------
    lyrics : str
        The lyric line.
    chords : Iterable[ChordPosition]
        Chord anchors in any order.

    Returns
    -------
    list[ChordGroup]
        One group per distinct snapped offset.

    Examples
    --------
    >>> groups = group_chords("la la land", [ChordPosition("D", 5), ChordPosition("G", 3)])
    >>> [(g.start, g.chords) for g in groups]
    [(3, ('G', 'D'))]
    """
    groups: list[ChordGroup] = []
    floor = 0

    for position in sorted(chords, key=lambda c: c.at):
        start = snap_offset(lyrics, position.at, floor)
        if start != clamp_offset(position.at, len(lyrics)):
            logger.debug("Snapped chord %r from %d to %d", position.chord, position.at, start)

        if groups and groups[-1].start == start:
            previous = groups[-1]
            groups[-1] = ChordGroup(start=start, chords=(*previous.chords, position.chord))
            logger.debug("Merged chords %s at offset %d", groups[-1].chords, start)
        else:
            groups.append(ChordGroup(start=start, chords=(position.chord,)))

        floor = start

    return groups


def render_chord_label(label: str, semitones: int = 0) -> str:
    """Render one raw chord label for display.

    The label is split into its glued sub-chords, each is transposed, and
    the results are joined with a space.

    Examples
    --------
    >>> render_chord_label("E7Am", 2)
    'F#7 Bm'
    >>> render_chord_label("Bm7 b5")
    'Bm7b5'
    """
    return " ".join(transpose_chord(token, semitones) for token in tokenize_chord_label(label))


def render_chords_only(chords: Sequence[str], semitones: int = 0) -> list[str]:
    """Render the labels of a chords-only line, one per source chord.

    Order is document order; visual direction is left to the renderer.

    Examples
    --------
    >>> render_chords_only(["Am", "E7Am"], -2)
    ['Gm', 'D7 Gm']
    """
    return [render_chord_label(chord, semitones) for chord in chords]


def segment_lyrics(
    lyrics: str,
    chords: Iterable[ChordPosition],
    semitones: int = 0,
) -> list[Segment]:
    """Split a lyric line into chord-above-text display segments.

    Parameters
    ----------
    lyrics : str
        The lyric line.
    chords : Iterable[ChordPosition]
        Chord anchors in any order; offsets outside the line are clamped.
    semitones : int
        Transposition applied to every rendered chord label.

    Returns
    -------
    list[Segment]
        Segments in text order. Text before the first chord forms a plain
        segment; each chord group runs up to the next group. Only the last
        segment loses its trailing whitespace, and a chord segment left
        without text gets a non-breaking space, so chords on an empty line
        still render. Empty lyrics without chords give ``[]``.

    Examples
    --------
    >>> segment_lyrics("hello world", [ChordPosition("C", 7)])
    [Segment(text='hello ', chords=None), Segment(text='world', chords=('C',))]
    >>> segment_lyrics("hello world", [])
    [Segment(text='hello world', chords=None)]
    """
    groups = group_chords(lyrics, chords)
    if not groups:
        text = lyrics.rstrip()
        return [Segment(text=text)] if text else []

    segments: list[Segment] = []
    if groups[0].start > 0:
        segments.append(Segment(text=lyrics[: groups[0].start]))

    ends = [group.start for group in groups[1:]] + [len(lyrics)]
    last = len(groups) - 1
    for i, (group, end) in enumerate(zip(groups, ends)):
        text = lyrics[group.start : end]
        if i == last:
            text = text.rstrip()
        labels = tuple(render_chord_label(chord, semitones) for chord in group.chords)
        segments.append(Segment(text=text or NBSP, chords=labels))

    return segments


def render_line(line: SongLine, semitones: int = 0) -> list[Segment]:
    """Render any song line into display segments.

    Lyric lines are segmented; chords-only lines give one chord segment
    per source chord over a non-breaking space; section markers give one
    plain segment; empty lines give nothing.

    Examples
    --------
    >>> render_line(ChordsOnly(chords=("Am", "G")), 2)
    [Segment(text='\\xa0', chords=('Bm',)), Segment(text='\\xa0', chords=('A',))]
    >>> render_line(SectionLine(text="Chorus:"))
    [Segment(text='Chorus:', chords=None)]
    """
    if isinstance(line, Lyrics):
        return segment_lyrics(line.lyrics, line.chords, semitones)
    if isinstance(line, ChordsOnly):
        return [Segment(text=NBSP, chords=(label,)) for label in render_chords_only(line.chords, semitones)]
    if isinstance(line, SectionLine):
        return [Segment(text=line.text)]
    if isinstance(line, EmptyLine):
        return []
    msg = f"Unknown song line: {line!r}"
    raise TypeError(msg)
