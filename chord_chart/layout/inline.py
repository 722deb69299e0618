"""Inline bracket chord notation.

Songs are often stored or exchanged as text with chords embedded in
square brackets right before the syllable they belong to::

    [Am]Hello dar[G]kness my old [Am]friend

This module converts such text to and from ``SongLine`` objects and
transposes the bracketed chords in place.
"""

from __future__ import annotations

import re

from chord_chart.layout.models import ChordPosition, ChordsOnly, EmptyLine, Lyrics, SectionLine, SongLine
from chord_chart.pitch_class import transpose_chord

# A bracketed chord: [Am7]
INLINE_CHORD_RE = re.compile(r"\[([^\]]+)\]")


def parse_inline_line(line: str) -> SongLine:
    """Parse one line of bracket notation.

    Bracketed chords are removed from the text and anchored at the offset
    they had in the remaining text. An unclosed ``[`` is kept as text. A
    line with chords but no meaningful text is a chords-only line, and a
    blank line is an empty line.

    Parameters
    ----------
    line : str
        One line of text without the newline.

    Returns
    -------
    SongLine
        ``Lyrics``, ``ChordsOnly`` or ``EmptyLine``.

    Examples
    --------
    >>> parse_inline_line("I [D]pulled into [G]Nazareth")
    Lyrics(lyrics='I pulled into Nazareth', chords=(ChordPosition(chord='D', at=2), ChordPosition(chord='G', at=14)))
    >>> parse_inline_line("[D] [G] [A]")
    ChordsOnly(chords=('D', 'G', 'A'))
    """
    chords: list[ChordPosition] = []
    text_parts: list[str] = []
    length = 0
    i = 0

    while i < len(line):
        if line[i] == "[":
            close = line.find("]", i)
            if close != -1:
                chords.append(ChordPosition(chord=line[i + 1 : close], at=length))
                i = close + 1
                continue
        text_parts.append(line[i])
        length += 1
        i += 1

    text = "".join(text_parts)
    if not text.strip():
        if chords:
            return ChordsOnly(chords=tuple(c.chord for c in chords))
        return EmptyLine()
    return Lyrics(lyrics=text, chords=tuple(chords))


def parse_inline_song(content: str) -> list[SongLine]:
    """Parse a whole song in bracket notation, one ``SongLine`` per line.

    Examples
    --------
    >>> parse_inline_song("[C]one\\n\\n[G]")
    [Lyrics(lyrics='one', chords=(ChordPosition(chord='C', at=0),)), EmptyLine(), ChordsOnly(chords=('G',))]
    """
    content = content.replace("\r\n", "\n").replace("\r", "\n")
    return [parse_inline_line(line) for line in content.split("\n")]


def transpose_inline(text: str, semitones: int) -> str:
    """Transpose every bracketed chord of a text.

    Examples
    --------
    >>> transpose_inline("[Am]Hello [ G ]world", 2)
    '[Bm]Hello [A]world'
    """
    if semitones == 0:
        return text

    def _replace(match: re.Match[str]) -> str:
        return f"[{transpose_chord(match.group(1).strip(), semitones)}]"

    return INLINE_CHORD_RE.sub(_replace, text)


def render_inline_line(line: SongLine, semitones: int = 0) -> str:
    """Render a song line back to bracket notation.

    Chords are inserted at their offsets in ascending order; an offset
    past the end of the text is reached by padding with spaces.

    Examples
    --------
    >>> render_inline_line(Lyrics("hi", (ChordPosition("C", 0), ChordPosition("G", 4))), 2)
    '[D]hi  [A]'
    >>> render_inline_line(ChordsOnly(chords=("Am", "E")))
    '[Am] [E]'
    """
    if isinstance(line, ChordsOnly):
        return " ".join(f"[{transpose_chord(chord, semitones)}]" for chord in line.chords)
    if isinstance(line, SectionLine):
        return line.text
    if not isinstance(line, Lyrics):
        return ""

    text = line.lyrics
    parts: list[str] = []
    index = 0
    width = 0
    for chord in sorted(line.chords, key=lambda c: c.at):
        at = max(0, chord.at)
        if index < at:
            piece = text[index:at]
            parts.append(piece)
            index += len(piece)
            width += len(piece)
        if width < at:
            parts.append(" " * (at - width))
            width = at
        parts.append(f"[{transpose_chord(chord.chord, semitones)}]")

    parts.append(text[index:])
    return "".join(parts)
