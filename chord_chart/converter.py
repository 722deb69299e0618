"""Chord label parsing.

This module converts raw chord labels such as "Am7", "C#/G" or "B♭maj7"
into :class:`~chord_chart.models.ChordToken` objects and back.
"""

from __future__ import annotations

import re

from chord_chart.models import ChordToken

# Accidental glyphs accepted after a note letter
ACCIDENTALS = "#b♯♭"

# Root note at the start of a label: letter plus one optional accidental
ROOT_RE = re.compile(r"^([A-G][#b♯♭]?)")

# A complete note name (used for slash bass notes)
NOTE_RE = re.compile(r"^[A-G][#b♯♭]?$")

# Unicode accidentals to their ASCII spelling
UNICODE_ACCIDENTALS: dict[str, str] = {
    "♯": "#",
    "♭": "b",
}


def normalize_accidentals(note: str) -> str:
    """Replace Unicode sharp/flat glyphs with ASCII ``#`` and ``b``.

    Examples
    --------
    >>> normalize_accidentals("B♭")
    'Bb'
    >>> normalize_accidentals("F#")
    'F#'
    """
    for glyph, ascii_glyph in UNICODE_ACCIDENTALS.items():
        note = note.replace(glyph, ascii_glyph)
    return note


def is_note(text: str) -> bool:
    """Check whether text is a bare note name (letter plus optional accidental).

    Examples
    --------
    >>> is_note("Eb")
    True
    >>> is_note("Em")
    False
    """
    return bool(NOTE_RE.match(text))


def parse_chord_label(label: str) -> ChordToken | None:
    """Parse a chord label into a ChordToken.

    The root must be the first character of the label. A trailing ``/X``
    becomes the bass note only when ``X`` is a note name; otherwise the
    slash text stays in the suffix so that nothing is lost.

    Parameters
    ----------
    label : str
        The chord label (e.g., "Am7", "F#m/A", "Bb").

    Returns
    -------
    ChordToken | None
        The parsed token, or None if the label has no recognizable root.

    Examples
    --------
    >>> parse_chord_label("Am7")
    ChordToken(root='A', suffix='m7', bass=None)
    >>> parse_chord_label("C#/G#")
    ChordToken(root='C#', suffix='', bass='G#')
    >>> parse_chord_label("x") is None
    True
    """
    if not label:
        return None

    match = ROOT_RE.match(label)
    if match is None:
        return None

    root = match.group(1)
    rest = label[len(root):]

    bass = None
    if "/" in rest:
        head, _, tail = rest.rpartition("/")
        if is_note(tail):
            rest, bass = head, tail

    return ChordToken(root=root, suffix=rest, bass=bass)


def chord_to_label(token: ChordToken) -> str:
    """Convert a ChordToken back to its label.

    Examples
    --------
    >>> chord_to_label(ChordToken(root="G", suffix="7", bass="B"))
    'G7/B'
    """
    return token.to_label()
