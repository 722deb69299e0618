"""Chord chart engine for transposing and paging scraped chord sheets.

This library provides the text engine behind a paged chord chart viewer:
parsing and transposing chord labels, splitting glued chord labels,
placing chords above lyric text and paginating lines into columns.

Examples
--------
>>> from chord_chart import transpose_chord, parse_chord_label

>>> transpose_chord("E7", 2)
'F#7'
>>> transpose_chord("Bb/D", 1)
'B/D#'

>>> parse_chord_label("F#m7/A").root
'F#'
"""

from chord_chart.converter import chord_to_label, parse_chord_label
from chord_chart.models import ChordToken
from chord_chart.pitch_class import (
    note_to_pc,
    tones_to_semitones,
    transpose_chord,
    transpose_chords,
    transpose_note,
    transpose_token,
)

__all__ = [
    "ChordToken",
    "chord_to_label",
    "note_to_pc",
    "parse_chord_label",
    "tones_to_semitones",
    "transpose_chord",
    "transpose_chords",
    "transpose_note",
    "transpose_token",
]
