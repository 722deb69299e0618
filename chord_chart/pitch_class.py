"""Pitch class operations for chord transposition.

This module provides the 12-tone chromatic model used to shift chords
up and down by semitones, keeping the sharp/flat spelling of the source
label where possible.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from chord_chart.converter import normalize_accidentals, parse_chord_label
from chord_chart.models import ChordToken

# Pitch class to sharp note name, C=0
CHROMATIC_SCALE: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC = MappingProxyType(
    {
        "C": 0,
        "C#": 1,
        "Db": 1,
        "D": 2,
        "D#": 3,
        "Eb": 3,
        "E": 4,
        "Fb": 4,
        "E#": 5,
        "F": 5,
        "F#": 6,
        "Gb": 6,
        "G": 7,
        "G#": 8,
        "Ab": 8,
        "A": 9,
        "A#": 10,
        "Bb": 10,
        "B": 11,
        "Cb": 11,
        "B#": 0,
    }
)

# Flat spellings to their sharp equivalents
FLAT_TO_SHARP = MappingProxyType(
    {
        "Db": "C#",
        "Eb": "D#",
        "Fb": "E",
        "Gb": "F#",
        "Ab": "G#",
        "Bb": "A#",
        "Cb": "B",
    }
)

# Sharp spellings to flats, for display when the source used flats
SHARP_TO_FLAT = MappingProxyType(
    {
        "C#": "Db",
        "D#": "Eb",
        "F#": "Gb",
        "G#": "Ab",
        "A#": "Bb",
    }
)

SEMITONES_PER_OCTAVE = 12


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb", "E♭").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("B♭")
    10
    """
    normalized = normalize_accidentals(note)
    if normalized in NOTE_TO_PC:
        return NOTE_TO_PC[normalized]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def pc_to_note(pc: int, prefer_flat: bool = False) -> str:
    """Convert a pitch class to a note name.

    Parameters
    ----------
    pc : int
        Any integer; reduced modulo 12.
    prefer_flat : bool
        Spell black keys as flats instead of sharps.

    Examples
    --------
    >>> pc_to_note(13)
    'C#'
    >>> pc_to_note(-2, prefer_flat=True)
    'Bb'
    """
    note = CHROMATIC_SCALE[pc % SEMITONES_PER_OCTAVE]
    if prefer_flat:
        return SHARP_TO_FLAT.get(note, note)
    return note


def transpose_note(note: str, semitones: int, prefer_flat: bool | None = None) -> str:
    """Transpose a single note name.

    Flat spelling is kept when the original note was spelled with a flat,
    unless ``prefer_flat`` says otherwise. Unknown notes are returned
    unchanged.

    Examples
    --------
    >>> transpose_note("A", 2)
    'B'
    >>> transpose_note("Bb", 1)
    'B'
    >>> transpose_note("Eb", -1)
    'D'
    >>> transpose_note("Ab", 1)
    'A'
    >>> transpose_note("Db", 1)
    'D'
    >>> transpose_note("Eb", 3)
    'Gb'
    >>> transpose_note("H", 3)
    'H'
    """
    try:
        pc = note_to_pc(note)
    except ValueError:
        return note
    if prefer_flat is None:
        prefer_flat = "b" in note or "♭" in note
    return pc_to_note(pc + semitones, prefer_flat=prefer_flat)


def transpose_token(token: ChordToken, semitones: int) -> ChordToken:
    """Transpose a parsed chord by a number of semitones.

    Root and bass are shifted by the same delta, each keeping its own
    sharp/flat preference. The suffix is reattached verbatim.

    Examples
    --------
    >>> transpose_token(ChordToken(root="C", suffix="maj7", bass="E"), 2)
    ChordToken(root='D', suffix='maj7', bass='F#')
    """
    new_bass = transpose_note(token.bass, semitones) if token.bass else None
    return ChordToken(
        root=transpose_note(token.root, semitones, prefer_flat=token.uses_flats),
        suffix=token.suffix,
        bass=new_bass,
    )


def transpose_chord(label: str, semitones: int) -> str:
    """Transpose a chord label by a number of semitones.

    Parameters
    ----------
    label : str
        The chord label (e.g., "Am7", "F#m", "Bb/D").
    semitones : int
        Semitones to shift (positive = up). Any integer is accepted.

    Returns
    -------
    str
        The transposed label. Whole octaves (including zero) and
        unparseable labels return the input unchanged.

    Examples
    --------
    >>> transpose_chord("E7", 2)
    'F#7'
    >>> transpose_chord("Bb/D", -2)
    'Ab/C'
    >>> transpose_chord("N.C.", 5)
    'N.C.'
    """
    semitones = round(semitones)
    if semitones % SEMITONES_PER_OCTAVE == 0:
        return label

    token = parse_chord_label(label)
    if token is None:
        return label

    return transpose_token(token, semitones).to_label()


def transpose_chords(labels: Iterable[str], semitones: int) -> list[str]:
    """Transpose every label of an ordered chord token stream.

    Examples
    --------
    >>> transpose_chords(["E7", "Am"], 2)
    ['F#7', 'Bm']
    """
    return [transpose_chord(label, semitones) for label in labels]


def tones_to_semitones(tones: float) -> int:
    """Convert a UI transposition value in tone units to semitones.

    One tone unit is two semitones; the UI moves in steps of 0.5.

    Examples
    --------
    >>> tones_to_semitones(1.5)
    3
    >>> tones_to_semitones(-0.5)
    -1
    """
    return round(tones * 2)
