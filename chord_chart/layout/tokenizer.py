"""Scan-forward tokenizer for scraped chord labels.

Scraped markup sometimes glues adjacent chord spans together ("E7Am",
"AmDm") or detaches modifiers ("Bm7 b5"). This module recovers the
individual chord labels in left-to-right order.
"""

from __future__ import annotations

import re

# Separators between chords: whitespace, parentheses, commas, bidi controls
SEPARATOR_CHARS = r"\s(),\u200e\u200f\u202a-\u202e\u2066-\u2069"
SEPARATOR_RE = re.compile(rf"[{SEPARATOR_CHARS}]")

# Separators before an accidental+digit modifier: "Bm7 b5", "C7(b9)" -> "Bm7b5", "C7b9)"
DETACHED_MODIFIER_RE = re.compile(rf"[{SEPARATOR_CHARS}]+([b#♭♯])(\d+)")

# Separators before a trailing lone accidental: "B b" -> "Bb"
DETACHED_ACCIDENTAL_RE = re.compile(rf"[{SEPARATOR_CHARS}]+([b#♭♯])$")

UPPER_ROOTS = "ABCDEFG"
LOWER_ROOTS = "abcdefg"
ACCIDENTALS = "#b♯♭"

# Non-alphanumeric characters that still belong to a chord label
MODIFIER_SYMBOLS = "#♯♭+-"


def clean_chord_label(label: str) -> str:
    """Reattach detached modifiers before tokenizing.

    Parameters
    ----------
    label : str
        Raw chord label text.

    Returns
    -------
    str
        The label with separators (whitespace, parentheses, commas) removed
        before accidental modifiers and stripped at both ends.

    Examples
    --------
    >>> clean_chord_label("Bm7 b5")
    'Bm7b5'
    >>> clean_chord_label("C #9 ")
    'C#9'
    >>> clean_chord_label("Am7(b5)")
    'Am7b5)'
    """
    if not label:
        return ""
    label = DETACHED_MODIFIER_RE.sub(r"\1\2", label)
    label = DETACHED_ACCIDENTAL_RE.sub(r"\1", label)
    return label.strip()


def _starts_lower_root(raw: str, i: int, current: str) -> bool:
    """Whether a lowercase a-g at position i opens a new glued chord."""
    ch = raw[i]
    if ch not in LOWER_ROOTS or not current:
        return False

    prev_char = raw[i - 1] if i > 0 else ""
    if not (prev_char.isdigit() or prev_char == ")"):
        return False

    # "b5", "b9", "b13" are flat modifiers, not a B root
    next_char = raw[i + 1] if i + 1 < len(raw) else ""
    return not (ch == "b" and next_char.isdigit())


def tokenize_chord_label(label: str) -> list[str]:
    """Split a possibly glued chord label into individual chord labels.

    Scans left to right. An uppercase A-G opens a new chord unless it
    follows a slash (bass note). A lowercase a-g opens a new chord only
    after a digit or closing parenthesis, and never as a ``b`` followed by
    a digit. An accidental right after a root letter stays with it.

    Parameters
    ----------
    label : str
        The raw chord label.

    Returns
    -------
    list[str]
        The chord labels in order. Empty for empty or blank input.

    Examples
    --------
    >>> tokenize_chord_label("E7Am")
    ['E7', 'Am']
    >>> tokenize_chord_label("AmDm")
    ['Am', 'Dm']
    >>> tokenize_chord_label("Bm7 b5")
    ['Bm7b5']
    >>> tokenize_chord_label("C/G")
    ['C/G']
    >>> tokenize_chord_label("E7am")
    ['E7', 'am']
    """
    raw = clean_chord_label(label)
    if not raw:
        return []

    tokens: list[str] = []
    current = ""
    i = 0
    n = len(raw)

    while i < n:
        ch = raw[i]

        if SEPARATOR_RE.match(ch):
            if current:
                tokens.append(current)
                current = ""
            i += 1
            continue

        if ch in UPPER_ROOTS or _starts_lower_root(raw, i, current):
            prev_char = raw[i - 1] if i > 0 else ""
            if current and prev_char != "/":
                tokens.append(current)
                current = ""
            current += ch
            i += 1

            # Accidental directly after the root letter
            if i < n and raw[i] in ACCIDENTALS:
                current += raw[i]
                i += 1
            continue

        if ch == "/" or ch.isalnum() or ch in MODIFIER_SYMBOLS:
            current += ch

        # Anything else is noise and is dropped
        i += 1

    if current:
        tokens.append(current)

    if not tokens:
        # Never lose chord text silently
        return label.split()

    return tokens
