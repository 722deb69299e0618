"""Chord data models for chord-chart.

This module provides the decomposed representation of a chord label as
found on scraped chord charts: a root note, an opaque modifier suffix and
an optional slash bass note.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChordToken:
    """A single chord label split into its transposable parts.

    Parameters
    ----------
    root : str
        The root note as spelled in the label (e.g., "C", "F#", "Bb", "E♭").
    suffix : str
        Everything after the root that is not a bass note (e.g., "m7",
        "maj7", "sus4", "m7b5"). Passed through transposition untouched.
    bass : str | None
        The slash bass note, if any (e.g., "G" in "C/G").

    Examples
    --------
    >>> token = ChordToken(root="F#", suffix="m7", bass="A")
    >>> token.to_label()
    'F#m7/A'
    >>> ChordToken(root="Bb", suffix="").uses_flats
    True
    """

    root: str
    suffix: str = ""
    bass: str | None = None

    @property
    def uses_flats(self) -> bool:
        """Whether the root is spelled with a flat."""
        return "b" in self.root or "♭" in self.root

    def to_label(self) -> str:
        """Reassemble the chord label.

        Returns
        -------
        str
            The label, e.g. "Am7" or "C/G".
        """
        result = f"{self.root}{self.suffix}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    def __str__(self) -> str:
        """Return the chord label as the default string representation."""
        return self.to_label()
