"""Song document ingestion helpers.

The scraping layer hands over one ``SongLine`` per displayed line. This
module tidies that document for display (edge whitespace on lyric lines),
attaches stable line indices, and reports lines where several chords
collapse onto one position, which is useful when debugging a layout.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from chord_chart.layout.models import ChordGroup, ChordPosition, Lyrics, SongLine
from chord_chart.layout.segmenter import group_chords

# Number of merged-chord lines listed by summarize_merged_chords
MERGED_PREVIEW_LIMIT = 8


@dataclass(frozen=True)
class IndexedLine:
    """A song line with its position in the original document.

    Parameters
    ----------
    index : int
        Zero-based line number assigned at ingestion.
    line : SongLine
        The line itself.
    """

    index: int
    line: SongLine


def normalize_line(line: SongLine) -> SongLine:
    """Trim edge whitespace of a lyric line, keeping chords in place.

    Scraped lyric rows often carry leading or trailing newlines, tabs and
    spaces. Only the edges are trimmed; chord offsets move left by the
    leading amount and never below 0. Other line kinds pass through.

    Examples
    --------
    >>> normalize_line(Lyrics("  hello ", (ChordPosition("C", 2),)))
    Lyrics(lyrics='hello', chords=(ChordPosition(chord='C', at=0),))
    """
    if not isinstance(line, Lyrics):
        return line

    raw = line.lyrics
    leading = len(raw) - len(raw.lstrip())
    cleaned = raw.strip()
    chords = tuple(ChordPosition(chord=c.chord, at=max(0, c.at - leading)) for c in line.chords)
    return Lyrics(lyrics=cleaned, chords=chords)


def normalize_document(lines: Iterable[SongLine]) -> list[SongLine]:
    """Apply :func:`normalize_line` to every line."""
    return [normalize_line(line) for line in lines]


def index_document(lines: Iterable[SongLine]) -> tuple[IndexedLine, ...]:
    """Attach stable indices to the lines of a document.

    Examples
    --------
    >>> from chord_chart.layout.models import EmptyLine
    >>> index_document([EmptyLine(), EmptyLine()])[1].index
    1
    """
    return tuple(IndexedLine(index=i, line=line) for i, line in enumerate(lines))


def find_merged_chords(lines: Sequence[SongLine]) -> dict[int, list[ChordGroup]]:
    """Find lyric lines where several chords share one snapped offset.

    Parameters
    ----------
    lines : Sequence[SongLine]
        The document as scraped; lyric lines are normalized first.

    Returns
    -------
    dict[int, list[ChordGroup]]
        Line index to the merged groups of that line. Lines without a
        merge are left out.

    Examples
    --------
    >>> doc = [Lyrics("la la land", (ChordPosition("G", 3), ChordPosition("D", 5)))]
    >>> find_merged_chords(doc)
    {0: [ChordGroup(start=3, chords=('G', 'D'))]}
    """
    merged: dict[int, list[ChordGroup]] = {}
    for index, line in enumerate(lines):
        if not isinstance(line, Lyrics):
            continue
        line = normalize_line(line)
        if not line.lyrics or len(line.chords) < 2:
            continue
        groups = [group for group in group_chords(line.lyrics, line.chords) if group.is_merged]
        if groups:
            merged[index] = groups
    return merged


def summarize_merged_chords(
    merged: dict[int, list[ChordGroup]],
    limit: int = MERGED_PREVIEW_LIMIT,
) -> list[str]:
    """Short human-readable preview of merged-chord lines.

    Examples
    --------
    >>> summarize_merged_chords({4: [ChordGroup(start=0, chords=("G", "D"))]})
    ['#4: G + D']
    """
    entries = list(merged.items())[:limit]
    preview = [f"#{index}: {' + '.join(groups[0].chords)}" for index, groups in entries]
    if len(merged) > len(entries):
        preview.append(f"... +{len(merged) - len(entries)} more")
    return preview
