"""Chord chart layout: tokenizing, segmenting and paginating song lines.

This module turns a normalized song document into display segments for
each line and distributes the lines over pages of balanced columns.
"""

from chord_chart.layout.config import LayoutConfig
from chord_chart.layout.document import (
    IndexedLine,
    find_merged_chords,
    index_document,
    normalize_document,
    normalize_line,
)
from chord_chart.layout.inline import parse_inline_line, parse_inline_song, render_inline_line, transpose_inline
from chord_chart.layout.measure import Measurer, measure_lines
from chord_chart.layout.models import (
    NBSP,
    ChordGroup,
    ChordPosition,
    ChordsOnly,
    EmptyLine,
    Lyrics,
    PageLayout,
    SectionLine,
    Segment,
    SongLine,
)
from chord_chart.layout.paginator import flatten, paginate
from chord_chart.layout.segmenter import render_chord_label, render_chords_only, render_line, segment_lyrics
from chord_chart.layout.session import InputSignature, LayoutSession, ViewState
from chord_chart.layout.tokenizer import clean_chord_label, tokenize_chord_label

__all__ = [
    "NBSP",
    "ChordGroup",
    "ChordPosition",
    "ChordsOnly",
    "EmptyLine",
    "IndexedLine",
    "InputSignature",
    "LayoutConfig",
    "LayoutSession",
    "Lyrics",
    "Measurer",
    "PageLayout",
    "SectionLine",
    "Segment",
    "SongLine",
    "ViewState",
    "clean_chord_label",
    "find_merged_chords",
    "flatten",
    "index_document",
    "measure_lines",
    "normalize_document",
    "normalize_line",
    "paginate",
    "parse_inline_line",
    "parse_inline_song",
    "render_chord_label",
    "render_chords_only",
    "render_inline_line",
    "render_line",
    "segment_lyrics",
    "tokenize_chord_label",
    "transpose_inline",
]
