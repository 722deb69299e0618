"""Tests for layout data models."""

import dataclasses

import pytest

from chord_chart.layout.models import NBSP, ChordGroup, ChordPosition, EmptyLine, Lyrics, PageLayout, SectionLine, Segment


class TestSegment:
    """Display segments."""

    def test_has_chords(self) -> None:
        assert Segment("world", ("C",)).has_chords
        assert not Segment("hello ").has_chords
        assert not Segment(NBSP, ()).has_chords


class TestPageLayout:
    """Paged column layouts."""

    @pytest.fixture
    def layout(self) -> PageLayout:
        a, b, c = SectionLine("a"), SectionLine("b"), SectionLine("c")
        return PageLayout(pages=(((a, b), (c,)), ((EmptyLine(),), ())), column_count=2)

    def test_total_pages(self, layout: PageLayout) -> None:
        assert layout.total_pages == 2
        assert PageLayout(pages=(), column_count=2).total_pages == 1

    def test_page_index_clamped(self, layout: PageLayout) -> None:
        assert layout.page(-3) == layout.pages[0]
        assert layout.page(7) == layout.pages[1]

    def test_empty_layout_page(self) -> None:
        assert PageLayout(pages=(), column_count=3).page(0) == ((), (), ())

    def test_flatten(self, layout: PageLayout) -> None:
        assert layout.flatten() == [SectionLine("a"), SectionLine("b"), SectionLine("c"), EmptyLine()]


class TestLines:
    """Song line value semantics."""

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            ChordPosition("C", 0).at = 3  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert Lyrics("x", (ChordPosition("C", 0),)) == Lyrics("x", (ChordPosition("C", 0),))
        assert EmptyLine() == EmptyLine()

    def test_group_merged(self) -> None:
        assert ChordGroup(0, ("G", "D")).is_merged
        assert not ChordGroup(0, ("G",)).is_merged
