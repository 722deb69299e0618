"""Tests for line height measurement."""

import logging
import math

import pytest

from chord_chart.layout.measure import estimate_height, measure_line, measure_lines
from chord_chart.layout.models import ChordPosition, ChordsOnly, EmptyLine, Lyrics, SectionLine


def failing_measurer(line, width, font_size):
    raise RuntimeError("renderer unavailable")


class TestMeasureLine:
    """Measurement failures degrade to zero height."""

    def test_valid_height(self) -> None:
        assert measure_line(lambda line, width, font_size: 42, EmptyLine(), 300, 16) == 42.0

    @pytest.mark.parametrize("value", [None, "tall", math.nan, math.inf, -3.0])
    def test_degenerate_results(self, value: object) -> None:
        assert measure_line(lambda line, width, font_size: value, EmptyLine(), 300, 16) == 0.0

    def test_exception_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="chord_chart.layout.measure"):
            assert measure_line(failing_measurer, SectionLine("Verse"), 300, 16) == 0.0
        assert "failed" in caplog.text

    def test_measure_lines_keeps_order(self) -> None:
        lines = [SectionLine("a"), EmptyLine(), SectionLine("bbb")]

        def measurer(line, width, font_size):
            if isinstance(line, EmptyLine):
                raise ValueError("no layout")
            return len(line.text) * font_size

        assert measure_lines(lines, measurer, 300, 10) == [10.0, 0.0, 30.0]

    def test_measurer_arguments(self) -> None:
        seen = []

        def measurer(line, width, font_size):
            seen.append((width, font_size))
            return 1

        measure_lines([EmptyLine(), EmptyLine()], measurer, 250, 18)
        assert seen == [(250, 18), (250, 18)]


class TestEstimateHeight:
    """Rough height estimates."""

    def test_single_row_lines(self) -> None:
        for line in (EmptyLine(), SectionLine("Chorus:"), ChordsOnly(("Am",))):
            assert estimate_height(line, 300, 10) == 18.0

    def test_chords_add_a_row(self) -> None:
        plain = Lyrics("hello")
        chorded = Lyrics("hello", (ChordPosition("C", 0),))
        assert estimate_height(plain, 300, 10) == 18.0
        assert estimate_height(chorded, 300, 10) == 36.0

    def test_long_lyrics_wrap(self) -> None:
        line = Lyrics("x" * 120)
        assert estimate_height(line, 300, 10) == 54.0
