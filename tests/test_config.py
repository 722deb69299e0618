"""Tests for display tuning parameters."""

import dataclasses

import pytest

from chord_chart.layout.config import LayoutConfig


@pytest.fixture
def config() -> LayoutConfig:
    return LayoutConfig()


class TestDisplayMode:
    """Container classification."""

    @pytest.mark.parametrize(
        "width, height, mode, columns",
        [
            (390, 844, "portrait", 2),
            (844, 390, "landscape", 3),
            (1280, 800, "desktop", 3),
            (800, 750, None, 2),
        ],
    )
    def test_modes(self, config: LayoutConfig, width: float, height: float, mode: str | None, columns: int) -> None:
        assert config.display_mode(width, height) == mode
        assert config.column_count(width, height) == columns

    def test_overrides(self) -> None:
        config = LayoutConfig(portrait_columns=1, desktop_min_width=1400)
        assert config.column_count(390, 844) == 1
        assert config.column_count(1280, 800) == 2

    def test_frozen(self, config: LayoutConfig) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.desktop_columns = 4  # type: ignore[misc]


class TestHeights:
    """Line height and usable column height."""

    def test_line_height(self, config: LayoutConfig) -> None:
        assert config.line_height(10) == 18.0

    @pytest.mark.parametrize(
        "width, height, margin",
        [(400, 800, 27.0), (800, 400, 36.0), (1280, 800, 45.0), (800, 750, 45.0)],
    )
    def test_safety_margin(self, config: LayoutConfig, width: float, height: float, margin: float) -> None:
        assert config.safety_margin(width, height, 10) == pytest.approx(margin)

    def test_available_height(self, config: LayoutConfig) -> None:
        height = config.available_height(400, 800, 10, padding_top=10, padding_bottom=10)
        assert height == pytest.approx(753.0)

    def test_available_height_never_negative(self, config: LayoutConfig) -> None:
        assert config.available_height(400, 800, 10, padding_top=900) == 0.0


class TestWidths:
    """Column and measuring widths."""

    def test_column_width(self, config: LayoutConfig) -> None:
        assert config.column_width(1000, 3) == 333
        assert config.column_width(1000, 0) == 1000

    def test_measure_width(self, config: LayoutConfig) -> None:
        assert config.measure_width(300, 600, 2) == pytest.approx(141.0)
        assert config.measure_width(1200, 900, 3) == pytest.approx(383.0)

    def test_measure_width_lower_bound(self, config: LayoutConfig) -> None:
        assert config.measure_width(200, 600, 2) == 120

    @pytest.mark.parametrize(
        "column_width, widest_row, scale",
        [(300, 250, 1.0), (300, 0, 1.0), (300, 400, 0.7275), (100, 400, 0.7)],
    )
    def test_font_scale(self, config: LayoutConfig, column_width: float, widest_row: float, scale: float) -> None:
        assert config.font_scale(column_width, widest_row) == pytest.approx(scale)
