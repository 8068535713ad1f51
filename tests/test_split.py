"""
Unit tests for split strategies.
"""

import pytest
from pwlayout.geometry import Rect, Split
import pwlayout.layouts.split as strategies
from pwlayout.layouts.split import split

TILING_SPLITS = [Split.HORIZONTAL, Split.VERTICAL, Split.GRID, Split.FIBONACCI, Split.DWINDLE]


@pytest.mark.unit
class TestSimpleSplits:
    """Test none, horizontal and vertical splits."""

    def test_none(self, tiny_area):
        assert strategies.none(tiny_area, 0) == []
        assert strategies.none(tiny_area, 1) == [tiny_area]

    def test_none_rejects_more_than_one_window(self, tiny_area):
        with pytest.raises(ValueError):
            strategies.none(tiny_area, 2)

    def test_horizontal_rows(self):
        rows = strategies.horizontal(Rect(0, 0, 100, 10), 3)
        assert rows == [Rect(0, 0, 100, 4), Rect(0, 4, 100, 3), Rect(0, 7, 100, 3)]

    def test_vertical_columns(self):
        columns = strategies.vertical(Rect(0, 0, 10, 100), 3)
        assert columns == [Rect(0, 0, 4, 100), Rect(4, 0, 3, 100), Rect(7, 0, 3, 100)]


@pytest.mark.unit
class TestGrid:
    """Test grid split."""

    def test_square_count(self):
        cells = strategies.grid(Rect(0, 0, 12, 8), 4)
        assert cells == [
            Rect(0, 0, 6, 4),
            Rect(6, 0, 6, 4),
            Rect(0, 4, 6, 4),
            Rect(6, 4, 6, 4),
        ]

    def test_last_row_stretches(self):
        cells = strategies.grid(Rect(0, 0, 12, 9), 7)
        assert len(cells) == 7
        assert [c.width for c in cells[:6]] == [4] * 6
        assert cells[6] == Rect(0, 6, 12, 3)

    def test_three_windows(self):
        cells = strategies.grid(Rect(0, 0, 12, 8), 3)
        assert cells == [Rect(0, 0, 6, 4), Rect(6, 0, 6, 4), Rect(0, 4, 12, 4)]

    def test_zero_windows(self, tiny_area):
        assert strategies.grid(tiny_area, 0) == []


@pytest.mark.unit
class TestFibonacciAndDwindle:
    """Test the halving splits."""

    def test_fibonacci_cascades(self, tiny_area):
        assert strategies.fibonacci(tiny_area, 4) == [
            Rect(0, 0, 6, 8),
            Rect(6, 0, 6, 4),
            Rect(6, 4, 3, 4),
            Rect(9, 4, 3, 4),
        ]

    def test_dwindle_spirals(self, tiny_area):
        assert strategies.dwindle(tiny_area, 4) == [
            Rect(0, 0, 6, 8),
            Rect(6, 4, 6, 4),
            Rect(9, 0, 3, 4),
            Rect(6, 0, 3, 4),
        ]

    def test_single_window_fills_rect(self, tiny_area):
        assert strategies.fibonacci(tiny_area, 1) == [tiny_area]
        assert strategies.dwindle(tiny_area, 1) == [tiny_area]

    def test_equal_for_two_windows(self, tiny_area):
        assert strategies.fibonacci(tiny_area, 2) == strategies.dwindle(tiny_area, 2)

    def test_differ_from_three_windows(self, standard_area):
        for count in range(3, 10):
            assert strategies.fibonacci(standard_area, count) != strategies.dwindle(
                standard_area, count
            )

    def test_each_window_halves_the_previous_space(self, standard_area):
        rects = strategies.fibonacci(standard_area, 5)
        areas = [r.surface_area() for r in rects]
        assert areas[0] == standard_area.surface_area() // 2
        for previous, current in zip(areas[:-2], areas[1:-1]):
            assert current == previous // 2


@pytest.mark.unit
class TestSplitDispatch:
    """Test the split dispatcher."""

    @pytest.mark.parametrize("strategy", TILING_SPLITS)
    def test_count_and_tiling(self, strategy, standard_area, assert_tiles):
        for count in range(1, 25):
            rects = split(standard_area, count, strategy)
            assert len(rects) == count
            assert_tiles(rects, standard_area)

    @pytest.mark.parametrize("strategy", list(Split))
    def test_zero_windows(self, strategy, standard_area):
        assert split(standard_area, 0, strategy) == []

    def test_negative_count_rejected(self, standard_area):
        with pytest.raises(ValueError):
            split(standard_area, -1, Split.HORIZONTAL)

    def test_unknown_strategy_rejected(self, standard_area):
        with pytest.raises(ValueError):
            split(standard_area, 2, "spiral")

    def test_zero_sized_rect(self):
        rects = split(Rect(0, 0, 0, 0), 5, Split.GRID)
        assert len(rects) == 5
        assert all(r.surface_area() == 0 for r in rects)
