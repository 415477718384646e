"""
Tests for HeatGrid parsing and lookups.

Usage:
    pytest tests/test_grid.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from heatpath.search import Direction, FormatError, HeatGrid
from tests.grids import EXAMPLE_GRID


def test_from_text_shape_and_costs():
    grid = HeatGrid.from_text(EXAMPLE_GRID)

    assert grid.height == 13
    assert grid.width == 13
    assert grid.shape == (13, 13)
    assert grid.cost_at((0, 0)) == 2
    assert grid.cost_at((0, 1)) == 4
    assert grid.cost_at((12, 12)) == 3
    assert grid.start == (0, 0)
    assert grid.target == (12, 12)


def test_trailing_newline_is_optional():
    with_newline = HeatGrid.from_text("123\n456\n")
    without_newline = HeatGrid.from_text("123\n456")
    crlf = HeatGrid.from_text("123\r\n456\r\n")

    assert with_newline == without_newline == crlf
    assert hash(with_newline) == hash(without_newline)


@pytest.mark.parametrize("text", ["", "\n", "\n\n"])
def test_empty_input_rejected(text):
    with pytest.raises(FormatError, match="empty"):
        HeatGrid.from_text(text)


def test_ragged_lines_rejected():
    with pytest.raises(FormatError, match="Line 2"):
        HeatGrid.from_text("123\n45\n678\n")


@pytest.mark.parametrize("text", [
    "12a\n456", "123\n4 6", "1.3", "12\n\n34",
    # line separators other than "\n" are not row breaks
    "12\x0c34", "12\x1e34", "12\u202834", "12\r34", "12\x0b34", "12\x8534",
])
def test_non_digit_rejected(text):
    with pytest.raises(FormatError):
        HeatGrid.from_text(text)


def test_format_error_is_value_error():
    assert issubclass(FormatError, ValueError)


def test_in_bounds_and_neighbor():
    grid = HeatGrid.from_text("123\n456")

    assert grid.in_bounds((1, 2))
    assert not grid.in_bounds((2, 0))
    assert not grid.in_bounds((0, -1))

    assert grid.neighbor((0, 0), Direction.EAST) == (0, 1)
    assert grid.neighbor((0, 0), Direction.SOUTH) == (1, 0)
    assert grid.neighbor((0, 0), Direction.NORTH) is None
    assert grid.neighbor((1, 2), Direction.EAST) is None


def test_cost_at_out_of_bounds_raises():
    grid = HeatGrid.from_text("12\n34")
    with pytest.raises(IndexError):
        grid.cost_at((2, 0))


def test_grid_is_immutable():
    grid = HeatGrid.from_text("12\n34")

    with pytest.raises(ValueError):
        grid.costs[0, 0] = 9

    changed = grid.with_cost((0, 0), 9)
    assert changed.cost_at((0, 0)) == 9
    assert grid.cost_at((0, 0)) == 1
    assert changed != grid


@pytest.mark.parametrize("position", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_with_cost_out_of_bounds_raises(position):
    grid = HeatGrid.from_text("12\n34")

    with pytest.raises(IndexError):
        grid.with_cost(position, 9)
    assert grid.to_text() == "12\n34"


@pytest.mark.parametrize("cost", [10, -1, 1.5, True, "5"])
def test_with_cost_rejects_non_digit_cost(cost):
    with pytest.raises(FormatError):
        HeatGrid.from_text("12\n34").with_cost((0, 0), cost)


@pytest.mark.parametrize("value", [1.5, True, "5", None])
def test_from_rows_rejects_non_integer_costs(value):
    with pytest.raises(FormatError):
        HeatGrid.from_rows([[1, value]])


def test_from_rows_validation():
    assert HeatGrid.from_rows([[1, 2], [3, 4]]) == HeatGrid.from_text("12\n34")

    with pytest.raises(FormatError):
        HeatGrid.from_rows([])
    with pytest.raises(FormatError):
        HeatGrid.from_rows([[1, 2], [3]])
    with pytest.raises(FormatError):
        HeatGrid.from_rows([[1, 10]])


def test_to_text_round_trip():
    grid = HeatGrid.from_text(EXAMPLE_GRID)
    assert grid.to_text() == EXAMPLE_GRID.rstrip("\n")


def test_direction_opposites():
    for direction in Direction:
        assert direction.opposite.opposite == direction
        assert direction.d_row == -direction.opposite.d_row
        assert direction.d_col == -direction.opposite.d_col
