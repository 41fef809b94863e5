"""Tests for cell coordinates, the 3x3 neighborhood and input validation."""

import math

import pytest

from gridpair.core import (
    NEIGHBOR_OFFSETS,
    NUM_NEIGHBORS,
    InvalidArgument,
    NumericDegeneracy,
    Point,
    cell_coordinate,
    min_cell_size,
    neighborhood,
    validate_points,
)
from gridpair.core.cells import MAX_CELL_QUOTIENT


class TestCellCoordinate:
    """Tests for cell_coordinate (boxify)."""

    def test_origin_cell(self):
        assert cell_coordinate(Point(0.0, 0.0), 1.0) == (0, 0)

    def test_floor_division(self):
        assert cell_coordinate(Point(10.0, 10.0), 4.0) == (2, 2)
        assert cell_coordinate(Point(3.99, 4.0), 4.0) == (0, 1)

    def test_negative_coordinates_floor_down(self):
        """Negative coordinates floor toward -infinity, not toward zero."""
        assert cell_coordinate(Point(-0.5, -1.0), 1.0) == (-1, -1)
        assert cell_coordinate(Point(-2.5, 2.5), 1.0) == (-3, 2)

    def test_returns_python_ints(self):
        i, j = cell_coordinate(Point(7.0, 7.0), 3.0)
        assert isinstance(i, int) and isinstance(j, int)

    def test_large_quotient_is_exact_int(self):
        """Cell indices are unbounded ints (no 32-bit wraparound)."""
        i, _ = cell_coordinate(Point(1e12, 0.0), 1e-3)
        assert i == math.floor(1e12 / 1e-3)

    @pytest.mark.parametrize("r", [0.0, -1.0, math.nan])
    def test_rejects_bad_cell_size(self, r):
        with pytest.raises(NumericDegeneracy, match="Cell size must be positive"):
            cell_coordinate(Point(1.0, 1.0), r)

    def test_infinite_cell_size_is_one_cell(self):
        assert cell_coordinate(Point(-1e300, 1e300), math.inf) == (0, 0)

    def test_rejects_overflowing_quotient(self):
        with pytest.raises(NumericDegeneracy, match="Cannot bucket"):
            cell_coordinate(Point(1e308, 0.0), 1e-10)

    def test_min_cell_size_keeps_quotients_finite(self, points_from):
        points = points_from([(1e10, 0), (-1e308, 1e-300), (0, 0)])
        floor = min_cell_size(points)
        assert floor == pytest.approx(1e308 / MAX_CELL_QUOTIENT)
        for p in points:
            i, j = cell_coordinate(p, floor)
            assert abs(i) <= MAX_CELL_QUOTIENT + 1
            assert abs(j) <= MAX_CELL_QUOTIENT + 1

    def test_min_cell_size_of_origin_points(self, points_from):
        assert min_cell_size(points_from([(0, 0), (0, 0)])) == 0.0


class TestNeighborhood:
    """Tests for the 3x3 neighborhood."""

    def test_num_neighbors(self):
        assert NUM_NEIGHBORS == 9
        assert len(NEIGHBOR_OFFSETS) == 9

    def test_offsets_cover_block(self):
        assert set(NEIGHBOR_OFFSETS) == {(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1)}

    def test_center_is_index_4(self):
        assert NEIGHBOR_OFFSETS[4] == (0, 0)

    def test_neighborhood_cells(self):
        cells = list(neighborhood((5, -2)))
        assert len(cells) == 9
        assert (5, -2) in cells
        assert (4, -3) in cells and (6, -1) in cells


class TestValidatePoints:
    """Tests for boundary validation."""

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgument, match="need at least 2 points"):
            validate_points([])

    def test_single_point_rejected(self):
        with pytest.raises(InvalidArgument, match="have 1"):
            validate_points([Point(0.0, 0.0)])

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgument, ValueError)

    def test_two_points_accepted(self):
        validate_points([Point(0.0, 0.0), Point(1.0, 1.0)])

    def test_nan_rejected(self):
        with pytest.raises(NumericDegeneracy, match="Point 1"):
            validate_points([Point(0.0, 0.0), Point(math.nan, 1.0)])

    def test_infinity_rejected(self):
        with pytest.raises(NumericDegeneracy):
            validate_points([Point(0.0, 0.0), Point(1.0, 1.0), Point(-math.inf, 0.0)])
