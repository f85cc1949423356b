"""
Unit tests for spatial utilities (toroidal grid math).

Tests cover:
- Toroidal wrapping (floored modulo for negative coordinates)
- Neighbor enumeration (always 8, deterministic, wrapped)
- Degenerate grids (width or height <= 2)
"""

import pytest

from conway.utils.spatial import (
    NEIGHBOR_OFFSETS,
    in_bounds,
    neighbors,
    toroidal_wrap,
)


# ---------------------------------------------------------------------------
# Toroidal Wrap
# ---------------------------------------------------------------------------

class TestToroidalWrap:
    def test_within_bounds(self):
        assert toroidal_wrap(5, 10, 64, 64) == (5, 10)

    def test_at_boundary(self):
        assert toroidal_wrap(64, 64, 64, 64) == (0, 0)

    def test_negative_x(self):
        assert toroidal_wrap(-1, 0, 64, 64) == (63, 0)

    def test_negative_y(self):
        assert toroidal_wrap(0, -1, 64, 64) == (0, 63)

    def test_large_negative(self):
        assert toroidal_wrap(-65, -129, 64, 64) == (63, 63)

    def test_non_square(self):
        assert toroidal_wrap(-1, -1, 10, 4) == (9, 3)
        assert toroidal_wrap(10, 4, 10, 4) == (0, 0)

    @pytest.mark.parametrize("x", range(-20, 20))
    def test_result_always_in_bounds(self, x):
        assert in_bounds(*toroidal_wrap(x, -x, 7, 5), 7, 5)


# ---------------------------------------------------------------------------
# Neighbors
# ---------------------------------------------------------------------------

class TestNeighbors:
    def test_offsets_exclude_center(self):
        assert len(NEIGHBOR_OFFSETS) == 8
        assert (0, 0) not in NEIGHBOR_OFFSETS
        assert len(set(NEIGHBOR_OFFSETS)) == 8

    def test_interior_cell(self):
        result = neighbors(5, 5, 64, 64)
        assert len(result) == 8
        assert set(result) == {
            (4, 4), (5, 4), (6, 4),
            (4, 5),         (6, 5),
            (4, 6), (5, 6), (6, 6),
        }

    def test_corner_wraps(self):
        result = set(neighbors(0, 0, 10, 8))
        assert (9, 7) in result
        assert (9, 0) in result
        assert (0, 7) in result
        assert (1, 1) in result

    def test_opposite_corner_wraps_back(self):
        assert (0, 0) in neighbors(9, 7, 10, 8)

    def test_deterministic_order(self):
        assert neighbors(3, 4, 10, 10) == neighbors(3, 4, 10, 10)

    def test_all_in_bounds(self):
        for x, y in neighbors(0, 0, 3, 3):
            assert in_bounds(x, y, 3, 3)

    def test_two_wide_grid_has_duplicates(self):
        result = neighbors(0, 0, 2, 2)
        assert len(result) == 8
        assert result.count((1, 1)) == 4

    def test_one_wide_grid_includes_self(self):
        result = neighbors(0, 0, 1, 1)
        assert result == [(0, 0)] * 8
