"""
Tests for solver equivalence: grid vs brute-force implementations.

These tests verify that the grid solver finds a pair at the same distance
as both naive references, and that the naive references agree with each
other exactly.
"""

import numpy as np
import pytest

from gridpair.core import Point
from gridpair.solvers import BruteForceSolver, GridSolver, TaichiBruteForceSolver
from gridpair.solvers.naive import brute_force_pair, taichi_brute_force_pair
from gridpair.solvers.naive.taichi_brute_force import min_pair_kernel


class TestNaiveReferences:
    """The two brute-force solvers."""

    def test_brute_force_scenario(self, diagonal_points):
        result = brute_force_pair(diagonal_points)
        assert result.indices == (0, 4)

    def test_taichi_scenario(self, diagonal_points):
        result = taichi_brute_force_pair(diagonal_points)
        assert result.indices == (0, 4)
        assert result.distance == pytest.approx(np.sqrt(2))

    def test_brute_force_first_pair_wins_ties(self, lattice_points):
        assert brute_force_pair(lattice_points(3, 3)).indices == (0, 1)
        assert taichi_brute_force_pair(lattice_points(3, 3)).indices == (0, 1)

    def test_kernel_returns_distance(self):
        xs = np.array([0.0, 10.0, 7.0], dtype=np.float64)
        ys = np.array([0.0, 10.0, 7.0], dtype=np.float64)
        best = np.array([0, 1], dtype=np.int32)
        d = min_pair_kernel(xs, ys, best, 200.0)
        assert d == pytest.approx(np.sqrt(18.0))
        assert list(best) == [1, 2]

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_naive_references_agree(self, uniform_points, seed):
        points = uniform_points(150, seed=seed)
        py = brute_force_pair(points)
        ti_result = taichi_brute_force_pair(points)
        assert ti_result.indices == py.indices
        assert ti_result.distance == py.distance

    @pytest.mark.parametrize("scale", [1e200, 1e-300])
    def test_naive_references_agree_at_extreme_scales(self, uniform_points, scale):
        """Squared distances would overflow or underflow at these scales."""
        points = [Point(p.x * scale, p.y * scale) for p in uniform_points(60, seed=7)]
        py = brute_force_pair(points)
        ti_result = taichi_brute_force_pair(points)
        assert ti_result.indices == py.indices
        assert ti_result.distance == py.distance
        assert 0.0 < py.distance < np.inf


class TestGridMatchesNaive:
    """Grid solver against both references."""

    @pytest.mark.parametrize("n", [3, 5, 50, 400])
    @pytest.mark.parametrize("seed", [0, 1])
    def test_uniform(self, uniform_points, n, seed):
        points = uniform_points(n, seed=seed)
        grid = GridSolver().solve(points)
        brute = BruteForceSolver().solve(points)
        taichi = TaichiBruteForceSolver().solve(points)

        assert grid.distance == pytest.approx(brute.distance, rel=1e-12)
        assert grid.distance == pytest.approx(taichi.distance, rel=1e-12)
        # Random coordinates have a unique closest pair
        assert grid.same_pair(brute)

    def test_duplicates(self):
        rng = np.random.default_rng(17)
        points = [Point(float(x), float(y)) for x, y in rng.integers(0, 8, size=(80, 2))]
        assert GridSolver().solve(points).distance == 0.0
        assert BruteForceSolver().solve(points).distance == 0.0
        assert TaichiBruteForceSolver().solve(points).distance == 0.0

    def test_shuffled_grid(self, uniform_points):
        points = uniform_points(300, seed=4)
        grid = GridSolver(shuffle=True, seed=2).solve(points)
        assert grid.same_pair(BruteForceSolver().solve(points))

    @pytest.mark.parametrize("scale", [1e200, 1e-300])
    def test_extreme_scales(self, uniform_points, scale):
        points = [Point(p.x * scale, p.y * scale) for p in uniform_points(200, seed=9)]
        grid = GridSolver().solve(points)
        brute = BruteForceSolver().solve(points)
        assert grid.same_pair(brute)
        assert grid.distance == brute.distance
