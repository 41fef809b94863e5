"""Pytest fixtures and test utilities for gridpair."""


import numpy as np
import pytest

from gridpair.config import init_taichi
from gridpair.core import Point, points_from_array


@pytest.fixture(scope="session", autouse=True)
def taichi_init():
    """Initialize Taichi once per test session with CPU backend."""
    init_taichi(backend="cpu", debug=True)
    yield


@pytest.fixture
def diagonal_points():
    """Five points on the diagonal; closest pair is (0,0)-(1,1)."""
    return make_points([(0, 0), (10, 10), (7, 7), (5, 5), (1, 1)])


@pytest.fixture
def uniform_points():
    """Factory for uniform random points in the unit square."""
    return make_uniform_points


@pytest.fixture
def lattice_points():
    """Factory for an integer lattice in row-major order."""
    return make_lattice_points


def make_points(coords) -> list[Point]:
    """Build points from (x, y) tuples."""
    return [Point(float(x), float(y)) for x, y in coords]


def make_uniform_points(n: int, seed: int = 0, low: float = 0.0, high: float = 1.0) -> list[Point]:
    """n uniform random points in [low, high)^2."""
    rng = np.random.default_rng(seed)
    return points_from_array(rng.uniform(low, high, size=(n, 2)))


def make_lattice_points(rows: int, cols: int, spacing: float = 1.0) -> list[Point]:
    """Lattice points (i, j) * spacing, row by row."""
    return [Point(i * spacing, j * spacing) for i in range(rows) for j in range(cols)]


@pytest.fixture
def brute_force_min():
    """Minimum pairwise distance by exhaustive comparison."""
    return min_pairwise_distance


def min_pairwise_distance(points) -> float:
    """O(N^2) minimum distance, independent of the library's oracle."""
    arr = np.array([[p.x, p.y] for p in points], dtype=np.float64)
    diff = arr[:, None, :] - arr[None, :, :]
    d = np.hypot(diff[..., 0], diff[..., 1])
    np.fill_diagonal(d, np.inf)
    return float(d.min())


@pytest.fixture
def points_from():
    """Factory building points from (x, y) tuples."""
    return make_points
