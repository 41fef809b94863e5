"""
Naive brute-force solver as a Taichi kernel.

Same comparison order and tie-breaking as the pure-Python reference. The
pair loop is serialized, so results are deterministic and the search is
not parallelized.
"""

from typing import Sequence

import numpy as np
import taichi as ti

from gridpair.core.cells import validate_points
from gridpair.core.dtypes import DTYPE
from gridpair.core.point import Point, points_to_array
from gridpair.core.result import PairResult


@ti.func
def scaled_hypot(dx: DTYPE, dy: DTYPE) -> DTYPE:
    """sqrt(dx^2 + dy^2) without squaring the larger component."""
    big = ti.max(ti.abs(dx), ti.abs(dy))
    small = ti.min(ti.abs(dx), ti.abs(dy))
    d = big
    if big > 0.0:
        ratio = small / big
        d = big * ti.sqrt(1.0 + ratio * ratio)
    return d


@ti.kernel
def min_pair_kernel(
    xs: ti.types.ndarray(dtype=DTYPE, ndim=1),
    ys: ti.types.ndarray(dtype=DTYPE, ndim=1),
    best: ti.types.ndarray(dtype=ti.i32, ndim=1),
    seed_d: DTYPE,
) -> DTYPE:
    """
    Scan all pairs (i < j) for the smallest distance.

    best must hold the seed pair on entry and receives the closest pair.
    Returns the smallest distance.
    """
    n = xs.shape[0]
    best_d = seed_d

    ti.loop_config(serialize=True)
    for i in range(n - 1):
        for j in range(i + 1, n):
            d = scaled_hypot(xs[i] - xs[j], ys[i] - ys[j])
            if d < best_d:
                best_d = d
                best[0] = i
                best[1] = j

    return best_d


def taichi_brute_force_pair(points: Sequence[Point]) -> PairResult:
    """Closest pair by exhaustive comparison on the Taichi backend.

    Raises:
        InvalidArgument: Fewer than 2 points
        NumericDegeneracy: A coordinate is NaN or infinite
    """
    validate_points(points)

    coords = points_to_array(points)
    xs = np.ascontiguousarray(coords[:, 0])
    ys = np.ascontiguousarray(coords[:, 1])
    best = np.array([0, 1], dtype=np.int32)
    seed_d = points[0].distance(points[1])

    if len(points) > 2:
        min_pair_kernel(xs, ys, best, seed_d)

    i, j = int(best[0]), int(best[1])
    return PairResult(i, j, points[i].distance(points[j]))


class TaichiBruteForceSolver:
    """Naive closest pair on the Taichi backend.

    Implements the ClosestPairSolver protocol. Taichi must be initialized
    (see gridpair.config.init_taichi) before solve() is called.
    """

    @property
    def name(self) -> str:
        return "taichi_brute_force"

    def solve(self, points: Sequence[Point]) -> PairResult:
        return taichi_brute_force_pair(points)
