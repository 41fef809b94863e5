"""Search statistics and oracle checks.

Simple counters for the amortized-cost argument and a brute-force
cross-check for verifying results.
"""

import math
from dataclasses import dataclass, field
from typing import Sequence

from gridpair.core.point import Point
from gridpair.core.result import PairResult


@dataclass
class GridStats:
    """Tracks work done by one grid search."""

    points_folded: int = 0  # points passed to Grid.insert
    lookups: int = 0  # 3x3 neighborhood scans
    cells_scanned: int = 0  # occupied cells visited by lookups
    candidates_checked: int = 0  # distance evaluations in lookups
    rebuilds: int = 0  # full re-indexes after a closer pair
    points_reindexed: int = 0  # indices re-inserted across all rebuilds
    distance_history: list[float] = field(default_factory=list)  # min_dist after seeding and each rebuild

    @property
    def reindex_ratio(self) -> float:
        """Re-indexed points per folded point (O(1) expected for random order)."""
        return self.points_reindexed / max(self.points_folded, 1)

    def record_rebuild(self, new_distance: float, reindexed: int) -> None:
        self.rebuilds += 1
        self.points_reindexed += reindexed
        self.distance_history.append(new_distance)

    def summary(self) -> str:
        return (
            f"folded={self.points_folded} lookups={self.lookups} "
            f"rebuilds={self.rebuilds} reindexed={self.points_reindexed} "
            f"candidates={self.candidates_checked} "
            f"reindex_ratio={self.reindex_ratio:.3f}"
        )


def brute_force_distance(points: Sequence[Point]) -> float:
    """Minimum pairwise distance by O(N^2) comparison."""
    best = math.inf
    n = len(points)
    for a in range(n - 1):
        pa = points[a]
        for b in range(a + 1, n):
            d = pa.distance(points[b])
            if d < best:
                best = d
    return best


def check_against_oracle(
    points: Sequence[Point],
    result: PairResult,
    rtol: float = 1e-9,
    atol: float = 1e-12,
) -> float:
    """Check a result against the brute-force minimum distance.

    Args:
        points: The sequence the result was computed from
        result: Solver output
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Absolute difference between the reported and true minimum

    Raises:
        AssertionError: If the result is not a closest pair
    """
    expected = brute_force_distance(points)
    p, q = result.points(points)
    actual = p.distance(q)
    error = abs(actual - expected)
    tol = atol + rtol * abs(expected)

    if error > tol or abs(result.distance - actual) > tol:
        raise AssertionError(
            f"Closest pair check failed!\n"
            f"  Pair:     ({result.i}, {result.j})\n"
            f"  Reported: {result.distance:.12e}\n"
            f"  Actual:   {actual:.12e}\n"
            f"  Expected: {expected:.12e}\n"
            f"  Error:    {error:.6e} (tolerance: {tol:.6e})"
        )

    return error
