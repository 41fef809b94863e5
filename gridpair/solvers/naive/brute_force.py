"""
Naive brute-force solver.

Compares every pair once, in lexicographic (i, j) order, keeping the first
pair that attains the minimum. O(N^2): the ground truth for equivalence
testing of the grid solver.
"""

from typing import Sequence

from gridpair.core.cells import validate_points
from gridpair.core.point import Point
from gridpair.core.result import PairResult


def brute_force_pair(points: Sequence[Point]) -> PairResult:
    """Closest pair by exhaustive comparison.

    Raises:
        InvalidArgument: Fewer than 2 points
        NumericDegeneracy: A coordinate is NaN or infinite
    """
    validate_points(points)

    best_i, best_j = 0, 1
    best = points[0].distance(points[1])
    n = len(points)

    for i in range(n - 1):
        p = points[i]
        for j in range(i + 1, n):
            d = p.distance(points[j])
            if d < best:
                best_i, best_j, best = i, j, d

    return PairResult(best_i, best_j, best)


class BruteForceSolver:
    """Naive implementation of the closest pair.

    Implements the ClosestPairSolver protocol.
    """

    @property
    def name(self) -> str:
        return "brute_force"

    def solve(self, points: Sequence[Point]) -> PairResult:
        return brute_force_pair(points)
