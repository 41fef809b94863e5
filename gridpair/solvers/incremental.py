"""Protocol-compliant wrapper around the incremental grid search."""

from typing import Sequence

from gridpair.closest_pair import IncrementalClosestPair, insertion_order
from gridpair.core.point import Point
from gridpair.core.result import PairResult
from gridpair.diagnostics import GridStats


class GridSolver:
    """Incremental dynamic-grid solver.

    Implements the ClosestPairSolver protocol. Keeps the stats of the most
    recent solve for inspection.
    """

    def __init__(self, shuffle: bool = False, seed: int | None = None):
        self.shuffle = shuffle
        self.seed = seed
        self.last_stats: GridStats | None = None

    @property
    def name(self) -> str:
        return "grid"

    def solve(self, points: Sequence[Point]) -> PairResult:
        search = IncrementalClosestPair(
            points, insertion_order(len(points), self.shuffle, self.seed)
        )
        result = search.run()
        self.last_stats = search.stats
        return result
