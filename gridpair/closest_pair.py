"""Incremental closest-pair driver.

Seeds a Grid from the first two points and folds the rest in one at a time,
shrinking the grid's cell size whenever a closer pair turns up.

States:
    UNINITIALIZED -> SEEDED -> FOLDING -> DONE

    seed():      validate input; exactly two points go straight to DONE
    fold_next(): fold one point; DONE after the last one
    run():       seed and fold everything, polling should_stop between points

Coincident points end the search as soon as they are found: no pair can be
closer than zero, and zero is not a usable cell size.
"""

from enum import Enum, auto
from typing import Callable, Sequence

import numpy as np

from gridpair.core.cells import validate_points
from gridpair.core.errors import SearchCancelled
from gridpair.core.point import Point
from gridpair.core.result import PairResult
from gridpair.diagnostics import GridStats
from gridpair.grid import Grid


class DriverState(Enum):
    """Lifecycle of one closest-pair search."""

    UNINITIALIZED = auto()
    SEEDED = auto()
    FOLDING = auto()
    DONE = auto()


def insertion_order(n: int, shuffle: bool = False, seed: int | None = None) -> list[int]:
    """Order in which point indices are folded into the grid.

    Args:
        n: Number of points
        shuffle: Fold in a random permutation instead of input order
        seed: Random seed for the permutation (None for fresh entropy)
    """
    if not shuffle:
        return list(range(n))
    rng = np.random.default_rng(seed)
    return [int(k) for k in rng.permutation(n)]


class IncrementalClosestPair:
    """One run of the grid closest-pair search over a point sequence.

    Example:
        search = IncrementalClosestPair(points)
        result = search.run()
        p, q = result.points(points)
    """

    def __init__(self, points: Sequence[Point], order: Sequence[int] | None = None):
        self.points = points
        if order is None:
            self.order = list(range(len(points)))
        else:
            self.order = list(order)
            if sorted(self.order) != list(range(len(points))):
                raise ValueError("order must be a permutation of the point indices")

        self.state = DriverState.UNINITIALIZED
        self.stats = GridStats()
        self.grid: Grid | None = None
        self._next = 2
        self._result: PairResult | None = None

    @property
    def remaining(self) -> int:
        """Points not yet folded into the grid."""
        if self.state is DriverState.DONE:
            return 0
        return max(len(self.order) - self._next, 0)

    def seed(self) -> DriverState:
        """Validate the input and build the grid from the first two points.

        Raises:
            InvalidArgument: Fewer than 2 points
            NumericDegeneracy: A coordinate is NaN or infinite
            RuntimeError: If already seeded
        """
        if self.state is not DriverState.UNINITIALIZED:
            raise RuntimeError(f"Cannot seed in state {self.state.name}")

        validate_points(self.points)
        first, second = self.order[0], self.order[1]

        if len(self.points) == 2:
            self._finish(first, second, self.points[first].distance(self.points[second]))
            return self.state

        self.grid = Grid(self.points, first, second, self.stats)
        if self.grid.is_exact:
            self._finish_from_grid()
            return self.state

        # The seed pair is stored like any other point; at distance
        # min_dist it can never be reported as closer than itself.
        self.grid.insert_point(first)
        self.grid.insert_point(second)
        self.state = DriverState.SEEDED
        return self.state

    def fold_next(self) -> bool:
        """Fold the next point into the grid.

        Returns:
            True if the point formed a new closest pair (grid rebuilt)
        """
        if self.state not in (DriverState.SEEDED, DriverState.FOLDING):
            raise RuntimeError(f"Cannot fold in state {self.state.name}")

        self.state = DriverState.FOLDING
        index = self.order[self._next]
        self._next += 1

        rebuilt = self.grid.insert(index)
        if self.grid.is_exact or self._next >= len(self.order):
            self._finish_from_grid()
        return rebuilt

    def run(self, should_stop: Callable[[], bool] | None = None) -> PairResult:
        """Run the search to completion.

        Args:
            should_stop: Polled before each point is folded; returning True
                aborts the search

        Returns:
            PairResult of the closest pair

        Raises:
            SearchCancelled: If should_stop returned True
        """
        if self.state is DriverState.UNINITIALIZED:
            self.seed()

        while self.state is not DriverState.DONE:
            if should_stop is not None and should_stop():
                raise SearchCancelled(
                    f"Search stopped after {self._next} of {len(self.order)} points"
                )
            self.fold_next()

        return self.result()

    def result(self) -> PairResult:
        if self.state is not DriverState.DONE:
            raise RuntimeError(f"No result in state {self.state.name}")
        return self._result

    def _finish_from_grid(self) -> None:
        i, j = self.grid.min_pair
        self._finish(i, j, self.grid.min_dist)

    def _finish(self, i: int, j: int, distance: float) -> None:
        self._result = PairResult(i, j, distance)
        self.state = DriverState.DONE


def closest_pair_with_stats(
    points: Sequence[Point],
    shuffle: bool = False,
    seed: int | None = None,
) -> tuple[PairResult, GridStats]:
    """Closest pair plus the grid's work counters."""
    search = IncrementalClosestPair(points, insertion_order(len(points), shuffle, seed))
    result = search.run()
    return result, search.stats


def closest_pair_indices(
    points: Sequence[Point],
    shuffle: bool = False,
    seed: int | None = None,
) -> PairResult:
    """
    Find the two closest points by index.

    Args:
        points: At least two points
        shuffle: Fold points in random order (expected-linear time on any input)
        seed: Seed for the shuffle

    Returns:
        PairResult with indices into points and their distance

    Raises:
        InvalidArgument: Fewer than 2 points
        NumericDegeneracy: A coordinate is NaN or infinite
    """
    result, _ = closest_pair_with_stats(points, shuffle=shuffle, seed=seed)
    return result


def closest_pair(
    points: Sequence[Point],
    shuffle: bool = False,
    seed: int | None = None,
) -> tuple[Point, Point]:
    """Return the two closest points (the caller's own objects, unordered)."""
    return closest_pair_indices(points, shuffle=shuffle, seed=seed).points(points)
