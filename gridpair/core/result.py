"""Result type shared by every closest-pair solver."""

from dataclasses import dataclass
from typing import Sequence

from gridpair.core.point import Point


@dataclass(frozen=True)
class PairResult:
    """The closest pair found by a solver.

    Attributes:
        i: Index of the first point in the caller's sequence
        j: Index of the second point (always != i)
        distance: Euclidean distance between the two points

    The pair is unordered; i and j appear in discovery order.
    """

    i: int
    j: int
    distance: float

    def __post_init__(self):
        if self.i == self.j:
            raise ValueError(f"A pair needs two distinct indices, got ({self.i}, {self.j})")

    @property
    def indices(self) -> tuple[int, int]:
        return (self.i, self.j)

    def points(self, points: Sequence[Point]) -> tuple[Point, Point]:
        """Resolve the indices against the sequence they were computed from."""
        return points[self.i], points[self.j]

    def same_pair(self, other: "PairResult") -> bool:
        """True if both results name the same two indices, in any order."""
        return {self.i, self.j} == {other.i, other.j}
