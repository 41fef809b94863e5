"""
Solver protocol definitions for swappable closest-pair implementations.

Protocols define the interface that the grid solver and the brute-force
reference solvers implement, enabling variant selection at runtime.

Each solver has:
- solve() method: Find the closest pair in a point sequence
- name property: Short identifier used by the CLI and reports
"""

from enum import Enum
from typing import Protocol, Sequence, runtime_checkable

from gridpair.core.point import Point
from gridpair.core.result import PairResult


class SolverVariant(Enum):
    """Available solver implementation variants."""

    GRID = "grid"  # Incremental dynamic grid, expected O(N)
    BRUTE_FORCE = "brute_force"  # Reference O(N^2) in Python
    TAICHI_BRUTE_FORCE = "taichi_brute_force"  # Reference O(N^2) Taichi kernel

    @classmethod
    def from_name(cls, name: str) -> "SolverVariant":
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(
                f"Unknown solver: {name}. Available: {[v.value for v in cls]}"
            ) from None


@runtime_checkable
class ClosestPairSolver(Protocol):
    """Protocol for closest-pair solvers.

    All solvers validate input the same way: fewer than two points raises
    InvalidArgument, non-finite coordinates raise NumericDegeneracy, and
    exactly two points are returned as-is.
    """

    def solve(self, points: Sequence[Point]) -> PairResult:
        """Find the closest pair.

        Args:
            points: At least two points

        Returns:
            PairResult with indices into points
        """
        ...

    @property
    def name(self) -> str:
        """Solver identifier."""
        ...
