"""
gridpair: expected-linear-time closest pair of points in the plane.

Implements the randomized incremental grid algorithm: a spatial hash whose
cell size tracks the best distance found so far.
"""

from gridpair.closest_pair import (
    IncrementalClosestPair,
    closest_pair,
    closest_pair_indices,
    closest_pair_with_stats,
)
from gridpair.core import (
    InvalidArgument,
    NumericDegeneracy,
    PairResult,
    Point,
    SearchCancelled,
)

__version__ = "0.1.0"

__all__ = [
    "IncrementalClosestPair",
    "closest_pair",
    "closest_pair_indices",
    "closest_pair_with_stats",
    "InvalidArgument",
    "NumericDegeneracy",
    "PairResult",
    "Point",
    "SearchCancelled",
]
