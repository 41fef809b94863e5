"""Core infrastructure: points, cells, errors, and result types."""

from gridpair.core.cells import (
    NEIGHBOR_OFFSETS,
    NUM_NEIGHBORS,
    cell_coordinate,
    min_cell_size,
    neighborhood,
    validate_points,
)
from gridpair.core.dtypes import DTYPE
from gridpair.core.errors import InvalidArgument, NumericDegeneracy, SearchCancelled
from gridpair.core.point import Point, points_from_array, points_to_array
from gridpair.core.result import PairResult

__all__ = [
    "DTYPE",
    "NEIGHBOR_OFFSETS",
    "NUM_NEIGHBORS",
    "cell_coordinate",
    "min_cell_size",
    "neighborhood",
    "validate_points",
    "InvalidArgument",
    "NumericDegeneracy",
    "SearchCancelled",
    "Point",
    "points_from_array",
    "points_to_array",
    "PairResult",
]
