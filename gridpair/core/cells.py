"""Cell coordinates and neighbor indexing for the closest-pair grid.

This module centralizes the bucketing logic:
- cell_coordinate: Map a point to its integer cell for a given cell size
- min_cell_size: Floor on the cell size that keeps cell indices finite
- NEIGHBOR_OFFSETS: The 3x3 neighborhood scanned by lookups
- validate_points: Boundary checks shared by all solvers

3x3 Neighborhood Layout (index into NEIGHBOR_OFFSETS):
    Index:  6  7  8      (+y)
            3  4  5
            0  1  2      (-y)
          (-x)    (+x)

    Index 4 is the query cell itself. With cell size equal to the current
    minimum distance, any point closer than that distance lies in one of
    these nine cells.
"""

import math
from typing import Iterator, Sequence

from gridpair.core.errors import InvalidArgument, NumericDegeneracy
from gridpair.core.point import Point

# Number of cells scanned per lookup
NUM_NEIGHBORS: int = 9

# (di, dj) offsets, row-major from the lower-left neighbor
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (di, dj) for dj in (-1, 0, 1) for di in (-1, 0, 1)
)

Cell = tuple[int, int]


# Largest cell index magnitude the grid will produce (see min_cell_size)
MAX_CELL_QUOTIENT: float = 1e300


def cell_coordinate(p: Point, r: float) -> Cell:
    """Get the cell containing p on a grid of cell size r.

    Args:
        p: Point to bucket
        r: Cell size (the current minimum distance). An infinite size puts
            every finite point in cell (0, 0).

    Returns:
        (floor(x / r), floor(y / r))

    Raises:
        NumericDegeneracy: If r is not positive, or a quotient overflows to
            infinity (use a cell size of at least min_cell_size)
    """
    if not r > 0:
        raise NumericDegeneracy(f"Cell size must be positive, got {r}")
    qx = p.x / r
    qy = p.y / r
    if not (math.isfinite(qx) and math.isfinite(qy)):
        raise NumericDegeneracy(
            f"Cannot bucket point ({p.x}, {p.y}) at cell size {r}"
        )
    return (math.floor(qx), math.floor(qy))


def min_cell_size(points: Sequence[Point]) -> float:
    """Smallest cell size at which every point has a finite cell index.

    Any cell size at least as large as the minimum distance keeps closer
    points inside the 3x3 block, so the grid stops shrinking its cells at
    this floor when the minimum distance is tiny compared to the
    coordinates.
    """
    largest = max((max(abs(p.x), abs(p.y)) for p in points), default=0.0)
    return largest / MAX_CELL_QUOTIENT


def neighborhood(cell: Cell) -> Iterator[Cell]:
    """Yield the nine cells of the 3x3 block centered on cell."""
    i, j = cell
    for di, dj in NEIGHBOR_OFFSETS:
        yield (i + di, j + dj)


def validate_points(points: Sequence[Point]) -> None:
    """Check a point sequence can be searched.

    Raises:
        InvalidArgument: If fewer than 2 points are supplied
        NumericDegeneracy: If any coordinate is NaN or infinite
    """
    if len(points) < 2:
        raise InvalidArgument(
            f"need at least 2 points to find closest pair, have {len(points)}"
        )
    for k, p in enumerate(points):
        if not p.is_finite():
            raise NumericDegeneracy(f"Point {k} has non-finite coordinates ({p.x}, {p.y})")
