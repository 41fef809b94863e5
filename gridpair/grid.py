"""Spatial hash grid whose cell size tracks the closest distance found so far.

The grid stores indices into the caller's point sequence, keyed by
cell_coordinate at cell size ``min_dist``. Because the cell size is at least
the best known distance, any point closer than that distance to a query point
lies in the query's 3x3 neighborhood, so a lookup touches at most nine cells.
When ``min_dist`` is so small relative to the coordinates that cell indices
would overflow, cells stop shrinking at ``min_cell_size``.

When a lookup finds a strictly closer pair the whole table is drained and
re-indexed at the new, smaller cell size. A rebuild costs O(stored points),
but for a randomly ordered input the expected total over all rebuilds is
O(N): the i-th point shrinks the minimum with probability at most 2/i.
"""

from typing import Sequence

from gridpair.core.cells import Cell, cell_coordinate, min_cell_size, neighborhood
from gridpair.core.point import Point
from gridpair.diagnostics import GridStats


class Grid:
    """Grid of point indices at cell size ``min_dist``.

    Attributes:
        points: The caller's sequence (never copied or mutated)
        table: Cell -> point indices in insertion order
        min_dist: Distance of ``min_pair``
        floor: Smallest cell size that keeps cell indices finite
        min_pair: Indices of the closest pair found so far
        stats: Work counters

    Invariant: no two stored points in the same or adjacent cells are closer
    than ``min_dist``, except the ``min_pair`` itself. Every stored index
    appears exactly once.
    """

    def __init__(
        self,
        points: Sequence[Point],
        first: int,
        second: int,
        stats: GridStats | None = None,
    ):
        self.points = points
        self.table: dict[Cell, list[int]] = {}
        self.min_dist = points[first].distance(points[second])
        self.min_pair = (first, second)
        self.floor = min_cell_size(points)
        self.stats = stats if stats is not None else GridStats()
        self.stats.distance_history.append(self.min_dist)

    def __len__(self) -> int:
        """Number of stored point indices."""
        return sum(len(bucket) for bucket in self.table.values())

    @property
    def cell_count(self) -> int:
        return len(self.table)

    @property
    def cell_size(self) -> float:
        """Bucketing cell size: ``min_dist``, but never below ``floor``."""
        if self.is_exact:
            return 0.0
        return max(self.min_dist, self.floor)

    @property
    def is_exact(self) -> bool:
        """True once coincident points were found; nothing can be closer."""
        return self.min_dist == 0

    def cell_of(self, index: int) -> Cell:
        return cell_coordinate(self.points[index], self.cell_size)

    def stored_indices(self) -> list[int]:
        """All stored indices, cell by cell in insertion order."""
        return [k for bucket in self.table.values() for k in bucket]

    def insert_point(self, index: int) -> None:
        """Place a point index in its cell without looking for neighbors."""
        self.table.setdefault(self.cell_of(index), []).append(index)

    def lookup(self, index: int) -> tuple[int, float] | None:
        """
        Find the stored point closest to points[index] within the 3x3 block.

        Args:
            index: Index of the query point (must not be stored)

        Returns:
            (closer_index, distance) if that distance is strictly less than
            ``min_dist``, otherwise None. The first candidate found wins ties.
        """
        p = self.points[index]
        self.stats.lookups += 1

        best_index = None
        best_dist = self.min_dist
        for cell in neighborhood(self.cell_of(index)):
            bucket = self.table.get(cell)
            if bucket is None:
                continue
            self.stats.cells_scanned += 1
            self.stats.candidates_checked += len(bucket)
            for q in bucket:
                d = p.distance(self.points[q])
                if d < best_dist:
                    best_index, best_dist = q, d

        if best_index is None:
            return None
        return best_index, best_dist

    def insert(self, index: int) -> bool:
        """
        Fold a new point into the grid.

        If a stored point is strictly closer than ``min_dist`` the grid is
        rebuilt around the new pair; otherwise the point is simply stored.

        Args:
            index: Index of the point to fold in

        Returns:
            True if the insertion triggered a rebuild
        """
        self.stats.points_folded += 1
        found = self.lookup(index)
        if found is None:
            self.insert_point(index)
            return False

        closer, distance = found
        self.rebuild(index, closer, distance)
        return True

    def rebuild(self, index: int, closer: int, distance: float) -> None:
        """
        Drain the table and re-index everything at a smaller cell size.

        Args:
            index: The newly folded point (not yet stored)
            closer: Stored point that forms the new closest pair with index
            distance: Their distance, strictly below the current ``min_dist``
        """
        if not distance < self.min_dist:
            raise ValueError(
                f"Rebuild needs a strictly smaller distance: {distance} >= {self.min_dist}"
            )

        indices = self.stored_indices()
        indices.append(index)

        self.table.clear()
        self.min_dist = distance
        self.min_pair = (index, closer)
        self.stats.record_rebuild(distance, len(indices))

        # Coincident points: the search is over and zero cannot be a cell size
        if self.is_exact:
            return

        for k in indices:
            self.insert_point(k)
