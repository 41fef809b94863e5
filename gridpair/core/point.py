"""Immutable 2D point with vector arithmetic.

Points are plain values. The search algorithms never copy them: they refer
to points by their index in the caller's sequence.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np


@dataclass(frozen=True)
class Point:
    """A point in the plane.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate

    Arithmetic operators act component-wise and return new points.
    """

    x: float
    y: float

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Point":
        """Build a point from an (x, y) pair."""
        x, y = values
        return cls(x, y)

    def distance_squared(self, other: "Point") -> float:
        diff = (self - other) * (self - other)
        return diff.x + diff.y

    def distance(self, other: "Point") -> float:
        """Euclidean distance to another point.

        Computed with math.hypot, so spacings whose squares would overflow
        or underflow a float still come out exact to rounding.
        """
        return math.hypot(self.x - other.x, self.y - other.y)

    def dot(self, other: "Point") -> float:
        """Dot product with another point viewed as a vector."""
        return self.x * other.x + self.y * other.y

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, other: "Point") -> "Point":
        return Point(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: "Point") -> "Point":
        return Point(self.x / other.x, self.y / other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y


def points_from_array(arr: np.ndarray) -> list[Point]:
    """
    Convert an (N, 2) coordinate array into a list of points.

    Args:
        arr: Array-like of shape (N, 2)

    Returns:
        List of N points, in row order

    Raises:
        ValueError: If the array is not two-dimensional with two columns
    """
    arr = np.asarray(arr, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) array, got shape {arr.shape}")
    return [Point(float(x), float(y)) for x, y in arr]


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Stack points into an (N, 2) float64 array."""
    arr = np.empty((len(points), 2), dtype=np.float64)
    for k, p in enumerate(points):
        arr[k, 0] = p.x
        arr[k, 1] = p.y
    return arr
