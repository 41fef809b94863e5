"""Error types raised at the boundary of the closest-pair search."""


class InvalidArgument(ValueError):
    """Input cannot be searched (fewer than two points)."""


class NumericDegeneracy(ArithmeticError):
    """A coordinate or cell size cannot be bucketed (NaN, infinity, overflow)."""


class SearchCancelled(RuntimeError):
    """The caller asked the search to stop between two point insertions."""
