"""
Closest-pair solvers.

This module provides solver implementations and a registry for selecting
between the grid solver and the naive (reference) implementations.

Usage:
    from gridpair.solvers import SolverRegistry, SolverVariant

    registry = SolverRegistry()
    solver = registry.get(SolverVariant.GRID)
    result = solver.solve(points)

Submodules:
- incremental: The dynamic-grid solver
- naive: Brute-force reference implementations (correctness first)
- protocol: Solver interface and variants
"""

from typing import Type

from gridpair.solvers.incremental import GridSolver
from gridpair.solvers.naive import BruteForceSolver, TaichiBruteForceSolver
from gridpair.solvers.protocol import ClosestPairSolver, SolverVariant


class SolverRegistry:
    """Registry for solver implementations with variant selection.

    Allows runtime selection of the solver without changing calling code.
    Useful for:
    - Cross-checking the grid solver against brute force
    - Benchmarking variants against each other

    Example:
        registry = SolverRegistry()

        # Get default (grid) implementation
        solver = registry.get()

        # Get specific variant
        oracle = registry.get(SolverVariant.BRUTE_FORCE)

        # Register custom implementation
        registry.register(SolverVariant.GRID, MyGridSolver)
    """

    def __init__(self):
        """Initialize registry with the built-in implementations."""
        self._solvers: dict[SolverVariant, Type[ClosestPairSolver]] = {
            SolverVariant.GRID: GridSolver,
            SolverVariant.BRUTE_FORCE: BruteForceSolver,
            SolverVariant.TAICHI_BRUTE_FORCE: TaichiBruteForceSolver,
        }

    def get(
        self, variant: SolverVariant = SolverVariant.GRID, **kwargs
    ) -> ClosestPairSolver:
        """Get a solver instance.

        Args:
            variant: Implementation variant (default: GRID)
            **kwargs: Passed to the solver constructor

        Returns:
            Solver instance implementing ClosestPairSolver protocol

        Raises:
            KeyError: If variant not registered
        """
        if variant not in self._solvers:
            raise KeyError(
                f"No solver registered for variant {variant}. "
                f"Available: {list(self._solvers.keys())}"
            )
        return self._solvers[variant](**kwargs)

    def register(
        self, variant: SolverVariant, solver_cls: Type[ClosestPairSolver]
    ) -> None:
        """Register a solver implementation.

        Args:
            variant: Variant to register under
            solver_cls: Solver class implementing ClosestPairSolver protocol
        """
        self._solvers[variant] = solver_cls

    def available_variants(self) -> list[SolverVariant]:
        """List registered variants."""
        return list(self._solvers.keys())


# Default registry instance for convenience
_default_registry = SolverRegistry()


def get_registry() -> SolverRegistry:
    """Get the default solver registry.

    Returns:
        The global SolverRegistry instance
    """
    return _default_registry


__all__ = [
    # Registry
    "SolverRegistry",
    "get_registry",
    # Protocol types
    "SolverVariant",
    "ClosestPairSolver",
    # Implementations
    "GridSolver",
    "BruteForceSolver",
    "TaichiBruteForceSolver",
]
