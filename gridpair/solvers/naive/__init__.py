"""
Naive (reference) solver implementations.

These solvers prioritize correctness and readability over performance.
They serve as the oracle for equivalence testing of the grid solver.
"""

from gridpair.solvers.naive.brute_force import BruteForceSolver, brute_force_pair
from gridpair.solvers.naive.taichi_brute_force import (
    TaichiBruteForceSolver,
    taichi_brute_force_pair,
)

__all__ = [
    "BruteForceSolver",
    "brute_force_pair",
    "TaichiBruteForceSolver",
    "taichi_brute_force_pair",
]
