"""
Base benchmark harness for gridpair.
"""
import abc
import time
from typing import Any

import numpy as np

from gridpair.config import init_taichi
from gridpair.core import Point, points_from_array


class Benchmark(abc.ABC):
    """Abstract base class for all benchmarks."""

    def __init__(self, seed: int = 42):
        self.seed = seed
        self.init_taichi()

    def init_taichi(self):
        """Initialize Taichi backend."""
        print("Initializing Taichi...")
        backend = init_taichi(debug=False)
        print(f"Taichi backend: {backend}")

    @abc.abstractmethod
    def run(self) -> Any:
        """Run the benchmark logic. Returns results."""
        pass

    def uniform_points(self, n: int) -> list[Point]:
        """n uniform random points in the unit square."""
        rng = np.random.default_rng(self.seed)
        return points_from_array(rng.uniform(0.0, 1.0, size=(n, 2)))

    def time_call(self, fn, *args) -> tuple[Any, float]:
        """Run fn(*args) once and return (result, wall time in seconds)."""
        start = time.perf_counter()
        result = fn(*args)
        return result, time.perf_counter() - start

    def print_header(self, title: str):
        print("\n" + "="*80)
        print(f"{title:^80}")
        print("="*80)

    def print_footer(self):
        print("="*80)
