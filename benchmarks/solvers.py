from dataclasses import dataclass

from benchmarks.harness import Benchmark
from gridpair.solvers import SolverVariant, get_registry


@dataclass
class SolverTiming:
    variant: SolverVariant
    n_points: int
    wall_time_s: float
    distance: float


class SolverComparisonBenchmark(Benchmark):
    """Grid solver against the brute-force references at moderate sizes."""

    sizes = [500, 2_000, 5_000]

    def run(self) -> list[SolverTiming]:
        registry = get_registry()
        results = []
        self.print_header("SOLVER COMPARISON")

        for n in self.sizes:
            points = self.uniform_points(n)
            for variant in registry.available_variants():
                solver = registry.get(variant)
                # Warmup compiles the Taichi kernel
                if variant is SolverVariant.TAICHI_BRUTE_FORCE:
                    solver.solve(points[:3])
                result, elapsed = self.time_call(solver.solve, points)
                results.append(SolverTiming(variant, n, elapsed, result.distance))

        self._print_report(results)
        return results

    def _print_report(self, results: list[SolverTiming]):
        self.print_header("RESULTS SUMMARY")
        print(f"{'Solver':<22} {'Points':<10} {'Time (s)':<12} {'Distance':<14}")
        print("-" * 80)
        for r in results:
            print(
                f"{r.variant.value:<22} {r.n_points:<10} "
                f"{r.wall_time_s:>8.4f}    {r.distance:.6e}"
            )
        self.print_footer()
