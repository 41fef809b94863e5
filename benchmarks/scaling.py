from dataclasses import dataclass

from benchmarks.harness import Benchmark
from gridpair.closest_pair import closest_pair_with_stats


@dataclass
class ScalingMetrics:
    n_points: int
    wall_time_s: float
    rebuilds: int
    points_reindexed: int
    candidates_checked: int

    @property
    def microseconds_per_point(self) -> float:
        return self.wall_time_s / self.n_points * 1e6

    @property
    def reindex_ratio(self) -> float:
        return self.points_reindexed / self.n_points


class ScalingBenchmark(Benchmark):
    """Grid solver cost per point across input sizes (flat for linear time)."""

    sizes = [1_000, 10_000, 100_000, 1_000_000]

    def run(self) -> list[ScalingMetrics]:
        results = []
        self.print_header("GRID SOLVER SCALING")

        for n in self.sizes:
            print(f"\nBenchmarking {n} points...")
            points = self.uniform_points(n)
            (result, stats), elapsed = self.time_call(closest_pair_with_stats, points)
            results.append(
                ScalingMetrics(
                    n_points=n,
                    wall_time_s=elapsed,
                    rebuilds=stats.rebuilds,
                    points_reindexed=stats.points_reindexed,
                    candidates_checked=stats.candidates_checked,
                )
            )
            print(f"Done. d = {result.distance:.3e}")

        self._print_report(results)
        return results

    def _print_report(self, results: list[ScalingMetrics]):
        self.print_header("RESULTS SUMMARY")
        print(f"{'Points':<12} {'Time (s)':<12} {'us/point':<12} {'Rebuilds':<10} {'Reindex/pt':<12}")
        print("-" * 80)

        for r in results:
            print(
                f"{r.n_points:<12} "
                f"{r.wall_time_s:>8.3f}    "
                f"{r.microseconds_per_point:>8.2f}    "
                f"{r.rebuilds:>6}    "
                f"{r.reindex_ratio:>8.3f}"
            )
        self.print_footer()
