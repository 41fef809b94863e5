import argparse
import traceback

from benchmarks.scaling import ScalingBenchmark
from benchmarks.solvers import SolverComparisonBenchmark

# Registry of available benchmarks
BENCHMARKS = {
    "scaling": ScalingBenchmark,
    "solvers": SolverComparisonBenchmark,
}


def main():
    parser = argparse.ArgumentParser(description="gridpair Benchmark Harness")
    parser.add_argument(
        "benchmark",
        nargs="?",
        choices=list(BENCHMARKS.keys()) + ["all"],
        default="all",
        help="Benchmark to run (default: all)"
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed for point generation")

    args = parser.parse_args()

    if args.benchmark == "all":
        to_run = list(BENCHMARKS.values())
    else:
        to_run = [BENCHMARKS[args.benchmark]]

    for bench_cls in to_run:
        print(f"\nRunning {bench_cls.__name__}...")
        try:
            bench_cls(seed=args.seed).run()
        except Exception as e:
            print(f"Error running benchmark: {e}")
            traceback.print_exc()


if __name__ == "__main__":
    main()
