"""CLI entry point for gridpair.

Finds the closest pair in a point file or a random point cloud and reports
it, optionally with grid statistics and a brute-force cross-check.
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np

from gridpair.config import init_taichi
from gridpair.core import InvalidArgument, NumericDegeneracy, Point, points_from_array
from gridpair.diagnostics import check_against_oracle
from gridpair.params import GridPairConfig, RandomPointsParams, load_config_with_overrides
from gridpair.solvers import GridSolver, SolverVariant, get_registry


def load_points(path: str | Path) -> list[Point]:
    """Load points from a text file with one 'x y' (or 'x,y') row per point."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Point file not found: {path}")
    delimiter = "," if path.suffix.lower() == ".csv" else None
    arr = np.loadtxt(path, delimiter=delimiter, ndmin=2, comments="#")
    if arr.size == 0:
        return []
    return points_from_array(arr)


def random_points(params: RandomPointsParams, seed: int | None = None) -> list[Point]:
    """Uniform random points in the square [low, high)^2."""
    rng = np.random.default_rng(seed)
    return points_from_array(rng.uniform(params.low, params.high, size=(params.n, 2)))


def build_config(args: argparse.Namespace) -> GridPairConfig:
    """Load the YAML config (if any) and apply command-line overrides."""
    search = {}
    if args.solver is not None:
        search["solver"] = args.solver
    if args.shuffle:
        search["shuffle"] = True
    if args.seed is not None:
        search["seed"] = args.seed

    overrides = {}
    if search:
        overrides["search"] = search
    if args.check:
        overrides["oracle"] = {"check": True}
    if args.random is not None:
        overrides["random_points"] = {"n": args.random}

    return load_config_with_overrides(args.config, overrides)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Closest pair of points in the plane")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", type=str, help="Point file: one 'x y' or 'x,y' row per point")
    source.add_argument("--random", type=int, help="Generate N uniform random points. Overrides config.")
    parser.add_argument("--config", type=str, help="Path to YAML configuration file")
    parser.add_argument(
        "--solver",
        choices=[v.value for v in SolverVariant],
        help="Solver variant. Overrides config.",
    )
    parser.add_argument("--shuffle", action="store_true", help="Fold points in random order")
    parser.add_argument("--seed", type=int, help="Random seed for shuffling and point generation")
    parser.add_argument("--check", action="store_true", help="Cross-check against brute force")
    parser.add_argument("--stats", action="store_true", help="Print grid statistics")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    # ValidationError and malformed point files both surface as ValueError
    try:
        config = build_config(args)
        if args.input:
            points = load_points(args.input)
            source = args.input
        else:
            points = random_points(config.random_points, seed=config.search.seed)
            source = f"{len(points)} random points"
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    variant = config.variant

    if variant is SolverVariant.TAICHI_BRUTE_FORCE:
        init_taichi()

    registry = get_registry()
    if variant is SolverVariant.GRID:
        solver = registry.get(variant, shuffle=config.search.shuffle, seed=config.search.seed)
    else:
        solver = registry.get(variant)

    print(f"Solving {source} with {solver.name}...")
    start_time = time.time()
    try:
        result = solver.solve(points)
    except (InvalidArgument, NumericDegeneracy) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    duration = time.time() - start_time

    p, q = result.points(points)
    print(f"Closest pair: #{result.i} ({p.x:.6g}, {p.y:.6g}) and #{result.j} ({q.x:.6g}, {q.y:.6g})")
    print(f"Distance: {result.distance:.10g}")
    print(f"Solved in {duration:.4f}s")

    if args.stats and isinstance(solver, GridSolver) and solver.last_stats is not None:
        print(f"Grid stats: {solver.last_stats.summary()}")

    if config.oracle.check:
        try:
            error = check_against_oracle(
                points, result, rtol=config.oracle.rtol, atol=config.oracle.atol
            )
        except AssertionError as e:
            print(f"Oracle check FAILED:\n{e}", file=sys.stderr)
            return 1
        print(f"Oracle check passed (error = {error:.2e})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
