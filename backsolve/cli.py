"""Command-line interface for the backtracking Sudoku solver."""

import argparse
import logging
import sys

from .benchmark import Benchmark
from .benchmark.visualizer import Visualizer
from .puzzles import PUZZLES, BENCHMARK_PUZZLES, load_puzzle
from .solvers import SOLVERS


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Backtracking Sudoku solver with MRV-guided search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the classic puzzle with row-major backtracking
  backsolve solve --puzzle classic

  # Solve with the MRV heuristic
  backsolve solve --puzzle classic --efficient

  # Compare both engines on the built-in puzzles
  backsolve benchmark --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a built-in puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", choices=sorted(PUZZLES), default="classic",
        help="Built-in puzzle to solve (default: classic)"
    )
    engine_group = solve_parser.add_mutually_exclusive_group()
    engine_group.add_argument(
        "--algorithm", "-a",
        choices=sorted(SOLVERS) + ["all"],
        default="naive",
        help="Search engine to use (default: naive)"
    )
    engine_group.add_argument(
        "--efficient", "-e", action="store_true",
        help="Shorthand for --algorithm mrv"
    )
    solve_parser.add_argument(
        "--time-limit", "-t", type=float, default=None,
        help="Give up after this many seconds (default: no limit)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics and debug logging"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Compare the search engines")
    bench_parser.add_argument(
        "--puzzles", "-n", nargs="+", choices=sorted(PUZZLES), default=BENCHMARK_PUZZLES,
        help=f"Puzzles to run (default: {' '.join(BENCHMARK_PUZZLES)})"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--time-limit", "-t", type=float, default=10.0,
        help="Seconds per puzzle per engine (default: 10)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    bench_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    # List command
    subparsers.add_parser("list", help="List the built-in puzzles")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)
    elif args.command == "list":
        cmd_list(args)


def cmd_solve(args):
    """Handle the solve command."""
    board = load_puzzle(args.puzzle)

    print(f"Input puzzle ({args.puzzle}, {board.count_filled()} clues):")
    print(board)
    print()

    algorithm = "mrv" if args.efficient else args.algorithm
    names = sorted(SOLVERS) if algorithm == "all" else [algorithm]

    for name in names:
        solver = SOLVERS[name](time_limit=args.time_limit)
        print(f"Solving with {solver.name}...")

        solution, stats = solver.solve(board)

        if stats.solved:
            print(f"✓ Solved in {stats.time_seconds:.4f}s")
            if args.verbose:
                print(f"  Calls: {stats.iterations:,}")
                print(f"  Placements: {stats.nodes_explored:,}")
                print(f"  Backtracks: {stats.backtracks:,}")
                print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
            print(solution)
        else:
            reason = stats.extra.get("error", "no solution exists")
            print(f"✗ Failed to solve: {reason}")
            if args.verbose:
                print(f"  Time: {stats.time_seconds:.4f}s")
                print(f"  Calls: {stats.iterations:,}")
        print()


def cmd_benchmark(args):
    """Handle the benchmark command."""
    print("=" * 60)
    print("SUDOKU SEARCH BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {', '.join(args.puzzles)}")
    print(f"Time limit: {args.time_limit}s per run")

    benchmark = Benchmark(
        puzzles={name: load_puzzle(name) for name in args.puzzles},
        time_limit=args.time_limit
    )

    print(f"Algorithms: {', '.join(benchmark.solvers.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)

    print("\nBy Algorithm:")
    print("-" * 50)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Solved: {stats['total_solved']}/{stats['total_tested']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Placements: {stats['total_nodes_explored']:,}")
        if stats["errors"]:
            print(f"  Aborted runs: {stats['errors']}")

    benchmark.save_results(args.output)
    print(f"\nResults saved to {args.output}/")

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


def cmd_list(args):
    """Handle the list command."""
    for name in sorted(PUZZLES):
        board = load_puzzle(name)
        print(f"{name:<12} {board.count_filled():>2} clues")


if __name__ == "__main__":
    main()
