"""Command-line interface for the CSP Sudoku solver."""

import argparse
import logging
import sys

from .benchmark import Experiment, DEFAULT_CONFIGS, load_puzzles
from .benchmark.visualizer import Visualizer
from .core.board import SudokuBoard
from .logging_utils import set_level
from .solvers import CSPSolver, SolverConfig


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Backtracking CSP Sudoku Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a 4x4 puzzle with MAC and MRV
  python -m cspsudoku.cli solve --puzzle 0200000203404000

  # Solve with forward checking and static ordering
  python -m cspsudoku.cli solve --puzzle "0000200..." --no-mac --no-mrv

  # Time 50 seeded draws from a puzzle file, comparing configurations
  python -m cspsudoku.cli experiment --file sudoku9.txt --seed 5988222 --compare
        """
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for solver diagnostics (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (n*n chars, 0 for empty cells)"
    )
    _add_config_arguments(solve_parser)
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Experiment command
    exp_parser = subparsers.add_parser("experiment", help="Time the solver on a puzzle file")
    exp_parser.add_argument(
        "--file", "-f", type=str, required=True,
        help="Puzzle file, one puzzle string per line"
    )
    exp_parser.add_argument(
        "--trials", "-n", type=int, default=50,
        help="Number of puzzles to draw (default: 50)"
    )
    exp_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    exp_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output directory for results and charts"
    )
    exp_parser.add_argument(
        "--compare", action="store_true",
        help="Run every standard configuration instead of the one given by flags"
    )
    exp_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    _add_config_arguments(exp_parser)

    args = parser.parse_args(argv)
    set_level(getattr(logging, args.log_level))

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "experiment":
        cmd_experiment(args)


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--no-mac", action="store_true",
        help="Use forward checking instead of maintaining arc consistency"
    )
    parser.add_argument(
        "--no-mrv", action="store_true",
        help="Branch on the first empty cell instead of the most constrained one"
    )
    parser.add_argument(
        "--no-inference", action="store_true",
        help="Disable propagation entirely"
    )
    parser.add_argument(
        "--lcv", action="store_true",
        help="Least-constraining-value ordering (not implemented, fails)"
    )
    parser.add_argument(
        "--depth-limit", type=int, default=None,
        help="Maximum search depth (default: n*n + 1)"
    )


def config_from_args(args) -> SolverConfig:
    """Build a SolverConfig from parsed command-line flags."""
    return SolverConfig(
        use_mac=not args.no_mac,
        use_mrv=not args.no_mrv,
        inference=not args.no_inference,
        use_lcv=args.lcv,
        depth_limit=args.depth_limit,
    )


def cmd_solve(args):
    """Handle the solve command."""
    try:
        board = SudokuBoard.from_string(args.puzzle)
        config = config_from_args(args)
    except ValueError as e:
        print(f"Invalid input: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    solver = CSPSolver(config)
    print(f"Solving with {config.label}...")
    try:
        solution, stats = solver.solve(board)
    except NotImplementedError as e:
        print(f"Unsupported configuration: {e}")
        sys.exit(1)

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        if args.verbose:
            print(f"  Iterations: {stats.iterations:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
            print(f"  Nodes explored: {stats.nodes_explored:,}")
            print(f"  Values pruned: {stats.values_pruned:,}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
        print(solution)
        print(solution.to_string())
    else:
        print("✗ No solution")
        if args.verbose:
            print(f"  Time: {stats.time_seconds:.4f}s")
            print(f"  Iterations: {stats.iterations:,}")
        sys.exit(2)


def cmd_experiment(args):
    """Handle the experiment command."""
    try:
        puzzles = load_puzzles(args.file)
    except OSError as e:
        print(f"Error reading puzzle file: {e}")
        sys.exit(1)

    if args.compare:
        configs = dict(DEFAULT_CONFIGS)
    else:
        config = config_from_args(args)
        configs = {config.label: config}

    print("=" * 60)
    print("CSP SUDOKU EXPERIMENT")
    print("=" * 60)
    print(f"Puzzle file: {args.file} ({len(puzzles)} puzzles)")
    print(f"Trials: {args.trials}")
    print(f"Seed: {args.seed}")
    print(f"Configurations: {', '.join(configs)}")
    print("=" * 60)

    experiment = Experiment(puzzles, trials=args.trials, seed=args.seed, configs=configs)
    results = experiment.run()
    summary = experiment.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for name, stats in summary["results_by_config"].items():
        print(f"\n{name}:")
        print(f"  Solved: {stats['solved']}/{stats['tested']}")
        print(f"  max: {stats['max_ms']:.1f}ms, min: {stats['min_ms']:.1f}ms "
              f"avg: {stats['avg_ms']:.1f}ms")

    if args.output:
        experiment.save_results(args.output)
        print(f"\nResults saved to {args.output}/")

        if not args.no_charts:
            print("\nGenerating charts...")
            visualizer = Visualizer(results, args.output)
            charts = visualizer.generate_all()
            visualizer.generate_summary_table()
            for chart in charts:
                print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Experiment complete!")


if __name__ == "__main__":
    main()
