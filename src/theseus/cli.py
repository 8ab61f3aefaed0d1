"""Command Line Interface for the Maze Solving System.

This module provides a CLI for solving maze files written in the legacy text
format: one edge per line as two integer vertex IDs, vertex 0 being the start
and vertex 1 the end.

The CLI supports the following commands:
    - solve: Find one shortest path, or every simple path, through a maze
    - format: Print a maze file back in normalized form

Example Usage:
    python -m theseus solve data/maze1.txt
    python -m theseus solve data/maze1.txt --mode all --format json
    python -m theseus format data/maze1.txt
"""

import argparse
import json
import logging
import sys
import time
from typing import List, Optional

from theseus.core.exceptions import TheseusError
from theseus.core.graph import Maze
from theseus.core.graph_paths import (
    Algorithm,
    PathFinding,
    PathResult,
    PathValidationError,
    PerformanceMetrics,
    SearchConfig,
    SolveMode,
)
from theseus.core.serialization import format_maze, parse_maze
from theseus.core.traversal import shortest_distance

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

MODE_CHOICES = {mode.value: mode for mode in SolveMode}
ALGORITHM_CHOICES = {algorithm.value: algorithm for algorithm in Algorithm}


def configure_logging(verbose: bool) -> None:
    """Configure root logging for command line use.

    Args:
        verbose (bool): Emit debug records when True, warnings only otherwise.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_config(args: argparse.Namespace) -> SearchConfig:
    """Translate parsed arguments into a search configuration.

    Raises:
        ValueError: If a numeric option is out of range.
    """
    return SearchConfig(
        mode=MODE_CHOICES[args.mode],
        algorithm=ALGORITHM_CHOICES[args.algorithm] if args.algorithm else None,
        timeout=args.timeout,
        max_memory_mb=args.max_memory_mb,
    )


def check_results(maze: Maze, config: SearchConfig, results: List[PathResult]) -> None:
    """Cross-check solutions against a reference breadth-first traversal.

    Raises:
        PathValidationError: If a solution is invalid, missing, or longer than
            the shortest distance where a shortest path was requested.
    """
    for result in results:
        result.validate(maze)

    distance = shortest_distance(maze)
    if distance is None:
        if results:
            raise PathValidationError("Solutions returned for an unreachable end vertex")
        return
    if not results:
        raise PathValidationError(f"No solution returned although end is {distance} steps away")
    if config.resolve_algorithm() == Algorithm.BIDIRECTIONAL and len(results[0]) != distance:
        raise PathValidationError(
            f"Path length {len(results[0])} differs from shortest distance {distance}"
        )


def print_text(
    config: SearchConfig, solver_name: str, results: List[PathResult], elapsed: float
) -> None:
    """Print solutions in the human readable format."""
    print(f"Solving in mode: {config.mode.name}, using algorithm: {solver_name}")
    if results:
        print(f"Solution(s): {[result.vertices for result in results]}")
    else:
        print("The maze has no solution")
    print(f"Elapsed time: {elapsed} seconds")


def print_json(
    config: SearchConfig,
    solver_name: str,
    results: List[PathResult],
    elapsed: float,
    metrics: Optional[PerformanceMetrics],
) -> None:
    """Print solutions as a JSON document."""
    document = {
        "mode": config.mode.name,
        "algorithm": solver_name,
        "solutions": [result.vertices for result in results],
        "elapsed_seconds": elapsed,
        "metrics": metrics.to_dict() if metrics else None,
    }
    print(json.dumps(document, indent=2))


def command_solve(args: argparse.Namespace) -> int:
    """Handle the solve command."""
    config = build_config(args)
    solver_name = PathFinding.get_solver(config.resolve_algorithm()).__name__

    started = time.perf_counter()
    maze = parse_maze(args.maze)
    results, metrics = PathFinding.solve_with_metrics(maze, config)
    elapsed = time.perf_counter() - started

    if args.check:
        check_results(maze, config, results)

    if args.format == "json":
        print_json(config, solver_name, results, elapsed, metrics)
    else:
        print_text(config, solver_name, results, elapsed)
    return 0


def command_format(args: argparse.Namespace) -> int:
    """Handle the format command."""
    maze = parse_maze(args.maze)
    sys.stdout.write(format_maze(maze))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="theseus", description="Maze solver CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Solve command
    solve = subparsers.add_parser("solve", help="Find path(s) from vertex 0 to vertex 1")
    solve.add_argument("maze", help="Path to a maze file")
    solve.add_argument(
        "--mode",
        choices=sorted(MODE_CHOICES),
        default=SolveMode.FIND_ONE.value,
        help="Find one solution or all simple solutions (default: one)",
    )
    solve.add_argument(
        "--algorithm",
        choices=sorted(ALGORITHM_CHOICES),
        default=None,
        help="Search engine (default: bidirectional for one, dfs for all)",
    )
    solve.add_argument("--timeout", type=float, default=None, help="Cancel after SECONDS")
    solve.add_argument(
        "--max-memory-mb", type=float, default=None, help="Abort when memory grows beyond MB"
    )
    solve.add_argument(
        "--check", action="store_true", help="Validate solutions against a reference BFS"
    )
    solve.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    solve.set_defaults(handler=command_solve)

    # Format command
    fmt = subparsers.add_parser("format", help="Print a maze file in normalized form")
    fmt.add_argument("maze", help="Path to a maze file")
    fmt.set_defaults(handler=command_format)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.verbose)

    try:
        return args.handler(args)
    except (TheseusError, MemoryError, ValueError) as e:
        logger.error("Command %s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
