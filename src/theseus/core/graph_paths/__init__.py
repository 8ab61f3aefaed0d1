"""Maze path finding functionality."""

from threading import Event, Timer
from typing import Dict, List, Optional, Tuple, Type

from ..graph import Maze
from .algorithms.bidirectional import BidirectionalSolver
from .algorithms.dfs import DepthFirstSolver
from .base import MazeSolver
from .models import PathResult, PathValidationError, PerformanceMetrics, SearchConfig
from .types import Algorithm, SolveMode, Solutions, VertexPath
from .utils import create_path_results

# Re-export types
__all__ = [
    "Algorithm",
    "BidirectionalSolver",
    "DepthFirstSolver",
    "MazeSolver",
    "PathFinding",
    "PathResult",
    "PathValidationError",
    "PerformanceMetrics",
    "SearchConfig",
    "SolveMode",
    "Solutions",
    "VertexPath",
]


class PathFinding:
    """Static interface for maze solving operations."""

    _solvers: Dict[Algorithm, Type[MazeSolver]] = {
        Algorithm.DFS: DepthFirstSolver,
        Algorithm.BIDIRECTIONAL: BidirectionalSolver,
    }

    @classmethod
    def get_solver(cls, algorithm: Algorithm) -> Type[MazeSolver]:
        """Get the solver class registered for an algorithm."""
        if algorithm not in cls._solvers:
            raise ValueError(f"No solver registered for algorithm: {algorithm}")
        return cls._solvers[algorithm]

    @classmethod
    def create_solver(
        cls, maze: Maze, config: SearchConfig, cancel_event: Optional[Event] = None
    ) -> MazeSolver:
        """Build the solver described by a configuration."""
        solver_cls = cls.get_solver(config.resolve_algorithm())
        return solver_cls(
            maze,
            config.mode,
            cancel_event=cancel_event,
            max_memory_mb=config.max_memory_mb,
        )

    @classmethod
    def solve(
        cls,
        maze: Maze,
        config: Optional[SearchConfig] = None,
        cancel_event: Optional[Event] = None,
        validate: bool = False,
    ) -> List[PathResult]:
        """Solve a maze according to a configuration, see solve_with_metrics."""
        results, _ = cls.solve_with_metrics(maze, config, cancel_event, validate)
        return results

    @classmethod
    def solve_with_metrics(
        cls,
        maze: Maze,
        config: Optional[SearchConfig] = None,
        cancel_event: Optional[Event] = None,
        validate: bool = False,
    ) -> Tuple[List[PathResult], PerformanceMetrics]:
        """
        Solve a maze according to a configuration.

        A configured timeout arms a timer that sets the cancel event, so the
        running search raises SearchCancelledError once it expires.

        Args:
            maze: The maze to solve
            config: Run settings (defaults to one solution, default engine)
            cancel_event: Optional event another thread may set to cancel
            validate: Whether every returned path is validated against the maze

        Returns:
            Tuple[List[PathResult], PerformanceMetrics]: Solutions, empty if end
            is unreachable, and the metrics of the run
        """
        config = config or SearchConfig()
        if config.timeout is not None and cancel_event is None:
            cancel_event = Event()

        solver = cls.create_solver(maze, config, cancel_event)
        timer = None
        if config.timeout is not None:
            timer = Timer(config.timeout, cancel_event.set)
            timer.daemon = True
            timer.start()
        try:
            solutions = solver.solve()
        finally:
            if timer is not None:
                timer.cancel()

        return create_path_results(solutions, maze if validate else None), solver.metrics

    @classmethod
    def shortest_path(cls, maze: Maze, **kwargs) -> Optional[PathResult]:
        """Find one shortest path with bidirectional search, or None."""
        config = SearchConfig(mode=SolveMode.FIND_ONE, algorithm=Algorithm.BIDIRECTIONAL)
        results = cls.solve(maze, config, **kwargs)
        return results[0] if results else None

    @classmethod
    def all_paths(cls, maze: Maze, **kwargs) -> List[PathResult]:
        """Find every simple path with depth-first search."""
        config = SearchConfig(mode=SolveMode.FIND_ALL, algorithm=Algorithm.DFS)
        return cls.solve(maze, config, **kwargs)
