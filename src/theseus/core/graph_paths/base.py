import logging
from abc import ABC, abstractmethod
from threading import Event
from time import time
from typing import FrozenSet, Optional

from theseus.core.exceptions import UnsupportedOperationError
from theseus.core.graph import Maze
from theseus.core.graph_paths.models import PerformanceMetrics
from theseus.core.graph_paths.types import SolveMode, Solutions
from theseus.core.graph_paths.utils import MemoryManager, raise_if_cancelled

logger = logging.getLogger(__name__)


class MazeSolver(ABC):
    """Abstract base class for maze search engines.

    A solver wraps a maze and a solve mode. Each call to solve() runs a fresh
    search with its own auxiliary state and returns the solutions as vertex
    sequences from start to end; the list is empty when end is unreachable.
    """

    supported_modes: FrozenSet[SolveMode] = frozenset(SolveMode)

    def __init__(
        self,
        maze: Maze,
        solve_mode: SolveMode = SolveMode.FIND_ONE,
        cancel_event: Optional[Event] = None,
        max_memory_mb: Optional[float] = None,
    ):
        """Initialize solver with maze and mode."""
        if not isinstance(maze, Maze):
            raise TypeError("maze must be a Maze instance")
        if not isinstance(solve_mode, SolveMode):
            raise TypeError("solve_mode must be a SolveMode")
        self.maze = maze
        self.solve_mode = solve_mode
        self.cancel_event = cancel_event
        self.memory_manager = MemoryManager(max_memory_mb)
        self.metrics: Optional[PerformanceMetrics] = None

    @property
    def name(self) -> str:
        return type(self).__name__

    def solve(self) -> Solutions:
        """Run the search and return every solution found."""
        if self.solve_mode not in self.supported_modes:
            raise UnsupportedOperationError(
                f"{self.name} does not support {self.solve_mode.name}"
            )

        metrics = PerformanceMetrics(operation=self.name, start_time=time())
        self.metrics = metrics
        logger.debug(
            "%s solving %r in mode %s", self.name, self.maze, self.solve_mode.name
        )
        try:
            if self.maze.start == self.maze.end:
                solutions = [[self.maze.start]]
            else:
                solutions = self._solve(metrics)
        finally:
            metrics.end_time = time()
            metrics.peak_memory_mb = self.memory_manager.peak_memory_mb
            self.memory_manager.reset_peak_memory()

        metrics.paths_found = len(solutions)
        logger.debug(
            "%s found %d solution(s), explored %d vertices in %.2fms",
            self.name,
            metrics.paths_found,
            metrics.nodes_explored,
            metrics.duration,
        )
        return solutions

    @abstractmethod
    def _solve(self, metrics: PerformanceMetrics) -> Solutions:
        """Search for solutions when start and end differ."""
        pass

    def checkpoint(self) -> None:
        """Honor cancellation and memory limits between units of work."""
        raise_if_cancelled(self.cancel_event, self.name)
        self.memory_manager.check_memory()
