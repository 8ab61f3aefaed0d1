"""
Data models for maze path finding.

This module provides the core data structures used throughout the path finding package:
- PathResult: Container for one solution path with validation
- PerformanceMetrics: Container for solver performance metrics
- SearchConfig: Validated settings for a solver run
- PathValidationError: Exception for path validation failures

Example:
    >>> result = PathResult(vertices=[0, 4, 1])
    >>> result.validate(maze)  # Ensures path consistency
    >>> len(result)  # Number of edges
    2
"""

from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, List, Optional, Union

from ..exceptions import TheseusError
from ..graph import Maze
from .types import Algorithm, SolveMode


class PathValidationError(TheseusError):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Discontinuities in the path (consecutive vertices not adjacent)
    - Repeated vertices
    - Wrong first or last vertex
    - Vertices missing from the maze
    """


@dataclass
class PathResult:
    """
    Container for one solution path.

    Attributes:
        vertices: Ordered vertices from start to end

    Example:
        >>> result = PathResult(vertices=[0, 2, 3, 1])
        >>> len(result)
        3
        >>> result.edges
        [(0, 2), (2, 3), (3, 1)]
    """

    vertices: List[Hashable]

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.vertices, list):
            raise TypeError("vertices must be a list")
        if not self.vertices:
            raise ValueError("a path must contain at least one vertex")
        if any(vertex is None for vertex in self.vertices):
            raise TypeError("path cannot contain None values")

    def __len__(self) -> int:
        """Return the number of edges in the path."""
        return len(self.vertices) - 1

    def __getitem__(self, index: int) -> Hashable:
        """Get a vertex from the path by index."""
        return self.vertices[index]

    def __iter__(self) -> Iterator[Hashable]:
        """Return an iterator over the path vertices."""
        return iter(self.vertices)

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return len(self)

    @property
    def edges(self) -> List[tuple]:
        """Consecutive vertex pairs of the path."""
        return list(zip(self.vertices, self.vertices[1:]))

    def validate(self, maze: Maze) -> None:
        """
        Validate the path against a maze.

        Performs the following checks:
        - First vertex is the maze start, last vertex is the maze end
        - Every vertex is in the maze
        - Every consecutive pair is joined by an edge
        - No vertex repeats

        Args:
            maze: The maze to validate against

        Raises:
            PathValidationError: If any validation check fails
            TypeError: If maze is not a Maze
        """
        if not isinstance(maze, Maze):
            raise TypeError("maze must be a Maze instance")

        if self.vertices[0] != maze.start:
            raise PathValidationError(
                f"Path starts at {self.vertices[0]!r} instead of {maze.start!r}"
            )
        if self.vertices[-1] != maze.end:
            raise PathValidationError(f"Path ends at {self.vertices[-1]!r} instead of {maze.end!r}")

        seen = set()
        for vertex in self.vertices:
            if not maze.has_vertex(vertex):
                raise PathValidationError(f"Vertex {vertex!r} not in maze")
            if vertex in seen:
                raise PathValidationError(f"Cycle detected at vertex {vertex!r}")
            seen.add(vertex)

        for i, (node1, node2) in enumerate(self.edges):
            if not maze.has_edge(node1, node2):
                raise PathValidationError(
                    f"Path discontinuity at step {i}: no edge between {node1!r} and {node2!r}"
                )


@dataclass
class PerformanceMetrics:
    """
    Container for solver performance metrics.

    Attributes:
        operation: Name of the solver operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of vertices expanded during search
        paths_found: Number of solution paths returned
        peak_memory_mb: Peak resident memory observed by the memory guard

    Example:
        >>> metrics = PerformanceMetrics(operation="dfs", start_time=time())
        >>> # ... perform operation ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    paths_found: Optional[int] = None
    peak_memory_mb: Optional[float] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if not isinstance(self.end_time, (int, float)):
            raise TypeError("end_time must be a numeric value")

        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

        if not isinstance(self.nodes_explored, int) or self.nodes_explored < 0:
            raise ValueError("nodes_explored must be a non-negative integer")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "paths_found": self.paths_found,
            "peak_memory_mb": self.peak_memory_mb,
        }


@dataclass
class SearchConfig:
    """
    Settings for one solver run.

    Attributes:
        mode: How many solutions to return
        algorithm: Engine to use; None picks bidirectional search for one
            solution and depth-first search for all solutions
        timeout: Seconds before the search is cancelled; None for no limit
        max_memory_mb: Resident memory growth limit; None for no limit
    """

    mode: SolveMode = SolveMode.FIND_ONE
    algorithm: Optional[Algorithm] = None
    timeout: Optional[float] = None
    max_memory_mb: Optional[float] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.mode, SolveMode):
            raise TypeError("mode must be a SolveMode")
        if self.algorithm is not None and not isinstance(self.algorithm, Algorithm):
            raise TypeError("algorithm must be an Algorithm or None")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_memory_mb is not None and self.max_memory_mb <= 0:
            raise ValueError("max_memory_mb must be positive")

    def resolve_algorithm(self) -> Algorithm:
        """Return the configured engine, or the default engine for the mode."""
        if self.algorithm is not None:
            return self.algorithm
        if self.mode == SolveMode.FIND_ONE:
            return Algorithm.BIDIRECTIONAL
        return Algorithm.DFS
