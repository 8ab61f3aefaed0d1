"""Core maze functionality."""

from .exceptions import (
    FileUnavailableError,
    InvalidArgumentError,
    MalformedInputError,
    SearchCancelledError,
    TheseusError,
    UnsupportedOperationError,
)
from .models import Edge
from .graph import Maze
from .graph_paths import (
    Algorithm,
    BidirectionalSolver,
    DepthFirstSolver,
    MazeSolver,
    PathFinding,
    PathResult,
    PathValidationError,
    SearchConfig,
    SolveMode,
)
from .serialization import format_maze, parse_maze, parse_maze_text, write_maze
from .traversal import BFSIterator, bfs_distances, is_reachable, shortest_distance

__all__ = [
    "Algorithm",
    "BFSIterator",
    "BidirectionalSolver",
    "DepthFirstSolver",
    "Edge",
    "FileUnavailableError",
    "InvalidArgumentError",
    "MalformedInputError",
    "Maze",
    "MazeSolver",
    "PathFinding",
    "PathResult",
    "PathValidationError",
    "SearchCancelledError",
    "SearchConfig",
    "SolveMode",
    "TheseusError",
    "UnsupportedOperationError",
    "bfs_distances",
    "format_maze",
    "is_reachable",
    "parse_maze",
    "parse_maze_text",
    "shortest_distance",
    "write_maze",
]
