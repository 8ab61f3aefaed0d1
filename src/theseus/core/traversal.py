"""
Maze traversal using the iterator pattern.

This module provides a single-source breadth-first traversal of a maze. It is
independent from the search engines and serves as their reference: the depth
of end in a breadth-first traversal from start is the length every shortest
path must have.
"""

from collections import deque
from typing import Dict, Hashable, Iterator, Optional, Set, Tuple

from .graph import Maze
from .models import require_vertex


class BFSIterator:
    """Breadth-first traversal iterator."""

    def __init__(self, maze: Maze, source: Optional[Hashable] = None):
        """
        Initialize iterator.

        Args:
            maze: The maze to traverse
            source: Vertex to start from (defaults to the maze start)
        """
        self.maze = maze
        self.source = require_vertex(maze.start if source is None else source, "source")
        self.visited: Set[Hashable] = set()

    def __iter__(self) -> Iterator[Tuple[Hashable, int]]:
        """
        Traverse the maze in breadth-first order.

        Yields:
            Tuples of (vertex, depth) in BFS order
        """
        if not self.maze.has_vertex(self.source):
            return

        queue = deque([(self.source, 0)])
        self.visited = {self.source}

        while queue:
            vertex, depth = queue.popleft()
            yield vertex, depth

            # Add unvisited neighbors to queue
            for neighbor in self.maze.get_neighbors(vertex):
                if neighbor not in self.visited:
                    self.visited.add(neighbor)
                    queue.append((neighbor, depth + 1))


def bfs_distances(maze: Maze, source: Optional[Hashable] = None) -> Dict[Hashable, int]:
    """Return the edge distance from source to every reachable vertex."""
    return dict(BFSIterator(maze, source))


def shortest_distance(maze: Maze) -> Optional[int]:
    """Return the edge distance from start to end, or None if unreachable."""
    for vertex, depth in BFSIterator(maze):
        if vertex == maze.end:
            return depth
    return None


def is_reachable(maze: Maze) -> bool:
    """Check whether end can be reached from start."""
    return shortest_distance(maze) is not None
