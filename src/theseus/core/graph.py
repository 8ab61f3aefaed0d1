"""
Maze graph data structure with an adjacency map representation.

This module provides the Maze class, the undirected graph every solver traverses.
A maze holds a set of vertices, a set of symmetric edges and two designated
vertices, start and end, which are always members of the vertex set.

Neighbor lookups are answered from an adjacency map kept in step with the edge
set, so a lookup costs time proportional to the degree of the vertex rather than
to the size of the maze.
"""

import logging
from collections import defaultdict
from contextlib import contextmanager
from copy import deepcopy
from dataclasses import dataclass, field
from threading import RLock
from typing import Dict, Generator, Hashable, Iterable, Iterator, Set, Tuple

from .exceptions import InvalidArgumentError
from .models import Edge, require_vertex

logger = logging.getLogger(__name__)


@dataclass
class MazeState:
    """Encapsulates the state of a maze."""

    adjacency: Dict[Hashable, Set[Hashable]] = field(default_factory=lambda: defaultdict(set))
    edges: Set[Edge] = field(default_factory=set)


class Maze:
    """
    Undirected graph with a designated start and end vertex.

    Vertices may be any hashable value with value equality; None is never a
    vertex. Every operation taking a vertex raises InvalidArgumentError when
    given None. Adding something already present, or removing something absent,
    is not an error: it is reported through the boolean return value.

    Attributes:
        _state (MazeState): Internal adjacency and edge sets
        _state_lock (RLock): Lock for thread-safe state access
        _start (Hashable): The vertex searches start from
        _end (Hashable): The vertex searches try to reach
    """

    def __init__(self, start: Hashable, end: Hashable, edges: Iterable[Tuple[Hashable, Hashable]] = ()):
        """
        Initialize a maze with its designated vertices.

        Args:
            start (Hashable): Start vertex, added to the vertex set
            end (Hashable): End vertex, added to the vertex set
            edges (Iterable[Tuple[Hashable, Hashable]]): Optional initial edges
                given as vertex pairs

        Raises:
            InvalidArgumentError: If start, end or an edge endpoint is None
        """
        self._start = require_vertex(start, "start")
        self._end = require_vertex(end, "end")
        self._state = MazeState()
        self._state_lock = RLock()
        self.add_vertex(self._start)
        self.add_vertex(self._end)
        if edges:
            self.add_edges_batch(edges)

    @property
    def start(self) -> Hashable:
        """The start vertex."""
        return self._start

    @property
    def end(self) -> Hashable:
        """The end vertex."""
        return self._end

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        """Context manager for atomic maze operations."""
        with self._state_lock:
            state_backup = deepcopy(self._state)
            try:
                yield
            except Exception as e:
                self._state = state_backup
                raise e

    def add_vertex(self, vertex: Hashable) -> bool:
        """Add a vertex, returning whether it was new."""
        require_vertex(vertex)
        with self._state_lock:
            if vertex in self._state.adjacency:
                return False
            self._state.adjacency[vertex] = set()
            return True

    def remove_vertex(self, vertex: Hashable) -> bool:
        """
        Remove a vertex and every edge incident to it.

        Returns:
            bool: Whether the vertex was present

        Raises:
            InvalidArgumentError: If the vertex is None, the start or the end
        """
        require_vertex(vertex)
        if vertex == self._start or vertex == self._end:
            raise InvalidArgumentError(f"cannot remove designated vertex {vertex!r}")
        with self._state_lock:
            if vertex not in self._state.adjacency:
                return False
            for neighbor in self._state.adjacency.pop(vertex):
                self._state.edges.discard(Edge(vertex, neighbor))
                if neighbor != vertex:
                    self._state.adjacency[neighbor].discard(vertex)
            logger.debug("Removed vertex %r", vertex)
            return True

    def add_edge(self, node1: Hashable, node2: Hashable) -> bool:
        """
        Add an undirected edge, inserting missing endpoints.

        Returns:
            bool: Whether the edge was new
        """
        edge = Edge(node1, node2)
        with self._state_lock:
            self._state.adjacency[node1].add(node2)
            self._state.adjacency[node2].add(node1)
            if edge in self._state.edges:
                return False
            self._state.edges.add(edge)
            return True

    def add_edges_batch(self, edges: Iterable[Tuple[Hashable, Hashable]]) -> int:
        """
        Add multiple edges atomically.

        If any pair is invalid the maze is left exactly as it was.

        Returns:
            int: Number of edges that were new
        """
        added = 0
        with self.transaction():
            for node1, node2 in edges:
                added += self.add_edge(node1, node2)
        logger.debug("Added %d new edges in batch", added)
        return added

    def remove_edge(self, node1: Hashable, node2: Hashable) -> bool:
        """Remove an undirected edge, returning whether it was present."""
        edge = Edge(node1, node2)
        with self._state_lock:
            if edge not in self._state.edges:
                return False
            self._state.edges.remove(edge)
            self._state.adjacency[node1].discard(node2)
            self._state.adjacency[node2].discard(node1)
            return True

    def has_edge(self, node1: Hashable, node2: Hashable) -> bool:
        """Check if an edge exists between two vertices."""
        edge = Edge(node1, node2)
        with self._state_lock:
            return edge in self._state.edges

    def has_vertex(self, vertex: Hashable) -> bool:
        """Check if a vertex exists in the maze."""
        require_vertex(vertex)
        with self._state_lock:
            return vertex in self._state.adjacency

    def get_neighbors(self, vertex: Hashable) -> Set[Hashable]:
        """Get all vertices sharing an edge with the given one."""
        require_vertex(vertex)
        with self._state_lock:
            neighbors = self._state.adjacency.get(vertex)
            return set(neighbors) if neighbors else set()

    def get_degree(self, vertex: Hashable) -> int:
        """Get the number of neighbors of a vertex."""
        require_vertex(vertex)
        with self._state_lock:
            return len(self._state.adjacency.get(vertex, ()))

    def get_vertices(self) -> Set[Hashable]:
        """Get all vertices in the maze."""
        with self._state_lock:
            return set(self._state.adjacency)

    def get_edges(self) -> Set[Edge]:
        """Get all edges in the maze."""
        with self._state_lock:
            return set(self._state.edges)

    @property
    def vertex_count(self) -> int:
        with self._state_lock:
            return len(self._state.adjacency)

    @property
    def edge_count(self) -> int:
        with self._state_lock:
            return len(self._state.edges)

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex is not None and self.has_vertex(vertex)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.get_vertices())

    def __repr__(self) -> str:
        return (
            f"Maze(start={self._start!r}, end={self._end!r}, "
            f"vertices={self.vertex_count}, edges={self.edge_count})"
        )

    @classmethod
    def from_edges(
        cls, edges: Iterable[Tuple[Hashable, Hashable]], start: Hashable = 0, end: Hashable = 1
    ) -> "Maze":
        """Create a Maze instance from vertex pairs."""
        return cls(start, end, edges)
