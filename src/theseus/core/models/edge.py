"""
Edge model for the maze graph.

This module defines the undirected edge connecting two vertices of a maze.
Because edges are undirected, an edge from A to B compares equal to, and hashes
the same as, an edge from B to A.
"""

from dataclasses import dataclass
from typing import Any, Hashable, Iterator, Tuple

from ..exceptions import InvalidArgumentError
from .base import require_vertex


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Undirected edge between two vertices.

    Attributes:
        node1 (Hashable): First endpoint, as given at construction
        node2 (Hashable): Second endpoint, as given at construction

    Example:
        >>> Edge(1, 2) == Edge(2, 1)
        True
        >>> Edge(1, 2).other(1)
        2
    """

    node1: Hashable
    node2: Hashable

    def __post_init__(self):
        """Validate edge after initialization."""
        require_vertex(self.node1, "node1")
        require_vertex(self.node2, "node2")

    @property
    def endpoints(self) -> frozenset:
        """Unordered endpoint set; a self-loop has a single member."""
        return frozenset((self.node1, self.node2))

    @property
    def is_loop(self) -> bool:
        """Whether both endpoints are the same vertex."""
        return self.node1 == self.node2

    def other(self, vertex: Hashable) -> Hashable:
        """
        Return the endpoint opposite to the given one.

        Args:
            vertex (Hashable): One of the endpoints of this edge

        Raises:
            InvalidArgumentError: If the vertex is None or not an endpoint
        """
        require_vertex(vertex)
        if vertex == self.node1:
            return self.node2
        if vertex == self.node2:
            return self.node1
        raise InvalidArgumentError(f"{vertex!r} is not an endpoint of {self}")

    def as_tuple(self) -> Tuple[Hashable, Hashable]:
        """Return the endpoints in construction order."""
        return (self.node1, self.node2)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.as_tuple())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints == other.endpoints

    def __hash__(self) -> int:
        return hash(self.endpoints)

    def __str__(self) -> str:
        return f"{self.node1} {self.node2}"
