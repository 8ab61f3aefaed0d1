"""Depth-first search implementation."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Hashable, Iterator, List

from ..base import MazeSolver
from ..models import PerformanceMetrics
from ..types import SolveMode, Solutions, VertexPath

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class Color(Enum):
    """Exploration state of a vertex within one search run."""

    UNVISITED = auto()  # Never reached, or reopened for another predecessor
    ACTIVE = auto()  # On the current exploration chain
    DONE = auto()  # Fully explored


@dataclass
class _Frame:
    """One pending expansion on the explicit work stack."""

    __slots__ = ("vertex", "neighbors", "degree", "fragments", "done_neighbors")

    vertex: Hashable
    neighbors: Iterator[Hashable]
    degree: int
    # Reversed fragments (end first) found below this vertex
    fragments: List[VertexPath]
    done_neighbors: int


class DepthFirstSolver(MazeSolver):
    """
    Depth-first search over a maze.

    Supports both solve modes. Each vertex carries a color kept in a map owned
    by the running search:

    * FIND_ONE expands every vertex at most once and stops at the first path.
    * FIND_ALL marks a vertex DONE only when it produced no path and all its
      neighbors but one turned DONE while it was being expanded; any other
      vertex is reopened after its expansion so a different predecessor can
      expand it again. The result is every simple path from start to end.

    The traversal runs on an explicit stack of frames rather than on the
    interpreter's call stack, so maze size is not bounded by the recursion limit.
    """

    def _solve(self, metrics: PerformanceMetrics) -> Solutions:
        colors: Dict[Hashable, Color] = {}
        if self.solve_mode is SolveMode.FIND_ONE:
            return self._find_one(colors, metrics)
        return self._find_all(colors, metrics)

    def _open(
        self, vertex: Hashable, colors: Dict[Hashable, Color], metrics: PerformanceMetrics
    ) -> _Frame:
        """Mark a vertex ACTIVE and build the frame that expands it."""
        colors[vertex] = Color.ACTIVE
        metrics.nodes_explored += 1
        neighbors = self.maze.get_neighbors(vertex)
        return _Frame(vertex, iter(neighbors), len(neighbors), [], 0)

    def _find_one(self, colors: Dict[Hashable, Color], metrics: PerformanceMetrics) -> Solutions:
        end = self.maze.end
        stack = [self._open(self.maze.start, colors, metrics)]

        while stack:
            self.checkpoint()
            frame = stack[-1]
            neighbor = next(frame.neighbors, _EXHAUSTED)

            if neighbor is _EXHAUSTED:
                # No path through this vertex; it is never expanded again
                colors[frame.vertex] = Color.DONE
                stack.pop()
                continue

            if colors.get(neighbor, Color.UNVISITED) is not Color.UNVISITED:
                continue

            if neighbor == end:
                # First success short-circuits every ancestor
                path = [pending.vertex for pending in stack]
                path.append(end)
                logger.debug("Depth-first search reached end at depth %d", len(stack))
                return [path]

            stack.append(self._open(neighbor, colors, metrics))

        return []

    def _find_all(self, colors: Dict[Hashable, Color], metrics: PerformanceMetrics) -> Solutions:
        end = self.maze.end
        stack = [self._open(self.maze.start, colors, metrics)]
        fragments: List[VertexPath] = []

        while stack:
            self.checkpoint()
            frame = stack[-1]
            neighbor = next(frame.neighbors, _EXHAUSTED)

            if neighbor is _EXHAUSTED:
                stack.pop()
                self._close(frame, colors)
                if not stack:
                    fragments = frame.fragments
                    break
                parent = stack[-1]
                parent.fragments.extend(frame.fragments)
                if colors[frame.vertex] is Color.DONE:
                    parent.done_neighbors += 1
                continue

            if colors.get(neighbor, Color.UNVISITED) is not Color.UNVISITED:
                continue

            if neighbor == end:
                frame.fragments.append([end])
                continue

            stack.append(self._open(neighbor, colors, metrics))

        for fragment in fragments:
            fragment.reverse()
        return fragments

    def _close(self, frame: _Frame, colors: Dict[Hashable, Color]) -> None:
        """Color a fully iterated vertex and prepend it to its fragments."""
        if not frame.fragments and frame.done_neighbors == frame.degree - 1:
            colors[frame.vertex] = Color.DONE
            logger.debug("Vertex %r is a dead end", frame.vertex)
        else:
            colors[frame.vertex] = Color.UNVISITED

        for fragment in frame.fragments:
            fragment.append(frame.vertex)
