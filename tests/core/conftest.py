"""Shared test fixtures."""

import random
from typing import Callable, Hashable, List, Set, Tuple

import pytest

from theseus.core.graph import Maze


@pytest.fixture
def two_route_maze() -> Maze:
    """
    Fixture providing a maze with a long and a short route:
    0 - 2 - 3 - 1
    |           |
    4 ----------+
    """
    return Maze.from_edges([(0, 2), (2, 3), (3, 1), (0, 4), (4, 1)])


@pytest.fixture
def edgeless_maze() -> Maze:
    """Fixture providing a maze with distinct start and end and no edges."""
    return Maze(0, 1)


@pytest.fixture
def disconnected_maze() -> Maze:
    """
    Fixture providing a maze where start and end lie in different components:
    0 - 2 - 3 - 0 (cycle)    1 - 4 - 5
    """
    return Maze.from_edges([(0, 2), (2, 3), (3, 0), (1, 4), (4, 5)])


@pytest.fixture
def shared_ancestor_maze() -> Maze:
    """
    Fixture providing a maze where several predecessors reach the same vertex,
    with a dead-end branch hanging off the shared vertex:

        2
       / \\
      0   4 - 5 - 1
       \\ / \\
        3   6 - 7
    and an extra rung 2 - 3.
    """
    return Maze.from_edges(
        [(0, 2), (0, 3), (2, 3), (2, 4), (3, 4), (4, 5), (5, 1), (4, 6), (6, 7)]
    )


@pytest.fixture
def brute_force_paths() -> Callable[[Maze], Set[Tuple[Hashable, ...]]]:
    """Fixture providing an exhaustive simple path enumerator used as reference."""

    def enumerate_paths(maze: Maze) -> Set[Tuple[Hashable, ...]]:
        found: Set[Tuple[Hashable, ...]] = set()

        def extend(path: List[Hashable]) -> None:
            last = path[-1]
            if last == maze.end:
                found.add(tuple(path))
                return
            for neighbor in maze.get_neighbors(last):
                if neighbor not in path:
                    extend(path + [neighbor])

        extend([maze.start])
        return found

    return enumerate_paths


@pytest.fixture
def random_mazes() -> List[Maze]:
    """Fixture providing small seeded random mazes, connected or not."""
    mazes = []
    for seed in range(60):
        rng = random.Random(seed)
        vertex_count = rng.randint(2, 8)
        density = rng.choice([0.15, 0.3, 0.5])
        edges = [
            (a, b)
            for a in range(vertex_count)
            for b in range(a + 1, vertex_count)
            if rng.random() < density
        ]
        mazes.append(Maze(0, 1, edges))
    return mazes
