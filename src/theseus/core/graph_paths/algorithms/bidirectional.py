import logging
from collections import deque
from typing import Deque, Dict, Hashable, Optional, Set

from theseus.core.graph import Maze
from theseus.core.graph_paths.base import MazeSolver
from theseus.core.graph_paths.models import PerformanceMetrics
from theseus.core.graph_paths.types import SolveMode, Solutions, VertexPath

logger = logging.getLogger(__name__)

# Constants
BRANCHING_FACTOR = 2.5  # Allowed queue size ratio between the two frontiers


class Frontier:
    """
    One breadth-first side of a bidirectional search.

    A frontier expands its queue one full layer per round and records, for every
    vertex it discovers, the distance from its own root. Exactly one frontier of
    a search is the checker: it tests the vertices it dequeues and discovers
    against the horizon. The other one is the publisher: after each round it
    replaces the horizon with the layer it just discovered.

    Attributes:
        root (Hashable): Vertex the frontier grows from
        is_checker (bool): Whether this frontier tests horizon membership
        visited (Dict[Hashable, int]): Discovery distance of every reached vertex
        queue (Deque[Hashable]): Current layer, waiting for expansion
        rounds (int): Number of completed rounds
        expanded (int): Number of vertices expanded so far
    """

    def __init__(self, maze: Maze, root: Hashable, horizon: Set[Hashable], is_checker: bool):
        self.maze = maze
        self.root = root
        self.horizon = horizon
        self.is_checker = is_checker
        self.visited: Dict[Hashable, int] = {root: 0}
        self.queue: Deque[Hashable] = deque([root])
        self.rounds = 0
        self.expanded = 0

    def __len__(self) -> int:
        return len(self.queue)

    @property
    def exhausted(self) -> bool:
        """Whether the frontier has no vertex left to expand."""
        return not self.queue

    def check(self) -> Optional[Hashable]:
        """Return a queued vertex that lies in the horizon, if any."""
        if not self.is_checker:
            return None
        for vertex in self.queue:
            if vertex in self.horizon:
                return vertex
        return None

    def advance(self) -> Optional[Hashable]:
        """
        Run one round: expand every queued vertex.

        Returns:
            Optional[Hashable]: The connection vertex when the checker meets the
            horizon, None otherwise
        """
        # A queued vertex in the horizon needs no expansion
        connection = self.check()
        if connection is not None:
            return connection

        next_queue: Deque[Hashable] = deque()
        while self.queue:
            vertex = self.queue.popleft()
            self.expanded += 1
            distance = self.visited[vertex] + 1
            for neighbor in self.maze.get_neighbors(vertex):
                if neighbor in self.visited:
                    continue
                self.visited[neighbor] = distance
                if self.is_checker and neighbor in self.horizon:
                    return neighbor
                next_queue.append(neighbor)

        self.queue = next_queue
        self.rounds += 1
        if not self.is_checker:
            self.horizon.clear()
            self.horizon.update(next_queue)
        return None

    def backtrack(self, connection: Hashable) -> VertexPath:
        """
        Walk from the connection vertex back to the root.

        At every step the neighbor with the smallest recorded distance is taken;
        in a breadth-first layering that neighbor always lies on a shortest path.

        Returns:
            VertexPath: Vertices from the connection vertex to the root
        """
        path = [connection]
        current = connection
        while current != self.root:
            candidates = [n for n in self.maze.get_neighbors(current) if n in self.visited]
            current = min(candidates, key=self.visited.__getitem__)
            path.append(current)
        return path


class BidirectionalSolver(MazeSolver):
    """
    Bidirectional breadth-first search.

    Two frontiers grow from start and from end. The start frontier is the
    checker, the end frontier is the publisher. On each iteration a frontier
    runs a round only while its queue is smaller than BRANCHING_FACTOR times
    the other queue plus one, which keeps both expansions balanced; when the
    checker skips its round it still checks its queue against the freshly
    published horizon.

    Only FIND_ONE is supported; the returned path is a shortest path.
    """

    supported_modes = frozenset({SolveMode.FIND_ONE})

    def __init__(self, maze: Maze, solve_mode: SolveMode = SolveMode.FIND_ONE, **kwargs):
        """Initialize solver; the frontiers are created per run."""
        super().__init__(maze, solve_mode, **kwargs)
        self.branching_factor = BRANCHING_FACTOR

    def _may_advance(self, front: Frontier, other: Frontier) -> bool:
        return not front.exhausted and len(front) < self.branching_factor * (len(other) + 1)

    def _solve(self, metrics: PerformanceMetrics) -> Solutions:
        horizon: Set[Hashable] = set()
        checker = Frontier(self.maze, self.maze.start, horizon, is_checker=True)
        publisher = Frontier(self.maze, self.maze.end, horizon, is_checker=False)

        connection: Optional[Hashable] = None
        try:
            while connection is None:
                self.checkpoint()

                if self._may_advance(publisher, checker):
                    publisher.advance()

                if self._may_advance(checker, publisher):
                    connection = checker.advance()
                else:
                    connection = checker.check()

                logger.debug(
                    "Round state: checker=%d queued (%d rounds), publisher=%d queued "
                    "(%d rounds), horizon=%d",
                    len(checker),
                    checker.rounds,
                    len(publisher),
                    publisher.rounds,
                    len(horizon),
                )

                # Once either side is exhausted the two can no longer meet
                if connection is None and (checker.exhausted or publisher.exhausted):
                    logger.debug("Frontier exhausted without connection")
                    return []
        finally:
            metrics.nodes_explored = checker.expanded + publisher.expanded

        logger.debug("Frontiers connected at %r", connection)
        start_side = checker.backtrack(connection)
        end_side = publisher.backtrack(connection)
        start_side.reverse()
        return [start_side + end_side[1:]]
