"""Type definitions for maze path finding."""

from enum import Enum
from typing import Hashable, List


class SolveMode(Enum):
    """Enumeration of how many solutions a solver should return."""

    FIND_ONE = "one"  # First solution found
    FIND_ALL = "all"  # Every simple path from start to end


class Algorithm(Enum):
    """Enumeration of available search engines."""

    DFS = "dfs"
    BIDIRECTIONAL = "bidirectional"


# Type alias for a path as an ordered vertex sequence
VertexPath = List[Hashable]

# Type alias for the collection a solver returns
Solutions = List[VertexPath]
