"""
Theseus - Maze Solving Toolkit

This package finds paths between the start and the end vertex of an undirected
graph read from a simple text format. It includes:

- A maze graph model with symmetric edges and adjacency lookups
- A depth-first solver returning the first path or every simple path
- A bidirectional breadth-first solver returning a shortest path
- A parser and writer for the legacy maze text format
- A command line driver

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "Theseus Team"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Theseus requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import Maze
from .core.graph_paths import BidirectionalSolver, DepthFirstSolver, PathFinding, SolveMode

__all__ = [
    "Maze",
    "BidirectionalSolver",
    "DepthFirstSolver",
    "PathFinding",
    "SolveMode",
]
