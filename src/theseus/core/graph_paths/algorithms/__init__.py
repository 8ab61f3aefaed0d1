"""Maze search engine implementations."""

from theseus.core.graph_paths.algorithms.bidirectional import (
    BRANCHING_FACTOR,
    BidirectionalSolver,
    Frontier,
)
from theseus.core.graph_paths.algorithms.dfs import Color, DepthFirstSolver

__all__ = [
    "BRANCHING_FACTOR",
    "BidirectionalSolver",
    "Color",
    "DepthFirstSolver",
    "Frontier",
]
