"""
Core domain models package for the maze solving system.

This package provides the fundamental data structures that represent the
connections of a maze.
"""

from .base import require_vertex
from .edge import Edge

__all__ = [
    # Base utilities
    "require_vertex",
    # Edge models
    "Edge",
]
