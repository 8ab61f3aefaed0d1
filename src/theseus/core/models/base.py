"""
Core domain models base module for the maze solving system.

This module provides the validation helpers shared by the models and by the
maze graph itself.
"""

from typing import Any, Hashable

from ..exceptions import InvalidArgumentError


# Common validation functions
def require_vertex(vertex: Any, name: str = "vertex") -> Hashable:
    """Validate that a vertex reference is present and usable as a key."""
    if vertex is None:
        raise InvalidArgumentError(f"{name} must not be None")
    try:
        hash(vertex)
    except TypeError as e:
        raise InvalidArgumentError(f"{name} must be hashable, got {type(vertex).__name__}") from e
    return vertex
