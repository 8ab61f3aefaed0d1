"""
Custom exceptions for the maze solving system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle error conditions in a structured way. Every exception derives from
TheseusError so callers such as the command line driver can handle the whole
family at once, while the more specific types also derive from the matching
builtin exception.
"""

from typing import Optional


class TheseusError(Exception):
    """Base class for every error raised by the maze solving system."""


class InvalidArgumentError(TheseusError, ValueError):
    """
    Raised when an argument is missing or invalid where a value is required.

    This exception is raised as soon as a maze operation receives a missing
    vertex reference, and never swallowed by the search engines.

    Examples:
        * Edge constructed with a None endpoint
        * Neighbor lookup for a None vertex
        * Removal of the designated start or end vertex
    """

    def __str__(self) -> str:
        """Format invalid argument message."""
        return f"Invalid Argument: {super().__str__()}"


class UnsupportedOperationError(TheseusError, NotImplementedError):
    """
    Raised when a solver is asked for a mode it does not implement.

    Examples:
        * Bidirectional search asked for all solutions
    """


class MalformedInputError(TheseusError):
    """
    Raised when maze text cannot be parsed.

    Carries the 1-based line number of the offending line when known.

    Examples:
        * A line with more or fewer than two tokens
        * A token that is not an integer
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number

    def __str__(self) -> str:
        """Format malformed input message."""
        if self.line_number is not None:
            return f"Malformed Input: line {self.line_number}: {super().__str__()}"
        return f"Malformed Input: {super().__str__()}"


class FileUnavailableError(TheseusError):
    """
    Raised when a maze file cannot be opened.

    Examples:
        * Path does not exist
        * Path is a directory
        * Permission denied
    """


class SearchCancelledError(TheseusError):
    """
    Raised when a running search observes its cancellation signal.

    Examples:
        * Command line timeout expired
        * Caller set the cancel event from another thread
    """
