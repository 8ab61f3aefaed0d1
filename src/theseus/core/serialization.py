"""
Legacy maze text format.

A maze file lists one edge per line as two integer vertex IDs separated by a
single space. Lines are stripped before parsing and blank lines are skipped.
Vertex 0 is the start and vertex 1 is the end; both belong to the maze even when
no line mentions them.

Example file::

    0 2
    2 3

    3 1
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Union

from .exceptions import FileUnavailableError, InvalidArgumentError, MalformedInputError
from .graph import Maze

logger = logging.getLogger(__name__)

# Constants
START_VERTEX = 0
END_VERTEX = 1
SEPARATOR = " "
VERTEX_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_maze_lines(lines: Iterable[str]) -> Maze:
    """
    Build a maze from lines of the legacy format.

    Args:
        lines: Text lines, with or without trailing newlines

    Returns:
        Maze: Maze with start 0 and end 1

    Raises:
        MalformedInputError: If a non-blank line is not two integers
    """
    maze = Maze(START_VERTEX, END_VERTEX)
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        # Allows empty lines, they are just skipped
        if not line:
            continue

        tokens = line.split(SEPARATOR)
        if len(tokens) != 2:
            raise MalformedInputError(
                f"expected two vertex IDs, got {len(tokens)} token(s): {line!r}", line_number
            )
        if not all(VERTEX_ID_PATTERN.fullmatch(token) for token in tokens):
            raise MalformedInputError(f"vertex IDs must be integers: {line!r}", line_number)
        node1, node2 = int(tokens[0]), int(tokens[1])

        maze.add_edge(node1, node2)

    logger.debug("Parsed %r", maze)
    return maze


def parse_maze_text(text: str) -> Maze:
    """Build a maze from the full text of a maze file."""
    return parse_maze_lines(text.splitlines())


def parse_maze(path: Union[str, Path]) -> Maze:
    """
    Read a maze file.

    Raises:
        FileUnavailableError: If the file does not exist, is a directory, or
            cannot be read
        MalformedInputError: If the content is not in the legacy format
    """
    if path is None:
        raise InvalidArgumentError("path must not be None")
    file_path = Path(path)
    if not file_path.exists() or file_path.is_dir():
        raise FileUnavailableError(f"File does not exist or is a directory: {file_path}")

    try:
        with open(file_path, "r") as f:
            return parse_maze_lines(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read maze file %s", file_path)
        raise FileUnavailableError(f"Cannot read {file_path}: {e}") from e


def format_maze(maze: Maze) -> str:
    """
    Render a maze in the legacy format.

    Edges are written one per line in a stable order. Vertices that have no
    edge cannot be represented and are dropped.
    """
    pairs = sorted(tuple(sorted(edge.as_tuple())) for edge in maze.get_edges())
    return "".join(f"{node1}{SEPARATOR}{node2}\n" for node1, node2 in pairs)


def write_maze(maze: Maze, path: Union[str, Path]) -> None:
    """Write a maze file in the legacy format."""
    with open(path, "w") as f:
        f.write(format_maze(maze))
