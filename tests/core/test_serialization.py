"""
Tests for the legacy maze text format.
"""

import pytest

from theseus.core.exceptions import FileUnavailableError, InvalidArgumentError, MalformedInputError
from theseus.core.graph import Maze
from theseus.core.serialization import (
    END_VERTEX,
    START_VERTEX,
    format_maze,
    parse_maze,
    parse_maze_lines,
    parse_maze_text,
    write_maze,
)


@pytest.fixture
def maze_file(tmp_path):
    """Fixture providing a maze file with the two-route layout."""
    path = tmp_path / "maze1.txt"
    path.write_text("0 2\n2 3\n3 1\n0 4\n4 1\n")
    return path


def test_parse_maze_file(maze_file):
    """Test reading a maze file."""
    maze = parse_maze(maze_file)
    assert maze.start == START_VERTEX == 0
    assert maze.end == END_VERTEX == 1
    assert maze.get_neighbors(0) == {2, 4}
    assert maze.edge_count == 5


def test_parse_accepts_string_path(maze_file):
    """Test that plain string paths are accepted."""
    assert parse_maze(str(maze_file)).edge_count == 5


def test_blank_lines_and_surrounding_whitespace():
    """Test that blank lines are skipped and lines are stripped."""
    maze = parse_maze_text("\n  0 2  \n\n\t2 1\n   \n")
    assert maze.get_edges() == Maze.from_edges([(0, 2), (2, 1)]).get_edges()


def test_empty_input_has_designated_vertices():
    """Test that start and end exist without any edge line."""
    maze = parse_maze_text("")
    assert maze.get_vertices() == {0, 1}
    assert maze.edge_count == 0


def test_signed_and_padded_integers():
    """Test integer tokens with signs and leading zeros."""
    maze = parse_maze_lines(["-3 007", "+5 1"])
    assert maze.has_edge(-3, 7)
    assert maze.has_edge(5, 1)


@pytest.mark.parametrize(
    "text,line_number,message",
    [
        ("0 2\n2\n", 2, "expected two vertex IDs, got 1 token"),
        ("0 2 3\n", 1, "got 3 token"),
        ("0  2\n", 1, "got 3 token"),
        ("0\t2\n", 1, "got 1 token"),
        ("0 2\n\n0 x\n", 3, "vertex IDs must be integers"),
        ("1.5 2\n", 1, "vertex IDs must be integers"),
        ("1_000 2\n", 1, "vertex IDs must be integers"),
    ],
)
def test_malformed_lines(text, line_number, message):
    """Test that malformed lines are reported with their line number."""
    with pytest.raises(MalformedInputError, match=message) as excinfo:
        parse_maze_text(text)
    assert excinfo.value.line_number == line_number
    assert f"line {line_number}" in str(excinfo.value)


def test_missing_file(tmp_path):
    """Test reading a file that does not exist."""
    with pytest.raises(FileUnavailableError, match="does not exist"):
        parse_maze(tmp_path / "missing.txt")


def test_directory_instead_of_file(tmp_path):
    """Test reading a directory."""
    with pytest.raises(FileUnavailableError, match="is a directory"):
        parse_maze(tmp_path)


def test_none_path():
    """Test that a missing path argument is rejected."""
    with pytest.raises(InvalidArgumentError):
        parse_maze(None)


def test_format_maze_is_sorted():
    """Test the normalized rendering."""
    maze = Maze.from_edges([(4, 1), (2, 0), (3, 2)])
    assert format_maze(maze) == "0 2\n1 4\n2 3\n"


def test_format_drops_isolated_vertices():
    """Test that vertices without edges are not written."""
    maze = Maze.from_edges([(0, 2)])
    maze.add_vertex(9)
    assert format_maze(maze) == "0 2\n"


def test_write_and_read_back(tmp_path, two_route_maze):
    """Test writing a maze file and parsing it again."""
    path = tmp_path / "out.txt"
    write_maze(two_route_maze, path)
    assert parse_maze(path).get_edges() == two_route_maze.get_edges()
