"""
Tests for the command line interface.
"""

import json
import sys

import pytest

from theseus import __main__ as entry
from theseus.cli import create_parser, main


@pytest.fixture
def maze_file(tmp_path):
    """Fixture providing a maze file with a long and a short route."""
    path = tmp_path / "maze1.txt"
    path.write_text("0 2\n2 3\n3 1\n0 4\n4 1\n")
    return path


def test_solve_default_text_output(maze_file, capsys):
    """Test the default run prints the shortest path."""
    assert main(["solve", str(maze_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Solving in mode: FIND_ONE, using algorithm: BidirectionalSolver"
    assert out[1] == "Solution(s): [[0, 4, 1]]"
    assert out[2].startswith("Elapsed time: ")
    assert out[2].endswith(" seconds")


def test_solve_all_json_output(maze_file, capsys):
    """Test the JSON document for an exhaustive run."""
    assert main(["solve", str(maze_file), "--mode", "all", "--format", "json", "--check"]) == 0
    document = json.loads(capsys.readouterr().out)
    assert document["mode"] == "FIND_ALL"
    assert document["algorithm"] == "DepthFirstSolver"
    assert sorted(document["solutions"]) == [[0, 2, 3, 1], [0, 4, 1]]
    assert document["metrics"]["paths_found"] == 2
    assert document["elapsed_seconds"] >= 0


def test_solve_without_solution(tmp_path, capsys):
    """Test the message printed for an unsolvable maze."""
    path = tmp_path / "closed.txt"
    path.write_text("0 2\n1 3\n")
    assert main(["solve", str(path), "--algorithm", "dfs", "--check"]) == 0
    out = capsys.readouterr().out
    assert "using algorithm: DepthFirstSolver" in out
    assert "The maze has no solution" in out


def test_unsupported_combination_fails(maze_file, capsys):
    """Test that bidirectional search refuses exhaustive mode."""
    assert main(["solve", str(maze_file), "--mode", "all", "--algorithm", "bidirectional"]) == 1
    assert "does not support FIND_ALL" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, capsys):
    """Test the error for an absent maze file."""
    assert main(["solve", str(tmp_path / "nope.txt")]) == 1
    assert "Error: File does not exist or is a directory" in capsys.readouterr().err


def test_malformed_file_fails(tmp_path, capsys):
    """Test the error for a malformed maze file."""
    path = tmp_path / "bad.txt"
    path.write_text("0 2\n2 three\n")
    assert main(["solve", str(path)]) == 1
    assert "Malformed Input: line 2" in capsys.readouterr().err


def test_invalid_timeout_fails(maze_file, capsys):
    """Test that a non-positive timeout is rejected."""
    assert main(["solve", str(maze_file), "--timeout", "0"]) == 1
    assert "timeout must be positive" in capsys.readouterr().err


def test_invalid_choice_exits_with_usage_error(maze_file):
    """Test argparse rejection of unknown options."""
    with pytest.raises(SystemExit) as excinfo:
        main(["solve", str(maze_file), "--mode", "some"])
    assert excinfo.value.code == 2


def test_format_command(tmp_path, capsys):
    """Test normalized printing of a maze file."""
    path = tmp_path / "messy.txt"
    path.write_text("\n4 1\n 2 0\n\n3 2\n")
    assert main(["format", str(path)]) == 0
    assert capsys.readouterr().out == "0 2\n1 4\n2 3\n"


def test_no_command_prints_help(capsys):
    """Test running without a command."""
    assert main([]) == 1
    assert "usage: theseus" in capsys.readouterr().out


def test_parser_defaults():
    """Test default option values."""
    args = create_parser().parse_args(["solve", "maze.txt"])
    assert args.mode == "one"
    assert args.algorithm is None
    assert args.timeout is None
    assert args.format == "text"
    assert not args.check


def test_module_entry_point_routes_commands(monkeypatch, maze_file, capsys):
    """Test the python -m router."""
    monkeypatch.setattr(sys, "argv", ["theseus", "solve", str(maze_file)])
    with pytest.raises(SystemExit) as excinfo:
        entry.main()
    assert excinfo.value.code == 0
    assert "[[0, 4, 1]]" in capsys.readouterr().out


def test_module_entry_point_unknown_command(monkeypatch, capsys):
    """Test the router with an unknown command."""
    monkeypatch.setattr(sys, "argv", ["theseus", "explore"])
    with pytest.raises(SystemExit) as excinfo:
        entry.main()
    assert excinfo.value.code == 1
    assert "Unknown command: explore" in capsys.readouterr().out
