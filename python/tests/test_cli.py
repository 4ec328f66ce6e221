"""Command line and terminal rendering."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from backend.engine.puzzleloader import PuzzleLoader
from frontend.cli.report import goal_marker
from frontend.cli.vanilla.app import render_accessibility, render_board
from main import app

PUZZLES_DIR = Path(__file__).resolve().parent.parent.parent / "puzzles"

runner = CliRunner()


def _invoke(*args: str):
    return runner.invoke(app, [str(a) for a in args])


# -- rendering ----------------------------------------------------------------


def test_render_board() -> None:
    board = PuzzleLoader.parse("1 2 robot A 1 1 goal any 1 2")
    assert render_board(board) == "\n".join(
        [
            "    1   2",
            "  +---+---+",
            "  |       |",
            " 1| A   ? |",
            "  |       |",
            "  +---+---+",
        ]
    )


def test_render_board_walls_and_goal_robot() -> None:
    board = PuzzleLoader.parse(
        "2 2 robot A 1 1 robot B 2 2 vertical_wall 1 1.5 horizontal_wall 1.5 2 goal B 1 2"
    )
    assert goal_marker(board) == "b"
    lines = render_board(board).split("\n")
    assert lines[3] == " 1| A | b |"
    assert lines[5] == "  +   +---+"
    assert lines[7] == " 2|     B |"


def test_render_accessibility() -> None:
    assert render_accessibility([[0, None], [12, 3]]) == "   0    . \n  12    3 "


# -- command line -------------------------------------------------------------


def test_solve_replays_each_move() -> None:
    result = _invoke(PUZZLES_DIR / "open_5x5.txt")

    assert result.exit_code == 0, result.output
    assert "Robot A moves east\n" in result.output
    assert "Robot A moves south\n" in result.output
    assert result.output.rstrip().endswith("robot A reaches the goal after 2 moves")
    # initial board plus one board per move
    assert result.output.count("  +---+---+---+---+---+") == 6


@pytest.mark.parametrize("flag", ["-all_solutions", "--all-solutions"])
def test_all_solutions(flag: str) -> None:
    result = _invoke(PUZZLES_DIR / "open_5x5.txt", flag)

    assert result.exit_code == 0, result.output
    assert "Solution 1:\nRobot A moves east\nRobot A moves south\n" in result.output
    assert "Solution 2:\nRobot A moves south\nRobot A moves east\n" in result.output
    assert result.output.count("  +---+---+---+---+---+") == 2


def test_no_solution() -> None:
    result = _invoke(PUZZLES_DIR / "unreachable_center.txt", "-max_moves", "3")
    assert result.exit_code == 0, result.output
    assert "no solutions with 3 or fewer moves" in result.output


def test_visualize() -> None:
    result = _invoke(PUZZLES_DIR / "open_5x5.txt", "-visualize", "-max_moves", "2")
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "   0    .    .    .    1 "
    assert lines[4] == "   1    .    .    .    2 "


def test_rich_frontend() -> None:
    result = _invoke(PUZZLES_DIR / "walled_4x4.txt", "-f", "rich")
    assert result.exit_code == 0, result.output
    assert "robot A reaches the goal after 2 moves" in result.output


def test_rich_visualize() -> None:
    result = _invoke(PUZZLES_DIR / "blocker.txt", "--frontend", "rich", "--visualize", "--max-moves", "1")
    assert result.exit_code == 0, result.output
    assert "Accessibility" in result.output


def test_missing_file() -> None:
    result = _invoke(PUZZLES_DIR / "does_not_exist.txt")
    assert result.exit_code != 0


def test_bad_puzzle(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("3 3 robot A 1 1 wormhole 2 2")
    result = _invoke(path)
    assert result.exit_code == 1
    assert "Unknown token" in result.output
    assert "Usage:" in result.output


@pytest.mark.parametrize("args", [["-max_moves", "0"], ["-bogus"]], ids=["zero-moves", "unknown-flag"])
def test_bad_arguments(args: list[str]) -> None:
    result = _invoke(PUZZLES_DIR / "open_5x5.txt", *args)
    assert result.exit_code == 2


@pytest.mark.parametrize(
    "content",
    [b"3 3 robot \xff 1 1", b"3 3 robot A 1 1 vertical_wall 1 nan goal any 3 3"],
    ids=["not-utf8", "nan-wall"],
)
def test_unreadable_puzzle_content(tmp_path: Path, content: bytes) -> None:
    path = tmp_path / "broken.txt"
    path.write_bytes(content)
    result = _invoke(path)
    assert result.exit_code == 1
    assert "ERROR:" in result.output
    assert "Usage:" in result.output
