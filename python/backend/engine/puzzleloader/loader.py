"""Reads puzzle descriptions into boards.

The format is whitespace separated: two integers ``rows cols`` followed
by any number of records::

    robot A 1 1
    vertical_wall 3 2.5
    horizontal_wall 4.5 7
    goal any 5 5
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TypeVar

from backend.errors import BoardError, PuzzleFormatError
from backend.models.board import Board
from backend.models.position import Position

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Tokens:
    """Cursor over the whitespace-separated fields of a puzzle."""

    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())

    def __iter__(self) -> Iterator[str]:
        return self._it

    def take(self, convert: Callable[[str], T], what: str, record: str) -> T:
        raw = next(self._it, None)
        if raw is None:
            raise PuzzleFormatError(f"Missing {what} in {record} record.", record)
        try:
            return convert(raw)
        except ValueError:
            raise PuzzleFormatError(
                f"Invalid {what} {raw!r} in {record} record.", record
            ) from None


class PuzzleLoader:
    """Stateless loader; all methods are static."""

    @staticmethod
    def load(path: Path | str) -> Board:
        """Read and parse the puzzle file at *path*.

        ``OSError`` from reading the file is left to the caller.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PuzzleFormatError(f"{path.name} is not UTF-8 text.") from exc
        board = PuzzleLoader.parse(text)
        logger.info(
            "Loaded %s: %dx%d board, %d robots",
            path.name,
            board.rows,
            board.cols,
            board.num_robots,
        )
        return board

    @staticmethod
    def parse(text: str) -> Board:
        """Build a board from puzzle text, raising ``PuzzleFormatError``."""
        tokens = _Tokens(text)
        rows = tokens.take(int, "row count", "header")
        cols = tokens.take(int, "column count", "header")

        try:
            board = Board.create(rows, cols)
            for token in tokens:
                PuzzleLoader._apply(board, token, tokens)
        except BoardError as exc:
            raise PuzzleFormatError(str(exc)) from exc
        return board

    @staticmethod
    def _apply(board: Board, token: str, tokens: _Tokens) -> None:
        if token == "robot":
            name = tokens.take(str, "name", token)
            row = tokens.take(int, "row", token)
            col = tokens.take(int, "column", token)
            board.place_robot(Position(row, col), name)
        elif token == "vertical_wall":
            row = tokens.take(int, "row", token)
            board.add_vertical_wall(row, tokens.take(float, "column", token))
        elif token == "horizontal_wall":
            half_row = tokens.take(float, "row", token)
            board.add_horizontal_wall(half_row, tokens.take(int, "column", token))
        elif token == "goal":
            robot = tokens.take(str, "robot", token)
            row = tokens.take(int, "row", token)
            col = tokens.take(int, "column", token)
            board.set_goal(robot, Position(row, col))
        else:
            raise PuzzleFormatError(f"Unknown token in the input file: {token}", token)
