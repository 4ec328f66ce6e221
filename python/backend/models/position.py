"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A 1-indexed (row, col) cell on the board.

    The default ``(-1, -1)`` marks an uninitialised position.
    """

    row: int = -1
    col: int = -1

    @property
    def is_set(self) -> bool:
        return self.row != -1 or self.col != -1

    def is_within(self, rows: int, cols: int) -> bool:
        return 1 <= self.row <= rows and 1 <= self.col <= cols

    def offset(self, dr: int, dc: int) -> Position:
        return Position(self.row + dr, self.col + dc)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
