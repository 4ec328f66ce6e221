"""Tracks the mutable state of a replay in progress."""

from __future__ import annotations

from backend.models.board import Board
from backend.models.command import Command


class GameState:
    """Holds the current board, move counter, and the commands applied."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.history: list[Command] = []

    # -- moves ----------------------------------------------------------------

    def record(self, command: Command) -> None:
        self.moves += 1
        self.history.append(command)

    @property
    def is_solved(self) -> bool:
        return self.board.is_goal_reached()
