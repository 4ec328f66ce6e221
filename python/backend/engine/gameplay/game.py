"""Core gameplay logic: applies commands and checks the goal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from backend.engine.gamestate import GameState
from backend.models.board import Board
from backend.models.command import Command


class GamePlay:
    """Replays commands on a private copy of a board."""

    def __init__(self, board: Board) -> None:
        self.state = GameState(board.copy())

    # -- movement -------------------------------------------------------------

    def move(self, command: Command) -> bool:
        """Apply *command*.  Returns False if the robot could not move."""
        if not self.state.board.execute_command(command):
            return False
        self.state.record(command)
        return True

    def replay(self, commands: Iterable[Command]) -> Iterator[Command]:
        """Apply *commands* in order, yielding each after it is applied.

        Raises ``ValueError`` at the first command that does not move.
        """
        for i, command in enumerate(commands):
            if not self.move(command):
                raise ValueError(f"Move {i} ({command}) is blocked.")
            yield command

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
