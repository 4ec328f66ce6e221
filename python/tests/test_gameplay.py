"""Replaying commands with GamePlay."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.puzzleloader import PuzzleLoader
from backend.models.command import Command, Direction
from backend.models.position import Position


def _game() -> GamePlay:
    return GamePlay(PuzzleLoader.parse("5 5 robot A 1 1 robot B 1 3 goal A 1 5"))


def test_replay_counts_moves() -> None:
    game = _game()
    commands = [Command("B", Direction.SOUTH), Command("A", Direction.EAST)]

    assert list(game.replay(commands)) == commands
    assert game.is_won
    assert game.state.moves == 2
    assert game.state.history == commands
    assert game.board.robot_position(1) == Position(5, 3)


def test_blocked_move_not_recorded() -> None:
    game = _game()
    assert not game.move(Command("A", Direction.NORTH))
    assert game.state.moves == 0
    assert game.state.history == []


def test_replay_stops_at_blocked_move() -> None:
    game = _game()
    with pytest.raises(ValueError, match="Move 1"):
        list(game.replay([Command("A", Direction.EAST), Command("A", Direction.EAST)]))
    assert game.state.moves == 1


def test_game_works_on_a_copy() -> None:
    board = PuzzleLoader.parse("3 3 robot A 1 1 goal any 3 3")
    game = GamePlay(board)
    game.move(Command("A", Direction.SOUTH))
    assert board.robot_position(0) == Position(1, 1)
    assert game.board.robot_position(0) == Position(3, 1)
