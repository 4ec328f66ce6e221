"""Text shared by the CLI frontends: goal markers and result lines."""

from __future__ import annotations

from backend.models.board import Board
from backend.models.position import Position


def goal_marker(board: Board) -> str:
    """``?`` if any robot may take the goal, else the goal robot in lowercase."""
    if board.goal_robot is None:
        return "?"
    return board.robot_name(board.goal_robot).lower()


def cell_char(board: Board, row: int, col: int) -> str:
    """The character drawn for one cell: robot name, goal marker, or blank."""
    pos = Position(row, col)
    name = board.get_spot(pos)
    if name is not None:
        return name
    if pos == board.goal:
        return goal_marker(board)
    return " "


def goal_message(board: Board, moves: int) -> str:
    """Summary line for a board whose goal has been reached."""
    winner = board.goal_reached_by()
    name = board.robot_name(winner) if winner is not None else "?"
    return f"robot {name} reaches the goal after {moves} moves"


def no_solution_message(limit: int) -> str:
    return f"no solutions with {limit} or fewer moves"
