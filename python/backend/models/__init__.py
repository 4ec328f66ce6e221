from backend.models.board import Board, build_plausible_command
from backend.models.command import Command, Direction
from backend.models.position import Position

__all__ = ["Board", "Command", "Direction", "Position", "build_plausible_command"]
