"""Directions and single-move commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """The four slide directions, in search enumeration order."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) step of one cell in this direction."""
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


@dataclass(frozen=True)
class Command:
    """Move the robot named *robot* one slide in *direction*."""

    robot: str
    direction: Direction

    def __str__(self) -> str:
        return f"Robot {self.robot} moves {self.direction.value}"
