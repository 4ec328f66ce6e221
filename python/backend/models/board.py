"""Board model for the ricochet robots puzzle.

Walls are addressed with half-integer coordinates: a horizontal wall at
``(i + 0.5, c)`` separates rows ``i`` and ``i + 1`` in column ``c``; a
vertical wall at ``(r, j + 0.5)`` separates columns ``j`` and ``j + 1``
in row ``r``.  Internally both wall sets are integer-indexed grids of
grid lines, so line ``0`` and the last line are the board border.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from backend.errors import BoardError, CommandReconstructionError, UnknownRobotError
from backend.models.command import Command, Direction
from backend.models.position import Position

ANY_ROBOT = "any"

_HALF_TOLERANCE = 0.005


def _half_index(value: float) -> int:
    """Map a half-integer wall coordinate ``i + 0.5`` to grid line ``i``."""
    if not math.isfinite(value):
        raise BoardError(f"Wall coordinate {value} is not a finite number.")
    if abs((value - math.floor(value)) - 0.5) >= _HALF_TOLERANCE:
        raise BoardError(f"Wall coordinate {value} is not a half unit.")
    return math.floor(value)


@dataclass
class Board:
    """Grid dimensions, walls, robots and the goal of one puzzle.

    ``cells`` holds the name of the robot standing in each cell, or
    ``None``.  Robot indices follow placement order and never change.
    ``goal_robot`` is ``None`` when any robot may reach the goal.
    """

    rows: int
    cols: int
    cells: list[list[str | None]]
    vertical_walls: list[list[bool]]
    horizontal_walls: list[list[bool]]
    robots: list[str] = field(default_factory=list)
    robot_positions: list[Position] = field(default_factory=list)
    goal: Position = field(default_factory=Position)
    goal_robot: int | None = None

    # -- construction helpers -------------------------------------------------

    @classmethod
    def create(cls, rows: int, cols: int) -> Board:
        """Return an empty *rows* x *cols* board enclosed by border walls."""
        if rows < 1 or cols < 1:
            raise BoardError(f"Invalid board dimensions {rows}x{cols}.")

        vertical = [[False] * (cols + 1) for _ in range(rows)]
        for line in vertical:
            line[0] = line[cols] = True
        horizontal = [[False] * cols for _ in range(rows + 1)]
        horizontal[0] = [True] * cols
        horizontal[rows] = [True] * cols

        return cls(
            rows=rows,
            cols=cols,
            cells=[[None] * cols for _ in range(rows)],
            vertical_walls=vertical,
            horizontal_walls=horizontal,
        )

    def copy(self) -> Board:
        return Board(
            rows=self.rows,
            cols=self.cols,
            cells=[row[:] for row in self.cells],
            vertical_walls=[line[:] for line in self.vertical_walls],
            horizontal_walls=[line[:] for line in self.horizontal_walls],
            robots=self.robots[:],
            robot_positions=self.robot_positions[:],
            goal=self.goal,
            goal_robot=self.goal_robot,
        )

    # -- wall geometry --------------------------------------------------------

    def has_horizontal_wall(self, row: float, col: int) -> bool:
        line = self._horizontal_line(row, col)
        return self.horizontal_walls[line][col - 1]

    def has_vertical_wall(self, row: int, col: float) -> bool:
        line = self._vertical_line(row, col)
        return self.vertical_walls[row - 1][line]

    def add_horizontal_wall(self, row: float, col: int) -> None:
        line = self._horizontal_line(row, col)
        if self.horizontal_walls[line][col - 1]:
            raise BoardError(f"Horizontal wall at ({row}, {col}) already exists.")
        self.horizontal_walls[line][col - 1] = True

    def add_vertical_wall(self, row: int, col: float) -> None:
        line = self._vertical_line(row, col)
        if self.vertical_walls[row - 1][line]:
            raise BoardError(f"Vertical wall at ({row}, {col}) already exists.")
        self.vertical_walls[row - 1][line] = True

    def _horizontal_line(self, row: float, col: int) -> int:
        line = _half_index(row)
        if not (0 <= line <= self.rows and 1 <= col <= self.cols):
            raise BoardError(f"Horizontal wall ({row}, {col}) is off the board.")
        return line

    def _vertical_line(self, row: int, col: float) -> int:
        line = _half_index(col)
        if not (1 <= row <= self.rows and 0 <= line <= self.cols):
            raise BoardError(f"Vertical wall ({row}, {col}) is off the board.")
        return line

    # -- robots ---------------------------------------------------------------

    @property
    def num_robots(self) -> int:
        return len(self.robots)

    def which_robot(self, name: str) -> int:
        """Return the index of the robot called *name*."""
        try:
            return self.robots.index(name)
        except ValueError:
            raise UnknownRobotError(name) from None

    def robot_name(self, i: int) -> str:
        return self.robots[i]

    def robot_position(self, i: int) -> Position:
        return self.robot_positions[i]

    def get_spot(self, pos: Position) -> str | None:
        """Return the name of the robot at *pos*, or ``None`` if empty."""
        self._check_position(pos)
        return self.cells[pos.row - 1][pos.col - 1]

    def _set_spot(self, pos: Position, name: str | None) -> None:
        self.cells[pos.row - 1][pos.col - 1] = name

    def _check_position(self, pos: Position) -> None:
        if not pos.is_within(self.rows, self.cols):
            raise BoardError(
                f"Position {pos} is outside the {self.rows}x{self.cols} board."
            )

    def place_robot(self, pos: Position, name: str) -> None:
        """Place a new robot.  Robots are placed once and never removed."""
        self._check_position(pos)
        if len(name) != 1 or not ("A" <= name <= "Z"):
            raise BoardError(f"Robot name {name!r} must be one capital letter.")
        if name in self.robots:
            raise BoardError(f"Robot {name} is already on the board.")
        if self.get_spot(pos) is not None:
            raise BoardError(f"Cell {pos} is already occupied.")
        if pos == self.goal:
            raise BoardError(f"Robot {name} may not start on the goal {pos}.")

        self.robots.append(name)
        self.robot_positions.append(pos)
        self._set_spot(pos, name)

    # -- goal -----------------------------------------------------------------

    def set_goal(self, robot: str, pos: Position) -> None:
        """Set the goal cell and the robot that must reach it (or ``"any"``)."""
        self._check_position(pos)
        if self.get_spot(pos) is not None:
            raise BoardError(f"Goal {pos} is under robot {self.get_spot(pos)}.")

        if robot == ANY_ROBOT:
            goal_robot = None
        elif len(robot) == 1:
            goal_robot = self.which_robot(robot)
        else:
            raise BoardError(f"Goal robot {robot!r} is not a robot name or 'any'.")

        self.goal = pos
        self.goal_robot = goal_robot

    def goal_reached_by(self) -> int | None:
        """Return the index of a qualifying robot standing on the goal."""
        if self.goal_robot is not None:
            if self.robot_positions[self.goal_robot] == self.goal:
                return self.goal_robot
            return None
        for i, pos in enumerate(self.robot_positions):
            if pos == self.goal:
                return i
        return None

    def is_goal_reached(self) -> bool:
        return self.goal_reached_by() is not None

    # -- movement -------------------------------------------------------------

    def _step_blocked(self, pos: Position, direction: Direction) -> bool:
        """True if a robot at *pos* cannot advance one cell in *direction*."""
        if direction is Direction.NORTH:
            wall = self.horizontal_walls[pos.row - 1][pos.col - 1]
        elif direction is Direction.SOUTH:
            wall = self.horizontal_walls[pos.row][pos.col - 1]
        elif direction is Direction.EAST:
            wall = self.vertical_walls[pos.row - 1][pos.col]
        else:
            wall = self.vertical_walls[pos.row - 1][pos.col - 1]
        if wall:
            return True

        nxt = pos.offset(*direction.delta)
        if not nxt.is_within(self.rows, self.cols):
            return True
        return self.cells[nxt.row - 1][nxt.col - 1] is not None

    def can_move_robot(self, i: int, direction: Direction | str) -> bool:
        """Check, without moving, whether robot *i* can take one step."""
        return not self._step_blocked(self.robot_positions[i], Direction(direction))

    def move_robot(self, i: int, direction: Direction | str) -> bool:
        """Slide robot *i* until it hits a wall, another robot or the edge.

        Returns False, leaving the board untouched, if the very first step
        is blocked.
        """
        direction = Direction(direction)
        start = self.robot_positions[i]
        if self._step_blocked(start, direction):
            return False

        dr, dc = direction.delta
        pos = start
        while not self._step_blocked(pos, direction):
            pos = pos.offset(dr, dc)

        self._set_spot(start, None)
        self.robot_positions[i] = pos
        self._set_spot(pos, self.robots[i])
        return True

    def execute_command(self, command: Command) -> bool:
        return self.move_robot(self.which_robot(command.robot), command.direction)

    def execute_command_to_new_board(self, command: Command) -> Board:
        board = self.copy()
        board.execute_command(command)
        return board


def build_plausible_command(before: Board, after: Board) -> Command | None:
    """Return the single move that turns *before* into *after*.

    Only the first robot whose position differs is considered.  Returns
    ``None`` when no robot moved; raises ``CommandReconstructionError``
    when no direction lands that robot on its new cell.  Neither board
    is modified.
    """
    if before.robots != after.robots:
        raise BoardError("Boards do not hold the same robots.")

    moved = next(
        (
            i
            for i, (old, new) in enumerate(
                zip(before.robot_positions, after.robot_positions)
            )
            if old != new
        ),
        None,
    )
    if moved is None:
        return None

    target = after.robot_positions[moved]
    for direction in Direction:
        trial = before.copy()
        if trial.move_robot(moved, direction) and trial.robot_positions[moved] == target:
            return Command(before.robots[moved], direction)

    raise CommandReconstructionError(
        f"No single move takes robot {before.robots[moved]} from "
        f"{before.robot_positions[moved]} to {target}."
    )
