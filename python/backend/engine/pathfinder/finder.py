"""Iterative-deepening move search."""

from __future__ import annotations

import logging

from backend.models.board import Board
from backend.models.command import Command, Direction

logger = logging.getLogger(__name__)

# (robot index, direction) of the move that produced the current board.
_Move = tuple[int, Direction]


class PathFinder:
    """Find a minimum-length command sequence that reaches the goal.

    The search is plain depth-first exploration under a depth bound that
    grows from ``min_moves`` to ``max_moves`` (default ``rows * cols``).
    Every branch works on its own copy of the board.  Revisited boards are
    explored again; the only prune skips repeating the immediately
    preceding robot + direction.  Work grows as ``(4 * robots) ** depth``,
    so callers should keep ``max_moves`` small.

    Ties between equally short solutions are broken by enumeration order:
    robot 0 before robot 1, and north, east, south, west within a robot.
    """

    def __init__(self, max_moves: int | None = None, min_moves: int = 0) -> None:
        if max_moves is not None and max_moves < 1:
            raise ValueError(f"max_moves must be positive, got {max_moves}.")
        if min_moves < 0:
            raise ValueError(f"min_moves must not be negative, got {min_moves}.")
        self.max_moves = max_moves
        self.min_moves = min_moves
        self.nodes_explored = 0

    def move_limit(self, board: Board) -> int:
        if self.max_moves is not None:
            return self.max_moves
        return board.rows * board.cols

    def _bounds(self, board: Board) -> range:
        limit = self.move_limit(board)
        return range(min(self.min_moves, limit), limit + 1)

    # -- public API -----------------------------------------------------------

    def solve(self, board: Board) -> list[Command] | None:
        """Return the commands from *board* to the goal, start to finish.

        ``[]`` means the goal is already satisfied; ``None`` means no
        solution exists within the move limit.
        """
        self.nodes_explored = 0
        for bound in self._bounds(board):
            logger.debug("Searching with depth bound %d", bound)
            path = self._bounded(board, bound)
            if path is not None:
                logger.info("Found a %d-move solution", len(path))
                logger.debug("Explored %d nodes", self.nodes_explored)
                return path

        logger.info("No solution within %d moves", self.move_limit(board))
        logger.debug("Explored %d nodes", self.nodes_explored)
        return None

    def find_path(self, board: Board, depth: int) -> list[Command] | None:
        """Run a single search attempt bounded by *depth* moves."""
        self.nodes_explored = 0
        return self._bounded(board, depth)

    def find_all_paths(self, board: Board) -> list[list[Command]]:
        """Return every solution of the shortest length the bounds reach.

        Solutions are listed in enumeration order; ``[]`` if there is none.
        """
        first = self.solve(board)
        if first is None:
            return []

        solutions: list[list[Command]] = []
        self._collect(board, len(first), None, [], solutions)
        logger.info("Found %d solutions of length %d", len(solutions), len(first))
        return solutions

    def hint(self, board: Board) -> Command | None:
        """Return the first move of a shortest solution, if there is one."""
        path = self.solve(board)
        return path[0] if path else None

    # -- recursion ------------------------------------------------------------

    def _bounded(self, board: Board, depth: int) -> list[Command] | None:
        reversed_path: list[Command] = []
        if not self._search(board, depth, None, reversed_path):
            return None
        reversed_path.reverse()
        return reversed_path

    def _search(
        self,
        board: Board,
        depth: int,
        last: _Move | None,
        reversed_path: list[Command],
    ) -> bool:
        """Depth-first search; on success the moves are appended goal-first."""
        self.nodes_explored += 1
        if board.is_goal_reached():
            return True
        if depth <= 0:
            return False

        for i in range(board.num_robots):
            for direction in Direction:
                if last == (i, direction):
                    continue
                child = board.copy()
                if not child.move_robot(i, direction):
                    continue
                if self._search(child, depth - 1, (i, direction), reversed_path):
                    reversed_path.append(Command(board.robot_name(i), direction))
                    return True
        return False

    def _collect(
        self,
        board: Board,
        depth: int,
        last: _Move | None,
        prefix: list[Command],
        solutions: list[list[Command]],
    ) -> None:
        self.nodes_explored += 1
        if board.is_goal_reached():
            solutions.append(prefix[:])
            return
        if depth <= 0:
            return

        for i in range(board.num_robots):
            for direction in Direction:
                if last == (i, direction):
                    continue
                child = board.copy()
                if not child.move_robot(i, direction):
                    continue
                prefix.append(Command(board.robot_name(i), direction))
                self._collect(child, depth - 1, (i, direction), prefix, solutions)
                prefix.pop()
