"""Per-cell reachability map: how many moves until some robot gets there."""

from __future__ import annotations

import logging

from backend.models.board import Board
from backend.models.command import Direction

logger = logging.getLogger(__name__)

UNREACHABLE = None

_UNSEEN = 1 << 62


class AccessibilityExplorer:
    """Exhaustively slide every robot in every direction up to ``max_depth``.

    Each cell records the smallest depth at which any robot was seen
    standing on it; cells never reached hold ``UNREACHABLE``.  Robots'
    starting cells record depth 0.  The traversal is depth-first with no
    success condition and no pruning, so every move sequence of length
    ``<= max_depth`` is visited.
    """

    def __init__(self, max_depth: int | None = None) -> None:
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}.")
        self.max_depth = max_depth
        self.nodes_explored = 0

    def depth_limit(self, board: Board) -> int:
        if self.max_depth is not None:
            return self.max_depth
        return board.rows * board.cols

    def explore(self, board: Board) -> list[list[int | None]]:
        """Return a ``rows`` x ``cols`` grid of minimum move counts."""
        self.nodes_explored = 0
        limit = self.depth_limit(board)
        depths = [[_UNSEEN] * board.cols for _ in range(board.rows)]

        self._visit(board, depths, 0, limit)

        grid: list[list[int | None]] = [
            [UNREACHABLE if d == _UNSEEN else d for d in row] for row in depths
        ]
        logger.debug(
            "Explored %d boards to depth %d", self.nodes_explored, limit
        )
        return grid

    def _visit(
        self, board: Board, depths: list[list[int]], depth: int, limit: int
    ) -> None:
        self.nodes_explored += 1
        for pos in board.robot_positions:
            if depth < depths[pos.row - 1][pos.col - 1]:
                depths[pos.row - 1][pos.col - 1] = depth

        if depth >= limit:
            return

        for i in range(board.num_robots):
            for direction in Direction:
                child = board.copy()
                if child.move_robot(i, direction):
                    self._visit(child, depths, depth + 1, limit)
