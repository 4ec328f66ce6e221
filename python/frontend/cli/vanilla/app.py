"""Vanilla terminal frontend: plain ASCII output, no third-party dependencies.

Prints the fixed-width ASCII board (three text lines per grid row, ``|``
and ``---`` for walls), the solution commands, and the accessibility
grid, using only the board's public accessors.
"""

from __future__ import annotations

from backend.engine.accessibility import AccessibilityExplorer
from backend.engine.gameplay import GamePlay
from backend.engine.pathfinder import PathFinder
from backend.models.board import Board
from frontend.cli.report import cell_char, goal_message, no_solution_message


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> str:
    """Return the ASCII drawing of *board*."""
    lines: list[str] = [" " + "".join(f"{j:>4}" for j in range(1, board.cols + 1))]

    for i in range(board.rows + 1):
        # Row 0 does not exist; only its lower wall line is drawn.
        if i > 0:
            first = "  "
            middle = ""
            for j in range(board.cols + 1):
                if j > 0:
                    first += "   "
                    middle += f" {cell_char(board, i, j)} "
                wall = "|" if board.has_vertical_wall(i, j + 0.5) else " "
                first += wall
                middle += wall
            lines.append(first)
            lines.append(f"{i:>2}{middle}")
            lines.append(first)

        sep = "  +"
        for j in range(1, board.cols + 1):
            sep += "---" if board.has_horizontal_wall(i + 0.5, j) else "   "
            sep += "+"
        lines.append(sep)

    return "\n".join(lines)


def render_accessibility(grid: list[list[int | None]]) -> str:
    """Return the move-count grid, ``.`` marking unreachable cells."""
    return "\n".join(
        "".join(f"{'.' if d is None else d:>4} " for d in row) for row in grid
    )


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    *,
    max_moves: int | None = None,
    all_solutions: bool = False,
    visualize: bool = False,
) -> None:
    """Solve or visualise *board* and print the result to stdout."""
    if visualize:
        grid = AccessibilityExplorer(max_moves).explore(board)
        print(render_accessibility(grid))
        return

    print(render_board(board))
    finder = PathFinder(max_moves)

    if all_solutions:
        solutions = finder.find_all_paths(board)
        if not solutions:
            print(no_solution_message(finder.move_limit(board)))
            return
        for n, path in enumerate(solutions, 1):
            print(f"Solution {n}:")
            for command in path:
                print(command)
        game = GamePlay(board)
        for _ in game.replay(solutions[0]):
            pass
        print(goal_message(game.board, len(solutions[0])))
        return

    path = finder.solve(board)
    if path is None:
        print(no_solution_message(finder.move_limit(board)))
        return

    game = GamePlay(board)
    for command in game.replay(path):
        print(command)
        print(render_board(game.board))
    print(goal_message(game.board, len(path)))
