"""Rich terminal frontend: styled board, panels, and a reachability table.

Shows the same information as the vanilla CLI: robots in bold colour,
the goal highlighted, walls in bright blue, and the accessibility grid
as a table shaded by move count.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.accessibility import AccessibilityExplorer
from backend.engine.gameplay import GamePlay
from backend.engine.pathfinder import PathFinder
from backend.models.board import Board
from backend.models.command import Command
from backend.models.position import Position
from frontend.cli.report import cell_char, goal_message, no_solution_message

console = Console()

_ROBOT_STYLES = ("bold red", "bold green", "bold yellow", "bold magenta", "bold cyan")
_WALL = "bright_blue"


# -- board rendering ----------------------------------------------------------


def _cell_style(board: Board, row: int, col: int) -> str:
    pos = Position(row, col)
    name = board.get_spot(pos)
    if name is not None:
        return _ROBOT_STYLES[board.which_robot(name) % len(_ROBOT_STYLES)]
    if pos == board.goal:
        return "bold black on yellow"
    return ""


def render_board(board: Board) -> Text:
    """Return a styled Text drawing of *board*."""
    text = Text()
    text.append(" " + "".join(f"{j:>4}" for j in range(1, board.cols + 1)) + "\n", style="dim")

    for i in range(board.rows + 1):
        if i > 0:
            first = Text("  ")
            middle = Text(f"{i:>2}", style="dim")
            for j in range(board.cols + 1):
                if j > 0:
                    first.append("   ")
                    middle.append(" ")
                    middle.append(cell_char(board, i, j), style=_cell_style(board, i, j))
                    middle.append(" ")
                wall = "|" if board.has_vertical_wall(i, j + 0.5) else " "
                first.append(wall, style=_WALL)
                middle.append(wall, style=_WALL)
            text.append_text(first)
            text.append("\n")
            text.append_text(middle)
            text.append("\n")
            text.append_text(first)
            text.append("\n")

        text.append("  +", style=_WALL)
        for j in range(1, board.cols + 1):
            text.append("---" if board.has_horizontal_wall(i + 0.5, j) else "   ", style=_WALL)
            text.append("+", style=_WALL)
        if i < board.rows:
            text.append("\n")

    return text


def render_accessibility(grid: list[list[int | None]]) -> Table:
    """Return a Rich Table of move counts; unreachable cells are dimmed."""
    table = Table(
        show_header=True,
        box=rich.box.ROUNDED,
        border_style=_WALL,
        padding=(0, 1),
    )
    table.add_column("", style="dim", justify="right")
    for j in range(1, (len(grid[0]) if grid else 0) + 1):
        table.add_column(str(j), justify="right")

    for i, row in enumerate(grid, 1):
        cells: list[str] = []
        for d in row:
            if d is None:
                cells.append("[dim].[/dim]")
            elif d == 0:
                cells.append(f"[bold green]{d}[/bold green]")
            else:
                cells.append(f"[bold white]{d}[/bold white]")
        table.add_row(str(i), *cells)

    return table


def _board_panel(board: Board, title: str) -> Panel:
    return Panel(
        Align.center(render_board(board)),
        title=title,
        border_style=_WALL,
        padding=(1, 2),
    )


def _command_text(command: Command, step: int, total: int) -> Text:
    text = Text()
    text.append(f"  {step}/{total} ", style="dim")
    text.append(f"Robot {command.robot}", style="bold cyan")
    text.append(f" moves {command.direction.value}")
    return text


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    *,
    max_moves: int | None = None,
    all_solutions: bool = False,
    visualize: bool = False,
) -> None:
    """Solve or visualise *board* and print the result with Rich."""
    if visualize:
        explorer = AccessibilityExplorer(max_moves)
        grid = explorer.explore(board)
        console.print(
            Panel(
                Align.center(render_accessibility(grid)),
                title=f"[bold]Accessibility  (≤ {explorer.depth_limit(board)} moves)[/bold]",
                border_style=_WALL,
            )
        )
        return

    console.print(_board_panel(board, f"[bold]Puzzle  {board.rows}×{board.cols}[/bold]"))
    finder = PathFinder(max_moves)

    if all_solutions:
        solutions = finder.find_all_paths(board)
        if not solutions:
            console.print(f"[red]{no_solution_message(finder.move_limit(board))}[/red]")
            return
        parts: list[Text] = []
        for n, path in enumerate(solutions, 1):
            parts.append(Text(f"Solution {n}", style="bold yellow"))
            parts.extend(_command_text(c, s, len(path)) for s, c in enumerate(path, 1))
        console.print(Panel(Group(*parts), title="[bold]All solutions[/bold]", border_style="yellow"))
        game = GamePlay(board)
        for _ in game.replay(solutions[0]):
            pass
        console.print(f"[bold green]{goal_message(game.board, len(solutions[0]))}[/bold green]")
        return

    path = finder.solve(board)
    if path is None:
        console.print(f"[red]{no_solution_message(finder.move_limit(board))}[/red]")
        return

    game = GamePlay(board)
    for step, command in enumerate(game.replay(path), 1):
        console.print(_command_text(command, step, len(path)))
        console.print(_board_panel(game.board, f"[cyan]After move {step}[/cyan]"))
    console.print(f"[bold green]{goal_message(game.board, len(path))}[/bold green]")
