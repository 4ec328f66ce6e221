#!/usr/bin/env python3
"""Ricochet Robots solver.

Usage::

    python main.py puzzles/puzzle1.txt                  # solve, replay each move
    python main.py puzzles/puzzle1.txt -max_moves 5     # cap the search depth
    python main.py puzzles/puzzle1.txt -all_solutions   # every shortest solution
    python main.py puzzles/puzzle1.txt -visualize -max_moves 3
    python main.py puzzles/puzzle1.txt -f rich          # Rich terminal output
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.puzzleloader import PuzzleLoader  # noqa: E402
from backend.errors import RicochetError  # noqa: E402

logger = logging.getLogger("ricochet")

USAGE = """\
Usage: main.py <puzzle_file>
       main.py <puzzle_file> -max_moves <#>
       main.py <puzzle_file> -all_solutions
       main.py <puzzle_file> -visualize
       main.py <puzzle_file> -max_moves <#> -all_solutions
       main.py <puzzle_file> -max_moves <#> -visualize"""


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(message: str) -> typer.Exit:
    typer.echo(f"ERROR: {message}", err=True)
    typer.echo(USAGE, err=True)
    return typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Puzzle description file.",
    ),
    max_moves: Optional[int] = typer.Option(
        None, "--max-moves", "-max_moves",
        min=1,
        help="Cap on the number of moves searched (default rows × cols).",
    ),
    all_solutions: bool = typer.Option(
        False, "--all-solutions", "-all_solutions",
        help="List every shortest solution without replaying the board.",
    ),
    visualize: bool = typer.Option(
        False, "--visualize", "-visualize",
        help="Print how many moves it takes any robot to reach each cell.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Find the fewest moves that bring a robot to the goal."""
    _configure_logging(verbose)

    try:
        board = PuzzleLoader.load(puzzle_file)
    except OSError as exc:
        raise _fail(f"could not open {puzzle_file} for reading ({exc.strerror})")
    except RicochetError as exc:
        raise _fail(f"{puzzle_file}: {exc}")

    if visualize and max_moves is None:
        logger.warning(
            "No -max_moves given; exploring up to %d moves may take very long.",
            board.rows * board.cols,
        )

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(
        board,
        max_moves=max_moves,
        all_solutions=all_solutions,
        visualize=visualize,
    )


if __name__ == "__main__":
    app()
