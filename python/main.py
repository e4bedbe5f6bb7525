#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py puzzle.txt        # solve a puzzle file
    python main.py -s 3 -m 30        # solve a random 3×3 board
    python main.py puzzle.txt -q     # print only the move count
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.models import PuzzleFormatError, read_board  # noqa: E402
from frontend.cli.rich.app import console, run  # noqa: E402


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle: Optional[Path] = typer.Argument(
        None,
        help="Puzzle file (size, then tiles row by row). Omit for a random board.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=5,
        help="Grid size of a random board (2-5).",
    ),
    scramble: int = typer.Option(
        20, "-m", "--scramble",
        min=1,
        help="Random moves used to scramble a random board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for random board generation.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Only print the minimum number of moves (-1 if unsolvable).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Show debug logging from the search.",
    ),
) -> None:
    """Sliding Puzzle Solver."""
    _configure_logging(verbose)

    if puzzle is None:
        board = GameGenerator.generate(size, scramble, random.Random(seed))
    else:
        try:
            board = read_board(puzzle)
        except PuzzleFormatError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            raise typer.Exit(code=2)

    run(board, quiet=quiet)


if __name__ == "__main__":
    app()
