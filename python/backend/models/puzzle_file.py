"""Puzzle file persistence in the plain text format.

The first integer is the board size *n*, followed by the n² tiles in
row-major order. Any whitespace separates values; 0 is the blank::

    3
     0  1  3
     4  2  5
     7  8  6
"""

from __future__ import annotations

from pathlib import Path

from backend.models.board import Board


class PuzzleFormatError(ValueError):
    """Raised when puzzle text cannot be turned into a board."""


def parse_board(text: str) -> Board:
    tokens = text.split()
    if not tokens:
        raise PuzzleFormatError("Puzzle is empty.")
    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise PuzzleFormatError(f"Puzzle contains a non-integer: {exc}") from exc

    size, tiles = values[0], values[1:]
    if size < 2:
        raise PuzzleFormatError(f"Board size must be at least 2, got {size}.")
    if len(tiles) != size * size:
        raise PuzzleFormatError(
            f"Expected {size * size} tiles for a {size}×{size} board, "
            f"got {len(tiles)}."
        )
    try:
        return Board.from_flat(size, tiles)
    except ValueError as exc:
        raise PuzzleFormatError(str(exc)) from exc


def read_board(path: Path) -> Board:
    """Load a board from a puzzle file."""
    try:
        text = path.read_text()
    except OSError as exc:
        raise PuzzleFormatError(f"Cannot read {path}: {exc.strerror}") from exc
    return parse_board(text)


def format_board(board: Board) -> str:
    return str(board) + "\n"
