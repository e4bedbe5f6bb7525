from backend.models.board import Board, Direction
from backend.models.puzzle_file import (
    PuzzleFormatError,
    format_board,
    parse_board,
    read_board,
)

__all__ = [
    "Board",
    "Direction",
    "PuzzleFormatError",
    "format_board",
    "parse_board",
    "read_board",
]
