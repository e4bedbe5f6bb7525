"""Rich terminal frontend — prints a solve as styled tables and panels."""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction

console = Console()


# -- board rendering ----------------------------------------------------------


def _tile_cell(board: Board, row: int, col: int, width: int, moved: bool) -> Text:
    val = board.get_tile(row, col)
    if val == 0:
        return Text("·".rjust(width), style="dim")
    if moved:
        style = "bold black on cyan"
    elif board.is_tile_correct(row, col):
        style = "green"
    else:
        style = "white"
    return Text(str(val).rjust(width), style=style)


def _render_board(board: Board, moved: tuple[int, int] | None = None) -> Table:
    """Grid of one solution step; *moved* is the cell of the tile that just slid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        box=rich.box.ROUNDED,
        border_style="cyan" if moved else "bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width, justify="right")

    for r in range(board.size):
        table.add_row(
            *(_tile_cell(board, r, c, width, (r, c) == moved) for c in range(board.size))
        )
    return table


def solution_directions(solver: Solver) -> list[Direction] | None:
    """Tile moves along the solution, or None if unsolvable."""
    boards = solver.solution()
    if boards is None:
        return None
    directions: list[Direction] = []
    for before, after in zip(boards, boards[1:]):
        if not isinstance(before, Board):
            raise TypeError("The rich frontend can only draw backend.models.Board")
        direction = before.direction_to(after)
        if direction is None:
            raise RuntimeError("Solution contains a non-adjacent step.")
        directions.append(direction)
    return directions


def _stats_line(solver: Solver) -> Text:
    stats = solver.stats
    line = Text()
    line.append("  Rounds: ", style="dim")
    line.append(str(stats.rounds), style="bold yellow")
    line.append("    Expanded: ", style="dim")
    line.append(f"{stats.expanded} + {stats.twin_expanded} twin", style="bold yellow")
    line.append("    Generated: ", style="dim")
    line.append(str(stats.generated), style="bold yellow")
    return line


# -- screens ------------------------------------------------------------------


def _draw_initial(board: Board) -> None:
    size = board.size
    panel = Panel(
        Align.center(_render_board(board)),
        title=f"[bold]Initial board  {size}×{size}[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_solution(solver: Solver) -> None:
    boards = solver.solution()
    directions = solution_directions(solver)
    if boards is None or directions is None:
        return

    for i, (before, board) in enumerate(zip(boards, boards[1:])):
        # The tile that slid now sits where the blank was.
        moved = before.blank_pos if isinstance(before, Board) else None
        caption = Text()
        caption.append(f"Move {i + 1}/{len(directions)} ", style="bold cyan")
        caption.append(f"({directions[i].value})", style="dim")
        console.print(
            Align.center(Group(_render_board(board, moved), Align.center(caption)))
        )


def render(solver: Solver) -> None:
    """Print the initial board, every step of the solution and a summary."""
    board = solver.initial
    if not isinstance(board, Board):
        raise TypeError("The rich frontend can only draw backend.models.Board")

    _draw_initial(board)
    _draw_solution(solver)

    console.print()
    if solver.is_solvable():
        console.print(
            Align.center(
                Text(f"Minimum number of moves = {solver.moves()}", style="bold green")
            )
        )
    else:
        console.print(Align.center(Text("No solution possible", style="bold red")))
    console.print(Align.center(_stats_line(solver)))
    console.print()


def run(board: Board, quiet: bool = False) -> Solver:
    """Solve *board* and print the result."""
    if quiet:
        solver = Solver(board)
        console.print(solver.moves())
        return solver

    with console.status("[bold cyan]Searching…[/bold cyan]"):
        solver = Solver(board)
    render(solver)
    return solver
