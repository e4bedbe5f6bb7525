"""Solver test suite.

Boards with hand-checked answers live in ``<project_root>/fixtures/``.
Random boards are cross-checked against a plain breadth-first search,
and every returned solution is replayed move by move.
"""

from __future__ import annotations

import json
import random
from collections import deque
from pathlib import Path

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.engine.gamesolver.solver import _Track
from backend.models.board import Board

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_PUZZLES = _load("puzzles.json")
_SOLVABLE = [p for p in _PUZZLES if p["moves"] >= 0]
_UNSOLVABLE = [p for p in _PUZZLES if p["moves"] < 0]


# -- helpers ------------------------------------------------------------------


def _board_from_data(data: dict) -> Board:
    """Reconstruct a ``Board`` from its JSON representation."""
    return Board.from_rows(data["tiles"])


def _bfs_distance(board: Board) -> int:
    """Shortest move count to the goal, by exhaustive breadth-first search."""
    seen = {board}
    queue = deque([(board, 0)])
    while queue:
        current, dist = queue.popleft()
        if current.is_goal():
            return dist
        for neighbor in current.neighbors():
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append((neighbor, dist + 1))
    return -1


def _assert_valid_solution(solver: Solver, initial: Board) -> None:
    boards = solver.solution()
    assert boards is not None
    assert len(boards) == solver.moves() + 1
    assert boards[0] == initial
    assert boards[-1].is_goal()
    for before, after in zip(boards, boards[1:]):
        assert after in before.neighbors(), f"{before}\n->\n{after}"


# -- hand-checked boards ------------------------------------------------------


@pytest.mark.parametrize("board_data", _SOLVABLE, ids=_ids)
def test_minimum_moves(board_data: dict) -> None:
    board = _board_from_data(board_data)
    solver = Solver(board)

    assert solver.is_solvable()
    assert solver.moves() == board_data["moves"]
    _assert_valid_solution(solver, board)


@pytest.mark.parametrize("board_data", _UNSOLVABLE, ids=_ids)
def test_unsolvable(board_data: dict) -> None:
    solver = Solver(_board_from_data(board_data))

    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None


def test_goal_board_has_single_step_solution() -> None:
    goal = Board.goal(3)
    solver = Solver(goal)

    assert solver.moves() == 0
    assert solver.solution() == (goal,)
    assert solver.stats.rounds == 0


def test_none_board_fails_fast() -> None:
    with pytest.raises(ValueError, match="initial board"):
        Solver(None)


# -- random boards ------------------------------------------------------------


@pytest.mark.parametrize("seed", range(12))
def test_moves_match_breadth_first_search(seed: int) -> None:
    board = GameGenerator.generate(3, moves=10, rng=random.Random(seed))
    solver = Solver(board)

    assert solver.moves() == _bfs_distance(board)
    _assert_valid_solution(solver, board)


@pytest.mark.parametrize("seed", range(6))
def test_twin_has_opposite_solvability(seed: int) -> None:
    board = GameGenerator.generate(3, moves=8, rng=random.Random(seed))
    twin = board.twin()

    assert Solver(board).is_solvable()
    assert not Solver(twin).is_solvable()
    assert Solver(twin).moves() == -1


@pytest.mark.parametrize("seed", range(4))
def test_random_unsolvable_boards(seed: int) -> None:
    board = GameGenerator.unsolvable(3, moves=8, rng=random.Random(seed))
    solver = Solver(board)

    assert not solver.is_solvable()
    assert solver.solution() is None


def test_repeated_solves_agree() -> None:
    board = GameGenerator.generate(3, moves=12, rng=random.Random(7))
    results = {Solver(board).moves() for _ in range(3)}

    assert len(results) == 1


def test_4x4_random_board() -> None:
    board = GameGenerator.generate(4, moves=8, rng=random.Random(3))
    solver = Solver(board)

    assert 1 <= solver.moves() <= 8
    _assert_valid_solution(solver, board)


# -- query surface ------------------------------------------------------------


def test_solution_is_restartable() -> None:
    board = Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    solver = Solver(board)

    first = list(solver.solution())
    second = list(solver.solution())

    assert first == second
    assert len(first) == 5


def test_stats_count_work() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
    solver = Solver(board)

    assert solver.stats.rounds == 2
    assert solver.stats.expanded == 2
    assert solver.stats.twin_expanded == 2
    assert solver.stats.generated > solver.stats.expanded


# -- cycle check --------------------------------------------------------------


def test_move_back_to_parent_is_skipped() -> None:
    track = _Track(Board.from_rows([[1, 2, 3], [4, 5, 6], [0, 7, 8]]))

    track.advance()
    assert track.generated == 3

    # The expanded node has three neighbors; one of them is the root.
    track.advance()
    assert track.expanded == 2
    assert track.generated == 5
    assert len(track.frontier) == 3


def test_other_branches_are_not_deduplicated() -> None:
    # The solvable 2×2 boards form a single cycle of twelve. From the goal
    # both directions walk round the cycle, each branch only stopping when
    # its next board is one of its own ancestors. So every non-root board
    # is generated twice, once per branch.
    track = _Track(Board.goal(2))

    for _ in range(100):
        if not track.frontier:
            break
        track.advance()

    assert not track.frontier
    assert track.generated == 1 + 2 * 11
    assert track.expanded == track.generated
