"""Generates sliding puzzle boards for the solver."""

from __future__ import annotations

import random

from backend.models.board import Board


class GameGenerator:
    """Creates puzzles by random walks from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(
        board: Board, moves: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *moves* random moves.

        A move never undoes the one right before it.
        """
        rng = rng or random.Random()
        previous: Board | None = None

        for _ in range(moves):
            neighbors = list(board.neighbors())
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int, moves: int = 20, rng: random.Random | None = None
    ) -> Board:
        """Return a random *solvable*, unsolved board.

        The board is a random walk of *moves* moves away from the goal
        (one more if the walk happens to end on the goal).
        """
        if moves < 1:
            raise ValueError(f"Need at least one scramble move, got {moves}.")
        rng = rng or random.Random()
        board = GameGenerator.scramble(GameGenerator.solved(size), moves, rng)

        # Ensure the board is not already solved
        while board.is_goal():
            board = GameGenerator.scramble(board, 1, rng)

        return board

    @staticmethod
    def unsolvable(
        size: int, moves: int = 20, rng: random.Random | None = None
    ) -> Board:
        """Return a random board that can never reach the goal."""
        return GameGenerator.generate(size, moves, rng).twin()
