"""Sliding puzzle solver.

A* search over the board and, in lockstep, over its twin (the same
board with two tiles swapped). Exactly one of the two can reach the
goal, so whichever search gets there first also tells us whether the
original board is solvable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backend.engine.gamesolver.frontier import PriorityFrontier
from backend.engine.gamesolver.node import SearchableBoard, SearchNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchStats:
    rounds: int
    expanded: int
    twin_expanded: int
    generated: int


class _Track:
    """One A* search: a frontier seeded with a root board."""

    def __init__(self, root: SearchableBoard) -> None:
        self.frontier = PriorityFrontier()
        self.frontier.push(SearchNode(board=root))
        self.expanded = 0
        self.generated = 1

    def at_goal(self) -> bool:
        return bool(self.frontier) and self.frontier.peek().board.is_goal()

    def advance(self) -> None:
        """Expand the lowest-priority node.

        Neighbors already on the node's own path back to the root are
        skipped. Other branches are not checked.
        """
        if not self.frontier:
            return
        node = self.frontier.pop()
        self.expanded += 1
        for neighbor in node.board.neighbors():
            if any(neighbor == seen.board for seen in node.ancestors()):
                continue
            self.frontier.push(node.child(neighbor))
            self.generated += 1


class Solver:
    """Runs the search on construction; afterwards a read-only result.

    ``Solver(board)`` blocks until the board is either solved or shown
    to be unsolvable.
    """

    def __init__(self, initial: SearchableBoard | None) -> None:
        if initial is None:
            raise ValueError("Solver needs an initial board, got None.")

        self._initial = initial
        self._solution: tuple[SearchableBoard, ...] | None = None

        main = _Track(initial)
        twin = _Track(initial.twin())
        logger.debug("Starting search (h=%d)", initial.heuristic())

        rounds = 0
        while not (main.at_goal() or twin.at_goal()):
            if not main.frontier:
                break
            main.advance()
            twin.advance()
            rounds += 1

        if main.frontier:
            terminal = main.frontier.pop()
            if terminal.board.is_goal():
                self._solution = terminal.path()

        self.stats = SearchStats(
            rounds=rounds,
            expanded=main.expanded,
            twin_expanded=twin.expanded,
            generated=main.generated + twin.generated,
        )
        logger.debug(
            "Search finished after %d rounds (%d + %d nodes expanded)",
            rounds, main.expanded, twin.expanded,
        )
        if self._solution is not None:
            logger.info("Solved in %d moves", self.moves())
        else:
            logger.info("Board is unsolvable")

    # -- queries --------------------------------------------------------------

    @property
    def initial(self) -> SearchableBoard:
        return self._initial

    def is_solvable(self) -> bool:
        return self._solution is not None

    def moves(self) -> int:
        """Minimum number of moves to solve the board; -1 if unsolvable."""
        if self._solution is None:
            return -1
        return len(self._solution) - 1

    def solution(self) -> tuple[SearchableBoard, ...] | None:
        """Boards of a shortest solution, initial board first.

        Returns None if the board is unsolvable.
        """
        return self._solution
