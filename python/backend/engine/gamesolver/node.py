"""Search tree nodes for the A* solver."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import Protocol


class SearchableBoard(Hashable, Protocol):
    """What the solver needs from a board.

    ``heuristic()`` must never overestimate the moves left, otherwise the
    solution found is not guaranteed to be the shortest one.
    """

    def heuristic(self) -> int: ...

    def is_goal(self) -> bool: ...

    def neighbors(self) -> Sequence[SearchableBoard]: ...

    def twin(self) -> SearchableBoard: ...


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A board reached after *moves* moves, linked to the node it came from.

    Nodes are compared by identity. Many children may share one parent.
    """

    board: SearchableBoard
    moves: int = 0
    parent: SearchNode | None = None

    @cached_property
    def priority(self) -> int:
        return self.moves + self.board.heuristic()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def child(self, board: SearchableBoard) -> SearchNode:
        return SearchNode(board=board, moves=self.moves + 1, parent=self)

    def ancestors(self) -> Iterator[SearchNode]:
        """Yield the parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def path(self) -> tuple[SearchableBoard, ...]:
        """Boards from the root down to this node."""
        boards = [self.board]
        boards.extend(node.board for node in self.ancestors())
        boards.reverse()
        return tuple(boards)
