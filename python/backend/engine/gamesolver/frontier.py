"""Min-priority queue of search nodes."""

from __future__ import annotations

import heapq
import itertools

from backend.engine.gamesolver.node import SearchNode


class PriorityFrontier:
    """Nodes waiting to be expanded, lowest ``moves + heuristic`` first.

    Equal priorities go to the node closer to the goal (smaller
    heuristic), then to the one pushed first.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, SearchNode]] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        heuristic = node.priority - node.moves
        heapq.heappush(
            self._heap, (node.priority, heuristic, next(self._counter), node)
        )

    def peek(self) -> SearchNode:
        if not self._heap:
            raise IndexError("peek from an empty frontier")
        return self._heap[0][-1]

    def pop(self) -> SearchNode:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
