from backend.engine.gamesolver.frontier import PriorityFrontier
from backend.engine.gamesolver.node import SearchNode, SearchableBoard
from backend.engine.gamesolver.solver import SearchStats, Solver

__all__ = [
    "PriorityFrontier",
    "SearchNode",
    "SearchStats",
    "SearchableBoard",
    "Solver",
]
