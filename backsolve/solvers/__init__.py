"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats, SearchTimeout
from .backtracking_solver import BacktrackingSolver, solve_board
from .mrv_solver import (
    MRVSolver,
    Found,
    NoneRemaining,
    NONE_REMAINING,
    find_next_cell,
    solve_board_efficient,
)
from .dispatch import solve

SOLVERS = {
    "naive": BacktrackingSolver,
    "mrv": MRVSolver,
}

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SearchTimeout",
    "BacktrackingSolver",
    "MRVSolver",
    "Found",
    "NoneRemaining",
    "NONE_REMAINING",
    "SOLVERS",
    "find_next_cell",
    "solve",
    "solve_board",
    "solve_board_efficient",
]
