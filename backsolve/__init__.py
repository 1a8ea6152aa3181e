"""Backtracking Sudoku solver with an optional MRV-guided search."""

from .core import SudokuBoard, InvalidBoardError, is_valid_placement, validate_board
from .solvers import (
    find_next_cell,
    solve,
    solve_board,
    solve_board_efficient,
    NONE_REMAINING,
)

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "InvalidBoardError",
    "is_valid_placement",
    "validate_board",
    "find_next_cell",
    "solve",
    "solve_board",
    "solve_board_efficient",
    "NONE_REMAINING",
]
