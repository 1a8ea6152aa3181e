"""Entry point choosing between the two search engines."""

from __future__ import annotations

from .backtracking_solver import solve_board
from .mrv_solver import solve_board_efficient
from ..core.board import SudokuBoard


def solve(board: SudokuBoard, use_efficient: bool = False) -> bool:
    """Solve the board in place with the MRV engine or the row-major one."""
    return solve_board_efficient(board) if use_efficient else solve_board(board, 0, 0)
