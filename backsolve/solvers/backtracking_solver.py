"""Naive backtracking solver visiting cells in fixed row-major order."""

from __future__ import annotations
from typing import Optional

from .base_solver import BaseSolver, SolverStats, DEADLINE_CHECK_INTERVAL
from ..core.board import SudokuBoard, SIZE, EMPTY
from ..core.validator import is_valid_placement


def solve_board(
    board: SudokuBoard,
    row: int = 0,
    col: int = 0,
    stats: Optional[SolverStats] = None
) -> bool:
    """
    Fill the board in place by depth-first search starting at (row, col).

    Cells are visited left to right, top to bottom. Pre-filled cells are
    skipped; empty cells get the digits 1-9 in ascending order. On failure
    every digit placed by this call has been cleared again, so the board is
    exactly as it was on entry.

    Args:
        board: Board to fill. Mutated in place.
        row: Starting row index.
        col: Starting column index.
        stats: Optional counters; also carries the search deadline.

    Returns:
        True if the board was completed, False if no completion exists.
    """
    if stats is not None:
        stats.enter(DEADLINE_CHECK_INTERVAL)

    # Past the last row: every cell holds a digit
    if row == SIZE:
        return True

    if col == SIZE:
        return solve_board(board, row + 1, 0, stats)

    if board.grid[row, col] != EMPTY:
        return solve_board(board, row, col + 1, stats)

    for digit in range(1, SIZE + 1):
        if is_valid_placement(board, row, col, digit):
            board.grid[row, col] = digit
            if stats is not None:
                stats.nodes_explored += 1

            if solve_board(board, row, col + 1, stats):
                return True

            board.grid[row, col] = EMPTY
            if stats is not None:
                stats.backtracks += 1

    return False


class BacktrackingSolver(BaseSolver):
    """
    Plain recursive backtracking in row-major cell order.

    No heuristics: the first empty cell in reading order is always the next
    one tried, which makes this solver slow on puzzles whose top rows are
    sparse.
    """

    name = "Backtracking"

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Solve using row-major backtracking."""
        if solve_board(board, 0, 0, self.stats):
            return board
        return None
