"""Backtracking guided by the Minimum Remaining Values (MRV) heuristic."""

from __future__ import annotations
from typing import NamedTuple, Optional, Union

from .base_solver import BaseSolver, SolverStats
from ..core.board import SudokuBoard, SIZE, EMPTY
from ..core.validator import is_valid_placement


class Found(NamedTuple):
    """An empty cell chosen for the next branch, with its legal digit count."""
    row: int
    col: int
    options: int


class NoneRemaining(NamedTuple):
    """Cell selection result for a board with no empty cells."""
    row: int = -1
    col: int = -1
    options: int = 0


NONE_REMAINING = NoneRemaining()

CellChoice = Union[Found, NoneRemaining]


def count_options(board: SudokuBoard, row: int, col: int) -> int:
    """Count the digits 1-9 that can legally go in (row, col)."""
    return sum(
        1 for digit in range(1, SIZE + 1)
        if is_valid_placement(board, row, col, digit)
    )


def find_next_cell(board: SudokuBoard) -> CellChoice:
    """
    Select the empty cell with the fewest legal digits.

    Cells are scanned in row-major order and only a strictly smaller count
    replaces the current best, so ties go to the earliest cell. The scan stops
    as soon as a cell with a single option turns up. A cell with no options
    also stops it, since nothing can beat zero.

    Args:
        board: Board to inspect. Not modified.

    Returns:
        Found(row, col, options), or NONE_REMAINING if the board is full.
    """
    best: Optional[Found] = None

    for row, col in board.cells():
        if board.grid[row, col] != EMPTY:
            continue

        options = count_options(board, row, col)
        if best is None or options < best.options:
            best = Found(row, col, options)
            if options <= 1:
                return best

    if best is None:
        return NONE_REMAINING
    return best


def solve_board_efficient(board: SudokuBoard, stats: Optional[SolverStats] = None) -> bool:
    """
    Fill the board in place, branching on the most constrained cell first.

    Cell selection is redone from scratch at every level. Placement and undo
    follow the same discipline as the row-major solver: digits 1-9 in
    ascending order, and a failed call leaves the board as it found it.

    Args:
        board: Board to fill. Mutated in place.
        stats: Optional counters; also carries the search deadline.

    Returns:
        True if the board was completed, False if no completion exists.
    """
    if stats is not None:
        stats.enter(check_every=1)

    choice = find_next_cell(board)
    if isinstance(choice, NoneRemaining):
        return True

    row, col, _ = choice
    for digit in range(1, SIZE + 1):
        if is_valid_placement(board, row, col, digit):
            board.grid[row, col] = digit
            if stats is not None:
                stats.nodes_explored += 1

            if solve_board_efficient(board, stats):
                return True

            board.grid[row, col] = EMPTY
            if stats is not None:
                stats.backtracks += 1

    return False


class MRVSolver(BaseSolver):
    """
    Recursive backtracking that always branches on the empty cell with the
    fewest legal digits.
    """

    name = "MRV"

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Solve using MRV-guided backtracking."""
        if solve_board_efficient(board, self.stats):
            return board
        return None
