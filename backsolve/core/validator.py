"""Placement and board validation for 9x9 Sudoku."""

from __future__ import annotations
from typing import TYPE_CHECKING

from .board import SIZE, InvalidBoardError

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid_placement(board: SudokuBoard, row: int, col: int, digit: int) -> bool:
    """
    Check if placing a digit at (row, col) breaks row, column or box uniqueness.

    Scans the full row, the full column and the 3x3 box containing the cell
    (27 cells, overlaps included). The target cell is not excluded; it is
    expected to be empty, and 0 never equals a digit in 1-9.

    Args:
        board: The Sudoku board.
        row: Row index (0-8).
        col: Column index (0-8).
        digit: Digit to check (1-9).

    Returns:
        True if the digit appears in none of the three units.
    """
    if digit < 1 or digit > SIZE:
        return False

    # Check row
    if digit in board.get_row(row):
        return False

    # Check column
    if digit in board.get_col(col):
        return False

    # Check box
    if digit in board.get_box(row, col):
        return False

    return True


def validate_board(board: SudokuBoard) -> None:
    """
    Reject a starting board whose clues already conflict.

    Shape and value range are enforced by SudokuBoard itself; this covers the
    remaining input error, duplicate digits within a row, column or box.

    Raises:
        InvalidBoardError: If any unit holds the same digit twice.
    """
    if not board.is_valid():
        raise InvalidBoardError("Board has conflicting clues in a row, column or box")


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is complete, valid and keeps every original clue.
    """
    for row, col in puzzle.cells():
        if not puzzle.is_empty(row, col):
            if puzzle.get(row, col) != solution.get(row, col):
                return False

    return solution.is_solved()
