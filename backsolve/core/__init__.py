"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, InvalidBoardError
from .validator import is_valid_placement, validate_board, validate_solution

__all__ = [
    "SudokuBoard",
    "InvalidBoardError",
    "is_valid_placement",
    "validate_board",
    "validate_solution",
]
