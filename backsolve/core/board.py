"""Sudoku board representation: a fixed 9x9 grid mutated in place by the solvers."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Iterator


SIZE = 9
BOX_SIZE = 3
EMPTY = 0


class InvalidBoardError(ValueError):
    """Raised when a board is malformed or its clues conflict."""


class SudokuBoard:
    """
    A 9x9 Sudoku board backed by a contiguous numpy array.

    Cells hold 0 for empty and 1-9 for a placed digit. The grid is owned by
    the board and is shared by reference with the search engines, which
    write into it directly.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional initial 9x9 grid. Copied on construction. If None,
                  creates an empty board.

        Raises:
            InvalidBoardError: If the grid is not 9x9, holds non-integer
                               values, or holds values outside 0-9.
        """
        if grid is None:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)
            return

        try:
            grid = np.asarray(grid)
        except ValueError as e:
            raise InvalidBoardError(f"Grid must be a {SIZE}x{SIZE} array: {e}") from e
        if grid.shape != (SIZE, SIZE):
            raise InvalidBoardError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
        if grid.dtype.kind == "f":
            if not np.all(np.mod(grid, 1) == 0):
                raise InvalidBoardError("Cell values must be whole numbers")
        elif grid.dtype.kind not in "iub":
            raise InvalidBoardError(f"Cell values must be integers, got dtype {grid.dtype}")
        if grid.min() < 0 or grid.max() > SIZE:
            raise InvalidBoardError(f"Cell values must be 0-{SIZE}")
        self.grid = np.array(grid, dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        return SudokuBoard(self.grid)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > SIZE:
            raise InvalidBoardError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = BOX_SIZE * (row // BOX_SIZE)
        box_col = BOX_SIZE * (col // BOX_SIZE)
        return self.grid[box_row:box_row + BOX_SIZE,
                        box_col:box_col + BOX_SIZE]

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate over all cell positions in row-major order."""
        for row in range(SIZE):
            for col in range(SIZE):
                yield row, col

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions, row-major."""
        return [(row, col) for row, col in self.cells() if self.is_empty(row, col)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != EMPTY))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check that the non-empty cells form a consistent partial assignment.
        Does not check completeness.
        """
        for i in range(SIZE):
            if _has_duplicates(self.get_row(i)) or _has_duplicates(self.get_col(i)):
                return False

        for box_row in range(0, SIZE, BOX_SIZE):
            for box_col in range(0, SIZE, BOX_SIZE):
                if _has_duplicates(self.get_box(box_row, box_col).flatten()):
                    return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(data)

    def to_2d_list(self) -> List[List[int]]:
        """Return the grid as nested Python lists."""
        return self.grid.tolist()

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == EMPTY else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    __hash__ = None


def _has_duplicates(values: np.ndarray) -> bool:
    non_zero = values[values != EMPTY]
    return len(non_zero) != len(set(non_zero.tolist()))
