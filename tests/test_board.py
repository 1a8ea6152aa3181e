"""Unit tests for Sudoku board and validation."""

import pytest
import numpy as np
from backsolve.core.board import SudokuBoard, InvalidBoardError
from backsolve.core.validator import is_valid_placement, validate_board, validate_solution
from backsolve.puzzles import CLASSIC, CLASSIC_SOLUTION


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

    def test_set_out_of_range(self):
        """Test that digits outside 0-9 are refused."""
        board = SudokuBoard()
        with pytest.raises(InvalidBoardError):
            board.set(0, 0, 10)
        with pytest.raises(InvalidBoardError):
            board.set(0, 0, -1)

    def test_wrong_shape_rejected(self):
        """Test that only 9x9 grids are accepted."""
        with pytest.raises(InvalidBoardError):
            SudokuBoard(np.zeros((4, 4), dtype=np.int32))
        with pytest.raises(InvalidBoardError):
            SudokuBoard.from_2d_list([[0] * 9] * 8)

    def test_out_of_range_grid_rejected(self):
        """Test that a grid holding values above 9 is rejected."""
        grid = [row[:] for row in CLASSIC]
        grid[4][4] = 12
        with pytest.raises(InvalidBoardError):
            SudokuBoard.from_2d_list(grid)

    def test_ragged_list_rejected(self):
        """Test that rows of unequal length are rejected."""
        grid = [row[:] for row in CLASSIC]
        grid[3] = grid[3][:5]
        with pytest.raises(InvalidBoardError):
            SudokuBoard.from_2d_list(grid)

    def test_string_grid_rejected(self):
        """Test that a grid of strings is rejected."""
        grid = [[str(value) for value in row] for row in CLASSIC]
        with pytest.raises(InvalidBoardError):
            SudokuBoard.from_2d_list(grid)

    def test_fractional_value_rejected(self):
        """Test that a fractional cell value is rejected instead of truncated."""
        grid = [[float(value) for value in row] for row in CLASSIC]
        grid[0][2] = 4.7
        with pytest.raises(InvalidBoardError):
            SudokuBoard.from_2d_list(grid)

    def test_whole_float_values_accepted(self):
        """Test that floats holding whole numbers are accepted."""
        grid = [[float(value) for value in row] for row in CLASSIC]
        board = SudokuBoard.from_2d_list(grid)
        assert board.to_2d_list() == CLASSIC
        assert board.grid.dtype == np.int32

    def test_invalid_board_error_is_value_error(self):
        """Test that callers catching ValueError also catch bad boards."""
        with pytest.raises(ValueError):
            SudokuBoard(np.ones((9, 3), dtype=np.int32))

    def test_from_2d_list(self):
        """Test creating board from a nested list."""
        board = SudokuBoard.from_2d_list(CLASSIC)
        assert board.get(0, 0) == 5
        assert board.get(8, 8) == 9
        assert board.count_filled() == 30
        assert board.to_2d_list() == CLASSIC

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()  # Empty board is valid

        board.set(0, 0, 5)
        board.set(0, 1, 5)  # Duplicate in row
        assert not board.is_valid()

    def test_is_valid_detects_box_duplicate(self):
        """Test that a duplicate sharing only a box is caught."""
        board = SudokuBoard()
        board.set(0, 0, 7)
        board.set(2, 2, 7)
        assert not board.is_valid()

    def test_is_solved(self):
        """Test solved detection on complete and partial grids."""
        assert SudokuBoard.from_2d_list(CLASSIC_SOLUTION).is_solved()
        assert not SudokuBoard.from_2d_list(CLASSIC).is_solved()

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7
        assert copy == board

        # Modify copy, original should be unchanged
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_empty_cells_row_major(self):
        """Test that empty cells are listed in reading order."""
        board = SudokuBoard.from_2d_list(CLASSIC)
        empty = board.get_empty_cells()
        assert len(empty) == 51
        assert empty[:3] == [(0, 2), (0, 3), (0, 5)]

    def test_str(self):
        """Test the pretty-printed layout."""
        text = str(SudokuBoard.from_2d_list(CLASSIC))
        lines = text.splitlines()
        assert len(lines) == 13
        assert lines[1] == "| 5 3 . | . 7 . | . . . |"


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)

    def test_placement_on_classic_puzzle(self):
        """Test each unit separately against the classic puzzle at (0, 2)."""
        board = SudokuBoard.from_2d_list(CLASSIC)
        assert not is_valid_placement(board, 0, 2, 7)  # row
        assert not is_valid_placement(board, 0, 2, 8)  # column
        assert not is_valid_placement(board, 0, 2, 6)  # box only
        assert is_valid_placement(board, 0, 2, 4)
        assert is_valid_placement(board, 0, 2, 1)

    def test_placement_rejects_non_digits(self):
        """Test that 0 and values above 9 are never legal placements."""
        board = SudokuBoard.from_2d_list(CLASSIC_SOLUTION)
        assert not is_valid_placement(board, 0, 0, 0)
        assert not is_valid_placement(board, 0, 0, 10)

    def test_placement_has_no_side_effects(self):
        """Test that checking a placement leaves the grid untouched."""
        board = SudokuBoard.from_2d_list(CLASSIC)
        before = board.grid.copy()
        for digit in range(1, 10):
            is_valid_placement(board, 4, 4, digit)
        assert np.array_equal(board.grid, before)

    def test_validate_board_accepts_consistent(self):
        """Test that consistent boards pass validation."""
        validate_board(SudokuBoard())
        validate_board(SudokuBoard.from_2d_list(CLASSIC))

    def test_validate_board_rejects_conflict(self):
        """Test that two equal digits in one row are rejected up front."""
        grid = [row[:] for row in CLASSIC]
        grid[0][2] = 5  # second 5 in row 0
        board = SudokuBoard.from_2d_list(grid)
        with pytest.raises(InvalidBoardError):
            validate_board(board)

    def test_validate_solution(self):
        """Test solution checking against the original clues."""
        puzzle = SudokuBoard.from_2d_list(CLASSIC)
        solution = SudokuBoard.from_2d_list(CLASSIC_SOLUTION)
        assert validate_solution(puzzle, solution)
        assert not validate_solution(puzzle, puzzle)

        other = SudokuBoard.from_2d_list(CLASSIC_SOLUTION)
        other.set(0, 0, 1)
        assert not validate_solution(puzzle, other)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
