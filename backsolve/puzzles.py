"""Built-in puzzle grids used by the CLI, the benchmark and the tests."""

from __future__ import annotations
from typing import Dict, List

from .core.board import SudokuBoard


# The well-known example puzzle; unique solution in CLASSIC_SOLUTION.
CLASSIC = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# Easy puzzle solvable by singles alone.
EASY = [
    [0, 0, 3, 0, 2, 0, 6, 0, 0],
    [9, 0, 0, 3, 0, 5, 0, 0, 1],
    [0, 0, 1, 8, 0, 6, 4, 0, 0],
    [0, 0, 8, 1, 0, 2, 9, 0, 0],
    [7, 0, 0, 0, 0, 0, 0, 0, 8],
    [0, 0, 6, 7, 0, 8, 2, 0, 0],
    [0, 0, 2, 6, 0, 9, 5, 0, 0],
    [8, 0, 0, 2, 0, 3, 0, 0, 9],
    [0, 0, 5, 0, 1, 0, 3, 0, 0],
]

# Built so that row-major search has to run through almost every
# combination; the naive solver needs a generous time limit here.
HARD = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 3, 0, 8, 5],
    [0, 0, 1, 0, 2, 0, 0, 0, 0],
    [0, 0, 0, 5, 0, 7, 0, 0, 0],
    [0, 0, 4, 0, 0, 0, 1, 0, 0],
    [0, 9, 0, 0, 0, 0, 0, 0, 0],
    [5, 0, 0, 0, 0, 9, 0, 0, 7],
    [0, 7, 0, 0, 4, 0, 0, 0, 0],
    [3, 0, 0, 0, 0, 0, 0, 0, 8],
]

EMPTY = [[0] * 9 for _ in range(9)]

# Consistent clues with no completion: 8 and 9 are both forced into (0, 6).
UNSOLVABLE = [
    [1, 2, 3, 4, 5, 6, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 9, 0],
    [0, 0, 0, 0, 0, 0, 0, 8, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 9],
    [0, 0, 0, 0, 0, 0, 0, 0, 8],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
]

PUZZLES: Dict[str, List[List[int]]] = {
    "classic": CLASSIC,
    "easy": EASY,
    "hard": HARD,
    "empty": EMPTY,
    "solved": CLASSIC_SOLUTION,
    "unsolvable": UNSOLVABLE,
}

# Puzzles the benchmark runs unless told otherwise.
BENCHMARK_PUZZLES = ["classic", "easy", "empty", "unsolvable"]


def load_puzzle(name: str) -> SudokuBoard:
    """Return a fresh board for a built-in puzzle."""
    try:
        grid = PUZZLES[name]
    except KeyError:
        raise KeyError(f"Unknown puzzle {name!r}; choose from {sorted(PUZZLES)}") from None
    return SudokuBoard.from_2d_list(grid)
