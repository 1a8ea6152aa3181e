"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import logging
import time
import tracemalloc

from ..core.board import SudokuBoard
from ..core.validator import validate_board

logger = logging.getLogger(__name__)

# Calls between deadline polls for engines whose calls are cheap.
DEADLINE_CHECK_INTERVAL = 256


class SearchTimeout(RuntimeError):
    """Raised from inside a search once its deadline has passed."""


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Algorithm-specific metrics
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    # perf_counter() value after which the search gives up
    deadline: Optional[float] = None

    def enter(self, check_every: int = 1) -> None:
        """
        Count one engine call and enforce the deadline, if any.

        Args:
            check_every: Poll the clock only on every n-th call. Engines
                         doing a full board scan per call should poll on
                         every call.
        """
        self.iterations += 1
        if (self.deadline is not None
                and self.iterations % check_every == 0
                and time.perf_counter() > self.deadline):
            raise SearchTimeout(f"Search exceeded its time limit after {self.iterations:,} calls")

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self, time_limit: Optional[float] = None):
        """
        Args:
            time_limit: Seconds before the search is abandoned. None means
                        search until exhausted.
        """
        self.time_limit = time_limit
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> tuple[Optional[SudokuBoard], SolverStats]:
        """
        Solve a Sudoku puzzle with timing and memory tracking.

        The input board is validated, then copied; it is never modified.

        Args:
            board: The puzzle to solve.

        Returns:
            Tuple of (solution or None, stats).

        Raises:
            InvalidBoardError: If the starting clues conflict.
        """
        validate_board(board)
        self.stats = SolverStats(algorithm=self.name)

        # Start memory tracking
        tracemalloc.start()

        # Start timing
        start_time = time.perf_counter()
        if self.time_limit is not None:
            self.stats.deadline = start_time + self.time_limit

        try:
            solution = self._solve(board.copy())
            self.stats.solved = solution is not None and solution.is_solved()
        except Exception as e:
            logger.debug("%s aborted: %s", self.name, e)
            self.stats.extra["error"] = str(e)
            solution = None

        # End timing
        self.stats.time_seconds = time.perf_counter() - start_time

        # Get memory usage
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        self.stats.memory_bytes = peak

        logger.debug(
            "%s finished: solved=%s calls=%d time=%.4fs",
            self.name, self.stats.solved, self.stats.iterations, self.stats.time_seconds
        )
        return solution, self.stats

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: A copy of the puzzle to solve (can be modified).

        Returns:
            The solved board, or None if no solution found.
        """
        pass
