"""Benchmark comparing the row-major and MRV search engines."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import logging
import os

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..puzzles import BENCHMARK_PUZZLES, load_puzzle
from ..solvers import BaseSolver, BacktrackingSolver, MRVSolver

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle: str
    algorithm: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle": self.puzzle,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Benchmark:
    """
    Runs every solver on every puzzle and collects performance metrics.
    """

    def __init__(
        self,
        puzzles: Optional[Dict[str, SudokuBoard]] = None,
        solvers: Optional[Dict[str, BaseSolver]] = None,
        time_limit: Optional[float] = 10.0
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Dict of puzzle_name -> board (default: the built-in
                     benchmark set).
            solvers: Dict of solver_name -> solver_instance (default: both
                     engines).
            time_limit: Seconds allowed per puzzle per solver. Only applied
                        to the default solvers.
        """
        if puzzles is None:
            puzzles = {name: load_puzzle(name) for name in BENCHMARK_PUZZLES}
        self.puzzles = puzzles
        self.time_limit = time_limit

        if solvers is None:
            self.solvers = {
                "Backtracking": BacktrackingSolver(time_limit=time_limit),
                "MRV": MRVSolver(time_limit=time_limit),
            }
        else:
            self.solvers = solvers

        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        total_tests = len(self.puzzles) * len(self.solvers)

        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for puzzle_name, puzzle in self.puzzles.items():
            for solver_name, solver in self.solvers.items():
                result = self._run_single(puzzle, puzzle_name, solver_name, solver)
                self.results.append(result)
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: SudokuBoard,
        puzzle_name: str,
        solver_name: str,
        solver: BaseSolver
    ) -> BenchmarkResult:
        """Run a single solver on a single puzzle."""
        logger.debug("Running %s on %s", solver_name, puzzle_name)
        solution, stats = solver.solve(puzzle)

        return BenchmarkResult(
            puzzle=puzzle_name,
            algorithm=solver_name,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra=dict(stats.extra)
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.puzzles),
            "solvers_tested": list(self.solvers.keys()),
            "puzzles": list(self.puzzles.keys()),
            "results_by_algorithm": {},
            "results_by_puzzle": {}
        }

        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if solver_results:
                solved = [r for r in solver_results if r.solved]
                times = [r.time_seconds for r in solver_results]
                memory = [r.memory_bytes for r in solver_results]

                summary["results_by_algorithm"][solver_name] = {
                    "accuracy": len(solved) / len(solver_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "min_time_seconds": min(times),
                    "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
                    "total_nodes_explored": sum(r.nodes_explored for r in solver_results),
                    "errors": sum(1 for r in solver_results if "error" in r.extra),
                    "total_solved": len(solved),
                    "total_tested": len(solver_results)
                }

        for puzzle_name in self.puzzles:
            summary["results_by_puzzle"][puzzle_name] = {
                r.algorithm: {
                    "solved": r.solved,
                    "time_seconds": r.time_seconds,
                    "nodes_explored": r.nodes_explored,
                    "backtracks": r.backtracks
                }
                for r in self.results if r.puzzle == puzzle_name
            }

        return summary

    def save_results(self, output_dir: str) -> List[str]:
        """Save raw results and the summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        logger.debug("Results saved to %s", output_dir)
        return [results_file, summary_file]
