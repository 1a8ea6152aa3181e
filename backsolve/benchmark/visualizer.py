"""Charts for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Renders charts comparing the search engines on each benchmark puzzle.
    """

    COLORS = {
        "Backtracking": "#e74c3c",  # Red
        "MRV": "#2ecc71",           # Green
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="whitegrid")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_puzzle(),
            self.plot_nodes_by_puzzle(),
        ]

    def _grouped_bars(self, metric: str, ylabel: str, title: str, filename: str, log_scale: bool) -> str:
        """Grouped bar chart of one metric, puzzles on x, one bar per algorithm."""
        fig, ax = plt.subplots(figsize=(12, 6))

        algorithms = sorted(set(r.algorithm for r in self.results))
        puzzles = list(dict.fromkeys(r.puzzle for r in self.results))

        x = np.arange(len(puzzles))
        width = 0.8 / max(len(algorithms), 1)

        for i, algo in enumerate(algorithms):
            values = []
            for puzzle in puzzles:
                matching = [
                    getattr(r, metric) for r in self.results
                    if r.algorithm == algo and r.puzzle == puzzle
                ]
                values.append(np.mean(matching) if matching else 0)

            offset = (i - len(algorithms) / 2 + 0.5) * width
            ax.bar(x + offset, values, width,
                   label=algo,
                   color=self.COLORS.get(algo, "#95a5a6"),
                   edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels([p.capitalize() for p in puzzles])
        ax.legend(title='Algorithm', bbox_to_anchor=(1.05, 1), loc='upper left')

        # Row-major search can be orders of magnitude behind MRV
        if log_scale:
            ax.set_yscale('symlog')

        plt.tight_layout()
        path = os.path.join(self.output_dir, filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_time_by_puzzle(self) -> str:
        """Create grouped bar chart of solve time per puzzle."""
        return self._grouped_bars(
            "time_seconds", "Time (seconds)", "Solve Time by Puzzle and Algorithm",
            "time_by_puzzle.png", log_scale=False
        )

    def plot_nodes_by_puzzle(self) -> str:
        """Create grouped bar chart of placements tried per puzzle."""
        return self._grouped_bars(
            "nodes_explored", "Placements (symlog scale)", "Placements Tried by Puzzle and Algorithm",
            "nodes_by_puzzle.png", log_scale=True
        )

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        algorithms = sorted(set(r.algorithm for r in self.results))

        lines = [
            "# Benchmark Summary\n",
            "| Algorithm | Solved | Avg Time | Avg Memory | Avg Placements | Avg Backtracks |",
            "|-----------|--------|----------|------------|----------------|----------------|"
        ]

        for algo in algorithms:
            algo_results = [r for r in self.results if r.algorithm == algo]

            solved = sum(1 for r in algo_results if r.solved)
            avg_time = np.mean([r.time_seconds for r in algo_results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in algo_results])
            avg_nodes = np.mean([r.nodes_explored for r in algo_results])
            avg_backtracks = np.mean([r.backtracks for r in algo_results])

            lines.append(
                f"| {algo} | {solved}/{len(algo_results)} | {avg_time:.4f}s | {avg_memory:.2f} MB "
                f"| {int(avg_nodes):,} | {int(avg_backtracks):,} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
