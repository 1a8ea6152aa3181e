"""Tests for the benchmark, the visualizer and the CLI."""

import json
import os

import pytest
from backsolve.benchmark import Benchmark, BenchmarkResult, Visualizer
from backsolve.cli import main
from backsolve.puzzles import PUZZLES, load_puzzle
from backsolve.solvers import BacktrackingSolver


def small_benchmark() -> Benchmark:
    return Benchmark(
        puzzles={name: load_puzzle(name) for name in ["classic", "unsolvable"]},
        time_limit=30.0
    )


class TestBenchmark:
    """Tests for Benchmark."""

    def test_run(self):
        """Test that every puzzle runs on every solver."""
        benchmark = small_benchmark()
        results = benchmark.run(show_progress=False)

        assert len(results) == 4
        assert all(isinstance(r, BenchmarkResult) for r in results)

        by_key = {(r.puzzle, r.algorithm): r for r in results}
        assert by_key[("classic", "Backtracking")].solved
        assert by_key[("classic", "MRV")].solved
        assert not by_key[("unsolvable", "Backtracking")].solved
        assert not by_key[("unsolvable", "MRV")].solved

    def test_summary(self):
        """Test summary aggregation per algorithm and per puzzle."""
        benchmark = small_benchmark()
        benchmark.run(show_progress=False)
        summary = benchmark.get_summary()

        assert summary["total_puzzles"] == 2
        assert set(summary["results_by_algorithm"]) == {"Backtracking", "MRV"}
        mrv = summary["results_by_algorithm"]["MRV"]
        assert mrv["total_solved"] == 1
        assert mrv["total_tested"] == 2
        assert mrv["accuracy"] == pytest.approx(50.0)
        assert mrv["errors"] == 0
        assert summary["results_by_puzzle"]["classic"]["MRV"]["solved"]

    def test_time_limit_recorded(self):
        """Test that an aborted run is recorded rather than raised."""
        benchmark = Benchmark(
            puzzles={"hard": load_puzzle("hard")},
            solvers={"Backtracking": BacktrackingSolver(time_limit=0.0)}
        )
        results = benchmark.run(show_progress=False)

        assert not results[0].solved
        assert "error" in results[0].extra
        assert benchmark.get_summary()["results_by_algorithm"]["Backtracking"]["errors"] == 1

    def test_save_results(self, tmp_path):
        """Test that results and summary are written as JSON."""
        benchmark = small_benchmark()
        benchmark.run(show_progress=False)
        paths = benchmark.save_results(str(tmp_path))

        assert len(paths) == 2
        with open(tmp_path / "benchmark_results.json") as f:
            rows = json.load(f)
        assert len(rows) == 4
        assert {"puzzle", "algorithm", "solved", "memory_mb"} <= set(rows[0])

        with open(tmp_path / "benchmark_summary.json") as f:
            assert json.load(f)["total_puzzles"] == 2

    def test_visualizer(self, tmp_path):
        """Test that charts and the markdown table are produced."""
        benchmark = small_benchmark()
        results = benchmark.run(show_progress=False)

        visualizer = Visualizer(results, str(tmp_path))
        charts = visualizer.generate_all()
        table = visualizer.generate_summary_table()

        assert all(os.path.exists(path) for path in charts)
        with open(table) as f:
            content = f.read()
        assert "| MRV | 1/2 |" in content


class TestCLI:
    """Tests for the command-line entry point."""

    def test_no_command(self):
        """Test that running without a command exits with an error."""
        with pytest.raises(SystemExit):
            main([])

    def test_list(self, capsys):
        """Test listing the built-in puzzles."""
        main(["list"])
        out = capsys.readouterr().out
        for name in PUZZLES:
            assert name in out

    def test_solve_efficient(self, capsys):
        """Test solving the classic puzzle with MRV."""
        main(["solve", "--puzzle", "classic", "--efficient", "--verbose"])
        out = capsys.readouterr().out
        assert "Solving with MRV" in out
        assert "Solved" in out
        assert "Placements" in out

    def test_solve_unsolvable(self, capsys):
        """Test the failure message for an unsolvable puzzle."""
        main(["solve", "--puzzle", "unsolvable", "--algorithm", "all"])
        out = capsys.readouterr().out
        assert out.count("Failed to solve: no solution exists") == 2

    def test_efficient_conflicts_with_algorithm(self):
        """Test that --efficient cannot be combined with --algorithm."""
        with pytest.raises(SystemExit):
            main(["solve", "--puzzle", "classic", "--efficient", "--algorithm", "all"])

    def test_unknown_puzzle(self):
        """Test that unknown puzzle names are rejected."""
        with pytest.raises(SystemExit):
            main(["solve", "--puzzle", "nonexistent"])

    def test_benchmark(self, tmp_path, capsys):
        """Test the benchmark command without charts."""
        main([
            "benchmark", "--puzzles", "classic", "unsolvable",
            "--output", str(tmp_path), "--no-charts"
        ])
        out = capsys.readouterr().out
        assert "Benchmark complete!" in out
        assert (tmp_path / "benchmark_results.json").exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
