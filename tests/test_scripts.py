"""Smoke tests for the command-line scripts."""
import json

import numpy as np
import pytest

import benchmark_npe
import evaluate_npe
import generate_cells
from floorplan.config import SAMPLE_CELLS_FILE, SAMPLE_NPES
from floorplan.utils import load_cells, random_cells


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / "cells.txt"
    path.write_text("A 4 1 fixed\nB 9 1 fixed\n")
    return str(path)


class TestEvaluateNpe:

    def test_prints_cost(self, square_file, capsys):
        assert evaluate_npe.main([square_file, '--npe', 'ABV', '--npe', 'ABH']) == 0
        out = capsys.readouterr().out
        assert "NPE: ABV" in out
        assert out.count("Cost: 15.0") == 2

    def test_sample_expressions_by_default(self, capsys):
        assert evaluate_npe.main([SAMPLE_CELLS_FILE]) == 0
        out = capsys.readouterr().out
        for npe in SAMPLE_NPES:
            assert f"NPE: {npe}" in out
        assert out.count("Cost: ") == 3

    def test_errors_are_reported_and_skipped(self, square_file, capsys):
        assert evaluate_npe.main([square_file, '--npe', 'AAV', '--npe', 'ACV', '--npe', 'ABV']) == 1
        out = capsys.readouterr().out
        assert "Invalid NPE" in out
        assert "'C' not found" in out
        assert "Cost: 15.0" in out

    def test_json_and_placement(self, square_file, tmp_path, capsys):
        out_file = tmp_path / "results.json"
        evaluate_npe.main([square_file, '--npe', 'ABV', '--npe', 'AVV', '--placement', '--json', str(out_file)])
        out = capsys.readouterr().out
        assert "B: x=2.0000 y=0.0000 w=3.0000 h=3.0000" in out
        results = json.loads(out_file.read_text())
        assert results[0]['area'] == 15.0
        assert 'error' in results[1]

    def test_plot(self, square_file, tmp_path):
        plot_dir = tmp_path / "plots"
        evaluate_npe.main([square_file, '--npe', 'ABV', '--plot', str(plot_dir)])
        assert (plot_dir / "floorplan_0.png").exists()

    def test_missing_library_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            evaluate_npe.main([str(tmp_path / "nope.txt")])


class TestGenerateCells:

    def test_writes_library(self, tmp_path):
        path = str(tmp_path / "cells.txt")
        generate_cells.main(['--count', '8', '--output', path, '--fixed-fraction', '1.0'])
        library = load_cells(path)
        assert len(library) == 8
        assert all(cell.fixed for cell in library)

    def test_seed_is_reproducible(self, tmp_path):
        a = generate_cells.generate_cells(5, str(tmp_path / "a.csv"), seed=3)
        b = generate_cells.generate_cells(5, str(tmp_path / "b.csv"), seed=3)
        assert list(a) == list(b)


class TestBenchmark:

    def test_run_benchmark(self):
        cells = random_cells(10, np.random.default_rng(0))
        df = benchmark_npe.run_benchmark(cells, 20, seed=1, show_progress=False)
        assert len(df) == 20
        assert (df['area'] >= cells.total_area * (1 - 1e-9)).all()
        assert (df['max_curve_size'] >= df['root_curve_size']).all()

    def test_main_writes_outputs(self, tmp_path):
        csv_path = tmp_path / "bench.csv"
        png_path = tmp_path / "bench.png"
        df = benchmark_npe.main(['--count', '6', '--samples', '10', '--output', str(csv_path),
                                 '--plot', str(png_path)])
        assert len(df) == 10
        assert csv_path.exists()
        assert png_path.exists()
