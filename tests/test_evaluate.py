"""End-to-end tests of the cost function."""
import pytest

from slicetree import (
    Cell, CellLibrary, CellNotFoundError, InvalidExpressionError, cost, evaluate)
from slicetree import tree as tree_module
from floorplan.config import SAMPLE_NPES


class TestCost:

    def test_vertical_cut_of_fixed_squares(self, square_cells):
        assert cost("ABV", square_cells) == 15.0

    def test_horizontal_cut_of_fixed_squares(self, square_cells):
        assert cost("ABH", square_cells) == 15.0

    def test_accepts_iterable_of_cells(self):
        assert cost("ABV", [Cell('A', 4.0, 1.0, True), Cell('B', 9.0, 1.0, True)]) == 15.0

    def test_duplicate_operand_fails_before_building(self, square_cells, monkeypatch):
        def no_tree():
            raise AssertionError("tree constructed for an invalid expression")

        monkeypatch.setattr(tree_module, "SlicingTree", no_tree)
        with pytest.raises(InvalidExpressionError):
            cost("AAV", square_cells)

    def test_missing_cell(self, square_cells):
        with pytest.raises(CellNotFoundError) as excinfo:
            cost("ACV", square_cells)
        assert excinfo.value.name == 'C'

    def test_library_is_not_modified(self, sample_cells):
        before = list(sample_cells)
        for npe in SAMPLE_NPES:
            cost(npe, sample_cells)
        assert list(sample_cells) == before

    def test_evaluations_are_independent(self, sample_cells):
        first = cost(SAMPLE_NPES[0], sample_cells)
        cost(SAMPLE_NPES[1], sample_cells)
        assert cost(SAMPLE_NPES[0], sample_cells) == first

    def test_sample_costs_cover_cell_area(self, sample_cells):
        areas = [cost(npe, sample_cells) for npe in SAMPLE_NPES]
        assert all(area >= sample_cells.total_area * (1 - 1e-9) for area in areas)


class TestEvaluate:

    def test_evaluation_record(self, square_cells):
        evaluation = evaluate("ABV", square_cells)
        assert evaluation.area == 15.0
        assert (evaluation.width, evaluation.height) == (5.0, 3.0)
        assert evaluation.aspect_ratio == pytest.approx(0.6)
        assert evaluation.cell_area == 13.0
        assert evaluation.dead_space == 2.0
        assert str(evaluation.tree) == "ABV"

    def test_matches_cost(self, sample_cells):
        for npe in SAMPLE_NPES:
            assert evaluate(npe, sample_cells).area == cost(npe, sample_cells)

    def test_to_dict(self, square_cells):
        data = evaluate("ABH", square_cells).to_dict()
        assert data['npe'] == "ABH"
        assert data['area'] == 15.0
        assert data['placement']['B'] == {'x': 0.0, 'y': 2.0, 'width': 3.0, 'height': 3.0}

    def test_single_cell(self):
        cells = CellLibrary([Cell('A', 4.0, 1.0)])
        evaluation = evaluate("A", cells)
        assert evaluation.area == 4.0
        assert evaluation.dead_space == 0.0

    def test_invalid_expression(self, square_cells):
        with pytest.raises(InvalidExpressionError):
            evaluate("AB", square_cells)
