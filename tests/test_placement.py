"""Tests for back-propagation of the selected shape and cell placement."""
import itertools

import numpy as np
import pytest

from slicetree import Cell, CellLibrary, Rect, back_propagate, build_tree, compute_min_area, place
from slicetree.models import union_all
from floorplan.config import SAMPLE_NPES
from floorplan.utils import random_cells, random_npe


def assert_legal(placement, width, height, cells):
    rects = list(placement.values())
    for a, b in itertools.combinations(rects, 2):
        assert a.get_intersection_area(b) < 1e-9
    bounds = union_all(rects)
    assert bounds.min_x >= 0 and bounds.min_y >= 0
    assert bounds.max_x <= width + 1e-9
    assert bounds.max_y <= height + 1e-9
    for name, rect in placement.items():
        assert rect.area() == pytest.approx(cells[name].area)


class TestBackPropagate:

    def test_requires_evaluated_tree(self, square_cells):
        tree = build_tree("ABV", square_cells)
        with pytest.raises(ValueError):
            back_propagate(tree)

    def test_rotates_cell_to_reach_minimum(self):
        cells = CellLibrary([Cell('A', 2.0, 2.0, fixed=True), Cell('B', 2.0, 0.5)])
        tree = build_tree("ABH", cells)
        assert compute_min_area(tree) == 4.0
        back_propagate(tree)
        b = tree.leaf('B')
        assert (b.width, b.height) == (1.0, 2.0)
        a = tree.leaf('A')
        assert (a.width, a.height) == (1.0, 2.0)

    def test_leaves_follow_root_selection(self, sample_cells):
        tree = build_tree(SAMPLE_NPES[2], sample_cells)
        compute_min_area(tree)
        back_propagate(tree)
        for idx in tree.operators:
            node = tree.nodes[idx]
            shape = node.selected_shape
            assert tree.nodes[node.right].selected == shape.r_selected
            assert tree.nodes[node.left].selected == shape.l_selected


class TestPlace:

    def test_vertical_pair(self, square_cells):
        tree = build_tree("ABV", square_cells)
        compute_min_area(tree)
        placement = place(tree)
        assert placement['A'] == Rect(0, 0, 2, 2)
        assert placement['B'] == Rect(2, 0, 5, 3)

    def test_horizontal_pair_stacks_right_on_top(self, square_cells):
        tree = build_tree("ABH", square_cells)
        compute_min_area(tree)
        placement = place(tree)
        assert placement['A'] == Rect(0, 0, 2, 2)
        assert placement['B'] == Rect(0, 2, 3, 5)

    def test_single_cell(self, square_cells):
        tree = build_tree("A", square_cells)
        compute_min_area(tree)
        assert place(tree) == {'A': Rect(0, 0, 2, 2)}

    def test_origin_offset(self, square_cells):
        tree = build_tree("ABV", square_cells)
        compute_min_area(tree)
        placement = place(tree, origin=(10.0, 5.0))
        assert placement['B'] == Rect(12, 5, 15, 8)

    @pytest.mark.parametrize("npe", SAMPLE_NPES)
    def test_sample_placements_are_legal(self, npe, sample_cells):
        tree = build_tree(npe, sample_cells)
        compute_min_area(tree)
        placement = place(tree)
        assert set(placement) == set(sample_cells.names)
        assert_legal(placement, tree.root.width, tree.root.height, sample_cells)

    def test_random_placements_are_legal(self):
        rng = np.random.default_rng(5)
        cells = random_cells(15, rng, fixed_fraction=0.5)
        for _ in range(15):
            tree = build_tree(random_npe(cells.names, rng), cells)
            compute_min_area(tree)
            assert_legal(place(tree), tree.root.width, tree.root.height, cells)
