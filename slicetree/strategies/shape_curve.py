"""
Shape-curve combination for slicing trees.

Every node carries the Pareto frontier of (width, height) pairs its subtree can realize. An operator node combines
each frontier shape of its right child with each frontier shape of its left child according to its cut, keeping only
non-dominated results, and then selects the combination of least area.

Dimensions are compared exactly, without any tolerance: two shapes are duplicates only if width and height are
bit-for-bit equal.
"""

from typing import Callable, Dict
from ..models import Shape, ShapeCurve
from ..npe import HORIZONTAL, VERTICAL
from ..tree import SlicingTree, SlicingTreeNode

CombineStrategy = Callable[[Shape, Shape, int, int], Shape]


def combine_vertical(right: Shape, left: Shape, r_idx: int = None, l_idx: int = None) -> Shape:
    """Side by side: widths add, the taller child sets the height."""
    height = right.height if right.height >= left.height else left.height
    return Shape(right.width + left.width, height, r_idx, l_idx)


def combine_horizontal(right: Shape, left: Shape, r_idx: int = None, l_idx: int = None) -> Shape:
    """Stacked: heights add, the wider child sets the width."""
    width = right.width if right.width >= left.width else left.width
    return Shape(width, right.height + left.height, r_idx, l_idx)


CUT_STRATEGIES: Dict[str, CombineStrategy] = {
    VERTICAL: combine_vertical,
    HORIZONTAL: combine_horizontal,
}


def combine_curves(cut: str, right: ShapeCurve, left: ShapeCurve) -> ShapeCurve:
    """
    Cross every right-child frontier shape with every left-child frontier shape under `cut`.
    :return: New curve whose shapes reference the child candidates they were built from.
    """
    try:
        combine = CUT_STRATEGIES[cut]
    except KeyError:
        raise ValueError(f"Unknown cut operator {cut!r}") from None
    curve = ShapeCurve()
    for r_idx, r_shape in right.items():
        for l_idx, l_shape in left.items():
            curve.add(combine(r_shape, l_shape, r_idx, l_idx))
    return curve


def select_min_area(node: SlicingTreeNode) -> float:
    """Pick the least-area shape of the node's curve and record it on the node."""
    idx, shape = node.curve.best()
    node.selected = idx
    node.area = shape.area
    node.aspect_ratio = shape.aspect_ratio
    return node.area


def compute_min_area(tree: SlicingTree, index: int = 0) -> float:
    """
    Compute the shape curve of every operator node below (and including) `index`, children before parents, and
    return the minimum area of the subtree. Operator curves are rebuilt from scratch, so calling this again on the
    same tree gives the same area and selection.
    :param tree: Slicing tree
    :param index: Arena index of the subtree root (defaults to the tree root)
    :return: Minimum bounding area of the subtree
    """
    if not tree.nodes:
        raise ValueError("compute_min_area called on an empty tree")
    for node in tree.postorder(index):
        if node.is_operator:
            right = tree.nodes[node.right]
            left = tree.nodes[node.left]
            node.curve = combine_curves(node.name, right.curve, left.curve)
        select_min_area(node)
    return tree.nodes[index].area
