"""
Top-down resolution of the shape chosen at the root into concrete leaf dimensions and coordinates.
"""

from typing import Dict
from ..models import Rect
from ..npe import VERTICAL
from ..tree import SlicingTree


def back_propagate(tree: SlicingTree, index: int = 0) -> None:
    """
    Follow the r_selected / l_selected references of the node's selected shape down to every leaf, fixing each
    node's `selected` shape (and so the orientation of rotatable cells). compute_min_area must have run first.
    """
    root = tree.nodes[index]
    if root.selected is None:
        raise ValueError("back_propagate called before compute_min_area")
    stack = [(index, root.selected)]
    while stack:
        idx, shape_idx = stack.pop()
        node = tree.nodes[idx]
        node.selected = shape_idx
        if node.is_leaf:
            shape = node.curve[shape_idx]
            node.area = shape.area
            node.aspect_ratio = shape.aspect_ratio
            continue
        shape = node.curve[shape_idx]
        stack.append((node.right, shape.r_selected))
        stack.append((node.left, shape.l_selected))


def place(tree: SlicingTree, index: int = 0, origin=(0.0, 0.0)) -> Dict[str, Rect]:
    """
    Back-propagate the selection and lay the leaves out.

    A vertical cut puts its left child at the cut's lower-left corner and its right child to the right of it; a
    horizontal cut puts its right child on top of its left child. Each child sits at the lower-left corner of its slot.

    :return: Mapping from cell name to its placed rectangle.
    """
    back_propagate(tree, index)
    placement = {}
    stack = [(index, origin[0], origin[1])]
    while stack:
        idx, x, y = stack.pop()
        node = tree.nodes[idx]
        if node.is_leaf:
            placement[node.name] = Rect.from_origin(x, y, node.width, node.height)
            continue
        left = tree.nodes[node.left]
        stack.append((node.left, x, y))
        if node.name == VERTICAL:
            stack.append((node.right, x + left.width, y))
        else:
            stack.append((node.right, x, y + left.height))
    return placement
