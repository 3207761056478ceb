from slicetree.models import Cell, CellLibrary, Shape, ShapeCurve, Rect
from .exceptions import FloorplanError, InvalidExpressionError, CellNotFoundError
from .npe import VERTICAL, HORIZONTAL, OPERATORS, NpeCheck, validate_npe, is_valid_npe
from .tree import SlicingTree, SlicingTreeNode, BuildResult, try_build_tree, build_tree
from .strategies import compute_min_area, back_propagate, place
from .evaluate import Evaluation, cost, evaluate

__all__ = [
    'Cell', 'CellLibrary', 'Shape', 'ShapeCurve', 'Rect',
    'FloorplanError', 'InvalidExpressionError', 'CellNotFoundError',
    'VERTICAL', 'HORIZONTAL', 'OPERATORS', 'NpeCheck', 'validate_npe', 'is_valid_npe',
    'SlicingTree', 'SlicingTreeNode', 'BuildResult', 'try_build_tree', 'build_tree',
    'compute_min_area', 'back_propagate', 'place',
    'Evaluation', 'cost', 'evaluate'
]
