"""
Slicing tree built from a Normalized Polish Expression.

Nodes live in an arena (SlicingTree.nodes) and refer to each other by index. The root is always the first node
allocated: the last operator of the expression, or the single operand of a one-cell expression.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union

from .exceptions import CellNotFoundError, FloorplanError, InvalidExpressionError
from .models import Cell, CellLibrary, Shape, ShapeCurve
from .npe import is_operator, validate_npe

logger = logging.getLogger(__name__)

RIGHT = 'right'
LEFT = 'left'


@dataclass
class SlicingTreeNode:
    """
    Operator (cut) or operand (cell) node.

    For operand nodes `cell` is set and `curve` is seeded from the cell's shapes. For operator nodes `name` is the
    cut symbol and `curve` is filled in by compute_min_area. `selected` is the index in `curve.candidates` of the
    shape chosen for this node.
    """
    index: int
    name: str
    cell: Optional[Cell] = None
    parent: Optional[int] = None
    left: Optional[int] = None
    right: Optional[int] = None
    curve: ShapeCurve = field(default_factory=ShapeCurve)
    area: float = 0.0
    aspect_ratio: float = 0.0
    selected: Optional[int] = None

    @property
    def is_operator(self) -> bool:
        return self.cell is None

    @property
    def is_leaf(self) -> bool:
        return self.cell is not None

    @property
    def is_full(self) -> bool:
        return self.left is not None and self.right is not None

    @property
    def selected_shape(self) -> Optional[Shape]:
        if self.selected is None:
            return None
        return self.curve[self.selected]

    @property
    def width(self) -> Optional[float]:
        shape = self.selected_shape
        return shape.width if shape is not None else None

    @property
    def height(self) -> Optional[float]:
        shape = self.selected_shape
        return shape.height if shape is not None else None


class SlicingTree:
    def __init__(self):
        self.nodes: List[SlicingTreeNode] = []

    def add_operator(self, name: str) -> int:
        node = SlicingTreeNode(len(self.nodes), name)
        self.nodes.append(node)
        return node.index

    def add_operand(self, cell: Cell) -> int:
        node = SlicingTreeNode(len(self.nodes), cell.name, cell=cell, curve=ShapeCurve.seeded(cell.shapes()))
        self.nodes.append(node)
        return node.index

    def attach(self, parent: int, child: int) -> str:
        """
        Attach `child` to `parent`, filling the right slot first and the left slot second.
        :return: RIGHT or LEFT, the slot that was filled.
        """
        node = self.nodes[parent]
        if node.is_leaf:
            raise ValueError(f"Cannot attach a child to operand node {node.name!r}")
        if node.right is None:
            node.right = child
            slot = RIGHT
        elif node.left is None:
            node.left = child
            slot = LEFT
        else:
            raise ValueError(f"Operator node {parent} already has two children")
        self.nodes[child].parent = parent
        return slot

    @property
    def root(self) -> Optional[SlicingTreeNode]:
        return self.nodes[0] if self.nodes else None

    @property
    def operators(self) -> List[int]:
        return [node.index for node in self.nodes if node.is_operator]

    @property
    def operands(self) -> List[int]:
        return [node.index for node in self.nodes if node.is_leaf]

    @property
    def area(self) -> float:
        return self.root.area

    def leaf(self, name: str) -> SlicingTreeNode:
        for node in self.nodes:
            if node.is_leaf and node.name == name:
                return node
        raise CellNotFoundError(name)

    def leaves(self) -> Iterator[SlicingTreeNode]:
        return (node for node in self.nodes if node.is_leaf)

    def postorder(self, index: int = 0) -> Iterator[SlicingTreeNode]:
        """Yield the subtree rooted at `index` left subtree first, then right subtree, then the node itself."""
        if not self.nodes:
            return
        stack = [(index, False)]
        while stack:
            idx, expanded = stack.pop()
            node = self.nodes[idx]
            if expanded or node.is_leaf:
                yield node
                continue
            stack.append((idx, True))
            stack.append((node.right, False))
            stack.append((node.left, False))

    def to_npe(self, index: int = 0) -> str:
        return ''.join(node.name for node in self.postorder(index))

    def __len__(self):
        return len(self.nodes)

    def __str__(self):
        return self.to_npe()

    def __repr__(self):
        return f'SlicingTree({self.to_npe()!r})'


@dataclass
class BuildResult:
    """Either a built tree or the error that stopped construction."""
    tree: Optional[SlicingTree] = None
    error: Optional[FloorplanError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> SlicingTree:
        if self.error is not None:
            raise self.error
        return self.tree


def try_build_tree(npe: str, cells: Union[CellLibrary, Iterable[Cell]]) -> BuildResult:
    """
    Build the slicing tree of an NPE, scanning it from its last symbol to its first.

    The last symbol becomes the root. Each further operator is attached under the current node (right slot first) and
    becomes the current node. Each operand is attached the same way; once it fills a left slot the subtree below the
    current node is complete, so control climbs back to the nearest ancestor still missing its left child.

    :param npe: Normalized Polish Expression
    :param cells: Cell library resolving operand names
    :return: BuildResult carrying the tree, or an InvalidExpressionError / CellNotFoundError. No tree is built for an
        invalid expression.
    """
    check = validate_npe(npe)
    if not check:
        return BuildResult(error=InvalidExpressionError(npe, check.reason))
    library = CellLibrary.coerce(cells)
    tree = SlicingTree()

    if len(npe) == 1:
        cell = library.get(npe)
        if cell is None:
            return BuildResult(error=CellNotFoundError(npe))
        tree.add_operand(cell)
        return BuildResult(tree=tree)

    root = tree.add_operator(npe[-1])
    current = root
    for symbol in reversed(npe[:-1]):
        if is_operator(symbol):
            node = tree.add_operator(symbol)
            tree.attach(current, node)
            current = node
            continue
        cell = library.get(symbol)
        if cell is None:
            return BuildResult(error=CellNotFoundError(symbol))
        leaf = tree.add_operand(cell)
        if tree.attach(current, leaf) == LEFT:
            while current != root and tree.nodes[current].left is not None:
                current = tree.nodes[current].parent

    logger.debug("Built slicing tree for %s: %d operators, %d operands",
                 npe, len(tree.operators), len(tree.operands))
    return BuildResult(tree=tree)


def build_tree(npe: str, cells: Union[CellLibrary, Iterable[Cell]]) -> SlicingTree:
    """Like try_build_tree, but raises the construction error instead of returning it."""
    return try_build_tree(npe, cells).unwrap()
