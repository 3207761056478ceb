"""
Cost function of a floorplan: the minimum bounding area of the slicing tree an NPE encodes.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Union

from .models import Cell, CellLibrary, Rect
from .strategies import compute_min_area, place
from .tree import SlicingTree, build_tree

logger = logging.getLogger(__name__)

CellsLike = Union[CellLibrary, Iterable[Cell]]


@dataclass
class Evaluation:
    npe: str
    area: float
    width: float
    height: float
    cell_area: float
    tree: SlicingTree
    placement: Dict[str, Rect]

    @property
    def aspect_ratio(self) -> float:
        return self.height / self.width

    @property
    def dead_space(self) -> float:
        """Bounding area not covered by any cell."""
        return self.area - self.cell_area

    def to_dict(self) -> dict:
        return {
            'npe': self.npe,
            'area': self.area,
            'width': self.width,
            'height': self.height,
            'aspect_ratio': self.aspect_ratio,
            'dead_space': self.dead_space,
            'placement': {
                name: {'x': rect.min_x, 'y': rect.min_y, 'width': rect.width, 'height': rect.height}
                for name, rect in self.placement.items()
            },
        }


def cost(npe: str, cells: CellsLike) -> float:
    """
    Validate `npe`, build its slicing tree over `cells` and return the minimum achievable bounding area.
    :raises InvalidExpressionError: if `npe` is not a valid NPE (no tree is built)
    :raises CellNotFoundError: if an operand has no cell in the library
    """
    tree = build_tree(npe, cells)
    area = compute_min_area(tree)
    logger.debug("Cost of %s: %s", npe, area)
    return area


def evaluate(npe: str, cells: CellsLike) -> Evaluation:
    """Like cost, but also resolves every cell's dimensions and position."""
    library = CellLibrary.coerce(cells)
    tree = build_tree(npe, library)
    area = compute_min_area(tree)
    placement = place(tree)
    root = tree.root
    cell_area = sum(library[name].area for name in placement)
    logger.debug("Evaluated %s: %.6g x %.6g = %.6g", npe, root.width, root.height, area)
    return Evaluation(
        npe=npe,
        area=area,
        width=root.width,
        height=root.height,
        cell_area=cell_area,
        tree=tree,
        placement=placement,
    )
