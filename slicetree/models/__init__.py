from .shape import Shape, ShapeCurve
from .cell import Cell, CellLibrary, RESERVED_NAMES
from .rect import Rect, union, union_all
