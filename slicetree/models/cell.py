import math
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .shape import Shape
from ..exceptions import CellNotFoundError

# Names that can never identify a cell because they denote cuts.
RESERVED_NAMES = frozenset('VH')


@dataclass(frozen=True)
class Cell:
    """
    A rectangular block of the floorplan.

    :param name: Single-character identifier, unique within a library.
    :param area: Area of the block.
    :param aspect_ratio: height / width in the block's own orientation.
    :param fixed: When False the block may be rotated by 90 degrees.
    """
    name: str
    area: float
    aspect_ratio: float
    fixed: bool = False

    def __post_init__(self):
        if not isinstance(self.name, str) or len(self.name) != 1:
            raise ValueError(f"Cell name must be a single character, got {self.name!r}")
        if self.name in RESERVED_NAMES:
            raise ValueError(f"Cell name {self.name!r} is reserved for cut operators")
        if not math.isfinite(self.area) or self.area <= 0:
            raise ValueError(f"Cell {self.name!r} must have a positive area, got {self.area}")
        if not math.isfinite(self.aspect_ratio) or self.aspect_ratio <= 0:
            raise ValueError(f"Cell {self.name!r} must have a positive aspect ratio, got {self.aspect_ratio}")

    @property
    def height(self) -> float:
        return math.sqrt(self.aspect_ratio * self.area)

    @property
    def width(self) -> float:
        return self.area / self.height

    def shapes(self) -> List[Shape]:
        """
        Candidate shapes of the cell: its own orientation first, then the rotated one unless the cell is fixed.
        Square rotatable cells still yield two (identical) shapes.
        """
        height = self.height
        width = self.area / height
        shapes = [Shape(width, height)]
        if not self.fixed:
            shapes.append(Shape(height, width))
        return shapes


class CellLibrary:
    """Ordered collection of cells with lookup by name."""

    def __init__(self, cells: Iterable[Cell] = ()):
        self._cells: Dict[str, Cell] = {}
        for cell in cells:
            self.add(cell)

    @classmethod
    def coerce(cls, cells: Union['CellLibrary', Iterable[Cell]]) -> 'CellLibrary':
        if isinstance(cells, CellLibrary):
            return cells
        return cls(cells)

    def add(self, cell: Cell) -> None:
        if cell.name in self._cells:
            raise ValueError(f"Duplicate cell name {cell.name!r}")
        self._cells[cell.name] = cell

    def get(self, name: str, default: Optional[Cell] = None) -> Optional[Cell]:
        return self._cells.get(name, default)

    def __getitem__(self, name: str) -> Cell:
        try:
            return self._cells[name]
        except KeyError:
            raise CellNotFoundError(name) from None

    def __contains__(self, name) -> bool:
        return name in self._cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells.values())

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self):
        return f'CellLibrary({list(self._cells)})'

    @property
    def names(self) -> List[str]:
        return list(self._cells)

    @property
    def total_area(self) -> float:
        return sum(cell.area for cell in self._cells.values())
