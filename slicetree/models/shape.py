from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Shape:
    """
    A realizable (width, height) of a subtree.

    r_selected / l_selected are indices into the right / left child's candidate list and record which child shapes
    were combined to produce this one. They are None for leaf shapes.
    """
    width: float
    height: float
    r_selected: Optional[int] = None
    l_selected: Optional[int] = None

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.height / self.width

    def same_size(self, other: 'Shape') -> bool:
        return self.width == other.width and self.height == other.height

    def dominates(self, other: 'Shape') -> bool:
        """True if this shape is no larger than `other` in both dimensions."""
        return self.width <= other.width and self.height <= other.height


class ShapeCurve:
    """
    Shape set of a slicing tree node.

    Candidates are stored in an append-only list so that indices handed out to parent shapes stay valid. The frontier
    is the ordered list of candidate indices that are currently non-dominated.
    """

    def __init__(self, shapes: Iterable[Shape] = ()):
        self.candidates: List[Shape] = []
        self._frontier: List[int] = []
        for shape in shapes:
            self.add(shape)

    @classmethod
    def seeded(cls, shapes: Iterable[Shape]) -> 'ShapeCurve':
        """Build a curve that keeps every given shape as-is, without dominance pruning (leaf shape sets)."""
        curve = cls()
        for shape in shapes:
            curve.candidates.append(shape)
            curve._frontier.append(len(curve.candidates) - 1)
        return curve

    def add(self, shape: Shape) -> bool:
        """
        Insert a shape unless an existing frontier shape dominates it (exact duplicates included). Frontier shapes the
        new shape dominates are dropped.
        :return: True if the shape joined the frontier.
        """
        kept = []
        for idx in self._frontier:
            item = self.candidates[idx]
            if item.same_size(shape) or item.dominates(shape):
                return False
            if shape.dominates(item):
                continue
            kept.append(idx)
        self.candidates.append(shape)
        kept.append(len(self.candidates) - 1)
        self._frontier = kept
        return True

    def clear(self) -> None:
        self.candidates = []
        self._frontier = []

    def items(self) -> Iterator[Tuple[int, Shape]]:
        """Iterate over (candidate index, shape) pairs of the frontier, in insertion order."""
        for idx in self._frontier:
            yield idx, self.candidates[idx]

    def best(self) -> Tuple[int, Shape]:
        """
        Frontier shape of minimum area. Ties keep the earliest shape.
        :return: (candidate index, shape)
        """
        if not self._frontier:
            raise ValueError("best() called on an empty shape curve")
        best_idx = self._frontier[0]
        best_area = self.candidates[best_idx].area
        for idx in self._frontier[1:]:
            area = self.candidates[idx].area
            if area < best_area:
                best_idx, best_area = idx, area
        return best_idx, self.candidates[best_idx]

    @property
    def frontier(self) -> List[Shape]:
        return [self.candidates[idx] for idx in self._frontier]

    def __getitem__(self, idx: int) -> Shape:
        return self.candidates[idx]

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.frontier)

    def __len__(self) -> int:
        return len(self._frontier)

    def __repr__(self):
        return f'ShapeCurve({[(s.width, s.height) for s in self.frontier]})'
