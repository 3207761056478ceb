from typing import Iterable, Optional, Tuple
import numpy as np


class Rect:
    def __init__(self, *args, min_x: float = None, min_y: float = None, max_x: float = None, max_y: float = None):
        """
        Initialize Rect.

        Supports two initialization patterns:
        1. Rect(min_x, min_y, max_x, max_y)
        2. Rect(min_x=..., min_y=..., max_x=..., max_y=...) - Keyword arguments
        """
        if len(args) == 4:
            self.min = np.array([args[0], args[1]], dtype=np.float64)
            self.max = np.array([args[2], args[3]], dtype=np.float64)
        elif min_x is not None and min_y is not None and max_x is not None and max_y is not None:
            self.min = np.array([min_x, min_y], dtype=np.float64)
            self.max = np.array([max_x, max_y], dtype=np.float64)
        else:
            raise ValueError("Invalid initialization arguments for Rect")
        if np.any(self.min > self.max):
            raise ValueError(f"Rect min corner {self.min} exceeds max corner {self.max}")

    @classmethod
    def from_origin(cls, x: float, y: float, width: float, height: float) -> 'Rect':
        return cls(x, y, x + width, y + height)

    @property
    def min_x(self):
        return float(self.min[0])

    @property
    def min_y(self):
        return float(self.min[1])

    @property
    def max_x(self):
        return float(self.max[0])

    @property
    def max_y(self):
        return float(self.max[1])

    @property
    def width(self) -> float:
        return float(self.max[0] - self.min[0])

    @property
    def height(self) -> float:
        return float(self.max[1] - self.min[1])

    def __eq__(self, other):
        if isinstance(other, Rect):
            return np.allclose(self.min, other.min) and np.allclose(self.max, other.max)
        return False

    def __repr__(self):
        return f'Rect({self.min_x}, {self.min_y}, {self.max_x}, {self.max_y})'

    def union(self, rect: 'Rect') -> 'Rect':
        new_min = np.minimum(self.min, rect.min)
        new_max = np.maximum(self.max, rect.max)
        return Rect(new_min[0], new_min[1], new_max[0], new_max[1])

    def intersection(self, rect: 'Rect') -> Optional['Rect']:
        inter_min = np.maximum(self.min, rect.min)
        inter_max = np.minimum(self.max, rect.max)
        if np.all(inter_min < inter_max):
            return Rect(inter_min[0], inter_min[1], inter_max[0], inter_max[1])
        return None

    def intersects(self, rect: 'Rect') -> bool:
        """True if the interiors overlap; rectangles that only share an edge do not intersect."""
        return bool(np.all(self.max > rect.min) and np.all(self.min < rect.max))

    def get_intersection_area(self, rect: 'Rect') -> float:
        overlaps = np.maximum(0.0, np.minimum(self.max, rect.max) - np.maximum(self.min, rect.min))
        return float(np.prod(overlaps))

    def contains(self, rect: 'Rect') -> bool:
        return bool(np.all(self.min <= rect.min) and np.all(rect.max <= self.max))

    def perimeter(self) -> float:
        return float(np.sum(self.max - self.min) * 2)

    def area(self) -> float:
        return float(np.prod(self.max - self.min))

    def centroid(self) -> Tuple[float, float]:
        c = (self.min + self.max) / 2
        return float(c[0]), float(c[1])


def union(rect1: Rect, rect2: Rect) -> Rect:
    if rect1 is None:
        return rect2
    if rect2 is None:
        return rect1
    return rect1.union(rect2)


def union_all(rects: Iterable[Rect]) -> Rect:
    result = None
    for rect in rects:
        result = union(result, rect)
    return result
