from .shape_curve import (
    CUT_STRATEGIES, combine_vertical, combine_horizontal, combine_curves, select_min_area, compute_min_area)
from .placement import back_propagate, place

__all__ = [
    'CUT_STRATEGIES', 'combine_vertical', 'combine_horizontal', 'combine_curves', 'select_min_area',
    'compute_min_area', 'back_propagate', 'place'
]
