"""
Floorplan tooling around the slicetree library:

1. Cell-library files (text and CSV) and random generators
2. Logging and path configuration for the scripts
3. Plots of evaluated floorplans
"""

from .utils import load_cells, save_cells, random_cells, random_npe, convert_to_serializable
from .logging_config import setup_logging

__all__ = [
    'load_cells',
    'save_cells',
    'random_cells',
    'random_npe',
    'convert_to_serializable',
    'setup_logging'
]
