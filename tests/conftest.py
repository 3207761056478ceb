import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")
sys.path.insert(0, str(Path(__file__).parent.parent))

from slicetree import Cell, CellLibrary
from floorplan.config import SAMPLE_CELLS_FILE
from floorplan.utils import load_cells


@pytest.fixture
def square_cells():
    """Two fixed square cells: A is 2 x 2, B is 3 x 3."""
    return CellLibrary([Cell('A', 4.0, 1.0, fixed=True), Cell('B', 9.0, 1.0, fixed=True)])


@pytest.fixture
def rotatable_cells():
    """Two rotatable 1 x 2 cells."""
    return CellLibrary([Cell('A', 2.0, 2.0), Cell('B', 2.0, 2.0)])


@pytest.fixture
def sample_cells():
    return load_cells(SAMPLE_CELLS_FILE)
