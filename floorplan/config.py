"""
Paths and constants shared by the floorplan scripts.

Exports:
    DATA_PATH (str): Absolute path to the bundled data directory.
    DEFAULT_CELLS_FILE (str): Cell library read when no file is given.
    SAMPLE_NPES (tuple): Expressions evaluated when none are given.
    CELL_NAMES (str): Alphabet used for generated cell names.
"""
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """Resolve a path relative to the project root."""
    project_root: Path = Path(__file__).parent.parent
    return os.path.join(str(project_root), relative_path)


DATA_PATH: str = get_resource_path("data")
DEFAULT_CELLS_FILE: str = "input_file.txt"
SAMPLE_CELLS_FILE: str = os.path.join(DATA_PATH, "input_file.txt")

# Chains of vertical cuts, horizontal cuts, and a mixed arrangement over the 20 sample cells.
SAMPLE_NPES = (
    "12V3V4V5V6V7V8V9VaVbVcVdVeVfVgViVjVkVlV",
    "12H3H4H5H6H7H8H9HaHbHcHdHeHfHgHiHjHkHlH",
    "213546H7VHVa8V9HcVHgHibdHkVHfeHVlHVjHVH",
)

# Lowercase 'h' and 'v' are skipped so generated names never read like a cut operator.
CELL_NAMES: str = "123456789abcdefgijklmnopqrstuwxyz0ABCDEFGIJKLMNOPQRSTUWXYZ"
