import logging
import os
from typing import Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from slicetree import Cell, CellLibrary
from slicetree.npe import HORIZONTAL, VERTICAL
from .config import CELL_NAMES

logger = logging.getLogger(__name__)

CSV_COLUMNS = ['name', 'area', 'aspect_ratio', 'fixed']
_TRUE_WORDS = {'1', 'true', 'yes', 'fixed'}
_FALSE_WORDS = {'0', 'false', 'no', 'free', 'rotatable'}


def _parse_fixed(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, np.integer)):
        return value != 0
    word = str(value).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS or word in ('', 'nan'):
        return False
    raise ValueError(f"Cannot interpret {value!r} as a fixed flag")


def parse_cell_line(line: str) -> Optional[Cell]:
    """
    Parse one line of the text format 'name area aspectRatio [fixed]'.
    Blank lines and '#' comments yield None. Cells are rotatable unless the optional fourth field says otherwise.
    """
    line = line.split('#', 1)[0].strip()
    if not line:
        return None
    fields = line.split()
    if len(fields) not in (3, 4):
        raise ValueError(f"Expected 'name area aspectRatio [fixed]', got {line!r}")
    fixed = _parse_fixed(fields[3]) if len(fields) == 4 else False
    return Cell(fields[0], float(fields[1]), float(fields[2]), fixed)


def load_cells_from_text(path: str) -> CellLibrary:
    library = CellLibrary()
    with open(path, 'r') as f:
        for lineno, line in enumerate(f, start=1):
            try:
                cell = parse_cell_line(line)
                if cell is not None:
                    library.add(cell)
            except ValueError as e:
                raise ValueError(f"{path}:{lineno}: {e}") from e
    return library


def load_cells_from_csv(csv_file: str) -> CellLibrary:
    """Load cells from a CSV file with columns name, area, aspect_ratio and an optional fixed column."""
    df = pd.read_csv(csv_file, dtype={'name': str})
    missing = [c for c in CSV_COLUMNS[:3] if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns {missing} in {csv_file}")
    library = CellLibrary()
    for _, row in df.iterrows():
        fixed = _parse_fixed(row['fixed']) if 'fixed' in df.columns else False
        library.add(Cell(str(row['name']), float(row['area']), float(row['aspect_ratio']), fixed))
    return library


def load_cells(path: str) -> CellLibrary:
    """
    Load a cell library, choosing the format by extension: '.csv' files through pandas, anything else as
    whitespace-separated text. Errors opening the file propagate unchanged.
    """
    if path.lower().endswith('.csv'):
        library = load_cells_from_csv(path)
    else:
        library = load_cells_from_text(path)
    logger.info("Loaded %d cells from %s", len(library), path)
    return library


def save_cells(cells: Iterable[Cell], path: str) -> None:
    cells = list(cells)
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    if path.lower().endswith('.csv'):
        df = pd.DataFrame(
            [(c.name, c.area, c.aspect_ratio, c.fixed) for c in cells],
            columns=CSV_COLUMNS
        )
        df.to_csv(path, index=False)
        return
    with open(path, 'w') as f:
        for c in cells:
            line = f"{c.name} {c.area!r} {c.aspect_ratio!r}"
            if c.fixed:
                line += " fixed"
            f.write(line + "\n")


def random_cells(
    count: int,
    rng: np.random.Generator = None,
    min_area: float = 1.0,
    max_area: float = 100.0,
    max_ratio: float = 3.0,
    fixed_fraction: float = 0.0
) -> CellLibrary:
    """
    Generate a library of `count` cells.

    Areas are uniform in [min_area, max_area]; aspect ratios are log-uniform in [1/max_ratio, max_ratio].
    """
    if count > len(CELL_NAMES):
        raise ValueError(f"At most {len(CELL_NAMES)} cells can be named, got {count}")
    if not 0 < min_area <= max_area:
        raise ValueError("Areas must satisfy 0 < min_area <= max_area")
    if max_ratio < 1:
        raise ValueError("max_ratio must be at least 1")
    rng = rng if rng is not None else np.random.default_rng()

    areas = rng.uniform(min_area, max_area, size=count)
    log_ratio = np.log(max_ratio)
    ratios = np.exp(rng.uniform(-log_ratio, log_ratio, size=count))
    fixed = rng.random(size=count) < fixed_fraction
    return CellLibrary(
        Cell(CELL_NAMES[i], float(areas[i]), float(ratios[i]), bool(fixed[i]))
        for i in range(count)
    )


def random_npe(names: Sequence[str], rng: np.random.Generator = None) -> str:
    """
    Random valid NPE over `names`: a random binary split of a shuffled operand order with random cuts. A right child
    never repeats its parent's cut, so no operator is immediately repeated.
    """
    if not names:
        raise ValueError("random_npe needs at least one operand")
    rng = rng if rng is not None else np.random.default_rng()
    order = list(names)
    rng.shuffle(order)

    def emit(items: List[str], parent_cut: Optional[str], is_right: bool) -> str:
        if len(items) == 1:
            return items[0]
        split = int(rng.integers(1, len(items)))
        cut = VERTICAL if rng.random() < 0.5 else HORIZONTAL
        if is_right and cut == parent_cut:
            cut = HORIZONTAL if cut == VERTICAL else VERTICAL
        return emit(items[:split], cut, False) + emit(items[split:], cut, True) + cut

    return emit(order, None, False)


def convert_to_serializable(obj):
    """
    Recursively convert numpy types to Python native types for JSON serialization.
    """
    if isinstance(obj, dict):
        return {key: convert_to_serializable(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [convert_to_serializable(item) for item in obj]
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    else:
        return obj
