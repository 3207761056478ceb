from typing import Dict, Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from slicetree import Evaluation, Rect
from slicetree.models import union_all


def plot_placement(placement: Dict[str, Rect], ax=None, title: Optional[str] = None, bounds: Optional[Rect] = None):
    """
    Draw every placed cell as a labelled rectangle.
    :param placement: Cell name -> placed rectangle
    :param ax: Axes to draw on; a new figure is created if omitted
    :param bounds: Outline to draw around the cells (defaults to their union)
    :return: The axes drawn on
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))
    cmap = plt.get_cmap('tab20')
    for i, (name, rect) in enumerate(sorted(placement.items())):
        ax.add_patch(Rectangle((rect.min_x, rect.min_y), rect.width, rect.height,
                               facecolor=cmap(i % cmap.N), edgecolor='black', alpha=0.7))
        cx, cy = rect.centroid()
        ax.text(cx, cy, name, ha='center', va='center', fontsize=9)

    bounds = bounds if bounds is not None else union_all(placement.values())
    if bounds is not None:
        ax.add_patch(Rectangle((bounds.min_x, bounds.min_y), bounds.width, bounds.height,
                               fill=False, edgecolor='red', linestyle='--', linewidth=1.5))
        margin = 0.02 * max(bounds.width, bounds.height)
        ax.set_xlim(bounds.min_x - margin, bounds.max_x + margin)
        ax.set_ylim(bounds.min_y - margin, bounds.max_y + margin)
    ax.set_aspect('equal')
    if title:
        ax.set_title(title)
    return ax


def plot_evaluation(evaluation: Evaluation, output: Optional[str] = None):
    """Plot an evaluated floorplan inside its bounding rectangle, saving to `output` if given."""
    fig, ax = plt.subplots(figsize=(8, 8))
    bounds = Rect.from_origin(0.0, 0.0, evaluation.width, evaluation.height)
    title = f"{evaluation.npe}\narea = {evaluation.area:.4g} ({evaluation.width:.4g} x {evaluation.height:.4g})"
    plot_placement(evaluation.placement, ax=ax, title=title, bounds=bounds)
    if output:
        fig.savefig(output)
        plt.close(fig)
    return fig
