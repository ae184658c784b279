# sandslab/viz/projection.py
"""
SIDE VIEWS: The Stack Seen Along One Horizontal Axis
====================================================

Looking at the stack from the side collapses one horizontal axis. Each
(horizontal, z) position then shows:

    .    nothing there
    A    exactly one brick (its label)
    ?    several bricks hidden behind each other

For the classic seven-brick example, settled, seen with x running left to
right:

    .G. 6
    .G. 5
    FFF 4
    D.E 3
    ??? 2
    .A. 1
    --- 0

render_projection() produces that text; plot_projection() draws the same
view with matplotlib.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..config import SlabConfig
from ..model import Brick, brick_label

_AXES = {"x": 0, "y": 1}


def _horizontal_index(axis: str) -> int:
    try:
        return _AXES[axis.lower()]
    except KeyError:
        raise ValueError(f"axis must be 'x' or 'y', got {axis!r}")


def project(bricks: Iterable[Brick], axis: str = "x") -> Dict[Tuple[int, int], Set[int]]:
    """Map (horizontal, z) -> ids of the bricks visible at that position."""
    k = _horizontal_index(axis)
    view: Dict[Tuple[int, int], Set[int]] = defaultdict(set)
    for brick in bricks:
        for cell in brick.cells():
            view[(cell[k], cell[2])].add(brick.id)
    return view


def render_projection(bricks: Iterable[Brick], axis: str = "x",
                      config: Optional[SlabConfig] = None) -> str:
    """
    Text side view of the stack, top row first, ground row last.

    Parameters:
    -----------
    bricks : Iterable[Brick]
        Bricks to draw (settled or not)
    axis : str
        'x' or 'y': the horizontal axis that runs left to right
    config : SlabConfig, optional
        Label alphabet (default: CONFIG)

    Returns:
    --------
    str
        Rows joined by newlines, each suffixed with its z; empty input gives ''
    """
    bricks = list(bricks)
    if not bricks:
        return ""

    k = _horizontal_index(axis)
    view = project(bricks, axis)
    width = max(b.end[k] for b in bricks) + 1
    height = max(b.top for b in bricks)

    rows: List[str] = []
    for z in range(height, 0, -1):
        chars = []
        for h in range(width):
            ids = view.get((h, z))
            if not ids:
                chars.append(".")
            elif len(ids) == 1:
                chars.append(brick_label(next(iter(ids)), config))
            else:
                chars.append("?")
        rows.append(f"{''.join(chars)} {z}")
    rows.append(f"{'-' * width} 0")
    return "\n".join(rows)


def plot_projection(bricks: Iterable[Brick], axis: str = "x",
                    ax: Optional[plt.Axes] = None,
                    title: Optional[str] = None,
                    config: Optional[SlabConfig] = None) -> plt.Axes:
    """
    Draw the side view with one unit square per visible cell.

    Cells shared by several bricks are drawn grey and marked '?'.

    Returns:
    --------
    plt.Axes
        The axes drawn on (created if not given)
    """
    bricks = list(bricks)
    k = _horizontal_index(axis)
    view = project(bricks, axis)

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 8))

    cmap = plt.get_cmap("tab20")
    for (h, z), ids in sorted(view.items()):
        if len(ids) == 1:
            bid = next(iter(ids))
            color = cmap(bid % cmap.N)
            text = brick_label(bid, config)
        else:
            color = "lightgrey"
            text = "?"
        ax.add_patch(Rectangle((h, z), 1, 1, facecolor=color, edgecolor="black", linewidth=0.8))
        ax.text(h + 0.5, z + 0.5, text, ha="center", va="center", fontsize=9)

    width = max((b.end[k] for b in bricks), default=0) + 1
    height = max((b.top for b in bricks), default=0) + 1
    ax.axhline(1, color="saddlebrown", linewidth=2)
    ax.set_xlim(0, width)
    ax.set_ylim(0, height + 1)
    ax.set_aspect("equal")
    ax.set_xlabel(axis.lower())
    ax.set_ylabel("z")
    ax.set_title(title or f"Side view along {axis.lower()}")
    return ax
