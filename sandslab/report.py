# sandslab/report.py
"""
REPORT: ONE ROW PER BRICK
=========================

Flattens a SlabAnalysis into a pandas DataFrame so a settled stack can be
sorted, filtered and exported like any other table:

    df = summarize(analyze(records))
    df[~df.removable].sort_values("cascade", ascending=False)

Columns:
    id, label, start, end, axis, bottom, top, length,
    n_supporters, n_supported, removable, cascade
"""

from typing import Optional

import numpy as np
import pandas as pd

from .analysis import SlabAnalysis
from .config import SlabConfig
from .model import brick_label
from .queries import critical_bricks

COLUMNS = [
    "id", "label", "start", "end", "axis", "bottom", "top", "length",
    "n_supporters", "n_supported", "removable", "cascade",
]


def summarize(analysis: SlabAnalysis, config: Optional[SlabConfig] = None) -> pd.DataFrame:
    """
    Build the per-brick table for an analyzed snapshot.

    Returns:
    --------
    pd.DataFrame
        One row per brick in input order, columns as in COLUMNS
    """
    graph = analysis.graph
    critical = critical_bricks(graph)

    rows = []
    for brick in analysis.bricks:
        rows.append({
            "id": brick.id,
            "label": brick_label(brick.id, config),
            "start": str(brick.start),
            "end": str(brick.end),
            "axis": brick.axis.name,
            "bottom": brick.bottom,
            "top": brick.top,
            "length": brick.length,
            "n_supporters": len(graph.supporters(brick.id)),
            "n_supported": len(graph.supported(brick.id)),
            "removable": brick.id not in critical,
            "cascade": analysis.cascades[brick.id],
        })

    return pd.DataFrame(rows, columns=COLUMNS)


def stack_statistics(df: pd.DataFrame) -> dict:
    """
    Headline numbers for a summary table.

    Returns a dict with the brick count, removable count, cascade total,
    the largest single cascade and the settled stack height.
    """
    if df.empty:
        return {
            "n_bricks": 0,
            "removable": 0,
            "cascade_total": 0,
            "max_cascade": 0,
            "height": 0,
        }

    return {
        "n_bricks": int(len(df)),
        "removable": int(df["removable"].sum()),
        "cascade_total": int(df["cascade"].sum()),
        "max_cascade": int(np.max(df["cascade"].to_numpy())),
        "height": int(df["top"].max()),
    }
