# sandslab - Settling falling bricks and reasoning about what holds what up
"""
SANDSLAB: Falling Bricks, Support Graphs and Removal Cascades
=============================================================

This package provides:
- A brick model for straight rectilinear bricks on an integer grid
- A settling engine that drops every brick until it is blocked
- The support graph of the settled stack (who rests on whom)
- Removal queries: which bricks are safe to remove, and how many bricks
  fall if a given brick is removed
- Reporting (pandas) and side/3D views (matplotlib, plotly)
- An unrelated robot patrol simulation on a wrapping floor

ARCHITECTURE:
-------------
    model.py        Brick, Axis, MalformedInputError
    kernel/         OccupancyGrid, settle(), SupportGraph
    queries.py      Removable check and cascade counts
    analysis.py     End-to-end pipeline (analyze, analyze_text)
    parse.py        `x,y,z~x,y,z` snapshot parsing
    report.py       Per-brick DataFrame
    viz/            Text and matplotlib side views, Plotly 3D view
    robots.py       Robot patrol (independent)
    config.py       SlabConfig and the default CONFIG
"""

from .config import CONFIG, SlabConfig
from .model import Axis, Brick, MalformedInputError, make_brick, make_bricks
from .kernel import CollisionError, OccupancyGrid, SettleResult, SupportGraph, settle
from .queries import (
    cascade,
    cascade_count,
    cascade_counts,
    count_removable,
    critical_bricks,
    is_removable,
    total_cascade,
)
from .analysis import SlabAnalysis, analyze, analyze_text
from .parse import parse_snapshot

__version__ = "0.1.0"

__all__ = [
    'CONFIG', 'SlabConfig',
    'Axis', 'Brick', 'MalformedInputError', 'make_brick', 'make_bricks',
    'CollisionError', 'OccupancyGrid', 'SettleResult', 'SupportGraph', 'settle',
    'cascade', 'cascade_count', 'cascade_counts', 'count_removable',
    'critical_bricks', 'is_removable', 'total_cascade',
    'SlabAnalysis', 'analyze', 'analyze_text', 'parse_snapshot',
]
