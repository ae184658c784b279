# sandslab/kernel - Occupancy, settling and support relations
"""
KERNEL: FROM FLOATING SNAPSHOT TO SUPPORT GRAPH
===============================================

Data flows strictly forward through three pieces:

    grid.py     OccupancyGrid: sparse (x, y, z) -> brick lookup
    settle.py   settle(): drops bricks in height order, fills the grid and
                captures which bricks each one lands on
    support.py  SupportGraph: the immutable "rests on" relation

Everything after settling only reads.
"""

from .grid import OccupancyGrid, CollisionError
from .settle import settle, SettleResult
from .support import SupportGraph

__all__ = ['OccupancyGrid', 'CollisionError', 'settle', 'SettleResult', 'SupportGraph']
