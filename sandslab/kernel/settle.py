# sandslab/kernel/settle.py
"""
SETTLING ENGINE: Dropping Bricks Under Gravity
==============================================

PURPOSE:
--------
Take a snapshot of bricks frozen mid-fall and let every brick drop straight
down until it lands on the ground or on another brick.

HOW IT WORKS:
-------------
1. Sort bricks by bottom height (stable, so ties keep input order). A brick
   can only come to rest on bricks that started lower, so every potential
   support is settled before the bricks that might land on it.

2. For each brick:
   - look up the highest occupied z across the (x, y) columns it covers
   - its new bottom is one above that (ground counts as height 0)
   - lower it, and record which bricks sit directly under its bottom cells
   - insert its cells into the occupancy grid

Support edges are captured at landing time: the cells at new_bottom - 1
under the brick are exactly its supporters, and nothing settled later can
change that.

A brick never moves up. If its resting height would be above its current
bottom it overlaps something already settled, which means the snapshot is
inconsistent and a CollisionError is raised.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Set

from ..config import CONFIG, SlabConfig
from ..model import Brick, make_bricks
from .grid import CollisionError, OccupancyGrid

logger = logging.getLogger(__name__)


@dataclass
class SettleResult:
    """
    Outcome of one settling pass.

    Attributes:
    -----------
    bricks : List[Brick]
        Settled bricks, in input order (bricks[i].id == i)
    grid : OccupancyGrid
        Grid holding the final positions
    supporters : Dict[int, FrozenSet[int]]
        Brick id -> ids of the bricks directly beneath it
    order : List[int]
        Brick ids in the order they were settled (non-decreasing bottom)
    moved : Set[int]
        Ids of bricks whose height changed
    """
    bricks: List[Brick]
    grid: OccupancyGrid
    supporters: Dict[int, FrozenSet[int]]
    order: List[int]
    moved: Set[int] = field(default_factory=set)


def settle_order(bricks: Iterable[Brick]) -> List[Brick]:
    """Bricks sorted by bottom height, ties in input order."""
    return sorted(bricks, key=lambda b: (b.bottom, b.id))


def supporters_of(brick: Brick, grid: OccupancyGrid) -> FrozenSet[int]:
    """Ids of the bricks occupying a cell directly under one of the brick's bottom cells."""
    below = set()
    for x, y, z in brick.bottom_cells():
        occupant = grid.occupant_at((x, y, z - 1))
        if occupant is not None and occupant.id != brick.id:
            below.add(occupant.id)
    return frozenset(below)


def drop_brick(brick: Brick, grid: OccupancyGrid) -> Brick:
    """
    Lower a single brick onto the grid and insert it.

    Returns:
        The brick at its resting position.

    Raises:
        CollisionError: the brick would have to move up to fit, or its
            cells are already taken.
    """
    if brick.bottom <= grid.ground_level:
        raise CollisionError(
            f"Brick {brick.id} ({brick}) starts at or below the ground (z={grid.ground_level})",
            brick_id=brick.id,
        )

    rest = grid.max_height_below(brick.columns())
    new_bottom = rest + 1
    if new_bottom > brick.bottom:
        raise CollisionError(
            f"Brick {brick.id} ({brick}) overlaps settled material up to z={rest}",
            brick_id=brick.id,
        )

    landed = brick.move_to(new_bottom)
    grid.occupy(landed)
    return landed


def settle(bricks: Iterable, config: Optional[SlabConfig] = None) -> SettleResult:
    """
    Let every brick fall until it is blocked.

    Parameters:
    -----------
    bricks : Iterable
        Bricks, or raw (start, end) endpoint pairs, in input order
    config : SlabConfig, optional
        Ground level and single-cube axis convention (default: CONFIG)

    Returns:
    --------
    SettleResult
        Settled bricks, the filled grid and the supporters of every brick

    Raises:
    -------
    CollisionError
        If two bricks would have to share a cell

    Examples:
    ---------
    >>> result = settle([((0, 0, 5), (0, 0, 6))])
    >>> result.bricks[0].bottom, result.supporters[0]
    (1, frozenset())
    """
    cfg = config or CONFIG
    working = make_bricks(bricks, cfg)
    grid = OccupancyGrid(ground_level=cfg.ground_level)

    settled: List[Optional[Brick]] = [None] * len(working)
    supporters: Dict[int, FrozenSet[int]] = {}
    order: List[int] = []
    moved: Set[int] = set()

    for brick in settle_order(working):
        landed = drop_brick(brick, grid)
        supporters[landed.id] = supporters_of(landed, grid)
        settled[landed.id] = landed
        order.append(landed.id)

        if landed.bottom != brick.bottom:
            moved.add(landed.id)
            logger.debug("Brick %d fell from z=%d to z=%d onto %s",
                         landed.id, brick.bottom, landed.bottom,
                         sorted(supporters[landed.id]) or "ground")

    logger.info("Settled %d bricks, %d moved", len(settled), len(moved))
    return SettleResult(bricks=settled, grid=grid, supporters=supporters,
                        order=order, moved=moved)
