# sandslab/kernel/grid.py
"""Sparse 3D occupancy grid: integer cell -> the brick occupying it."""

import logging
from typing import Dict, Iterable, Iterator, Optional, Set

from ..model import Brick, Coord, Column

logger = logging.getLogger(__name__)


class CollisionError(RuntimeError):
    """Raised when two bricks would occupy the same cell."""

    def __init__(self, message: str, cell: Optional[Coord] = None,
                 brick_id: Optional[int] = None, other_id: Optional[int] = None):
        super().__init__(message)
        self.cell = cell
        self.brick_id = brick_id
        self.other_id = other_id


class OccupancyGrid:
    """
    Sparse mapping from (x, y, z) cells to bricks.

    Absence of a cell means empty space (or ground, at z <= ground_level).
    A per-column height index keeps max_height_below proportional to the
    number of columns asked about, never to the size of the grid.

    Examples:
    ---------
    >>> grid = OccupancyGrid()
    >>> grid.occupy(Brick(0, (0, 0, 1), (2, 0, 1)))
    >>> grid.occupant_at((1, 0, 1)).id
    0
    >>> grid.max_height_below({(1, 0), (5, 5)})
    1
    """

    def __init__(self, ground_level: int = 0):
        self.ground_level = ground_level
        self._cells: Dict[Coord, Brick] = {}
        self._heights: Dict[Column, Set[int]] = {}

    def occupy(self, brick: Brick) -> None:
        """
        Insert every cell of the brick's current position.

        A cell already held by a brick with the same id is overwritten, so a
        brick may be re-inserted over its own previous cells during a trial
        move. Nothing is written if any cell collides.

        Raises:
            CollisionError: a cell is held by a different brick, or lies at
                or below the ground.
        """
        cells = list(brick.cells())
        for cell in cells:
            if cell[2] <= self.ground_level:
                raise CollisionError(
                    f"Brick {brick.id} reaches the ground at {cell}",
                    cell=cell, brick_id=brick.id,
                )
            existing = self._cells.get(cell)
            if existing is not None and existing.id != brick.id:
                raise CollisionError(
                    f"Brick {brick.id} collides with brick {existing.id} at {cell}",
                    cell=cell, brick_id=brick.id, other_id=existing.id,
                )

        for cell in cells:
            self._cells[cell] = brick
            self._heights.setdefault(cell[:2], set()).add(cell[2])

    def vacate(self, brick: Brick) -> None:
        """Remove the brick's current cells. Cells held by other bricks are left alone."""
        for cell in brick.cells():
            existing = self._cells.get(cell)
            if existing is None or existing.id != brick.id:
                continue
            del self._cells[cell]
            column = self._heights[cell[:2]]
            column.discard(cell[2])
            if not column:
                del self._heights[cell[:2]]

    def occupant_at(self, cell: Coord) -> Optional[Brick]:
        """Brick occupying the cell, or None for empty space and ground."""
        return self._cells.get(tuple(cell))

    def max_height_below(self, columns: Iterable[Column]) -> int:
        """Highest occupied z in any of the given (x, y) columns; empty columns report the ground level."""
        best = self.ground_level
        for column in columns:
            heights = self._heights.get(tuple(column))
            if not heights:
                continue
            h = max(heights)
            if h > best:
                best = h
        return best

    def bricks(self) -> Iterator[Brick]:
        """Distinct occupants, in no particular order."""
        seen = set()
        for brick in self._cells.values():
            if brick.id not in seen:
                seen.add(brick.id)
                yield brick

    def __contains__(self, cell) -> bool:
        return tuple(cell) in self._cells

    def __len__(self) -> int:
        return len(self._cells)
