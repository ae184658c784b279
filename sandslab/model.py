# sandslab/model.py
"""
BRICK MODEL: Straight Rectilinear Bricks on an Integer Grid
===========================================================

PURPOSE:
--------
This module defines the basic data structure of the settling problem:
- Brick: a straight line of unit cubes between two integer endpoints

A brick extends along exactly one axis (X, Y or Z). Its endpoints are given
as (x, y, z) triples with non-negative integer coordinates. The ground is the
plane z=0, so a brick resting on the ground has bottom height 1.

    0,0,1~0,0,10   vertical brick, 10 cubes, axis Z
    0,0,10~1,0,10  horizontal brick, 2 cubes, axis X
    2,2,2~2,2,2    single cube, axis defaults to Z

Bricks are immutable. Lowering a brick during settling produces a new Brick
with the same id (see Brick.translate), so a brick's identity is its input
index and never its position.
"""

from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from .config import CONFIG

Coord = Tuple[int, int, int]
Column = Tuple[int, int]


class MalformedInputError(ValueError):
    """Raised when brick endpoints do not describe a straight brick."""
    pass


class Axis(Enum):
    """Axis along which a brick extends."""
    X = 0
    Y = 1
    Z = 2


def _as_coord(point, name: str) -> Coord:
    try:
        values = tuple(point)
    except TypeError:
        raise MalformedInputError(f"{name} must be a sequence of 3 integers, got {point!r}")
    if len(values) != 3:
        raise MalformedInputError(f"{name} must have 3 coordinates, got {len(values)}")
    for v in values:
        if isinstance(v, bool) or not isinstance(v, Integral):
            raise MalformedInputError(f"{name} coordinates must be integers, got {point!r}")
        if v < 0:
            raise MalformedInputError(f"{name} has a negative coordinate: {point!r}")
    return tuple(int(v) for v in values)


@dataclass(frozen=True)
class Brick:
    """
    A brick: a straight run of unit cubes along a single axis.

    Parameters:
    -----------
    id : int
        Input index of the brick. Used as node identity in the support graph
        and as the tie-break when two bricks start at the same height.

    start : Coord
        One end of the brick (x, y, z). After construction this is always the
        lower end along the brick's axis.

    end : Coord
        The other end of the brick. After construction this is the upper end.

    axis : Optional[Axis]
        Axis of extent. Derived from the endpoints; only consulted for single
        cube bricks, where it defaults to Axis.Z.

    Examples:
    ---------
    >>> b = Brick(0, (1, 2, 1), (1, 0, 1))
    >>> b.start, b.end, b.axis
    ((1, 0, 1), (1, 2, 1), <Axis.Y: 1>)
    >>> list(b.cells())
    [(1, 0, 1), (1, 1, 1), (1, 2, 1)]
    >>> b.translate(3).bottom
    4

    Notes:
    ------
    - frozen=True: settling replaces bricks instead of mutating them
    - Endpoints differing on two or more axes raise MalformedInputError
    """
    id: int
    start: Coord
    end: Coord
    axis: Optional[Axis] = field(default=None, compare=False)

    def __post_init__(self):
        start = _as_coord(self.start, f"Brick {self.id} start")
        end = _as_coord(self.end, f"Brick {self.id} end")

        differing = [i for i in range(3) if start[i] != end[i]]
        if len(differing) > 1:
            raise MalformedInputError(
                f"Brick {self.id} differs on more than one axis: {start}~{end}"
            )

        if differing:
            axis = Axis(differing[0])
        elif self.axis is not None:
            axis = Axis[self.axis] if isinstance(self.axis, str) else Axis(self.axis)
        else:
            axis = Axis.Z

        lo, hi = (start, end) if start <= end else (end, start)
        object.__setattr__(self, "start", lo)
        object.__setattr__(self, "end", hi)
        object.__setattr__(self, "axis", axis)

    @property
    def bottom(self) -> int:
        """Lowest z occupied by the brick."""
        return self.start[2]

    @property
    def top(self) -> int:
        """Highest z occupied by the brick."""
        return self.end[2]

    @property
    def length(self) -> int:
        """Number of unit cubes in the brick."""
        k = self.axis.value
        return self.end[k] - self.start[k] + 1

    def cells(self) -> Iterator[Coord]:
        """Yield every occupied cell, low to high along the brick's axis."""
        k = self.axis.value
        for step in range(self.length):
            cell = list(self.start)
            cell[k] += step
            yield tuple(cell)

    def bottom_cells(self) -> List[Coord]:
        """Cells at the brick's bottom height (one for a vertical brick)."""
        if self.axis is Axis.Z:
            return [self.start]
        return list(self.cells())

    def columns(self) -> Set[Column]:
        """The (x, y) columns the brick occupies."""
        return {(x, y) for x, y, _ in self.cells()}

    def translate(self, dz: int) -> "Brick":
        """Return the same brick shifted vertically by dz; x and y are unchanged."""
        sx, sy, sz = self.start
        ex, ey, ez = self.end
        return Brick(self.id, (sx, sy, sz + dz), (ex, ey, ez + dz), self.axis)

    def move_to(self, bottom: int) -> "Brick":
        """Return the same brick with its bottom at the given height."""
        return self.translate(bottom - self.bottom)

    def __str__(self) -> str:
        s, e = self.start, self.end
        return f"{s[0]},{s[1]},{s[2]}~{e[0]},{e[1]},{e[2]}"


def make_brick(index: int, start: Sequence[int], end: Sequence[int], config=None) -> Brick:
    """
    Build a brick from a raw endpoint pair.

    Single-cube bricks get the axis configured in config.single_cube_axis.
    """
    cfg = config or CONFIG
    return Brick(index, start, end, Axis[cfg.single_cube_axis])


def make_bricks(records: Iterable, config=None) -> List[Brick]:
    """
    Build bricks from an ordered sequence of endpoint pairs.

    Each record is a (start, end) pair or an existing Brick; the brick id is
    the record's position in the sequence.
    """
    bricks = []
    for i, record in enumerate(records):
        if isinstance(record, Brick):
            if record.id != i:
                record = Brick(i, record.start, record.end, record.axis)
            bricks.append(record)
            continue
        try:
            start, end = record
        except (TypeError, ValueError):
            raise MalformedInputError(f"Record {i} is not an endpoint pair: {record!r}")
        bricks.append(make_brick(i, start, end, config))
    return bricks


def brick_label(brick_id: int, config=None) -> str:
    """Single-character label for diagrams: A, B, C, ... then the overflow label."""
    cfg = config or CONFIG
    if 0 <= brick_id < len(cfg.label_alphabet):
        return cfg.label_alphabet[brick_id]
    return cfg.overflow_label
