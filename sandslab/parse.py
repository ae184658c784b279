# sandslab/parse.py
"""Snapshot parsing: one brick per line, `x,y,z~x,y,z`."""

from typing import List, Optional

from .config import SlabConfig
from .model import Brick, MalformedInputError, make_brick


def parse_brick_line(line: str, index: int = 0, config: Optional[SlabConfig] = None) -> Brick:
    """
    Parse a single `x,y,z~x,y,z` line into a brick with the given id.

    >>> parse_brick_line("1,0,1~1,2,1")
    Brick(id=0, start=(1, 0, 1), end=(1, 2, 1), axis=<Axis.Y: 1>)
    """
    halves = line.strip().split("~")
    if len(halves) != 2:
        raise MalformedInputError(f"Expected 'x,y,z~x,y,z', got {line.strip()!r}")

    ends = []
    for half in halves:
        parts = half.split(",")
        if len(parts) != 3:
            raise MalformedInputError(f"Expected 3 coordinates, got {half.strip()!r}")
        try:
            ends.append(tuple(int(p) for p in parts))
        except ValueError:
            raise MalformedInputError(f"Non-integer coordinate in {half.strip()!r}")

    return make_brick(index, ends[0], ends[1], config)


def parse_snapshot(text: str, config: Optional[SlabConfig] = None) -> List[Brick]:
    """
    Parse a whole snapshot. Blank lines are skipped; brick ids follow the
    order of the non-blank lines.

    Raises:
        MalformedInputError: naming the 1-based line number of the bad line
    """
    bricks = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            bricks.append(parse_brick_line(line, len(bricks), config))
        except MalformedInputError as exc:
            raise MalformedInputError(f"line {lineno}: {exc}") from exc
    return bricks
