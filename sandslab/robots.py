# sandslab/robots.py
"""
ROBOT PATROL: Straight-Line Motion on a Wrapping Floor
======================================================

Independent of the brick code. Robots move at constant integer velocity on
a width x height tile floor; leaving one edge wraps around to the opposite
one, so the floor is a torus and positions are taken modulo its size.

    p=0,4 v=3,-3    robot at x=0, y=4 moving 3 right and 3 up per second

After some seconds the floor is cut into four quadrants by its middle row
and middle column (robots exactly on them are ignored). The safety factor
is the product of the four quadrant counts.

All robots are handled at once as (n, 2) numpy arrays.
"""

import logging
import re
from typing import Optional, Tuple

import numpy as np

from .config import CONFIG, SlabConfig
from .model import MalformedInputError

logger = logging.getLogger(__name__)

Space = Tuple[int, int]

_ROBOT_RE = re.compile(r"^\s*p=(-?\d+),(-?\d+)\s+v=(-?\d+),(-?\d+)\s*$")


def parse_robots(text: str) -> Tuple[np.ndarray, np.ndarray]:
    """
    Parse `p=x,y v=dx,dy` lines.

    Returns:
    --------
    positions, velocities : np.ndarray
        Two int64 arrays of shape (n, 2); blank lines are skipped

    Raises:
    -------
    MalformedInputError
        naming the 1-based line number of the bad line
    """
    rows = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        m = _ROBOT_RE.match(line)
        if m is None:
            raise MalformedInputError(f"line {lineno}: expected 'p=x,y v=dx,dy', got {line.strip()!r}")
        rows.append([int(g) for g in m.groups()])

    data = np.array(rows, dtype=np.int64).reshape(-1, 4)
    return data[:, :2].copy(), data[:, 2:].copy()


def infer_space(positions: np.ndarray) -> Space:
    """Smallest floor holding every starting position: max coordinate + 1 per axis."""
    if len(positions) == 0:
        raise ValueError("Cannot infer the floor size without robots")
    w, h = (np.max(positions, axis=0) + 1).tolist()
    return int(w), int(h)


def _resolve_space(space: Optional[Space], config: Optional[SlabConfig]) -> Space:
    w, h = space if space is not None else (config or CONFIG).robot_space
    if w <= 0 or h <= 0:
        raise ValueError(f"Floor size must be positive, got {(w, h)}")
    return int(w), int(h)


def positions_after(positions: np.ndarray, velocities: np.ndarray, seconds: int,
                    space: Optional[Space] = None,
                    config: Optional[SlabConfig] = None) -> np.ndarray:
    """
    Positions of every robot after the given number of seconds.

    Raises:
        ValueError: seconds is negative
    """
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    size = np.array(_resolve_space(space, config), dtype=np.int64)
    return np.mod(positions + velocities * int(seconds), size)


def quadrant_counts(positions: np.ndarray, space: Optional[Space] = None,
                    config: Optional[SlabConfig] = None) -> np.ndarray:
    """
    Robots per quadrant, ordered (left-top, left-bottom, right-top, right-bottom).

    Robots on column width // 2 or row height // 2 are not counted.
    """
    w, h = _resolve_space(space, config)
    x, y = positions[:, 0], positions[:, 1]
    mx, my = w // 2, h // 2

    left, right = x < mx, x > mx
    top, bottom = y < my, y > my

    return np.array([
        np.count_nonzero(left & top),
        np.count_nonzero(left & bottom),
        np.count_nonzero(right & top),
        np.count_nonzero(right & bottom),
    ], dtype=np.int64)


def safety_factor(positions: np.ndarray, velocities: np.ndarray,
                  seconds: Optional[int] = None,
                  space: Optional[Space] = None,
                  config: Optional[SlabConfig] = None) -> int:
    """Product of the quadrant counts after `seconds` (default: config.robot_seconds)."""
    cfg = config or CONFIG
    if seconds is None:
        seconds = cfg.robot_seconds
    moved = positions_after(positions, velocities, seconds, space, cfg)
    return int(np.prod(quadrant_counts(moved, space, cfg)))


def quietest_second(positions: np.ndarray, velocities: np.ndarray,
                    space: Optional[Space] = None,
                    config: Optional[SlabConfig] = None) -> int:
    """
    Second in [0, width * height) with the lowest safety factor.

    Every robot's motion repeats with period width * height, so no later
    second can do better. Ties go to the earliest second.
    """
    w, h = _resolve_space(space, config)
    best_second, best_factor = 0, None
    for t in range(w * h):
        factor = safety_factor(positions, velocities, t, (w, h), config)
        if best_factor is None or factor < best_factor:
            best_second, best_factor = t, factor

    logger.info("Lowest safety factor %s at t=%d", best_factor, best_second)
    return best_second


def render_tiles(positions: np.ndarray, space: Optional[Space] = None,
                 config: Optional[SlabConfig] = None) -> str:
    """
    Robots per tile, one text row per y; '.' for empty tiles, '*' for more than 9.

    Positions outside the floor are wrapped onto it first.
    """
    w, h = _resolve_space(space, config)
    wrapped = np.mod(positions, np.array([w, h], dtype=np.int64))
    counts = np.zeros((h, w), dtype=np.int64)
    np.add.at(counts, (wrapped[:, 1], wrapped[:, 0]), 1)

    def tile(n: int) -> str:
        if n == 0:
            return "."
        return str(n) if n < 10 else "*"

    return "\n".join("".join(tile(n) for n in row) for row in counts.tolist())
