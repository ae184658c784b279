# File: tests/test_robots.py
"""
Test the robot patrol simulation against the 11 x 7 example.
"""

import numpy as np
import pytest

from sandslab.model import MalformedInputError
from sandslab.robots import (
    infer_space, parse_robots, positions_after, quadrant_counts,
    quietest_second, render_tiles, safety_factor,
)

EXAMPLE = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""
SPACE = (11, 7)

INITIAL_TILES = """\
1.12.......
...........
...........
......11.11
1.1........
.........1.
.......1..."""

TILES_AFTER_100 = """\
......2..1.
...........
1..........
.11........
.....1.....
...12......
.1....1...."""


def test_parse_robots():
    p, v = parse_robots(EXAMPLE)
    assert p.shape == (12, 2)
    assert v.shape == (12, 2)
    assert p[0].tolist() == [0, 4]
    assert v[0].tolist() == [3, -3]
    assert infer_space(p) == SPACE


def test_parse_errors():
    with pytest.raises(MalformedInputError, match="line 2"):
        parse_robots("p=0,4 v=3,-3\np=0,4\n")
    with pytest.raises(ValueError):
        infer_space(np.zeros((0, 2), dtype=np.int64))


def test_single_robot_wraps_around():
    """
    Robot p=2,4 v=2,-3 for the first five seconds:
    (4,1) -> (6,5) -> (8,2) -> (10,6) -> (1,3)
    """
    p = np.array([[2, 4]])
    v = np.array([[2, -3]])
    path = [positions_after(p, v, t, SPACE)[0].tolist() for t in range(1, 6)]
    assert path == [[4, 1], [6, 5], [8, 2], [10, 6], [1, 3]]
    print("✓ Wraparound motion matches the example")


def test_tiles_before_and_after():
    p, v = parse_robots(EXAMPLE)
    assert render_tiles(p, SPACE) == INITIAL_TILES
    assert render_tiles(positions_after(p, v, 100, SPACE), SPACE) == TILES_AFTER_100


def test_tiles_wrap_positions_outside_the_floor():
    """Raw positions past an edge land on the tile they wrap onto."""
    p = np.array([[11, 7], [-1, 0], [3, -6]], dtype=np.int64)
    rows = render_tiles(p, SPACE).splitlines()
    assert rows[0] == "1.........1"
    assert rows[1] == "...1......."
    assert all(row == "." * 11 for row in rows[2:])
    assert len(rows) == 7


def test_safety_factor_after_100_seconds():
    """Quadrants hold 1, 4, 3 and 1 robots: safety factor 12."""
    p, v = parse_robots(EXAMPLE)
    moved = positions_after(p, v, 100, SPACE)
    assert quadrant_counts(moved, SPACE).tolist() == [1, 4, 3, 1]
    assert safety_factor(p, v, 100, SPACE) == 12
    print("✓ Safety factor is 12")


def test_negative_seconds_rejected():
    p, v = parse_robots(EXAMPLE)
    with pytest.raises(ValueError, match="non-negative"):
        positions_after(p, v, -1, SPACE)


def test_quietest_second_is_the_minimum():
    p, v = parse_robots(EXAMPLE)
    t = quietest_second(p, v, SPACE)
    factors = [safety_factor(p, v, s, SPACE) for s in range(SPACE[0] * SPACE[1])]
    assert 0 <= t < SPACE[0] * SPACE[1]
    assert factors[t] == min(factors)
    assert t == factors.index(min(factors)), "Ties go to the earliest second"


def test_motion_is_periodic():
    p, v = parse_robots(EXAMPLE)
    period = SPACE[0] * SPACE[1]
    np.testing.assert_array_equal(
        positions_after(p, v, 13, SPACE),
        positions_after(p, v, 13 + period, SPACE),
    )


if __name__ == "__main__":
    # Run tests manually (or use pytest)
    test_parse_robots()
    test_parse_errors()
    test_single_robot_wraps_around()
    test_tiles_before_and_after()
    test_tiles_wrap_positions_outside_the_floor()
    test_safety_factor_after_100_seconds()
    test_negative_seconds_rejected()
    test_quietest_second_is_the_minimum()
    test_motion_is_periodic()
