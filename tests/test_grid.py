# File: tests/test_grid.py
"""
Test the sparse occupancy grid.
"""

import pytest

from sandslab.kernel.grid import CollisionError, OccupancyGrid
from sandslab.model import Brick


def test_occupy_and_lookup():
    grid = OccupancyGrid()
    brick = Brick(0, (0, 0, 1), (2, 0, 1))
    grid.occupy(brick)

    assert len(grid) == 3
    assert grid.occupant_at((1, 0, 1)) == brick
    assert grid.occupant_at((1, 1, 1)) is None
    assert (2, 0, 1) in grid
    assert (3, 0, 1) not in grid
    print("✓ Occupied cells map back to their brick")


def test_collision_between_different_bricks():
    """
    A second brick may not take a cell that's already held, and a failed
    insert must leave the grid untouched.
    """
    grid = OccupancyGrid()
    grid.occupy(Brick(0, (0, 0, 1), (2, 0, 1)))

    with pytest.raises(CollisionError, match="collides with brick 0") as exc_info:
        grid.occupy(Brick(1, (1, 0, 1), (1, 2, 1)))

    assert exc_info.value.cell == (1, 0, 1)
    assert exc_info.value.brick_id == 1
    assert exc_info.value.other_id == 0
    assert len(grid) == 3, "Nothing should be written on collision"
    assert grid.occupant_at((1, 2, 1)) is None


def test_same_brick_may_reoccupy_its_cells():
    grid = OccupancyGrid()
    brick = Brick(0, (0, 0, 2), (0, 0, 4))
    grid.occupy(brick)
    grid.occupy(brick.translate(-1))  # overlaps its own previous cells

    assert grid.occupant_at((0, 0, 1)).id == 0
    assert grid.occupant_at((0, 0, 3)).bottom == 1


def test_ground_is_not_occupiable():
    grid = OccupancyGrid()
    with pytest.raises(CollisionError, match="ground"):
        grid.occupy(Brick(0, (0, 0, 0), (0, 0, 2)))
    assert len(grid) == 0


def test_vacate():
    grid = OccupancyGrid()
    a = Brick(0, (0, 0, 1), (0, 0, 3))
    b = Brick(1, (0, 0, 4), (1, 0, 4))
    grid.occupy(a)
    grid.occupy(b)

    grid.vacate(a)
    assert len(grid) == 2
    assert grid.occupant_at((0, 0, 2)) is None
    assert grid.occupant_at((0, 0, 4)) == b
    assert grid.max_height_below({(0, 0)}) == 4

    grid.vacate(b)
    assert len(grid) == 0
    assert grid.max_height_below({(0, 0), (1, 0)}) == 0


def test_max_height_below():
    """
    The height query looks only at the requested columns. Empty columns
    report the ground.
    """
    grid = OccupancyGrid()
    grid.occupy(Brick(0, (0, 0, 1), (0, 0, 5)))
    grid.occupy(Brick(1, (1, 0, 2), (2, 0, 2)))

    assert grid.max_height_below({(0, 0)}) == 5
    assert grid.max_height_below({(1, 0), (2, 0)}) == 2
    assert grid.max_height_below({(0, 0), (2, 0)}) == 5
    assert grid.max_height_below({(7, 7)}) == 0
    assert grid.max_height_below([]) == 0
    print("✓ Column heights reported correctly")


def test_ground_level_offset():
    grid = OccupancyGrid(ground_level=5)
    assert grid.max_height_below({(0, 0)}) == 5
    with pytest.raises(CollisionError):
        grid.occupy(Brick(0, (0, 0, 5), (0, 0, 5)))


def test_bricks_iterates_distinct_occupants():
    grid = OccupancyGrid()
    grid.occupy(Brick(0, (0, 0, 1), (2, 0, 1)))
    grid.occupy(Brick(1, (0, 1, 1), (0, 1, 3)))
    assert sorted(b.id for b in grid.bricks()) == [0, 1]


if __name__ == "__main__":
    # Run tests manually (or use pytest)
    test_occupy_and_lookup()
    test_collision_between_different_bricks()
    test_same_brick_may_reoccupy_its_cells()
    test_ground_is_not_occupiable()
    test_vacate()
    test_max_height_below()
    test_ground_level_offset()
    test_bricks_iterates_distinct_occupants()
