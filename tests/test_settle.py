# File: tests/test_settle.py
"""
Test the settling engine on the classic seven-brick snapshot and on the
edge cases around collisions and the ground.

    1,0,1~1,2,1   <- A
    0,0,2~2,0,2   <- B
    0,2,3~2,2,3   <- C
    0,0,4~0,2,4   <- D
    2,0,5~2,2,5   <- E
    0,1,6~2,1,6   <- F
    1,1,8~1,1,9   <- G
"""

import pytest

from sandslab.config import SlabConfig
from sandslab.kernel.grid import CollisionError
from sandslab.kernel.settle import settle, settle_order
from sandslab.model import Brick

EXAMPLE = [
    ((1, 0, 1), (1, 2, 1)),
    ((0, 0, 2), (2, 0, 2)),
    ((0, 2, 3), (2, 2, 3)),
    ((0, 0, 4), (0, 2, 4)),
    ((2, 0, 5), (2, 2, 5)),
    ((0, 1, 6), (2, 1, 6)),
    ((1, 1, 8), (1, 1, 9)),
]


def test_example_final_heights():
    """
    WHAT IS THIS TEST?
    ==================
    After settling, the stack from the puzzle description looks like
    (seen along x):

        .G. 6
        .G. 5
        FFF 4
        D.E 3
        ??? 2
        .A. 1
        --- 0

    so the bottoms must be A=1, B=C=2, D=E=3, F=4, G=5.
    """
    result = settle(EXAMPLE)
    bottoms = [b.bottom for b in result.bricks]
    assert bottoms == [1, 2, 2, 3, 3, 4, 5]
    assert result.bricks[6].top == 6

    # x and y never change
    for raw, brick in zip(EXAMPLE, result.bricks):
        assert brick.start[:2] == raw[0][:2]
    print("✓ Seven-brick example settles to the documented heights")


def test_example_supporters_captured_at_landing():
    result = settle(EXAMPLE)
    assert result.supporters == {
        0: frozenset(),
        1: frozenset({0}),
        2: frozenset({0}),
        3: frozenset({1, 2}),
        4: frozenset({1, 2}),
        5: frozenset({3, 4}),
        6: frozenset({5}),
    }


def test_settle_order_and_moved_bricks():
    result = settle(EXAMPLE)
    assert result.order == [0, 1, 2, 3, 4, 5, 6]
    # A already rests on the ground and B lands exactly where it was
    assert result.moved == {2, 3, 4, 5, 6}


def test_ties_broken_by_input_order():
    """Bricks starting at the same height are settled in input order."""
    bricks = [
        Brick(0, (0, 0, 3), (0, 0, 3)),
        Brick(1, (5, 5, 1), (5, 5, 1)),
        Brick(2, (1, 0, 3), (1, 0, 3)),
    ]
    assert [b.id for b in settle_order(bricks)] == [1, 0, 2]
    assert settle(bricks).order == [1, 0, 2]


def test_single_floating_brick_lands_on_ground():
    result = settle([((3, 3, 7), (3, 5, 7))])
    brick = result.bricks[0]
    assert brick.bottom == 1
    assert brick.start == (3, 3, 1)
    assert result.supporters[0] == frozenset()
    assert result.moved == {0}


def test_vertical_brick_lands_on_its_single_column():
    result = settle([
        ((0, 0, 1), (2, 0, 1)),
        ((1, 0, 5), (1, 0, 8)),
    ])
    assert result.bricks[1].bottom == 2
    assert result.bricks[1].top == 5
    assert result.supporters[1] == frozenset({0})


def test_brick_on_two_supports_at_different_heights():
    """A brick stops on the highest thing under any of its columns."""
    result = settle([
        ((0, 0, 1), (0, 0, 1)),
        ((2, 0, 1), (2, 0, 3)),
        ((0, 0, 10), (2, 0, 10)),
    ])
    assert result.bricks[2].bottom == 4
    assert result.supporters[2] == frozenset({1}), "Only the tall column touches it"


def test_overlapping_bricks_raise_collision():
    with pytest.raises(CollisionError):
        settle([
            ((0, 0, 1), (2, 0, 1)),
            ((1, 0, 1), (1, 2, 1)),
        ])

    with pytest.raises(CollisionError, match="overlaps"):
        settle([
            ((0, 0, 1), (0, 0, 5)),
            ((0, 0, 3), (1, 0, 3)),
        ])


def test_brick_in_the_ground_raises_collision():
    """z=0 is ground; a brick there would have to move up to settle."""
    with pytest.raises(CollisionError, match=r"at or below the ground \(z=0\)"):
        settle([((0, 0, 0), (0, 0, 2))])

    with pytest.raises(CollisionError, match="at or below the ground") as err:
        settle([((0, 0, 0), (0, 0, 0))])
    assert "overlaps" not in str(err.value)
    assert err.value.brick_id == 0

    cfg = SlabConfig(ground_level=10)
    with pytest.raises(CollisionError, match=r"\(z=10\)"):
        settle([((0, 0, 10), (1, 0, 10))], cfg)


def test_custom_ground_level():
    cfg = SlabConfig(ground_level=10)
    result = settle([((0, 0, 20), (0, 0, 20))], cfg)
    assert result.bricks[0].bottom == 11
    assert result.grid.ground_level == 10


def test_empty_snapshot():
    result = settle([])
    assert result.bricks == []
    assert result.supporters == {}
    assert len(result.grid) == 0


if __name__ == "__main__":
    # Run tests manually (or use pytest)
    test_example_final_heights()
    test_example_supporters_captured_at_landing()
    test_settle_order_and_moved_bricks()
    test_ties_broken_by_input_order()
    test_single_floating_brick_lands_on_ground()
    test_vertical_brick_lands_on_its_single_column()
    test_brick_on_two_supports_at_different_heights()
    test_overlapping_bricks_raise_collision()
    test_brick_in_the_ground_raises_collision()
    test_custom_ground_level()
    test_empty_snapshot()
