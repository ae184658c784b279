# File: tests/test_parse.py
"""
Test snapshot parsing.
"""

import pytest

from sandslab.model import Axis, MalformedInputError
from sandslab.parse import parse_brick_line, parse_snapshot


def test_parse_brick_line():
    brick = parse_brick_line("0,0,1~0,0,10", index=4)
    assert brick.id == 4
    assert brick.axis is Axis.Z
    assert brick.length == 10

    padded = parse_brick_line("  5,5,1~5,6,1 \n")
    assert padded.start == (5, 5, 1)
    assert padded.end == (5, 6, 1)


def test_parse_snapshot_skips_blank_lines():
    bricks = parse_snapshot("\n1,0,1~1,2,1\n\n0,0,2~2,0,2\n")
    assert [b.id for b in bricks] == [0, 1]
    assert str(bricks[1]) == "0,0,2~2,0,2"


@pytest.mark.parametrize("line, message", [
    ("1,0,1", "x,y,z~x,y,z"),
    ("1,0~1,2,1", "3 coordinates"),
    ("1,a,1~1,2,1", "Non-integer"),
    ("0,0,1~1,1,1", "more than one axis"),
    ("-1,0,1~0,0,1", "Non-integer|negative"),
])
def test_malformed_lines(line, message):
    with pytest.raises(MalformedInputError, match=message):
        parse_brick_line(line)


def test_snapshot_error_names_the_line():
    with pytest.raises(MalformedInputError, match="line 3"):
        parse_snapshot("1,0,1~1,2,1\n0,0,2~2,0,2\n0,0~1\n")


if __name__ == "__main__":
    # Run tests manually (or use pytest)
    test_parse_brick_line()
    test_parse_snapshot_skips_blank_lines()
    test_snapshot_error_names_the_line()
