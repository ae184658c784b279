#!/usr/bin/env python3
"""
RUN_ROBOT_PATROL: Robots on a Wrapping Floor
============================================

Reads `p=x,y v=dx,dy` lines and prints the safety factor after a number of
seconds, plus the second with the lowest safety factor.

Run with:
    python demos/run_robot_patrol.py --input robots.txt
    python demos/run_robot_patrol.py            # built-in 11 x 7 example
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sandslab.config import CONFIG
from sandslab.robots import (
    parse_robots, positions_after, quietest_second, render_tiles, safety_factor,
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


def main():
    parser = argparse.ArgumentParser(description='Simulate robots on a wrapping floor')
    parser.add_argument('--input', type=str, default=None,
                        help='Robot file (default: built-in example on an 11 x 7 floor)')
    parser.add_argument('--width', type=int, default=None)
    parser.add_argument('--height', type=int, default=None)
    parser.add_argument('--seconds', type=int, default=CONFIG.robot_seconds)
    parser.add_argument('--log-level', type=str, default=CONFIG.log_level)
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if args.input:
        text = Path(args.input).read_text()
        space = CONFIG.robot_space
    else:
        text = EXAMPLE
        space = (11, 7)
    if args.width and args.height:
        space = (args.width, args.height)

    p, v = parse_robots(text)
    print(f"{len(p)} robots on a {space[0]} x {space[1]} floor")
    print(f"Safety factor after {args.seconds}s: {safety_factor(p, v, args.seconds, space)}")

    t = quietest_second(p, v, space)
    print(f"Lowest safety factor at t={t}s:")
    print(render_tiles(positions_after(p, v, t, space), space))


if __name__ == "__main__":
    main()
