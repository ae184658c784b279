#!/usr/bin/env python3
"""
RUN_SAND_SLABS: Settle a Brick Snapshot and Count Safe Removals
===============================================================

Workflow:
1. Read a snapshot (`x,y,z~x,y,z` per line), or use the built-in example
2. Let every brick fall until it is blocked
3. Build the support graph
4. Count the bricks that are safe to remove, and the total removal cascade
5. Optionally write a per-brick CSV, a side view PNG and a 3D HTML view

Run with:
    python demos/run_sand_slabs.py
    python demos/run_sand_slabs.py --input snapshot.txt --out artifacts
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sandslab.analysis import analyze_text
from sandslab.config import CONFIG
from sandslab.report import summarize, stack_statistics
from sandslab.viz.projection import render_projection

EXAMPLE = """\
1,0,1~1,2,1
0,0,2~2,0,2
0,2,3~2,2,3
0,0,4~0,2,4
2,0,5~2,2,5
0,1,6~2,1,6
1,1,8~1,1,9
"""


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(
        description='Settle falling bricks and analyze which can be removed',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python demos/run_sand_slabs.py
  python demos/run_sand_slabs.py --input snapshot.txt --out artifacts --plot
        """
    )
    parser.add_argument('--input', type=str, default=None,
                        help='Snapshot file (default: built-in 7-brick example)')
    parser.add_argument('--out', type=str, default=None,
                        help='Directory for bricks.csv (and figures with --plot)')
    parser.add_argument('--plot', action='store_true',
                        help='Also write side_x.png, side_y.png and stack.html')
    parser.add_argument('--log-level', type=str, default=CONFIG.log_level,
                        help=f'Logging level (default: {CONFIG.log_level})')
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    text = Path(args.input).read_text() if args.input else EXAMPLE
    analysis = analyze_text(text)

    print_header("SETTLED STACK")
    if len(analysis.bricks) <= len(CONFIG.label_alphabet):
        print("\nSeen along x:")
        print(render_projection(analysis.bricks, axis="x"))
        print("\nSeen along y:")
        print(render_projection(analysis.bricks, axis="y"))
    else:
        print(f"\n{len(analysis.bricks)} bricks (too many to draw as text)")

    print_header("RESULTS")
    stats = stack_statistics(summarize(analysis))
    print(f"\n  Bricks:                {stats['n_bricks']}")
    print(f"  Stack height:          {stats['height']}")
    print(f"  Safely removable:      {analysis.removable_count}")
    print(f"  Sum of cascades:       {analysis.cascade_total}")
    print(f"  Largest cascade:       {stats['max_cascade']}")

    if args.out:
        os.makedirs(args.out, exist_ok=True)
        df = summarize(analysis)
        csv_path = os.path.join(args.out, 'bricks.csv')
        df.to_csv(csv_path, index=False)
        print(f"\nPer-brick table saved to: {csv_path}")

        if args.plot:
            import matplotlib
            matplotlib.use('Agg')
            import matplotlib.pyplot as plt
            from sandslab.viz.projection import plot_projection
            from sandslab.viz.viz3d import plot_stack_3d

            for axis in ('x', 'y'):
                ax = plot_projection(analysis.bricks, axis=axis)
                path = os.path.join(args.out, f'side_{axis}.png')
                ax.figure.savefig(path, dpi=150, bbox_inches='tight')
                plt.close(ax.figure)
                print(f"Side view saved to: {path}")

            plot_stack_3d(analysis.bricks, analysis.graph, color_by='cascade',
                          outpath=os.path.join(args.out, 'stack.html'), show=False)


if __name__ == "__main__":
    main()
