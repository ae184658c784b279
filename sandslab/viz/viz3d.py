# sandslab/viz/viz3d.py
"""
3D VISUALIZATION: Interactive Brick Stack Viewer
================================================

PURPOSE:
--------
Draw a (settled) brick stack as solid cuboids using Plotly, so the stack can
be rotated and inspected. Bricks can be colored:
- 'none':    one color per brick id
- 'cascade': by how many other bricks fall if that brick is removed
- 'support': critical bricks (sole support of something) in red, the rest grey
"""

import os
from typing import Dict, Iterable, Literal, Optional

import plotly.graph_objects as go

from ..kernel.support import SupportGraph
from ..model import Brick, brick_label
from ..queries import cascade_counts, critical_bricks

# Triangles of a unit cuboid over vertices ordered
# (x0,y0,z0) (x1,y0,z0) (x1,y1,z0) (x0,y1,z0) then the same at z1
_CUBOID_I = [0, 0, 4, 4, 0, 0, 1, 1, 2, 2, 3, 3]
_CUBOID_J = [1, 2, 5, 6, 1, 5, 2, 6, 3, 7, 0, 4]
_CUBOID_K = [2, 3, 6, 7, 5, 4, 6, 5, 7, 6, 4, 7]

_PALETTE = [
    '#1f77b4', '#ff7f0e', '#2ca02c', '#d62728', '#9467bd',
    '#8c564b', '#e377c2', '#7f7f7f', '#bcbd22', '#17becf',
]


def cuboid_vertices(brick: Brick):
    """Corner coordinates (xs, ys, zs) of the solid occupied by a brick."""
    x0, y0, z0 = brick.start
    x1, y1, z1 = (c + 1 for c in brick.end)
    xs = [x0, x1, x1, x0, x0, x1, x1, x0]
    ys = [y0, y0, y1, y1, y0, y0, y1, y1]
    zs = [z0, z0, z0, z0, z1, z1, z1, z1]
    return xs, ys, zs


def create_stack_figure(
    bricks: Iterable[Brick],
    graph: Optional[SupportGraph] = None,
    title: str = "Settled Brick Stack",
    color_by: Literal['none', 'cascade', 'support'] = 'none',
) -> go.Figure:
    """
    Create a Plotly figure with one Mesh3d cuboid per brick.

    Parameters:
    -----------
    bricks : Iterable[Brick]
        Bricks to draw
    graph : Optional[SupportGraph]
        Required for color_by='cascade' or 'support'
    title : str
        Plot title
    color_by : str
        'none', 'cascade' or 'support'

    Returns:
    --------
    go.Figure
    """
    bricks = list(bricks)
    if color_by != 'none' and graph is None:
        raise ValueError(f"color_by={color_by!r} needs a support graph")

    cascades: Dict[int, int] = cascade_counts(graph) if color_by == 'cascade' else {}
    critical = critical_bricks(graph) if color_by == 'support' else set()
    max_cascade = max(cascades.values(), default=0)

    fig = go.Figure()
    for brick in bricks:
        xs, ys, zs = cuboid_vertices(brick)
        hover = f"{brick_label(brick.id)} (brick {brick.id}): {brick}"

        if color_by == 'cascade':
            n = cascades.get(brick.id, 0)
            shade = int(255 * n / max_cascade) if max_cascade > 0 else 0
            color = f'rgb({shade}, 60, {255 - shade})'
            hover += f"<br>cascade: {n}"
        elif color_by == 'support':
            color = 'crimson' if brick.id in critical else 'lightgray'
            hover += "<br>critical" if brick.id in critical else "<br>removable"
        else:
            color = _PALETTE[brick.id % len(_PALETTE)]

        fig.add_trace(go.Mesh3d(
            x=xs, y=ys, z=zs,
            i=_CUBOID_I, j=_CUBOID_J, k=_CUBOID_K,
            color=color,
            opacity=1.0,
            flatshading=True,
            name=f'Brick {brick.id}',
            hovertext=hover,
            hoverinfo='text',
            showlegend=False,
        ))

    top = max((b.top for b in bricks), default=0) + 1
    fig.update_layout(
        title=dict(text=title, font=dict(size=16)),
        scene=dict(
            xaxis=dict(title='X'),
            yaxis=dict(title='Y'),
            zaxis=dict(title='Z', range=[0, top]),
            aspectmode='data',
            camera=dict(eye=dict(x=1.5, y=1.5, z=1.0)),
        ),
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig


def plot_stack_3d(
    bricks: Iterable[Brick],
    graph: Optional[SupportGraph] = None,
    outpath: Optional[str] = None,
    show: bool = True,
    **kwargs
) -> go.Figure:
    """
    Create and optionally display/save a 3D stack visualization.

    Example:
    --------
    >>> fig = plot_stack_3d(result.bricks, graph, color_by='cascade',
    ...                     outpath="artifacts/stack.html", show=False)
    """
    fig = create_stack_figure(bricks, graph=graph, **kwargs)

    if outpath:
        os.makedirs(os.path.dirname(outpath) or '.', exist_ok=True)
        fig.write_html(outpath)
        print(f"3D visualization saved to: {outpath}")

    if show:
        fig.show()

    return fig
