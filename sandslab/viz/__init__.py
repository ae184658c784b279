# sandslab/viz - Visualization Tools
"""
VIZ: Side Views and 3D Views of a Brick Stack
=============================================

- projection: text and matplotlib side views along x or y
- viz3d: interactive 3D cuboids (Plotly)
"""

from .projection import render_projection, plot_projection
from .viz3d import create_stack_figure, plot_stack_3d

__all__ = ['render_projection', 'plot_projection', 'create_stack_figure', 'plot_stack_3d']
