"""Visualisation helpers for postboard-layout.

Quick access::

    from postboard.layout.viz import plot_board, render_minimap
"""

from postboard.layout.viz.board import plot_board, render_minimap

__all__ = [
    "plot_board",
    "render_minimap",
]
