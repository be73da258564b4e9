"""Matplotlib / Pillow rendering of a board layout.

``plot_board`` returns a ``matplotlib.figure.Figure`` so the caller can save,
show, or embed it in a notebook. ``render_minimap`` returns a small
``PIL.Image`` thumbnail like the overview shown in the board's corner.

Typical usage::

    from postboard.layout.viz import plot_board, render_minimap

    fig = plot_board(items, cfg, show_margins=True)
    img = render_minimap(items, Minimap(cfg.canvas_w, cfg.canvas_h), viewport)
"""

from __future__ import annotations

from typing import Hashable, Iterable, Mapping, Sequence

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from PIL import Image, ImageColor, ImageDraw

from postboard.layout.config import BoardConfig
from postboard.layout.models import Item
from postboard.layout.redistribute import find_overlaps
from postboard.layout.viewport import Minimap, Viewport

# ── colour palette ──────────────────────────────────────────────────────────
NOTE_COLOR: str = "#fff59d"
OVERLAP_COLOR: str = "red"
HIGHLIGHT_COLOR: str = "deepskyblue"
MARGIN_COLOR: str = "grey"
INDICATOR_COLOR: tuple[int, int, int] = (59, 130, 246)
MINIMAP_BG: tuple[int, int, int] = (249, 250, 251)
DOT_SIZE: int = 4


# ── internal helpers ────────────────────────────────────────────────────────


def _prepare_axes(
    cfg: BoardConfig,
    ax: plt.Axes | None,
    figsize: tuple[float, float],
) -> tuple[Figure, plt.Axes]:
    """Return *(figure, axes)* framed on the board plane, y pointing down."""
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)
    else:
        fig = ax.get_figure()
    ax.set_xlim(0, cfg.canvas_w)
    ax.set_ylim(cfg.canvas_h, 0)
    ax.set_aspect("equal")
    ax.add_patch(
        mpatches.Rectangle(
            (0, 0), cfg.canvas_w, cfg.canvas_h, linewidth=1, edgecolor="black", facecolor="white"
        )
    )
    return fig, ax


def _draw_item(
    ax: plt.Axes, item: Item, cfg: BoardConfig, edgecolor: str, show_margins: bool
) -> None:
    color = item.extra.get("color", NOTE_COLOR)
    ax.add_patch(
        mpatches.Rectangle(
            (item.x, item.y),
            cfg.item_w,
            cfg.item_h,
            linewidth=2,
            edgecolor=edgecolor,
            facecolor=color,
        )
    )
    if show_margins and cfg.margin > 0:
        ax.add_patch(
            mpatches.Rectangle(
                (item.x, item.y),
                cfg.item_w + cfg.margin,
                cfg.item_h + cfg.margin,
                linewidth=1,
                linestyle="--",
                edgecolor=MARGIN_COLOR,
                facecolor="none",
            )
        )
    ax.text(item.x + 6, item.y + 18, str(item.id), fontsize=7, color="black")


def _dot_fill(color) -> tuple[int, ...]:
    """Resolve *color* to RGB, falling back to ``NOTE_COLOR`` when unparseable."""
    try:
        return ImageColor.getrgb(color)
    except (ValueError, AttributeError):
        return ImageColor.getrgb(NOTE_COLOR)


# ── public API ──────────────────────────────────────────────────────────────


def plot_board(
    items: Sequence[Item],
    cfg: BoardConfig | None = None,
    *,
    ax: plt.Axes | None = None,
    figsize: tuple[float, float] = (12, 9),
    show_margins: bool = False,
    highlight: Iterable[Hashable] | None = None,
    title: str | None = None,
) -> Figure:
    """Draw every note on the board plane.

    Notes involved in an overlap are outlined in red; ids listed in
    *highlight* (e.g. the ones a redistribution just moved) in blue.
    ``show_margins`` adds the dashed inflated bounds used for collisions.
    """
    cfg = cfg or BoardConfig()
    fig, ax = _prepare_axes(cfg, ax, figsize)

    overlapping = {i for pair in find_overlaps(items, cfg) for i in pair}
    highlighted = set(highlight or ())

    for item in items:
        if item.id in overlapping:
            edge = OVERLAP_COLOR
        elif item.id in highlighted:
            edge = HIGHLIGHT_COLOR
        else:
            edge = "black"
        _draw_item(ax, item, cfg, edge, show_margins)

    if title is None:
        title = f"{len(items)} notes, {len(overlapping)} overlapping"
    ax.set_title(title)
    fig.tight_layout()
    return fig


def render_minimap(
    items: Sequence[Item],
    minimap: Minimap,
    viewport: Viewport | None = None,
    colors: Mapping[Hashable, str] | None = None,
) -> Image.Image:
    """Rasterise the minimap: one small dot per note plus the viewport frame."""
    img = Image.new("RGB", (int(round(minimap.width)), int(round(minimap.height))), MINIMAP_BG)
    draw = ImageDraw.Draw(img)
    half = DOT_SIZE / 2

    for item in items:
        mx, my = minimap.to_minimap(item.x, item.y)
        color = (colors or {}).get(item.id) or item.extra.get("color", NOTE_COLOR)
        draw.rectangle(
            [mx - half, my - half, mx + half, my + half],
            fill=_dot_fill(color),
            outline=(0, 0, 0),
        )

    if viewport is not None:
        r = minimap.indicator(viewport)
        if r.width > 0 and r.height > 0:
            draw.rectangle([r.x, r.y, r.right, r.bottom], outline=INDICATOR_COLOR, width=2)

    return img
