"""Tests for postboard.layout.viz — board plots and minimap thumbnails."""

import matplotlib
import matplotlib.pyplot as plt
import pytest
from PIL import Image

from postboard.layout.config import BoardConfig
from postboard.layout.models import Item
from postboard.layout.viewport import Minimap, Viewport
from postboard.layout.viz.board import INDICATOR_COLOR, MINIMAP_BG, plot_board, render_minimap

# Use non-interactive backend for CI
matplotlib.use("Agg")


# ── fixtures ────────────────────────────────────────────────────────────────


@pytest.fixture()
def cfg() -> BoardConfig:
    return BoardConfig()


@pytest.fixture()
def overlapping_items() -> list[Item]:
    return [Item("a", 100, 100), Item("b", 150, 120)]


@pytest.fixture()
def clean_items() -> list[Item]:
    return [Item("a", 0, 0, {"color": "#bfdbfe"}), Item("b", 2000, 1500)]


# ── plot_board ──────────────────────────────────────────────────────────────


class TestPlotBoard:
    def test_returns_figure(self, clean_items, cfg) -> None:
        fig = plot_board(clean_items, cfg)
        assert isinstance(fig, matplotlib.figure.Figure)
        plt.close(fig)

    def test_auto_title_counts_overlaps(self, overlapping_items, cfg) -> None:
        fig = plot_board(overlapping_items, cfg)
        assert fig.axes[0].get_title() == "2 notes, 2 overlapping"
        plt.close(fig)

    def test_custom_title(self, clean_items, cfg) -> None:
        fig = plot_board(clean_items, cfg, title="Board")
        assert fig.axes[0].get_title() == "Board"
        plt.close(fig)

    def test_margins_add_patches(self, clean_items, cfg) -> None:
        plain = plot_board(clean_items, cfg)
        framed = plot_board(clean_items, cfg, show_margins=True)
        # plane + one patch per note, plus one dashed outline per note
        assert len(plain.axes[0].patches) == 3
        assert len(framed.axes[0].patches) == 5
        plt.close(plain)
        plt.close(framed)

    def test_with_existing_axes(self, clean_items, cfg) -> None:
        fig_ext, ax_ext = plt.subplots()
        fig = plot_board(clean_items, cfg, ax=ax_ext, highlight=["a"])
        assert fig is fig_ext
        plt.close(fig)

    def test_y_axis_points_down(self, clean_items, cfg) -> None:
        fig = plot_board(clean_items, cfg)
        bottom, top = fig.axes[0].get_ylim()
        assert bottom > top
        plt.close(fig)

    def test_empty_board(self, cfg) -> None:
        fig = plot_board([], cfg)
        assert fig.axes[0].get_title() == "0 notes, 0 overlapping"
        plt.close(fig)


# ── render_minimap ──────────────────────────────────────────────────────────


class TestRenderMinimap:
    def test_size(self, clean_items) -> None:
        img = render_minimap(clean_items, Minimap())
        assert isinstance(img, Image.Image)
        assert img.size == (200, 150)

    def test_note_dot_uses_item_colour(self) -> None:
        img = render_minimap([Item("a", 2000, 1500, {"color": "#ff0000"})], Minimap())
        assert img.getpixel((100, 75)) == (255, 0, 0)

    def test_unparseable_colour_falls_back_to_note_colour(self) -> None:
        img = render_minimap([Item("a", 2000, 1500, {"color": "not-a-colour"})], Minimap())
        assert img.getpixel((100, 75)) == (255, 245, 157)

    def test_colour_override(self) -> None:
        img = render_minimap([Item("a", 2000, 1500)], Minimap(), colors={"a": "#00ff00"})
        assert img.getpixel((100, 75)) == (0, 255, 0)

    def test_background_where_empty(self) -> None:
        img = render_minimap([], Minimap())
        assert img.getpixel((50, 50)) == MINIMAP_BG

    def test_viewport_indicator(self) -> None:
        img = render_minimap([], Minimap(), Viewport(800, 600))
        assert img.getpixel((0, 0)) == INDICATOR_COLOR
        assert img.getpixel((20, 15)) == MINIMAP_BG
