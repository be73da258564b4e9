"""Smoke tests: verify all public modules are importable."""


def test_import_root():
    from postboard.layout import __version__

    assert __version__


def test_import_config():
    from postboard.layout.config import BoardConfig

    assert BoardConfig


def test_import_geometry():
    from postboard.layout._geometry import boxes_intersect

    assert boxes_intersect


def test_import_placement():
    from postboard.layout.placement import find_free_position, locate_free_position

    assert find_free_position and locate_free_position


def test_import_avoidance():
    from postboard.layout.avoidance import avoid_collision, settle_drop

    assert avoid_collision and settle_drop


def test_import_redistribute():
    from postboard.layout.redistribute import redistribute

    assert redistribute


def test_import_engine():
    from postboard.layout import LayoutEngine

    assert LayoutEngine


def test_import_viewport():
    from postboard.layout.viewport import Minimap, Viewport

    assert Minimap and Viewport


def test_import_viz():
    from postboard.layout.viz import plot_board, render_minimap

    assert plot_board and render_minimap


def test_import_cli():
    from postboard.layout.cli import main

    assert main
