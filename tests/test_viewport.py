"""Tests for postboard.layout.viewport — pan/zoom and minimap mapping."""

import pytest

from postboard.layout.models import Rect
from postboard.layout.viewport import Minimap, Viewport


@pytest.fixture()
def viewport() -> Viewport:
    return Viewport(stage_w=800, stage_h=600)


class TestViewport:
    def test_screen_to_canvas(self):
        vp = Viewport(800, 600, x=-100, y=-50, scale=2)
        assert vp.screen_to_canvas(100, 150) == (100, 100)
        assert vp.canvas_to_screen(100, 100) == (100, 150)

    def test_zoom_buttons(self, viewport):
        assert viewport.zoom_in() == pytest.approx(1.2)
        assert viewport.zoom_out() == pytest.approx(1.0)

    def test_zoom_clamped(self):
        vp = Viewport(800, 600, scale=2.9)
        assert vp.zoom_in() == 3.0
        vp = Viewport(800, 600, scale=0.1)
        assert vp.zoom_out() == 0.1

    def test_wheel_zoom_keeps_pointer_anchor(self, viewport):
        before = viewport.screen_to_canvas(400, 300)
        viewport.zoom_at(400, 300, wheel_delta=-120)
        assert viewport.scale == pytest.approx(1.1)
        after = viewport.screen_to_canvas(400, 300)
        assert after == pytest.approx(before)

    def test_wheel_down_zooms_out(self, viewport):
        viewport.zoom_at(0, 0, wheel_delta=120)
        assert viewport.scale == pytest.approx(1 / 1.1)

    def test_pan_clamped(self, viewport):
        assert viewport.pan_to(100, 100) == (0, 0)
        assert viewport.pan_to(-5000, -5000) == (-3200, -2400)
        assert viewport.pan_to(-1000, -700) == (-1000, -700)

    def test_reset(self):
        vp = Viewport(800, 600, x=-300, y=-200, scale=2.5)
        vp.reset()
        assert (vp.x, vp.y, vp.scale) == (0, 0, 1)

    def test_visible_region(self):
        vp = Viewport(800, 600, x=-400, y=-200, scale=2)
        assert vp.visible_origin == (200, 100)
        assert vp.visible_size == (400, 300)


class TestMinimap:
    def test_scales(self):
        mm = Minimap()
        assert mm.scale_x == pytest.approx(0.05)
        assert mm.scale_y == pytest.approx(0.05)

    def test_round_trip_point(self):
        mm = Minimap()
        assert mm.to_minimap(2000, 1500) == pytest.approx((100, 75))
        assert mm.to_canvas(100, 75) == pytest.approx((2000, 1500))

    def test_indicator_at_origin(self, viewport):
        r = Minimap().indicator(viewport)
        assert (r.x, r.y) == (0, 0)
        assert r.width == pytest.approx(40)
        assert r.height == pytest.approx(30)

    def test_indicator_clipped_at_far_edge(self):
        vp = Viewport(800, 600, x=-3800, y=0)
        r = Minimap().indicator(vp)
        assert r.x == pytest.approx(190)
        assert r.width == pytest.approx(10)

    def test_indicator_is_rect(self, viewport):
        assert isinstance(Minimap().indicator(viewport), Rect)

    def test_navigate_centres_view(self, viewport):
        mm = Minimap()
        assert mm.navigate(viewport, 100, 75) == pytest.approx((-1600, -1200))
        assert viewport.visible_origin == pytest.approx((1600, 1200))

    def test_navigate_corner_clamped(self, viewport):
        assert Minimap().navigate(viewport, 0, 0) == (0, 0)
