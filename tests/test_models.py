"""Tests for postboard.layout.models — Position, Item, Rect, Placement."""

import pytest

from postboard.layout.models import Item, Placement, Position, Rect


# ── Position ─────────────────────────────────────────────────────────────────


class TestPosition:
    def test_coerce_tuple(self):
        assert Position.coerce((3, 4)) == Position(3.0, 4.0)

    def test_coerce_item(self):
        assert Position.coerce(Item("a", 5, 6)) == Position(5, 6)

    def test_coerce_dict(self):
        assert Position.coerce({"x": "7", "y": 8}) == Position(7.0, 8.0)

    def test_coerce_position_is_identity(self):
        p = Position(1, 2)
        assert Position.coerce(p) is p

    def test_to_dict(self):
        assert Position(1, 2).to_dict() == {"x": 1, "y": 2}


# ── Item ─────────────────────────────────────────────────────────────────────


class TestItem:
    def test_from_dict_keeps_extra(self):
        it = Item.from_dict({"id": "n1", "x": 10, "y": 20, "color": "#fff"})
        assert it.id == "n1"
        assert (it.x, it.y) == (10.0, 20.0)
        assert it.extra == {"color": "#fff"}

    def test_to_dict_roundtrip(self):
        d = {"id": "n1", "x": 10.0, "y": 20.0, "color": "#fff"}
        assert Item.from_dict(d).to_dict() == d

    def test_moved_to_copies_extra(self):
        it = Item("n1", 0, 0, {"color": "#fff"})
        moved = it.moved_to(Position(50, 60))
        assert moved.position == Position(50, 60)
        assert moved.extra == it.extra
        assert moved.extra is not it.extra
        assert (it.x, it.y) == (0, 0)

    def test_equality_ignores_extra(self):
        assert Item("a", 1, 2, {"color": "red"}) == Item("a", 1, 2)


# ── Rect ─────────────────────────────────────────────────────────────────────


class TestRect:
    def test_for_item_inflates_right_and_down(self):
        r = Rect.for_item(10, 20, 200, 150, margin=30)
        assert (r.x, r.y, r.width, r.height) == (10, 20, 230, 180)

    def test_edges_and_center(self):
        r = Rect(0, 0, 200, 100)
        assert r.right == 200
        assert r.bottom == 100
        assert r.center == (100.0, 50.0)

    def test_as_box(self):
        assert Rect(1, 2, 3, 4).as_box() == (1, 2, 4, 6)


# ── Placement ────────────────────────────────────────────────────────────────


class TestPlacement:
    def test_accessors(self):
        p = Placement(Position(5, 6), "spiral")
        assert (p.x, p.y) == (5, 6)
        assert p.degraded is False

    def test_frozen(self):
        p = Placement(Position(5, 6), "grid")
        with pytest.raises(AttributeError):
            p.tier = "random"
