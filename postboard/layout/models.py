"""Core data structures for the layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    @classmethod
    def coerce(cls, obj: Any) -> Position:
        """Accept a Position, an Item, a ``{"x", "y"}`` dict or an ``(x, y)`` pair."""
        if isinstance(obj, Position):
            return obj
        if isinstance(obj, Item):
            return cls(obj.x, obj.y)
        if isinstance(obj, dict):
            return cls(float(obj["x"]), float(obj["y"]))
        x, y = obj
        return cls(float(x), float(y))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass
class Item:
    """A note on the board: an opaque id plus its top-left position.

    ``extra`` carries caller fields (colour, content, ...) the engine never
    reads; they survive load/save and redistribution untouched.
    """

    id: Hashable
    x: float
    y: float
    extra: dict = field(default_factory=dict, compare=False)

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def moved_to(self, pos: Position) -> Item:
        return Item(self.id, pos.x, pos.y, dict(self.extra))

    @classmethod
    def from_dict(cls, d: dict) -> Item:
        extra = {k: v for k, v in d.items() if k not in ("id", "x", "y")}
        return cls(id=d["id"], x=float(d["x"]), y=float(d["y"]), extra=extra)

    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y, **self.extra}


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def for_item(
        cls, x: float, y: float, width: float, height: float, margin: float = 0
    ) -> Rect:
        """Inflated bounds of an item: its rectangle grown by *margin* right and down."""
        return cls(x, y, width + margin, height + margin)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def as_box(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.right, self.bottom)


PLACEMENT_TIERS = ("empty", "spiral", "grid", "random", "fallback")


@dataclass(frozen=True)
class Placement:
    """Result of a free-position search.

    ``tier`` names the search stage that produced the position. ``degraded``
    is set only when the terminal fallback had to accept an overlapping spot.
    """

    position: Position
    tier: str
    degraded: bool = False

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y
