"""LayoutEngine: one object bundling board config and a random source."""

from __future__ import annotations

import random
from typing import Any, Hashable, Optional, Sequence

from postboard.layout._geometry import rects_overlap
from postboard.layout.avoidance import avoid_collision, settle_drop
from postboard.layout.config import BoardConfig
from postboard.layout.models import Item, Placement, Position, Rect
from postboard.layout.placement import locate_free_position
from postboard.layout.redistribute import find_overlaps, has_overlaps, redistribute


class LayoutEngine:
    """Stateless note-layout operations over a fixed board geometry.

    The engine never stores notes; every call works on the snapshot it is
    given and returns new positions for the caller to persist.

    >>> engine = LayoutEngine(seed=7)
    >>> spot   = engine.find_free_position(existing, start=(640, 320))
    >>> drop   = engine.avoid_collision("note-3", (410, 95), items)
    >>> items  = engine.redistribute(items)

    Pass ``rng`` (or ``seed``) to make the random fallback tiers repeatable.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = (config or BoardConfig()).validate()
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self.rng = rng if rng is not None else random.Random(seed)

    def overlaps(self, a: Rect, b: Rect) -> bool:
        return rects_overlap(a, b)

    def bounds(self, item: Any) -> Rect:
        """Inflated bounds of a note under this engine's margin."""
        p = Position.coerce(item)
        cfg = self.config
        return Rect.for_item(p.x, p.y, cfg.item_w, cfg.item_h, cfg.margin)

    def place(self, existing: Sequence[Any], start: Optional[Any] = None) -> Placement:
        return locate_free_position(existing, self.config, start=start, rng=self.rng)

    def find_free_position(self, existing: Sequence[Any], start: Optional[Any] = None) -> Position:
        return self.place(existing, start=start).position

    def avoid_collision(
        self, moving_id: Hashable, proposed: Any, items: Sequence[Item], strict: bool = False
    ) -> Position:
        return avoid_collision(moving_id, proposed, items, self.config, strict=strict)

    def settle_drop(
        self, moving_id: Hashable, target: Any, items: Sequence[Item], strict: bool = False
    ) -> Position:
        return settle_drop(moving_id, target, items, self.config, strict=strict)

    def find_overlaps(self, items: Sequence[Item]) -> list[tuple[Hashable, Hashable]]:
        return find_overlaps(items, self.config)

    def has_overlaps(self, items: Sequence[Item]) -> bool:
        return has_overlaps(items, self.config)

    def redistribute(self, items: Sequence[Item]) -> list[Item]:
        return redistribute(items, self.config, rng=self.rng)
