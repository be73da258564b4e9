"""Collision handling for a note that is being dragged or dropped."""

from __future__ import annotations

from typing import Any, Hashable, Optional, Sequence

from postboard.layout._geometry import (
    boxes_intersect,
    clamp_position,
    first_intersect,
)
from postboard.layout.config import BoardConfig
from postboard.layout.models import Item, Position, Rect
from postboard.layout.placement import inflated_box, is_free, obstacle_boxes

# Compass probes used when settling a drop, in the order they are tried.
DROP_DIRECTIONS = [
    (1, 0),
    (0, 1),
    (-1, 0),
    (0, -1),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
]


def _others(moving_id: Hashable, items: Sequence[Item], strict: bool) -> list[Item]:
    others = [it for it in items if it.id != moving_id]
    if strict and len(others) == len(items):
        raise KeyError(moving_id)
    return others


def _push(
    cand: Rect, other: Rect, cfg: BoardConfig, horizontal: bool, forward: bool
) -> tuple[float, float]:
    """Candidate top-left pushed clear of *other* along one axis, plus margin."""
    x, y = cand.x, cand.y
    if horizontal:
        x = other.right + cfg.margin if forward else other.x - cand.width - cfg.margin
    else:
        y = other.bottom + cfg.margin if forward else other.y - cand.height - cfg.margin
    return clamp_position(x, y, cfg.item_w, cfg.item_h, cfg.canvas_w, cfg.canvas_h)


def avoid_collision(
    moving_id: Hashable,
    proposed: Any,
    items: Sequence[Item],
    cfg: Optional[BoardConfig] = None,
    strict: bool = False,
) -> Position:
    """Nudge a moved note off whatever it landed on.

    Each iteration takes the first other note whose inflated bounds overlap
    the candidate and pushes the candidate out along the axis with the larger
    centre-to-centre distance, away from that note's centre. A zero delta
    pushes left/up. When the plane edge swallows the push the opposite side
    of the same axis is used instead. Stops when clear or after
    ``cfg.max_avoid_iterations`` pushes and returns the last candidate, which
    may still overlap in a crowded neighbourhood. Notes other than the moving
    one are never displaced.

    Args:
        moving_id: Id of the note being moved; it is excluded from obstacles.
        proposed:  Where the note was dropped.
        items:     Every note on the board (the moving one may be included).
        strict:    Raise ``KeyError`` when *moving_id* is not among *items*.
    """
    cfg = cfg or BoardConfig()
    others = _others(moving_id, items, strict)
    pos = Position.coerce(proposed)
    x, y = clamp_position(pos.x, pos.y, cfg.item_w, cfg.item_h, cfg.canvas_w, cfg.canvas_h)

    boxes = obstacle_boxes(others, cfg)
    for _ in range(cfg.max_avoid_iterations):
        idx = first_intersect(inflated_box(x, y, cfg), boxes)
        if idx < 0:
            break
        cand = Rect.for_item(x, y, cfg.item_w, cfg.item_h, cfg.margin)
        other = Rect.for_item(others[idx].x, others[idx].y, cfg.item_w, cfg.item_h, cfg.margin)
        dx = cand.center[0] - other.center[0]
        dy = cand.center[1] - other.center[1]
        horizontal = abs(dx) > abs(dy)
        forward = (dx if horizontal else dy) > 0

        nx, ny = _push(cand, other, cfg, horizontal, forward)
        moved = Rect.for_item(nx, ny, cfg.item_w, cfg.item_h, cfg.margin)
        if boxes_intersect(moved.as_box(), other.as_box()):
            nx, ny = _push(cand, other, cfg, horizontal, not forward)
        x, y = nx, ny

    return Position(x, y)


def settle_drop(
    moving_id: Hashable,
    target: Any,
    items: Sequence[Item],
    cfg: Optional[BoardConfig] = None,
    strict: bool = False,
) -> Position:
    """Find a clear spot near a drop target by probing the compass directions.

    The target itself is kept when clear. Otherwise probes are tried at
    ``drop_step`` increments up to ``drop_radius`` in the eight directions of
    ``DROP_DIRECTIONS``; if none is clear the clamped target is returned.
    """
    cfg = cfg or BoardConfig()
    others = _others(moving_id, items, strict)
    pos = Position.coerce(target)
    boxes = obstacle_boxes(others, cfg)

    if is_free(pos.x, pos.y, cfg, boxes):
        return pos

    if cfg.drop_step > 0:
        n_steps = int(cfg.drop_radius // cfg.drop_step)
        for k in range(1, n_steps + 1):
            distance = k * cfg.drop_step
            for ux, uy in DROP_DIRECTIONS:
                x = pos.x + ux * distance
                y = pos.y + uy * distance
                if is_free(x, y, cfg, boxes):
                    return Position(x, y)

    x, y = clamp_position(pos.x, pos.y, cfg.item_w, cfg.item_h, cfg.canvas_w, cfg.canvas_h)
    return Position(x, y)
