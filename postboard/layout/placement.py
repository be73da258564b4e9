"""Free-position search for a new note.

The search runs in tiers and stops at the first one that yields a spot:

  1. empty board      → centre of the plane
  2. spiral search    → outward spirals from the requested point, then from
                        the quadrant centres and the plane centre
  3. grid scan        → row-major sweep of the whole plane
  4. random attempts  → bounded number of random grid-snapped spots
  5. final fallback   → any random in-bounds spot, overlap accepted

Tiers 1–3 are deterministic; only 4–5 draw from the random source, so a
seeded ``random.Random`` makes every call reproducible.
"""

from __future__ import annotations

import math
import random
from typing import Any, Iterator, Optional, Sequence, Tuple

import numpy as np

from postboard.layout._geometry import (
    any_intersect,
    as_box_array,
    clamp_position,
    fits_plane,
    snap_to_grid,
)
from postboard.layout.config import BoardConfig
from postboard.layout.models import Placement, Position, Rect

DEFAULT_START = Position(100, 100)


def inflated_box(x: float, y: float, cfg: BoardConfig) -> Tuple[float, float, float, float]:
    return Rect.for_item(x, y, cfg.item_w, cfg.item_h, cfg.margin).as_box()


def obstacle_boxes(existing: Sequence[Any], cfg: BoardConfig) -> np.ndarray:
    """``(n, 4)`` array of inflated bounds for positions / items / (x, y) pairs."""
    boxes = []
    for obj in existing:
        p = Position.coerce(obj)
        boxes.append(inflated_box(p.x, p.y, cfg))
    return as_box_array(boxes)


def is_free(x: float, y: float, cfg: BoardConfig, obstacles: np.ndarray) -> bool:
    """True when a note at (x, y) fits the plane and clears every obstacle."""
    return fits_plane(x, y, cfg.item_w, cfg.item_h, cfg.canvas_w, cfg.canvas_h) and not any_intersect(
        inflated_box(x, y, cfg), obstacles
    )


def _snap_down(value: float, grid: float) -> float:
    if grid <= 0:
        return value
    return math.floor(value / grid) * grid


def seed_points(start: Position, cfg: BoardConfig) -> list[Position]:
    """Spiral seeds: the requested point, the quadrant centres, the plane centre."""
    w, h = cfg.canvas_w, cfg.canvas_h
    half_w, half_h = cfg.item_w / 2, cfg.item_h / 2
    centres = [
        (w / 4, h / 4),
        (3 * w / 4, h / 4),
        (w / 4, 3 * h / 4),
        (3 * w / 4, 3 * h / 4),
        (w / 2, h / 2),
    ]
    return [start] + [Position(cx - half_w, cy - half_h) for cx, cy in centres]


def spiral_candidates(seed: Position, cfg: BoardConfig) -> Iterator[Tuple[float, float]]:
    """Grid-snapped points along an outward spiral around *seed*."""
    radius = 0.0
    angle = 0.0
    step = cfg.spiral_radius_step
    max_radius = cfg.spiral_max_radius
    while radius <= max_radius:
        x = seed.x + radius * math.cos(angle)
        y = seed.y + radius * math.sin(angle)
        yield snap_to_grid(x, cfg.grid_size), snap_to_grid(y, cfg.grid_size)
        angle += cfg.spiral_angle_step
        radius += step


def grid_candidates(cfg: BoardConfig) -> Iterator[Tuple[float, float]]:
    """Row-major cells spaced one note plus margin apart, rounded up to the grid."""
    step_x = cfg.item_w + cfg.margin
    step_y = cfg.item_h + cfg.margin
    if cfg.grid_size > 0:
        step_x = math.ceil(step_x / cfg.grid_size) * cfg.grid_size
        step_y = math.ceil(step_y / cfg.grid_size) * cfg.grid_size
    y = 0.0
    while y + cfg.item_h <= cfg.canvas_h:
        x = 0.0
        while x + cfg.item_w <= cfg.canvas_w:
            yield x, y
            x += step_x
        y += step_y


def _spiral_search(start: Position, cfg: BoardConfig, obstacles: np.ndarray) -> Optional[Position]:
    for seed in seed_points(start, cfg):
        for x, y in spiral_candidates(seed, cfg):
            if is_free(x, y, cfg, obstacles):
                return Position(x, y)
    return None


def _grid_search(cfg: BoardConfig, obstacles: np.ndarray) -> Optional[Position]:
    for x, y in grid_candidates(cfg):
        if is_free(x, y, cfg, obstacles):
            return Position(x, y)
    return None


def _random_search(cfg: BoardConfig, obstacles: np.ndarray, rng) -> Optional[Position]:
    max_x = max(0.0, cfg.canvas_w - cfg.item_w)
    max_y = max(0.0, cfg.canvas_h - cfg.item_h)
    for _ in range(cfg.random_attempts):
        x = _snap_down(rng.uniform(0, max_x), cfg.grid_size)
        y = _snap_down(rng.uniform(0, max_y), cfg.grid_size)
        if is_free(x, y, cfg, obstacles):
            return Position(x, y)
    return None


def locate_free_position(
    existing: Sequence[Any],
    cfg: Optional[BoardConfig] = None,
    start: Optional[Any] = None,
    rng: Optional[random.Random] = None,
) -> Placement:
    """Find a spot for a new note and report which search tier produced it.

    Args:
        existing: Positions of the notes already on the board. Anything
                  ``Position.coerce`` accepts; ids are ignored.
        cfg:      Board geometry and search parameters.
        start:    Preferred top-left position (e.g. where the user clicked).
        rng:      Random source for the last two tiers. Defaults to the
                  ``random`` module.
    """
    cfg = cfg or BoardConfig()
    rng = rng if rng is not None else random
    start_pos = Position.coerce(start) if start is not None else DEFAULT_START

    if len(existing) == 0:
        x, y = clamp_position(
            cfg.canvas_w / 2 - cfg.item_w / 2,
            cfg.canvas_h / 2 - cfg.item_h / 2,
            cfg.item_w,
            cfg.item_h,
            cfg.canvas_w,
            cfg.canvas_h,
        )
        return Placement(Position(x, y), "empty")

    obstacles = obstacle_boxes(existing, cfg)

    pos = _spiral_search(start_pos, cfg, obstacles)
    if pos is not None:
        return Placement(pos, "spiral")

    pos = _grid_search(cfg, obstacles)
    if pos is not None:
        return Placement(pos, "grid")

    pos = _random_search(cfg, obstacles, rng)
    if pos is not None:
        return Placement(pos, "random")

    # Board is saturated: hand back something in bounds and let it overlap.
    x = rng.uniform(0, max(0.0, cfg.canvas_w - cfg.item_w))
    y = rng.uniform(0, max(0.0, cfg.canvas_h - cfg.item_h))
    return Placement(Position(x, y), "fallback", degraded=not is_free(x, y, cfg, obstacles))


def find_free_position(
    existing: Sequence[Any],
    cfg: Optional[BoardConfig] = None,
    start: Optional[Any] = None,
    rng: Optional[random.Random] = None,
) -> Position:
    """Return a position for a new note; see ``locate_free_position``."""
    return locate_free_position(existing, cfg, start=start, rng=rng).position
