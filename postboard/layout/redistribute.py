"""Batch overlap detection and redistribution of a whole board."""

from __future__ import annotations

import random
from typing import Hashable, Optional, Sequence

import numpy as np

from postboard.layout._geometry import any_intersect, intersect_matrix
from postboard.layout.config import BoardConfig
from postboard.layout.models import Item
from postboard.layout.placement import find_free_position, inflated_box, obstacle_boxes


def _check_unique(items: Sequence[Item]) -> None:
    seen = set()
    for it in items:
        if it.id in seen:
            raise ValueError(f"duplicate item id: {it.id!r}")
        seen.add(it.id)


def overlap_pairs(items: Sequence[Item], cfg: BoardConfig) -> list[tuple[int, int]]:
    """Index pairs ``(i, j)``, ``i < j``, of overlapping notes in row-major order."""
    if len(items) < 2:
        return []
    mat = intersect_matrix(obstacle_boxes(items, cfg))
    # argwhere walks the upper triangle row by row
    return [(int(i), int(j)) for i, j in np.argwhere(np.triu(mat, k=1))]


def find_overlaps(
    items: Sequence[Item], cfg: Optional[BoardConfig] = None
) -> list[tuple[Hashable, Hashable]]:
    """Id pairs of notes whose inflated bounds overlap."""
    cfg = cfg or BoardConfig()
    return [(items[i].id, items[j].id) for i, j in overlap_pairs(items, cfg)]


def redistribute(
    items: Sequence[Item],
    cfg: Optional[BoardConfig] = None,
    rng: Optional[random.Random] = None,
) -> list[Item]:
    """Move overlapping notes apart so no two inflated bounds intersect.

    Notes are visited in the order they first appear in the overlap pairs.
    At its turn a note that still collides with any other note (using the
    positions already updated this pass) is relocated with the free-position
    search, seeded at its own position so it moves as little as possible.
    A note that is already clear by then, or was never part of an overlap,
    keeps its exact position. Returns new Item objects in input order.
    """
    cfg = cfg or BoardConfig()
    _check_unique(items)
    out = [Item(it.id, it.x, it.y, dict(it.extra)) for it in items]

    order: list[int] = []
    queued = set()
    for i, j in overlap_pairs(out, cfg):
        for k in (i, j):
            if k not in queued:
                queued.add(k)
                order.append(k)

    for k in order:
        others = out[:k] + out[k + 1 :]
        if not any_intersect(inflated_box(out[k].x, out[k].y, cfg), obstacle_boxes(others, cfg)):
            continue
        pos = find_free_position(others, cfg, start=out[k].position, rng=rng)
        out[k] = out[k].moved_to(pos)

    return out


def has_overlaps(items: Sequence[Item], cfg: Optional[BoardConfig] = None) -> bool:
    cfg = cfg or BoardConfig()
    return bool(overlap_pairs(items, cfg))
