"""Pure rectangle geometry shared across the layout modules.

Boxes are corner tuples ``(x0, y0, x1, y1)``; touching edges never count as
an intersection.
"""

from typing import Sequence, Tuple

import numpy as np

from postboard.layout.models import Rect

Box = Tuple[float, float, float, float]


def boxes_intersect(a: Box, b: Box) -> bool:
    """Return True if axis-aligned boxes *a* and *b* overlap at all."""
    return not (a[2] <= b[0] or b[2] <= a[0] or a[3] <= b[1] or b[3] <= a[1])


def rects_overlap(a: Rect, b: Rect) -> bool:
    return boxes_intersect(a.as_box(), b.as_box())


def as_box_array(boxes: Sequence[Box]) -> np.ndarray:
    if len(boxes) == 0:
        return np.empty((0, 4), dtype=float)
    return np.asarray(boxes, dtype=float).reshape(-1, 4)


def any_intersect(box: Box, boxes: np.ndarray) -> bool:
    """Return True if *box* overlaps any row of the ``(n, 4)`` array *boxes*."""
    if len(boxes) == 0:
        return False
    separated = (
        (box[2] <= boxes[:, 0])
        | (boxes[:, 2] <= box[0])
        | (box[3] <= boxes[:, 1])
        | (boxes[:, 3] <= box[1])
    )
    return bool(np.any(~separated))


def first_intersect(box: Box, boxes: np.ndarray) -> int:
    """Index of the first row of *boxes* overlapping *box*, or -1."""
    if len(boxes) == 0:
        return -1
    separated = (
        (box[2] <= boxes[:, 0])
        | (boxes[:, 2] <= box[0])
        | (box[3] <= boxes[:, 1])
        | (boxes[:, 3] <= box[1])
    )
    hits = np.flatnonzero(~separated)
    return int(hits[0]) if hits.size else -1


def intersect_matrix(boxes: np.ndarray) -> np.ndarray:
    """Symmetric ``(n, n)`` overlap matrix; the diagonal is always False."""
    x0, y0, x1, y1 = boxes[:, 0], boxes[:, 1], boxes[:, 2], boxes[:, 3]
    separated = (
        (x1[:, None] <= x0[None, :])
        | (x1[None, :] <= x0[:, None])
        | (y1[:, None] <= y0[None, :])
        | (y1[None, :] <= y0[:, None])
    )
    mat = ~separated
    np.fill_diagonal(mat, False)
    return mat


def snap_to_grid(value: float, grid: float) -> float:
    if grid <= 0:
        return value
    return round(value / grid) * grid


def fits_plane(x: float, y: float, w: float, h: float, plane_w: float, plane_h: float) -> bool:
    """True when the ``w``×``h`` rectangle at (x, y) lies fully inside the plane."""
    return x >= 0 and y >= 0 and x + w <= plane_w and y + h <= plane_h


def clamp_position(
    x: float, y: float, w: float, h: float, plane_w: float, plane_h: float
) -> Tuple[float, float]:
    """Clamp a top-left position into ``[0, plane - item]`` on both axes."""
    max_x = max(0.0, plane_w - w)
    max_y = max(0.0, plane_h - h)
    return max(0.0, min(x, max_x)), max(0.0, min(y, max_y))
