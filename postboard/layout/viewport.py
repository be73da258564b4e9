"""Board viewport (pan / zoom) and minimap coordinate mapping.

Screen space is the stage the board is drawn on; canvas space is the board
plane; minimap space is the small overview in the corner. The stage offset
``(x, y)`` is where the canvas origin lands on screen, so it is zero or
negative once the user has scrolled.
"""

from __future__ import annotations

from dataclasses import dataclass

from postboard.layout.models import Rect

ZOOM_STEP = 1.2  # buttons
WHEEL_STEP = 1.1  # mouse wheel


@dataclass
class Viewport:
    stage_w: float
    stage_h: float
    canvas_w: float = 4000
    canvas_h: float = 3000
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    min_scale: float = 0.1
    max_scale: float = 3.0

    def _clamp_scale(self, scale: float) -> float:
        return max(self.min_scale, min(scale, self.max_scale))

    def screen_to_canvas(self, px: float, py: float) -> tuple[float, float]:
        return ((px - self.x) / self.scale, (py - self.y) / self.scale)

    def canvas_to_screen(self, cx: float, cy: float) -> tuple[float, float]:
        return (cx * self.scale + self.x, cy * self.scale + self.y)

    @property
    def visible_origin(self) -> tuple[float, float]:
        """Canvas coordinates of the top-left visible point."""
        return (-self.x / self.scale, -self.y / self.scale)

    @property
    def visible_size(self) -> tuple[float, float]:
        return (self.stage_w / self.scale, self.stage_h / self.scale)

    def zoom_in(self) -> float:
        self.scale = self._clamp_scale(self.scale * ZOOM_STEP)
        return self.scale

    def zoom_out(self) -> float:
        self.scale = self._clamp_scale(self.scale / ZOOM_STEP)
        return self.scale

    def zoom_at(self, px: float, py: float, wheel_delta: float) -> float:
        """Wheel zoom that keeps the canvas point under the pointer fixed."""
        old = self.scale
        new = self._clamp_scale(old * WHEEL_STEP if wheel_delta < 0 else old / WHEEL_STEP)
        anchor_x = (px - self.x) / old
        anchor_y = (py - self.y) / old
        self.scale = new
        self.x = px - anchor_x * new
        self.y = py - anchor_y * new
        return self.scale

    def reset(self) -> None:
        self.scale = 1.0
        self.x = 0.0
        self.y = 0.0

    def pan_to(self, x: float, y: float) -> tuple[float, float]:
        """Move the stage offset, keeping the canvas edge from scrolling into view."""
        self.x = max(min(x, 0.0), self.stage_w - self.canvas_w * self.scale)
        self.y = max(min(y, 0.0), self.stage_h - self.canvas_h * self.scale)
        return (self.x, self.y)


@dataclass
class Minimap:
    canvas_w: float = 4000
    canvas_h: float = 3000
    width: float = 200
    height: float = 150

    @property
    def scale_x(self) -> float:
        return self.width / self.canvas_w

    @property
    def scale_y(self) -> float:
        return self.height / self.canvas_h

    def to_minimap(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.scale_x, y * self.scale_y)

    def to_canvas(self, mx: float, my: float) -> tuple[float, float]:
        return (mx / self.scale_x, my / self.scale_y)

    def indicator(self, viewport: Viewport) -> Rect:
        """The visible region drawn on the minimap, clipped to the minimap."""
        vx, vy = viewport.visible_origin
        vw, vh = viewport.visible_size
        left = max(0.0, vx * self.scale_x)
        top = max(0.0, vy * self.scale_y)
        return Rect(
            left,
            top,
            min(self.width - left, vw * self.scale_x),
            min(self.height - top, vh * self.scale_y),
        )

    def navigate(self, viewport: Viewport, mx: float, my: float) -> tuple[float, float]:
        """Centre *viewport* on the canvas point under a minimap click.

        Returns the new (clamped) stage offset.
        """
        cx, cy = self.to_canvas(mx, my)
        origin_x = cx - viewport.stage_w / (2 * viewport.scale)
        origin_y = cy - viewport.stage_h / (2 * viewport.scale)
        return viewport.pan_to(-origin_x * viewport.scale, -origin_y * viewport.scale)
