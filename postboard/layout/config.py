"""Board configuration dataclass and factory functions."""

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass
class BoardConfig:
    # Plane (the board canvas)
    canvas_w: float = 4000
    canvas_h: float = 3000

    # Notes are uniform in size
    item_w: float = 200
    item_h: float = 150
    margin: float = 20  # minimum clearance between two notes

    # Free-position search
    grid_size: float = 50
    spiral_angle_step: float = 0.5  # radians per spiral step
    spiral_step_ratio: float = 0.1  # radius growth per step, × the larger item side
    random_attempts: int = 100

    # Drag handling
    max_avoid_iterations: int = 10
    drop_step: float = 25
    drop_radius: float = 250

    @property
    def item_size(self) -> Tuple[float, float]:
        return (self.item_w, self.item_h)

    @property
    def canvas_size(self) -> Tuple[float, float]:
        return (self.canvas_w, self.canvas_h)

    @property
    def spiral_radius_step(self) -> float:
        return self.spiral_step_ratio * max(self.item_w, self.item_h)

    @property
    def spiral_max_radius(self) -> float:
        return max(self.canvas_w, self.canvas_h)

    def validate(self) -> "BoardConfig":
        for name in ("canvas_w", "canvas_h", "item_w", "item_h", "spiral_step_ratio"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.margin < 0:
            raise ValueError(f"margin must be >= 0, got {self.margin}")
        if self.grid_size < 0:
            raise ValueError(f"grid_size must be >= 0, got {self.grid_size}")
        if self.random_attempts < 0 or self.max_avoid_iterations < 0:
            raise ValueError("attempt and iteration counts must be >= 0")
        return self


def make_board_config(scale: float = 1.0, **overrides) -> BoardConfig:
    """Return a BoardConfig with every length scaled by *scale*.

    The reference board is 4000×3000 with 200×150 notes. Keyword overrides
    are applied after scaling.
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    base = BoardConfig()
    cfg = BoardConfig(
        canvas_w=base.canvas_w * scale,
        canvas_h=base.canvas_h * scale,
        item_w=base.item_w * scale,
        item_h=base.item_h * scale,
        margin=base.margin * scale,
        grid_size=base.grid_size * scale,
        drop_step=base.drop_step * scale,
        drop_radius=base.drop_radius * scale,
    )
    return replace(cfg, **overrides).validate()


def make_drag_config(**overrides) -> BoardConfig:
    """Config for live drag feedback: tighter clearance than placement."""
    return replace(BoardConfig(margin=10), **overrides).validate()
