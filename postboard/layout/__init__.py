"""postboard.layout — non-overlapping placement of notes on a bounded board.

Quick start
-----------
>>> from postboard.layout import LayoutEngine, Item
>>> engine = LayoutEngine(seed=0)
>>> engine.find_free_position([])                    # empty board → centre
Position(x=1900.0, y=1425.0)
>>> items = [Item("a", 100, 100), Item("b", 100, 100)]
>>> engine.redistribute(items)                       # pull them apart

Functional API
--------------
>>> from postboard.layout import find_free_position, avoid_collision, redistribute
"""

from postboard.layout._geometry import boxes_intersect, rects_overlap
from postboard.layout.avoidance import avoid_collision, settle_drop
from postboard.layout.config import BoardConfig, make_board_config, make_drag_config
from postboard.layout.engine import LayoutEngine
from postboard.layout.models import Item, Placement, Position, Rect
from postboard.layout.placement import find_free_position, locate_free_position
from postboard.layout.redistribute import find_overlaps, has_overlaps, redistribute
from postboard.layout.viewport import Minimap, Viewport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Engine
    "LayoutEngine",
    # Data models
    "Item",
    "Placement",
    "Position",
    "Rect",
    # Config
    "BoardConfig",
    "make_board_config",
    "make_drag_config",
    # Operations
    "rects_overlap",
    "boxes_intersect",
    "find_free_position",
    "locate_free_position",
    "avoid_collision",
    "settle_drop",
    "find_overlaps",
    "has_overlaps",
    "redistribute",
    # Viewport
    "Viewport",
    "Minimap",
]
