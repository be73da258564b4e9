"""Board files: load/save a note layout as JSON.

Schema:
    [
      {"id": "note-1", "x": 120.0, "y": 80.0, "color": "#fde68a"},
      ...
    ]

``id``, ``x`` and ``y`` are required; any other key is kept in
``Item.extra`` and written back unchanged.
"""

import json
from pathlib import Path
from typing import Sequence, Union

from postboard.layout.models import Item

PathLike = Union[str, Path]


def parse_items(records: list) -> list[Item]:
    if not isinstance(records, list):
        raise ValueError("board file must contain a JSON list of notes")
    items = []
    for i, rec in enumerate(records):
        if not isinstance(rec, dict) or not {"id", "x", "y"} <= rec.keys():
            raise ValueError(f"note #{i} needs 'id', 'x' and 'y': {rec!r}")
        try:
            items.append(Item.from_dict(rec))
        except (TypeError, ValueError) as e:
            raise ValueError(f"note #{i} has a non-numeric position: {rec!r}") from e
    return items


def load_board(path: PathLike) -> list[Item]:
    """Read notes from *path*; a missing file raises ``FileNotFoundError``."""
    return parse_items(json.loads(Path(path).read_text()))


def dump_items(items: Sequence[Item]) -> str:
    return json.dumps([it.to_dict() for it in items], indent=2)


def save_board(path: PathLike, items: Sequence[Item]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(dump_items(items))
