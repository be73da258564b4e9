"""CLI entry point: board-layout

Run layout operations on a JSON board file (see ``postboard.layout.storage``)
and emit the result as JSON.

Examples
--------
# Where would a new note clicked at (640, 320) go?
board-layout place --board board.json --x 640 --y 320

# Resolve a drag of note-3 to (410, 95) and write the updated board
board-layout move --board board.json --id note-3 --x 410 --y 95 --out board.json

# Spread out every overlapping note, reproducibly
board-layout redistribute --board board.json --seed 7 --out fixed.json

# Fail (exit 1) when any two notes overlap
board-layout check --board board.json --margin 30

# Render the board to a PNG
board-layout plot --board board.json --out board.png --margins
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from postboard.layout.config import BoardConfig
from postboard.layout.engine import LayoutEngine
from postboard.layout.models import Item
from postboard.layout.storage import dump_items, load_board, save_board


def _add_board_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--board", required=True, help="Board JSON file")
    p.add_argument("--canvas", type=float, nargs=2, metavar=("W", "H"), default=None,
                   help="Plane size (default 4000 3000)")
    p.add_argument("--size", type=float, nargs=2, metavar=("W", "H"), default=None,
                   help="Note size (default 200 150)")
    p.add_argument("--margin", type=float, default=None, help="Clearance between notes")
    p.add_argument("--grid", type=float, default=None, help="Snap grid for placements")
    p.add_argument("--seed", type=int, default=None, help="Seed for the random fallbacks")


def _config(args: argparse.Namespace) -> BoardConfig:
    cfg = BoardConfig()
    if args.canvas:
        cfg = replace(cfg, canvas_w=args.canvas[0], canvas_h=args.canvas[1])
    if args.size:
        cfg = replace(cfg, item_w=args.size[0], item_h=args.size[1])
    if args.margin is not None:
        cfg = replace(cfg, margin=args.margin)
    if args.grid is not None:
        cfg = replace(cfg, grid_size=args.grid)
    return cfg.validate()


def _emit(payload: str, out: str | None) -> None:
    if out:
        Path(out).write_text(payload)
        print(f"JSON → {out}", file=sys.stderr)
    else:
        print(payload)


def _cmd_place(engine: LayoutEngine, items: list[Item], args: argparse.Namespace) -> int:
    start = (args.x, args.y) if args.x is not None and args.y is not None else None
    placement = engine.place(items, start=start)
    print(f"Placed via {placement.tier} search", file=sys.stderr)
    if placement.degraded:
        print("Board is full: placement overlaps an existing note", file=sys.stderr)
    result = {**placement.position.to_dict(), "tier": placement.tier, "degraded": placement.degraded}
    _emit(json.dumps(result, indent=2), args.out)
    return 0


def _cmd_move(engine: LayoutEngine, items: list[Item], args: argparse.Namespace) -> int:
    try:
        if args.settle:
            pos = engine.settle_drop(args.id, (args.x, args.y), items, strict=True)
        else:
            pos = engine.avoid_collision(args.id, (args.x, args.y), items, strict=True)
    except KeyError:
        sys.exit(f"No note with id {args.id!r} on the board")
    print(f"{args.id}: ({args.x}, {args.y}) → ({pos.x}, {pos.y})", file=sys.stderr)
    moved = [it.moved_to(pos) if it.id == args.id else it for it in items]
    _emit(dump_items(moved), args.out)
    return 0


def _cmd_redistribute(engine: LayoutEngine, items: list[Item], args: argparse.Namespace) -> int:
    overlaps = engine.find_overlaps(items)
    print(f"Found {len(overlaps)} overlapping pair(s)", file=sys.stderr)
    fixed = engine.redistribute(items)
    n_moved = sum(1 for a, b in zip(items, fixed) if (a.x, a.y) != (b.x, b.y))
    print(f"Moved {n_moved} note(s)", file=sys.stderr)
    if args.out:
        save_board(args.out, fixed)
        print(f"JSON → {args.out}", file=sys.stderr)
    else:
        print(dump_items(fixed))
    return 0


def _cmd_check(engine: LayoutEngine, items: list[Item], args: argparse.Namespace) -> int:
    overlaps = engine.find_overlaps(items)
    for a, b in overlaps:
        print(f"overlap: {a} ↔ {b}")
    print(f"{len(items)} note(s), {len(overlaps)} overlapping pair(s)", file=sys.stderr)
    return 1 if overlaps else 0


def _cmd_plot(engine: LayoutEngine, items: list[Item], args: argparse.Namespace) -> int:
    import matplotlib

    matplotlib.use("Agg")
    from postboard.layout.viz import plot_board

    fig = plot_board(items, engine.config, show_margins=args.margins)
    fig.savefig(args.out, dpi=args.dpi)
    print(f"PNG  → {args.out}", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="board-layout",
        description="Non-overlapping placement of notes on a bounded board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = p.add_subparsers(dest="command", required=True)

    place = sub.add_parser("place", help="Find a free spot for a new note")
    _add_board_args(place)
    place.add_argument("--x", type=float, default=None, help="Preferred x")
    place.add_argument("--y", type=float, default=None, help="Preferred y")
    place.add_argument("--out", default=None, help="Output JSON file (default: stdout)")
    place.set_defaults(func=_cmd_place)

    move = sub.add_parser("move", help="Move a note and push it off collisions")
    _add_board_args(move)
    move.add_argument("--id", required=True, help="Id of the note being moved")
    move.add_argument("--x", type=float, required=True)
    move.add_argument("--y", type=float, required=True)
    move.add_argument("--settle", action="store_true",
                      help="Probe nearby directions instead of nudging along one axis")
    move.add_argument("--out", default=None, help="Output JSON file (default: stdout)")
    move.set_defaults(func=_cmd_move)

    redist = sub.add_parser("redistribute", help="Move overlapping notes apart")
    _add_board_args(redist)
    redist.add_argument("--out", default=None, help="Output JSON file (default: stdout)")
    redist.set_defaults(func=_cmd_redistribute)

    check = sub.add_parser("check", help="List overlapping notes; exit 1 if any")
    _add_board_args(check)
    check.set_defaults(func=_cmd_check)

    plot = sub.add_parser("plot", help="Render the board to an image")
    _add_board_args(plot)
    plot.add_argument("--out", required=True, help="Output image path (PNG)")
    plot.add_argument("--dpi", type=int, default=100)
    plot.add_argument("--margins", action="store_true", help="Draw inflated bounds")
    plot.set_defaults(func=_cmd_plot)

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    board_path = Path(args.board)
    if not board_path.exists():
        sys.exit(f"Board not found: {board_path}")

    try:
        items = load_board(board_path)
        engine = LayoutEngine(_config(args), seed=args.seed)
    except ValueError as e:
        sys.exit(f"Invalid input: {e}")

    return args.func(engine, items, args)


if __name__ == "__main__":
    sys.exit(main())
