from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import replace

from sokobot_core.errors import SokobanError
from sokobot_core.levels.resolve import load_level_by_id
from sokobot_core.moves import apply_moves
from sokobot_core.render import render_ascii
from search.config import DEFAULT_CONFIG, load_config
from search.solver import run_search


"""
Solve one level and print the move string.

Usage:
  python -m scripts.solve.run_search sokobot_core/levels/examples/micro.txt#0 --show
"""


def main():
    p = argparse.ArgumentParser()
    p.add_argument("level_id", help="Level id like 'path/to/pack.txt#idx'.")
    p.add_argument("--config", type=str, default=None, help="YAML file with a 'search:' section")
    p.add_argument("--h", type=str, default=None, choices=["zero", "pushes"], help="override heuristic")
    p.add_argument("--show", action="store_true", help="print the board after every move")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = p.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    cfg = load_config(args.config) if args.config else DEFAULT_CONFIG
    if args.h is not None:
        cfg = replace(cfg, heuristic=args.h)

    try:
        level = load_level_by_id(args.level_id)
    except SokobanError as e:
        print(f"invalid level {args.level_id}: {e}", file=sys.stderr)
        sys.exit(2)

    res = run_search(level, cfg)
    print("Result:", {k: v for k, v in res.items() if k != "moves"})
    if not res.get("success"):
        print("No solution found")
        sys.exit(1)

    moves = res["moves"]  # type: ignore
    print(moves)
    if args.show:
        player, boxes = level.player, level.boxes
        print(f"\n-- step 0 --\n{render_ascii(level.board, player, boxes)}")
        for i, m in enumerate(moves, start=1):
            player, boxes = apply_moves(level.board, player, boxes, m)
            print(f"\n-- step {i} ({m}) --\n{render_ascii(level.board, player, boxes)}")


if __name__ == "__main__":
    main()
