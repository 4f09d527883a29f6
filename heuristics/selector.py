from __future__ import annotations

from sokobot_core.moves import HeuristicFn
from heuristics.classic import h_zero, h_push_distance


def get_heuristic(name: str) -> HeuristicFn:
    name = name.lower()
    if name == "zero":
        return h_zero
    if name == "pushes":
        return h_push_distance
    raise ValueError(f"unknown heuristic: {name}")
