from __future__ import annotations
import heapq
from typing import Any, Callable, Dict, List, Tuple

from sokobot_core.state import State
from heuristics.classic import scaled_heuristic

OrderKey = Callable[[State], Tuple[int, ...]]


def astar_key(s: State) -> Tuple[int, ...]:
    """Lexicographic (f, tie): the tie-breaker only separates equal f."""
    return (s.f, s.tie)


def scaled_key(s: State) -> Tuple[int, ...]:
    """Single scaled sum g + h*PUSH_SCALE + tie; push estimate dominates g."""
    return (s.g + scaled_heuristic(s),)


ORDERINGS: Dict[str, OrderKey] = {
    "astar": astar_key,
    "scaled": scaled_key,
}


class PriorityQueue:
    """Min-heap ordered by an explicit key function.

    Equal keys pop in insertion order, so the order is total and runs are
    reproducible.
    """
    def __init__(self, key: OrderKey = astar_key) -> None:
        self._key = key
        self._h: List[Tuple[Tuple[int, ...], int, Any]] = []
        self._tiebreak = 0

    def push(self, item: Any) -> None:
        self._tiebreak += 1
        heapq.heappush(self._h, (self._key(item), self._tiebreak, item))

    def pop(self) -> Any:
        return heapq.heappop(self._h)[2]

    def __len__(self) -> int:
        return len(self._h)
