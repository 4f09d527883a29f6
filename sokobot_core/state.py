from dataclasses import dataclass
from typing import Iterable, Tuple

from .board import Board

__all__ = [
    "State",
    "ROOT",
    "canonical_boxes",
    "tie_breaker",
]

# parent index of the root state
ROOT = -1


def canonical_boxes(boxes: Iterable[int]) -> Tuple[int, ...]:
    """Sorted tuple of box cells; flat indices sort in row-major order."""
    return tuple(sorted(boxes))


def tie_breaker(board: Board, boxes: Iterable[int]) -> int:
    """Sum of row*100 + col over all boxes."""
    total = 0
    for b in boxes:
        r, c = board.idx_to_rc(b)
        total += r * 100 + c
    return total


@dataclass(frozen=True, slots=True, eq=False)
class State:
    """
    One node of the search graph.

    boxes is canonical (see canonical_boxes). parent is the index of the
    parent state in the search arena, ROOT for the initial state; move is the
    direction char that produced this state from its parent.
    Two states are equal iff their Zobrist keys are equal.
    """

    player: int
    boxes: Tuple[int, ...]
    g: int # moves so far
    h: int # summed push estimate
    tie: int # positional tie-breaker
    key: int # zobrist hash
    parent: int = ROOT
    move: str = ""


    @property
    def f(self) -> int:
        return self.g + self.h


    def is_root(self) -> bool:
        return self.parent == ROOT


    def __eq__(self, other: object) -> bool:
        return isinstance(other, State) and self.key == other.key


    def __hash__(self) -> int:
        return hash(self.key)
