from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .board import Board
from .deadlocks import dead_squares
from .pushdb import push_distances
from .zobrist import ZobristHasher, DEFAULT_SEED

DEFAULT_UNREACHABLE_PENALTY = 1000


@dataclass(frozen=True)
class SearchContext:
    """
    Everything about a puzzle that does not change during search.

    Built once per puzzle and handed by reference to every state operation.

    Attributes:
        board: walls and goals
        dead: (height, width) bool table of corner dead squares
        pdb: (height, width) single-box push distances to the nearest goal
        zobrist: fingerprint generator for (player, boxes)
        unreachable_penalty: per-box heuristic cost for a box with no push path
    """
    board: Board
    dead: np.ndarray
    pdb: np.ndarray
    zobrist: ZobristHasher
    unreachable_penalty: int = DEFAULT_UNREACHABLE_PENALTY

    def is_dead(self, idx: int) -> bool:
        r, c = self.board.idx_to_rc(idx)
        return bool(self.dead[r, c])

    def push_distance(self, idx: int) -> int:
        r, c = self.board.idx_to_rc(idx)
        return int(self.pdb[r, c])


def build_context(
    board: Board,
    seed: int = DEFAULT_SEED,
    unreachable_penalty: int = DEFAULT_UNREACHABLE_PENALTY,
) -> SearchContext:
    return SearchContext(
        board=board,
        dead=dead_squares(board),
        pdb=push_distances(board),
        zobrist=ZobristHasher(board.width, board.height, seed),
        unreachable_penalty=unreachable_penalty,
    )
