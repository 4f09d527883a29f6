from __future__ import annotations
from collections import deque

import numpy as np

from .board import Board, DIRECTIONS

UNREACHABLE = 10 ** 9


def push_distances(board: Board) -> np.ndarray:
    """Minimal number of pushes to bring a lone box from each cell to some goal.

    Multi-source BFS seeded at every goal with distance 0, walking pushes
    backwards: a box at `prev` can be pushed onto `cur` when `prev` is an
    interior non-wall cell and the player can stand on the cell behind `prev`.
    Other boxes and whether the player can actually reach that cell are
    ignored, so each entry is a lower bound for that box alone.

    Cells no box can push its way out of keep UNREACHABLE. The returned
    (height, width) int64 array is read-only.
    """
    h, w = board.height, board.width
    pdb = np.full((h, w), UNREACHABLE, dtype=np.int64)
    q = deque()
    for goal in board.goal_cells():
        r, c = board.idx_to_rc(goal)
        pdb[r, c] = 0
        q.append((r, c))

    while q:
        r, c = q.popleft()
        d = pdb[r, c]
        for _, dr, dc in DIRECTIONS:
            # box moved from prev to (r, c) along (dr, dc); player stood behind prev
            pr, pc = r - dr, c - dc
            sr, sc = pr - dr, pc - dc
            if not (0 < pr < h - 1 and 0 < pc < w - 1):
                continue
            if board.is_wall(board.rc_to_idx(pr, pc)) or board.is_wall(board.rc_to_idx(sr, sc)):
                continue
            if pdb[pr, pc] != UNREACHABLE:
                continue
            pdb[pr, pc] = d + 1
            q.append((pr, pc))

    pdb.flags.writeable = False
    return pdb
