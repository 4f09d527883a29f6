from __future__ import annotations
from typing import Iterable

import numpy as np

from .board import Board

# --- simple corner deadlocks -------------------------------------------------
#
# Only the "box in a corner" pattern is detected. Two or more boxes freezing
# each other against a wall are not.


def is_corner_cell(board: Board, r: int, c: int) -> bool:
    """Non-goal floor cell with a wall above/below and a wall left/right."""
    idx = board.rc_to_idx(r, c)
    if board.is_wall(idx) or board.is_goal_cell(idx):
        return False
    w = board.width
    wall_up = board.is_wall(idx - w)
    wall_down = board.is_wall(idx + w)
    wall_left = board.is_wall(idx - 1)
    wall_right = board.is_wall(idx + 1)
    return (wall_up or wall_down) and (wall_left or wall_right)


def dead_squares(board: Board) -> np.ndarray:
    """Boolean (height, width) table of cells a box must never be pushed onto.

    The outer ring is never marked: no box can stand there on an enclosed board.
    The returned array is read-only.
    """
    dead = np.zeros((board.height, board.width), dtype=bool)
    for r in range(1, board.height - 1):
        for c in range(1, board.width - 1):
            if is_corner_cell(board, r, c):
                dead[r, c] = True
    dead.flags.writeable = False
    return dead


def has_dead_box(dead: np.ndarray, board: Board, boxes: Iterable[int]) -> bool:
    """True if any box already sits on a dead square."""
    for b in boxes:
        r, c = board.idx_to_rc(b)
        if dead[r, c]:
            return True
    return False
