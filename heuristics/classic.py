from __future__ import annotations
from typing import Tuple

from sokobot_core.context import SearchContext
from sokobot_core.pushdb import UNREACHABLE
from sokobot_core.state import State

# one push of estimate outweighs any tie-breaker below this bound
PUSH_SCALE = 10000


# ---- classical heuristics

def h_zero(ctx: SearchContext, boxes: Tuple[int, ...]) -> int:
    return 0


def h_push_distance(ctx: SearchContext, boxes: Tuple[int, ...]) -> int:
    """Sum of single-box push distances from the pattern database.

    Each box is treated alone (other boxes and player reachability are
    ignored). A box with no push path to any goal costs
    ctx.unreachable_penalty instead.
    """
    total = 0
    for b in boxes:
        d = ctx.push_distance(b)
        total += ctx.unreachable_penalty if d == UNREACHABLE else d
    return total


def scaled_heuristic(state: State) -> int:
    """Push estimate and tie-breaker folded into one number."""
    return state.h * PUSH_SCALE + state.tie


def max_tie_breaker(ctx: SearchContext, n_boxes: int) -> int:
    """Largest tie-breaker any configuration of n_boxes can reach on this board."""
    board = ctx.board
    return n_boxes * ((board.height - 1) * 100 + (board.width - 1))
