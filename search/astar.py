from __future__ import annotations
from typing import Dict, Iterable, List, Optional
import logging
import time

from sokobot_core.context import SearchContext
from sokobot_core.deadlocks import has_dead_box
from sokobot_core.moves import new_state, successors, is_goal
from sokobot_core.state import State
from heuristics.classic import PUSH_SCALE, max_tie_breaker
from heuristics.selector import get_heuristic
from .config import SearchConfig, DEFAULT_CONFIG
from .priority_queue import PriorityQueue, ORDERINGS
from .transposition import Transposition

logger = logging.getLogger(__name__)

Result = Dict[str, object]


def reconstruct(arena: List[State], goal_index: int) -> str:
    """Walks parent indices back to the root and returns moves first to last."""
    moves: List[str] = []
    i = goal_index
    while not arena[i].is_root():
        moves.append(arena[i].move)
        i = arena[i].parent
    moves.reverse()
    return "".join(moves)


def _warn_if_tie_overflows(ctx: SearchContext, n_boxes: int) -> None:
    worst = max_tie_breaker(ctx, n_boxes)
    if ctx.board.width > 100 or worst >= PUSH_SCALE:
        logger.warning(
            "scaled ordering: tie-breaker can reach %d (>= %d) on a %dx%d board with %d boxes; "
            "push estimate no longer dominates the ordering",
            worst, PUSH_SCALE, ctx.board.width, ctx.board.height, n_boxes,
        )


def astar(
    ctx: SearchContext,
    player: int,
    boxes: Iterable[int],
    config: SearchConfig = DEFAULT_CONFIG,
) -> Result:
    """Best-first graph search from (player, boxes) until all boxes sit on goals.

    Every generated state is checked against the seen set by Zobrist hash.
    A state goes on the open list when first generated; with
    config.improve_open it goes on again if reached with a smaller g while
    still open. Expanded states are never reopened. States are kept in an
    arena and refer to their parent by index.
    """
    t0 = time.time()
    h_fn = get_heuristic(config.heuristic)
    order = ORDERINGS[config.ordering]

    root = new_state(ctx, player, boxes, 0, h_fn)
    if config.ordering == "scaled":
        _warn_if_tie_overflows(ctx, len(root.boxes))
    logger.debug("search start: %d boxes, h0=%d, ordering=%s", len(root.boxes), root.h, config.ordering)

    if has_dead_box(ctx.dead, ctx.board, root.boxes):
        # start is already in deadlock
        logger.info("start position has a box on a dead square")
        return {"success": False, "nodes": 0, "generated": 1, "exhausted": True,
                "runtime": time.time() - t0}

    arena: List[State] = [root]
    openq = PriorityQueue(key=lambda i: order(arena[i]))
    seen = Transposition(verify=config.verify_states)
    seen.offer(root)
    openq.push(0)

    expanded = 0
    generated = 1
    exhausted = True
    found: Optional[int] = None

    while len(openq) > 0:
        if config.time_limit_s is not None and (time.time() - t0) > config.time_limit_s:
            exhausted = False
            break
        i = openq.pop()
        s = arena[i]
        if not seen.close(s):
            # superseded by a cheaper copy of the same state
            continue
        if is_goal(ctx.board, s.boxes):
            found = i
            break
        if config.node_limit is not None and expanded >= config.node_limit:
            exhausted = False
            break
        expanded += 1

        for ns in successors(ctx, s, i, h_fn):
            generated += 1
            if seen.offer(ns, improve=config.improve_open):
                arena.append(ns)
                openq.push(len(arena) - 1)

    runtime = time.time() - t0
    res: Result = {
        "success": found is not None,
        "nodes": expanded,
        "generated": generated,
        "exhausted": exhausted,
        "runtime": runtime,
    }
    if config.verify_states:
        res["collisions"] = seen.collisions

    if found is None:
        if not exhausted:
            logger.warning("search stopped by limit after %d expansions (%.2fs); result is not a proof of unsolvability",
                           expanded, runtime)
        else:
            logger.info("no solution: state space exhausted after %d expansions (%.2fs)", expanded, runtime)
        return res

    moves = reconstruct(arena, found)
    logger.info("solved in %d moves: %d expansions, %d states, %.2fs", len(moves), expanded, len(arena), runtime)
    res["solution_len"] = len(moves)
    res["moves"] = moves
    return res
