from collections import deque
from typing import Callable, Iterable, List, Tuple

from .board import Board, DIRECTIONS, set_bit, has_bit
from .context import SearchContext
from .state import State, ROOT, canonical_boxes, tie_breaker

HeuristicFn = Callable[[SearchContext, Tuple[int, ...]], int]

_DELTAS = {move: (dr, dc) for move, dr, dc in DIRECTIONS}


def player_reachable(board: Board, start: int, boxes: Iterable[int] = ()) -> int:
    """Returns the bitmask of cells reachable by the player without pushing boxes."""
    blocked = 0
    for b in boxes:
        blocked = set_bit(blocked, b)
    visited = set_bit(0, start)
    q = deque([start])

    while q:
        cur = q.popleft()
        for nb in board.neighbors(cur):
            if board.is_wall(nb) or has_bit(blocked, nb):
                continue
            if not has_bit(visited, nb):
                visited = set_bit(visited, nb)
                q.append(nb)
    return visited


def new_state(
    ctx: SearchContext,
    player: int,
    boxes: Iterable[int],
    g: int,
    h_fn: HeuristicFn,
    parent: int = ROOT,
    move: str = "",
) -> State:
    """Builds a state with its heuristic, tie-breaker and hash computed once."""
    canon = canonical_boxes(boxes)
    return State(
        player=player,
        boxes=canon,
        g=g,
        h=h_fn(ctx, canon),
        tie=tie_breaker(ctx.board, canon),
        key=ctx.zobrist.hash(player, canon),
        parent=parent,
        move=move,
    )


def successors(ctx: SearchContext, state: State, index: int, h_fn: HeuristicFn) -> List[State]:
    """Generates single-step successors (cost of step = 1 move).

    For each direction u, d, l, r:
      1) a wall in front of the player → nothing,
      2) free cell → plain walk, boxes unchanged,
      3) box in front → push, if the cell beyond is not a wall, not a box
         and not a dead square; the player takes the old box cell.
    `index` is the arena index of `state`, stored as the successors' parent.
    """
    board = ctx.board
    succs: List[State] = []
    g = state.g + 1

    for move, dr, dc in DIRECTIONS:
        dest = board.step(state.player, dr, dc)
        if board.is_wall(dest):
            continue
        if dest not in state.boxes:
            succs.append(new_state(ctx, dest, state.boxes, g, h_fn, index, move))
            continue

        beyond = board.step(dest, dr, dc)
        if board.is_wall(beyond) or beyond in state.boxes or ctx.is_dead(beyond):
            continue
        new_boxes = [beyond if b == dest else b for b in state.boxes]
        succs.append(new_state(ctx, dest, new_boxes, g, h_fn, index, move))
    return succs


def is_goal(board: Board, boxes: Iterable[int]) -> bool:
    """All boxes are on goals."""
    return all(board.is_goal_cell(b) for b in boxes)


def apply_moves(board: Board, player: int, boxes: Iterable[int], moves: str) -> Tuple[int, Tuple[int, ...]]:
    """Replays a move string from a configuration and returns the final one.

    Raises ValueError on an unknown char, a walk into a wall or a blocked push.
    Dead squares are legal here; only the search avoids them.
    """
    box_set = set(boxes)
    for i, move in enumerate(moves):
        if move not in _DELTAS:
            raise ValueError(f"unknown move {move!r} at step {i}")
        dr, dc = _DELTAS[move]
        dest = board.step(player, dr, dc)
        if board.is_wall(dest):
            raise ValueError(f"move {move!r} at step {i} walks into a wall")
        if dest in box_set:
            beyond = board.step(dest, dr, dc)
            if board.is_wall(beyond) or beyond in box_set:
                raise ValueError(f"push {move!r} at step {i} is blocked")
            box_set.remove(dest)
            box_set.add(beyond)
        player = dest
    return player, canonical_boxes(box_set)
