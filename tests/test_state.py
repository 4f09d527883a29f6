import dataclasses

import pytest

from sokobot_core.context import build_context
from sokobot_core.moves import new_state
from sokobot_core.parser import parse_level_str
from sokobot_core.state import State, ROOT, canonical_boxes, tie_breaker
from heuristics.classic import h_push_distance, h_zero, scaled_heuristic, PUSH_SCALE

LVL = """
#####
#.@ #
# $ #
#   #
#####
"""

TWO = """
######
#.  .#
# $$ #
#  @ #
#    #
######
"""


def test_canonical_boxes_sorted():
    assert canonical_boxes([15, 8, 9]) == (8, 9, 15)
    assert canonical_boxes(()) == ()


def test_same_boxes_any_order_are_equal():
    lvl = parse_level_str(TWO)
    ctx = build_context(lvl.board)
    x, y = lvl.boxes
    s1 = new_state(ctx, lvl.player, [x, y], 0, h_push_distance)
    s2 = new_state(ctx, lvl.player, [y, x], 3, h_push_distance)
    assert s1.boxes == s2.boxes
    assert s1 == s2
    assert hash(s1) == hash(s2)
    assert len({s1, s2}) == 1


def test_root_state_fields():
    lvl = parse_level_str(LVL)
    ctx = build_context(lvl.board)
    s = new_state(ctx, lvl.player, lvl.boxes, 0, h_push_distance)
    assert s.parent == ROOT and s.is_root()
    assert s.move == ""
    assert s.h == 2
    assert s.tie == 202
    assert s.f == 2
    assert s.key == ctx.zobrist.hash(lvl.player, lvl.boxes)


def test_unreachable_box_is_penalised():
    lvl = parse_level_str(LVL)
    ctx = build_context(lvl.board, unreachable_penalty=1000)
    stuck = (lvl.board.rc_to_idx(3, 2),)
    assert h_push_distance(ctx, stuck) == 1000
    assert h_zero(ctx, stuck) == 0


def test_tie_breaker_and_scaled_value():
    lvl = parse_level_str(TWO)
    ctx = build_context(lvl.board)
    s = new_state(ctx, lvl.player, lvl.boxes, 0, h_push_distance)
    assert tie_breaker(lvl.board, lvl.boxes) == 202 + 203
    assert s.h == 2 + 2
    assert scaled_heuristic(s) == 4 * PUSH_SCALE + 405


def test_state_is_immutable():
    s = State(player=1, boxes=(2,), g=0, h=0, tie=0, key=7)
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.g = 5  # type: ignore[misc]


def test_equality_uses_key_only():
    a = State(player=1, boxes=(2,), g=0, h=0, tie=0, key=7)
    b = State(player=9, boxes=(3,), g=4, h=1, tie=5, key=7)
    c = State(player=1, boxes=(2,), g=0, h=0, tie=0, key=8)
    assert a == b
    assert a != c
