import pytest

from sokobot_core.errors import (
    BoxGoalCountMismatchError,
    MalformedGridError,
    MissingPlayerError,
    MultiplePlayersError,
    SokobanError,
    UnenclosedBoardError,
)
from sokobot_core.parser import parse_grids, parse_level_str

LVL = """
#####
#.@ #
# $ #
#   #
#####
"""


def test_parse_level_str_basic():
    lvl = parse_level_str(LVL)
    b = lvl.board
    assert b.width == 5 and b.height == 5
    assert lvl.player == b.rc_to_idx(1, 2)
    assert lvl.boxes == (b.rc_to_idx(2, 2),)
    assert list(b.goal_cells()) == [b.rc_to_idx(1, 1)]
    assert b.is_wall(0) and not b.is_wall(b.rc_to_idx(3, 3))


def test_parse_grids_separate_layers():
    layout = ["#####", "#  .#", "#####"]
    items = ["     ", " @$  ", "     "]
    lvl = parse_grids(5, 3, layout, items)
    assert lvl.board.idx_to_rc(lvl.player) == (1, 1)
    assert [lvl.board.idx_to_rc(b) for b in lvl.boxes] == [(1, 2)]


def test_parse_grids_accepts_char_lists():
    layout = [list("#####"), list("#  .#"), list("#####")]
    items = [list("....."), list(".@$.."), list(".....")]
    lvl = parse_grids(5, 3, layout, items)
    assert len(lvl.boxes) == 1


def test_boxes_are_canonical():
    lvl = parse_level_str("""
######
#.$ .#
# @$ #
######
""")
    assert list(lvl.boxes) == sorted(lvl.boxes)


def test_player_and_box_on_goal_tokens():
    lvl = parse_level_str("""
######
#+$ *#
######
""")
    b = lvl.board
    assert b.is_goal_cell(lvl.player)
    assert lvl.boxes == (b.rc_to_idx(1, 2), b.rc_to_idx(1, 4))
    assert b.is_goal_cell(b.rc_to_idx(1, 4))


def test_missing_player():
    with pytest.raises(MissingPlayerError):
        parse_level_str("""
#####
# $.#
#####
""")


def test_multiple_players():
    with pytest.raises(MultiplePlayersError):
        parse_level_str("""
######
#@$.@#
######
""")


def test_box_goal_count_mismatch():
    with pytest.raises(BoxGoalCountMismatchError) as ei:
        parse_level_str("""
######
#@$..#
######
""")
    assert ei.value.boxes == 1 and ei.value.goals == 2


def test_unenclosed_board():
    with pytest.raises(UnenclosedBoardError):
        parse_level_str("""
#####
#@$.
#####
""")


def test_malformed_grid_dimensions():
    with pytest.raises(MalformedGridError):
        parse_grids(5, 3, ["#####", "#@$.#"], ["     ", " @$  ", "     "])
    with pytest.raises(MalformedGridError):
        parse_grids(5, 3, ["#####", "#  .", "#####"], ["     ", " @$  ", "     "])


def test_empty_level():
    with pytest.raises(MalformedGridError):
        parse_level_str("\n\n")


def test_errors_are_value_errors():
    assert issubclass(SokobanError, ValueError)
    with pytest.raises(ValueError):
        parse_level_str("#####\n# $.#\n#####")
