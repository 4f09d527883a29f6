import numpy as np

from sokobot_core.parser import parse_level_str
from sokobot_core.deadlocks import dead_squares, has_dead_box, is_corner_cell

LVL = """
#####
#.@ #
# $ #
#   #
#####
"""


def test_corner_cells_are_dead():
    lvl = parse_level_str(LVL)
    dead = dead_squares(lvl.board)
    assert dead.shape == (5, 5)
    marked = {(int(r), int(c)) for r, c in zip(*np.nonzero(dead))}
    # (1, 1) is a corner too but holds the goal
    assert marked == {(1, 3), (3, 1), (3, 3)}


def test_goal_never_dead():
    lvl = parse_level_str("""
######
#.  .#
# $$ #
#  @ #
#    #
######
""")
    b = lvl.board
    dead = dead_squares(b)
    for g in b.goal_cells():
        r, c = b.idx_to_rc(g)
        assert not dead[r, c]


def test_walls_and_outer_ring_not_dead():
    lvl = parse_level_str(LVL)
    b = lvl.board
    dead = dead_squares(b)
    for idx in range(b.size):
        r, c = b.idx_to_rc(idx)
        if b.is_wall(idx) or b.on_boundary(idx):
            assert not dead[r, c]


def test_table_is_read_only():
    dead = dead_squares(parse_level_str(LVL).board)
    assert not dead.flags.writeable


def test_wall_on_one_axis_only_is_not_a_corner():
    b = parse_level_str(LVL).board
    # wall to the left, floor above and below
    assert not is_corner_cell(b, 2, 1)
    # wall above, floor left and right
    assert not is_corner_cell(b, 1, 2)


def test_has_dead_box():
    lvl = parse_level_str(LVL)
    b = lvl.board
    dead = dead_squares(b)
    assert not has_dead_box(dead, b, lvl.boxes)
    assert has_dead_box(dead, b, (b.rc_to_idx(3, 3),))
