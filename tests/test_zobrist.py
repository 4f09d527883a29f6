from sokobot_core.parser import parse_level_str
from sokobot_core.zobrist import ZobristHasher

LVL = """
######
#.  .#
# $$ #
#  @ #
#    #
######
"""


def test_same_seed_same_hash():
    s = parse_level_str(LVL)
    a = ZobristHasher(s.board.width, s.board.height)
    b = ZobristHasher(s.board.width, s.board.height)
    assert a.hash(s.player, s.boxes) == b.hash(s.player, s.boxes)


def test_box_order_does_not_matter():
    s = parse_level_str(LVL)
    zob = ZobristHasher(s.board.width, s.board.height)
    x, y = s.boxes
    assert zob.hash(s.player, (x, y)) == zob.hash(s.player, (y, x))


def test_hash_changes_with_player_and_boxes():
    s = parse_level_str(LVL)
    zob = ZobristHasher(s.board.width, s.board.height)
    h0 = zob.hash(s.player, s.boxes)
    assert zob.hash(s.player + 1, s.boxes) != h0
    moved = (s.boxes[0], s.boxes[1] + s.board.width)
    assert zob.hash(s.player, moved) != h0


def test_seed_changes_table():
    a = ZobristHasher(6, 6, seed=1)
    b = ZobristHasher(6, 6, seed=2)
    assert a.box_keys != b.box_keys
    assert all(0 <= k < 2 ** 64 for k in a.player_keys + a.box_keys)
