from sokobot_core.state import State
from search.transposition import Transposition


def _st(player, boxes, g, key):
    return State(player=player, boxes=boxes, g=g, h=0, tie=0, key=key)


def test_first_offer_accepted_then_rejected():
    t = Transposition()
    s = _st(1, (5,), 3, key=42)
    assert t.offer(s)
    assert s in t
    assert not t.offer(_st(1, (5,), 3, key=42))
    assert len(t) == 1


def test_cheaper_copy_only_with_improve():
    t = Transposition()
    assert t.offer(_st(1, (5,), 6, key=42))
    assert not t.offer(_st(1, (5,), 4, key=42))
    assert t.offer(_st(1, (5,), 4, key=42), improve=True)
    assert t.best_g[42] == 4
    assert not t.offer(_st(1, (5,), 4, key=42), improve=True)


def test_stale_entry_does_not_close():
    t = Transposition()
    old = _st(1, (5,), 6, key=42)
    new = _st(1, (5,), 4, key=42)
    t.offer(old)
    t.offer(new, improve=True)
    assert not t.close(old)
    assert t.close(new)
    assert not t.close(new)


def test_closed_state_never_reaccepted():
    t = Transposition()
    s = _st(1, (5,), 6, key=42)
    t.offer(s)
    assert t.close(s)
    assert not t.offer(_st(1, (5,), 2, key=42), improve=True)


def test_hash_collision_merges_without_verify():
    t = Transposition()
    assert t.offer(_st(1, (5,), 0, key=42))
    assert not t.offer(_st(2, (6,), 0, key=42))


def test_hash_collision_detected_with_verify():
    t = Transposition(verify=True)
    assert t.offer(_st(1, (5,), 0, key=42))
    assert t.offer(_st(2, (6,), 0, key=42))
    assert t.collisions == 1
    assert not t.offer(_st(2, (6,), 0, key=42))
    assert len(t) == 2
