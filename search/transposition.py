from __future__ import annotations
from typing import Dict, Hashable, Set, Tuple

from sokobot_core.state import State

Config = Tuple[int, Tuple[int, ...]]


class Transposition:
    """Store the best known g(s) of every state ever put on the open list.

    States are identified by Zobrist hash. With verify=False a hash collision
    makes two different configurations count as one (the later one is
    dropped). With verify=True the full (player, boxes) is part of the
    identity so colliding configurations are told apart, at the cost of
    keeping every box tuple in memory.

    Expanded states are closed and never accepted again.
    """
    def __init__(self, verify: bool = False) -> None:
        self.verify = verify
        self.collisions = 0
        self.best_g: Dict[Hashable, int] = {}
        self._closed: Set[Hashable] = set()
        self._first_config: Dict[int, Config] = {}

    def _ident(self, s: State) -> Hashable:
        if not self.verify:
            return s.key
        return (s.key, s.player, s.boxes)

    def offer(self, s: State, improve: bool = False) -> bool:
        """True if s must go on the open list.

        Unseen states are always accepted. With improve=True a state that is
        still open is accepted again when reached with a strictly smaller g.
        """
        ident = self._ident(s)
        old = self.best_g.get(ident)
        if old is None:
            if self.verify:
                first = self._first_config.setdefault(s.key, (s.player, s.boxes))
                if first != (s.player, s.boxes):
                    self.collisions += 1
            self.best_g[ident] = s.g
            return True
        if improve and s.g < old and ident not in self._closed:
            self.best_g[ident] = s.g
            return True
        return False

    def close(self, s: State) -> bool:
        """Marks s as expanded; False if s is a stale or repeated open entry."""
        ident = self._ident(s)
        if ident in self._closed or s.g > self.best_g.get(ident, s.g):
            return False
        self._closed.add(ident)
        return True

    def __contains__(self, s: State) -> bool:
        return self._ident(s) in self.best_g

    def __len__(self) -> int:
        return len(self.best_g)
