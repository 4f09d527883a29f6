import random
from typing import Iterable

DEFAULT_SEED = 12345


class ZobristHasher:
    """Zobrist hash for a (player, boxes) configuration.

    For a fixed field size, we generate:
      - key for the player position on each cell
      - key for the presence of a box on each cell
    Walls/goals are not included in the hash (they are fixed for the level).
    The seed is fixed so the same puzzle hashes the same way on every run.
    """
    def __init__(self, width: int, height: int, seed: int = DEFAULT_SEED) -> None:
        rng = random.Random(seed)
        self.width = width
        self.height = height
        size = width * height
        self.player_keys = [0] * size
        self.box_keys = [0] * size
        for idx in range(size):
            self.player_keys[idx] = rng.getrandbits(64)
            self.box_keys[idx] = rng.getrandbits(64)

    def hash(self, player: int, boxes: Iterable[int]) -> int:
        h = self.player_keys[player]
        for b in boxes:
            h ^= self.box_keys[b]
        return h
