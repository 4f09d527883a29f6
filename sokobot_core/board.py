from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

# Bit helpers
__all__ = [
    "Board",
    "Position",
    "DIRECTIONS",
    "bit",
    "has_bit",
    "set_bit",
    "iter_bits",
]

Position = Tuple[int, int]

# (move char, d_row, d_col) in expansion order
DIRECTIONS: Tuple[Tuple[str, int, int], ...] = (
    ("u", -1, 0),
    ("d", 1, 0),
    ("l", 0, -1),
    ("r", 0, 1),
)


def bit(idx: int) -> int:
    return 1 << idx

def has_bit(mask: int, idx: int) -> bool:
    return (mask >> idx) & 1 == 1

def set_bit(mask: int, idx: int) -> int:
    return mask | bit(idx)


def iter_bits(mask: int) -> Iterator[int]:
    """Iterates over the indices of set bits."""
    idx = 0
    m = mask
    while m:
        if m & 1:
            yield idx
        m >>= 1
        idx += 1


@dataclass(frozen=True, slots=True)
class Board:
    """
    Static part of a Sokoban level: walls and goals.

    Cell indexing: idx = r*width + c, so sorting indices is row-major order.
    One Board is shared by every state of a search and never copied.
    """

    width: int
    height: int
    walls: int # bitset
    goals: int # bitset


    # ---- conversions
    def idx_to_rc(self, idx: int) -> Position:
        return (idx // self.width, idx % self.width)


    def rc_to_idx(self, r: int, c: int) -> int:
        return r * self.width + c


    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width


    def step(self, idx: int, d_row: int, d_col: int) -> int:
        """Neighbour index in a direction. Callers keep idx off the boundary ring."""
        return idx + d_row * self.width + d_col


    # ---- cell queries
    def is_wall(self, idx: int) -> bool:
        return has_bit(self.walls, idx)


    def is_goal_cell(self, idx: int) -> bool:
        return has_bit(self.goals, idx)


    def on_boundary(self, idx: int) -> bool:
        """Cell lies on the outer ring of the grid."""
        r, c = self.idx_to_rc(idx)
        return r == 0 or c == 0 or r == self.height - 1 or c == self.width - 1


    def goal_cells(self) -> Iterable[int]:
        return iter_bits(self.goals)


    @property
    def size(self) -> int:
        return self.width * self.height


    def neighbors(self, idx: int) -> Iterable[int]:
        """4-neighborhood without diagonals."""
        w = self.width
        h = self.height
        r, c = self.idx_to_rc(idx)
        if r > 0: yield idx - w
        if r + 1 < h: yield idx + w
        if c > 0: yield idx - 1
        if c + 1 < w: yield idx + 1
