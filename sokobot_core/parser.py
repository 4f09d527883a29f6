from dataclasses import dataclass
from typing import Sequence, Tuple

from .board import Board, set_bit, iter_bits
from .errors import (
    BoxGoalCountMismatchError,
    MalformedGridError,
    MissingPlayerError,
    MultiplePlayersError,
    UnenclosedBoardError,
)
from .moves import player_reachable
from .state import canonical_boxes

TOK_WALL = "#"
TOK_GOAL = "."
TOK_BOX = "$"
TOK_BOX_ON_GOAL = "*"
TOK_PLAYER = "@"
TOK_PLAYER_ON_GOAL = "+"
TOK_FLOOR = " "


@dataclass(frozen=True)
class Level:
    """A parsed puzzle: the static board plus the starting configuration."""
    board: Board
    player: int
    boxes: Tuple[int, ...]


def validate_level(level: Level) -> Level:
    """Checks the preconditions the solver relies on; raises SokobanError subclasses."""
    board = level.board
    goals = sum(1 for _ in iter_bits(board.goals))
    if len(level.boxes) != goals:
        raise BoxGoalCountMismatchError(len(level.boxes), goals)
    if board.is_wall(level.player):
        raise MalformedGridError(f"player stands on a wall at {board.idx_to_rc(level.player)}")
    for b in level.boxes:
        if board.is_wall(b):
            raise MalformedGridError(f"box stands on a wall at {board.idx_to_rc(b)}")
        if board.on_boundary(b):
            raise UnenclosedBoardError(f"box on the outer ring at {board.idx_to_rc(b)}")

    region = player_reachable(board, level.player)
    for idx in iter_bits(region):
        if board.on_boundary(idx):
            raise UnenclosedBoardError(
                f"player can walk to the edge of the grid at {board.idx_to_rc(idx)}"
            )
    return level


def parse_grids(width: int, height: int, layout: Sequence[Sequence[str]], items: Sequence[Sequence[str]]) -> Level:
    """Builds a Level from separate layout and items grids.

    layout: '#' wall, '.' goal, anything else floor.
    items:  '@' player, '$' box, anything else empty.
    """
    if width <= 0 or height <= 0:
        raise MalformedGridError(f"bad dimensions {width}x{height}")
    for name, grid in (("layout", layout), ("items", items)):
        if len(grid) != height:
            raise MalformedGridError(f"{name} grid has {len(grid)} rows, expected {height}")
        for r, row in enumerate(grid):
            if len(row) != width:
                raise MalformedGridError(f"{name} row {r} has {len(row)} cells, expected {width}")

    walls = goals = 0
    player_idx = -1
    boxes = []
    for r in range(height):
        for c in range(width):
            idx = r * width + c
            tile = layout[r][c]
            if tile == TOK_WALL:
                walls = set_bit(walls, idx)
            elif tile == TOK_GOAL:
                goals = set_bit(goals, idx)

            item = items[r][c]
            if item == TOK_PLAYER:
                if player_idx != -1:
                    raise MultiplePlayersError(f"second player at {(r, c)}")
                player_idx = idx
            elif item == TOK_BOX:
                boxes.append(idx)

    if player_idx == -1:
        raise MissingPlayerError("No player '@' found in items grid")

    board = Board(width=width, height=height, walls=walls, goals=goals)
    return validate_level(Level(board, player_idx, canonical_boxes(boxes)))


def parse_level_str(level_str: str) -> Level:
    """Parses an ASCII level in the usual combined notation.

    Supported characters:
      '#': wall
      '.': goal
      '$': box
      '*': box on goal
      '@': player
      '+': player on goal
    Other characters (including space) are treated as floor.
    """
    lines = [line.rstrip("\n") for line in level_str.splitlines() if line.strip() != ""]
    if not lines:
        raise MalformedGridError("Empty level")
    height = len(lines)
    width = max(len(line) for line in lines)
    # align lines with floor on the right
    lines = [line.ljust(width, TOK_FLOOR) for line in lines]

    layout = []
    items = []
    for line in lines:
        layout_row = []
        items_row = []
        for ch in line:
            if ch == TOK_WALL:
                layout_row.append(TOK_WALL)
            elif ch in (TOK_GOAL, TOK_BOX_ON_GOAL, TOK_PLAYER_ON_GOAL):
                layout_row.append(TOK_GOAL)
            else:
                layout_row.append(TOK_FLOOR)

            if ch in (TOK_BOX, TOK_BOX_ON_GOAL):
                items_row.append(TOK_BOX)
            elif ch in (TOK_PLAYER, TOK_PLAYER_ON_GOAL):
                items_row.append(TOK_PLAYER)
            else:
                items_row.append(TOK_FLOOR)
        layout.append(layout_row)
        items.append(items_row)

    return parse_grids(width, height, layout, items)


def parse_level_file(path: str) -> Level:
    with open(path, "r", encoding="utf-8") as f:
        return parse_level_str(f.read())
