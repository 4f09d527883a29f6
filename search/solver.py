"""Public entry points: solve a puzzle given as grids or as an ASCII level."""

from __future__ import annotations
from typing import Optional, Sequence, Union
import logging

from sokobot_core.context import build_context
from sokobot_core.parser import Level, parse_grids, parse_level_str
from .astar import astar, Result
from .config import SearchConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class NoSolution:
    """Marker returned when no move sequence solves the puzzle."""
    _instance: Optional["NoSolution"] = None

    def __new__(cls) -> "NoSolution":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_SOLUTION"


NO_SOLUTION = NoSolution()


def run_search(level: Level, config: Optional[SearchConfig] = None) -> Result:
    """Builds the shared tables for a level and runs the search; returns the stats dict."""
    config = config or DEFAULT_CONFIG
    board = level.board
    logger.debug("building tables for %dx%d board with %d boxes", board.width, board.height, len(level.boxes))
    ctx = build_context(level.board, seed=config.zobrist_seed,
                        unreachable_penalty=config.unreachable_penalty)
    return astar(ctx, level.player, level.boxes, config)


def solve_parsed(level: Level, config: Optional[SearchConfig] = None) -> Union[str, NoSolution]:
    res = run_search(level, config)
    if not res["success"]:
        return NO_SOLUTION
    return res["moves"]  # type: ignore[return-value]


def solve(
    width: int,
    height: int,
    layout: Sequence[Sequence[str]],
    items: Sequence[Sequence[str]],
    config: Optional[SearchConfig] = None,
) -> Union[str, NoSolution]:
    """Solves a puzzle given as a layout grid ('#', '.', floor) and an items grid ('@', '$').

    Returns the move string (chars u/d/l/r, possibly empty) or NO_SOLUTION.
    Malformed input raises a SokobanError subclass before any search.
    """
    return solve_parsed(parse_grids(width, height, layout, items), config)


def solve_level(level_str: str, config: Optional[SearchConfig] = None) -> Union[str, NoSolution]:
    return solve_parsed(parse_level_str(level_str), config)
