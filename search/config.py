"""
Search settings, loadable from a YAML file.

Example (configs/solver.yaml):

    search:
      heuristic: pushes
      ordering: astar
      verify_states: false
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

import yaml

from sokobot_core.context import DEFAULT_UNREACHABLE_PENALTY
from sokobot_core.zobrist import DEFAULT_SEED

logger = logging.getLogger(__name__)

HEURISTICS = ("pushes", "zero")
ORDERINGS = ("astar", "scaled")


@dataclass(frozen=True)
class SearchConfig:
    """
    Attributes:
        heuristic: "pushes" (pattern database sum) or "zero" (uniform cost)
        ordering: "astar" for (f, tie) ordering, "scaled" for g + h*10000 + tie
        verify_states: keep full (player, boxes) per hash to tell collisions apart
        improve_open: re-queue an open state reached again with a smaller g;
            false keeps the first insertion of every state, never re-queued
        zobrist_seed: seed of the Zobrist key table
        unreachable_penalty: heuristic cost of a box with no push path to a goal
        node_limit: stop after this many expansions (None: run to the end)
        time_limit_s: stop after this many seconds (None: run to the end)
    """
    heuristic: str = "pushes"
    ordering: str = "astar"
    verify_states: bool = False
    improve_open: bool = True
    zobrist_seed: int = DEFAULT_SEED
    unreachable_penalty: int = DEFAULT_UNREACHABLE_PENALTY
    node_limit: Optional[int] = None
    time_limit_s: Optional[float] = None

    def __post_init__(self) -> None:
        if self.heuristic not in HEURISTICS:
            raise ValueError(f"heuristic must be one of {HEURISTICS}, got {self.heuristic!r}")
        if self.ordering not in ORDERINGS:
            raise ValueError(f"ordering must be one of {ORDERINGS}, got {self.ordering!r}")
        if self.unreachable_penalty < 0:
            raise ValueError("unreachable_penalty must be >= 0")
        if self.node_limit is not None and self.node_limit <= 0:
            raise ValueError("node_limit must be positive")
        if self.time_limit_s is not None and self.time_limit_s <= 0:
            raise ValueError("time_limit_s must be positive")


DEFAULT_CONFIG = SearchConfig()


def config_from_dict(data: Dict[str, Any], base: SearchConfig = DEFAULT_CONFIG) -> SearchConfig:
    known = {f.name for f in fields(SearchConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"unknown search settings: {', '.join(unknown)}")
    return replace(base, **data)


def load_config(path: str) -> SearchConfig:
    """Reads the `search:` section of a YAML file over the defaults."""
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    section = cfg.get("search", {}) or {}
    if not isinstance(section, dict):
        raise ValueError(f"{path}: 'search' must be a mapping")
    config = config_from_dict(section)
    logger.debug("Search config loaded from %s: %s", path, config)
    return config
