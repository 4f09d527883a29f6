from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
import os

from sokobot_core.errors import SokobanError
from sokobot_core.parser import parse_level_str

COMMENT_PREFIX = ";"
PACK_SUFFIX = ".txt"


@dataclass
class LevelRef:
    path: str
    index: int  # position of the level inside its pack file

    @property
    def level_id(self) -> str:
        return f"{self.path}#{self.index}"


def split_on_blank_lines(text: str) -> List[str]:
    """Cuts a pack into level blocks at blank lines; ';' lines are titles/comments."""
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line.lstrip().startswith(COMMENT_PREFIX):
            continue
        if line.strip():
            cur.append(line)
        elif cur:
            blocks.append("\n".join(cur))
            cur = []
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def _pack_files(root_dir: str, rel_dirs: List[str]) -> Iterator[str]:
    for rel in rel_dirs:
        pack_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(pack_dir):
            continue
        for name in sorted(os.listdir(pack_dir)):
            if name.endswith(PACK_SUFFIX):
                yield os.path.join(pack_dir, name)


def iterate_level_strings(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[LevelRef, str]]:
    """Yields (reference, level text) for every level of every pack under root_dir/rel_dirs."""
    for path in _pack_files(root_dir, rel_dirs):
        with open(path, "r", encoding="utf-8") as f:
            blocks = split_on_blank_lines(f.read())
        for i, block in enumerate(blocks):
            yield LevelRef(path=path, index=i), block


def count_boxes(level_str: str) -> int:
    return level_str.count("$") + level_str.count("*")


def dims(level_str: str) -> Tuple[int, int]:
    """(width, height) of the level text, ignoring blank lines."""
    rows = [ln for ln in level_str.splitlines() if ln.strip()]
    return max((len(ln) for ln in rows), default=0), len(rows)


def filter_level(level_str: str, *, max_w: Optional[int] = None, max_h: Optional[int] = None,
                 min_b: Optional[int] = None, max_b: Optional[int] = None) -> bool:
    """True if the level fits the size/box bounds and passes validation."""
    w, h = dims(level_str)
    b = count_boxes(level_str)
    bounds = ((max_w, w, 1), (max_h, h, 1), (min_b, b, -1), (max_b, b, 1))
    for limit, value, sign in bounds:
        if limit is not None and sign * value > sign * limit:
            return False
    try:
        parse_level_str(level_str)
    except SokobanError:
        return False
    return True
