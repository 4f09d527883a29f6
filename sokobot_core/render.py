from typing import Iterable

from .board import Board


def render_ascii(board: Board, player: int, boxes: Iterable[int]) -> str:
    """ASCII visualization of a configuration in the combined level notation."""
    box_set = set(boxes)
    out_lines = []
    for r in range(board.height):
        row_chars = []
        for c in range(board.width):
            idx = r * board.width + c
            if board.is_wall(idx):
                row_chars.append('#')
                continue
            has_goal = board.is_goal_cell(idx)
            if idx == player:
                row_chars.append('+' if has_goal else '@')
            elif idx in box_set:
                row_chars.append('*' if has_goal else '$')
            else:
                row_chars.append('.' if has_goal else ' ')
        out_lines.append(''.join(row_chars).rstrip())
    return "\n".join(out_lines)
