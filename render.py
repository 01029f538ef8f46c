# render.py
# Box-drawing text view of a labelled board

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

UP = 1
LEFT = 1 << 1
DOWN = 1 << 2
RIGHT = 1 << 3

# Which of the four lines meeting at an intersection separate two pieces
GLYPHS: dict[int, str] = {
    0: " ",
    UP | RIGHT: "└",
    UP | LEFT: "┘",
    UP | DOWN: "│",
    DOWN | RIGHT: "┌",
    LEFT | DOWN: "┐",
    LEFT | RIGHT: "─",
    UP | LEFT | DOWN: "┤",
    UP | LEFT | RIGHT: "┴",
    UP | DOWN | RIGHT: "├",
    LEFT | DOWN | RIGHT: "┬",
    UP | LEFT | DOWN | RIGHT: "┼",
}


def junction_mask(grid: Sequence[Sequence[int]], i: int, j: int) -> int:
    """Mask for the intersection below-right of cell (i, j)."""
    mask = 0
    if grid[i][j] != grid[i][j + 1]:
        mask |= UP
    if grid[i][j] != grid[i + 1][j]:
        mask |= LEFT
    if grid[i + 1][j] != grid[i + 1][j + 1]:
        mask |= DOWN
    if grid[i][j + 1] != grid[i + 1][j + 1]:
        mask |= RIGHT
    return mask


def render_board(grid: Sequence[Sequence[int]]) -> str:
    lines = []
    for i in range(len(grid) - 1):
        lines.append(
            "".join(GLYPHS[junction_mask(grid, i, j)] + " " for j in range(len(grid[i]) - 1))
        )
    return "\n".join(lines)


def print_board(grid: Sequence[Sequence[int]], stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(render_board(grid) + "\n")
