# shapes.py
# Shape normalization and the dihedral transforms used for piece orientations

from __future__ import annotations

from typing import Iterable

Offset = tuple[int, int]
Shape = tuple[Offset, ...]
Matrix = tuple[int, int, int, int]

# (a, b, c, d) maps (r, c) -> (r*a + c*b, r*c + c*d).
# Identity, the three rotations, then the four mirror compositions.
LINEAR_MAPS: tuple[Matrix, ...] = (
    (1, 0, 0, 1),
    (0, -1, 1, 0),
    (-1, 0, 0, -1),
    (0, 1, -1, 0),
    (-1, 0, 0, 1),
    (0, 1, 1, 0),
    (1, 0, 0, -1),
    (0, -1, -1, 0),
)


def normalize(shape: Iterable[Offset]) -> Shape:
    """Translate a shape so its minimum row and minimum column are both 0."""
    cells = list(shape)
    min_r = min(r for r, _ in cells)
    min_c = min(c for _, c in cells)
    return tuple((r - min_r, c - min_c) for r, c in cells)


def canonical_order(shape: Iterable[Offset]) -> Shape:
    return tuple(sorted(shape))


def apply_linear_map(shape: Iterable[Offset], matrix: Matrix) -> Shape:
    a, b, c, d = matrix
    moved = [(r * a + col * b, r * c + col * d) for r, col in shape]
    return canonical_order(normalize(moved))


def shape_str(shape: Iterable[Offset]) -> str:
    """Multiline 'X' picture of a shape, one text row per grid row."""
    cells = set(normalize(shape))
    height = max(r for r, _ in cells) + 1
    width = max(c for _, c in cells) + 1
    lines = []
    for r in range(height):
        lines.append("".join("X" if (r, c) in cells else " " for c in range(width)).rstrip())
    return "\n".join(lines)
