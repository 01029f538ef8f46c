# pieces.py
# Piece definitions + rotations/flips

from __future__ import annotations

from typing import Iterable

from shapes import LINEAR_MAPS, Offset, Shape, apply_linear_map, canonical_order, normalize

# Base piece shapes as sets of (row, col); any translation is fine
PIECE_SHAPES: dict[str, set[tuple[int, int]]] = {
    "A": {(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)},
    "B": {(0, 0), (0, 1), (0, 2), (1, 2), (1, 3)},
    "C": {(0, 0), (-1, 0), (-1, -1), (1, 0), (1, 1)},
    "D": {(0, 0), (0, 1), (0, 2), (1, 1), (1, 2)},
    "E": {(0, 0), (0, 1), (0, 2), (1, 0), (2, 0)},
    "F": {(0, 0), (0, 1), (0, 2), (0, 3), (1, 2)},
    "G": {(0, 0), (-1, 0), (-1, -1), (1, 0), (1, -1)},
    "H": {(0, 0), (0, 1), (0, 2), (0, 3), (1, 0)},
}


def generate_orientations(shape: Iterable[Offset]) -> list[Shape]:
    """All unique rotations + flips, normalized and in canonical order."""
    base = normalize(shape)
    variants = {apply_linear_map(base, matrix) for matrix in LINEAR_MAPS}
    return sorted(variants)


def _anchor(shape: Shape) -> Shape:
    # Shift columns so the first cell (row-major) sits at (0, 0).
    bias = shape[0][1]
    return tuple((r, c - bias) for r, c in shape)


class Piece:
    """One polyomino with its orientation set and a search availability flag.

    Every shape is anchored on its first cell in row-major order, so placing
    a shape at (i, j) covers (i, j) itself plus cells after it in scan order.
    """

    def __init__(self, offsets: Iterable[Offset], name: str = ""):
        self.name = name
        self.shapes: tuple[Shape, ...] = tuple(_anchor(s) for s in generate_orientations(offsets))
        self.available = True

    @property
    def size(self) -> int:
        return len(self.shapes[0])

    def __repr__(self) -> str:
        return f"Piece({self.name!r}, orientations={len(self.shapes)}, available={self.available})"


def calendar_pieces() -> list[Piece]:
    """Fresh piece objects for the calendar puzzle, in catalogue order."""
    return [Piece(canonical_order(shape), name) for name, shape in PIECE_SHAPES.items()]
