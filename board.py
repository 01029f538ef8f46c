# board.py
# Labelled board grid, calendar geometry, month/day cell maps

from __future__ import annotations

from typing import Sequence

from shapes import Shape

EMPTY = 0
BLOCKED = -1

# Playable 7x7 calendar layout; months fill rows 0-1, days rows 2-6
CALENDAR_LAYOUT: list[list[int]] = [
    [0, 0, 0, 0, 0, 0, -1],
    [0, 0, 0, 0, 0, 0, -1],
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, -1, -1, -1, -1],
]

# Month coordinates (1–12), bordered
MONTH_CELLS: dict[int, tuple[int, int]] = {
    month: ((month - 1) // 6 + 1, (month - 1) % 6 + 1) for month in range(1, 13)
}

# Day coordinates (1–31), bordered
DAY_CELLS: dict[int, tuple[int, int]] = {
    day: ((day - 1) // 7 + 3, (day - 1) % 7 + 1) for day in range(1, 32)
}


class InvalidDimensions(ValueError):
    """The playable grid is empty or its rows differ in length."""


class Board:
    """Grid of cell labels wrapped in a one-cell sentinel border.

    0 is empty, negative is blocked, positive is the id of a placed piece.
    ``place`` and ``clear`` do no checking; the solver guarantees they are
    only used on feasible anchors and in matching pairs.
    """

    def __init__(self, matrix: Sequence[Sequence[int]], sentinel: int = BLOCKED):
        if not matrix or not matrix[0]:
            raise InvalidDimensions("board needs at least one row and one column")
        width = len(matrix[0])
        for idx, row in enumerate(matrix):
            if len(row) != width:
                raise InvalidDimensions(
                    f"row {idx} has {len(row)} cells, expected {width}"
                )
        self.cells: list[list[int]] = [list(row) for row in matrix]
        self.rows = len(self.cells)
        self.cols = width
        self.add_border(sentinel)

    def add_border(self, sentinel: int = BLOCKED) -> None:
        for row in self.cells:
            row.insert(0, sentinel)
            row.append(sentinel)
        self.cols += 2
        self.cells.insert(0, [sentinel] * self.cols)
        self.cells.append([sentinel] * self.cols)
        self.rows += 2

    def place(self, row: int, col: int, shape: Shape, piece_id: int) -> None:
        for dr, dc in shape:
            self.cells[row + dr][col + dc] = piece_id

    def clear(self, row: int, col: int, shape: Shape) -> None:
        for dr, dc in shape:
            self.cells[row + dr][col + dc] = EMPTY

    def is_free(self, row: int, col: int) -> bool:
        return self.cells[row][col] == EMPTY

    def block(self, row: int, col: int) -> None:
        self.cells[row][col] = BLOCKED

    def unblock(self, row: int, col: int) -> None:
        self.cells[row][col] = EMPTY

    def snapshot(self) -> list[list[int]]:
        return [list(row) for row in self.cells]

    def fillable_count(self) -> int:
        return sum(row.count(EMPTY) for row in self.cells)
