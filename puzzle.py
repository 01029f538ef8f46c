# puzzle.py
# Calendar puzzle: blocks the month/day cells and runs the solver

from __future__ import annotations

import logging
from typing import Optional

from board import CALENDAR_LAYOUT, DAY_CELLS, MONTH_CELLS, Board
from pieces import calendar_pieces
from solver import Renderer, Solver

logger = logging.getLogger(__name__)


class InvalidDate(ValueError):
    """Month outside 1-12 or day outside 1-31."""


class CalendarPuzzle:
    """The 7x7 calendar board with its eight pieces.

    An instance is single-use: ``solve_for`` leaves the two date cells
    blocked, so a second date needs a fresh puzzle.
    """

    def __init__(self, renderer: Optional[Renderer] = None):
        self.board = Board(CALENDAR_LAYOUT)
        self.pieces = calendar_pieces()
        self.solver = Solver(self.board, self.pieces, renderer)
        self.month_cells = dict(MONTH_CELLS)
        self.day_cells = dict(DAY_CELLS)

    def solve_for(self, month: int, day: int, render: bool = False) -> int:
        if month not in self.month_cells:
            raise InvalidDate(f"month must be between 1 and 12, got {month}")
        if day not in self.day_cells:
            raise InvalidDate(f"day must be between 1 and 31, got {day}")

        for row, col in (self.month_cells[month], self.day_cells[day]):
            self.board.block(row, col)
        logger.info(
            "solving for month %d (cell %s), day %d (cell %s)",
            month,
            self.month_cells[month],
            day,
            self.day_cells[day],
        )
        return self.solver.solve(render)


def solve_for_date(
    month: int,
    day: int,
    render: bool = False,
    renderer: Optional[Renderer] = None,
) -> int:
    """Count the tilings for one date on a fresh puzzle."""
    return CalendarPuzzle(renderer).solve_for(month, day, render)
