# solver.py
# Backtracking tiler: fills the board cell by cell in row-major order

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from board import EMPTY, Board
from pieces import Piece
from shapes import Shape

logger = logging.getLogger(__name__)

Renderer = Callable[[List[List[int]]], None]


class Solver:
    """Counts every tiling of ``board`` using each piece at most once.

    The search state lives in the board cells and the pieces' ``available``
    flags; both are restored on the way back out of every branch. The solver
    is not re-entrant, so concurrent solves need their own Board and Pieces.
    """

    def __init__(self, board: Board, pieces: List[Piece], renderer: Optional[Renderer] = None):
        self.board = board
        self.pieces = pieces
        self.renderer = renderer
        self.solutions = 0
        self.render = False

    def solve(self, render: bool = False) -> int:
        self.solutions = 0
        self.render = render and self.renderer is not None
        logger.debug(
            "solving %dx%d board, %d free cells, %d pieces",
            self.board.rows - 2,
            self.board.cols - 2,
            self.board.fillable_count(),
            len(self.pieces),
        )
        started = time.perf_counter()

        self.search(1, 1, 1)

        logger.debug(
            "found %d solutions in %.3fs", self.solutions, time.perf_counter() - started
        )
        return self.solutions

    def _fits(self, i: int, j: int, shape: Shape) -> bool:
        last_row = self.board.rows - 1
        last_col = self.board.cols - 1
        cells = self.board.cells
        for dr, dc in shape:
            r, c = i + dr, j + dc
            # Anchored shapes reach left of the anchor, past the 1-cell border
            if r < 1 or r >= last_row or c < 1 or c >= last_col or cells[r][c] != EMPTY:
                return False
        return True

    def search(self, i: int, j: int, next_id: int) -> None:
        board = self.board
        last_row = board.rows - 1
        last_col = board.cols - 1

        # Scan forward to the next empty interior cell
        while i < last_row and not board.is_free(i, j):
            j += 1
            if j == last_col:
                i += 1
                j = 1

        if i >= last_row:
            self.solutions += 1
            if self.render:
                self.renderer(board.snapshot())
            return

        for piece in self.pieces:
            if not piece.available:
                continue
            for shape in piece.shapes:
                if not self._fits(i, j, shape):
                    continue
                board.place(i, j, shape, next_id)
                piece.available = False
                self.search(i, j, next_id + 1)
                piece.available = True
                board.clear(i, j, shape)
