# gui.py
# Headless pygame rendering of solved boards to PNG images

from __future__ import annotations

import calendar
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from board import DAY_CELLS, MONTH_CELLS

logger = logging.getLogger(__name__)

CELL_SIZE = 64
TOP_BAR_HEIGHT = 120

# Colors – higher contrast, refined dark mode
BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
GRID = (90, 90, 95)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)
ILLEGAL = (45, 45, 49)

DATE_BORDER = (220, 90, 90)

# Indexed by (piece id - 1) % len
PIECE_COLORS: List[Tuple[int, int, int]] = [
    (60, 200, 80),
    (45, 140, 255),
    (255, 190, 60),
    (190, 70, 210),
    (90, 220, 220),
    (250, 80, 80),
    (210, 145, 50),
    (110, 120, 255),
    (255, 160, 210),
]


def _month_short_name(month: int) -> str:
    return calendar.month_abbr[month].title()


def piece_color(piece_id: int) -> Tuple[int, int, int]:
    return PIECE_COLORS[(piece_id - 1) % len(PIECE_COLORS)]


def image_size(grid: Sequence[Sequence[int]]) -> Tuple[int, int]:
    """Pixel size of a bordered grid drawn below the top bar."""
    return (len(grid[0]) - 2) * CELL_SIZE, (len(grid) - 2) * CELL_SIZE + TOP_BAR_HEIGHT


def cell_center(row: int, col: int) -> Tuple[int, int]:
    """Pixel centre of bordered cell (row, col)."""
    return (
        (col - 1) * CELL_SIZE + CELL_SIZE // 2,
        TOP_BAR_HEIGHT + (row - 1) * CELL_SIZE + CELL_SIZE // 2,
    )


def _blit_centered(screen: pygame.Surface, font: pygame.font.Font, text: str, x: int, y: int, color) -> None:
    text_surf = font.render(text, True, color)
    screen.blit(
        text_surf,
        (
            x + (CELL_SIZE - text_surf.get_width()) // 2,
            y + (CELL_SIZE - text_surf.get_height()) // 2,
        ),
    )


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    title: str,
    subtitle: str = "",
):
    width = screen.get_width()
    pygame.draw.rect(screen, BG, (0, 0, width, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(16, 16, width - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render(title, True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 12))

    if subtitle:
        sub_surf = label_font.render(subtitle, True, TEXT_SECONDARY)
        screen.blit(sub_surf, (card_rect.x + 20, card_rect.y + 48))


def draw_solution_grid(
    screen: pygame.Surface,
    grid: Sequence[Sequence[int]],
    month: Optional[int] = None,
    day: Optional[int] = None,
    font: Optional[pygame.font.Font] = None,
):
    """
    Draws the interior of a bordered, labelled grid.
    Positive cells are coloured by piece id; month/day cells get their label.
    """
    date_labels = {}
    if month is not None:
        date_labels[MONTH_CELLS[month]] = _month_short_name(month).upper()
    if day is not None:
        date_labels[DAY_CELLS[day]] = str(day)

    for r in range(1, len(grid) - 1):
        for c in range(1, len(grid[r]) - 1):
            x = (c - 1) * CELL_SIZE
            y = TOP_BAR_HEIGHT + (r - 1) * CELL_SIZE
            rect = pygame.Rect(x + 2, y + 2, CELL_SIZE - 4, CELL_SIZE - 4)
            value = grid[r][c]

            if (r, c) in date_labels:
                pygame.draw.rect(screen, BG, rect, border_radius=12)
                pygame.draw.rect(screen, DATE_BORDER, rect, width=2, border_radius=12)
                if font is not None:
                    _blit_centered(screen, font, date_labels[(r, c)], x, y, TEXT_MAIN)
            elif value < 0:
                pygame.draw.rect(screen, ILLEGAL, rect, border_radius=12)
            elif value > 0:
                pygame.draw.rect(screen, piece_color(value), rect, border_radius=12)
                if font is not None:
                    _blit_centered(screen, font, str(value), x, y, (255, 255, 255))
            else:
                pygame.draw.rect(screen, BG, rect, border_radius=12)
                pygame.draw.rect(screen, GRID, rect, width=1, border_radius=12)


def save_solution_image(
    grid: Sequence[Sequence[int]],
    path,
    month: Optional[int] = None,
    day: Optional[int] = None,
    title: Optional[str] = None,
) -> Path:
    pygame.font.init()
    title_font = pygame.font.Font(None, 40)
    label_font = pygame.font.Font(None, 30)
    cell_font = pygame.font.Font(None, 30)

    screen = pygame.Surface(image_size(grid))
    screen.fill(BG)

    subtitle = ""
    if month is not None and day is not None:
        subtitle = f"{_month_short_name(month)} {day}"
    draw_top_bar(screen, title_font, label_font, title or "Calendar Puzzle", subtitle)
    draw_solution_grid(screen, grid, month, day, cell_font)

    path = Path(path)
    pygame.image.save(screen, str(path))
    logger.debug("saved %s", path)
    return path


class ImageSink:
    """Renderer that writes each solution it receives as a numbered PNG."""

    def __init__(self, directory, month: Optional[int] = None, day: Optional[int] = None):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.month = month
        self.day = day
        self.count = 0

    def __call__(self, grid: List[List[int]]) -> None:
        self.count += 1
        save_solution_image(
            grid,
            self.directory / f"solution_{self.count:04d}.png",
            self.month,
            self.day,
            title=f"Solution {self.count}",
        )
