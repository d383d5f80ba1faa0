# render.py
from __future__ import annotations
from typing import Optional, Sequence, Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import BG, BODY_GREEN, CELL_GAP, FOOD_RED, HEAD_GREEN, Cell, Grid


# ---------- Helpers ----------
def cell_rect(gx: int, gy: int, cell_size: int) -> pygame.Rect:
    size = max(cell_size - CELL_GAP, 1)
    return pygame.Rect(gx * cell_size, gy * cell_size, size, size)


class BoardRenderer:
    """
    Draws the board onto its own pygame surface, `grid.pixel_size` square.
    The host blits `surface` onto the window every frame.
    """

    def __init__(self, grid: Grid):
        self.surface = pygame.Surface((grid.pixel_size, grid.pixel_size))
        self.surface.fill(BG)

    def draw(self, snake: Sequence[Cell], food: Optional[Cell], grid: Grid) -> None:
        self.surface.fill(BG)
        cs = grid.cell_size

        # body, then head on top in a darker green
        for x, y in snake[1:]:
            if grid.contains((x, y)):
                pygame.draw.rect(self.surface, BODY_GREEN, cell_rect(x, y, cs))
        if snake and grid.contains(snake[0]):
            pygame.draw.rect(self.surface, HEAD_GREEN, cell_rect(snake[0][0], snake[0][1], cs))

        # food as a round cell
        if food is not None:
            fx, fy = food
            radius = max((cs - CELL_GAP) // 2, 1)
            center = (fx * cs + cs // 2, fy * cs + cs // 2)
            pygame.draw.circle(self.surface, FOOD_RED, center, radius)


class ArrayRenderer:
    """
    Headless renderer: keeps the last frame as a (H, W, 3) uint8 array.
    Food is drawn as a filled square here.
    """

    def __init__(self, grid: Grid):
        self.frame = np.zeros((grid.pixel_size, grid.pixel_size, 3), dtype=np.uint8)
        self.frame[:, :] = BG
        self.frames_drawn = 0

    def _fill(self, cell: Cell, color: Tuple[int, int, int], cs: int) -> None:
        x, y = cell
        size = max(cs - CELL_GAP, 1)
        self.frame[y * cs:y * cs + size, x * cs:x * cs + size] = color

    def draw(self, snake: Sequence[Cell], food: Optional[Cell], grid: Grid) -> None:
        cs = grid.cell_size
        self.frame[:, :] = BG
        for cell in snake[1:]:
            if grid.contains(cell):
                self._fill(cell, BODY_GREEN, cs)
        if snake and grid.contains(snake[0]):
            self._fill(snake[0], HEAD_GREEN, cs)
        if food is not None:
            self._fill(food, FOOD_RED, cs)
        self.frames_drawn += 1

    def color_at(self, cell: Cell, grid: Grid) -> Tuple[int, int, int]:
        """Colour at the top-left pixel of a cell."""
        x, y = cell
        r, g, b = self.frame[y * grid.cell_size, x * grid.cell_size]
        return (int(r), int(g), int(b))
