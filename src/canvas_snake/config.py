# config.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Cell = Tuple[int, int]

# ----- Colors -----
BG         = (45, 55, 72)
HEAD_GREEN = (56, 161, 105)
BODY_GREEN = (72, 187, 120)
FOOD_RED   = (245, 101, 101)
TEXT       = (220, 220, 230)
BUTTON     = (74, 85, 104)
BUTTON_OFF = (60, 66, 80)

# Gap left between neighbouring cells when drawing
CELL_GAP = 2

# Height of the HUD/button strip under the board
PANEL_H = 88


# ----- Directions (dx, dy) -----
class Heading(Enum):
    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> "Heading":
        """Map an intent symbol ("up", "left", ...) to a heading."""
        return cls[name.strip().upper()]


# ----- Grid -----
@dataclass(frozen=True)
class Grid:
    dimension: int = 20   # cells per side
    cell_size: int = 20   # pixels per cell, rendering only

    def __post_init__(self):
        # One cell for the snake and one for food, at least.
        if self.dimension < 2:
            raise ValueError(f"dimension must be at least 2, got {self.dimension}")
        if self.cell_size < 1:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")

    @property
    def capacity(self) -> int:
        return self.dimension * self.dimension

    @property
    def center(self) -> Cell:
        return (self.dimension // 2, self.dimension // 2)

    @property
    def pixel_size(self) -> int:
        return self.dimension * self.cell_size

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.dimension and 0 <= y < self.dimension


# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    tick_ms: int = 150
    dimension: int = 20
    cell_size: int = 20
    score_per_food: int = 10
    highscore_path: str = "data/highscore.json"

    def __post_init__(self):
        Grid(dimension=self.dimension, cell_size=self.cell_size)
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.score_per_food <= 0:
            raise ValueError(f"score_per_food must be positive, got {self.score_per_food}")

    @property
    def grid(self) -> Grid:
        return Grid(dimension=self.dimension, cell_size=self.cell_size)


CFG = Config()
