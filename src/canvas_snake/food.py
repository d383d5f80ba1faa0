# food.py
from __future__ import annotations
import random
from typing import Collection, Optional

from .config import Cell


class BoardFullError(ValueError):
    """Raised when every cell is occupied and no food can be placed."""


def place(occupied: Collection[Cell], dimension: int, rng: Optional[random.Random] = None) -> Cell:
    """
    Pick a free cell uniformly at random by rejection sampling.

    Callers must leave at least one free cell; a full board raises
    BoardFullError instead of sampling forever.
    """
    rng = rng or random
    taken = set(occupied)
    free = dimension * dimension - sum(
        1 for x, y in taken if 0 <= x < dimension and 0 <= y < dimension
    )
    if free <= 0:
        raise BoardFullError(f"no free cell on a {dimension}x{dimension} board")

    while True:
        fx = rng.randrange(dimension)
        fy = rng.randrange(dimension)
        if (fx, fy) not in taken:
            return (fx, fy)
