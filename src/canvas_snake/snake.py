# snake.py
from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from .config import Cell, Heading

logger = logging.getLogger(__name__)


def is_opposite(a: Heading, b: Heading) -> bool:
    """True when `a` is the exact 180° reverse of `b` (never for NONE)."""
    if a is Heading.NONE or b is Heading.NONE:
        return False
    return a.dx == -b.dx and a.dy == -b.dy


class Snake:
    """
    Occupied cells, head first, plus the applied and the buffered heading.

    A tick is `commit()` then `advance()`, followed by either `grow()` or
    `shrink()` depending on whether food was eaten.
    """

    def __init__(self, cells: Iterable[Cell], heading: Heading = Heading.NONE):
        self.cells: List[Cell] = list(cells)
        if not self.cells:
            raise ValueError("snake needs at least one cell")
        self.heading = heading
        self.pending = heading

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __contains__(self, cell) -> bool:
        return cell in self.cells

    @property
    def head(self) -> Cell:
        return self.cells[0]

    @property
    def body(self) -> List[Cell]:
        return self.cells[1:]

    # ---------- Heading buffer ----------
    def request(self, heading: Heading) -> bool:
        """Buffer a heading change for the next tick; reversals are dropped."""
        if heading is Heading.NONE or is_opposite(heading, self.heading):
            logger.debug("Rejected heading %s (current %s)", heading.name, self.heading.name)
            return False
        self.pending = heading
        return True

    def commit(self) -> Heading:
        self.heading = self.pending
        return self.heading

    # ---------- Movement ----------
    def advance(self, heading: Optional[Heading] = None) -> Cell:
        if heading is None:
            heading = self.heading
        hx, hy = self.head
        new_head = (hx + heading.dx, hy + heading.dy)
        self.cells.insert(0, new_head)
        return new_head

    def grow(self) -> None:
        # Tail stays where it is.
        pass

    def shrink(self) -> Cell:
        return self.cells.pop()
