# collision.py
from __future__ import annotations
from enum import Enum
from typing import Optional, Sequence

from .config import Cell


class Collision(Enum):
    NONE = "none"
    WALL = "wall"
    SELF = "self"
    FOOD = "food"


def is_wall_collision(head: Cell, dimension: int) -> bool:
    x, y = head
    return x < 0 or x >= dimension or y < 0 or y >= dimension


def is_self_collision(head: Cell, body: Sequence[Cell]) -> bool:
    """`body` excludes the head itself, i.e. snake[1:]."""
    return head in body


def is_food_eaten(head: Cell, food: Optional[Cell]) -> bool:
    return food is not None and head == food


def evaluate(snake: Sequence[Cell], food: Optional[Cell], dimension: int) -> Collision:
    """
    Classify the snake's position after a move.
    Wall is checked first, then self, then food.
    """
    head = snake[0]
    if is_wall_collision(head, dimension):
        return Collision.WALL
    if is_self_collision(head, snake[1:]):
        return Collision.SELF
    if is_food_eaten(head, food):
        return Collision.FOOD
    return Collision.NONE
