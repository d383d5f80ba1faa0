# autopilot.py
from __future__ import annotations
import random
from typing import List, Optional

from .config import Heading
from .controller import GameView
from .snake import is_opposite

MOVES = (Heading.UP, Heading.DOWN, Heading.LEFT, Heading.RIGHT)


def best_moves_toward_food(view: GameView) -> List[Heading]:
    """
    Returns a preference ordering of moves, those that reduce Manhattan
    distance to food first. Does NOT check collisions.
    """
    hx, hy = view.snake[0]
    prefs: List[Heading] = []
    if view.food is not None:
        fx, fy = view.food
        if fx < hx:
            prefs.append(Heading.LEFT)
        elif fx > hx:
            prefs.append(Heading.RIGHT)
        if fy < hy:
            prefs.append(Heading.UP)
        elif fy > hy:
            prefs.append(Heading.DOWN)
    for d in MOVES:
        if d not in prefs:
            prefs.append(d)
    return prefs


def would_hit(view: GameView, heading: Heading) -> bool:
    """True if moving the head one cell along `heading` ends the game."""
    hx, hy = view.snake[0]
    nxt = (hx + heading.dx, hy + heading.dy)
    if not view.grid.contains(nxt):
        return True
    # the tail moves away this tick unless food is eaten
    body = view.snake[:-1] if nxt != view.food else view.snake
    return nxt in body


def choose(view: GameView, rng: Optional[random.Random] = None) -> str:
    """
    Greedy on food distance with simple safety:
    - prefer moves that reduce distance and are not fatal
    - otherwise any safe move
    - if boxed in, any legal move at random
    Returns an intent symbol ("up", "down", ...).
    """
    legal = [d for d in best_moves_toward_food(view) if not is_opposite(d, view.heading)]
    for d in legal:
        if not would_hit(view, d):
            return d.name.lower()
    rng = rng or random
    return rng.choice(legal).name.lower()


class Autopilot:
    """Intent source that steers a controller once per tick."""

    def __init__(self, controller, rng: Optional[random.Random] = None):
        self.controller = controller
        self.rng = rng or random.Random(0)
        self.enabled = True

    def steer(self) -> Optional[str]:
        if not self.enabled:
            return None
        intent = choose(self.controller.snapshot(), self.rng)
        self.controller.handle_intent(intent)
        return intent
