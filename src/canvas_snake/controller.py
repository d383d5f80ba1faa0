# controller.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import random
from typing import Callable, Optional, Tuple

from .config import CFG, Cell, Config, Grid, Heading
from .snake import Snake
from . import collision, food as food_placement
from .collision import Collision

logger = logging.getLogger(__name__)


class Lifecycle(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Outcome(Enum):
    NONE = "none"
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


# ---------- Read-only view for adapters ----------
@dataclass(frozen=True)
class GameView:
    snake: Tuple[Cell, ...]      # head at index 0
    food: Optional[Cell]
    heading: Heading
    score: int
    high_score: int
    lifecycle: Lifecycle
    outcome: Outcome
    ticks: int
    grid: Grid


class GameController:
    """
    Owns one game: snake, food, score, high score and lifecycle.

    Adapters talk to it through `start()`, `pause()`, `resume()`,
    `toggle_pause()`, `reset()`, `set_heading()` and `handle_intent()`;
    the scheduler calls `tick()`.

    `renderer` is anything with `draw(snake, food, grid)`; it is called
    after every successful tick, after the tick that fills the board, and
    after reset. `store` is the high score
    persistence adapter (`load()` / `save(int)`).
    """

    def __init__(
        self,
        scheduler,
        store,
        renderer=None,
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
        on_game_over: Optional[Callable[["GameController"], None]] = None,
    ):
        self.cfg = cfg
        self.grid = cfg.grid
        self.scheduler = scheduler
        self.store = store
        self.renderer = renderer
        self.rng = rng or random.Random(cfg.seed)
        self.on_game_over = on_game_over

        self.high_score: int = store.load()
        self.lifecycle = Lifecycle.IDLE
        self.outcome = Outcome.NONE
        self._timer = None

        self.snake: Snake
        self.food: Optional[Cell]
        self.score: int
        self.ticks: int
        self._prepare_round()

    # ---------- Lifecycle transitions ----------
    def start(self) -> bool:
        if self.lifecycle is not Lifecycle.IDLE:
            logger.debug("start ignored in %s", self.lifecycle.name)
            return False
        self.lifecycle = Lifecycle.RUNNING
        self._arm()
        logger.info("Game started (high score %d)", self.high_score)
        return True

    def pause(self) -> bool:
        if self.lifecycle is not Lifecycle.RUNNING:
            return False
        self._disarm()
        self.lifecycle = Lifecycle.PAUSED
        logger.info("Game paused at score %d", self.score)
        return True

    def resume(self) -> bool:
        if self.lifecycle is not Lifecycle.PAUSED:
            return False
        self.lifecycle = Lifecycle.RUNNING
        self._arm()
        logger.info("Game resumed")
        return True

    def toggle_pause(self) -> bool:
        if self.lifecycle is Lifecycle.RUNNING:
            return self.pause()
        return self.resume()

    def reset(self) -> None:
        self._disarm()
        self.lifecycle = Lifecycle.IDLE
        self._prepare_round()
        logger.debug("Game reset")
        self._render()

    # ---------- Input ----------
    def set_heading(self, heading: Heading) -> bool:
        """Buffer a heading for the next tick. Only honoured while running."""
        if self.lifecycle is not Lifecycle.RUNNING:
            logger.debug("Heading %s ignored in %s", heading.name, self.lifecycle.name)
            return False
        return self.snake.request(heading)

    def handle_intent(self, intent: str) -> bool:
        """Route an input symbol (direction, pause, start, reset)."""
        if intent in ("up", "down", "left", "right"):
            return self.set_heading(Heading.from_name(intent))
        if intent == "pause":
            return self.toggle_pause()
        if intent == "start":
            return self.start()
        if intent == "reset":
            self.reset()
            return True
        logger.debug("Unknown intent %r", intent)
        return False

    # ---------- Simulation ----------
    def tick(self) -> bool:
        """
        Advance the game by one step.
        Returns True if the snake is still alive afterwards.
        """
        if self.lifecycle is not Lifecycle.RUNNING:
            return False

        heading = self.snake.commit()
        new_head = self.snake.advance(heading)
        ate = collision.is_food_eaten(new_head, self.food)
        if ate:
            self.snake.grow()
        else:
            self.snake.shrink()
        self.ticks += 1

        hit = collision.evaluate(self.snake.cells, self.food, self.grid.dimension)
        if hit is Collision.WALL:
            self._end(Outcome.WALL)
            return False
        if hit is Collision.SELF:
            self._end(Outcome.SELF)
            return False

        if ate:
            self._eat()
            if self.lifecycle is Lifecycle.GAME_OVER:
                return False

        self._render()
        return True

    def snapshot(self) -> GameView:
        return GameView(
            snake=tuple(self.snake.cells),
            food=self.food,
            heading=self.snake.heading,
            score=self.score,
            high_score=self.high_score,
            lifecycle=self.lifecycle,
            outcome=self.outcome,
            ticks=self.ticks,
            grid=self.grid,
        )

    # ---------- Internals ----------
    def _prepare_round(self) -> None:
        self.snake = Snake([self.grid.center], Heading.NONE)
        self.score = 0
        self.ticks = 0
        self.outcome = Outcome.NONE
        self.food = food_placement.place(self.snake.cells, self.grid.dimension, self.rng)

    def _eat(self) -> None:
        self.score += self.cfg.score_per_food
        if self.score > self.high_score:
            self.high_score = self.score
            self.store.save(self.high_score)
        logger.debug("Ate food at %s, score %d", self.food, self.score)

        if len(self.snake) >= self.grid.capacity:
            self.food = None
            self._render()
            self._end(Outcome.BOARD_FULL)
            return
        self.food = food_placement.place(self.snake.cells, self.grid.dimension, self.rng)

    def _end(self, outcome: Outcome) -> None:
        self._disarm()
        self.lifecycle = Lifecycle.GAME_OVER
        self.outcome = outcome
        logger.info("Game over (%s): score=%d high=%d ticks=%d",
                    outcome.value, self.score, self.high_score, self.ticks)
        if self.on_game_over is not None:
            self.on_game_over(self)

    def _arm(self) -> None:
        self._disarm()
        self._timer = self.scheduler.schedule(self.cfg.tick_ms, self.tick)

    def _disarm(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _render(self) -> None:
        if self.renderer is not None:
            self.renderer.draw(self.snake.cells, self.food, self.grid)
