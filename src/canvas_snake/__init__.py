# src/canvas_snake/__init__.py
"""Grid snake game: fixed-tick core plus pygame and headless adapters."""

from .config import Config, Grid, Heading
from .controller import GameController, GameView, Lifecycle, Outcome

__all__ = ["Config", "Grid", "Heading", "GameController", "GameView", "Lifecycle", "Outcome"]
