# persistence.py
from __future__ import annotations
import json
import logging
import os

logger = logging.getLogger(__name__)

HIGHSCORE_KEY = "snakeHighScore"


class MemoryHighScoreStore:
    """In-process store; used by tests and the headless simulator."""

    def __init__(self, value: int = 0):
        self.value = value
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = int(value)
        self.saves += 1


class JsonHighScoreStore:
    """
    High score kept as {"snakeHighScore": <int>} in a JSON file.
    A missing or unreadable file counts as 0.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            value = int(data.get(HIGHSCORE_KEY, 0))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        if value < 0:
            logger.warning("Ignoring negative high score %d in %s", value, self.path)
            return 0
        return value

    def save(self, value: int) -> None:
        folder = os.path.dirname(self.path)
        try:
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({HIGHSCORE_KEY: int(value)}, f)
        except OSError:
            logger.exception("Could not save high score to %s", self.path)
