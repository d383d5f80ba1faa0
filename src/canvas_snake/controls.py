# controls.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame  # type: ignore

from .config import PANEL_H

DIRECTIONS = ("up", "down", "left", "right")

# ----- Keyboard -----
KEY_INTENTS = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_SPACE: "pause",
    pygame.K_RETURN: "start",
    pygame.K_KP_ENTER: "start",
    pygame.K_r: "reset",
}


def intent_for_key(key: int) -> Optional[str]:
    return KEY_INTENTS.get(key)


# ----- On-screen buttons (mouse / touch) -----
@dataclass
class Button:
    label: str
    intent: str
    rect: pygame.Rect


def build_buttons(board_px: int) -> List[Button]:
    """
    Lifecycle buttons on the left of the panel strip, a direction pad on the
    right. Coordinates are window pixels; the panel starts at y=board_px.
    """
    top = board_px + 32
    h = 40
    buttons = [
        Button("Start", "start", pygame.Rect(8, top, 64, h)),
        Button("Pause", "pause", pygame.Rect(78, top, 64, h)),
        Button("Reset", "reset", pygame.Rect(148, top, 64, h)),
    ]
    pad = 26
    px = board_px - 3 * pad - 8
    py = board_px + 6
    buttons += [
        Button("^", "up", pygame.Rect(px + pad, py, pad - 2, pad - 2)),
        Button("<", "left", pygame.Rect(px, py + pad, pad - 2, pad - 2)),
        Button("v", "down", pygame.Rect(px + pad, py + pad, pad - 2, pad - 2)),
        Button(">", "right", pygame.Rect(px + 2 * pad, py + pad, pad - 2, pad - 2)),
    ]
    return buttons


def intent_at(pos: Tuple[int, int], buttons: List[Button]) -> Optional[str]:
    for button in buttons:
        if button.rect.collidepoint(pos):
            return button.intent
    return None


def window_size(board_px: int) -> Tuple[int, int]:
    return (board_px, board_px + PANEL_H)


def intent_for_event(event, buttons: List[Button], size: Tuple[int, int]) -> Optional[str]:
    """Translate one pygame event into an intent symbol, or None."""
    if event.type == pygame.KEYDOWN:
        return intent_for_key(event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        # touches also arrive as emulated mouse clicks; FINGERDOWN handles those
        if getattr(event, "touch", False):
            return None
        return intent_at(event.pos, buttons)
    if event.type == pygame.FINGERDOWN:
        # finger coordinates are normalised to [0, 1]
        pos = (int(event.x * size[0]), int(event.y * size[1]))
        return intent_at(pos, buttons)
    return None
