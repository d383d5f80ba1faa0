# main.py
from __future__ import annotations
import argparse
import logging
from typing import List

import pygame  # type: ignore

from .autopilot import Autopilot
from .config import BG, BUTTON, BUTTON_OFF, Config, TEXT
from .controller import GameController, Lifecycle, Outcome
from .controls import Button, build_buttons, intent_for_event, window_size
from .persistence import JsonHighScoreStore
from .render import BoardRenderer
from .scheduler import PygameScheduler

logger = logging.getLogger(__name__)


# ---------- HUD ----------
def button_enabled(button: Button, lifecycle: Lifecycle) -> bool:
    if button.intent == "start":
        return lifecycle is Lifecycle.IDLE
    if button.intent == "pause":
        return lifecycle in (Lifecycle.RUNNING, Lifecycle.PAUSED)
    if button.intent == "reset":
        return True
    return lifecycle is Lifecycle.RUNNING


def draw_panel(screen: pygame.Surface, font: pygame.font.Font, game: GameController,
               buttons: List[Button], autopilot: Autopilot) -> None:
    board_px = game.grid.pixel_size
    hud = f"Score: {game.score}   High: {game.high_score}"
    if autopilot.enabled:
        hud += "   [auto]"
    screen.blit(font.render(hud, True, TEXT), (8, board_px + 8))

    for button in buttons:
        enabled = button_enabled(button, game.lifecycle)
        pygame.draw.rect(screen, BUTTON if enabled else BUTTON_OFF, button.rect, border_radius=4)
        label = button.label
        if button.intent == "pause" and game.lifecycle is Lifecycle.PAUSED:
            label = "Resume"
        txt = font.render(label, True, TEXT if enabled else BG)
        screen.blit(txt, txt.get_rect(center=button.rect.center))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, board_px: int, lines: List[str]) -> None:
    # Dim the board with a translucent overlay
    overlay = pygame.Surface((board_px, board_px), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))
    screen.blit(overlay, (0, 0))

    y = board_px // 2 - 16 * (len(lines) - 1)
    for line in lines:
        txt = font.render(line, True, (240, 240, 250))
        screen.blit(txt, txt.get_rect(center=(board_px // 2, y)))
        y += 32


def draw_frame(screen, font, game: GameController, board: BoardRenderer,
               buttons: List[Button], autopilot: Autopilot) -> None:
    board_px = game.grid.pixel_size
    screen.fill(BG)
    screen.blit(board.surface, (0, 0))
    draw_panel(screen, font, game, buttons, autopilot)

    if game.lifecycle is Lifecycle.IDLE:
        draw_overlay(screen, font, board_px, ["Press Enter to start"])
    elif game.lifecycle is Lifecycle.PAUSED:
        draw_overlay(screen, font, board_px, ["PAUSED", "Space to resume"])
    elif game.lifecycle is Lifecycle.GAME_OVER:
        title = "YOU WIN" if game.outcome is Outcome.BOARD_FULL else "GAME OVER"
        draw_overlay(screen, font, board_px, [title, f"Score: {game.score}", "Press R to restart"])


# ---------- Entry point ----------
def parse_args(argv=None) -> argparse.Namespace:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Play snake in a pygame window.")
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--tick-ms", type=int, default=defaults.tick_ms,
                        help="milliseconds between snake moves")
    parser.add_argument("--dimension", type=int, default=defaults.dimension,
                        help="cells per side of the board")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size,
                        help="pixels per cell")
    parser.add_argument("--highscore", type=str, default=defaults.highscore_path,
                        help="JSON file holding the high score")
    parser.add_argument("--autopilot", action="store_true",
                        help="let the greedy autopilot steer (toggle with T)")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = Config(
        seed=args.seed,
        tick_ms=args.tick_ms,
        dimension=args.dimension,
        cell_size=args.cell_size,
        highscore_path=args.highscore,
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    board_px = cfg.grid.pixel_size
    size = window_size(board_px)
    screen = pygame.display.set_mode(size)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    board = BoardRenderer(cfg.grid)
    scheduler = PygameScheduler()
    game = GameController(scheduler, JsonHighScoreStore(cfg.highscore_path), renderer=board, cfg=cfg)
    game.reset()
    autopilot = Autopilot(game)
    autopilot.enabled = args.autopilot
    buttons = build_buttons(board_px)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break

            # 1) ticks
            if scheduler.dispatch(event):
                if game.lifecycle is Lifecycle.RUNNING:
                    autopilot.steer()
                continue

            if event.type == pygame.KEYDOWN and event.key == pygame.K_t:
                autopilot.enabled = not autopilot.enabled
                logger.info("Autopilot %s", "on" if autopilot.enabled else "off")
                continue

            # 2) input
            intent = intent_for_event(event, buttons, size)
            if intent is None:
                continue
            game.handle_intent(intent)
            if intent == "start" and game.lifecycle is Lifecycle.RUNNING:
                autopilot.steer()

        # 3) render
        draw_frame(screen, font, game, board, buttons, autopilot)
        pygame.display.flip()
        clock.tick(60)  # movement is paced by the tick timer, not the frame rate

    pygame.quit()


if __name__ == "__main__":
    main()
