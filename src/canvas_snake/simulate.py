# simulate.py
from __future__ import annotations
import argparse
import csv
import logging
import os
import random
from typing import List, Tuple

import numpy as np  # type: ignore

from .autopilot import Autopilot
from .config import Config
from .controller import GameController, Lifecycle
from .persistence import JsonHighScoreStore, MemoryHighScoreStore
from .scheduler import ManualScheduler

logger = logging.getLogger(__name__)


# --------------------------
# Episode loop
# --------------------------
def run_game(game: GameController, scheduler: ManualScheduler, pilot: Autopilot,
             max_ticks: int = 10_000) -> Tuple[int, int]:
    """
    Play one round from reset to game over with the autopilot steering.

    Returns:
        ticks: number of moves made
        score: final score
    """
    game.reset()
    game.start()
    while game.lifecycle is Lifecycle.RUNNING and game.ticks < max_ticks:
        pilot.steer()
        scheduler.advance()
    if game.lifecycle is Lifecycle.RUNNING:
        logger.warning("Stopping game after %d ticks without an ending", game.ticks)
    return game.ticks, game.score


def simulate(cfg: Config, games: int, store=None, max_ticks: int = 10_000) -> List[Tuple[int, int, int]]:
    """Run `games` autopilot rounds; returns (game, ticks, score) rows."""
    scheduler = ManualScheduler()
    game = GameController(scheduler, store or MemoryHighScoreStore(), cfg=cfg)
    pilot = Autopilot(game, rng=random.Random(cfg.seed))

    rows = []
    for n in range(1, games + 1):
        ticks, score = run_game(game, scheduler, pilot, max_ticks)
        print(f"{n},{ticks},{score}")
        rows.append((n, ticks, score))
    return rows


# --------------------------
# Main
# --------------------------
def main(argv=None):
    defaults = Config()
    parser = argparse.ArgumentParser(description="Play headless snake games with the autopilot.")
    parser.add_argument("--games", type=int, default=20)
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--dimension", type=int, default=defaults.dimension)
    parser.add_argument("--max-ticks", type=int, default=10_000)
    parser.add_argument(
        "--out",
        type=str,
        default="data/runs/autopilot.csv",
        help="CSV file for per-game results",
    )
    parser.add_argument(
        "--highscore",
        type=str,
        default=None,
        help="JSON high score file to update (default: keep it in memory)",
    )
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    cfg = Config(seed=args.seed, dimension=args.dimension)
    store = JsonHighScoreStore(args.highscore) if args.highscore else None

    print(f"Running {args.games} game(s) on a {cfg.dimension}x{cfg.dimension} board, seed={cfg.seed}")
    print("game,ticks,score")
    rows = simulate(cfg, args.games, store=store, max_ticks=args.max_ticks)

    folder = os.path.dirname(args.out)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(args.out, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(("game", "ticks", "score"))
        writer.writerows(rows)

    scores = np.array([score for _, _, score in rows], dtype=np.int64)
    if scores.size:
        print(f"\nmean score={scores.mean():.1f} max score={scores.max()}")
    print(f"Saved results → {args.out}")


if __name__ == "__main__":
    main()
