"""Play a floor from the command line, one key per line.

Usage:
    python scripts/play_text.py [--seed 7] [--width 12] [--height 8] [--enemies 10]

Type a key (h/j/k/l/y/u/b/n, left/right/up/down) and press Enter; an
empty line waits a turn; ``esc`` quits.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from ascension_army.frontend.keys import intent_for_key
from ascension_army.frontend.render import HELP_TEXT, player_status, render_map
from ascension_army.sim.core.errors import InvalidArgument
from ascension_army.sim.core.intent import Intent
from ascension_army.sim.core.rng import GameRNG
from ascension_army.sim.dungeon.floor_gen import FloorConfig, generate_floor
from ascension_army.sim.engine import TurnEngine
from ascension_army.sim.messages import MessageLog

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Line-based dungeon play")
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--width", type=int, default=12)
    parser.add_argument("--height", type=int, default=8)
    parser.add_argument("--enemies", type=int, default=10)
    parser.add_argument("--fog", action="store_true", default=False, help="Hide unrevealed cells")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = FloorConfig(
            width=args.width,
            height=args.height,
            enemy_count=args.enemies,
            sight_radius=2 if args.fog else None,
        )
        rng = GameRNG(args.seed)
        floor = generate_floor(config, rng.fork("floor"))
    except (InvalidArgument, ValidationError) as exc:
        logger.error("Invalid floor configuration: %s", exc)
        sys.exit(2)

    messages = MessageLog()
    engine = TurnEngine(floor, rng.fork("combat"), messages=messages, sight_radius=config.sight_radius)

    print(HELP_TEXT)
    while not engine.is_over:
        print(render_map(floor, fog=args.fog))
        print(player_status(floor))
        for line in messages.recent(2):
            print(f"  {line}")
        try:
            key = input("> ").strip()
        except EOFError:
            key = "esc"
        intent = Intent.none() if not key else intent_for_key(key)
        if intent is None:
            print(f"Unbound key {key!r}")
            continue
        engine.step(intent)

    print(render_map(floor))
    print(f"Game over: {engine.outcome}")


if __name__ == "__main__":
    main()
