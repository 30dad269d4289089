"""Run a batch of headless games with the random-walk agent and summarise them.

Usage:
    python scripts/simulate.py [--runs 200] [--seed 42] [--config floor.json] [--show-map]
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections import Counter

from pydantic import ValidationError

from ascension_army.frontend.render import player_status, render_map
from ascension_army.sim.core.errors import InvalidArgument
from ascension_army.sim.dungeon.floor_gen import FloorConfig
from ascension_army.sim.play_agents.random_agent import RandomAgent
from ascension_army.sim.runner import BatchRunner, GameRunner

logger = logging.getLogger(__name__)


def _load_config(args: argparse.Namespace) -> FloorConfig:
    if args.config is not None:
        config = FloorConfig.from_json_file(args.config)
    else:
        config = FloorConfig()
    overrides = {}
    if args.width is not None:
        overrides["width"] = args.width
    if args.height is not None:
        overrides["height"] = args.height
    if args.enemies is not None:
        overrides["enemy_count"] = args.enemies
    if overrides:
        config = FloorConfig.model_validate({**config.model_dump(), **overrides})
    return config


def show_single(config: FloorConfig, seed: int, max_turns: int) -> None:
    runner = GameRunner(config, RandomAgent(), seed, max_turns=max_turns)
    print(render_map(runner.floor))
    print(player_status(runner.floor))
    telemetry = runner.run()
    print()
    print(render_map(runner.floor))
    print(player_status(runner.floor))
    for line in runner.messages.recent(2):
        print(f"  {line}")
    print(f"Result: {telemetry.result} after {telemetry.turns} turn(s)")


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate random-walk dungeon runs")
    parser.add_argument("--runs", type=int, default=200, help="Number of runs")
    parser.add_argument("--seed", type=int, default=42, help="Base seed")
    parser.add_argument("--config", type=str, default=None, help="FloorConfig JSON file")
    parser.add_argument("--width", type=int, default=None, help="Override floor width")
    parser.add_argument("--height", type=int, default=None, help="Override floor height")
    parser.add_argument("--enemies", type=int, default=None, help="Exact enemy count")
    parser.add_argument("--max-turns", type=int, default=500, help="Turn limit per run")
    parser.add_argument("--parallel", action="store_true", default=False, help="Use a process pool")
    parser.add_argument("--show-map", action="store_true", default=False, help="Play one seed and print the floor")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log run details")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _load_config(args)
        if args.show_map:
            show_single(config, args.seed, args.max_turns)
            return

        print(f"Running {args.runs:,} runs on a {config.width}x{config.height} floor...")
        t0 = time.perf_counter()
        runner = BatchRunner(config, agent_class=RandomAgent, max_turns=args.max_turns)
        results = runner.run_batch(args.runs, base_seed=args.seed, parallel=args.parallel)
    except (InvalidArgument, ValidationError) as exc:
        logger.error("Invalid floor configuration: %s", exc)
        sys.exit(2)
    elapsed = time.perf_counter() - t0
    if not results:
        return

    outcomes = Counter(r.result for r in results)
    fought = sum(r.combat.fought for r in results)
    won = sum(r.combat.won for r in results)
    print(f"Done in {elapsed:.1f}s")
    for outcome in ("win", "loss", "quit", "timeout"):
        count = outcomes.get(outcome, 0)
        print(f"  {outcome:8s}: {count:5d} ({count / len(results) * 100:.1f}%)")
    avg_turns = sum(r.turns for r in results) / len(results)
    print(f"  Avg turns: {avg_turns:.1f}")
    if fought:
        print(f"  Combat win rate: {won}/{fought} ({won / fought * 100:.1f}%)")


if __name__ == "__main__":
    main()
