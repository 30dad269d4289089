"""Run simulation -- ties floor generation, the turn engine, agents and telemetry together.

Provides two key classes:

- **GameRunner**: plays a single floor to completion with one agent.
- **BatchRunner**: orchestrates many seeded runs (optionally in parallel).
"""

from __future__ import annotations

import inspect
import logging
import multiprocessing
from typing import Any

from ascension_army.sim.core.entities import MobKind
from ascension_army.sim.core.rng import GameRNG
from ascension_army.sim.dungeon.floor_gen import FloorConfig, generate_floor
from ascension_army.sim.engine import TurnEngine
from ascension_army.sim.messages import MessageLog
from ascension_army.sim.play_agents.base import IntentAgent
from ascension_army.sim.play_agents.random_agent import RandomAgent
from ascension_army.sim.telemetry import RunTelemetry

logger = logging.getLogger(__name__)

_MAX_TURNS = 500


# =====================================================================
# GameRunner
# =====================================================================

class GameRunner:
    """Generates a floor and plays it until win, loss, quit or the turn limit.

    Parameters
    ----------
    config:
        Floor tunables.
    agent:
        Supplies one intent per turn.
    seed:
        Master seed.  Forked into ``"floor"`` and ``"combat"`` streams.
    max_turns:
        Hard stop; a run that reaches it is reported as ``"timeout"``.
    """

    def __init__(
        self,
        config: FloorConfig,
        agent: IntentAgent,
        seed: int,
        max_turns: int = _MAX_TURNS,
    ) -> None:
        self.config = config
        self.agent = agent
        self.seed = seed
        self.max_turns = max_turns

        master_rng = GameRNG(seed)
        self.floor = generate_floor(config, master_rng.fork("floor"))
        self.messages = MessageLog()
        self.engine = TurnEngine(
            self.floor,
            master_rng.fork("combat"),
            messages=self.messages,
            sight_radius=config.sight_radius,
        )

    def run(self) -> RunTelemetry:
        """Play the floor and return telemetry."""
        telemetry = RunTelemetry(
            seed=self.seed,
            enemies_start=len(self.floor.enemies),
        )
        logger.info(
            "Starting run seed=%d with %d enemies", self.seed, telemetry.enemies_start,
        )

        while not self.engine.is_over and self.engine.turn < self.max_turns:
            intent = self.agent.choose_intent(self.floor)
            result = self.engine.step(intent)
            for combat in result.combats:
                telemetry.combat.record(combat.player_won)
            telemetry.enemies_defeated += sum(
                1 for mob in result.removed if mob.kind is MobKind.ENEMY
            )
            telemetry.log.extend(result.log)

        telemetry.turns = self.engine.turn
        outcome = self.engine.outcome
        if outcome is None:
            logger.warning(
                "Run seed=%d hit the %d-turn limit", self.seed, self.max_turns,
            )
            telemetry.result = "timeout"
        else:
            telemetry.result = outcome

        player = self.floor.player
        telemetry.player_hp_end = player.hit_points if player is not None else 0

        logger.info(
            "Run seed=%d finished: %s after %d turn(s), %d/%d enemies defeated",
            self.seed, telemetry.result, telemetry.turns,
            telemetry.enemies_defeated, telemetry.enemies_start,
        )
        return telemetry


# =====================================================================
# BatchRunner
# =====================================================================

def _make_agent(agent_class: type[IntentAgent], seed: int) -> IntentAgent:
    agent_rng = GameRNG(seed).fork("agent")
    if "rng" in inspect.signature(agent_class).parameters:
        return agent_class(rng=agent_rng)  # type: ignore[call-arg]
    return agent_class()  # type: ignore[call-arg]


def _run_single(
    config: FloorConfig,
    agent_class: type[IntentAgent],
    seed: int,
    max_turns: int,
) -> RunTelemetry:
    agent = _make_agent(agent_class, seed)
    return GameRunner(config, agent, seed, max_turns=max_turns).run()


def _worker_run_single(args: tuple) -> RunTelemetry:
    """Top-level worker function for multiprocessing (must be picklable)."""
    config_data, agent_class, seed, max_turns = args
    config = FloorConfig.model_validate(config_data)
    return _run_single(config, agent_class, seed, max_turns)


class BatchRunner:
    """Runs many seeded games, optionally in parallel.

    ``agent_class`` is instantiated once per run with ``rng=`` set to a
    stream forked from that run's seed (or with no arguments if it does
    not accept one).
    """

    def __init__(
        self,
        config: FloorConfig,
        agent_class: type[IntentAgent] = RandomAgent,
        max_turns: int = _MAX_TURNS,
    ) -> None:
        self.config = config
        self.agent_class = agent_class
        self.max_turns = max_turns

    def run_batch(
        self,
        n_runs: int,
        base_seed: int = 42,
        parallel: bool = False,
    ) -> list[RunTelemetry]:
        """Run *n_runs* games with seeds ``base_seed .. base_seed + n_runs - 1``."""
        seeds = [base_seed + i for i in range(n_runs)]

        if parallel and n_runs > 1:
            return self._run_parallel(seeds)
        return self._run_sequential(seeds)

    def _run_sequential(self, seeds: list[int]) -> list[RunTelemetry]:
        return [
            _run_single(self.config, self.agent_class, seed, self.max_turns)
            for seed in seeds
        ]

    def _run_parallel(self, seeds: list[int]) -> list[RunTelemetry]:
        """Run games in a process pool.

        The config is sent as a plain dict and re-validated in each worker.
        """
        config_data: dict[str, Any] = self.config.model_dump()
        work_items = [
            (config_data, self.agent_class, seed, self.max_turns)
            for seed in seeds
        ]

        n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)

        with multiprocessing.Pool(processes=n_workers) as pool:
            results = pool.map(_worker_run_single, work_items)

        return results
