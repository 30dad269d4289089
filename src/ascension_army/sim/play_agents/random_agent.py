"""Random walk agent -- steps in a uniformly random direction every turn.

The ``RandomAgent`` is the simplest possible agent.  It is used as the
baseline for batch runs: it exercises the full turn loop end-to-end
(movement, wall clamping, combat, cleanup) without any strategy.

Behaviour:
    - With probability ``idle_chance`` the agent stands still.
    - Otherwise it picks one of the 8 compass directions uniformly.
    - It never quits; runs end by win, loss or the runner's turn limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ascension_army.sim.core.coords import DIRECTIONS
from ascension_army.sim.core.intent import Intent
from ascension_army.sim.core.rng import GameRNG
from ascension_army.sim.play_agents.base import IntentAgent

if TYPE_CHECKING:
    from ascension_army.sim.core.floor import DungeonFloor


class RandomAgent(IntentAgent):
    """Agent that wanders randomly.

    Parameters
    ----------
    rng:
        Seeded RNG for deterministic randomness.  If ``None``, a default
        ``GameRNG(seed=0)`` is created.
    idle_chance:
        Probability (0.0 -- 1.0) of standing still instead of moving.
    """

    def __init__(
        self,
        rng: GameRNG | None = None,
        idle_chance: float = 0.0,
    ) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._idle_chance = idle_chance

    def choose_intent(self, floor: DungeonFloor) -> Intent:
        if self._idle_chance > 0 and self._rng.random_float() < self._idle_chance:
            return Intent.none()
        return Intent.towards(self._rng.random_choice(DIRECTIONS))
