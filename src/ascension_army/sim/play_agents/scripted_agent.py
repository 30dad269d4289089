"""Agent that replays a fixed list of intents, then quits."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ascension_army.sim.core.intent import Intent
from ascension_army.sim.play_agents.base import IntentAgent

if TYPE_CHECKING:
    from ascension_army.sim.core.floor import DungeonFloor


class ScriptedAgent(IntentAgent):
    """Plays *intents* in order; once they run out every answer is ``Quit``."""

    def __init__(self, intents: Iterable[Intent]) -> None:
        self._intents = list(intents)
        self._cursor = 0

    @property
    def remaining(self) -> int:
        return len(self._intents) - self._cursor

    def choose_intent(self, floor: DungeonFloor) -> Intent:
        if self._cursor >= len(self._intents):
            return Intent.quit()
        intent = self._intents[self._cursor]
        self._cursor += 1
        return intent
