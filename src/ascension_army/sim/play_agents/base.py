"""Base class for agents that drive the player in headless runs.

An agent stands in for the keyboard: the runner asks it for one
:class:`Intent` per turn and feeds that intent to the turn engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ascension_army.sim.core.floor import DungeonFloor
    from ascension_army.sim.core.intent import Intent


class IntentAgent(ABC):
    """Base class for agents that pick the player's action each turn."""

    @abstractmethod
    def choose_intent(self, floor: DungeonFloor) -> Intent:
        """Return the player's intent for the next turn.

        Parameters
        ----------
        floor:
            The current floor, giving the agent full observability.  Agents
            must treat it as read-only.

        Returns
        -------
        Intent
            ``Intent.move(...)``, ``Intent.none()`` or ``Intent.quit()``.
        """
