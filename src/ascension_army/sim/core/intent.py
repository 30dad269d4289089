"""The player's single discrete action for one turn."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from ascension_army.sim.core.coords import ZERO_DELTA, MovementDelta


class IntentKind(str, Enum):
    MOVE = "move"
    NONE = "none"
    QUIT = "quit"


class Intent(BaseModel):
    """One of ``Move(delta)``, ``None`` or ``Quit``.

    Build instances through :meth:`move`, :meth:`none` and :meth:`quit`
    rather than the raw constructor.
    """

    model_config = ConfigDict(frozen=True)

    kind: IntentKind
    delta: MovementDelta = ZERO_DELTA

    @classmethod
    def move(cls, dx: int, dy: int) -> Intent:
        return cls(kind=IntentKind.MOVE, delta=MovementDelta(dx=dx, dy=dy))

    @classmethod
    def towards(cls, delta: MovementDelta) -> Intent:
        return cls(kind=IntentKind.MOVE, delta=delta)

    @classmethod
    def none(cls) -> Intent:
        return cls(kind=IntentKind.NONE)

    @classmethod
    def quit(cls) -> Intent:
        return cls(kind=IntentKind.QUIT)

    @property
    def is_quit(self) -> bool:
        return self.kind is IntentKind.QUIT

    @property
    def movement(self) -> MovementDelta:
        """The delta this intent applies: zero for anything but a move."""
        if self.kind is IntentKind.MOVE:
            return self.delta
        return ZERO_DELTA
