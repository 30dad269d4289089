"""Mob models for the dungeon simulation.

A mob is any positioned, combat-capable entity.  The two concrete kinds
(``Player`` and ``Enemy``) form a closed set: code that needs to tell
them apart matches on :class:`MobKind` instead of comparing free-form
tag strings.

All data classes use Pydantic v2 BaseModel for validation and
serialization.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Union

from pydantic import (
    BaseModel,
    Discriminator,
    Field,
    SerializerFunctionWrapHandler,
    Tag,
    model_serializer,
)

from ascension_army.sim.core.coords import Coordinate

if TYPE_CHECKING:
    from ascension_army.sim.core.rng import GameRNG


class MobKind(str, Enum):
    PLAYER = "player"
    ENEMY = "enemy"


# ---------------------------------------------------------------------------
# Mob base
# ---------------------------------------------------------------------------

class Mob(BaseModel):
    """Common base for the player and enemies.

    Only the concrete subclasses are instantiated; the base carries no
    ``kind``.  Serialized mobs include a ``"kind"`` key so a dumped floor
    validates back into the right subclass (see :data:`AnyMob`).
    """

    kind: ClassVar[MobKind]

    position: Coordinate
    strength: int = Field(default=1, ge=0)
    hit_points: int = Field(default=1, ge=0)

    def __init__(self, **data: Any) -> None:
        if type(self) is Mob:
            raise TypeError("Mob is abstract; construct a Player or an Enemy")
        super().__init__(**data)

    @model_serializer(mode="wrap")
    def _serialize_with_kind(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        data["kind"] = self.kind.value
        return data

    # -- queries -------------------------------------------------------------

    @property
    def tag(self) -> str:
        """Display name of this mob's kind (``"player"`` / ``"enemy"``)."""
        return self.kind.value

    @property
    def is_dead(self) -> bool:
        return self.hit_points == 0

    # -- combat --------------------------------------------------------------

    def lose_hit_point(self) -> int:
        """Remove one hit point, saturating at 0.  Returns the new total."""
        self.hit_points = max(0, self.hit_points - 1)
        return self.hit_points

    def wins_against(self, other: Mob, rng: GameRNG) -> bool:
        """Weighted coin flip: ``True`` if this mob wins the exchange.

        This mob wins with probability
        ``self.strength / (self.strength + other.strength)``.  Two
        zero-strength mobs fall back to a fair coin.
        """
        total = self.strength + other.strength
        if total == 0:
            return rng.ratio(1, 2)
        return rng.ratio(self.strength, total)


# ---------------------------------------------------------------------------
# Player / Enemy
# ---------------------------------------------------------------------------

class Player(Mob):
    """The player character."""

    kind: ClassVar[MobKind] = MobKind.PLAYER

    strength: int = Field(default=2, ge=0)
    hit_points: int = Field(default=3, ge=0)


class Enemy(Mob):
    """A static combat target.  Enemies take no turns of their own."""

    kind: ClassVar[MobKind] = MobKind.ENEMY


def _mob_kind_tag(value: Any) -> str | None:
    raw = value.get("kind") if isinstance(value, dict) else getattr(value, "kind", None)
    try:
        return MobKind(raw).value
    except ValueError:
        return None


AnyMob = Annotated[
    Union[
        Annotated[Player, Tag(MobKind.PLAYER.value)],
        Annotated[Enemy, Tag(MobKind.ENEMY.value)],
    ],
    Discriminator(_mob_kind_tag),
]
"""A ``Player`` or an ``Enemy``, chosen by the ``"kind"`` key on input."""
