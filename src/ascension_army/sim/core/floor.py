"""Dungeon floor state: grid bounds, the mobs on it, and visibility marks.

The floor exclusively owns its mobs.  Boolean masks (occupancy and
visibility) are derived views: each call builds a fresh ``height x width``
grid indexed ``[y][x]``, so a mask never goes stale.
"""

from __future__ import annotations

import logging
from typing import Iterable

from pydantic import BaseModel, Field

from ascension_army.sim.core.coords import Coordinate
from ascension_army.sim.core.entities import AnyMob, Enemy, Mob, MobKind, Player
from ascension_army.sim.core.errors import InvalidArgument, InvariantViolation

logger = logging.getLogger(__name__)

Mask = list[list[bool]]


class DungeonFloor(BaseModel):
    """The bounded grid plus its entities and visibility state for one level."""

    width: int = Field(ge=1)
    height: int = Field(ge=1)
    visibility_marks: set[Coordinate] = Field(default_factory=set)
    mobs: list[AnyMob] = Field(default_factory=list)

    # -- bounds --------------------------------------------------------------

    def in_bounds(self, coord: Coordinate) -> bool:
        return coord.x < self.width and coord.y < self.height

    def check_in_bounds(self, coord: Coordinate, what: str = "coordinate") -> None:
        """Raise :class:`InvariantViolation` if *coord* lies off the floor."""
        if not self.in_bounds(coord):
            raise InvariantViolation(
                f"{what} ({coord.x}, {coord.y}) is outside the "
                f"{self.width}x{self.height} floor"
            )

    def validate_state(self) -> None:
        """Check every mob position and visibility mark against the bounds."""
        for mob in self.mobs:
            self.check_in_bounds(mob.position, what=f"{mob.tag} position")
        for mark in self.visibility_marks:
            self.check_in_bounds(mark, what="visibility mark")

    # -- lookup --------------------------------------------------------------

    def mob_index_by_kind(self, kind: MobKind) -> int | None:
        """Index of the first mob of *kind* in collection order, or ``None``."""
        for i, mob in enumerate(self.mobs):
            if mob.kind is kind:
                return i
        return None

    def mob_index_by_tag(self, tag: str) -> int | None:
        """Same as :meth:`mob_index_by_kind`, keyed by the kind's tag string."""
        try:
            kind = MobKind(tag)
        except ValueError:
            return None
        return self.mob_index_by_kind(kind)

    @property
    def player(self) -> Player | None:
        idx = self.mob_index_by_kind(MobKind.PLAYER)
        if idx is None:
            return None
        return self.mobs[idx]  # type: ignore[return-value]

    @property
    def enemies(self) -> list[Enemy]:
        return [m for m in self.mobs if m.kind is MobKind.ENEMY]  # type: ignore[misc]

    def enemy_indices_at(self, coord: Coordinate) -> list[int]:
        """Indices of every enemy standing on *coord*."""
        return [
            i for i, m in enumerate(self.mobs)
            if m.kind is MobKind.ENEMY and m.position == coord
        ]

    # -- mutation ------------------------------------------------------------

    def add_mob(self, mob: Mob) -> None:
        if not isinstance(mob, (Player, Enemy)):
            raise InvalidArgument(f"cannot place a {type(mob).__name__} on the floor")
        self.check_in_bounds(mob.position, what=f"{mob.tag} position")
        self.mobs.append(mob)

    def remove_dead(self) -> list[Mob]:
        """Drop every mob with 0 hit points; return the removed mobs.

        Dead indices are collected first, then the collection is compacted
        in a single pass.
        """
        dead = {i for i, mob in enumerate(self.mobs) if mob.is_dead}
        if not dead:
            return []
        removed = [self.mobs[i] for i in sorted(dead)]
        self.mobs = [mob for i, mob in enumerate(self.mobs) if i not in dead]
        logger.debug("Removed %d dead mob(s)", len(removed))
        return removed

    def reveal(self, coord: Coordinate) -> None:
        self.check_in_bounds(coord, what="visibility mark")
        self.visibility_marks.add(coord)

    def reveal_around(self, center: Coordinate, radius: int) -> None:
        """Mark every in-bounds cell within Chebyshev distance *radius*."""
        self.check_in_bounds(center, what="reveal center")
        if radius < 0:
            return
        for y in range(max(0, center.y - radius), min(self.height, center.y + radius + 1)):
            for x in range(max(0, center.x - radius), min(self.width, center.x + radius + 1)):
                self.visibility_marks.add(Coordinate(x=x, y=y))

    # -- masks ---------------------------------------------------------------

    def _blank_mask(self) -> Mask:
        return [[False] * self.width for _ in range(self.height)]

    def occupancy_mask(self, kinds: Iterable[MobKind | str]) -> Mask:
        """``height x width`` grid, ``True`` where a mob of one of *kinds* stands.

        Tag strings that name no kind match nothing.
        """
        requested = set(kinds)
        wanted = {kind for kind in MobKind if kind in requested}
        mask = self._blank_mask()
        for mob in self.mobs:
            if mob.kind in wanted:
                self.check_in_bounds(mob.position, what=f"{mob.tag} position")
                mask[mob.position.y][mob.position.x] = True
        return mask

    def visibility_mask(self) -> Mask:
        """``height x width`` grid, ``True`` at every revealed cell."""
        mask = self._blank_mask()
        for mark in self.visibility_marks:
            self.check_in_bounds(mark, what="visibility mark")
            mask[mark.y][mark.x] = True
        return mask
