"""Floor configuration and generation.

``FloorConfig`` holds every tunable of a run (grid size, mob stats,
enemy count).  ``generate_floor`` turns a config plus an RNG into a
ready-to-play :class:`DungeonFloor`: the player is dropped on a uniformly
random cell and enemies are scattered over the rest of the grid by the
point sampler.

An impossible enemy-count configuration raises
:class:`~ascension_army.sim.core.errors.InvalidArgument` here, before any
turn is played.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from ascension_army.sim.core.coords import Coordinate
from ascension_army.sim.core.entities import Enemy, Player
from ascension_army.sim.core.floor import DungeonFloor
from ascension_army.sim.core.rng import GameRNG
from ascension_army.sim.dungeon.sampler import sample_points

logger = logging.getLogger(__name__)


class FloorConfig(BaseModel):
    """Tunables for a single floor."""

    width: int = Field(default=24, ge=1)
    height: int = Field(default=24, ge=1)

    player_strength: int = Field(default=2, ge=0)
    player_hit_points: int = Field(default=3, ge=1)
    enemy_strength: int = Field(default=1, ge=0)
    enemy_hit_points: int = Field(default=1, ge=1)

    enemy_count: int | None = Field(default=None, ge=0)
    """Exact number of enemies.  Takes precedence over ``enemy_count_cap``."""

    enemy_count_cap: int | None = Field(default=None, ge=1)
    """Enemy count is drawn from ``[0, enemy_count_cap)``.  When both this
    and ``enemy_count`` are unset, ``width * height - 1`` is used."""

    sight_radius: int | None = Field(default=None, ge=0)
    """Cells around the player revealed each turn.  ``None`` disables
    automatic reveal."""

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def resolved_count_cap(self) -> int | None:
        """``enemy_count_cap`` with the whole-floor default filled in."""
        if self.enemy_count is None and self.enemy_count_cap is None:
            return max(1, self.area - 1)
        return self.enemy_count_cap

    @classmethod
    def from_json_file(cls, path: str | Path) -> FloorConfig:
        """Load and validate a config from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())


def generate_floor(config: FloorConfig, rng: GameRNG) -> DungeonFloor:
    """Build a floor with one player and sampled enemies."""
    placement_rng = rng.fork("placement")

    floor = DungeonFloor(width=config.width, height=config.height)
    start = Coordinate(
        x=placement_rng.random_below(config.width),
        y=placement_rng.random_below(config.height),
    )
    floor.add_mob(Player(
        position=start,
        strength=config.player_strength,
        hit_points=config.player_hit_points,
    ))

    enemy_cells = sample_points(
        placement_rng,
        0,
        0,
        config.width,
        config.height,
        count=config.enemy_count,
        count_cap=config.resolved_count_cap,
        excluded=[start],
    )
    for cell in enemy_cells:
        floor.add_mob(Enemy(
            position=cell,
            strength=config.enemy_strength,
            hit_points=config.enemy_hit_points,
        ))

    if config.sight_radius is not None:
        floor.reveal_around(start, config.sight_radius)

    logger.info(
        "Generated %dx%d floor: player at (%d, %d), %d enemies (seed=%d)",
        config.width, config.height, start.x, start.y, len(enemy_cells), rng.seed,
    )
    return floor
