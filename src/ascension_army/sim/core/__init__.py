"""Core simulation primitives for the dungeon simulator."""

from ascension_army.sim.core.coords import (
    DIRECTIONS,
    ZERO_DELTA,
    Coordinate,
    MovementDelta,
)
from ascension_army.sim.core.entities import AnyMob, Enemy, Mob, MobKind, Player
from ascension_army.sim.core.errors import (
    InvalidArgument,
    InvariantViolation,
    SimulationError,
)
from ascension_army.sim.core.floor import DungeonFloor
from ascension_army.sim.core.intent import Intent, IntentKind
from ascension_army.sim.core.rng import GameRNG

__all__ = [
    # rng
    "GameRNG",
    # coords
    "Coordinate",
    "MovementDelta",
    "ZERO_DELTA",
    "DIRECTIONS",
    # intent
    "Intent",
    "IntentKind",
    # entities
    "AnyMob",
    "Mob",
    "MobKind",
    "Player",
    "Enemy",
    # floor
    "DungeonFloor",
    # errors
    "SimulationError",
    "InvalidArgument",
    "InvariantViolation",
]
