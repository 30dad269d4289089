"""Dungeon module -- point sampling and floor generation."""

from ascension_army.sim.dungeon.floor_gen import FloorConfig, generate_floor
from ascension_army.sim.dungeon.sampler import sample_points

__all__ = [
    "FloorConfig",
    "generate_floor",
    "sample_points",
]
