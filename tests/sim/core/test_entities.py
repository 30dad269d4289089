"""Tests for Mob, Player and Enemy models."""

import pytest
from pydantic import ValidationError

from ascension_army.sim.core.coords import Coordinate
from ascension_army.sim.core.entities import Enemy, Mob, MobKind, Player
from ascension_army.sim.core.rng import GameRNG


def _at(x: int = 0, y: int = 0) -> Coordinate:
    return Coordinate(x=x, y=y)


# ---------------------------------------------------------------------------
# Kinds and defaults
# ---------------------------------------------------------------------------

class TestMobKinds:
    def test_player_defaults(self):
        player = Player(position=_at())
        assert player.kind is MobKind.PLAYER
        assert player.tag == "player"
        assert player.strength == 2
        assert player.hit_points == 3

    def test_enemy_defaults(self):
        enemy = Enemy(position=_at())
        assert enemy.kind is MobKind.ENEMY
        assert enemy.tag == "enemy"
        assert enemy.strength == 1
        assert enemy.hit_points == 1

    def test_negative_hit_points_rejected(self):
        with pytest.raises(ValidationError):
            Enemy(position=_at(), hit_points=-1)

    def test_negative_strength_rejected(self):
        with pytest.raises(ValidationError):
            Player(position=_at(), strength=-2)

    def test_base_mob_cannot_be_built(self):
        with pytest.raises(TypeError):
            Mob(position=_at())

    def test_dump_carries_kind(self):
        assert Player(position=_at()).model_dump()["kind"] == "player"
        assert Enemy(position=_at()).model_dump(mode="json")["kind"] == "enemy"


# ---------------------------------------------------------------------------
# Hit points
# ---------------------------------------------------------------------------

class TestHitPoints:
    def test_lose_hit_point(self):
        enemy = Enemy(position=_at(), hit_points=2)
        assert enemy.lose_hit_point() == 1
        assert not enemy.is_dead

    def test_dead_at_zero(self):
        enemy = Enemy(position=_at(), hit_points=1)
        enemy.lose_hit_point()
        assert enemy.is_dead

    def test_saturates_at_zero(self):
        enemy = Enemy(position=_at(), hit_points=0)
        assert enemy.lose_hit_point() == 0
        assert enemy.hit_points == 0


# ---------------------------------------------------------------------------
# Combat odds
# ---------------------------------------------------------------------------

class TestWinsAgainst:
    def test_zero_strength_never_wins(self):
        rng = GameRNG(11)
        weak = Player(position=_at(), strength=0)
        foe = Enemy(position=_at(1, 0), strength=1)
        assert not any(weak.wins_against(foe, rng) for _ in range(200))

    def test_against_zero_strength_always_wins(self):
        rng = GameRNG(11)
        player = Player(position=_at(), strength=1)
        foe = Enemy(position=_at(1, 0), strength=0)
        assert all(player.wins_against(foe, rng) for _ in range(200))

    def test_both_zero_is_fair_coin(self):
        rng = GameRNG(11)
        a = Player(position=_at(), strength=0)
        b = Enemy(position=_at(1, 0), strength=0)
        wins = sum(a.wins_against(b, rng) for _ in range(4000))
        assert abs(wins / 4000 - 0.5) < 0.05

    def test_two_to_one_converges_to_two_thirds(self):
        rng = GameRNG(2024)
        player = Player(position=_at(), strength=2)
        foe = Enemy(position=_at(1, 0), strength=1)
        trials = 20_000
        wins = sum(player.wins_against(foe, rng) for _ in range(trials))
        assert abs(wins / trials - 2 / 3) < 0.02

    def test_asks_rng_for_strength_ratio(self, coin):
        script = coin([True])
        player = Player(position=_at(), strength=2)
        foe = Enemy(position=_at(1, 0), strength=1)
        assert player.wins_against(foe, script)
        assert script.calls == [(2, 3)]
