"""Tests for RandomAgent and ScriptedAgent."""

from ascension_army.sim.core.coords import DIRECTIONS
from ascension_army.sim.core.floor import DungeonFloor
from ascension_army.sim.core.intent import Intent, IntentKind
from ascension_army.sim.core.rng import GameRNG
from ascension_army.sim.play_agents import IntentAgent, RandomAgent, ScriptedAgent


def _floor() -> DungeonFloor:
    return DungeonFloor(width=4, height=4)


class TestRandomAgent:
    def test_is_intent_agent(self):
        assert isinstance(RandomAgent(), IntentAgent)

    def test_moves_in_compass_directions(self):
        agent = RandomAgent(rng=GameRNG(3))
        floor = _floor()
        seen = set()
        for _ in range(300):
            intent = agent.choose_intent(floor)
            assert intent.kind is IntentKind.MOVE
            assert intent.delta in DIRECTIONS
            seen.add(intent.delta)
        assert len(seen) == 8

    def test_always_idle(self):
        agent = RandomAgent(rng=GameRNG(3), idle_chance=1.0)
        assert all(agent.choose_intent(_floor()) == Intent.none() for _ in range(20))

    def test_deterministic(self):
        a = RandomAgent(rng=GameRNG(9))
        b = RandomAgent(rng=GameRNG(9))
        floor = _floor()
        assert [a.choose_intent(floor) for _ in range(30)] == [
            b.choose_intent(floor) for _ in range(30)
        ]


class TestScriptedAgent:
    def test_replays_then_quits(self):
        script = [Intent.move(1, 0), Intent.none()]
        agent = ScriptedAgent(script)
        floor = _floor()
        assert agent.remaining == 2
        assert agent.choose_intent(floor) == Intent.move(1, 0)
        assert agent.choose_intent(floor) == Intent.none()
        assert agent.remaining == 0
        assert agent.choose_intent(floor).is_quit
        assert agent.choose_intent(floor).is_quit


class TestIntent:
    def test_movement_of_non_move_is_zero(self):
        assert Intent.none().movement.is_zero
        assert Intent.quit().movement.is_zero

    def test_movement_of_move(self):
        intent = Intent.move(-1, 1)
        assert (intent.movement.dx, intent.movement.dy) == (-1, 1)
        assert not intent.is_quit
