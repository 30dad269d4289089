"""Shared fixtures and helpers for simulation tests."""

from __future__ import annotations

from typing import Callable, Iterable

import pytest

from ascension_army.sim.core.rng import GameRNG


class ScriptedCoin:
    """Stand-in RNG whose weighted coin flips follow a fixed script.

    Records every ``ratio`` call so tests can check the odds that were asked for.
    """

    def __init__(self, outcomes: Iterable[bool]) -> None:
        self._outcomes = list(outcomes)
        self.calls: list[tuple[int, int]] = []

    def ratio(self, numerator: int, denominator: int) -> bool:
        self.calls.append((numerator, denominator))
        return self._outcomes.pop(0)


@pytest.fixture
def coin() -> Callable[[Iterable[bool]], ScriptedCoin]:
    """Factory for scripted combat outcomes: ``coin([True, False])``."""
    return ScriptedCoin


@pytest.fixture
def rng() -> GameRNG:
    return GameRNG(42)
