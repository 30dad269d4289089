"""Seeded random number generator for deterministic dungeon simulation.

Wraps Python's random.Random to provide reproducible randomness.  The
simulation never touches the process-wide ``random`` module: one
``GameRNG`` handle is threaded through floor generation, the point
sampler and the turn engine.  Each sub-system (``"placement"``,
``"combat"``, ``"agent"``, ...) should use a *forked* RNG so that
consuming random values in one system does not perturb another.
"""

from __future__ import annotations

import hashlib
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class GameRNG:
    """Deterministic RNG that can be forked into independent sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    # -- core random methods -------------------------------------------------

    def random_below(self, bound: int) -> int:
        """Return a random integer in the half-open range ``[0, bound)``."""
        return self._rng.randrange(bound)

    def random_float(self) -> float:
        """Return a random float in the half-open interval ``[0.0, 1.0)``."""
        return self._rng.random()

    def random_choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    def shuffle(self, lst: list[T]) -> None:
        """Shuffle *lst* in-place (Fisher-Yates, every permutation equally likely)."""
        self._rng.shuffle(lst)

    def ratio(self, numerator: int, denominator: int) -> bool:
        """Return ``True`` with probability ``numerator / denominator``.

        Uses an integer draw so the probability is exact.  Requires
        ``0 <= numerator <= denominator`` and ``denominator > 0``.
        """
        if denominator <= 0 or not 0 <= numerator <= denominator:
            raise ValueError(
                f"invalid ratio {numerator}/{denominator}"
            )
        return self._rng.randrange(denominator) < numerator

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> GameRNG:
        """Create a child RNG whose seed is derived from this RNG's seed and
        *name*.

        The derivation is deterministic: forking with the same *name*
        from an RNG in the same state always produces the same child
        seed.  This lets sub-systems (e.g. ``"placement"``, ``"combat"``)
        each have their own independent random stream.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        child_seed = int.from_bytes(digest[:8], "big")
        return GameRNG(child_seed)

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
