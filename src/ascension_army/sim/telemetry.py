"""Telemetry data models for per-run statistics.

These lightweight dataclasses capture what is needed to compare agents
and floor configurations without storing the entire floor history:

- **CombatStats**: how many exchanges happened and how many the player won.
- **RunTelemetry**: seed, outcome, turn count and end-of-run player state.

Both classes are plain ``dataclass`` instances (not Pydantic models) to
keep telemetry collection as cheap as possible during batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CombatStats:
    """Running tally of player-versus-enemy exchanges."""

    fought: int = 0
    won: int = 0

    def record(self, player_won: bool) -> None:
        self.fought += 1
        if player_won:
            self.won += 1

    @property
    def win_rate(self) -> float:
        """Fraction of exchanges the player won (``0.0`` if none fought)."""
        if self.fought == 0:
            return 0.0
        return self.won / self.fought


@dataclass
class RunTelemetry:
    """Stats from a single run on one floor.

    Attributes
    ----------
    seed:
        The master RNG seed used for this run.
    result:
        ``"win"`` (every enemy defeated), ``"loss"`` (player died),
        ``"quit"`` (agent quit) or ``"timeout"`` (turn limit reached).
    turns:
        Number of player turns taken (a quit does not count as a turn).
    enemies_start:
        Enemies placed on the floor at generation time.
    enemies_defeated:
        Enemies removed after dropping to 0 hit points.
    player_hp_end:
        Player hit points at the end of the run (0 on loss).
    combat:
        Exchange tally across all turns.
    log:
        Every combat message produced during the run, in order.
    """

    seed: int
    result: str = "timeout"
    turns: int = 0
    enemies_start: int = 0
    enemies_defeated: int = 0
    player_hp_end: int = 0
    combat: CombatStats = field(default_factory=CombatStats)
    log: list[str] = field(default_factory=list)
