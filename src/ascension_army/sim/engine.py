"""Turn engine -- resolves one player intent into movement, combat and cleanup.

Each call to :meth:`TurnEngine.step` runs one full turn:

1. Read the intent (``Quit`` ends the run, ``None`` means stand still).
2. Compute the candidate cell: player position plus delta, clamped to
   the floor on each axis.
3. Fight every enemy standing on the candidate cell.  Each encounter is
   one weighted coin flip; the loser drops a hit point.
4. Move the player onto the candidate cell only if no fight happened.
   A defeated enemy's cell is entered on a later turn, not this one.
5. Remove every mob left with 0 hit points.
6. Reset the movement delta.

The engine holds the floor exclusively for the duration of a step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ascension_army.sim.core.coords import ZERO_DELTA, Coordinate, MovementDelta
from ascension_army.sim.core.entities import Mob, Player
from ascension_army.sim.core.floor import DungeonFloor
from ascension_army.sim.core.intent import Intent
from ascension_army.sim.core.rng import GameRNG
from ascension_army.sim.messages import MessageLog

logger = logging.getLogger(__name__)


@dataclass
class CombatOutcome:
    """A single player-versus-enemy exchange."""

    enemy_position: Coordinate
    player_won: bool
    player_hp: int
    enemy_hp: int


@dataclass
class TurnResult:
    """Everything that happened during one call to :meth:`TurnEngine.step`."""

    turn: int
    quit: bool = False
    moved: bool = False
    combats: list[CombatOutcome] = field(default_factory=list)
    removed: list[Mob] = field(default_factory=list)
    log: list[str] = field(default_factory=list)


class TurnEngine:
    """Advances a :class:`DungeonFloor` one player turn at a time.

    Parameters
    ----------
    floor:
        The floor to mutate.
    rng:
        Random source for combat.  Pass a forked or seeded ``GameRNG`` to
        get reproducible fights.
    messages:
        Optional log that receives combat lines as they happen.
    sight_radius:
        If set, cells within this Chebyshev distance of the player are
        revealed after every turn.
    """

    def __init__(
        self,
        floor: DungeonFloor,
        rng: GameRNG,
        messages: MessageLog | None = None,
        sight_radius: int | None = None,
    ) -> None:
        self.floor = floor
        self.rng = rng
        self.messages = messages
        self.sight_radius = sight_radius
        self.turn = 0
        self._delta: MovementDelta = ZERO_DELTA
        self._quit = False

    # -- delta ---------------------------------------------------------------

    @property
    def delta(self) -> MovementDelta:
        """The movement applied by the turn in progress (zero between turns)."""
        return self._delta

    def reset_delta(self) -> None:
        self._delta = ZERO_DELTA

    # -- outcome -------------------------------------------------------------

    @property
    def outcome(self) -> str | None:
        """``"quit"``, ``"loss"``, ``"win"``, or ``None`` while still running."""
        if self._quit:
            return "quit"
        player = self.floor.player
        if player is None or player.is_dead:
            return "loss"
        if not self.floor.enemies:
            return "win"
        return None

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    # -- turn ----------------------------------------------------------------

    def step(self, intent: Intent) -> TurnResult:
        """Run one full turn for *intent*."""
        if intent.is_quit:
            self._quit = True
            self.reset_delta()
            logger.info("Quit received after %d turn(s)", self.turn)
            return TurnResult(turn=self.turn, quit=True)

        self.turn += 1
        result = TurnResult(turn=self.turn)
        try:
            self._delta = intent.movement
            player = self.floor.player
            if player is not None:
                self.floor.validate_state()
                self._resolve_move(player, result)

            result.removed = self.floor.remove_dead()

            player = self.floor.player
            if player is not None and self.sight_radius is not None:
                self.floor.reveal_around(player.position, self.sight_radius)
        finally:
            self.reset_delta()

        logger.debug(
            "Turn %d: moved=%s combats=%d removed=%d",
            result.turn, result.moved, len(result.combats), len(result.removed),
        )
        return result

    # -- internal ------------------------------------------------------------

    def _resolve_move(self, player: Player, result: TurnResult) -> None:
        if self._delta.is_zero:
            return

        candidate = player.position.offset(
            self._delta, self.floor.width, self.floor.height,
        )
        blocked = False

        for idx in self.floor.enemy_indices_at(candidate):
            enemy = self.floor.mobs[idx]
            blocked = True

            player_won = player.wins_against(enemy, self.rng)
            if player_won:
                enemy.lose_hit_point()
                self._log(
                    result,
                    f"Player attacked the enemy! the foe's hp is now {enemy.hit_points}",
                )
            else:
                player.lose_hit_point()
            if not enemy.is_dead:
                self._log(
                    result,
                    f"Enemy attacked Player! Player's hp is now {player.hit_points}",
                )

            result.combats.append(CombatOutcome(
                enemy_position=enemy.position,
                player_won=player_won,
                player_hp=player.hit_points,
                enemy_hp=enemy.hit_points,
            ))

        if not blocked and candidate != player.position:
            player.position = candidate
            result.moved = True

    def _log(self, result: TurnResult, msg: str) -> None:
        result.log.append(msg)
        if self.messages is not None:
            self.messages.send(msg)
        logger.debug(msg)
