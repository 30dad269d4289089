"""Plain-text views of a floor for status display and debugging.

Nothing here writes to a screen: callers get strings and grids back and
decide how to show them.
"""

from __future__ import annotations

from ascension_army.sim.core.entities import MobKind
from ascension_army.sim.core.floor import DungeonFloor

EMPTY_GLYPH = "."
HIDDEN_GLYPH = " "
GLYPHS: dict[MobKind, str] = {
    MobKind.ENEMY: "E",
    MobKind.PLAYER: "@",
}

HELP_TEXT = (
    "esc: exit game, left: h, down: j, up: k, right: l, "
    "upleft: y, upright: u, downleft: b, downright: n"
)


def glyph_grid(floor: DungeonFloor, fog: bool = False) -> list[list[str]]:
    """``height x width`` grid of glyphs.

    The player is drawn over an enemy sharing its cell.  With *fog* set,
    cells that are neither revealed nor under the player are hidden.
    """
    grid = [[EMPTY_GLYPH] * floor.width for _ in range(floor.height)]
    for kind in (MobKind.ENEMY, MobKind.PLAYER):
        mask = floor.occupancy_mask([kind])
        for y, row in enumerate(mask):
            for x, occupied in enumerate(row):
                if occupied:
                    grid[y][x] = GLYPHS[kind]

    if fog:
        visible = floor.visibility_mask()
        player = floor.player
        for y in range(floor.height):
            for x in range(floor.width):
                if visible[y][x]:
                    continue
                if player is not None and (player.position.x, player.position.y) == (x, y):
                    continue
                grid[y][x] = HIDDEN_GLYPH
    return grid


def render_map(floor: DungeonFloor, fog: bool = False) -> str:
    """The glyph grid as text: cells separated by a space, one row per line."""
    return "\n".join(" ".join(row) for row in glyph_grid(floor, fog=fog))


def player_status(floor: DungeonFloor) -> str:
    """One-line player summary, or an empty string if there is no player."""
    player = floor.player
    if player is None:
        return ""
    return (
        f"Player: hp={player.hit_points} "
        f"pos=({player.position.x},{player.position.y})"
    )
