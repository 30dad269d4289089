"""Presentation-side helpers: key bindings and text rendering."""

from ascension_army.frontend.keys import KEY_BINDINGS, intent_for_key
from ascension_army.frontend.render import (
    HELP_TEXT,
    glyph_grid,
    player_status,
    render_map,
)

__all__ = [
    "KEY_BINDINGS",
    "intent_for_key",
    "HELP_TEXT",
    "glyph_grid",
    "player_status",
    "render_map",
]
