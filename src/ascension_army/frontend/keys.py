"""Key-to-intent mapping.

Vi-style letters and arrow keys move the player; Escape quits.  Diagonal
letters follow roguelike convention: ``y`` up-left, ``u`` up-right,
``b`` down-left, ``n`` down-right.
"""

from __future__ import annotations

from ascension_army.sim.core import coords
from ascension_army.sim.core.intent import Intent

KEY_BINDINGS: dict[str, Intent] = {
    "h": Intent.towards(coords.WEST),
    "j": Intent.towards(coords.SOUTH),
    "k": Intent.towards(coords.NORTH),
    "l": Intent.towards(coords.EAST),
    "y": Intent.towards(coords.NORTH_WEST),
    "u": Intent.towards(coords.NORTH_EAST),
    "b": Intent.towards(coords.SOUTH_WEST),
    "n": Intent.towards(coords.SOUTH_EAST),
    "left": Intent.towards(coords.WEST),
    "right": Intent.towards(coords.EAST),
    "up": Intent.towards(coords.NORTH),
    "down": Intent.towards(coords.SOUTH),
    "esc": Intent.quit(),
    "escape": Intent.quit(),
}

# Single letters are case-sensitive (``H`` is not ``h``); named keys are not.
_NAMED_KEYS = frozenset(k for k in KEY_BINDINGS if len(k) > 1)


def intent_for_key(key: str) -> Intent | None:
    """Return the intent bound to *key*, or ``None`` if it is unbound."""
    if key.lower() in _NAMED_KEYS:
        return KEY_BINDINGS[key.lower()]
    return KEY_BINDINGS.get(key)
