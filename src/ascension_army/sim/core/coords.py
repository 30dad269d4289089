"""Grid position and movement primitives.

Both types are frozen Pydantic models: equality is structural, instances
are hashable (so they can live in sets), and a moved mob always receives
a brand-new ``Coordinate`` rather than having its position mutated.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Coordinate
# ---------------------------------------------------------------------------

class Coordinate(BaseModel):
    """A cell on the floor grid.  ``x`` is the column, ``y`` the row."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(ge=0)
    y: int = Field(ge=0)

    def offset(self, delta: MovementDelta, width: int, height: int) -> Coordinate:
        """Return the cell reached by applying *delta*, clamped to the grid.

        Each axis is clamped independently to ``[0, width-1]`` and
        ``[0, height-1]``.  A step that would go below 0 keeps the axis at
        its current value instead of wrapping.
        """
        return Coordinate(
            x=_clamp_axis(self.x, delta.dx, width),
            y=_clamp_axis(self.y, delta.dy, height),
        )

    def chebyshev(self, other: Coordinate) -> int:
        """King-move distance between two cells."""
        return max(abs(self.x - other.x), abs(self.y - other.y))


def _clamp_axis(value: int, step: int, size: int) -> int:
    moved = value + step
    if moved < 0:
        return value
    return min(moved, size - 1)


# ---------------------------------------------------------------------------
# MovementDelta
# ---------------------------------------------------------------------------

_UNIT_STEPS = (-1, 0, 1)


class MovementDelta(BaseModel):
    """A single-step move: one of the 8 compass directions, or standing still."""

    model_config = ConfigDict(frozen=True)

    dx: int = 0
    dy: int = 0

    @field_validator("dx", "dy")
    @classmethod
    def _check_unit_step(cls, v: int) -> int:
        if v not in _UNIT_STEPS:
            raise ValueError(f"movement step must be -1, 0 or 1, got {v}")
        return v

    @property
    def is_zero(self) -> bool:
        return self.dx == 0 and self.dy == 0


ZERO_DELTA = MovementDelta()

# Compass directions, screen orientation (y grows downwards).
NORTH = MovementDelta(dx=0, dy=-1)
SOUTH = MovementDelta(dx=0, dy=1)
WEST = MovementDelta(dx=-1, dy=0)
EAST = MovementDelta(dx=1, dy=0)
NORTH_WEST = MovementDelta(dx=-1, dy=-1)
NORTH_EAST = MovementDelta(dx=1, dy=-1)
SOUTH_WEST = MovementDelta(dx=-1, dy=1)
SOUTH_EAST = MovementDelta(dx=1, dy=1)

DIRECTIONS: tuple[MovementDelta, ...] = (
    NORTH_WEST, NORTH, NORTH_EAST,
    WEST, EAST,
    SOUTH_WEST, SOUTH, SOUTH_EAST,
)
