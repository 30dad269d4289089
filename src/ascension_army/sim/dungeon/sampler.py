"""Constrained random point sampling over a rectangular region.

Used to scatter enemies across a floor.  The algorithm:

1. Enumerate every cell of the rectangle once, in row-major order,
   dropping cells listed in ``excluded``.
2. Decide how many points to return (exact ``count``, a random amount
   below ``count_cap``, or a random amount below the region's area).
3. Shuffle the remaining cells with a fair permutation and take the
   first *n*.

Taking a prefix of a uniform shuffle gives a uniformly random subset
with no duplicates.
"""

from __future__ import annotations

from typing import Iterable

from ascension_army.sim.core.coords import Coordinate
from ascension_army.sim.core.errors import InvalidArgument
from ascension_army.sim.core.rng import GameRNG


def sample_points(
    rng: GameRNG,
    origin_x: int,
    origin_y: int,
    width: int,
    height: int,
    count: int | None = None,
    count_cap: int | None = None,
    excluded: Iterable[Coordinate] = (),
) -> list[Coordinate]:
    """Return distinct random cells of ``[origin_x, origin_x+width) x
    [origin_y, origin_y+height)``, none of them in *excluded*.

    Parameters
    ----------
    rng:
        Random source for the amount drawn and the shuffle.
    count:
        Exact number of points.  Raises :class:`InvalidArgument` when it
        exceeds the area, or when ``width*height - count`` is smaller than
        the number of excluded cells.
    count_cap:
        Used only when *count* is ``None``: the number of points is drawn
        uniformly from ``[0, count_cap)``.
    excluded:
        Cells that must never be returned.  Not modified.
    """
    if width < 1 or height < 1:
        raise InvalidArgument(f"region must be at least 1x1, got {width}x{height}")
    if origin_x < 0 or origin_y < 0:
        raise InvalidArgument(f"origin must be non-negative, got ({origin_x}, {origin_y})")

    area = width * height
    banned = set(excluded)
    candidates = [
        Coordinate(x=x, y=y)
        for y in range(origin_y, origin_y + height)
        for x in range(origin_x, origin_x + width)
        if Coordinate(x=x, y=y) not in banned
    ]

    if count is not None:
        if count < 0:
            raise InvalidArgument(f"count must be non-negative, got {count}")
        if count > area:
            raise InvalidArgument(
                f"cannot place {count} points in a {width}x{height} region"
            )
        if area - count < len(banned):
            raise InvalidArgument(
                f"{len(banned)} excluded cell(s) leave too little room for "
                f"{count} points in a {width}x{height} region"
            )
        n = count
    elif count_cap is not None:
        if count_cap < 1:
            raise InvalidArgument(f"count_cap must be at least 1, got {count_cap}")
        if count_cap - 1 > len(candidates):
            raise InvalidArgument(
                f"count_cap {count_cap} allows more points than the "
                f"{len(candidates)} free cell(s) in the region"
            )
        n = rng.random_below(count_cap)
    else:
        n = rng.random_below(min(area, len(candidates) + 1))

    rng.shuffle(candidates)
    return candidates[:n]
