"""Tests for constrained random point sampling."""

import pytest

from ascension_army.sim.core.coords import Coordinate
from ascension_army.sim.core.errors import InvalidArgument
from ascension_army.sim.core.rng import GameRNG
from ascension_army.sim.dungeon.sampler import sample_points


class _NoShuffleRNG(GameRNG):
    """Keeps the candidate list in enumeration order."""

    def shuffle(self, lst):
        pass


def _at(x: int, y: int) -> Coordinate:
    return Coordinate(x=x, y=y)


def _region(ox: int, oy: int, w: int, h: int) -> set[Coordinate]:
    return {_at(x, y) for y in range(oy, oy + h) for x in range(ox, ox + w)}


# ---------------------------------------------------------------------------
# Exact count
# ---------------------------------------------------------------------------

class TestExactCount:
    def test_six_in_six_by_six(self):
        points = sample_points(GameRNG(42), 0, 0, 6, 6, count=6)
        assert len(points) == 6
        assert len(set(points)) == 6
        assert set(points) <= _region(0, 0, 6, 6)

    def test_full_three_by_three(self):
        points = sample_points(GameRNG(42), 0, 0, 3, 3, count=9)
        assert len(points) == 9
        assert set(points) == _region(0, 0, 3, 3)

    def test_zero_count(self):
        assert sample_points(GameRNG(42), 0, 0, 4, 4, count=0) == []

    def test_respects_origin(self):
        points = sample_points(GameRNG(5), 3, 2, 4, 2, count=8)
        assert set(points) == _region(3, 2, 4, 2)

    def test_never_returns_excluded(self):
        excluded = {_at(0, 0), _at(2, 1), _at(3, 3)}
        for seed in range(100):
            points = sample_points(GameRNG(seed), 0, 0, 4, 4, count=10, excluded=excluded)
            assert len(points) == 10
            assert len(set(points)) == 10
            assert not set(points) & excluded
            assert set(points) <= _region(0, 0, 4, 4)

    def test_exclusions_fill_remaining_exactly(self):
        excluded = {_at(1, 1), _at(2, 2)}
        points = sample_points(GameRNG(9), 0, 0, 3, 3, count=7, excluded=excluded)
        assert set(points) == _region(0, 0, 3, 3) - excluded

    def test_row_major_enumeration(self):
        points = sample_points(
            _NoShuffleRNG(0), 1, 1, 2, 3, count=4, excluded=[_at(2, 1)],
        )
        assert points == [_at(1, 1), _at(1, 2), _at(2, 2), _at(1, 3)]

    def test_excluded_not_mutated(self):
        excluded = {_at(0, 0)}
        sample_points(GameRNG(1), 0, 0, 3, 3, count=5, excluded=excluded)
        assert excluded == {_at(0, 0)}

    def test_deterministic_with_same_seed(self):
        a = sample_points(GameRNG(123), 0, 0, 10, 10, count=15)
        b = sample_points(GameRNG(123), 0, 0, 10, 10, count=15)
        assert a == b

    def test_different_seeds_differ(self):
        results = {
            tuple(sample_points(GameRNG(seed), 0, 0, 10, 10, count=5))
            for seed in range(20)
        }
        assert len(results) > 1


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestInvalidArguments:
    def test_count_larger_than_area(self):
        with pytest.raises(InvalidArgument):
            sample_points(GameRNG(1), 0, 0, 2, 2, count=6)

    def test_exclusions_make_count_unsatisfiable(self):
        with pytest.raises(InvalidArgument):
            sample_points(GameRNG(1), 0, 0, 3, 3, count=8, excluded=[_at(0, 0), _at(1, 1)])

    def test_count_equal_to_area_with_exclusion(self):
        with pytest.raises(InvalidArgument):
            sample_points(GameRNG(1), 0, 0, 2, 2, count=4, excluded=[_at(0, 0)])

    def test_duplicate_exclusions_counted_once(self):
        points = sample_points(
            GameRNG(1), 0, 0, 2, 2, count=3, excluded=[_at(0, 0), _at(0, 0)],
        )
        assert set(points) == _region(0, 0, 2, 2) - {_at(0, 0)}

    def test_negative_count(self):
        with pytest.raises(InvalidArgument):
            sample_points(GameRNG(1), 0, 0, 2, 2, count=-1)

    @pytest.mark.parametrize("w,h", [(0, 3), (3, 0)])
    def test_empty_region(self, w, h):
        with pytest.raises(InvalidArgument):
            sample_points(GameRNG(1), 0, 0, w, h, count=0)

    def test_negative_origin(self):
        with pytest.raises(InvalidArgument):
            sample_points(GameRNG(1), -1, 0, 2, 2, count=1)

    def test_zero_count_cap(self):
        with pytest.raises(InvalidArgument):
            sample_points(GameRNG(1), 0, 0, 2, 2, count_cap=0)

    def test_count_cap_beyond_free_cells(self):
        with pytest.raises(InvalidArgument):
            sample_points(GameRNG(1), 0, 0, 2, 2, count_cap=5, excluded=[_at(0, 0)])


# ---------------------------------------------------------------------------
# Random count
# ---------------------------------------------------------------------------

class TestRandomCount:
    def test_count_cap_bounds_result(self):
        sizes = set()
        for seed in range(200):
            points = sample_points(GameRNG(seed), 0, 0, 5, 5, count_cap=4)
            assert len(points) < 4
            assert len(set(points)) == len(points)
            sizes.add(len(points))
        assert sizes == {0, 1, 2, 3}

    def test_count_cap_with_exclusions(self):
        excluded = {_at(2, 2)}
        for seed in range(100):
            points = sample_points(
                GameRNG(seed), 0, 0, 5, 5, count_cap=24, excluded=excluded,
            )
            assert len(points) < 24
            assert _at(2, 2) not in points

    def test_no_count_below_area(self):
        for seed in range(100):
            points = sample_points(GameRNG(seed), 0, 0, 3, 3)
            assert len(points) < 9
            assert len(set(points)) == len(points)

    def test_no_count_with_exclusions_stays_satisfiable(self):
        excluded = _region(0, 0, 3, 3) - {_at(1, 1)}
        for seed in range(50):
            points = sample_points(GameRNG(seed), 0, 0, 3, 3, excluded=excluded)
            assert points in ([], [_at(1, 1)])
