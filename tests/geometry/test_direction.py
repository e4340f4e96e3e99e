"""Tests for the Direction value object.

Covers delta classification, per-variant constants, enumeration order,
vector conversion and random sampling.
"""

from __future__ import annotations

from collections import Counter

import pytest

from gridkit.geometry.value_objects import DIR8, DIR9, Direction, Point, Vec2

DELTAS = {
    Direction.Here: (0, 0),
    Direction.North: (0, -1),
    Direction.NorthEast: (1, -1),
    Direction.East: (1, 0),
    Direction.SouthEast: (1, 1),
    Direction.South: (0, 1),
    Direction.SouthWest: (-1, 1),
    Direction.West: (-1, 0),
    Direction.NorthWest: (-1, -1),
}


# ===========================================================================
# from_delta
# ===========================================================================
def test_from_delta_uses_sign_only():
    assert Direction.from_delta(10, 20) == Direction.SouthEast
    assert Direction.from_delta(1, 1) == Direction.SouthEast
    assert Direction.from_delta(5, -100) == Direction.NorthEast
    assert Direction.from_delta(1, -1) == Direction.NorthEast


@pytest.mark.parametrize("direction", list(Direction))
@pytest.mark.parametrize("magnitude", [1, 2, 37, 2**31 - 1])
def test_from_delta_ignores_magnitude(direction, magnitude):
    dx, dy = direction.delta()
    assert Direction.from_delta(dx * magnitude, dy * magnitude) is direction


def test_from_delta_zero_is_here():
    assert Direction.from_delta(0, 0) is Direction.Here


def test_from_pair():
    assert Direction.from_pair((10, 20)) is Direction.SouthEast


def test_from_point():
    assert Direction.from_point(Point(10, 20)) is Direction.SouthEast
    assert Direction.from_point(Point(-3, 0)) is Direction.West


def test_from_point_difference():
    assert Point(1, 2).direction_to(Point(3, 4)) is Direction.SouthEast


# ===========================================================================
# Per-variant constants
# ===========================================================================
@pytest.mark.parametrize("direction,delta", list(DELTAS.items()))
def test_dx_dy(direction, delta):
    assert (direction.dx(), direction.dy()) == delta
    assert direction.delta() == delta


def test_delta_mapping_is_bijective():
    deltas = [d.delta() for d in Direction]
    assert len(set(deltas)) == 9
    for direction in Direction:
        assert Direction.from_delta(*direction.delta()) is direction


def test_is_here():
    assert Direction.Here.is_here()
    assert not any(d.is_here() for d in DIR8)


def test_is_diagonal():
    diagonals = {d for d in Direction if d.is_diagonal()}
    assert diagonals == {
        Direction.NorthEast,
        Direction.SouthEast,
        Direction.SouthWest,
        Direction.NorthWest,
    }


def test_default_is_east():
    assert Direction.default() is Direction.East
    assert Direction.East.is_default()
    assert not Direction.West.is_default()


def test_to_vec2_is_exact():
    assert Direction.NorthWest.to_vec2() == Vec2(-1.0, -1.0)
    assert Direction.Here.to_vec2() == Vec2(0.0, 0.0)
    assert Direction.South.to_vec2() == Vec2(0.0, 1.0)


# ===========================================================================
# Enumeration order (contract)
# ===========================================================================
def test_dir8_order():
    assert DIR8 == (
        Direction.East,
        Direction.SouthEast,
        Direction.South,
        Direction.SouthWest,
        Direction.West,
        Direction.NorthWest,
        Direction.North,
        Direction.NorthEast,
    )


def test_dir9_order():
    assert DIR9 == (
        Direction.Here,
        Direction.East,
        Direction.SouthEast,
        Direction.South,
        Direction.SouthWest,
        Direction.West,
        Direction.NorthWest,
        Direction.North,
        Direction.NorthEast,
    )


# ===========================================================================
# Random sampling
# ===========================================================================
def test_random_excludes_here_by_default(rng):
    samples = [Direction.random(rng) for _ in range(2000)]
    assert Direction.Here not in samples
    assert set(samples) == set(DIR8)


def test_random_includes_here_when_requested(rng):
    samples = [Direction.random(rng, include_here=True) for _ in range(2000)]
    assert set(samples) == set(DIR9)


def test_random_is_roughly_uniform(rng):
    counts = Counter(Direction.random(rng) for _ in range(8000))
    # Expected 1000 each; 6 sigma is ~180
    for direction in DIR8:
        assert 800 < counts[direction] < 1200


def test_random_uses_injected_source():
    class FixedSource:
        def __init__(self, value: int) -> None:
            self.value = value
            self.calls: list[tuple[int, int]] = []

        def integers(self, low: int, high: int) -> int:
            self.calls.append((low, high))
            return self.value

    source = FixedSource(0)
    assert Direction.random(source) is Direction.East
    assert Direction.random(source, include_here=True) is Direction.Here
    assert source.calls == [(0, 8), (0, 9)]


# ===========================================================================
# Serialization
# ===========================================================================
def test_serializes_by_name():
    assert Direction.SouthEast.value == "SouthEast"
    assert Direction("NorthWest") is Direction.NorthWest
