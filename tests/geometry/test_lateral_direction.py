"""Tests for LateralDirection conversion from Direction."""

from __future__ import annotations

import pytest

from gridkit.geometry.errors import ConvertError, ConvertErrorReason, GeometryError
from gridkit.geometry.value_objects import Direction, LateralDirection


@pytest.mark.parametrize(
    "direction",
    [Direction.NorthEast, Direction.East, Direction.SouthEast],
)
def test_east_leaning_maps_to_east(direction):
    assert LateralDirection.try_from(direction) is LateralDirection.East


@pytest.mark.parametrize(
    "direction",
    [Direction.SouthWest, Direction.West, Direction.NorthWest],
)
def test_west_leaning_maps_to_west(direction):
    assert LateralDirection.try_from(direction) is LateralDirection.West


def test_south_east_to_lateral():
    assert LateralDirection.try_from(Direction.SouthEast) is LateralDirection.East


def test_west_to_lateral():
    assert LateralDirection.try_from(Direction.West) is LateralDirection.West


@pytest.mark.parametrize(
    "direction,reason",
    [
        (Direction.North, ConvertErrorReason.North),
        (Direction.South, ConvertErrorReason.South),
        (Direction.Here, ConvertErrorReason.Here),
    ],
)
def test_vertical_and_here_rejected_with_distinct_reason(direction, reason):
    with pytest.raises(ConvertError) as exc_info:
        LateralDirection.try_from(direction)

    assert exc_info.value.reason is reason
    assert exc_info.value.direction is direction
    assert direction.value in str(exc_info.value)


def test_convert_error_is_geometry_error():
    with pytest.raises(GeometryError):
        LateralDirection.try_from(Direction.Here)


def test_callers_can_branch_on_reason():
    """Here keeps the previous facing; North/South fall back to the default."""

    def facing(direction: Direction, previous: LateralDirection) -> LateralDirection:
        try:
            return LateralDirection.try_from(direction)
        except ConvertError as e:
            if e.reason is ConvertErrorReason.Here:
                return previous
            return LateralDirection.default()

    assert facing(Direction.Here, LateralDirection.West) is LateralDirection.West
    assert facing(Direction.North, LateralDirection.West) is LateralDirection.East
    assert facing(Direction.SouthWest, LateralDirection.East) is LateralDirection.West


def test_default_is_east():
    assert LateralDirection.default() is LateralDirection.East
    assert LateralDirection.East.is_default()
    assert not LateralDirection.West.is_default()
