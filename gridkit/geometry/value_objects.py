"""Geometry Bounded Context - Value Objects.

Immutable data structures representing discrete grid geometry.
Point and Vec2 validate at construction time via Pydantic; Direction and
LateralDirection are closed string enumerations that serialize by name.

Coordinate convention is screen-like: x grows east, y grows south.
"""

from __future__ import annotations

import math
import numbers
import operator
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, model_validator

from gridkit.geometry.errors import ConvertError, ConvertErrorReason

if TYPE_CHECKING:
    from gridkit.geometry.ports import RandomSource

# ---------------------------------------------------------------------------
# Numeric Constants
# ---------------------------------------------------------------------------
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# ---------------------------------------------------------------------------
# Direction
# ---------------------------------------------------------------------------
class Direction(str, Enum):
    """8-way compass direction plus ``Here`` (Value Object).

    Invariants:
        D-1: dx() and dy() are in {-1, 0, 1}
        D-2: (dx, dy) == (0, 0) only for Here
        D-3: from_delta(d.dx(), d.dy()) == d for every member
    """

    Here = "Here"
    North = "North"
    NorthEast = "NorthEast"
    East = "East"
    SouthEast = "SouthEast"
    South = "South"
    SouthWest = "SouthWest"
    West = "West"
    NorthWest = "NorthWest"

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> Direction:
        """Classify an arbitrary delta by the sign of each component.

        Magnitude is ignored: ``from_delta(5, -100)`` is ``NorthEast``.
        """
        match (_sign(dx), _sign(dy)):
            case (-1, -1):
                return cls.NorthWest
            case (-1, 0):
                return cls.West
            case (-1, 1):
                return cls.SouthWest
            case (0, -1):
                return cls.North
            case (0, 0):
                return cls.Here
            case (0, 1):
                return cls.South
            case (1, -1):
                return cls.NorthEast
            case (1, 0):
                return cls.East
            case _:  # (1, 1)
                return cls.SouthEast

    @classmethod
    def from_pair(cls, delta: tuple[int, int]) -> Direction:
        dx, dy = delta
        return cls.from_delta(dx, dy)

    @classmethod
    def from_point(cls, point: Point) -> Direction:
        """Direction of a point treated as an offset from the origin."""
        return cls.from_delta(point.x, point.y)

    @classmethod
    def default(cls) -> Direction:
        return cls.East

    @classmethod
    def random(cls, rng: RandomSource, include_here: bool = False) -> Direction:
        """Pick a direction uniformly from DIR8, or DIR9 if ``include_here``."""
        choices = DIR9 if include_here else DIR8
        return choices[int(rng.integers(0, len(choices)))]

    def dx(self) -> int:
        match self:
            case Direction.NorthWest | Direction.West | Direction.SouthWest:
                return -1
            case Direction.NorthEast | Direction.East | Direction.SouthEast:
                return 1
            case Direction.North | Direction.South | Direction.Here:
                return 0

    def dy(self) -> int:
        match self:
            case Direction.NorthEast | Direction.North | Direction.NorthWest:
                return -1
            case Direction.SouthEast | Direction.South | Direction.SouthWest:
                return 1
            case Direction.East | Direction.West | Direction.Here:
                return 0

    def delta(self) -> tuple[int, int]:
        return (self.dx(), self.dy())

    def is_here(self) -> bool:
        return self is Direction.Here

    def is_diagonal(self) -> bool:
        return self.dx() != 0 and self.dy() != 0

    def is_default(self) -> bool:
        return self is Direction.default()

    def to_vec2(self) -> Vec2:
        return Vec2(float(self.dx()), float(self.dy()))


# Clockwise from East. Iteration order is part of the public contract.
DIR8: tuple[Direction, ...] = (
    Direction.East,
    Direction.SouthEast,
    Direction.South,
    Direction.SouthWest,
    Direction.West,
    Direction.NorthWest,
    Direction.North,
    Direction.NorthEast,
)

DIR9: tuple[Direction, ...] = (Direction.Here, *DIR8)


# ---------------------------------------------------------------------------
# LateralDirection
# ---------------------------------------------------------------------------
class LateralDirection(str, Enum):
    """East/West projection of a Direction, e.g. for sprite flipping."""

    East = "East"
    West = "West"

    @classmethod
    def try_from(cls, direction: Direction) -> LateralDirection:
        """Drop the vertical component of ``direction``.

        Raises:
            ConvertError: For North, South and Here. ``reason`` tells them
                apart so callers can keep a previous facing on Here while
                picking a default on North/South.
        """
        match direction:
            case Direction.NorthEast | Direction.East | Direction.SouthEast:
                return cls.East
            case Direction.SouthWest | Direction.West | Direction.NorthWest:
                return cls.West
            case Direction.North:
                raise ConvertError(direction, ConvertErrorReason.North)
            case Direction.South:
                raise ConvertError(direction, ConvertErrorReason.South)
            case Direction.Here:
                raise ConvertError(direction, ConvertErrorReason.Here)

    @classmethod
    def default(cls) -> LateralDirection:
        return cls.East

    def is_default(self) -> bool:
        return self is LateralDirection.default()


# ---------------------------------------------------------------------------
# Vec2
# ---------------------------------------------------------------------------
class Vec2(BaseModel):
    """Continuous 2D vector in single precision (Value Object).

    Components are stored rounded to float32. Arithmetic is element-wise in
    float32 with IEEE semantics: division by zero yields inf/NaN instead of
    raising.
    """

    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x=x, y=y)

    @model_validator(mode="after")
    def to_single_precision(self) -> "Vec2":
        with np.errstate(over="ignore"):
            object.__setattr__(self, "x", float(np.float32(self.x)))
            object.__setattr__(self, "y", float(np.float32(self.y)))
        return self

    @classmethod
    def from_array(cls, values: NDArray[np.float32]) -> Vec2:
        return cls(float(values[0]), float(values[1]))

    def as_array(self) -> NDArray[np.float32]:
        return np.array((self.x, self.y), dtype=np.float32)

    def _combine(self, other: Any, op: Callable[[Any, Any], Any]) -> Vec2:
        if isinstance(other, Vec2):
            rhs = other.as_array()
        elif isinstance(other, numbers.Real):
            rhs = np.float32(other)
        else:
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return Vec2.from_array(op(self.as_array(), rhs))

    def __add__(self, other: Any) -> Vec2:
        return self._combine(other, operator.add)

    def __sub__(self, other: Any) -> Vec2:
        return self._combine(other, operator.sub)

    def __mul__(self, other: Any) -> Vec2:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: Any) -> Vec2:
        return self._combine(other, operator.truediv)


# ---------------------------------------------------------------------------
# Point helpers
# ---------------------------------------------------------------------------
def _round_half_away(value: float) -> int:
    """Round to nearest, ties away from zero, saturating to int32.

    NaN maps to 0 and infinities to the int32 bounds. This is the single
    Vec2 -> Point rounding path.
    """
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return INT32_MAX if value > 0 else INT32_MIN
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    rounded = whole if value >= 0 else -whole
    return max(INT32_MIN, min(INT32_MAX, rounded))


def _div_trunc(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero; raises ZeroDivisionError."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _try_i32(value: Any) -> int:
    try:
        as_int = operator.index(value)
    except TypeError:
        return 0
    return as_int if INT32_MIN <= as_int <= INT32_MAX else 0


def _int_pair(value: Any) -> tuple[int, int] | None:
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(v, numbers.Integral) for v in value)
    ):
        return (int(value[0]), int(value[1]))
    return None


def _float_pair(value: Any) -> Vec2 | None:
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(v, numbers.Real) for v in value)
    ):
        return Vec2(float(value[0]), float(value[1]))
    return None


def _offset(value: Any) -> tuple[int, int] | Vec2 | None:
    """Normalize an add/subtract operand: exact pair or float32 vector."""
    if isinstance(value, Point):
        return (value.x, value.y)
    if isinstance(value, Direction):
        return value.delta()
    if isinstance(value, Vec2):
        return value
    return _int_pair(value)


def _factor(value: Any) -> tuple[int, int] | Vec2 | None:
    """Normalize a scale/divide operand: exact pair or float32 vector."""
    if isinstance(value, Point):
        return (value.x, value.y)
    if isinstance(value, Vec2):
        return value
    if isinstance(value, numbers.Integral):
        return (int(value), int(value))
    if isinstance(value, numbers.Real):
        return Vec2(float(value), float(value))
    pair = _int_pair(value)
    if pair is not None:
        return pair
    return _float_pair(value)


def _unsupported(method: str, value: Any) -> TypeError:
    return TypeError(
        f"unsupported operand for Point.{method}: {type(value).__name__}"
    )


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------
class Point(BaseModel):
    """Integer grid cell (Value Object).

    Invariants:
        P-1: INT32_MIN <= x, y <= INT32_MAX (overflow fails at construction)
        P-2: value equality only; equal to the plain tuple (x, y)

    Arithmetic is exposed as named methods (add, subtract, scale, divide,
    negate) and the matching operators delegate to them. Points are frozen,
    so ``p += d`` rebinds ``p`` to ``p.add(d)``: compound and binary forms
    cannot diverge.

    Operand kinds:
        add/subtract: Point, Direction, (int, int), Vec2
        scale/divide: int, (int, int), Point, float, (float, float), Vec2

    Integer operands stay exact (division truncates toward zero and raises
    ZeroDivisionError on 0). Float operands go through Vec2 and round back
    half away from zero.
    """

    x: int = Field(ge=INT32_MIN, le=INT32_MAX)
    y: int = Field(ge=INT32_MIN, le=INT32_MAX)

    model_config = ConfigDict(frozen=True)

    def __init__(self, x: int = 0, y: int = 0) -> None:
        super().__init__(x=x, y=y)

    # --- construction ---
    @classmethod
    def zero(cls) -> Point:
        return cls(0, 0)

    @classmethod
    def try_new(cls, x: Any, y: Any) -> Point:
        """Lossy constructor: components not representable as int32 become 0."""
        return cls(_try_i32(x), _try_i32(y))

    @classmethod
    def from_pair(cls, pair: tuple[int, int]) -> Point:
        x, y = pair
        return cls(x, y)

    @classmethod
    def from_direction(cls, direction: Direction) -> Point:
        return cls(direction.dx(), direction.dy())

    @classmethod
    def from_vec2(cls, vec: Vec2) -> Point:
        return cls(_round_half_away(vec.x), _round_half_away(vec.y))

    @classmethod
    def from_index(cls, index: int, width: int) -> Point:
        """Inverse of to_index for in-range cells (row-major)."""
        return cls(index % width, index // width)

    @classmethod
    def random(cls, rng: RandomSource, horizontal: range, vertical: range) -> Point:
        """Uniform point with x in ``horizontal`` and y in ``vertical`` (half-open)."""
        return cls(
            int(rng.integers(horizontal.start, horizontal.stop)),
            int(rng.integers(vertical.start, vertical.stop)),
        )

    # --- conversion ---
    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def to_vec2(self) -> Vec2:
        return Vec2(float(self.x), float(self.y))

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def to_index(self, width: int) -> int | None:
        """Row-major index ``y * width + x``, or None when out of range.

        Only ``0 <= x < width`` and ``y >= 0`` are checked. There is no upper
        bound on y; callers bound the total cell count themselves.
        """
        if self.x < 0 or self.y < 0 or self.x >= width:
            return None
        return self.y * width + self.x

    # --- queries ---
    def direction_to(self, other: Point) -> Direction:
        """Compass direction an observer here would face to look at ``other``."""
        return Direction.from_delta(other.x - self.x, other.y - self.y)

    def square_distance(self, other: Point) -> int:
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        return dx * dx + dy * dy

    def distance(self, other: Point) -> float:
        return math.sqrt(self.square_distance(other))

    def line_to(self, other: Point) -> list[Point]:
        """Cells from here to ``other`` inclusive (Bresenham)."""
        from gridkit.geometry.services import line_to

        return line_to(self, other)

    # --- arithmetic ---
    def add(self, other: Any) -> Point:
        offset = _offset(other)
        if offset is None:
            raise _unsupported("add", other)
        if isinstance(offset, Vec2):
            return Point.from_vec2(self.to_vec2() + offset)
        return Point(self.x + offset[0], self.y + offset[1])

    def subtract(self, other: Any) -> Point:
        offset = _offset(other)
        if offset is None:
            raise _unsupported("subtract", other)
        if isinstance(offset, Vec2):
            return Point.from_vec2(self.to_vec2() - offset)
        return Point(self.x - offset[0], self.y - offset[1])

    def scale(self, other: Any) -> Point:
        factor = _factor(other)
        if factor is None:
            raise _unsupported("scale", other)
        if isinstance(factor, Vec2):
            return Point.from_vec2(self.to_vec2() * factor)
        return Point(self.x * factor[0], self.y * factor[1])

    def divide(self, other: Any) -> Point:
        factor = _factor(other)
        if factor is None:
            raise _unsupported("divide", other)
        if isinstance(factor, Vec2):
            return Point.from_vec2(self.to_vec2() / factor)
        return Point(_div_trunc(self.x, factor[0]), _div_trunc(self.y, factor[1]))

    def negate(self) -> Point:
        return Point(-self.x, -self.y)

    # --- operators ---
    def __add__(self, other: Any) -> Point:
        if _offset(other) is None:
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Point:
        if _offset(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Point:
        if _factor(other) is None:
            return NotImplemented
        return self.scale(other)

    def __truediv__(self, other: Any) -> Point:
        if _factor(other) is None:
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Point:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Point):
            return self.x == other.x and self.y == other.y
        if isinstance(other, tuple):
            return other == (self.x, self.y)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y))
