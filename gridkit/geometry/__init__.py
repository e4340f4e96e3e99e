"""Geometry Bounded Context.

Responsible for discrete 2D grid geometry:
- Value Objects: Direction, LateralDirection, Vec2, Point
- Services: line_to (Bresenham), circle_outline / filled_circle (midpoint)
"""

from gridkit.geometry.errors import (
    ConvertError,
    ConvertErrorReason,
    GeometryError,
    InvalidRadiusError,
    InvalidStateFileError,
    StateFileTooLargeError,
)
from gridkit.geometry.services import circle_outline, filled_circle, line_to
from gridkit.geometry.value_objects import (
    DIR8,
    DIR9,
    Direction,
    LateralDirection,
    Point,
    Vec2,
)

__all__ = [
    "DIR8",
    "DIR9",
    "ConvertError",
    "ConvertErrorReason",
    "Direction",
    "GeometryError",
    "InvalidRadiusError",
    "InvalidStateFileError",
    "LateralDirection",
    "Point",
    "StateFileTooLargeError",
    "Vec2",
    "circle_outline",
    "filled_circle",
    "line_to",
]
