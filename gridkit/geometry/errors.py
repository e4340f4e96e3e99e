"""Geometry Bounded Context - Error Hierarchy.

Custom exceptions for grid geometry operations.

Absent grid indices are reported as ``None`` and integer division by zero
raises the built-in ``ZeroDivisionError``; neither has a class here.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridkit.geometry.value_objects import Direction


class GeometryError(Exception):
    """Base error for geometry operations."""


# ---------------------------------------------------------------------------
# Lateral conversion
# ---------------------------------------------------------------------------
class ConvertErrorReason(str, Enum):
    """Which direction was rejected by a lateral conversion."""

    North = "North"
    South = "South"
    Here = "Here"


class ConvertError(GeometryError):
    """Direction has no horizontal component and cannot become lateral.

    Attributes:
        direction: The rejected Direction
        reason: Tag identifying the rejected input, so callers can treat
            ``Here`` differently from ``North``/``South``
    """

    def __init__(self, direction: "Direction", reason: ConvertErrorReason) -> None:
        self.direction = direction
        self.reason = reason
        super().__init__(
            f"{direction.value} has no east/west component (reason: {reason.value})"
        )


# ---------------------------------------------------------------------------
# Rasterization
# ---------------------------------------------------------------------------
class InvalidRadiusError(GeometryError):
    """Circle radius is negative."""

    def __init__(self, radius: int) -> None:
        self.radius = radius
        super().__init__(f"Radius must be >= 0, got {radius}")


# ---------------------------------------------------------------------------
# Save-state persistence
# ---------------------------------------------------------------------------
class InvalidStateFileError(GeometryError):
    """File is not a valid save-state: wrong format, empty, or schema mismatch."""


class StateFileTooLargeError(GeometryError):
    """Save-state file exceeds the configured size budget."""
