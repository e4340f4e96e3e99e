"""Geometry Bounded Context - Domain Services.

Pure rasterization of continuous shapes onto the integer grid.
NO I/O operations and no shared state: every call returns a freshly
allocated list of Points.
"""

from __future__ import annotations

from collections.abc import Iterator

from gridkit.geometry.errors import InvalidRadiusError
from gridkit.geometry.value_objects import Point

Coord = tuple[int, int]


# ---------------------------------------------------------------------------
# Line tracing
# ---------------------------------------------------------------------------
def _bresenham(a: Coord, b: Coord) -> Iterator[Coord]:
    """Cells from a to b inclusive using Bresenham (8-connected)."""
    x0, y0 = a
    x1, y1 = b
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield (x0, y0)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def line_to(start: Point, end: Point) -> list[Point]:
    """Rasterize the segment from ``start`` to ``end``.

    Guarantees:
        - first cell is ``start``, last cell is ``end``
        - consecutive cells are 8-adjacent and never repeat
        - ``line_to(end, start)`` is exactly the reverse of this result
        - ``start == end`` yields ``[start]``

    Bresenham breaks error-term ties differently depending on the direction
    of travel, so the trace always runs from the lexicographically smaller
    endpoint and is reversed when needed.

    Example:
        >>> line_to(Point(0, 0), Point(3, 1))
        [Point(x=0, y=0), Point(x=1, y=0), Point(x=2, y=1), Point(x=3, y=1)]
    """
    a = start.as_tuple()
    b = end.as_tuple()
    if a <= b:
        return [Point(x, y) for x, y in _bresenham(a, b)]
    cells = [Point(x, y) for x, y in _bresenham(b, a)]
    cells.reverse()
    return cells


# ---------------------------------------------------------------------------
# Circle tracing
# ---------------------------------------------------------------------------
def _octant(radius: int) -> list[Coord]:
    """Midpoint circle arc from (r, 0) up to the x == y diagonal.

    Every cell satisfies x >= y >= 0; y grows by exactly one per cell and x
    shrinks by at most one, so the arc is 8-connected.
    """
    x, y = radius, 0
    err = 1 - radius
    arc: list[Coord] = []
    while x >= y:
        arc.append((x, y))
        y += 1
        if err < 0:
            err += 2 * y + 1
        else:
            x -= 1
            err += 2 * (y - x) + 1
    return arc


def _append_unique(cells: list[Coord], cell: Coord) -> None:
    if not cells or cells[-1] != cell:
        cells.append(cell)


def _quadrant(radius: int) -> list[Coord]:
    """Ordered arc from (r, 0) to (0, r) built from one mirrored octant."""
    arc = _octant(radius)
    quadrant: list[Coord] = []
    for cell in arc:
        _append_unique(quadrant, cell)
    for x, y in reversed(arc):
        _append_unique(quadrant, (y, x))
    return quadrant


def circle_outline(center: Point, radius: int) -> list[Point]:
    """Rasterize a circle outline with the integer midpoint algorithm.

    The outline is a closed loop: it starts at ``center + (radius, 0)``,
    proceeds towards increasing y, and its last cell is 8-adjacent to its
    first. No cell appears twice. Radius 0 yields ``[center]``.

    Raises:
        InvalidRadiusError: If radius is negative
    """
    if radius < 0:
        raise InvalidRadiusError(radius)
    if radius == 0:
        return [center]

    quadrant = _quadrant(radius)
    offsets: list[Coord] = []
    # Each quarter turn maps (x, y) -> (-y, x) and starts where the last ended
    rotated = quadrant
    for _ in range(4):
        for cell in rotated:
            _append_unique(offsets, cell)
        rotated = [(-y, x) for x, y in rotated]
    if offsets[-1] == offsets[0]:
        offsets.pop()

    return [Point(center.x + dx, center.y + dy) for dx, dy in offsets]


def filled_circle(center: Point, radius: int) -> list[Point]:
    """Rasterize a filled disc bounded by ``circle_outline``.

    Cells are ordered row-major (y, then x ascending). Every outline cell is
    included. Radius 0 yields ``[center]``.

    Raises:
        InvalidRadiusError: If radius is negative
    """
    if radius < 0:
        raise InvalidRadiusError(radius)

    # Horizontal half-width of the outline on each row offset
    half_width: dict[int, int] = {}
    for x, y in _quadrant(radius):
        half_width[y] = max(half_width.get(y, 0), x)

    cells: list[Point] = []
    for dy in range(-radius, radius + 1):
        span = half_width[abs(dy)]
        for dx in range(-span, span + 1):
            cells.append(Point(center.x + dx, center.y + dy))
    return cells
