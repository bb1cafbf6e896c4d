"""Simple polygons given by an ordered ring of vertices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from ..core.errors import IllegalConstructionError
from ..core.tolerance import ToleranceContext
from ..core.types import IntervalType, Orientation, ShapeKind
from .base import Shape
from .box import Box
from .matrix import Matrix
from .point import Point
from .segment import Segment


def _clean_ring(vertices: Iterable[Point]) -> Tuple[Point, ...]:
    """Drop exact consecutive duplicates and an explicit closing vertex."""
    cleaned: List[Point] = []
    for vertex in vertices:
        if cleaned and vertex.x == cleaned[-1].x and vertex.y == cleaned[-1].y:
            continue
        cleaned.append(vertex)
    if len(cleaned) > 1 and cleaned[0].x == cleaned[-1].x and cleaned[0].y == cleaned[-1].y:
        cleaned.pop()
    return tuple(cleaned)


@dataclass(frozen=True, eq=False)
class Polygon(Shape):
    """Closed polygon over an ordered ring of at least three vertices.

    The ring is closed implicitly; repeating the first vertex at the end is
    accepted and dropped. Point classification uses the crossing number
    of :meth:`LineSegment.right_of_point` over all edges, with boundary
    points counted as contained.

    Raises:
        IllegalConstructionError: If fewer than three distinct vertices remain

    Examples:
        >>> ctx = ToleranceContext()
        >>> square = Polygon.from_coords(ctx, [(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> square.contains(Point(ctx, 0.5, 0.5))
        True
        >>> square.area
        1.0
    """

    kind = ShapeKind.POLYGON

    vertices: Tuple[Point, ...]

    def __post_init__(self):
        vertices = _clean_ring(self.vertices)
        if len(vertices) < 3:
            raise IllegalConstructionError(
                f"A polygon needs at least 3 distinct vertices, got {len(vertices)}"
            )
        object.__setattr__(self, 'vertices', vertices)

    @classmethod
    def from_coords(cls, ctx: ToleranceContext, coords: Sequence[Sequence[float]]) -> 'Polygon':
        """Build from an ``(N, 2)`` array-like of coordinates."""
        pts = np.asarray(coords, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] < 2:
            raise IllegalConstructionError("Polygon coordinates must have shape (N, 2)")
        return cls(tuple(Point(ctx, float(x), float(y)) for x, y in pts[:, :2]))

    @property
    def ctx(self) -> ToleranceContext:
        return self.vertices[0].ctx

    @property
    def coords(self) -> np.ndarray:
        return np.array([(v.x, v.y) for v in self.vertices], dtype=np.float64)

    @property
    def edges(self) -> Tuple[Segment, ...]:
        n = len(self.vertices)
        return tuple(Segment(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n))

    def to_points(self) -> List[Point]:
        return list(self.vertices)

    def to_segments(self) -> List[Segment]:
        return list(self.edges)

    @property
    def box(self) -> Box:
        coords = self.coords
        xmin, ymin = coords.min(axis=0)
        xmax, ymax = coords.max(axis=0)
        return Box(self.ctx, float(xmin), float(ymin), float(xmax), float(ymax))

    @property
    def signed_area(self) -> float:
        """Shoelace area, positive for counterclockwise rings."""
        x = self.coords[:, 0]
        y = self.coords[:, 1]
        return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)))

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def perimeter(self) -> float:
        return sum(edge.length for edge in self.edges)

    def orientation(self) -> Orientation:
        area = self.signed_area
        if self.ctx.equal_zero_squared(area):
            return Orientation.NOT_ORIENTABLE
        return Orientation.CCW if area > 0 else Orientation.CW

    def crossing_number(self, point: Point) -> int:
        """Number of edges crossed by the horizontal ray from ``point`` to ``+x``.

        Every edge keeps its lower endpoint and drops its upper one, so a
        vertex where the boundary passes through the ray's height counts once
        and a vertex where it only touches that height counts zero or two
        times. Horizontal edges never count.
        """
        count = 0
        for edge in self.edges:
            if edge.start.y == edge.end.y:
                continue
            # open flag on whichever physical end is the upper one
            interval_type = IntervalType.OPEN_END if edge.start.y < edge.end.y else IntervalType.OPEN_START
            if edge.as_line_segment().right_of_point(point, interval_type):
                count += 1
        return count

    def on_boundary(self, point: Point) -> bool:
        return any(edge.contains(point) for edge in self.edges)

    def contains(self, point: Point) -> bool:
        if self.on_boundary(point):
            return True
        return self.crossing_number(point) % 2 == 1

    def transform(self, matrix: Matrix) -> 'Polygon':
        return Polygon.from_coords(self.ctx, matrix.transform_coords(self.coords))

    def reverse(self) -> 'Polygon':
        return Polygon(tuple(reversed(self.vertices)))

    def __repr__(self) -> str:
        return f"Polygon({list(self.vertices)!r})"


__all__ = ['Polygon']
