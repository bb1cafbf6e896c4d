"""Bounded line segments (the segment shape of the dispatch layer)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..core.tolerance import ToleranceContext
from ..core.types import ShapeKind
from .base import Shape
from .line import Line
from .line_segment import LineSegment
from .matrix import Matrix
from .point import Point
from .vector import Vector

if TYPE_CHECKING:
    from .box import Box


@dataclass(frozen=True, eq=False)
class Segment(Shape):
    """Directed segment from ``start`` to ``end``.

    The predicates of :class:`~planeforge.primitives.line_segment.LineSegment`
    are available through :meth:`as_line_segment`; this class adds the shape
    interface (box, transform, intersect, distance).
    """

    kind = ShapeKind.SEGMENT

    start: Point
    end: Point

    @classmethod
    def from_values(cls, ctx: ToleranceContext, x1: float, y1: float, x2: float, y2: float) -> 'Segment':
        return cls(Point(ctx, x1, y1), Point(ctx, x2, y2))

    @property
    def ctx(self) -> ToleranceContext:
        return self.start.ctx

    @property
    def vertices(self) -> Tuple[Point, Point]:
        return (self.start, self.end)

    @property
    def length(self) -> float:
        return self.start.distance(self.end)

    @property
    def slope(self) -> float:
        return self.start.vector_to(self.end).slope

    @property
    def box(self) -> 'Box':
        from .box import Box

        return Box(
            self.ctx,
            min(self.start.x, self.end.x),
            min(self.start.y, self.end.y),
            max(self.start.x, self.end.x),
            max(self.start.y, self.end.y),
        )

    def as_line_segment(self) -> LineSegment:
        return LineSegment(self.start, self.end)

    def as_line(self) -> Line:
        return Line.from_points(self.start, self.end)

    def equal_to(self, other: 'Segment') -> bool:
        return self.start.equal_to(other.start) and self.end.equal_to(other.end)

    def is_zero_length(self) -> bool:
        return self.start.equal_to(self.end)

    def contains(self, point: Point) -> bool:
        return self.ctx.equal_zero(self.distance_to_point(point))

    def closest_point(self, point: Point) -> Point:
        """Point of the segment nearest to ``point``."""
        if self.is_zero_length():
            return self.start
        v_seg = self.start.vector_to(self.end)
        v_start = self.start.vector_to(point)
        v_end = self.end.vector_to(point)
        if self.ctx.greater_or_equal(v_seg.dot(v_start), 0) and self.ctx.greater_or_equal(-v_seg.dot(v_end), 0):
            unit = v_seg.normalize()
            return self.start.translate(unit.multiply(unit.dot(v_start)))
        if v_seg.dot(v_start) < 0:
            return self.start
        return self.end

    def distance_to_point(self, point: Point) -> float:
        return point.distance(self.closest_point(point))

    def tangent_in_start(self) -> Vector:
        """Unit vector from start towards end."""
        return self.start.vector_to(self.end).normalize()

    def tangent_in_end(self) -> Vector:
        """Unit vector from end towards start."""
        return self.end.vector_to(self.start).normalize()

    def reverse(self) -> 'Segment':
        return Segment(self.end, self.start)

    def split(self, point: Point) -> List[Optional['Segment']]:
        """Split at ``point``.

        Returns ``[None, self]`` or ``[self, None]`` when ``point`` is the
        start or the end, two segments when it is interior and ``[]`` when
        it is not on the segment.
        """
        if self.start.equal_to(point):
            return [None, self]
        if self.end.equal_to(point):
            return [self, None]
        if not self.contains(point):
            return []
        return [Segment(self.start, point), Segment(point, self.end)]

    def middle(self) -> Point:
        return Point(self.ctx, (self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)

    def point_at_length(self, length: float) -> Optional[Point]:
        """Point at distance ``length`` from the start, or None outside ``[0, length]``."""
        total = self.length
        if length < 0 or length > total:
            return None
        if length == 0:
            return self.start
        if length == total:
            return self.end
        factor = length / total
        return Point(
            self.ctx,
            (self.end.x - self.start.x) * factor + self.start.x,
            (self.end.y - self.start.y) * factor + self.start.y,
        )

    def definite_integral(self, ymin: float = 0.0) -> float:
        """Signed area between the segment and the horizontal line ``y = ymin``."""
        dx = self.end.x - self.start.x
        dy1 = self.start.y - ymin
        dy2 = self.end.y - ymin
        return dx * (dy1 + dy2) / 2

    def sort_points(self, points: Sequence[Point]) -> List[Point]:
        """Sort points assumed to be on the segment from start to end."""
        v_seg = self.start.vector_to(self.end)
        return sorted(points, key=lambda p: v_seg.dot(self.start.vector_to(p)))

    def transform(self, matrix: Matrix) -> 'Segment':
        return Segment(self.start.transform(matrix), self.end.transform(matrix))

    def __repr__(self) -> str:
        return f"Segment({self.start!r} -> {self.end!r})"


__all__ = ['Segment']
