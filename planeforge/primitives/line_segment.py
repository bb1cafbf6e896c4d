"""Robust predicates on directed line segments.

:class:`LineSegment` carries the tolerance-aware membership, parallelism,
crossing-number and single-point intersection tests that containment and
intersection algorithms are built on. The line and parallel tests compare
raw cross products against ``ctx.epsilon_squared``. Segment membership
compares perpendicular and along-segment offsets against ``ctx.epsilon``,
so it agrees with :meth:`Point.equal_to` at any coordinate scale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..core.interval import Interval
from ..core.tolerance import ToleranceContext
from ..core.types import IntervalType, coerce_enum
from .line import Line
from .point import Point
from .vector import Vector

IntervalLike = Union[IntervalType, str]


@dataclass(frozen=True, eq=False)
class LineSegment:
    """Ordered pair of points ``p1 -> p2``.

    Direction matters for :meth:`right_of_point` (which physical end an
    open flag refers to) and for :meth:`flip`. Zero-length segments are
    allowed; they behave like a single point in the containment and
    intersection tests.

    Examples:
        >>> ctx = ToleranceContext()
        >>> s1 = LineSegment.from_values(ctx, 0, 0, 4, 0)
        >>> s2 = LineSegment.from_values(ctx, 2, -2, 2, 2)
        >>> s1.intersect(s2)
        Point(2.0, 0.0)
    """

    p1: Point
    p2: Point

    @classmethod
    def from_values(cls, ctx: ToleranceContext, x1: float, y1: float, x2: float, y2: float) -> 'LineSegment':
        return cls(Point(ctx, x1, y1), Point(ctx, x2, y2))

    @classmethod
    def from_array(cls, ctx: ToleranceContext, values: Sequence[float]) -> 'LineSegment':
        """Build from the first four values ``[x1, y1, x2, y2]``."""
        if len(values) < 4:
            raise ValueError("A line segment needs at least four values")
        return cls.from_values(ctx, *values[:4])

    @property
    def ctx(self) -> ToleranceContext:
        return self.p1.ctx

    def as_vector(self) -> Vector:
        return self.p1.vector_to(self.p2)

    def as_line(self) -> Line:
        return Line.from_points(self.p1, self.p2)

    def is_zero_length(self) -> bool:
        return self.p1.equal_to(self.p2)

    def equal_to(self, other: 'LineSegment') -> bool:
        return self.p1.equal_to(other.p1) and self.p2.equal_to(other.p2)

    def flip(self) -> 'LineSegment':
        return LineSegment(self.p2, self.p1)

    def start_from(self, point: Point) -> 'LineSegment':
        return LineSegment(point, self.p2)

    def translate(self, vector: Vector) -> 'LineSegment':
        return LineSegment(self.p1.translate(vector), self.p2.translate(vector))

    def closest_point(self, point: Point) -> Point:
        """Point of the segment nearest to ``point``."""
        direction = self.as_vector()
        length_sq = direction.dot(direction)
        if length_sq == 0:
            return self.p1
        factor = self.p1.vector_to(point).dot(direction) / length_sq
        if factor >= 1:
            return self.p2
        if factor <= 0:
            return self.p1
        return self.p1.translate(direction.multiply(factor))

    def on_line(self, point: Point) -> bool:
        """True if ``point`` is on the infinite line through ``p1`` and ``p2``."""
        v1 = self.p1.vector_to(point)
        v2 = self.as_vector()
        return abs(v1.cross(v2)) < self.ctx.epsilon_squared

    def parallel(self, other: 'LineSegment') -> bool:
        """True for parallel segments, including collinear and overlapping ones."""
        return abs(self.as_vector().cross(other.as_vector())) < self.ctx.epsilon_squared

    def contains_point(self, point: Point, interval_type: IntervalLike = IntervalType.CLOSED) -> bool:
        """True if ``point`` lies on the segment, honoring endpoint inclusion.

        Args:
            point: Query point
            interval_type: Which endpoints belong to the segment
        """
        interval_type = coerce_enum(interval_type, IntervalType)
        if self.is_zero_length():
            return interval_type != IntervalType.OPEN and point.equal_to(self.p1)

        at_endpoint = point.equal_to(self.p1) or point.equal_to(self.p2)
        if not at_endpoint:
            p1p = self.p1.vector_to(point)
            p1p2 = self.as_vector()
            length = p1p2.length
            # dot and cross scale with the segment length, so the band does too
            band = self.ctx.epsilon * length
            dot = p1p.dot(p1p2)
            cross = p1p.cross(p1p2)
            if not (-band <= dot <= length * length + band and abs(cross) < band):
                return False

        if interval_type == IntervalType.OPEN:
            return not point.equal_to(self.p1) and not point.equal_to(self.p2)
        if interval_type == IntervalType.OPEN_END:
            return not point.equal_to(self.p2)
        if interval_type == IntervalType.OPEN_START:
            return not point.equal_to(self.p1)
        return True

    def height_interval(self, interval_type: IntervalLike = IntervalType.CLOSED) -> Interval:
        """Vertical span of the segment, built low to high.

        When the segment points downwards the open-start/open-end flags are
        swapped so they keep referring to the segment's own ``p1``/``p2``.
        """
        interval_type = coerce_enum(interval_type, IntervalType)
        if self.p1.y < self.p2.y:
            return Interval(self.p1.y, self.p2.y, interval_type)
        return Interval(self.p2.y, self.p1.y, interval_type.swapped())

    def right_of_point(self, point: Point, interval_type: IntervalLike = IntervalType.OPEN_END) -> bool:
        """True if a horizontal ray from ``point`` towards ``+x`` crosses this segment.

        Summed over the edges of a closed polygon this gives the crossing
        number of ``point``. The default half-open interval counts a vertex
        shared by two consecutive edges exactly once.
        """
        if not self.height_interval(interval_type).contains(point.y):
            return False
        # horizontal segment lying on the ray's own line
        if point.y == self.p1.y and point.y == self.p2.y:
            return point.x < min(self.p1.x, self.p2.x)
        if self.p1.y >= self.p2.y:
            top, bottom = self.p1, self.p2
        else:
            top, bottom = self.p2, self.p1
        return top.vector_to(point).cross(top.vector_to(bottom)) >= 0

    def intersect_line(self, line: Line) -> Optional[Point]:
        """Point where ``line`` crosses this segment, if unique."""
        if self.is_zero_length():
            return self.p1 if line.contains(self.p1) else None
        candidate = self.as_line().intersect_line(line)
        if candidate is None or not self.contains_point(candidate):
            return None
        return candidate

    def intersect(
        self,
        other: 'LineSegment',
        other_interval_type: IntervalLike = IntervalType.CLOSED,
        this_interval_type: IntervalLike = IntervalType.CLOSED,
    ) -> Optional[Point]:
        """Unique intersection point with ``other``, or None.

        Parallel and collinear segments give None because there is no single
        intersection point; use :meth:`overlap` to detect collinear contact.
        """
        if self.is_zero_length():
            if other.contains_point(self.p1, other_interval_type) and self.contains_point(self.p1, this_interval_type):
                return self.p1
            return None
        if other.is_zero_length():
            if self.contains_point(other.p1, this_interval_type) and other.contains_point(other.p1, other_interval_type):
                return other.p1
            return None

        candidate = self.as_line().intersect_line(other.as_line())
        if candidate is None:
            return None
        if self.contains_point(candidate, this_interval_type) and other.contains_point(candidate, other_interval_type):
            return candidate
        return None

    def overlap(self, other: 'LineSegment') -> bool:
        """True if the segments share at least one point, collinear overlap included."""
        return (
            self.intersect(other) is not None
            or other.contains_point(self.p1)
            or other.contains_point(self.p2)
            or self.contains_point(other.p1)
            or self.contains_point(other.p2)
        )

    def __repr__(self) -> str:
        return f"LineSegment({self.p1!r} -> {self.p2!r})"


__all__ = ['LineSegment']
