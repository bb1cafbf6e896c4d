"""Session facade binding every new shape to one tolerance context."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from .core.config import DEFAULT_PRECISION, GeometryConfig
from .core.interval import Interval
from .core.tolerance import ToleranceContext
from .core.types import IntervalType
from .primitives import (
    Box,
    Circle,
    Line,
    LineSegment,
    Matrix,
    Point,
    Polygon,
    Ray,
    Segment,
    Vector,
)

PointLike = Union[Point, Sequence[float]]


class Geometry:
    """Factory for shapes sharing a single :class:`ToleranceContext`.

    Mixing shapes from different contexts works but warns on every binary
    operation; building them all through one ``Geometry`` avoids that.

    Args:
        precision: Epsilon of the context (ignored when ``config`` is given)
        config: Full configuration

    Raises:
        InvalidConfigError: If the precision is not a positive number

    Examples:
        >>> geo = Geometry(precision=1e-6)
        >>> s1 = geo.segment((0, 0), (4, 0))
        >>> s2 = geo.segment((2, -2), (2, 2))
        >>> s1.intersect(s2)
        [Point(2.0, 0.0)]
    """

    def __init__(self, precision: float = DEFAULT_PRECISION, config: Optional[GeometryConfig] = None):
        self.config = config if config is not None else GeometryConfig(precision=precision)
        self.ctx = ToleranceContext.from_config(self.config)

    def __repr__(self) -> str:
        return f"Geometry(precision={self.ctx.epsilon})"

    def _point(self, value: PointLike) -> Point:
        if isinstance(value, Point):
            return value
        x, y = value
        return Point(self.ctx, float(x), float(y))

    def point(self, x: float = 0.0, y: float = 0.0) -> Point:
        return Point(self.ctx, x, y)

    def vector(self, x: float = 0.0, y: float = 0.0) -> Vector:
        return Vector(self.ctx, x, y)

    def matrix(self, a=1.0, b=0.0, c=0.0, d=1.0, tx=0.0, ty=0.0) -> Matrix:
        return Matrix(self.ctx, a, b, c, d, tx, ty)

    def line(self, p1: PointLike, p2: PointLike) -> Line:
        """Infinite line through two distinct points."""
        return Line.from_points(self._point(p1), self._point(p2))

    def ray(self, start: PointLike, direction: Union[Vector, Sequence[float]]) -> Ray:
        """Ray from ``start`` heading along ``direction``."""
        if not isinstance(direction, Vector):
            direction = Vector(self.ctx, float(direction[0]), float(direction[1]))
        return Ray.from_direction(self._point(start), direction)

    def segment(self, start: PointLike, end: PointLike) -> Segment:
        return Segment(self._point(start), self._point(end))

    def line_segment(self, p1: PointLike, p2: PointLike) -> LineSegment:
        return LineSegment(self._point(p1), self._point(p2))

    def circle(self, center: PointLike, radius: float) -> Circle:
        return Circle(self._point(center), radius)

    def box(self, xmin: float, ymin: float, xmax: float, ymax: float) -> Box:
        return Box(self.ctx, xmin, ymin, xmax, ymax)

    def polygon(self, vertices: Iterable[PointLike]) -> Polygon:
        return Polygon(tuple(self._point(v) for v in vertices))

    def interval(self, low: float, high: float,
                 interval_type: Union[IntervalType, str] = IntervalType.CLOSED) -> Interval:
        return Interval(low, high, interval_type)


__all__ = ['Geometry']
