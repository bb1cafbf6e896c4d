"""Infinite lines in normal form."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..core.errors import IllegalConstructionError
from ..core.tolerance import ToleranceContext
from ..core.types import ShapeKind
from .base import Shape
from .matrix import Matrix
from .point import Point
from .vector import Vector

if TYPE_CHECKING:
    from .box import Box


@dataclass(frozen=True, eq=False)
class Line(Shape):
    """Infinite line through ``pt`` with unit normal ``norm``.

    The normal is normalized on construction and oriented so that
    ``norm . pt <= 0``, which fixes the sign of the standard form
    ``A*x + B*y = C`` returned by :attr:`standard`.

    Use :meth:`from_points` to build a line through two points.

    Raises:
        IllegalConstructionError: If ``norm`` is a zero vector
    """

    kind = ShapeKind.LINE

    pt: Point
    norm: Vector

    def __post_init__(self):
        if self.norm.is_zero():
            raise IllegalConstructionError("Line normal vector must not be zero")
        norm = self.norm.normalize()
        if norm.dot(Vector(self.pt.ctx, self.pt.x, self.pt.y)) > 0:
            norm = norm.invert()
        object.__setattr__(self, 'norm', norm)

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> 'Line':
        """Line passing through ``p1`` and ``p2``.

        Raises:
            IllegalConstructionError: If the points coincide within tolerance
        """
        if p1.equal_to(p2):
            raise IllegalConstructionError(f"Cannot build a line through coincident points {p1} and {p2}")
        return cls(p1, p1.vector_to(p2).normalize().rotate90_ccw())

    @property
    def ctx(self) -> ToleranceContext:
        return self.pt.ctx

    @property
    def start(self) -> None:
        return None

    @property
    def end(self) -> None:
        return None

    @property
    def length(self) -> float:
        return math.inf

    @property
    def box(self) -> 'Box':
        from .box import Box

        return Box(self.ctx, -math.inf, -math.inf, math.inf, math.inf)

    @property
    def direction(self) -> Vector:
        """Unit direction vector (normal rotated clockwise)."""
        return self.norm.rotate90_cw()

    @property
    def slope(self) -> float:
        """Angle between the line direction and the x axis, in ``[0, 2*pi)``."""
        return self.direction.slope

    @property
    def standard(self) -> List[float]:
        """Coefficients ``[A, B, C]`` of ``A*x + B*y = C``."""
        c = self.norm.dot(Vector(self.ctx, self.pt.x, self.pt.y))
        return [self.norm.x, self.norm.y, c]

    def parallel_to(self, other: 'Line') -> bool:
        """True if parallel or incident to ``other``."""
        return self.ctx.equal_zero(self.norm.cross(other.norm))

    def incident_to(self, other: 'Line') -> bool:
        return self.parallel_to(other) and other.contains(self.pt)

    def contains(self, point: Point) -> bool:
        if self.pt.equal_to(point):
            return True
        # on the line when orthogonal to the normal
        return self.ctx.equal_zero(self.norm.dot(self.pt.vector_to(point)))

    def coord(self, point: Point) -> float:
        """Coordinate of a point on the line along its direction.

        Assumes the point lies on the line; this is not checked.
        """
        return Vector(self.ctx, point.x, point.y).cross(self.norm)

    def sort_points(self, points: Sequence[Point]) -> List[Point]:
        """Return ``points`` (assumed on the line) sorted along the line."""
        return sorted(points, key=self.coord)

    def intersect_line(self, other: 'Line') -> Optional[Point]:
        """Unique intersection point with ``other``, or None for parallel lines.

        Solves the 2x2 system of both standard forms by Cramer's rule. The
        determinant is the cross product of two unit normals, so it is
        compared against the squared tolerance.
        """
        a1, b1, c1 = self.standard
        a2, b2, c2 = other.standard
        det = a1 * b2 - b1 * a2
        if self.ctx.equal_zero_squared(det):
            return None
        x = (c1 * b2 - b1 * c2) / det
        y = (a1 * c2 - c1 * a2) / det
        return Point(self.ctx, x, y)

    def transform(self, matrix: Matrix) -> 'Line':
        p1 = self.pt.transform(matrix)
        p2 = self.pt.translate(self.direction).transform(matrix)
        return Line.from_points(p1, p2)

    def rotate(self, angle: float, center: Optional[Point] = None) -> 'Line':
        center = center if center is not None else Point(self.ctx)
        return Line(self.pt.rotate(angle, center), self.norm.rotate(angle))

    def __repr__(self) -> str:
        return f"Line(pt={self.pt!r}, norm={self.norm!r})"


__all__ = ['Line']
