"""Circles positioned in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.errors import IllegalConstructionError, UnsupportedOperationError
from ..core.tolerance import ToleranceContext
from ..core.types import ShapeKind
from .base import Shape
from .box import Box
from .matrix import Matrix
from .point import Point
from .vector import Vector


@dataclass(frozen=True, eq=False)
class Circle(Shape):
    """Circle with ``center`` and ``radius > 0``.

    :meth:`contains` covers the closed disc; intersections and distances
    are taken against the circumference.

    Raises:
        IllegalConstructionError: If ``radius`` is not positive
    """

    kind = ShapeKind.CIRCLE

    center: Point
    radius: float

    def __post_init__(self):
        if not self.radius > 0:
            raise IllegalConstructionError(f"Circle radius must be positive, got {self.radius!r}")

    @property
    def ctx(self) -> ToleranceContext:
        return self.center.ctx

    @property
    def box(self) -> Box:
        return Box(
            self.ctx,
            self.center.x - self.radius,
            self.center.y - self.radius,
            self.center.x + self.radius,
            self.center.y + self.radius,
        )

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    @property
    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def point_at_angle(self, angle: float) -> Point:
        """Point of the circumference at ``angle`` radians from the +x axis."""
        return Point(
            self.ctx,
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    def leftmost_point(self) -> Point:
        return self.center.translate(Vector(self.ctx, -self.radius, 0.0))

    def contains(self, point: Point) -> bool:
        return self.ctx.less_or_equal(self.center.distance(point), self.radius)

    def transform(self, matrix: Matrix) -> 'Circle':
        """Transform by a similarity (rotation, reflection, uniform scale, translation).

        Raises:
            UnsupportedOperationError: If ``matrix`` would turn the circle into an ellipse
        """
        eq = self.ctx.equal_to
        rotation_like = eq(matrix.a, matrix.d) and eq(matrix.b, -matrix.c)
        reflection_like = eq(matrix.a, -matrix.d) and eq(matrix.b, matrix.c)
        if not (rotation_like or reflection_like):
            raise UnsupportedOperationError("Circles only support similarity transforms")
        factor = math.sqrt(abs(matrix.determinant))
        if factor == 0:
            raise UnsupportedOperationError("Transform collapses the circle to a point")
        return Circle(self.center.transform(matrix), self.radius * factor)

    def __repr__(self) -> str:
        return f"Circle(center={self.center!r}, radius={self.radius!r})"


__all__ = ['Circle']
