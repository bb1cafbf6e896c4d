"""Points: positions in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from ..core.tolerance import ToleranceContext
from ..core.types import ShapeKind
from .base import Shape
from .matrix import Matrix
from .vector import Vector

if TYPE_CHECKING:
    from .box import Box
    from .line import Line


@dataclass(frozen=True, eq=False)
class Point(Shape):
    """Immutable position ``(x, y)`` bound to a tolerance context.

    Points compare with :meth:`equal_to` (tolerance) and order with
    :meth:`less_than`: by y first, then by x. Because both comparisons go
    through the tolerance band, the order is not transitive for points
    closer than epsilon.

    Examples:
        >>> ctx = ToleranceContext()
        >>> Point(ctx, 1, 1).equal_to(Point(ctx, 1.0004, 1))
        True
        >>> Point(ctx, 5, 0).less_than(Point(ctx, 0, 1))
        True
    """

    kind = ShapeKind.POINT

    ctx: ToleranceContext
    x: float = 0.0
    y: float = 0.0

    @property
    def box(self) -> 'Box':
        from .box import Box

        return Box(self.ctx, self.x, self.y, self.x, self.y)

    @property
    def vertices(self) -> List['Point']:
        return [self]

    def equal_to(self, other: 'Point') -> bool:
        return self.ctx.equal_to(self.x, other.x) and self.ctx.equal_to(self.y, other.y)

    def less_than(self, other: 'Point') -> bool:
        if self.ctx.less_than(self.y, other.y):
            return True
        return self.ctx.equal_to(self.y, other.y) and self.ctx.less_than(self.x, other.x)

    def contains(self, point: 'Point') -> bool:
        return self.equal_to(point)

    def on(self, shape: Shape) -> bool:
        """Return True if this point lies on (or in) ``shape``."""
        return shape.contains(self)

    def transform(self, matrix: Matrix) -> 'Point':
        x, y = matrix.transform(self.x, self.y)
        return Point(self.ctx, x, y)

    def translate(self, vector: Vector) -> 'Point':
        return Point(self.ctx, self.x + vector.x, self.y + vector.y)

    def rotate(self, angle: float, center: Optional['Point'] = None) -> 'Point':
        cx, cy = (center.x, center.y) if center is not None else (0.0, 0.0)
        return self.transform(Matrix(self.ctx).rotate(angle, cx, cy))

    def vector_to(self, other: 'Point') -> Vector:
        return Vector(self.ctx, other.x - self.x, other.y - self.y)

    def distance(self, other: 'Point') -> float:
        """Plain Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def projection_on(self, line: 'Line') -> 'Point':
        """Foot of the perpendicular from this point to ``line``."""
        if self.equal_to(line.pt):
            return line.pt
        vec = self.vector_to(line.pt)
        if self.ctx.equal_zero(vec.cross(line.norm)):
            return line.pt
        # signed distance along the normal
        dist = vec.dot(line.norm)
        return self.translate(line.norm.multiply(dist))

    def left_to(self, line: 'Line') -> bool:
        """True if the point lies strictly on the side the line normal points to."""
        vec = line.pt.vector_to(self)
        return self.ctx.greater_than(vec.dot(line.norm), 0)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


__all__ = ['Point']
