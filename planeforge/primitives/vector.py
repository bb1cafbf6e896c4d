"""Free 2D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..core.errors import DegenerateGeometryError, UnsupportedOperationError
from ..core.tolerance import ToleranceContext

if TYPE_CHECKING:
    from .matrix import Matrix
    from .point import Point


@dataclass(frozen=True, eq=False)
class Vector:
    """Displacement ``(x, y)``; equality is tolerance based (see :meth:`equal_to`).

    Examples:
        >>> ctx = ToleranceContext()
        >>> Vector(ctx, 3, 4).length
        5.0
        >>> Vector(ctx, 1, 0).cross(Vector(ctx, 0, 1))
        1.0
    """

    ctx: ToleranceContext
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_points(cls, start: 'Point', end: 'Point') -> 'Vector':
        """Vector going from ``start`` to ``end`` (context taken from ``start``)."""
        return cls(start.ctx, end.x - start.x, end.y - start.y)

    def clone(self) -> 'Vector':
        return Vector(self.ctx, self.x, self.y)

    @property
    def length(self) -> float:
        return math.sqrt(self.dot(self))

    @property
    def slope(self) -> float:
        """Angle to the x axis in radians, in ``[0, 2*pi)``."""
        angle = math.atan2(self.y, self.x)
        if angle < 0:
            angle += 2 * math.pi
        return angle

    def equal_to(self, other: 'Vector') -> bool:
        return self.ctx.equal_to(self.x, other.x) and self.ctx.equal_to(self.y, other.y)

    def is_zero(self) -> bool:
        return self.ctx.equal_zero(self.x) and self.ctx.equal_zero(self.y)

    def dot(self, other: 'Vector') -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: 'Vector') -> float:
        """z component of the 3D cross product of two xy-plane vectors."""
        return self.x * other.y - self.y * other.x

    def normalize(self) -> 'Vector':
        """Return the unit vector in the same direction.

        Raises:
            DegenerateGeometryError: If the length is zero within tolerance
        """
        length = self.length
        if self.ctx.equal_zero(length):
            raise DegenerateGeometryError(f"Cannot normalize zero-length vector ({self.x}, {self.y})")
        return Vector(self.ctx, self.x / length, self.y / length)

    def multiply(self, scalar: float) -> 'Vector':
        return Vector(self.ctx, scalar * self.x, scalar * self.y)

    def add(self, other: 'Vector') -> 'Vector':
        return Vector(self.ctx, self.x + other.x, self.y + other.y)

    def subtract(self, other: 'Vector') -> 'Vector':
        return Vector(self.ctx, self.x - other.x, self.y - other.y)

    def invert(self) -> 'Vector':
        return Vector(self.ctx, -self.x, -self.y)

    def rotate90_ccw(self) -> 'Vector':
        return Vector(self.ctx, -self.y, self.x)

    def rotate90_cw(self) -> 'Vector':
        return Vector(self.ctx, self.y, -self.x)

    def rotate(self, angle: float, center: Optional['Point'] = None) -> 'Vector':
        """Rotate counterclockwise by ``angle`` radians around the origin.

        Raises:
            UnsupportedOperationError: If ``center`` is not the origin
        """
        from .matrix import Matrix
        from .point import Point

        if center is not None and not center.equal_to(Point(self.ctx)):
            raise UnsupportedOperationError("A free vector can only be rotated around the origin")
        return self.transform(Matrix(self.ctx).rotate(angle))

    def transform(self, matrix: 'Matrix') -> 'Vector':
        """Apply the linear part of ``matrix``; a free vector ignores translation."""
        x, y = matrix.transform_direction(self.x, self.y)
        return Vector(self.ctx, x, y)

    def angle_to(self, other: 'Vector') -> float:
        """Counterclockwise angle from this vector to ``other`` in ``[0, 2*pi)``."""
        norm1 = self.normalize()
        norm2 = other.normalize()
        angle = math.atan2(norm1.cross(norm2), norm1.dot(norm2))
        if angle < 0:
            angle += 2 * math.pi
        return angle

    def projection_on(self, other: 'Vector') -> 'Vector':
        """Vector projection of this vector on ``other``."""
        unit = other.normalize()
        return unit.multiply(self.dot(unit))

    def __add__(self, other: 'Vector') -> 'Vector':
        return self.add(other)

    def __sub__(self, other: 'Vector') -> 'Vector':
        return self.subtract(other)

    def __mul__(self, scalar: float) -> 'Vector':
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> 'Vector':
        return self.invert()

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector({self.x!r}, {self.y!r})"


__all__ = ['Vector']
