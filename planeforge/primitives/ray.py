"""Semi-infinite rays."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Union

from ..core.errors import IllegalConstructionError
from ..core.tolerance import ToleranceContext
from ..core.types import ShapeKind
from .base import Shape
from .line import Line
from .matrix import Matrix
from .point import Point
from .vector import Vector

if TYPE_CHECKING:
    from .box import Box
    from .segment import Segment


@dataclass(frozen=True, eq=False)
class Ray(Shape):
    """Ray starting at ``point``, described by its normal ``vector``.

    As with :class:`Line` the vector is a *normal*, not a direction: the
    ray runs along ``vector`` rotated clockwise, so the default normal
    ``(0, 1)`` gives a ray towards ``+x``. A point ``q`` is on the ray when
    ``(q - point) . vector == 0`` and it lies on the forward side.

    Raises:
        IllegalConstructionError: If ``vector`` is a zero vector
    """

    kind = ShapeKind.RAY

    point: Point
    vector: Optional[Vector] = None

    def __post_init__(self):
        vector = self.vector if self.vector is not None else Vector(self.point.ctx, 0.0, 1.0)
        if vector.is_zero():
            raise IllegalConstructionError("Ray normal vector must not be zero")
        object.__setattr__(self, 'vector', vector.normalize())

    @classmethod
    def from_direction(cls, start: Point, direction: Vector) -> 'Ray':
        """Ray from ``start`` heading along ``direction``."""
        return cls(start, direction.rotate90_ccw())

    @property
    def ctx(self) -> ToleranceContext:
        return self.point.ctx

    @property
    def start(self) -> Point:
        return self.point

    @property
    def end(self) -> None:
        return None

    @property
    def length(self) -> float:
        return math.inf

    @property
    def direction(self) -> Vector:
        return self.vector.rotate90_cw()

    @property
    def slope(self) -> float:
        return self.direction.slope

    @property
    def supporting_line(self) -> Line:
        return Line(self.point, self.vector)

    @property
    def box(self) -> 'Box':
        """Half-infinite bounding box; unbounded on the sides the ray heads to."""
        from .box import Box

        ctx = self.ctx
        direction = self.direction
        px, py = self.point.x, self.point.y
        return Box(
            ctx,
            -math.inf if ctx.less_than(direction.x, 0) else px,
            -math.inf if ctx.less_than(direction.y, 0) else py,
            math.inf if ctx.greater_than(direction.x, 0) else px,
            math.inf if ctx.greater_than(direction.y, 0) else py,
        )

    def contains(self, point: Point) -> bool:
        if self.point.equal_to(point):
            return True
        vec = self.point.vector_to(point)
        return (
            self.ctx.equal_zero(self.vector.dot(vec))
            and self.ctx.greater_or_equal(vec.cross(self.vector), 0)
        )

    def split(self, point: Point) -> List[Union['Segment', 'Ray']]:
        """Split at ``point`` into ``[Segment, Ray]``.

        Returns ``[self]`` when ``point`` is the start and ``[]`` when the
        point is not on the ray.
        """
        from .segment import Segment

        if not self.contains(point):
            return []
        if self.point.equal_to(point):
            return [self]
        return [Segment(self.point, point), Ray(point, self.vector)]

    def transform(self, matrix: Matrix) -> 'Ray':
        direction = self.direction.transform(matrix)
        return Ray.from_direction(self.point.transform(matrix), direction)

    def rotate(self, angle: float, center: Optional[Point] = None) -> 'Ray':
        center = center if center is not None else Point(self.ctx)
        return Ray(self.point.rotate(angle, center), self.vector.rotate(angle))

    def __repr__(self) -> str:
        return f"Ray(point={self.point!r}, vector={self.vector!r})"


__all__ = ['Ray']
