"""Axis-aligned boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from ..core.errors import IllegalConstructionError
from ..core.tolerance import ToleranceContext
from ..core.types import ShapeKind
from .base import Shape
from .matrix import Matrix
from .point import Point
from .segment import Segment


@dataclass(frozen=True, eq=False)
class Box(Shape):
    """Axis-aligned rectangle ``[xmin, xmax] x [ymin, ymax]``.

    Boxes serve both as bounding boxes of other shapes (and may then be
    infinite) and as a shape of their own. As a shape, intersections and
    distances are computed against the box boundary while
    :meth:`contains` covers the closed interior.

    Raises:
        IllegalConstructionError: If ``xmin > xmax`` or ``ymin > ymax``
    """

    kind = ShapeKind.BOX

    ctx: ToleranceContext
    xmin: float = 0.0
    ymin: float = 0.0
    xmax: float = 0.0
    ymax: float = 0.0

    def __post_init__(self):
        if self.xmin > self.xmax or self.ymin > self.ymax:
            raise IllegalConstructionError(
                f"Invalid box bounds ({self.xmin}, {self.ymin}, {self.xmax}, {self.ymax})"
            )

    @property
    def low(self) -> Point:
        return Point(self.ctx, self.xmin, self.ymin)

    @property
    def high(self) -> Point:
        return Point(self.ctx, self.xmax, self.ymax)

    @property
    def center(self) -> Point:
        return Point(self.ctx, (self.xmin + self.xmax) / 2, (self.ymin + self.ymax) / 2)

    @property
    def width(self) -> float:
        return abs(self.xmax - self.xmin)

    @property
    def height(self) -> float:
        return abs(self.ymax - self.ymin)

    @property
    def box(self) -> 'Box':
        return self

    def is_bounded(self) -> bool:
        return all(math.isfinite(v) for v in (self.xmin, self.ymin, self.xmax, self.ymax))

    def not_intersect(self, other: 'Box') -> bool:
        return (
            self.xmax < other.xmin
            or self.xmin > other.xmax
            or self.ymax < other.ymin
            or self.ymin > other.ymax
        )

    def intersects_box(self, other: 'Box') -> bool:
        return not self.not_intersect(other)

    def merge(self, other: 'Box') -> 'Box':
        return Box(
            self.ctx,
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def expand(self, margin: float) -> 'Box':
        """Box grown by ``margin`` on every side."""
        return Box(self.ctx, self.xmin - margin, self.ymin - margin, self.xmax + margin, self.ymax + margin)

    def less_than(self, other: 'Box') -> bool:
        """Order by low corner, then by high corner (see :meth:`Point.less_than`)."""
        if self.low.less_than(other.low):
            return True
        return self.low.equal_to(other.low) and self.high.less_than(other.high)

    def equal_to(self, other: 'Box') -> bool:
        return self.low.equal_to(other.low) and self.high.equal_to(other.high)

    def contains(self, point: Point) -> bool:
        ctx = self.ctx
        return (
            ctx.greater_or_equal(point.x, self.xmin)
            and ctx.less_or_equal(point.x, self.xmax)
            and ctx.greater_or_equal(point.y, self.ymin)
            and ctx.less_or_equal(point.y, self.ymax)
        )

    def to_points(self) -> List[Point]:
        """Corners counterclockwise from the lower-left one."""
        return [
            Point(self.ctx, self.xmin, self.ymin),
            Point(self.ctx, self.xmax, self.ymin),
            Point(self.ctx, self.xmax, self.ymax),
            Point(self.ctx, self.xmin, self.ymax),
        ]

    def to_segments(self) -> List[Segment]:
        """Edges counterclockwise from the lower-left corner."""
        pts = self.to_points()
        return [Segment(pts[i], pts[(i + 1) % 4]) for i in range(4)]

    def transform(self, matrix: Matrix) -> 'Box':
        """Bounding box of the transformed corners."""
        corners = [pt.transform(matrix) for pt in self.to_points()]
        xs = [pt.x for pt in corners]
        ys = [pt.y for pt in corners]
        return Box(self.ctx, min(xs), min(ys), max(xs), max(ys))

    def __repr__(self) -> str:
        return f"Box({self.xmin!r}, {self.ymin!r}, {self.xmax!r}, {self.ymax!r})"


__all__ = ['Box']
