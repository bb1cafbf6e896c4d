"""Abstract base class shared by every shape variant."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import TYPE_CHECKING, ClassVar, Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from ..core.tolerance import ToleranceContext
from ..core.types import ShapeKind
from .matrix import Matrix
from .vector import Vector

if TYPE_CHECKING:
    from .box import Box
    from .point import Point
    from .segment import Segment


@runtime_checkable
class CandidateSource(Protocol):
    """Anything that can enumerate shapes whose boxes meet a query box.

    Spatial indexes implement this so that nearest-shape search can be
    bounded instead of scanning every shape.
    """

    def candidates(self, query_box: 'Box') -> Iterable['Shape']:
        ...


class Shape(ABC):
    """Common interface of Point, Line, Ray, Segment, Circle, Box and Polygon.

    Shapes are immutable: ``transform`` and friends return new instances.
    ``intersect`` and ``distance_to`` dispatch on the concrete pair of
    :class:`ShapeKind` tags (see :mod:`planeforge.dispatch`).
    """

    kind: ClassVar[ShapeKind]
    ctx: ToleranceContext

    @property
    @abstractmethod
    def box(self) -> 'Box':
        """Axis-aligned bounding box (possibly infinite)."""

    @abstractmethod
    def contains(self, point: 'Point') -> bool:
        """Return True if ``point`` belongs to the shape, within tolerance."""

    @abstractmethod
    def transform(self, matrix: Matrix) -> 'Shape':
        """Return a new shape transformed by an affine matrix."""

    @property
    def name(self) -> str:
        return self.kind.value

    def clone(self) -> 'Shape':
        return replace(self)

    def translate(self, vector: Vector) -> 'Shape':
        return self.transform(Matrix(self.ctx).translate(vector))

    def rotate(self, angle: float, center: Optional['Point'] = None) -> 'Shape':
        """Rotate counterclockwise by ``angle`` radians around ``center`` (origin by default)."""
        cx, cy = (center.x, center.y) if center is not None else (0.0, 0.0)
        return self.transform(Matrix(self.ctx).rotate(angle, cx, cy))

    def intersect(self, other: 'Shape') -> Optional[List['Point']]:
        """Intersection points with ``other``.

        Returns an empty list when the shapes are disjoint and ``None`` when
        no algorithm is registered for the pair.
        """
        from ..dispatch import intersections

        return intersections.dispatch(self, other)

    def distance_to(self, other) -> Optional[Tuple[float, 'Segment']]:
        """Minimum distance and witness segment from this shape to ``other``.

        ``other`` may be a shape or a :class:`CandidateSource` (e.g. a
        :class:`~planeforge.index.ShapeIndex`). Returns ``None`` when no
        algorithm is registered for the pair.
        """
        from ..dispatch import distances

        if not isinstance(other, Shape) and isinstance(other, CandidateSource):
            from ..distance import distance_to_candidates

            return distance_to_candidates(self, other)
        return distances.dispatch(self, other)


__all__ = ['Shape', 'CandidateSource']
