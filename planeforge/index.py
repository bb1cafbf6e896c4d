"""Spatial index over shapes, backed by a shapely STRtree.

:class:`ShapeIndex` satisfies the :class:`~planeforge.primitives.CandidateSource`
protocol, so it can be handed to :meth:`Shape.distance_to` to find the
nearest of many shapes without checking every one of them.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Sequence

import numpy as np
from shapely.geometry import box as shapely_box
from shapely.strtree import STRtree

from .primitives import Box, Shape

logger = logging.getLogger(__name__)

# GEOS envelopes cannot hold infinities
_COORD_LIMIT = 1e300


def _envelope(bounds: Box):
    xmin, ymin, xmax, ymax = np.clip(
        [bounds.xmin, bounds.ymin, bounds.xmax, bounds.ymax], -_COORD_LIMIT, _COORD_LIMIT
    )
    return shapely_box(xmin, ymin, xmax, ymax)


class ShapeIndex:
    """Immutable bounding-box index of a fixed set of shapes.

    Args:
        shapes: Shapes to index. Unbounded shapes (lines, rays) are indexed
            with their box clipped to a very large finite extent.

    Examples:
        >>> geo = Geometry()
        >>> index = ShapeIndex([geo.circle(geo.point(5, 0), 1), geo.point(20, 0)])
        >>> dist, witness = geo.point(0, 0).distance_to(index)
        >>> dist
        4.0
    """

    def __init__(self, shapes: Iterable[Shape]):
        self._shapes: List[Shape] = list(shapes)
        self._tree = STRtree([_envelope(shape.box) for shape in self._shapes])
        logger.debug("Indexed %d shapes", len(self._shapes))

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    @property
    def shapes(self) -> Sequence[Shape]:
        return tuple(self._shapes)

    def candidates(self, query_box: Box) -> List[Shape]:
        """Shapes whose bounding box meets ``query_box``."""
        if not self._shapes:
            return []
        indices = self._tree.query(_envelope(query_box))
        return [self._shapes[i] for i in sorted(int(i) for i in indices)]


__all__ = ['ShapeIndex']
