"""Conversions between planeforge shapes and shapely geometries.

Only bounded shapes have a shapely counterpart. Circles are approximated
by a buffered point; everything else converts exactly.
"""

from __future__ import annotations

from typing import Callable, Dict

from shapely.geometry import LinearRing as ShapelyLinearRing
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry import box as shapely_box
from shapely.geometry.base import BaseGeometry

from .core.errors import UnsupportedOperationError
from .core.tolerance import ToleranceContext
from .core.types import ShapeKind
from .primitives import Box, Circle, Point, Polygon, Segment, Shape


def _point_to_shapely(point: Point, quad_segs: int) -> BaseGeometry:
    return ShapelyPoint(point.x, point.y)


def _segment_to_shapely(segment: Segment, quad_segs: int) -> BaseGeometry:
    return ShapelyLineString([(segment.start.x, segment.start.y), (segment.end.x, segment.end.y)])


def _box_to_shapely(box: Box, quad_segs: int) -> BaseGeometry:
    if not box.is_bounded():
        raise UnsupportedOperationError("Cannot convert an unbounded box to shapely")
    return shapely_box(box.xmin, box.ymin, box.xmax, box.ymax)


def _circle_to_shapely(circle: Circle, quad_segs: int) -> BaseGeometry:
    return ShapelyPoint(circle.center.x, circle.center.y).buffer(circle.radius, quad_segs=quad_segs)


def _polygon_to_shapely(polygon: Polygon, quad_segs: int) -> BaseGeometry:
    return ShapelyPolygon(polygon.coords)


_CONVERTERS: Dict[ShapeKind, Callable[[Shape, int], BaseGeometry]] = {
    ShapeKind.POINT: _point_to_shapely,
    ShapeKind.SEGMENT: _segment_to_shapely,
    ShapeKind.BOX: _box_to_shapely,
    ShapeKind.CIRCLE: _circle_to_shapely,
    ShapeKind.POLYGON: _polygon_to_shapely,
}


def to_shapely(shape: Shape, quad_segs: int = 16) -> BaseGeometry:
    """Convert a bounded shape to the matching shapely geometry.

    Args:
        shape: Shape to convert
        quad_segs: Segments per quarter circle when approximating a circle

    Returns:
        shapely Point, LineString or Polygon

    Raises:
        UnsupportedOperationError: For lines, rays and unbounded boxes
    """
    converter = _CONVERTERS.get(shape.kind)
    if converter is None:
        raise UnsupportedOperationError(f"No shapely counterpart for {shape.name}")
    return converter(shape, quad_segs)


def from_shapely(geometry: BaseGeometry, ctx: ToleranceContext) -> Shape:
    """Convert a shapely geometry to a planeforge shape under ``ctx``.

    Supports points, two-point line strings, and polygons or linear rings
    without holes.

    Raises:
        UnsupportedOperationError: For any other geometry
    """
    if geometry.is_empty:
        raise UnsupportedOperationError("Cannot convert an empty geometry")

    if isinstance(geometry, ShapelyPoint):
        return Point(ctx, geometry.x, geometry.y)

    if isinstance(geometry, ShapelyLinearRing):
        return Polygon.from_coords(ctx, list(geometry.coords))

    if isinstance(geometry, ShapelyLineString):
        coords = list(geometry.coords)
        if len(coords) != 2:
            raise UnsupportedOperationError(
                f"Only two-point line strings convert to segments, got {len(coords)} points"
            )
        return Segment.from_values(ctx, coords[0][0], coords[0][1], coords[1][0], coords[1][1])

    if isinstance(geometry, ShapelyPolygon):
        if len(geometry.interiors) > 0:
            raise UnsupportedOperationError("Polygons with holes are not supported")
        return Polygon.from_coords(ctx, list(geometry.exterior.coords))

    raise UnsupportedOperationError(f"Unsupported geometry type: {geometry.geom_type}")


__all__ = ['to_shapely', 'from_shapely']
