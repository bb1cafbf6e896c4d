"""Distance algorithms for every pair of shape kinds.

Every function returns ``(distance, witness)`` where ``witness`` is the
shortest segment running from the first shape to the second. Shapes that
meet get distance 0 and a zero-length witness at a common point. Regions
(circle, box, polygon) are measured to their boundary.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Tuple

from .core.types import ShapeKind
from .dispatch import distances
from .intersection import boundary_segments
from .primitives import Box, CandidateSource, Circle, Line, Point, Polygon, Ray, Segment, Shape

logger = logging.getLogger(__name__)

DistanceResult = Tuple[float, Segment]

# doubling rounds before falling back to an unbounded query
MAX_SEARCH_EXPANSIONS = 64


def _between(p1: Point, p2: Point) -> DistanceResult:
    return p1.distance(p2), Segment(p1, p2)


def _touching(shape1: Shape, shape2: Shape) -> Optional[DistanceResult]:
    points = shape1.intersect(shape2)
    if points:
        return 0.0, Segment(points[0], points[0])
    return None


def _reversed(result: DistanceResult) -> DistanceResult:
    return result[0], result[1].reverse()


def _shortest(results: Iterable[DistanceResult]) -> DistanceResult:
    return min(results, key=lambda result: result[0])


def _nearest_on_ray(ray: Ray, point: Point) -> Point:
    foot = point.projection_on(ray.supporting_line)
    return foot if ray.contains(foot) else ray.start


# Points

@distances.register(ShapeKind.POINT, ShapeKind.POINT)
def distance_point_point(point1: Point, point2: Point) -> DistanceResult:
    return _between(point1, point2)


@distances.register(ShapeKind.POINT, ShapeKind.LINE)
def distance_point_line(point: Point, line: Line) -> DistanceResult:
    return _between(point, point.projection_on(line))


@distances.register(ShapeKind.POINT, ShapeKind.RAY)
def distance_point_ray(point: Point, ray: Ray) -> DistanceResult:
    return _between(point, _nearest_on_ray(ray, point))


@distances.register(ShapeKind.POINT, ShapeKind.SEGMENT)
def distance_point_segment(point: Point, segment: Segment) -> DistanceResult:
    return _between(point, segment.closest_point(point))


@distances.register(ShapeKind.POINT, ShapeKind.CIRCLE)
def distance_point_circle(point: Point, circle: Circle) -> DistanceResult:
    """Distance to the circumference.

    Every circumference point is nearest to the center; the witness then
    goes to the point at angle 0.
    """
    if point.equal_to(circle.center):
        return _between(point, circle.point_at_angle(0.0))
    dist = point.distance(circle.center)
    unit = circle.center.vector_to(point).multiply(1.0 / dist)
    return _between(point, circle.center.translate(unit.multiply(circle.radius)))


@distances.register(ShapeKind.POINT, ShapeKind.BOX)
def distance_point_box(point: Point, box: Box) -> DistanceResult:
    return _shortest(distance_point_segment(point, edge) for edge in box.to_segments())


@distances.register(ShapeKind.POINT, ShapeKind.POLYGON)
def distance_point_polygon(point: Point, polygon: Polygon) -> DistanceResult:
    return _shortest(distance_point_segment(point, edge) for edge in polygon.edges)


# Lines

@distances.register(ShapeKind.LINE, ShapeKind.LINE)
def distance_line_line(line1: Line, line2: Line) -> DistanceResult:
    if line1.incident_to(line2):
        return 0.0, Segment(line1.pt, line1.pt)
    return _touching(line1, line2) or distance_point_line(line1.pt, line2)


@distances.register(ShapeKind.LINE, ShapeKind.RAY)
def distance_line_ray(line: Line, ray: Ray) -> DistanceResult:
    # a ray missing the line points away from it (or runs parallel)
    return _touching(line, ray) or _reversed(distance_point_line(ray.start, line))


@distances.register(ShapeKind.LINE, ShapeKind.SEGMENT)
def distance_line_segment(line: Line, segment: Segment) -> DistanceResult:
    touching = _touching(line, segment)
    if touching is not None:
        return touching
    return _shortest(
        _reversed(distance_point_line(end, line)) for end in (segment.start, segment.end)
    )


@distances.register(ShapeKind.LINE, ShapeKind.CIRCLE)
def distance_line_circle(line: Line, circle: Circle) -> DistanceResult:
    touching = _touching(line, circle)
    if touching is not None:
        return touching
    return distance_point_circle(circle.center.projection_on(line), circle)


@distances.register(ShapeKind.LINE, ShapeKind.BOX)
def distance_line_box(line: Line, box: Box) -> DistanceResult:
    return _shortest(distance_line_segment(line, edge) for edge in box.to_segments())


@distances.register(ShapeKind.LINE, ShapeKind.POLYGON)
def distance_line_polygon(line: Line, polygon: Polygon) -> DistanceResult:
    return _shortest(distance_line_segment(line, edge) for edge in polygon.edges)


# Rays

@distances.register(ShapeKind.RAY, ShapeKind.RAY)
def distance_ray_ray(ray1: Ray, ray2: Ray) -> DistanceResult:
    touching = _touching(ray1, ray2)
    if touching is not None:
        return touching
    return _shortest([
        distance_point_ray(ray1.start, ray2),
        _reversed(distance_point_ray(ray2.start, ray1)),
    ])


@distances.register(ShapeKind.RAY, ShapeKind.SEGMENT)
def distance_ray_segment(ray: Ray, segment: Segment) -> DistanceResult:
    touching = _touching(ray, segment)
    if touching is not None:
        return touching
    return _shortest([
        distance_point_segment(ray.start, segment),
        _reversed(distance_point_ray(segment.start, ray)),
        _reversed(distance_point_ray(segment.end, ray)),
    ])


@distances.register(ShapeKind.RAY, ShapeKind.CIRCLE)
def distance_ray_circle(ray: Ray, circle: Circle) -> DistanceResult:
    touching = _touching(ray, circle)
    if touching is not None:
        return touching
    return distance_point_circle(_nearest_on_ray(ray, circle.center), circle)


@distances.register(ShapeKind.RAY, ShapeKind.BOX)
def distance_ray_box(ray: Ray, box: Box) -> DistanceResult:
    return _shortest(distance_ray_segment(ray, edge) for edge in box.to_segments())


@distances.register(ShapeKind.RAY, ShapeKind.POLYGON)
def distance_ray_polygon(ray: Ray, polygon: Polygon) -> DistanceResult:
    return _shortest(distance_ray_segment(ray, edge) for edge in polygon.edges)


# Segments

@distances.register(ShapeKind.SEGMENT, ShapeKind.SEGMENT)
def distance_segment_segment(seg1: Segment, seg2: Segment) -> DistanceResult:
    """Non-crossing segments are closest at one of the four endpoints."""
    touching = _touching(seg1, seg2)
    if touching is not None:
        return touching
    return _shortest([
        distance_point_segment(seg1.start, seg2),
        distance_point_segment(seg1.end, seg2),
        _reversed(distance_point_segment(seg2.start, seg1)),
        _reversed(distance_point_segment(seg2.end, seg1)),
    ])


@distances.register(ShapeKind.SEGMENT, ShapeKind.CIRCLE)
def distance_segment_circle(segment: Segment, circle: Circle) -> DistanceResult:
    touching = _touching(segment, circle)
    if touching is not None:
        return touching

    if not segment.is_zero_length():
        foot = circle.center.projection_on(segment.as_line())
        outside = segment.ctx.greater_or_equal(foot.distance(circle.center), circle.radius)
        if outside and segment.contains(foot):
            return distance_point_circle(foot, circle)

    return _shortest(
        distance_point_circle(end, circle) for end in (segment.start, segment.end)
    )


@distances.register(ShapeKind.SEGMENT, ShapeKind.BOX)
def distance_segment_box(segment: Segment, box: Box) -> DistanceResult:
    return _shortest(distance_segment_segment(segment, edge) for edge in box.to_segments())


@distances.register(ShapeKind.SEGMENT, ShapeKind.POLYGON)
def distance_segment_polygon(segment: Segment, polygon: Polygon) -> DistanceResult:
    return _shortest(distance_segment_segment(segment, edge) for edge in polygon.edges)


# Circles

@distances.register(ShapeKind.CIRCLE, ShapeKind.CIRCLE)
def distance_circle_circle(circle1: Circle, circle2: Circle) -> DistanceResult:
    """Closest points lie on the line through both centers."""
    touching = _touching(circle1, circle2)
    if touching is not None:
        return touching

    if circle1.center.equal_to(circle2.center):
        return _between(circle1.point_at_angle(0.0), circle2.point_at_angle(0.0))

    line = Line.from_points(circle1.center, circle2.center)
    points1 = line.intersect(circle1)
    points2 = line.intersect(circle2)
    return _shortest(_between(p1, p2) for p1 in points1 for p2 in points2)


@distances.register(ShapeKind.CIRCLE, ShapeKind.BOX)
def distance_circle_box(circle: Circle, box: Box) -> DistanceResult:
    return _shortest(
        _reversed(distance_segment_circle(edge, circle)) for edge in box.to_segments()
    )


@distances.register(ShapeKind.CIRCLE, ShapeKind.POLYGON)
def distance_circle_polygon(circle: Circle, polygon: Polygon) -> DistanceResult:
    return _shortest(
        _reversed(distance_segment_circle(edge, circle)) for edge in polygon.edges
    )


# Boxes and polygons

def _distance_regions(region1, region2) -> DistanceResult:
    return _shortest(
        distance_segment_segment(edge1, edge2)
        for edge1 in boundary_segments(region1)
        for edge2 in boundary_segments(region2)
    )


@distances.register(ShapeKind.BOX, ShapeKind.BOX)
def distance_box_box(box1: Box, box2: Box) -> DistanceResult:
    return _distance_regions(box1, box2)


@distances.register(ShapeKind.BOX, ShapeKind.POLYGON)
def distance_box_polygon(box: Box, polygon: Polygon) -> DistanceResult:
    return _distance_regions(box, polygon)


@distances.register(ShapeKind.POLYGON, ShapeKind.POLYGON)
def distance_polygon_polygon(polygon1: Polygon, polygon2: Polygon) -> DistanceResult:
    return _distance_regions(polygon1, polygon2)


# Nearest shape among many

def _closest_candidate(shape: Shape, candidates: Iterable[Shape]) -> Optional[DistanceResult]:
    best: Optional[DistanceResult] = None
    for candidate in candidates:
        if candidate is shape:
            continue
        result = distances.dispatch(shape, candidate)
        if result is None:
            continue
        if best is None or result[0] < best[0]:
            best = result
    return best


def distance_to_candidates(shape: Shape, source: CandidateSource) -> Optional[DistanceResult]:
    """Distance from ``shape`` to the nearest shape offered by ``source``.

    The query box around ``shape`` grows until some candidate shows up; the
    best distance found then bounds a final query that catches any closer
    shape whose box was missed.

    Returns:
        ``(distance, witness)`` or None if ``source`` holds no other shape
        with a supported distance algorithm
    """
    ctx = shape.ctx
    box = shape.box
    if not box.is_bounded():
        return _closest_candidate(shape, source.candidates(box))

    margin = max(box.width, box.height, ctx.epsilon)
    best = None
    for _ in range(MAX_SEARCH_EXPANSIONS):
        best = _closest_candidate(shape, source.candidates(box.expand(margin)))
        if best is not None:
            break
        margin *= 2
    else:
        everywhere = Box(ctx, -math.inf, -math.inf, math.inf, math.inf)
        best = _closest_candidate(shape, source.candidates(everywhere))

    if best is None:
        logger.debug("No candidate found for %s", shape.name)
        return None

    refined = _closest_candidate(shape, source.candidates(box.expand(best[0] + ctx.epsilon)))
    return refined if refined is not None else best


__all__ = [
    'DistanceResult',
    'MAX_SEARCH_EXPANSIONS',
    'distance_point_point',
    'distance_point_line',
    'distance_point_ray',
    'distance_point_segment',
    'distance_point_circle',
    'distance_point_box',
    'distance_point_polygon',
    'distance_line_line',
    'distance_line_ray',
    'distance_line_segment',
    'distance_line_circle',
    'distance_line_box',
    'distance_line_polygon',
    'distance_ray_ray',
    'distance_ray_segment',
    'distance_ray_circle',
    'distance_ray_box',
    'distance_ray_polygon',
    'distance_segment_segment',
    'distance_segment_circle',
    'distance_segment_box',
    'distance_segment_polygon',
    'distance_circle_circle',
    'distance_circle_box',
    'distance_circle_polygon',
    'distance_box_box',
    'distance_box_polygon',
    'distance_polygon_polygon',
    'distance_to_candidates',
]
