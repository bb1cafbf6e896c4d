"""Intersection algorithms for every pair of shape kinds.

Each function returns the list of intersection points (possibly empty),
without duplicates under the tolerance. Regions (circle, box, polygon)
intersect other curves along their boundary; a single point intersects a
region when the region contains it. Incident lines and identical circles
have infinitely many common points and report none (lines) or one
representative point (circles).
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Union

from .core.types import ShapeKind
from .dispatch import intersections
from .primitives import Box, Circle, Line, Point, Polygon, Ray, Segment, Shape

Region = Union[Box, Polygon]


def unique_points(points: Iterable[Point]) -> List[Point]:
    """Drop points equal (within tolerance) to an earlier one, keeping order."""
    result: List[Point] = []
    for point in points:
        if not any(point.equal_to(seen) for seen in result):
            result.append(point)
    return result


def boundary_segments(region: Region) -> Sequence[Segment]:
    if isinstance(region, Box):
        return region.to_segments()
    return region.edges


def _intersect_boundary(shape: Shape, region: Region) -> List[Point]:
    points: List[Point] = []
    for edge in boundary_segments(region):
        points.extend(intersections.dispatch(shape, edge))
    return unique_points(points)


# Points

def _point_with(point: Point, shape: Shape) -> List[Point]:
    return [point] if shape.contains(point) else []


for _kind in ShapeKind:
    intersections.register(ShapeKind.POINT, _kind)(_point_with)


# Lines

@intersections.register(ShapeKind.LINE, ShapeKind.LINE)
def intersect_line_line(line1: Line, line2: Line) -> List[Point]:
    point = line1.intersect_line(line2)
    return [point] if point is not None else []


@intersections.register(ShapeKind.LINE, ShapeKind.SEGMENT)
def intersect_line_segment(line: Line, segment: Segment) -> List[Point]:
    points = []
    if line.contains(segment.start):
        points.append(segment.start)
    # a segment lying on the line reports both ends
    if line.contains(segment.end) and not segment.is_zero_length():
        points.append(segment.end)
    if points:
        return points

    # both ends strictly on the same side
    if segment.start.left_to(line) == segment.end.left_to(line):
        return []

    point = segment.as_line_segment().intersect_line(line)
    return [point] if point is not None else []


@intersections.register(ShapeKind.LINE, ShapeKind.CIRCLE)
def intersect_line_circle(line: Line, circle: Circle) -> List[Point]:
    """Solve the circle equation along the line, centered at the foot of the perpendicular."""
    ctx = line.ctx
    foot = circle.center.projection_on(line)
    dist = circle.center.distance(foot)
    if ctx.equal_to(dist, circle.radius):
        return [foot]
    if dist > circle.radius:
        return []
    delta = math.sqrt(circle.radius * circle.radius - dist * dist)
    offset = line.direction.multiply(delta)
    return [foot.translate(offset), foot.translate(offset.invert())]


@intersections.register(ShapeKind.LINE, ShapeKind.BOX)
def intersect_line_box(line: Line, box: Box) -> List[Point]:
    return _intersect_boundary(line, box)


@intersections.register(ShapeKind.LINE, ShapeKind.POLYGON)
def intersect_line_polygon(line: Line, polygon: Polygon) -> List[Point]:
    return _intersect_boundary(line, polygon)


# Rays

def _on_ray(ray: Ray, points: Iterable[Point]) -> List[Point]:
    return [point for point in points if ray.contains(point)]


@intersections.register(ShapeKind.RAY, ShapeKind.LINE)
def intersect_ray_line(ray: Ray, line: Line) -> List[Point]:
    return _on_ray(ray, intersect_line_line(ray.supporting_line, line))


@intersections.register(ShapeKind.RAY, ShapeKind.RAY)
def intersect_ray_ray(ray1: Ray, ray2: Ray) -> List[Point]:
    if ray1.start.equal_to(ray2.start):
        return [ray1.start]
    line1 = ray1.supporting_line
    line2 = ray2.supporting_line
    if line1.incident_to(line2):
        points = [p for p in (ray1.start, ray2.start) if ray1.contains(p) and ray2.contains(p)]
        return unique_points(points)
    return _on_ray(ray2, _on_ray(ray1, intersect_line_line(line1, line2)))


@intersections.register(ShapeKind.RAY, ShapeKind.SEGMENT)
def intersect_ray_segment(ray: Ray, segment: Segment) -> List[Point]:
    points = _on_ray(ray, intersect_line_segment(ray.supporting_line, segment))
    # a ray starting on the segment meets it at its start
    if segment.contains(ray.start):
        points.insert(0, ray.start)
    return unique_points(points)


@intersections.register(ShapeKind.RAY, ShapeKind.CIRCLE)
def intersect_ray_circle(ray: Ray, circle: Circle) -> List[Point]:
    return _on_ray(ray, intersect_line_circle(ray.supporting_line, circle))


@intersections.register(ShapeKind.RAY, ShapeKind.BOX)
def intersect_ray_box(ray: Ray, box: Box) -> List[Point]:
    return _intersect_boundary(ray, box)


@intersections.register(ShapeKind.RAY, ShapeKind.POLYGON)
def intersect_ray_polygon(ray: Ray, polygon: Polygon) -> List[Point]:
    return _intersect_boundary(ray, polygon)


# Segments

@intersections.register(ShapeKind.SEGMENT, ShapeKind.SEGMENT)
def intersect_segment_segment(seg1: Segment, seg2: Segment) -> List[Point]:
    """Crossing point, or the ends of the common part for collinear overlaps."""
    eps = seg1.ctx.epsilon
    if seg1.box.expand(eps).not_intersect(seg2.box):
        return []

    if seg1.is_zero_length():
        return [seg1.start] if seg2.contains(seg1.start) else []
    if seg2.is_zero_length():
        return [seg2.start] if seg1.contains(seg2.start) else []

    point = seg1.as_line_segment().intersect(seg2.as_line_segment())
    if point is not None:
        return [point]

    # parallel, collinear or touching within tolerance
    candidates = [p for p in (seg1.start, seg1.end) if seg2.contains(p)]
    candidates += [p for p in (seg2.start, seg2.end) if seg1.contains(p)]
    return unique_points(candidates)


@intersections.register(ShapeKind.SEGMENT, ShapeKind.CIRCLE)
def intersect_segment_circle(segment: Segment, circle: Circle) -> List[Point]:
    if segment.is_zero_length():
        on_circle = segment.ctx.equal_to(circle.center.distance(segment.start), circle.radius)
        return [segment.start] if on_circle else []
    candidates = intersect_line_circle(segment.as_line(), circle)
    return [point for point in candidates if segment.contains(point)]


@intersections.register(ShapeKind.SEGMENT, ShapeKind.BOX)
def intersect_segment_box(segment: Segment, box: Box) -> List[Point]:
    return _intersect_boundary(segment, box)


@intersections.register(ShapeKind.SEGMENT, ShapeKind.POLYGON)
def intersect_segment_polygon(segment: Segment, polygon: Polygon) -> List[Point]:
    return _intersect_boundary(segment, polygon)


# Circles

@intersections.register(ShapeKind.CIRCLE, ShapeKind.CIRCLE)
def intersect_circle_circle(circle1: Circle, circle2: Circle) -> List[Point]:
    """Compare the center distance with the sum and difference of the radii."""
    ctx = circle1.ctx
    if circle1.box.expand(ctx.epsilon).not_intersect(circle2.box):
        return []

    r1, r2 = circle1.radius, circle2.radius
    if circle1.center.equal_to(circle2.center):
        # identical circles: one representative point, concentric ones: none
        return [circle1.leftmost_point()] if ctx.equal_to(r1, r2) else []

    dist = circle1.center.distance(circle2.center)
    if ctx.greater_than(dist, r1 + r2) or ctx.less_than(dist, abs(r1 - r2)):
        return []

    unit = circle1.center.vector_to(circle2.center).multiply(1.0 / dist)
    # distance from circle1.center to the chord along the center line
    a = (r1 * r1 - r2 * r2 + dist * dist) / (2 * dist)
    mid = circle1.center.translate(unit.multiply(a))
    if ctx.equal_to(dist, r1 + r2) or ctx.equal_to(dist, abs(r1 - r2)):
        return [mid]
    h = math.sqrt(max(r1 * r1 - a * a, 0.0))
    return [
        mid.translate(unit.rotate90_ccw().multiply(h)),
        mid.translate(unit.rotate90_cw().multiply(h)),
    ]


@intersections.register(ShapeKind.CIRCLE, ShapeKind.BOX)
def intersect_circle_box(circle: Circle, box: Box) -> List[Point]:
    return _intersect_boundary(circle, box)


@intersections.register(ShapeKind.CIRCLE, ShapeKind.POLYGON)
def intersect_circle_polygon(circle: Circle, polygon: Polygon) -> List[Point]:
    return _intersect_boundary(circle, polygon)


# Boxes and polygons

@intersections.register(ShapeKind.BOX, ShapeKind.BOX)
def intersect_box_box(box1: Box, box2: Box) -> List[Point]:
    if box1.expand(box1.ctx.epsilon).not_intersect(box2):
        return []
    return _intersect_regions(box1, box2)


@intersections.register(ShapeKind.BOX, ShapeKind.POLYGON)
def intersect_box_polygon(box: Box, polygon: Polygon) -> List[Point]:
    return _intersect_regions(box, polygon)


@intersections.register(ShapeKind.POLYGON, ShapeKind.POLYGON)
def intersect_polygon_polygon(polygon1: Polygon, polygon2: Polygon) -> List[Point]:
    return _intersect_regions(polygon1, polygon2)


def _intersect_regions(region1: Region, region2: Region) -> List[Point]:
    if region1.box.expand(region1.ctx.epsilon).not_intersect(region2.box):
        return []
    points: List[Point] = []
    for edge in boundary_segments(region1):
        points.extend(_intersect_boundary(edge, region2))
    return unique_points(points)


__all__ = [
    'unique_points',
    'boundary_segments',
    'intersect_line_line',
    'intersect_line_segment',
    'intersect_line_circle',
    'intersect_line_box',
    'intersect_line_polygon',
    'intersect_ray_line',
    'intersect_ray_ray',
    'intersect_ray_segment',
    'intersect_ray_circle',
    'intersect_ray_box',
    'intersect_ray_polygon',
    'intersect_segment_segment',
    'intersect_segment_circle',
    'intersect_segment_box',
    'intersect_segment_polygon',
    'intersect_circle_circle',
    'intersect_circle_box',
    'intersect_circle_polygon',
    'intersect_box_box',
    'intersect_box_polygon',
    'intersect_polygon_polygon',
]
