"""Tests for the shape variants (ray, segment, box, circle, polygon)."""

import math

import pytest

from planeforge import (
    Box,
    Circle,
    IllegalConstructionError,
    Matrix,
    Orientation,
    Point,
    Ray,
    Segment,
    ShapeKind,
    UnsupportedOperationError,
    Vector,
)


class TestRay:
    """Test semi-infinite rays."""

    def test_contains(self, geo):
        ray = geo.ray((0, 0), (1, 0))
        assert ray.contains(geo.point(0, 0))
        assert ray.contains(geo.point(100, 0))
        assert not ray.contains(geo.point(-1, 0))
        assert not ray.contains(geo.point(5, 1))

    def test_direction_and_slope(self, geo):
        ray = geo.ray((1, 1), (0, 2))
        assert ray.direction.equal_to(geo.vector(0, 1))
        assert ray.slope == pytest.approx(math.pi / 2)

    def test_box_is_half_infinite(self, geo):
        box = geo.ray((1, 2), (1, -1)).box
        assert (box.xmin, box.ymax) == (1, 2)
        assert box.xmax == math.inf
        assert box.ymin == -math.inf

    def test_split(self, geo):
        ray = geo.ray((0, 0), (1, 0))
        segment, rest = ray.split(geo.point(3, 0))
        assert isinstance(segment, Segment)
        assert segment.length == pytest.approx(3.0)
        assert rest.start.equal_to(geo.point(3, 0))
        assert ray.split(geo.point(0, 0)) == [ray]
        assert ray.split(geo.point(0, 1)) == []

    def test_transform(self, geo):
        ray = geo.ray((0, 0), (1, 0)).rotate(math.pi / 2)
        assert ray.contains(geo.point(0, 5))
        assert not ray.contains(geo.point(0, -5))

    def test_zero_vector_raises(self, ctx):
        with pytest.raises(IllegalConstructionError):
            Ray(Point(ctx, 0, 0), Vector(ctx, 0, 0))


class TestSegment:
    """Test bounded segments."""

    def test_basic_measures(self, geo):
        seg = geo.segment((0, 0), (3, 4))
        assert seg.length == pytest.approx(5.0)
        assert seg.middle().equal_to(geo.point(1.5, 2))
        assert seg.box.equal_to(geo.box(0, 0, 3, 4))
        assert seg.kind is ShapeKind.SEGMENT

    def test_contains(self, geo):
        seg = geo.segment((0, 0), (4, 0))
        assert seg.contains(geo.point(2, 0.0005))
        assert not seg.contains(geo.point(2, 0.01))
        assert not seg.contains(geo.point(5, 0))

    def test_split(self, geo):
        seg = geo.segment((0, 0), (4, 0))
        first, second = seg.split(geo.point(1, 0))
        assert first.length == pytest.approx(1.0)
        assert second.length == pytest.approx(3.0)
        assert seg.split(geo.point(0, 0)) == [None, seg]
        assert seg.split(geo.point(4, 0)) == [seg, None]
        assert seg.split(geo.point(2, 2)) == []

    def test_point_at_length(self, geo):
        seg = geo.segment((0, 0), (0, 10))
        assert seg.point_at_length(4).equal_to(geo.point(0, 4))
        assert seg.point_at_length(11) is None

    def test_tangents(self, geo):
        seg = geo.segment((0, 0), (2, 0))
        assert seg.tangent_in_start().equal_to(geo.vector(1, 0))
        assert seg.tangent_in_end().equal_to(geo.vector(-1, 0))

    def test_definite_integral(self, geo):
        assert geo.segment((0, 1), (2, 3)).definite_integral() == pytest.approx(4.0)

    def test_sort_points(self, geo):
        seg = geo.segment((4, 4), (0, 0))
        ordered = seg.sort_points([geo.point(1, 1), geo.point(3, 3), geo.point(2, 2)])
        assert [p.x for p in ordered] == [3, 2, 1]

    def test_transform_and_reverse(self, geo):
        seg = geo.segment((0, 0), (1, 0)).transform(Matrix(geo.ctx).scale(3, 3))
        assert seg.end.equal_to(geo.point(3, 0))
        assert seg.reverse().start.equal_to(geo.point(3, 0))


class TestBox:
    """Test axis-aligned boxes."""

    def test_dimensions(self, geo):
        box = geo.box(1, 2, 4, 8)
        assert box.width == 3
        assert box.height == 6
        assert box.center.equal_to(geo.point(2.5, 5))

    def test_invalid_bounds_raise(self, ctx):
        with pytest.raises(IllegalConstructionError):
            Box(ctx, 2, 0, 1, 1)

    def test_merge_and_intersects(self, geo):
        a = geo.box(0, 0, 2, 2)
        b = geo.box(1, 1, 3, 5)
        c = geo.box(5, 5, 6, 6)
        assert a.intersects_box(b)
        assert a.not_intersect(c)
        assert a.merge(c).equal_to(geo.box(0, 0, 6, 6))

    def test_contains_is_closed(self, geo):
        box = geo.box(0, 0, 2, 2)
        assert box.contains(geo.point(2, 2))
        assert box.contains(geo.point(1, 1))
        assert not box.contains(geo.point(2.1, 1))

    def test_to_points_ccw(self, geo):
        corners = geo.box(0, 0, 2, 1).to_points()
        assert [(p.x, p.y) for p in corners] == [(0, 0), (2, 0), (2, 1), (0, 1)]
        assert len(geo.box(0, 0, 2, 1).to_segments()) == 4

    def test_transform_bounds_rotated_corners(self, geo):
        box = geo.box(-1, -1, 1, 1).rotate(math.pi / 4)
        half = math.sqrt(2)
        assert box.xmax == pytest.approx(half)
        assert box.ymin == pytest.approx(-half)

    def test_less_than(self, geo):
        assert geo.box(0, 0, 1, 1).less_than(geo.box(0, 1, 1, 2))
        assert not geo.box(0, 1, 1, 2).less_than(geo.box(0, 0, 1, 1))


class TestCircle:
    """Test circles."""

    def test_measures(self, geo):
        circle = geo.circle((0, 0), 2)
        assert circle.area == pytest.approx(4 * math.pi)
        assert circle.perimeter == pytest.approx(4 * math.pi)
        assert circle.box.equal_to(geo.box(-2, -2, 2, 2))
        assert circle.leftmost_point().equal_to(geo.point(-2, 0))

    def test_contains_closed_disc(self, geo):
        circle = geo.circle((0, 0), 1)
        assert circle.contains(geo.point(0, 0))
        assert circle.contains(geo.point(1, 0))
        assert not circle.contains(geo.point(1.01, 0))

    def test_non_positive_radius_raises(self, geo):
        with pytest.raises(IllegalConstructionError):
            geo.circle((0, 0), 0)

    def test_similarity_transform(self, geo):
        m = Matrix(geo.ctx).translate(1, 1).rotate(0.3).scale(2, 2)
        moved = geo.circle((1, 0), 1).transform(m)
        assert moved.radius == pytest.approx(2.0)
        assert moved.center.equal_to(geo.point(1, 0).transform(m))

    def test_reflection(self, geo):
        mirrored = geo.circle((1, 0), 1).transform(Matrix(geo.ctx, -1, 0, 0, 1))
        assert mirrored.center.equal_to(geo.point(-1, 0))
        assert mirrored.radius == pytest.approx(1.0)

    def test_non_uniform_scale_raises(self, geo):
        with pytest.raises(UnsupportedOperationError):
            geo.circle((1, 0), 1).transform(Matrix(geo.ctx).scale(2, 1))


class TestPolygon:
    """Test simple polygons."""

    def test_area_and_orientation(self, geo):
        ccw = geo.polygon([(0, 0), (2, 0), (2, 2), (0, 2)])
        assert ccw.signed_area == pytest.approx(4.0)
        assert ccw.orientation() is Orientation.CCW
        assert ccw.reverse().orientation() is Orientation.CW
        assert ccw.perimeter == pytest.approx(8.0)

    def test_closing_vertex_is_dropped(self, geo):
        polygon = geo.polygon([(0, 0), (1, 0), (1, 1), (0, 0)])
        assert len(polygon.vertices) == 3
        assert len(polygon.edges) == 3

    def test_too_few_vertices_raise(self, geo):
        with pytest.raises(IllegalConstructionError):
            geo.polygon([(0, 0), (1, 1), (1, 1)])

    def test_contains_boundary_and_interior(self, geo):
        polygon = geo.polygon([(0, 0), (4, 0), (4, 4), (2, 2), (0, 4)])
        assert polygon.contains(geo.point(1, 1))
        assert polygon.contains(geo.point(2, 2))
        assert polygon.contains(geo.point(4, 2))
        assert not polygon.contains(geo.point(2, 3))
        assert not polygon.contains(geo.point(5, 1))

    def test_box(self, geo):
        polygon = geo.polygon([(0, -1), (3, 0), (1, 5)])
        assert polygon.box.equal_to(geo.box(0, -1, 3, 5))

    def test_transform(self, geo):
        polygon = geo.polygon([(0, 0), (1, 0), (0, 1)])
        moved = polygon.translate(geo.vector(2, 3))
        assert moved.vertices[0].equal_to(geo.point(2, 3))
        assert moved.area == pytest.approx(polygon.area)

    def test_degenerate_orientation(self, geo):
        flat = geo.polygon([(0, 0), (1, 0), (2, 0)])
        assert flat.orientation() is Orientation.NOT_ORIENTABLE


class TestShapeCommon:
    """Test behavior shared through the Shape base class."""

    def test_clone_is_independent_copy(self, geo):
        circle = geo.circle((1, 1), 2)
        copy = circle.clone()
        assert copy is not circle
        assert copy.center.equal_to(circle.center)
        assert copy.radius == circle.radius

    def test_names(self, geo):
        assert geo.point(0, 0).name == 'point'
        assert geo.polygon([(0, 0), (1, 0), (0, 1)]).name == 'polygon'

    def test_point_on(self, geo):
        assert geo.point(1, 0).on(geo.circle((0, 0), 1))
        assert not geo.point(3, 0).on(geo.segment((0, 0), (2, 0)))

    def test_shapes_are_immutable(self, geo):
        point = geo.point(1, 2)
        with pytest.raises(AttributeError):
            point.x = 5
