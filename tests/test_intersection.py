"""Tests for pairwise intersection algorithms and their dispatch."""

import math
import warnings

import pytest

from planeforge import (
    Geometry,
    PairDispatcher,
    Point,
    ShapeKind,
    UnsupportedPairError,
    intersections,
)


def _as_tuples(points):
    return sorted((round(p.x, 6), round(p.y, 6)) for p in points)


class TestDispatchTable:
    """Test the intersection dispatch table."""

    def test_every_pair_is_registered(self):
        """No pair of shape kinds is left without an algorithm."""
        assert intersections.missing_pairs() == []

    def test_unregistered_pair_returns_none(self, geo):
        """An empty table reports 'not computed' rather than 'disjoint'."""
        table = PairDispatcher('touch', swap_result=lambda r: r)
        assert table.dispatch(geo.point(0, 0), geo.circle((0, 0), 1)) is None
        assert not table.supports(ShapeKind.POINT, ShapeKind.CIRCLE)

    def test_require_raises_for_unregistered_pair(self, geo):
        table = PairDispatcher('touch', swap_result=lambda r: r)
        with pytest.raises(UnsupportedPairError, match="touch"):
            table.require(geo.point(0, 0), geo.circle((0, 0), 1))

    def test_swapped_lookup(self, geo):
        """Registering (a, b) also serves (b, a)."""
        table = PairDispatcher('touch', swap_result=lambda r: not r)

        @table.register(ShapeKind.POINT, ShapeKind.CIRCLE)
        def touches(point, circle):
            return circle.contains(point)

        assert table.dispatch(geo.point(0, 0), geo.circle((0, 0), 1)) is True
        assert table.dispatch(geo.circle((0, 0), 1), geo.point(0, 0)) is False

    def test_mixed_contexts_warn(self):
        fine = Geometry(precision=1e-6)
        coarse = Geometry(precision=1e-2)
        with pytest.warns(UserWarning, match="tolerance"):
            fine.segment((0, 0), (2, 0)).intersect(coarse.segment((1, -1), (1, 1)))

    def test_same_context_does_not_warn(self, geo):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            geo.segment((0, 0), (2, 0)).intersect(geo.segment((1, -1), (1, 1)))


class TestPointIntersections:
    """Test point against every shape kind."""

    def test_point_on_shapes(self, geo):
        p = geo.point(1, 0)
        assert len(p.intersect(geo.segment((0, 0), (2, 0)))) == 1
        assert len(geo.line((0, 0), (5, 0)).intersect(p)) == 1
        assert len(p.intersect(geo.circle((0, 0), 1))) == 1
        assert len(p.intersect(geo.point(1, 0.0001))) == 1
        assert p.intersect(geo.point(1, 1)) == []

    def test_point_inside_region(self, geo):
        p = geo.point(1, 1)
        assert len(p.intersect(geo.box(0, 0, 2, 2))) == 1
        assert len(geo.polygon([(0, 0), (3, 0), (0, 3)]).intersect(p)) == 1
        assert geo.box(5, 5, 6, 6).intersect(p) == []


class TestLineIntersections:
    """Test line, ray and segment intersections."""

    def test_line_line(self, geo):
        points = geo.line((0, 0), (1, 1)).intersect(geo.line((0, 2), (2, 0)))
        assert _as_tuples(points) == [(1, 1)]

    def test_parallel_and_incident_lines(self, geo):
        line = geo.line((0, 0), (1, 0))
        assert line.intersect(geo.line((0, 1), (1, 1))) == []
        assert line.intersect(geo.line((5, 0), (-1, 0))) == []

    def test_line_segment(self, geo):
        line = geo.line((0, 0), (1, 0))
        assert _as_tuples(line.intersect(geo.segment((2, -1), (3, 1)))) == [(2.5, 0)]
        assert line.intersect(geo.segment((2, 1), (3, 2))) == []
        # touching at an endpoint
        assert _as_tuples(line.intersect(geo.segment((2, 0), (3, 2)))) == [(2, 0)]
        # lying on the line
        assert _as_tuples(geo.segment((1, 0), (4, 0)).intersect(line)) == [(1, 0), (4, 0)]

    def test_line_circle(self, geo):
        circle = geo.circle((0, 0), 2)
        assert _as_tuples(geo.line((-5, 0), (5, 0)).intersect(circle)) == [(-2, 0), (2, 0)]
        assert _as_tuples(circle.intersect(geo.line((-5, 2), (5, 2)))) == [(0, 2)]
        assert geo.line((-5, 3), (5, 3)).intersect(circle) == []

    def test_line_box(self, geo):
        points = geo.line((0, 1), (1, 1)).intersect(geo.box(0, 0, 2, 2))
        assert _as_tuples(points) == [(0, 1), (2, 1)]

    def test_ray_line(self, geo):
        ray = geo.ray((0, 0), (1, 0))
        assert _as_tuples(ray.intersect(geo.line((3, -1), (3, 1)))) == [(3, 0)]
        assert ray.intersect(geo.line((-3, -1), (-3, 1))) == []

    def test_ray_ray(self, geo):
        ray = geo.ray((0, 0), (1, 0))
        assert _as_tuples(ray.intersect(geo.ray((2, -2), (0, 1)))) == [(2, 0)]
        assert ray.intersect(geo.ray((2, 2), (0, 1))) == []
        # collinear, overlapping and facing each other
        assert _as_tuples(ray.intersect(geo.ray((4, 0), (-1, 0)))) == [(0, 0), (4, 0)]
        # collinear, facing away
        assert ray.intersect(geo.ray((-1, 0), (-1, 0))) == []

    def test_ray_segment(self, geo):
        ray = geo.ray((0, 0), (1, 1))
        assert _as_tuples(ray.intersect(geo.segment((0, 2), (2, 0)))) == [(1, 1)]
        assert ray.intersect(geo.segment((0, -2), (-2, 0))) == []
        # ray starting on the segment
        assert _as_tuples(geo.segment((-1, 1), (1, -1)).intersect(ray)) == [(0, 0)]

    def test_ray_circle(self, geo):
        ray = geo.ray((0, 0), (1, 0))
        assert _as_tuples(ray.intersect(geo.circle((0, 0), 1))) == [(1, 0)]
        assert _as_tuples(ray.intersect(geo.circle((5, 0), 1))) == [(4, 0), (6, 0)]
        assert ray.intersect(geo.circle((-5, 0), 1)) == []

    def test_ray_polygon(self, geo):
        triangle = geo.polygon([(2, -1), (4, 0), (2, 1)])
        assert _as_tuples(geo.ray((0, 0), (1, 0)).intersect(triangle)) == [(2, 0), (4, 0)]


class TestSegmentIntersections:
    """Test segment, circle and region intersections."""

    def test_crossing(self, geo):
        points = geo.segment((0, 0), (4, 0)).intersect(geo.segment((2, -2), (2, 2)))
        assert _as_tuples(points) == [(2, 0)]

    def test_parallel(self, geo):
        assert geo.segment((0, 0), (4, 0)).intersect(geo.segment((0, 1), (4, 1))) == []

    def test_collinear_overlap(self, geo):
        points = geo.segment((0, 0), (4, 0)).intersect(geo.segment((2, 0), (6, 0)))
        assert _as_tuples(points) == [(2, 0), (4, 0)]

    def test_collinear_disjoint(self, geo):
        assert geo.segment((0, 0), (1, 0)).intersect(geo.segment((2, 0), (3, 0))) == []

    def test_zero_length(self, geo):
        dot = geo.segment((1, 0), (1, 0))
        assert _as_tuples(dot.intersect(geo.segment((0, 0), (2, 0)))) == [(1, 0)]
        assert geo.segment((0, 1), (2, 1)).intersect(dot) == []

    def test_segment_circle(self, geo):
        circle = geo.circle((0, 0), 1)
        assert _as_tuples(geo.segment((0, 0), (3, 0)).intersect(circle)) == [(1, 0)]
        assert _as_tuples(geo.segment((-3, 0), (3, 0)).intersect(circle)) == [(-1, 0), (1, 0)]
        # entirely inside the disc
        assert geo.segment((-0.5, 0), (0.5, 0)).intersect(circle) == []

    def test_circle_circle(self, geo):
        c1 = geo.circle((0, 0), 1)
        assert _as_tuples(c1.intersect(geo.circle((2, 0), 1))) == [(1, 0)]
        h = math.sqrt(3) / 2
        points = c1.intersect(geo.circle((1, 0), 1))
        assert _as_tuples(points) == [(0.5, round(-h, 6)), (0.5, round(h, 6))]
        assert c1.intersect(geo.circle((5, 0), 1)) == []
        # nested and concentric circles
        assert c1.intersect(geo.circle((0.1, 0), 3)) == []
        assert c1.intersect(geo.circle((0, 0), 2)) == []
        # internally tangent
        assert _as_tuples(c1.intersect(geo.circle((1, 0), 2))) == [(-1, 0)]

    def test_identical_circles(self, geo):
        points = geo.circle((1, 1), 2).intersect(geo.circle((1, 1), 2))
        assert _as_tuples(points) == [(-1, 1)]

    def test_segment_box(self, geo):
        points = geo.segment((1, 1), (5, 1)).intersect(geo.box(0, 0, 2, 2))
        assert _as_tuples(points) == [(2, 1)]

    def test_circle_box(self, geo):
        points = geo.circle((2, 0), 1).intersect(geo.box(0, 0, 4, 4))
        assert _as_tuples(points) == [(1, 0), (3, 0)]

    def test_box_box(self, geo):
        points = geo.box(0, 0, 2, 2).intersect(geo.box(1, 1, 3, 3))
        assert _as_tuples(points) == [(1, 2), (2, 1)]
        assert geo.box(0, 0, 1, 1).intersect(geo.box(5, 5, 6, 6)) == []

    def test_polygon_polygon(self, geo):
        square = geo.polygon([(0, 0), (2, 0), (2, 2), (0, 2)])
        diamond = geo.polygon([(2, -1), (3, 0), (2, 1), (1, 0)])
        points = square.intersect(diamond)
        assert _as_tuples(points) == [(1, 0), (2, 1)]

    def test_box_polygon_symmetric(self, geo):
        box = geo.box(0, 0, 2, 2)
        triangle = geo.polygon([(1, 1), (3, 1), (1, 3)])
        assert _as_tuples(box.intersect(triangle)) == _as_tuples(triangle.intersect(box))

    def test_results_are_points(self, geo):
        points = geo.segment((0, 0), (4, 4)).intersect(geo.polygon([(0, 2), (4, 2), (2, 5)]))
        assert all(isinstance(p, Point) for p in points)
