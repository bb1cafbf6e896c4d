"""Tests for vectors, points and affine matrices."""

import math

import numpy as np
import pytest

from planeforge import (
    DegenerateGeometryError,
    Line,
    Matrix,
    Point,
    UnsupportedOperationError,
    Vector,
)


class TestVector:
    """Test vector algebra."""

    @pytest.mark.parametrize("x, y", [(3, 4), (-2, 0.5), (1e-2, 0), (1000, -1000)])
    def test_normalize_has_unit_length(self, ctx, x, y):
        """Normalized vectors have length 1."""
        assert Vector(ctx, x, y).normalize().length == pytest.approx(1.0)

    def test_normalize_zero_raises(self, ctx):
        """A zero vector has no direction."""
        with pytest.raises(DegenerateGeometryError):
            Vector(ctx, 0.0, 0.0005).normalize()

    def test_dot_and_cross(self, ctx):
        v1 = Vector(ctx, 1, 2)
        v2 = Vector(ctx, 3, 4)
        assert v1.dot(v2) == 11
        assert v1.cross(v2) == -2

    def test_rotate90(self, ctx):
        v = Vector(ctx, 1, 0)
        assert v.rotate90_ccw().equal_to(Vector(ctx, 0, 1))
        assert v.rotate90_cw().equal_to(Vector(ctx, 0, -1))

    def test_rotate(self, ctx):
        rotated = Vector(ctx, 1, 0).rotate(math.pi / 2)
        assert rotated.equal_to(Vector(ctx, 0, 1))

    def test_rotate_around_other_center_raises(self, ctx):
        with pytest.raises(UnsupportedOperationError):
            Vector(ctx, 1, 0).rotate(1.0, Point(ctx, 1, 1))

    def test_rotate_around_center_near_origin(self, ctx):
        """A center within tolerance of the origin counts as the origin."""
        rotated = Vector(ctx, 1, 0).rotate(math.pi / 2, Point(ctx, 1e-4, -1e-4))
        assert rotated.equal_to(Vector(ctx, 0, 1))

    def test_transform_ignores_translation(self, ctx):
        """Free vectors are not moved by the translation part."""
        m = Matrix(ctx).translate(5, 5)
        assert Vector(ctx, 1, 2).transform(m).equal_to(Vector(ctx, 1, 2))

    def test_slope(self, ctx):
        assert Vector(ctx, 0, 1).slope == pytest.approx(math.pi / 2)
        assert Vector(ctx, 0, -1).slope == pytest.approx(3 * math.pi / 2)

    def test_angle_to(self, ctx):
        v1 = Vector(ctx, 1, 0)
        assert v1.angle_to(Vector(ctx, 0, 1)) == pytest.approx(math.pi / 2)
        assert v1.angle_to(Vector(ctx, 0, -1)) == pytest.approx(3 * math.pi / 2)

    def test_projection_on(self, ctx):
        projected = Vector(ctx, 3, 4).projection_on(Vector(ctx, 2, 0))
        assert projected.equal_to(Vector(ctx, 3, 0))

    def test_operators(self, ctx):
        v = Vector(ctx, 1, 2)
        assert (v + v).equal_to(Vector(ctx, 2, 4))
        assert (v - v).is_zero()
        assert (2 * v).equal_to(v * 2)
        assert (-v).equal_to(Vector(ctx, -1, -2))
        assert tuple(v) == (1, 2)

    def test_from_points(self, ctx):
        v = Vector.from_points(Point(ctx, 1, 1), Point(ctx, 4, 5))
        assert v.length == pytest.approx(5.0)


class TestPoint:
    """Test point predicates."""

    def test_equal_to_uses_tolerance(self, ctx):
        assert Point(ctx, 1, 1).equal_to(Point(ctx, 1.0004, 0.9996))
        assert not Point(ctx, 1, 1).equal_to(Point(ctx, 1.002, 1))

    def test_less_than_orders_by_y_then_x(self, ctx):
        assert Point(ctx, 5, 0).less_than(Point(ctx, 0, 1))
        assert Point(ctx, 0, 1).less_than(Point(ctx, 5, 1))
        assert not Point(ctx, 0, 1).less_than(Point(ctx, 0.0005, 1))

    def test_projection_on_line(self, ctx):
        line = Line.from_points(Point(ctx, 0, 0), Point(ctx, 4, 0))
        assert Point(ctx, 2, 3).projection_on(line).equal_to(Point(ctx, 2, 0))

    def test_projection_of_anchor(self, ctx):
        line = Line.from_points(Point(ctx, 1, 1), Point(ctx, 4, 1))
        assert Point(ctx, 1, 5).projection_on(line).equal_to(Point(ctx, 1, 1))

    def test_left_to(self, ctx):
        line = Line(Point(ctx, 0, 1), Vector(ctx, 0, -1))
        assert Point(ctx, 3, -2).left_to(line)
        assert not Point(ctx, 3, 4).left_to(line)
        # points on the line are not left
        assert not Point(ctx, 3, 1).left_to(line)

    def test_rotate_around_center(self, ctx):
        rotated = Point(ctx, 2, 1).rotate(math.pi, Point(ctx, 1, 1))
        assert rotated.equal_to(Point(ctx, 0, 1))

    def test_distance(self, ctx):
        assert Point(ctx, 0, 0).distance(Point(ctx, 3, 4)) == pytest.approx(5.0)


class TestMatrix:
    """Test affine matrices."""

    def _sample(self, ctx):
        return (
            Matrix(ctx).translate(3, -2).rotate(0.7).scale(2, 0.5),
            Matrix(ctx, 1, 0.3, -0.2, 1.1, 4, 5),
            Matrix(ctx).rotate(-1.2, 1, 1),
        )

    def test_composition_is_associative(self, ctx):
        """(A*B)*C equals A*(B*C) on a sample point."""
        a, b, c = self._sample(ctx)
        left = a.multiply(b).multiply(c)
        right = a.multiply(b.multiply(c))
        assert left.equal_to(right)
        p = Point(ctx, 1.5, -2.25)
        assert p.transform(left).equal_to(p.transform(right))

    def test_multiply_applies_argument_first(self, ctx):
        m = Matrix(ctx).translate(10, 0).rotate(math.pi / 2)
        x, y = m.transform(1, 0)
        assert x == pytest.approx(10.0)
        assert y == pytest.approx(1.0)

    def test_inverse_round_trip(self, ctx):
        """Transforming by a matrix and its inverse returns the point."""
        for m in self._sample(ctx):
            p = Point(ctx, 7.5, -3.0)
            assert p.transform(m).transform(m.inverse()).equal_to(p)
            assert (m @ m.inverse()).is_identity()

    def test_singular_inverse_raises(self, ctx):
        with pytest.raises(DegenerateGeometryError):
            Matrix(ctx).scale(0, 1).inverse()

    def test_small_scale_inverse(self, ctx):
        """A determinant below the squared tolerance is still invertible."""
        m = Matrix(ctx).scale(1e-4, 1e-4)
        inv = m.inverse()
        assert inv.a == pytest.approx(1e4)
        assert inv.d == pytest.approx(1e4)
        assert (m @ inv).is_identity()
        assert Point(ctx, 2e-4, -3e-4).transform(inv).equal_to(Point(ctx, 2, -3))

    def test_rotate_around_center(self, ctx):
        m = Matrix(ctx).rotate(math.pi / 2, 1, 1)
        x, y = m.transform(2, 1)
        assert (x, y) == pytest.approx((1.0, 2.0))

    def test_to_array_matches_transform(self, ctx):
        m = self._sample(ctx)[0]
        x, y = m.transform(2.0, 3.0)
        homogeneous = m.to_array() @ np.array([2.0, 3.0, 1.0])
        assert homogeneous[:2] == pytest.approx([x, y])

    def test_transform_coords(self, ctx):
        m = Matrix(ctx, 1, 0.3, -0.2, 1.1, 4, 5)
        coords = np.array([[0.0, 0.0], [1.0, 2.0], [-3.0, 4.0]])
        result = m.transform_coords(coords)
        assert result.shape == (3, 2)
        for (x, y), row in zip(coords, result):
            assert tuple(row) == pytest.approx(m.transform(x, y))

    def test_determinant(self, ctx):
        assert Matrix(ctx).scale(2, 3).determinant == pytest.approx(6.0)
