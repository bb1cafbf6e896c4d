"""Affine 2x3 transformation matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from ..core.errors import DegenerateGeometryError
from ..core.tolerance import ToleranceContext
from .vector import Vector


@dataclass(frozen=True, eq=False)
class Matrix:
    """Affine transform ``(a, b, c, d, tx, ty)``.

    A point ``(x, y)`` maps to ``(x*a + y*c + tx, x*b + y*d + ty)``. The
    default arguments give the identity. ``m1.multiply(m2)`` applies ``m2``
    first and then ``m1``, so builder calls read outermost first:

        >>> ctx = ToleranceContext()
        >>> m = Matrix(ctx).translate(10, 0).rotate(math.pi / 2)
        >>> m.transform(1, 0)  # rotated first, then translated
        (10.0, 1.0)
    """

    ctx: ToleranceContext
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    def clone(self) -> 'Matrix':
        return Matrix(self.ctx, self.a, self.b, self.c, self.d, self.tx, self.ty)

    def transform(self, x: float, y: float) -> Tuple[float, float]:
        return (
            x * self.a + y * self.c + self.tx,
            x * self.b + y * self.d + self.ty,
        )

    def transform_direction(self, x: float, y: float) -> Tuple[float, float]:
        """Apply only the linear part (no translation)."""
        return (x * self.a + y * self.c, x * self.b + y * self.d)

    def transform_coords(self, coords: np.ndarray) -> np.ndarray:
        """Transform an ``(N, 2)`` coordinate array in one pass."""
        pts = np.asarray(coords, dtype=np.float64).reshape(-1, 2)
        linear = np.array([[self.a, self.b], [self.c, self.d]])
        return pts @ linear + np.array([self.tx, self.ty])

    def multiply(self, other: 'Matrix') -> 'Matrix':
        return Matrix(
            self.ctx,
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.tx + self.c * other.ty + self.tx,
            self.b * other.tx + self.d * other.ty + self.ty,
        )

    def translate(self, tx: Union[float, Vector], ty: float = 0.0) -> 'Matrix':
        """Compose with a translation given as ``(tx, ty)`` or a :class:`Vector`."""
        if isinstance(tx, Vector):
            tx, ty = tx.x, tx.y
        return self.multiply(Matrix(self.ctx, 1.0, 0.0, 0.0, 1.0, tx, ty))

    def rotate(self, angle: float, center_x: float = 0.0, center_y: float = 0.0) -> 'Matrix':
        """Compose with a counterclockwise rotation by ``angle`` around ``(center_x, center_y)``."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return (
            self.translate(center_x, center_y)
            .multiply(Matrix(self.ctx, cos, sin, -sin, cos, 0.0, 0.0))
            .translate(-center_x, -center_y)
        )

    def scale(self, sx: float, sy: float) -> 'Matrix':
        return self.multiply(Matrix(self.ctx, sx, 0.0, 0.0, sy, 0.0, 0.0))

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def inverse(self) -> 'Matrix':
        """Return the inverse transform.

        Raises:
            DegenerateGeometryError: If the linear part is singular
        """
        det = self.determinant
        if det == 0:
            raise DegenerateGeometryError("Matrix is singular and cannot be inverted")
        return Matrix(
            self.ctx,
            self.d / det,
            -self.b / det,
            -self.c / det,
            self.a / det,
            (self.c * self.ty - self.d * self.tx) / det,
            (self.b * self.tx - self.a * self.ty) / det,
        )

    def is_identity(self) -> bool:
        return self.equal_to(Matrix(self.ctx))

    def equal_to(self, other: 'Matrix') -> bool:
        eq = self.ctx.equal_to
        return (
            eq(self.tx, other.tx)
            and eq(self.ty, other.ty)
            and eq(self.a, other.a)
            and eq(self.b, other.b)
            and eq(self.c, other.c)
            and eq(self.d, other.d)
        )

    def to_array(self) -> np.ndarray:
        """Homogeneous 3x3 representation (column vectors)."""
        return np.array([
            [self.a, self.c, self.tx],
            [self.b, self.d, self.ty],
            [0.0, 0.0, 1.0],
        ])

    def __matmul__(self, other: 'Matrix') -> 'Matrix':
        return self.multiply(other)

    def __repr__(self) -> str:
        return f"Matrix({self.a!r}, {self.b!r}, {self.c!r}, {self.d!r}, {self.tx!r}, {self.ty!r})"


__all__ = ['Matrix']
