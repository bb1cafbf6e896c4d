"""Exception hierarchy for planeforge.

Constructor-time invariant violations raise one of these errors. Geometric
non-results (parallel lines, disjoint shapes) are never errors: they are
returned as ``None`` or an empty list by the operation itself.
"""


class PlaneforgeError(Exception):
    """Base class for all planeforge errors."""
    pass


class InvalidConfigError(PlaneforgeError, ValueError):
    """Raised when a configuration value is out of range (e.g. precision <= 0)."""
    pass


class IllegalConstructionError(PlaneforgeError, ValueError):
    """Raised when a primitive is built from degenerate inputs.

    Examples are a line through two coincident points, a zero normal
    vector, a circle with non-positive radius or a polygon with fewer
    than three vertices.
    """
    pass


class DegenerateGeometryError(PlaneforgeError, ArithmeticError):
    """Raised when an operation has no defined result for the given geometry.

    Normalizing a zero-length vector or inverting a singular matrix raise
    this error.
    """
    pass


class UnsupportedOperationError(PlaneforgeError):
    """Raised when an operation is not meaningful for a shape variant."""
    pass


class UnsupportedPairError(UnsupportedOperationError):
    """Raised when no algorithm is registered for a pair of shape kinds."""

    def __init__(self, operation: str, first, second):
        self.operation = operation
        self.first = first
        self.second = second
        super().__init__(
            f"No {operation} algorithm registered for ({first.value}, {second.value})"
        )


__all__ = [
    'PlaneforgeError',
    'InvalidConfigError',
    'IllegalConstructionError',
    'DegenerateGeometryError',
    'UnsupportedOperationError',
    'UnsupportedPairError',
]
