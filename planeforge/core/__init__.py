"""Core types and utilities for planeforge.

This module provides the tolerance context, configuration, interval model,
enums and exceptions used throughout the library.
"""

from .types import (
    IntervalType,
    ShapeKind,
    Orientation,
    coerce_enum,
)

from .errors import (
    PlaneforgeError,
    InvalidConfigError,
    IllegalConstructionError,
    DegenerateGeometryError,
    UnsupportedOperationError,
    UnsupportedPairError,
)

from .config import DEFAULT_PRECISION, GeometryConfig
from .tolerance import ToleranceContext
from .interval import Interval

__all__ = [
    # Enums
    'IntervalType',
    'ShapeKind',
    'Orientation',
    'coerce_enum',

    # Exceptions
    'PlaneforgeError',
    'InvalidConfigError',
    'IllegalConstructionError',
    'DegenerateGeometryError',
    'UnsupportedOperationError',
    'UnsupportedPairError',

    # Configuration
    'DEFAULT_PRECISION',
    'GeometryConfig',
    'ToleranceContext',
    'Interval',
]
