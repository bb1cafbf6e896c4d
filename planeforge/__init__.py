"""Planeforge - tolerance-aware planar geometry.

This library provides primitive 2D shapes (points, vectors, lines, rays,
segments, circles, boxes and polygons) with affine transforms, and a set of
robust predicates, intersection and distance algorithms that all agree on
one shared epsilon.
"""

import logging

# Core types, configuration and exceptions
from .core import (
    IntervalType,
    ShapeKind,
    Orientation,
    coerce_enum,
    PlaneforgeError,
    InvalidConfigError,
    IllegalConstructionError,
    DegenerateGeometryError,
    UnsupportedOperationError,
    UnsupportedPairError,
    DEFAULT_PRECISION,
    GeometryConfig,
    ToleranceContext,
    Interval,
)
from .core.logging_utils import configure_logging

# Primitives
from .primitives import (
    Vector,
    Matrix,
    Shape,
    CandidateSource,
    Point,
    Line,
    LineSegment,
    Ray,
    Segment,
    Box,
    Circle,
    Polygon,
)

# Pairwise algorithms (importing the modules fills the dispatch tables)
from .dispatch import PairDispatcher, intersections, distances
from . import intersection
from . import distance
from .distance import distance_to_candidates

# Session facade, spatial index and shapely interop
from .factory import Geometry
from .index import ShapeIndex
from .interop import to_shapely, from_shapely

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [

    # Core types (enums)
    'IntervalType',
    'ShapeKind',
    'Orientation',
    'coerce_enum',

    # Core exceptions
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
    'configure_logging',

    # Primitives
    'Vector',
    'Matrix',
    'Shape',
    'CandidateSource',
    'Point',
    'Line',
    'LineSegment',
    'Ray',
    'Segment',
    'Box',
    'Circle',
    'Polygon',

    # Dispatch
    'PairDispatcher',
    'intersections',
    'distances',
    'distance_to_candidates',

    # Facade and interop
    'Geometry',
    'ShapeIndex',
    'to_shapely',
    'from_shapely',
]
