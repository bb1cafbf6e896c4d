"""Geometric primitives: vectors, matrices and the shape variants."""

from .vector import Vector
from .matrix import Matrix
from .base import Shape, CandidateSource
from .point import Point
from .line import Line
from .line_segment import LineSegment
from .ray import Ray
from .segment import Segment
from .box import Box
from .circle import Circle
from .polygon import Polygon

__all__ = [
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
]
