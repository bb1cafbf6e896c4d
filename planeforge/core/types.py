"""Type definitions for planeforge.

This module defines the enums shared by the primitives and the dispatch
layer.
"""

from enum import Enum, IntFlag
from typing import Type, TypeVar, Union

E = TypeVar('E', bound=Enum)


class IntervalType(IntFlag):
    """How the endpoints of an interval (or a segment) are interpreted.

    Attributes:
        CLOSED: Both endpoints included, [p1, p2]
        OPEN_START: Start excluded, (p1, p2]
        OPEN_END: End excluded, [p1, p2)
        OPEN: Both endpoints excluded, (p1, p2)

    The open flags are bits, so ``OPEN_START | OPEN_END == OPEN``.

    Examples:
        >>> from planeforge import IntervalType
        >>> IntervalType.OPEN_START | IntervalType.OPEN_END
        <IntervalType.OPEN: 6>
    """
    CLOSED = 1
    OPEN_START = 1 << 1
    OPEN_END = 1 << 2
    OPEN = OPEN_START | OPEN_END

    def swapped(self) -> 'IntervalType':
        """Return the type with the start/end roles exchanged."""
        if self == IntervalType.OPEN_START:
            return IntervalType.OPEN_END
        if self == IntervalType.OPEN_END:
            return IntervalType.OPEN_START
        return self


class ShapeKind(Enum):
    """Closed set of shape variants understood by the dispatch layer.

    Attributes:
        POINT: Single position
        LINE: Infinite line in normal form
        RAY: Semi-infinite line
        SEGMENT: Bounded line segment
        CIRCLE: Circle given by center and radius
        BOX: Axis-aligned rectangle
        POLYGON: Closed polygonal chain
    """
    POINT = 'point'
    LINE = 'line'
    RAY = 'ray'
    SEGMENT = 'segment'
    CIRCLE = 'circle'
    BOX = 'box'
    POLYGON = 'polygon'


class Orientation(Enum):
    """Orientation of a polygon face.

    Attributes:
        CCW: Counterclockwise (positive signed area)
        CW: Clockwise (negative signed area)
        NOT_ORIENTABLE: Zero signed area within tolerance
    """
    CCW = -1
    CW = 1
    NOT_ORIENTABLE = 0


def coerce_enum(value: Union[E, str], enum_cls: Type[E]) -> E:
    """Return ``value`` as a member of ``enum_cls``.

    Accepts an enum member, a member name (case-insensitive) or, for enums
    with string values, a value.

    Examples:
        >>> coerce_enum("open_end", IntervalType)
        <IntervalType.OPEN_END: 4>
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, int) and issubclass(enum_cls, IntFlag):
        return enum_cls(value)
    if isinstance(value, str):
        key = value.strip().upper()
        if key in enum_cls.__members__:
            return enum_cls.__members__[key]
        for member in enum_cls:
            if isinstance(member.value, str) and member.value == value.strip().lower():
                return member
    raise ValueError(f"Unknown {enum_cls.__name__}: {value!r}")


__all__ = [
    'IntervalType',
    'ShapeKind',
    'Orientation',
    'coerce_enum',
]
