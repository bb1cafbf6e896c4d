"""Intervals over the reals with independently open or closed endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .errors import IllegalConstructionError
from .types import IntervalType, coerce_enum


@dataclass(frozen=True)
class Interval:
    """Interval ``[min, max]`` whose endpoints may each be excluded.

    Inclusion of each endpoint is derived from ``interval_type``. When
    ``min == max`` the shared point is included unless the type is exactly
    ``IntervalType.OPEN``.

    Examples:
        >>> Interval(0.0, 1.0, IntervalType.OPEN_END).contains(1.0)
        False
        >>> Interval(2.0, 2.0, IntervalType.OPEN_END).contains(2.0)
        True
    """

    min: float
    max: float
    interval_type: IntervalType = IntervalType.CLOSED
    include_min: bool = field(init=False)
    include_max: bool = field(init=False)

    def __post_init__(self):
        interval_type = coerce_enum(self.interval_type, IntervalType)
        if self.min > self.max:
            raise IllegalConstructionError(
                f"Interval minimum {self.min} is greater than maximum {self.max}"
            )
        if self.min == self.max:
            include_min = include_max = interval_type != IntervalType.OPEN
        else:
            include_min = not interval_type & IntervalType.OPEN_START
            include_max = not interval_type & IntervalType.OPEN_END
        object.__setattr__(self, 'interval_type', interval_type)
        object.__setattr__(self, 'include_min', include_min)
        object.__setattr__(self, 'include_max', include_max)

    def contains(self, value: float) -> bool:
        """Return True if ``value`` lies in the interval."""
        above_min = self.min <= value if self.include_min else self.min < value
        below_max = self.max >= value if self.include_max else self.max > value
        return above_min and below_max

    def __contains__(self, value: Union[int, float]) -> bool:
        return self.contains(value)


__all__ = ['Interval']
