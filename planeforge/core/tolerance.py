"""Tolerance-aware numeric comparisons.

Every primitive holds a reference to a :class:`ToleranceContext` and routes
its comparisons through it, so all predicates of a computation agree on
what "equal" means. The context is frozen: a different precision means a
different context, never a mutated one.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_PRECISION, GeometryConfig
from .errors import InvalidConfigError


@dataclass(frozen=True)
class ToleranceContext:
    """Shared epsilon used by every comparison of a geometry session.

    All comparisons test ``x - y`` against the open band ``(-epsilon,
    epsilon)``. Values inside the band are equal and neither less nor
    greater, so ``equal_to`` and ``less_than`` are not complementary.

    Attributes:
        epsilon: Largest absolute difference treated as equality (> 0)

    Examples:
        >>> ctx = ToleranceContext(1e-3)
        >>> ctx.equal_to(1.0, 1.0005)
        True
        >>> ctx.less_than(1.0, 1.0005)
        False
    """

    epsilon: float = DEFAULT_PRECISION

    def __post_init__(self):
        if not self.epsilon > 0:
            raise InvalidConfigError(
                f"Precision must be a positive number, got {self.epsilon!r}"
            )

    @classmethod
    def from_config(cls, config: GeometryConfig) -> 'ToleranceContext':
        return cls(config.precision)

    @property
    def epsilon_squared(self) -> float:
        """Tolerance for quantities in squared length units (cross/dot products)."""
        return self.epsilon * self.epsilon

    def with_precision(self, epsilon: float) -> 'ToleranceContext':
        """Return a new context; primitives built under this one are unaffected."""
        return ToleranceContext(epsilon)

    def equal_zero(self, x: float) -> bool:
        return -self.epsilon < x < self.epsilon

    def equal_to(self, x: float, y: float) -> bool:
        return self.equal_zero(x - y)

    def less_than(self, x: float, y: float) -> bool:
        return x - y < -self.epsilon

    def less_or_equal(self, x: float, y: float) -> bool:
        return x - y < self.epsilon

    def greater_than(self, x: float, y: float) -> bool:
        return x - y > self.epsilon

    def greater_or_equal(self, x: float, y: float) -> bool:
        return x - y > -self.epsilon

    def equal_zero_squared(self, x: float) -> bool:
        """``equal_zero`` against ``epsilon_squared``."""
        eps_sq = self.epsilon_squared
        return -eps_sq < x < eps_sq


__all__ = ['ToleranceContext']
