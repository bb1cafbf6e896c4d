"""Configuration for planeforge geometry sessions."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from .errors import InvalidConfigError

DEFAULT_PRECISION: float = 1e-3


@dataclass(frozen=True)
class GeometryConfig:
    """Configuration of a geometry session.

    Attributes:
        precision: Epsilon of the shared tolerance context (must be > 0)

    Examples:
        >>> cfg = GeometryConfig(precision=1e-6)
        >>> cfg.precision
        1e-06
    """

    precision: float = DEFAULT_PRECISION

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, (int, float)):
            raise InvalidConfigError(f"precision must be a number, got {self.precision!r}")
        if not self.precision > 0:
            raise InvalidConfigError(f"precision must be positive, got {self.precision!r}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> 'GeometryConfig':
        """Build a config from a plain mapping such as ``{"precision": 1e-4}``."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidConfigError(f"Unknown configuration option(s): {', '.join(unknown)}")
        return cls(**dict(options))


__all__ = ['DEFAULT_PRECISION', 'GeometryConfig']
