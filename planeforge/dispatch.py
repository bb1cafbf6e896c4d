"""Pairwise dispatch tables for shape operations.

Algorithms are plain functions registered for an ordered pair of
:class:`ShapeKind` tags. A lookup for ``(a, b)`` falls back to the function
registered for ``(b, a)`` and adapts its result (intersection points are
symmetric; distance witnesses are reversed). A pair with no registered
function yields ``None``, which callers must keep apart from the empty list
meaning "computed, and disjoint".
"""

from __future__ import annotations

import itertools
import logging
import warnings
from typing import Any, Callable, Dict, List, Optional, Tuple

from .core.errors import UnsupportedPairError
from .core.types import ShapeKind

logger = logging.getLogger(__name__)

PairFunc = Callable[[Any, Any], Any]
KindPair = Tuple[ShapeKind, ShapeKind]


class PairDispatcher:
    """Table of algorithms indexed by ``(ShapeKind, ShapeKind)``.

    Args:
        operation: Name used in log records and errors
        swap_result: Adapts a result computed for ``(b, a)`` into one for ``(a, b)``

    Examples:
        >>> table = PairDispatcher('touch', swap_result=lambda r: r)
        >>> @table.register(ShapeKind.POINT, ShapeKind.CIRCLE)
        ... def point_touches_circle(point, circle):
        ...     return circle.contains(point)
        >>> table.supports(ShapeKind.CIRCLE, ShapeKind.POINT)
        True
    """

    def __init__(self, operation: str, swap_result: Callable[[Any], Any]):
        self.operation = operation
        self._swap_result = swap_result
        self._table: Dict[KindPair, PairFunc] = {}

    def register(self, first: ShapeKind, second: ShapeKind) -> Callable[[PairFunc], PairFunc]:
        """Decorator registering a function for ``(first, second)``."""
        def decorator(func: PairFunc) -> PairFunc:
            self._table[(first, second)] = func
            return func
        return decorator

    def lookup(self, first: ShapeKind, second: ShapeKind) -> Optional[Tuple[PairFunc, bool]]:
        """Return ``(func, swapped)`` for the pair, or None if unregistered."""
        func = self._table.get((first, second))
        if func is not None:
            return func, False
        func = self._table.get((second, first))
        if func is not None:
            return func, True
        return None

    def supports(self, first: ShapeKind, second: ShapeKind) -> bool:
        return self.lookup(first, second) is not None

    def missing_pairs(self) -> List[KindPair]:
        """Unordered kind pairs with no algorithm in either order."""
        return [
            (first, second)
            for first, second in itertools.combinations_with_replacement(ShapeKind, 2)
            if not self.supports(first, second)
        ]

    def dispatch(self, first, second):
        """Run the algorithm registered for the kinds of ``first`` and ``second``.

        Returns None when the pair is not supported.
        """
        found = self.lookup(first.kind, second.kind)
        if found is None:
            logger.debug("No %s algorithm for (%s, %s)", self.operation, first.kind.value, second.kind.value)
            return None
        if first.ctx != second.ctx:
            warnings.warn(
                f"{self.operation} between shapes built under different tolerance contexts; "
                f"using epsilon={first.ctx.epsilon}",
                UserWarning,
                stacklevel=3,
            )
        func, swapped = found
        if swapped:
            return self._swap_result(func(second, first))
        return func(first, second)

    def require(self, first, second):
        """Like :meth:`dispatch` but raises for unsupported pairs.

        Raises:
            UnsupportedPairError: If no algorithm is registered for the pair
        """
        if not self.supports(first.kind, second.kind):
            raise UnsupportedPairError(self.operation, first.kind, second.kind)
        return self.dispatch(first, second)


def _reverse_witness(result):
    if result is None:
        return None
    distance, witness = result
    return distance, witness.reverse()


intersections = PairDispatcher('intersection', swap_result=lambda points: points)
distances = PairDispatcher('distance', swap_result=_reverse_witness)


__all__ = [
    'PairDispatcher',
    'intersections',
    'distances',
]
