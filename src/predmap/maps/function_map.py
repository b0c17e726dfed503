"""Predicate-to-function maps: values are computed from the probe on match.

Each entry stores a ``(probe) -> value`` function instead of a value. The
function only runs for entries whose predicate matched, with the same
probe the predicate saw, so the returned value can describe the probe::

    describe = PredicateFunctionMap(default="unknown")
    describe.add(lambda n: n < 0, lambda n: f"{n} is negative")
    describe.first_match(-3)   # "-3 is negative"
    describe.first_match(3)    # "unknown"

The default is a plain value and is returned as-is, never called.
"""

from predmap._internal.types import ValueFunction
from predmap.errors import InvalidArgument
from predmap.maps.base import BaseMap


class PredicateFunctionMap[K, V](BaseMap[K, ValueFunction[K, V], V]):
    """Maps predicates over ``K`` to functions producing ``V``.

    Matching is identical to ``PredicateMap``; only what is stored and
    returned differs. Value functions are called on the calling thread in
    index order, even when predicate evaluation fans out.
    """

    __slots__ = ()

    def _check_value(self, value: object) -> None:
        if value is None:
            raise InvalidArgument("value", "invalid value: value function must not be None")
        if not callable(value):
            detail = f"invalid value: expected a callable, got {type(value).__name__}"
            raise InvalidArgument("value", detail)

    def _resolve(self, stored: ValueFunction[K, V], probe: K) -> V:
        return stored(probe)

    def functions(self) -> list[ValueFunction[K, V]]:
        """Copy of the stored value functions in index order."""
        return self.values()
