"""Eager predicate maps: values are stored and returned as-is.

Usage::

    from predmap import PredicateMap

    sizes = PredicateMap.from_lists(
        [lambda i: i > 1, lambda i: i == 1, lambda i: i < 1],
        ["More than 1", "Exactly 1", "Less than 1"],
        default="",
    )
    sizes.first_match(1)   # "Exactly 1"
    sizes.all_matches(5)   # ["More than 1"]
"""

from predmap.errors import InvalidArgument
from predmap.maps.base import BaseMap


class PredicateMap[K, V](BaseMap[K, V, V]):
    """Maps predicates over ``K`` to values of ``V``.

    Any value may be stored, ``None`` included. The default returned by
    ``first_match`` on a miss is set at construction or via
    ``set_default``.
    """

    __slots__ = ()

    def _resolve(self, stored: V, probe: K) -> V:
        return stored


class StrictPredicateMap[K, V](PredicateMap[K, V]):
    """A ``PredicateMap`` that refuses ``None`` as a stored value.

    Use it when ``None`` from ``first_match`` must unambiguously mean
    "nothing matched and the default is None" rather than "an entry
    mapped to None".
    """

    __slots__ = ()

    def _check_value(self, value: object) -> None:
        if value is None:
            raise InvalidArgument("value", "invalid value: this map does not store None")
