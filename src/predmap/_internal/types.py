"""Shared type aliases used across predmap modules."""

from collections.abc import Callable, Iterable, Mapping

# A pure test over a probe value
type Predicate[K] = Callable[[K], bool]

# Stored value of the function variant, evaluated against the probe on match
type ValueFunction[K, V] = Callable[[K], V]

# Either a predicate -> value mapping or an ordered run of (predicate, value) pairs
type PairSource[K, S] = Mapping[Predicate[K], S] | Iterable[tuple[Predicate[K], S]]
