"""Predicate maps: ordered predicate -> value entries with first/all-match lookup."""

from predmap.maps.base import BaseMap
from predmap.maps.function_map import PredicateFunctionMap
from predmap.maps.predicate_map import PredicateMap, StrictPredicateMap
from predmap.maps.protocol import PredicateMapping

__all__ = [
    "BaseMap",
    "PredicateFunctionMap",
    "PredicateMap",
    "PredicateMapping",
    "StrictPredicateMap",
]
