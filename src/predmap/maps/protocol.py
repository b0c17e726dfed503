"""PredicateMapping protocol: the read surface shared by every map variant.

A structural protocol so consumers can accept an eager map, a strict map,
or a function map without coupling to the concrete type.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PredicateMapping[K, V](Protocol):
    """A read-only view of predicate-indexed values.

    ``first_match`` returns the lowest-index match or the default.
    ``all_matches`` returns every match and never the default.
    """

    def first_match(self, probe: K) -> V | None: ...
    def all_matches(self, probe: K) -> list[V]: ...
    def any_matches(self, probe: K) -> bool: ...
    def count_matches(self, probe: K) -> int: ...
    def match_indexes(self, probe: K) -> list[int]: ...
    def count(self) -> int: ...
    def __len__(self) -> int: ...
