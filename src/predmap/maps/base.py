"""Shared storage and matching for every predicate map variant.

Entries live in two parallel lists, ``_predicates`` and ``_values``, that
always have the same length. A predicate's position in the list is its
index: contiguous from zero, shifted down when an earlier entry is removed.
Predicates are never hashed or compared, so the same closure may appear at
several indexes.

Subclasses only decide two things:

- which stored values are acceptable (``_check_value``)
- how a stored value becomes the returned value (``_resolve``)

Every matching algorithm lives here.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Self

from predmap._internal import fanout
from predmap._internal.types import PairSource, Predicate
from predmap.config import DEFAULT_CONFIG, MapConfig
from predmap.errors import IndexOutOfRange, InvalidArgument, SizeMismatch

logger = logging.getLogger("predmap.maps")


class BaseMap[K, S, V]:
    """Ordered ``(predicate, stored value)`` entries plus a fallback value.

    ``K`` is the probe type, ``S`` the stored value type and ``V`` the
    type returned by lookups (``S`` and ``V`` coincide for eager maps).

    Not thread-safe for mutation: one writer, or an external lock around
    the whole map. Read-only queries may run concurrently with each other.
    """

    __slots__ = ("_config", "_default", "_predicates", "_values")

    def __init__(self, default: V | None = None, *, config: MapConfig | None = None) -> None:
        self._predicates: list[Predicate[K]] = []
        self._values: list[S] = []
        self._default = default
        self._config = config or DEFAULT_CONFIG

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_pairs(
        cls,
        mapping: PairSource[K, S] | None,
        default: V | None = None,
        *,
        config: MapConfig | None = None,
    ) -> Self:
        """Build a map from a predicate -> value mapping or a run of pairs.

        Entry order is the mapping's iteration order. For a plain ``dict``
        that is insertion order; for other mappings it is whatever they
        yield, and first-match priority between overlapping predicates
        should then be treated as undefined.

        Raises ``InvalidArgument`` if *mapping* is ``None``.
        """
        if mapping is None:
            raise InvalidArgument("mapping", "invalid mapping: expected predicate/value pairs, got None")
        instance = cls(default, config=config)
        instance.add_pairs(mapping)
        return instance

    @classmethod
    def from_lists(
        cls,
        predicates: Sequence[Predicate[K]] | None,
        values: Sequence[S] | None,
        default: V | None = None,
        *,
        config: MapConfig | None = None,
    ) -> Self:
        """Build a map by pairing *predicates* and *values* at equal index.

        Raises ``InvalidArgument`` if either collection is ``None`` and
        ``SizeMismatch`` if their lengths differ.
        """
        instance = cls(default, config=config)
        instance.add_all(predicates, values)
        return instance

    # ── Validation ───────────────────────────────────────────────────────

    def _check_predicate(self, predicate: object) -> None:
        if predicate is None:
            raise InvalidArgument("predicate", "invalid key: predicate must not be None")
        if not callable(predicate):
            detail = f"invalid key: expected a callable predicate, got {type(predicate).__name__}"
            raise InvalidArgument("predicate", detail)

    def _check_value(self, value: object) -> None:
        """Reject values this variant cannot store. Accepts anything by default."""

    def _check_index(self, index: int) -> None:
        count = len(self._predicates)
        if index < 0 or index >= count:
            raise IndexOutOfRange(index, count)

    # ── Mutation ─────────────────────────────────────────────────────────

    def add(self, predicate: Predicate[K], value: S) -> None:
        """Append one entry at the end (new highest index)."""
        self._check_predicate(predicate)
        self._check_value(value)
        self._predicates.append(predicate)
        self._values.append(value)
        logger.debug("Added entry at index %d", len(self._predicates) - 1)

    def add_all(
        self,
        predicates: Sequence[Predicate[K]] | None,
        values: Sequence[S] | None,
    ) -> None:
        """Append entries pairing *predicates* and *values* at equal index.

        The whole batch is validated before anything is stored.
        """
        if predicates is None or values is None:
            if predicates is None:
                raise InvalidArgument("predicates", "invalid key collection: expected a sequence, got None")
            raise InvalidArgument("values", "invalid value collection: expected a sequence, got None")
        predicates = list(predicates)
        values = list(values)
        if len(predicates) != len(values):
            raise SizeMismatch(len(predicates), len(values))
        self._extend(predicates, values)

    def add_pairs(self, mapping: PairSource[K, S] | None) -> None:
        """Append one entry per pair of *mapping*, in its iteration order.

        Accepts a ``Mapping`` of predicate to value or any iterable of
        ``(predicate, value)`` tuples. The whole batch is validated before
        anything is stored.
        """
        if mapping is None:
            raise InvalidArgument("mapping", "invalid mapping: expected predicate/value pairs, got None")
        pairs = mapping.items() if isinstance(mapping, Mapping) else mapping
        predicates: list[Predicate[K]] = []
        values: list[S] = []
        for pair in pairs:
            try:
                predicate, value = pair
            except (TypeError, ValueError):
                raise InvalidArgument("mapping", f"expected (predicate, value) pairs, got {pair!r}") from None
            predicates.append(predicate)
            values.append(value)
        self._extend(predicates, values)

    def _extend(self, predicates: list[Predicate[K]], values: list[S]) -> None:
        for predicate, value in zip(predicates, values, strict=True):
            self._check_predicate(predicate)
            self._check_value(value)
        self._predicates.extend(predicates)
        self._values.extend(values)
        logger.debug("Added %d entries, count is now %d", len(predicates), len(self._predicates))

    def remove_at(self, index: int) -> None:
        """Delete the entry at *index*; later entries shift down by one."""
        self._check_index(index)
        del self._predicates[index]
        del self._values[index]
        logger.debug("Removed entry at index %d, count is now %d", index, len(self._predicates))

    def update_at(self, index: int, value: S) -> None:
        """Replace the value at *index*. The predicate is left untouched."""
        self._check_index(index)
        self._check_value(value)
        self._values[index] = value
        logger.debug("Updated value at index %d", index)

    def update_matching(self, probe: K, value: S) -> int:
        """Replace the value of every entry whose predicate is true for *probe*.

        Returns the number of entries updated; zero matches is a no-op.
        """
        self._check_value(value)
        indexes = fanout.matching_indexes(self._predicates, probe, self._config)
        for index in indexes:
            self._values[index] = value
        logger.debug("Updated %d matching entries", len(indexes))
        return len(indexes)

    def set_default(self, value: V | None) -> None:
        """Replace the fallback returned by ``first_match`` when nothing matches.

        ``None`` is allowed. The default never appears in ``all_matches``.
        """
        self._default = value

    # ── Queries ──────────────────────────────────────────────────────────

    def _resolve(self, stored: S, probe: K) -> V:
        raise NotImplementedError

    @property
    def default(self) -> V | None:
        """The current fallback value."""
        return self._default

    @property
    def config(self) -> MapConfig:
        return self._config

    def first_match(self, probe: K) -> V | None:
        """Value of the lowest-index entry whose predicate is true for *probe*.

        Stops at the first match; later predicates are not evaluated.
        Returns the default when nothing matches.
        """
        for predicate, stored in zip(self._predicates, self._values, strict=True):
            if predicate(probe):
                return self._resolve(stored, probe)
        return self._default

    def all_matches(self, probe: K) -> list[V]:
        """Values of every entry whose predicate is true for *probe*.

        Equal values from different entries are all kept. Returns an empty
        list, never the default, when nothing matches. Callers should only
        rely on the contents, not the order.
        """
        indexes = fanout.matching_indexes(self._predicates, probe, self._config)
        return [self._resolve(self._values[index], probe) for index in indexes]

    def count_matches(self, probe: K) -> int:
        """Number of entries whose predicate is true for *probe*."""
        return sum(fanout.evaluate(self._predicates, probe, self._config))

    def any_matches(self, probe: K) -> bool:
        """True as soon as one predicate is true for *probe*."""
        return any(predicate(probe) for predicate in self._predicates)

    def match_indexes(self, probe: K) -> list[int]:
        """Indexes of every matching entry, valid until the next removal."""
        return fanout.matching_indexes(self._predicates, probe, self._config)

    def count(self) -> int:
        """Number of entries currently stored."""
        return len(self._predicates)

    def predicates(self) -> list[Predicate[K]]:
        """Copy of the stored predicates in index order."""
        return list(self._predicates)

    def values(self) -> list[S]:
        """Copy of the stored values in index order."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._predicates)

    def __iter__(self) -> Iterator[tuple[Predicate[K], S]]:
        return iter(list(zip(self._predicates, self._values, strict=True)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._predicates)}, default={self._default!r})"
