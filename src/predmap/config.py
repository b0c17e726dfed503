"""Map configuration.

MapConfig is a frozen dataclass: immutable after creation, shared freely
between maps, no string-key dict lookups.
"""

from dataclasses import dataclass

from predmap.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class MapConfig:
    """Tuning for bulk predicate evaluation. Immutable after creation.

    Only ``all_matches``, ``count_matches``, ``match_indexes`` and
    ``update_matching`` consult it; first-match and any-match lookups
    always run sequentially. Override what you need::

        config = MapConfig(parallel_threshold=512, max_workers=4)
        rules = PredicateMap(default="", config=config)
    """

    # Fan-out
    parallel_threshold: int = 2048  # Entry count at which evaluation moves to a thread pool
    max_workers: int = 0  # 0 = auto-detect from CPU count
    chunk_size: int = 256  # Predicates evaluated per submitted task

    def __post_init__(self) -> None:
        if self.parallel_threshold < 1:
            msg = f"parallel_threshold must be at least 1, got {self.parallel_threshold}"
            raise ConfigurationError(msg)
        if self.max_workers < 0:
            msg = f"max_workers must be 0 (auto) or positive, got {self.max_workers}"
            raise ConfigurationError(msg)
        if self.chunk_size < 1:
            msg = f"chunk_size must be at least 1, got {self.chunk_size}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = MapConfig()
