"""Bulk predicate evaluation with optional thread-pool fan-out.

Predicates are required to be pure, so evaluating them in any order or on
any thread gives the same answers. Small maps are evaluated inline; large
ones are split into fixed-size chunks and each chunk is evaluated on a
worker. Every chunk returns its own list of booleans and the caller
stitches them back together in chunk order, so no state is shared across
the fan-out and no lock is needed.

Free-threading note (3.14t):
    Without the GIL the chunks genuinely run in parallel. Under a GIL build
    the pool still works, just without a throughput gain for CPU-bound
    predicates.
"""

import logging
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from predmap._internal.types import Predicate
from predmap.config import DEFAULT_CONFIG, MapConfig

logger = logging.getLogger("predmap.fanout")


def _evaluate_chunk[K](predicates: Sequence[Predicate[K]], probe: K) -> list[bool]:
    return [bool(predicate(probe)) for predicate in predicates]


def _worker_count(config: MapConfig, chunks: int) -> int:
    workers = config.max_workers or os.cpu_count() or 1
    return max(1, min(workers, chunks))


def evaluate[K](
    predicates: Sequence[Predicate[K]],
    probe: K,
    config: MapConfig = DEFAULT_CONFIG,
) -> list[bool]:
    """Evaluate every predicate against *probe*.

    Returns one boolean per predicate, aligned with *predicates*. The first
    exception raised by any predicate propagates to the caller.
    """
    total = len(predicates)
    if total < config.parallel_threshold:
        return _evaluate_chunk(predicates, probe)

    size = config.chunk_size
    chunks = [predicates[start : start + size] for start in range(0, total, size)]
    workers = _worker_count(config, len(chunks))
    if workers == 1:
        return _evaluate_chunk(predicates, probe)

    logger.debug("Fanning out %d predicates over %d chunks, %d workers", total, len(chunks), workers)
    results: list[bool] = []
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="predmap") as pool:
        for chunk_result in pool.map(_evaluate_chunk, chunks, [probe] * len(chunks)):
            results.extend(chunk_result)
    return results


def matching_indexes[K](
    predicates: Sequence[Predicate[K]],
    probe: K,
    config: MapConfig = DEFAULT_CONFIG,
) -> list[int]:
    """Indexes of every predicate that is true for *probe*."""
    return [index for index, matched in enumerate(evaluate(predicates, probe, config)) if matched]
