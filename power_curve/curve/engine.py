from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..config import METHODS, get_config
from ..models.types import PowerCurve, PowerCurveEntry
from .buckets import buckets_for_length
from .window import SampleArray, as_sample_array, best_average_from_prefix, best_average_power, prefix_sums

logger = logging.getLogger(__name__)


def _evaluate_durations(
    arr: np.ndarray, prefix: Optional[np.ndarray], durations: Sequence[int], method: str
) -> List[Tuple[int, float]]:
    if prefix is not None:
        return [(int(d), best_average_from_prefix(prefix, int(d))) for d in durations]
    return [(int(d), best_average_power(arr, int(d), method=method)) for d in durations]


def _split_round_robin(durations: Sequence[int], workers: int) -> List[Sequence[int]]:
    # Striding mixes short and long durations in every chunk
    chunks = [durations[i::workers] for i in range(workers)]
    return [c for c in chunks if len(c) > 0]


def calculate_power_curve(
    samples: SampleArray,
    max_workers: Optional[int] = None,
    method: Optional[str] = None,
) -> PowerCurve:
    """Compute the power curve of a 1 Hz power sample sequence.

    Args:
        samples: One power value per elapsed second, in watts.
        max_workers: Worker threads; defaults to the configured value, which
            falls back to the number of logical cores. 1 runs in the calling thread.
        method: Window summation strategy ("prefix" or "naive"); defaults to config.

    Returns:
        PowerCurve with one entry per candidate duration, ascending by duration.
        Empty when there are no samples.
    """
    cfg = get_config()
    if method is None:
        method = cfg.engine.method
    if max_workers is None:
        max_workers = cfg.resolved_workers()
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")
    if method not in METHODS:
        raise ValueError(f"Unknown method: {method} (expected one of {', '.join(METHODS)})")

    if len(samples) == 0:
        return PowerCurve()

    arr = as_sample_array(samples)
    candidates = buckets_for_length(arr.shape[0])
    # Shared read-only by all workers
    prefix = prefix_sums(arr) if method == "prefix" else None
    workers = min(max_workers, len(candidates))
    logger.debug(f"Evaluating {len(candidates)} durations over {arr.shape[0]} samples with {workers} worker(s) [{method}]")

    started = time.perf_counter()
    results: List[Tuple[int, float]] = []
    if workers == 1:
        results = _evaluate_durations(arr, prefix, candidates, method)
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(_evaluate_durations, arr, prefix, chunk, method)
                for chunk in _split_round_robin(candidates, workers)
            ]
            for fut in as_completed(futures):
                results.extend(fut.result())

    results.sort(key=lambda item: item[0])
    logger.debug(f"Power curve computed in {time.perf_counter() - started:.3f}s")
    return PowerCurve(entries=[PowerCurveEntry(d, p) for d, p in results])
