from __future__ import annotations

import bisect
from functools import lru_cache
from typing import Tuple

from ..config import MAX_DURATION_S, STAIRCASE_SEGMENTS


@lru_cache(maxsize=1)
def power_curve_buckets() -> Tuple[int, ...]:
    """Full duration staircase in seconds, ascending and without duplicates.

    Built once on first use; callers share the same immutable tuple.
    """
    buckets = []
    for start, stop, step in STAIRCASE_SEGMENTS:
        buckets.extend(range(start, stop + 1, step))
    return tuple(sorted(set(buckets)))


def buckets_for_length(sample_count: int) -> Tuple[int, ...]:
    """Durations to evaluate for a recording of ``sample_count`` seconds.

    Returns the staircase prefix with every entry <= min(sample_count, MAX_DURATION_S).
    A zero-length recording has no candidates.
    """
    if sample_count < 0:
        raise ValueError(f"sample_count must be >= 0, got {sample_count}")
    limit = min(int(sample_count), MAX_DURATION_S)
    buckets = power_curve_buckets()
    end = bisect.bisect_right(buckets, limit)
    return buckets[:end]
