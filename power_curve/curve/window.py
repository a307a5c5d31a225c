from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from ..config import METHODS

SampleArray = Union[Sequence[float], np.ndarray]


def as_sample_array(samples: SampleArray) -> np.ndarray:
    """Read-only 1-D array for window summation.

    Integer input is widened to int64 so prefix sums stay exact; anything else
    becomes float64.
    """
    arr = np.asarray(samples)
    if arr.ndim != 1:
        raise ValueError(f"samples must be one-dimensional, got shape {arr.shape}")
    if arr.dtype.kind == "u" and arr.size and int(arr.max()) > np.iinfo(np.int64).max:
        raise ValueError(f"samples exceed the int64 range (max {int(arr.max())})")
    if arr.dtype.kind in "iub":
        arr = arr.astype(np.int64)
    else:
        arr = arr.astype(np.float64)
    arr.setflags(write=False)
    return arr


def _is_prepared(samples) -> bool:
    return (
        isinstance(samples, np.ndarray)
        and samples.ndim == 1
        and samples.dtype in (np.int64, np.float64)
        and not samples.flags.writeable
    )


def prefix_sums(arr: np.ndarray) -> np.ndarray:
    """Cumulative sums with a leading zero; window i of length d is prefix[i + d] - prefix[i]."""
    prefix = np.concatenate((np.zeros(1, dtype=arr.dtype), np.cumsum(arr)))
    prefix.setflags(write=False)
    return prefix


def best_average_from_prefix(prefix: np.ndarray, duration: int) -> float:
    """Best window average for one duration given precomputed ``prefix_sums``."""
    assert 1 <= duration < prefix.shape[0], f"duration {duration} outside 1..{prefix.shape[0] - 1}"
    sums = prefix[duration:] - prefix[:-duration]
    averages = sums / float(duration)
    return max(0.0, float(averages.max()))


def _best_average_naive(arr: np.ndarray, duration: int) -> float:
    best = 0.0
    for i in range(arr.shape[0] - duration + 1):
        avg = float(arr[i : i + duration].sum()) / float(duration)
        best = max(best, avg)
    return best


def best_average_power(samples: SampleArray, duration: int, method: str = "prefix") -> float:
    """Highest mean over all contiguous windows of ``duration`` samples.

    The running maximum starts at 0.0, so a best window whose mean is negative
    is reported as 0.0.

    Methods:
    - "prefix": prefix sums, O(n) per duration. Integer samples are summed
      exactly in int64, so the result matches "naive" bit for bit. Float
      samples may differ from "naive" by cumulative-sum rounding (on the order
      of n * eps * max|sample|).
    - "naive": each window summed from scratch, O(n * duration).

    Calling with a duration outside 1..len(samples) is a contract violation.
    """
    if _is_prepared(samples):
        arr = samples
    else:
        arr = as_sample_array(samples)
    n = arr.shape[0]
    assert 1 <= duration <= n, f"duration {duration} outside 1..{n}"
    if method == "prefix":
        return best_average_from_prefix(prefix_sums(arr), duration)
    if method == "naive":
        return _best_average_naive(arr, duration)
    raise ValueError(f"Unknown method: {method} (expected one of {', '.join(METHODS)})")
