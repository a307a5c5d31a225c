"""Power curve engine: best average power over a staircase of durations.

Modules:
- config: Staircase constants and engine settings
- models: Typed power curve objects
- curve: Bucket sampler, window maximizer and the parallel engine
- io: Normalizing per-second tables into power samples
- storage: Export and plotting helpers
- cli: Command line interface
"""

from .curve.buckets import buckets_for_length, power_curve_buckets
from .curve.engine import calculate_power_curve
from .curve.window import best_average_power
from .models.types import PowerCurve, PowerCurveEntry

__version__ = "1.0.0"

__all__ = [
    "calculate_power_curve",
    "best_average_power",
    "buckets_for_length",
    "power_curve_buckets",
    "PowerCurve",
    "PowerCurveEntry",
]
