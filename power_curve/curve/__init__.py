from .buckets import buckets_for_length, power_curve_buckets
from .engine import calculate_power_curve
from .window import best_average_power

__all__ = ["buckets_for_length", "power_curve_buckets", "calculate_power_curve", "best_average_power"]
