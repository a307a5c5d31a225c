from .types import PowerCurve, PowerCurveEntry

__all__ = ["PowerCurve", "PowerCurveEntry"]
