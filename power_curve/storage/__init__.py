from .export import export_power_curve, format_duration, power_curve_to_dataframe

__all__ = ["export_power_curve", "format_duration", "power_curve_to_dataframe"]
