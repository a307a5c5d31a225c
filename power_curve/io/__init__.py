from .sample_loader import load_power_samples, power_samples_from_dataframe, power_samples_from_values

__all__ = ["load_power_samples", "power_samples_from_dataframe", "power_samples_from_values"]
