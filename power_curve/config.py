"""
Configuration module for the power curve engine.
Module constants describe the duration staircase; engine settings can be
changed at runtime or through environment variables.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
import os

# Longest duration ever evaluated (24 hours)
MAX_DURATION_S: int = 86_400

# (start, stop, step) with inclusive stop: 1s resolution to 5 min,
# 10s resolution to 1 h, 30s resolution to 24 h
STAIRCASE_SEGMENTS: Tuple[Tuple[int, int, int], ...] = (
    (1, 300, 1),
    (310, 3_600, 10),
    (3_700, MAX_DURATION_S, 30),
)

METHODS: Tuple[str, ...] = ("prefix", "naive")
DEFAULT_METHOD: str = "prefix"
DEFAULT_POWER_COLUMN: str = "power"

ENV_MAX_WORKERS = "POWER_CURVE_MAX_WORKERS"
ENV_METHOD = "POWER_CURVE_METHOD"


def _env_max_workers() -> Optional[int]:
    raw = os.environ.get(ENV_MAX_WORKERS)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_MAX_WORKERS} must be an integer, got {raw!r}")


@dataclass
class EngineSettings:
    """Worker pool and window summation settings."""
    max_workers: Optional[int] = field(default_factory=_env_max_workers)  # None = one per logical core
    method: str = field(default_factory=lambda: os.environ.get(ENV_METHOD, DEFAULT_METHOD))


class PowerCurveConfig:
    """Main configuration class for the power curve engine."""

    def __init__(self):
        self.engine = EngineSettings()
        self._user_inputs: Dict[str, Any] = {}

    def update_engine_settings(self, **kwargs):
        """Update engine settings dynamically."""
        for key, value in kwargs.items():
            if hasattr(self.engine, key):
                setattr(self.engine, key, value)
                self._user_inputs[f'engine_{key}'] = value
            else:
                raise ValueError(f"Unknown engine setting: {key}")

    def resolved_workers(self) -> int:
        """Worker count to use, falling back to the number of logical cores."""
        if self.engine.max_workers is None:
            return os.cpu_count() or 1
        return int(self.engine.max_workers)

    def get_summary(self) -> Dict[str, Any]:
        """Get configuration summary."""
        return {
            'engine_settings': {
                'max_workers': self.engine.max_workers,
                'method': self.engine.method,
            },
            'staircase': {
                'max_duration_s': MAX_DURATION_S,
                'segments': [list(seg) for seg in STAIRCASE_SEGMENTS],
            },
            'user_inputs': self._user_inputs,
        }

    def validate_configuration(self) -> bool:
        """Validate that settings are usable."""
        errors = []

        if self.engine.max_workers is not None and int(self.engine.max_workers) < 1:
            errors.append("max_workers must be at least 1")

        if self.engine.method not in METHODS:
            errors.append(f"method must be one of {', '.join(METHODS)}")

        if errors:
            raise ValueError(f"Configuration errors: {'; '.join(errors)}")

        return True


# Global configuration instance
config = PowerCurveConfig()


def get_config() -> PowerCurveConfig:
    """Get the global configuration instance."""
    return config


def reset_config() -> PowerCurveConfig:
    """Reset configuration to defaults."""
    global config
    config = PowerCurveConfig()
    return config
