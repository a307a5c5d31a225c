from __future__ import annotations

import logging
from typing import List

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ..models.types import PowerCurve
from .export import format_duration

logger = logging.getLogger(__name__)

# Reference durations labelled on the x axis
TICK_DURATIONS_S: List[int] = [1, 5, 15, 30, 60, 300, 1200, 3600, 3 * 3600, 6 * 3600, 86_400]


def plot_power_curve(curve: PowerCurve, path: str, title: str = "Power Curve") -> str:
    """Render the curve on a log duration axis and save it as an image."""
    if len(curve) == 0:
        raise ValueError("Cannot plot an empty power curve")

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(curve.durations, curve.powers, color="tab:red", linewidth=1.5)
    ax.set_xscale("log")
    max_duration = curve.durations[-1]
    ticks = [t for t in TICK_DURATIONS_S if t <= max_duration]
    ax.set_xticks(ticks)
    ax.set_xticklabels([format_duration(t) for t in ticks])
    ax.set_xlim(1, max(max_duration, 2))
    ax.set_ylim(0, max(curve.powers) * 1.05 or 1.0)
    ax.set_xlabel("Duration")
    ax.set_ylabel("Best average power (W)")
    ax.set_title(title)
    ax.grid(True, which="both", alpha=0.3)
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    logger.info(f"Saved power curve plot to {path}")
    return path
