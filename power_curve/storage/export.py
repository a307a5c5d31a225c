from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..models.types import PowerCurve

logger = logging.getLogger(__name__)

EXPORT_SUFFIXES = (".csv", ".json", ".parquet", ".xlsx")


def power_curve_to_dataframe(curve: PowerCurve) -> pd.DataFrame:
    df = curve.to_dataframe()
    df["duration_label"] = [format_duration(d) for d in df["duration_s"]]
    return df


def format_duration(seconds: int) -> str:
    """Compact clock label: "05", "02:30", "01:00:00"."""
    seconds = int(seconds)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    if hours == 0 and minutes == 0:
        return f"{secs:02d}"
    if hours == 0:
        return f"{minutes:02d}:{secs:02d}"
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def export_power_curve(curve: PowerCurve, path: str) -> str:
    """Write the curve as a table; format follows the file extension."""
    p = Path(path)
    suffix = p.suffix.lower()
    df = power_curve_to_dataframe(curve)
    if suffix == ".csv":
        df.to_csv(p, index=False)
    elif suffix == ".json":
        df.to_json(p, orient="records", indent=2)
    elif suffix == ".parquet":
        df.to_parquet(p, index=False)
    elif suffix == ".xlsx":
        df.to_excel(p, index=False, sheet_name="power_curve")
    else:
        raise ValueError(f"Unsupported export format '{suffix}' (expected one of {', '.join(EXPORT_SUFFIXES)})")
    logger.info(f"Exported {len(df)} power curve entries to {p}")
    return str(p)
