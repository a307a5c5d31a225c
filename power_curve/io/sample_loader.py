from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np
import pandas as pd

from ..config import DEFAULT_POWER_COLUMN

logger = logging.getLogger(__name__)

TABLE_SUFFIXES = (".csv", ".json", ".parquet", ".txt")


def power_samples_from_values(values: Union[Iterable[Optional[float]], pd.Series]) -> np.ndarray:
    """Normalize per-second power readings into engine input.

    Missing or non-finite readings (None, NaN, inf) become 0, negative readings
    are clipped to 0, and values are rounded to whole watts.
    """
    series = values if isinstance(values, pd.Series) else pd.Series(list(values), dtype="object")
    numeric = pd.to_numeric(series, errors="coerce").astype("float64")
    numeric = numeric.where(np.isfinite(numeric)).fillna(0.0).clip(lower=0.0)
    return np.rint(numeric.to_numpy()).astype(np.int64)


def power_samples_from_dataframe(df: pd.DataFrame, column: str = DEFAULT_POWER_COLUMN) -> np.ndarray:
    """Extract the power column of a second-by-second DataFrame.

    Rows are assumed to be ordered and 1 Hz; row i is i seconds from the start.
    """
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found (available: {', '.join(map(str, df.columns))})")
    return power_samples_from_values(df[column])


def load_sample_table(file_path: str) -> pd.DataFrame:
    """Load a table of per-second records.

    Supported: .csv, .json (records or columns orientation), .parquet, and .txt
    with one power value per line (read into a single "power" column).
    """
    p = Path(file_path)
    suffix = p.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(p)
    elif suffix == ".json":
        df = pd.read_json(p)
    elif suffix == ".parquet":
        df = pd.read_parquet(p)
    elif suffix == ".txt":
        df = pd.read_csv(p, header=None, names=[DEFAULT_POWER_COLUMN], skip_blank_lines=True)
    else:
        raise ValueError(f"Unsupported input format '{suffix}' (expected one of {', '.join(TABLE_SUFFIXES)})")
    logger.info(f"Loaded {len(df)} rows from {p.name}")
    return df


def load_power_samples(file_path: str, column: str = DEFAULT_POWER_COLUMN) -> np.ndarray:
    df = load_sample_table(file_path)
    if Path(file_path).suffix.lower() == ".txt":
        column = DEFAULT_POWER_COLUMN
    return power_samples_from_dataframe(df, column)
