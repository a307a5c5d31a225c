from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

import pandas as pd


@dataclass(frozen=True)
class PowerCurveEntry:
    duration_s: int
    best_average_power_w: float

    def __iter__(self) -> Iterator:
        # Unpacks as (duration, power)
        yield self.duration_s
        yield self.best_average_power_w


@dataclass
class PowerCurve:
    """Best average power per evaluated duration, ascending by duration."""
    entries: List[PowerCurveEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PowerCurveEntry]:
        return iter(self.entries)

    @property
    def durations(self) -> List[int]:
        return [e.duration_s for e in self.entries]

    @property
    def powers(self) -> List[float]:
        return [e.best_average_power_w for e in self.entries]

    def best_for(self, duration_s: int) -> float:
        for e in self.entries:
            if e.duration_s == duration_s:
                return e.best_average_power_w
        raise KeyError(f"Duration {duration_s}s was not evaluated")

    def to_pairs(self) -> List[Tuple[int, float]]:
        return [(e.duration_s, e.best_average_power_w) for e in self.entries]

    def to_records(self) -> List[Dict[str, float]]:
        return [
            {"duration_s": e.duration_s, "best_average_power_w": e.best_average_power_w}
            for e in self.entries
        ]

    def to_dataframe(self) -> pd.DataFrame:
        df = pd.DataFrame(self.to_records(), columns=["duration_s", "best_average_power_w"])
        return df.astype({"duration_s": "int64", "best_average_power_w": "float64"})
