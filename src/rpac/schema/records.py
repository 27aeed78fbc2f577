from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, Protocol

import pandas as pd

TRAFFIC_CHANNELS: tuple[str, ...] = ("organic", "paid", "social", "email", "direct")


@dataclass(frozen=True)
class TrafficBreakdown:
    """
    Visits per acquisition channel for one month.
    Channels are independent counters; nothing ties their sum to total traffic.
    """

    organic: int = 0
    paid: int = 0
    social: int = 0
    email: int = 0
    direct: int = 0

    def as_dict(self) -> dict[str, int]:
        return {c: getattr(self, c) for c in TRAFFIC_CHANNELS}


@dataclass(frozen=True)
class MonthlyRecord:
    month: str
    revenue: int
    units: int
    gross_margin: float  # 0..1
    conversion_rate: float  # 0..1
    avg_order_value: float
    traffic: TrafficBreakdown


@dataclass(frozen=True)
class ForecastPoint:
    month: str  # e.g. "Jan (F)"
    projected_revenue: int
    upper_bound: int
    lower_bound: int
    confidence: float  # 0..1, decays with horizon distance


@dataclass(frozen=True)
class KPISummary:
    total_revenue: float
    avg_gross_margin: float
    avg_conversion_rate: float
    avg_order_value: float
    monthly_growth_pct: float


@dataclass(frozen=True)
class ScenarioSet:
    bear: float
    base: float
    bull: float


class HistoricalDataProvider(Protocol):
    """
    Anything that can hand the engine an ordered monthly history.
    The mock generator and real data sources both sit behind this, so
    aggregation and projection never know where the records came from.
    """

    def load_history(self) -> list[MonthlyRecord]: ...


def history_frame(records: Iterable[MonthlyRecord]) -> pd.DataFrame:
    """
    Flatten monthly records into one row per month.
    Traffic channels become traffic_<channel> columns.
    """
    rows = []
    for r in records:
        row = asdict(r)
        traffic = row.pop("traffic")
        row.update({f"traffic_{c}": v for c, v in traffic.items()})
        rows.append(row)

    columns = [
        "month",
        "revenue",
        "units",
        "gross_margin",
        "conversion_rate",
        "avg_order_value",
    ] + [f"traffic_{c}" for c in TRAFFIC_CHANNELS]
    return pd.DataFrame(rows, columns=columns)


def forecast_frame(points: Iterable[ForecastPoint]) -> pd.DataFrame:
    columns = [
        "month",
        "projected_revenue",
        "upper_bound",
        "lower_bound",
        "confidence",
    ]
    return pd.DataFrame([asdict(p) for p in points], columns=columns)
