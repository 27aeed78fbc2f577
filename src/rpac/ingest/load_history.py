from __future__ import annotations

from pathlib import Path

import pandas as pd

from rpac.config.settings import settings
from rpac.features.seasonality import round_half_up
from rpac.schema.records import TRAFFIC_CHANNELS, MonthlyRecord, TrafficBreakdown

REQUIRED_COLUMNS: tuple[str, ...] = (
    "month",
    "revenue",
    "units",
    "gross_margin",
    "conversion_rate",
    "avg_order_value",
)


class HistoricalDataError(ValueError):
    """Externally supplied history is missing fields or out of range."""


def _assert_exists(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError(f"Missing file: {path}")


def _assert_columns(df: pd.DataFrame) -> None:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise HistoricalDataError(f"Missing required columns: {missing}")


def _assert_ranges(df: pd.DataFrame) -> None:
    unknown = sorted({str(m) for m in df["month"]} - set(settings.MONTHS))
    if unknown:
        raise HistoricalDataError(f"Unknown month labels: {unknown}")

    numeric = list(REQUIRED_COLUMNS[1:]) + [f"traffic_{c}" for c in TRAFFIC_CHANNELS]
    if df[numeric].isna().any().any():
        bad = [c for c in numeric if df[c].isna().any()]
        raise HistoricalDataError(f"Null or non-numeric values in: {bad}")

    non_negative = ["revenue", "units", "avg_order_value"] + [
        f"traffic_{c}" for c in TRAFFIC_CHANNELS
    ]
    negative = [c for c in non_negative if (df[c] < 0).any()]
    if negative:
        raise HistoricalDataError(f"Negative values in: {negative}")

    fractions = [
        c for c in ("gross_margin", "conversion_rate") if not df[c].between(0, 1).all()
    ]
    if fractions:
        raise HistoricalDataError(f"Values outside [0, 1] in: {fractions}")


class FrameHistoryProvider:
    """
    Phase A: Real-data entry point for the engine
    - Wraps a table with one row per month (same columns as history_frame()).
    - Validation happens here, once, so the aggregation and projection code
      can assume clean records.
    - traffic_<channel> columns are optional and default to 0.
    - revenue, units and traffic round half up, matching generated history.
    """

    def __init__(self, df: pd.DataFrame) -> None:
        self.df = df

    @classmethod
    def from_csv(cls, path: str | Path) -> "FrameHistoryProvider":
        path = Path(path)
        _assert_exists(path)
        return cls(pd.read_csv(path))

    def load_history(self) -> list[MonthlyRecord]:
        df = self.df.copy()
        _assert_columns(df)

        for c in TRAFFIC_CHANNELS:
            col = f"traffic_{c}"
            if col not in df.columns:
                df[col] = 0

        # Coerce so that stray strings surface as a validation error, not a TypeError later
        numeric = list(REQUIRED_COLUMNS[1:]) + [f"traffic_{c}" for c in TRAFFIC_CHANNELS]
        for c in numeric:
            df[c] = pd.to_numeric(df[c], errors="coerce")

        _assert_ranges(df)

        return [
            MonthlyRecord(
                month=str(row.month),
                revenue=round_half_up(row.revenue),
                units=round_half_up(row.units),
                gross_margin=float(row.gross_margin),
                conversion_rate=float(row.conversion_rate),
                avg_order_value=float(row.avg_order_value),
                traffic=TrafficBreakdown(
                    **{
                        c: round_half_up(getattr(row, f"traffic_{c}"))
                        for c in TRAFFIC_CHANNELS
                    }
                ),
            )
            for row in df.itertuples(index=False)
        ]
