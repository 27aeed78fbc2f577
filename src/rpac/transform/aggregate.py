from __future__ import annotations

from typing import Sequence

from rpac.schema.records import KPISummary, MonthlyRecord, history_frame


def aggregate(historical: Sequence[MonthlyRecord]) -> KPISummary:
    """
    Phase A: Reduce the monthly series to headline KPIs
    - total revenue (sum), plus plain means of margin, conversion, order value
    - month-over-month growth of the last month vs the one before it

    Empty input returns zeros across the board instead of NaN means.
    """
    df = history_frame(historical)
    if df.empty:
        return KPISummary(
            total_revenue=0.0,
            avg_gross_margin=0.0,
            avg_conversion_rate=0.0,
            avg_order_value=0.0,
            monthly_growth_pct=0.0,
        )

    """
    Phase B: Month-over-month growth
    - Needs two records and a non-zero previous month; otherwise 0.
    """
    growth = 0.0
    if len(df) >= 2:
        current, previous = df["revenue"].iloc[-1], df["revenue"].iloc[-2]
        if previous != 0:
            growth = float((current - previous) / previous * 100)

    return KPISummary(
        total_revenue=float(df["revenue"].sum()),
        avg_gross_margin=float(df["gross_margin"].mean()),
        avg_conversion_rate=float(df["conversion_rate"].mean()),
        avg_order_value=float(df["avg_order_value"].mean()),
        monthly_growth_pct=growth,
    )


def traffic_mix(record: MonthlyRecord) -> dict[str, float]:
    """Share of the month's visits per channel (0..1); all zero if no visits."""
    visits = record.traffic.as_dict()
    total = sum(visits.values())
    if total == 0:
        return {c: 0.0 for c in visits}
    return {c: v / total for c, v in visits.items()}
