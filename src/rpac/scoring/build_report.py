from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from rpac.config.settings import settings
from rpac.ingest.generate_history import MockHistoryProvider
from rpac.modeling.forecast import project, slice_horizon
from rpac.scenarios.scenario_engine import scenarios
from rpac.schema.records import (
    ForecastPoint,
    HistoricalDataProvider,
    KPISummary,
    MonthlyRecord,
    ScenarioSet,
    forecast_frame,
    history_frame,
)
from rpac.transform.aggregate import aggregate


@dataclass(frozen=True)
class AnalyticsReport:
    """
    Phase A: Everything one render cycle needs
    - historical: the 12 monthly records
    - forecast: the full 12-point projection (horizon is applied on read)
    - kpis / scenario_set: derived from historical
    """

    historical: list[MonthlyRecord]
    forecast: list[ForecastPoint]
    kpis: KPISummary
    scenario_set: ScenarioSet

    def forecast_view(self, horizon: int | str) -> list[ForecastPoint]:
        return slice_horizon(self.forecast, horizon)


def build_report(provider: HistoricalDataProvider) -> AnalyticsReport:
    """
    Phase B: Run the engine once
    provider -> {aggregate, project} -> scenarios
    Any HistoricalDataProvider works here; nothing downstream depends on
    whether the history is synthetic or real.
    """
    historical = provider.load_history()
    kpis = aggregate(historical)
    return AnalyticsReport(
        historical=historical,
        forecast=project(historical),
        kpis=kpis,
        scenario_set=scenarios(kpis.total_revenue),
    )


def combined_frame(report: AnalyticsReport, horizon: int | str) -> pd.DataFrame:
    """
    Phase C: Actuals followed by the horizon-sliced forecast, one table
    - revenue column holds actual revenue for history and the projection for forecast
    - type column tells the two apart ("historical" / "forecast")
    """
    hist = history_frame(report.historical)[["month", "revenue"]].copy()
    hist["type"] = "historical"

    fc = forecast_frame(report.forecast_view(horizon)).rename(
        columns={"projected_revenue": "revenue"}
    )
    fc["type"] = "forecast"

    return pd.concat([hist, fc], ignore_index=True)


def main() -> None:
    report = build_report(MockHistoryProvider(settings.SEED))
    k = report.kpis

    print(f"✅ Generated history | months={len(report.historical)} | seed={settings.SEED}")
    print(f"Total revenue: {k.total_revenue:,.0f}")
    print(f"Avg gross margin: {k.avg_gross_margin * 100:.1f}%")
    print(f"Avg conversion rate: {k.avg_conversion_rate * 100:.1f}%")
    print(f"Avg order value: {k.avg_order_value:,.0f}")
    print(f"MoM growth: {k.monthly_growth_pct:.1f}%")

    view = report.forecast_view(settings.DEFAULT_HORIZON)
    print(f"\n✅ Forecast | horizon={len(view)}")
    print(forecast_frame(view).to_string(index=False))

    s = report.scenario_set
    print(f"\nScenarios: bear={s.bear:,.0f} | base={s.base:,.0f} | bull={s.bull:,.0f}")


if __name__ == "__main__":
    main()
