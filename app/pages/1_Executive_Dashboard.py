from __future__ import annotations

# Phase A: Executive Dashboard goal
# - Headline KPI cards for the last 12 months.
# - Revenue trend: actuals followed by the selected forecast horizon.
# - Current-month traffic mix and margin / conversion trend.

import altair as alt
import pandas as pd
import streamlit as st

from report_cache import horizon_selector, load_report
from rpac.modeling.forecast import HorizonError, horizon_confidence
from rpac.schema.records import history_frame
from rpac.scoring.build_report import combined_frame
from rpac.transform.aggregate import traffic_mix

st.set_page_config(page_title="Retail Performance Analytics Console", layout="wide")


def main() -> None:
    st.title("Executive Dashboard")

    report = load_report()
    k = report.kpis

    horizon = horizon_selector()
    try:
        view = report.forecast_view(horizon)
        plot_df = combined_frame(report, horizon)
    except HorizonError as exc:
        st.error(str(exc))
        return

    # Phase B: KPI cards
    c1, c2, c3, c4, c5 = st.columns(5)
    c1.metric(
        "Total Revenue",
        f"${k.total_revenue / 1_000_000:.1f}M",
        f"{k.monthly_growth_pct:.1f}% MoM",
    )
    c2.metric("Gross Margin", f"{k.avg_gross_margin * 100:.1f}%")
    c3.metric("Conversion Rate", f"{k.avg_conversion_rate * 100:.1f}%")
    c4.metric("Avg Order Value", f"${k.avg_order_value:.0f}")
    c5.metric(
        "Forecast Confidence",
        f"{horizon_confidence(view) * 100:.0f}%",
        f"mean over {len(view)} months",
        delta_color="off",
    )

    # Phase C: Revenue trend (history + horizon slice) with the forecast band
    st.subheader("Revenue Trend & Forecast")

    # Keep actuals first, forecast after, in calendar order
    order = plot_df["month"].tolist()
    x = alt.X("month:N", sort=order, title=None, axis=alt.Axis(labelAngle=0))

    bars = (
        alt.Chart(plot_df)
        .mark_bar(opacity=0.85)
        .encode(
            x=x,
            y=alt.Y("revenue:Q", title="Revenue", axis=alt.Axis(format=",.0f")),
            color=alt.Color("type:N", title=None, legend=alt.Legend(orient="top")),
            tooltip=[
                alt.Tooltip("month:N", title="Month"),
                alt.Tooltip("type:N", title="Series"),
                alt.Tooltip("revenue:Q", title="Revenue", format=",.0f"),
            ],
        )
    )

    # Forecast High / Low as dashed lines over the forecast bars only
    bounds = plot_df[plot_df["type"] == "forecast"].melt(
        id_vars=["month"],
        value_vars=["upper_bound", "lower_bound"],
        var_name="bound",
        value_name="value",
    )
    bounds["bound"] = bounds["bound"].map(
        {"upper_bound": "Forecast High", "lower_bound": "Forecast Low"}
    )
    bound_lines = (
        alt.Chart(bounds)
        .mark_line(strokeDash=[5, 5], color="#EF4444")
        .encode(
            x=x,
            y="value:Q",
            detail="bound:N",
            tooltip=[
                alt.Tooltip("month:N", title="Month"),
                alt.Tooltip("bound:N", title="Series"),
                alt.Tooltip("value:Q", title="Revenue", format=",.0f"),
            ],
        )
    )

    st.altair_chart((bars + bound_lines).properties(height=360), use_container_width=True)

    left, right = st.columns(2)

    # Phase D: Traffic mix for the latest month
    with left:
        st.subheader("Traffic Sources")
        current = report.historical[-1]
        mix = traffic_mix(current)
        visits = current.traffic.as_dict()
        mix_df = pd.DataFrame(
            {
                "channel": [c.capitalize() for c in mix],
                "share": list(mix.values()),
                "visits": [visits[c] for c in mix],
            }
        )
        pie = (
            alt.Chart(mix_df)
            .mark_arc(outerRadius=110)
            .encode(
                theta=alt.Theta("visits:Q"),
                color=alt.Color("channel:N", title=None),
                tooltip=[
                    alt.Tooltip("channel:N", title="Channel"),
                    alt.Tooltip("visits:Q", title="Visits", format=",.0f"),
                    alt.Tooltip("share:Q", title="Share", format=".0%"),
                ],
            )
            .properties(height=300)
        )
        st.altair_chart(pie, use_container_width=True)

    # Phase E: Margin / conversion trend
    with right:
        st.subheader("Margin & Conversion")
        hist = history_frame(report.historical)
        trend = hist.melt(
            id_vars=["month"],
            value_vars=["gross_margin", "conversion_rate"],
            var_name="metric",
            value_name="value",
        )
        trend["metric"] = trend["metric"].map(
            {"gross_margin": "Gross Margin", "conversion_rate": "Conversion Rate"}
        )
        lines = (
            alt.Chart(trend)
            .mark_line(point=True)
            .encode(
                x=alt.X("month:N", sort=hist["month"].tolist(), title=None),
                y=alt.Y("value:Q", title=None, axis=alt.Axis(format=".0%")),
                color=alt.Color("metric:N", title=None, legend=alt.Legend(orient="top")),
                tooltip=[
                    alt.Tooltip("month:N", title="Month"),
                    alt.Tooltip("metric:N", title="Metric"),
                    alt.Tooltip("value:Q", title="Value", format=".1%"),
                ],
            )
            .properties(height=300)
        )
        st.altair_chart(lines, use_container_width=True)


if __name__ == "__main__":
    main()
