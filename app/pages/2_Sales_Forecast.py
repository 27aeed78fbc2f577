from __future__ import annotations

# Phase A: Sales Forecast goal
# - Show the 12-month projection with its +/-10% band and declared confidence.
# - Scenario cards: bear / base / bull applied to last year's total revenue.
# - The projection is a fixed-growth planning heuristic, and the page says so.

import altair as alt
import streamlit as st

from report_cache import load_report
from rpac.schema.records import forecast_frame
from rpac.scenarios.scenario_engine import scenario_frame

st.set_page_config(page_title="Retail Performance Analytics Console", layout="wide")

CASE_TITLES = {"bear": "Bear Case", "base": "Base Case", "bull": "Bull Case"}


def main() -> None:
    st.title("Sales Forecast")

    report = load_report()

    # Phase B: Full projection (this view always shows all 12 months)
    fc = forecast_frame(report.forecast)
    order = fc["month"].tolist()

    x = alt.X("month:N", sort=order, title=None, axis=alt.Axis(labelAngle=0))
    base = alt.Chart(fc)

    band = base.mark_area(opacity=0.25, color="#EF4444").encode(
        x=x,
        y=alt.Y("lower_bound:Q", title="Revenue", axis=alt.Axis(format=",.0f")),
        y2="upper_bound:Q",
    )
    line = base.mark_line(strokeWidth=3, point=True).encode(
        x=x,
        y="projected_revenue:Q",
        tooltip=[
            alt.Tooltip("month:N", title="Month"),
            alt.Tooltip("projected_revenue:Q", title="Forecast", format=",.0f"),
            alt.Tooltip("lower_bound:Q", title="Low", format=",.0f"),
            alt.Tooltip("upper_bound:Q", title="High", format=",.0f"),
            alt.Tooltip("confidence:Q", title="Confidence", format=".0%"),
        ],
    )
    st.altair_chart((band + line).properties(height=380), use_container_width=True)

    conf = (
        base.mark_bar(opacity=0.6, color="#10B981")
        .encode(
            x=x,
            y=alt.Y(
                "confidence:Q",
                title="Confidence",
                axis=alt.Axis(format=".0%"),
                scale=alt.Scale(domain=[0, 1]),
            ),
        )
        .properties(height=160)
    )
    st.altair_chart(conf, use_container_width=True)

    st.caption(
        "Forecast = last year's month x 1.08 with a +/-10% range. "
        "Confidence is a declared score that drops 2 points per month ahead; "
        "it is not a statistical interval."
    )

    # Phase C: Scenario cards
    st.subheader("Scenario Planning")
    scen = scenario_frame(report.scenario_set)
    cols = st.columns(len(scen))
    for col, row in zip(cols, scen.itertuples(index=False)):
        with col:
            st.markdown(f"**{CASE_TITLES[row.case]} ({row.change_pct:+.0f}%)**")
            st.markdown("\n".join(f"- {d}" for d in row.drivers))
            st.metric("Projected revenue", f"${row.revenue / 1_000_000:.1f}M")


if __name__ == "__main__":
    main()
