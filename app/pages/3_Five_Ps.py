from __future__ import annotations

# Phase A: 5P's Analysis goal
# - Product: category revenue, margin and growth.
# - Price / Place: elasticity posture and channel mix.
# - Promotion: campaign ROI vs spend.
# - People: customer segments by revenue and headcount share.

import altair as alt
import pandas as pd
import streamlit as st

from rpac.marketing.five_ps import campaign_frame, five_ps_analysis, segment_frame

st.set_page_config(page_title="Retail Performance Analytics Console", layout="wide")


def main() -> None:
    st.title("5P's Analysis")

    a = five_ps_analysis()

    # Phase B: Product
    st.subheader("Product Performance")
    product = pd.DataFrame(
        [
            {
                "category": c.name,
                "revenue": c.revenue,
                "margin": c.margin,
                "growth": c.growth,
            }
            for c in a.product
        ]
    )
    bars = (
        alt.Chart(product)
        .mark_bar()
        .encode(
            x=alt.X("category:N", sort="-y", title=None, axis=alt.Axis(labelAngle=0)),
            y=alt.Y("revenue:Q", title="Revenue", axis=alt.Axis(format="$,.0f")),
            tooltip=[
                alt.Tooltip("category:N", title="Category"),
                alt.Tooltip("revenue:Q", title="Revenue", format="$,.0f"),
                alt.Tooltip("margin:Q", title="Margin", format=".1%"),
                alt.Tooltip("growth:Q", title="Growth", format=".1%"),
            ],
        )
        .properties(height=300)
    )
    st.altair_chart(bars, use_container_width=True)

    # Phase C: Price + Place
    left, right = st.columns(2)
    with left:
        st.subheader("Price")
        c1, c2, c3 = st.columns(3)
        c1.metric("Elasticity", f"{a.price.elasticity:.1f}")
        c2.metric("Optimal promo depth", f"{a.price.optimal_promotion_depth:.0%}")
        c3.metric("Margin impact", f"{a.price.margin_impact:.0%}")
    with right:
        st.subheader("Place")
        place = pd.DataFrame(
            [
                {
                    "Channel": p.channel,
                    "Revenue share": f"{p.revenue_share:.0%}",
                    "Conversion": f"{p.conversion:.1%}",
                }
                for p in a.place
            ]
        )
        st.dataframe(place, hide_index=True, use_container_width=True)

    # Phase D: Promotion
    st.subheader("Promotion ROI")
    camp = campaign_frame(a)
    roi = (
        alt.Chart(camp)
        .mark_bar(color="#10B981")
        .encode(
            x=alt.X("roi:Q", title="ROI (x)"),
            y=alt.Y("campaign:N", sort="-x", title=None),
            tooltip=[
                alt.Tooltip("campaign:N", title="Campaign"),
                alt.Tooltip("roi:Q", title="ROI", format=".1f"),
                alt.Tooltip("spend:Q", title="Spend", format="$,.0f"),
                alt.Tooltip("return:Q", title="Return", format="$,.0f"),
            ],
        )
        .properties(height=220)
    )
    st.altair_chart(roi, use_container_width=True)

    # Phase E: People
    st.subheader("Customer Segments")
    seg = segment_frame(a)
    left, right = st.columns(2)
    with left:
        pie = (
            alt.Chart(seg)
            .mark_arc(outerRadius=100)
            .encode(
                theta=alt.Theta("revenue_share:Q"),
                color=alt.Color("segment:N", title=None),
                tooltip=[
                    alt.Tooltip("segment:N", title="Segment"),
                    alt.Tooltip("revenue_share:Q", title="Revenue", format=".0%"),
                ],
            )
            .properties(height=260)
        )
        st.altair_chart(pie, use_container_width=True)
    with right:
        for s in seg.itertuples(index=False):
            st.markdown(
                f"**{s.segment}** · {s.customer_share:.0%} of customers  \n"
                f"Revenue contribution: {s.revenue_share:.0%} · "
                f"Revenue per customer: ${s.revenue_per_customer:,.0f}"
            )


if __name__ == "__main__":
    main()
