from __future__ import annotations

# Phase A: Streamlit entrypoint
# - Streamlit auto-loads files in app/pages for the three views.
# - This file sets global config and a small landing page.

import streamlit as st


def main() -> None:
    st.set_page_config(
        page_title="Retail Performance Analytics Console",
        layout="wide",
    )

    st.title("Retail Performance Analytics Console")

    st.write(
        "Monthly sales performance in one place: a year of history, a 12-month "
        "revenue projection with a low / expected / high range, and a 5P's marketing breakdown."
    )

    st.write("What you can do here:")
    st.markdown(
        "- **Executive Dashboard:** Headline KPIs, revenue trend with the forecast appended, and traffic mix.\n"
        "- **Sales Forecast:** Month-by-month projection with bounds, confidence, and bear / base / bull scenarios.\n"
        "- **5P's Analysis:** Product, price, place, promotion and people reference figures."
    )

    st.info("Use the sidebar to navigate through the pages.")


if __name__ == "__main__":
    main()
