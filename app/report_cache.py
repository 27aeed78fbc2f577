from __future__ import annotations

import streamlit as st

from rpac.config.settings import settings
from rpac.ingest.generate_history import MockHistoryProvider
from rpac.scoring.build_report import AnalyticsReport, build_report


@st.cache_data
def load_report(seed: int | None = settings.SEED) -> AnalyticsReport:
    # One report per seed for the whole session; reruns and page switches reuse it
    return build_report(MockHistoryProvider(seed))


def horizon_selector() -> int:
    # DEFAULT_HORIZON is validated against HORIZON_OPTIONS when settings load
    options = list(settings.HORIZON_OPTIONS)
    index = options.index(settings.DEFAULT_HORIZON)
    return st.selectbox(
        "Forecast horizon (months)",
        options,
        index=index,
        key="forecast_horizon",
    )
