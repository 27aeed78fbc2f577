from __future__ import annotations

import pandas as pd

from rpac.config.settings import settings
from rpac.schema.records import ScenarioSet

# Narrative behind each case, shown next to the numbers
SCENARIO_DRIVERS: dict[str, tuple[str, ...]] = {
    "bear": (
        "Economic downturn",
        "Increased competition",
        "Supply chain issues",
        "Reduced marketing spend",
    ),
    "base": (
        "Steady market growth",
        "Maintained positioning",
        "Normal seasonality",
        "Current strategies",
    ),
    "bull": (
        "Successful new launches",
        "Market expansion",
        "Operational efficiency",
        "Increased brand strength",
    ),
}


def scenarios(total_revenue: float) -> ScenarioSet:
    """
    Phase A: Apply fixed what-if shocks to aggregate revenue
    - bear = -15%, base = +8%, bull = +25%
    - Multipliers are fixed planning assumptions; they do not depend on the
      spread of the history or on forecast confidence.
    """
    m = settings.SCENARIO_MULTIPLIERS
    return ScenarioSet(
        bear=total_revenue * m["bear"],
        base=total_revenue * m["base"],
        bull=total_revenue * m["bull"],
    )


def scenario_frame(scenario_set: ScenarioSet) -> pd.DataFrame:
    """
    Phase B: Tidy table for scenario cards
    - One row per case with the multiplier and the change vs today in percent.
    """
    m = settings.SCENARIO_MULTIPLIERS
    rows = [
        {
            "case": case,
            "multiplier": m[case],
            "change_pct": (m[case] - 1.0) * 100,
            "revenue": getattr(scenario_set, case),
            "drivers": list(SCENARIO_DRIVERS[case]),
        }
        for case in ("bear", "base", "bull")
    ]
    return pd.DataFrame(rows)
