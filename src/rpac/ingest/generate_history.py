from __future__ import annotations

import numpy as np

from rpac.config.settings import settings
from rpac.features.seasonality import demand_multiplier, round_half_up
from rpac.schema.records import MonthlyRecord, TrafficBreakdown

# (base, range) per channel: visits = base + U[0, range)
TRAFFIC_DRAWS: dict[str, tuple[int, int]] = {
    "organic": (15_000, 3_000),
    "paid": (8_000, 2_000),
    "social": (5_000, 1_500),
    "email": (4_000, 1_000),
    "direct": (12_000, 2_500),
}


def _draw(rng: np.random.Generator, base: float, spread: float) -> float:
    return base + rng.uniform(0.0, spread)


def generate_historical(rng: np.random.Generator) -> list[MonthlyRecord]:
    """
    Phase A: Build one synthetic year of monthly performance
    - rng is passed in explicitly; every draw below goes through it, so a
      seeded generator reproduces the same year.
    - Revenue and units share the month's demand multiplier
      (seasonality x holiday boost), so they move together.
    - Margin, conversion, order value and traffic are drawn around fixed
      levels with no seasonal scaling.
    """
    history: list[MonthlyRecord] = []
    for i, month in enumerate(settings.MONTHS):
        scale = demand_multiplier(i)

        revenue = round_half_up(_draw(rng, 850_000, 150_000) * scale)
        units = round_half_up(_draw(rng, 2_800, 500) * scale)
        gross_margin = 0.68 + rng.uniform(-0.04, 0.04)
        conversion_rate = 0.034 + rng.uniform(-0.004, 0.004)
        avg_order_value = round_half_up(_draw(rng, 280, 40))

        traffic = TrafficBreakdown(
            **{
                channel: round_half_up(_draw(rng, base, spread))
                for channel, (base, spread) in TRAFFIC_DRAWS.items()
            }
        )

        history.append(
            MonthlyRecord(
                month=month,
                revenue=revenue,
                units=units,
                gross_margin=float(gross_margin),
                conversion_rate=float(conversion_rate),
                avg_order_value=avg_order_value,
                traffic=traffic,
            )
        )
    return history


class MockHistoryProvider:
    """
    Stand-in for a real sales feed.
    Each load_history() call gets its own generator, so two runs never
    share random state; the same seed always yields the same year.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed

    def load_history(self) -> list[MonthlyRecord]:
        return generate_historical(np.random.default_rng(self.seed))
