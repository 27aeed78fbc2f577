from __future__ import annotations

import math

from rpac.config.settings import settings


def round_half_up(value: float) -> int:
    # Ties go up (2.5 -> 3), unlike the built-in round()
    return int(math.floor(value + 0.5))


def seasonality_factor(period_index: int) -> float:
    """
    Phase A: Within-year demand shape
    - Jan..Jun ramp up linearly: 0.80 -> 1.05
    - Jul..Dec ease down linearly: 1.20 -> 1.05
    This is a fixed heuristic, not a fitted seasonal component.
    """
    i = period_index % 12
    if i < 6:
        return 0.8 + 0.05 * i
    return 1.2 - 0.03 * (i - 6)


def holiday_multiplier(period_index: int) -> float:
    if period_index % 12 in settings.HOLIDAY_PERIODS:
        return settings.HOLIDAY_BOOST
    return 1.0


def demand_multiplier(period_index: int) -> float:
    """Seasonality and holiday boost combined; scales revenue and units."""
    return seasonality_factor(period_index) * holiday_multiplier(period_index)
