from __future__ import annotations

from typing import Sequence

from rpac.config.settings import settings
from rpac.features.seasonality import round_half_up
from rpac.schema.records import ForecastPoint, MonthlyRecord


class HorizonError(ValueError):
    """Requested forecast horizon is not one of settings.HORIZON_OPTIONS."""


def confidence_at(period_index: int) -> float:
    """
    Declared trust score for the i-th projected month.
    Linear decay from BASE_CONFIDENCE, floored at zero.
    """
    return max(
        0.0, settings.BASE_CONFIDENCE - settings.CONFIDENCE_DECAY * period_index
    )


def project(historical: Sequence[MonthlyRecord]) -> list[ForecastPoint]:
    """
    Phase A: Project next year's revenue month by month
    - Point i is last year's month i grown by GROWTH_TREND (fixed 8%).
    - Bounds are a symmetric +/- UNCERTAINTY band around that base.
    - Output is aligned index-for-index with the input, so a 12-month history
      gives 12 points. Longer inputs follow the same rule and confidence
      bottoms out at zero.

    This is a planning heuristic, not a fitted model: no randomness, no
    parameters learned from the history.
    """
    points: list[ForecastPoint] = []
    for i, record in enumerate(historical):
        base = record.revenue * settings.GROWTH_TREND
        points.append(
            ForecastPoint(
                month=f"{record.month} (F)",
                projected_revenue=round_half_up(base),
                upper_bound=round_half_up(base * (1 + settings.UNCERTAINTY)),
                lower_bound=round_half_up(base * (1 - settings.UNCERTAINTY)),
                confidence=confidence_at(i),
            )
        )
    return points


def resolve_horizon(value: int | str) -> int:
    # bool is an int subclass and floats would truncate; neither is a horizon
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise HorizonError(f"Forecast horizon must be an integer, got {value!r}")

    try:
        horizon = int(value)
    except (TypeError, ValueError) as exc:
        raise HorizonError(f"Forecast horizon must be an integer, got {value!r}") from exc

    if horizon not in settings.HORIZON_OPTIONS:
        raise HorizonError(
            f"Forecast horizon must be one of {settings.HORIZON_OPTIONS}, got {horizon}"
        )
    return horizon


def slice_horizon(points: Sequence[ForecastPoint], horizon: int | str) -> list[ForecastPoint]:
    """
    Phase B: Horizon view
    - Display-side truncation of an already computed projection.
    - Never re-runs project(); changing the horizon only changes the slice.
    """
    return list(points[: resolve_horizon(horizon)])


def horizon_confidence(points: Sequence[ForecastPoint]) -> float:
    """Mean declared confidence over a forecast view; 0 for an empty view."""
    if not points:
        return 0.0
    return sum(p.confidence for p in points) / len(points)
