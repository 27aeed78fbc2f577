from __future__ import annotations

import os
from dataclasses import dataclass, field


class SettingsError(ValueError):
    """An RPAC_* environment variable holds a value the console cannot use."""


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise SettingsError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    # ---------- Calendar ----------
    MONTHS: tuple[str, ...] = (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    )

    # ---------- Forecast horizon ----------
    HORIZON_OPTIONS: tuple[int, ...] = (6, 12)
    DEFAULT_HORIZON: int = field(
        default_factory=lambda: _env_int("RPAC_FORECAST_HORIZON", 12)
    )

    # Unset means every run draws a fresh series
    SEED: int | None = field(default_factory=lambda: _env_int("RPAC_SEED", None))

    # ---------- Engine heuristics ----------
    GROWTH_TREND: float = 1.08  # 8% YoY growth assumption
    UNCERTAINTY: float = 0.10  # +/-10% band around the projection
    BASE_CONFIDENCE: float = 0.85
    CONFIDENCE_DECAY: float = 0.02
    HOLIDAY_BOOST: float = 1.4
    HOLIDAY_PERIODS: tuple[int, ...] = (10, 11)  # Nov / Dec

    SCENARIO_MULTIPLIERS: dict[str, float] = field(
        default_factory=lambda: {"bear": 0.85, "base": 1.08, "bull": 1.25}
    )

    def __post_init__(self) -> None:
        # Fail at startup, naming the variable, rather than deep inside a render or report run
        if self.DEFAULT_HORIZON not in self.HORIZON_OPTIONS:
            raise SettingsError(
                f"RPAC_FORECAST_HORIZON must be one of {self.HORIZON_OPTIONS}, "
                f"got {self.DEFAULT_HORIZON}"
            )
        if self.SEED is not None and self.SEED < 0:
            raise SettingsError(f"RPAC_SEED must be non-negative, got {self.SEED}")


settings = Settings()
