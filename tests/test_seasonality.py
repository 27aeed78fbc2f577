"""
Tests for the seasonality and holiday multipliers.
"""
import pytest

from rpac.features.seasonality import (
    demand_multiplier,
    holiday_multiplier,
    round_half_up,
    seasonality_factor,
)


@pytest.mark.unit
class TestSeasonalityFactor:
    """Tests for the within-year demand shape."""

    def test_first_half_ramps_up(self):
        """Jan..Jun should ramp 0.80 -> 1.05 in 0.05 steps."""
        expected = [0.80, 0.85, 0.90, 0.95, 1.00, 1.05]
        assert [seasonality_factor(i) for i in range(6)] == pytest.approx(expected)

    def test_second_half_eases_down(self):
        """Jul..Dec should ease 1.20 -> 1.05 in 0.03 steps."""
        expected = [1.20, 1.17, 1.14, 1.11, 1.08, 1.05]
        assert [seasonality_factor(i) for i in range(6, 12)] == pytest.approx(expected)

    def test_always_positive(self):
        assert all(seasonality_factor(i) > 0 for i in range(12))

    def test_index_wraps_to_calendar_month(self):
        """Index 12 names January again."""
        assert seasonality_factor(12) == pytest.approx(seasonality_factor(0))


@pytest.mark.unit
class TestHolidayMultiplier:
    """Tests for the Nov/Dec boost."""

    def test_boost_only_in_last_two_periods(self):
        boosted = [i for i in range(12) if holiday_multiplier(i) != 1.0]
        assert boosted == [10, 11]
        assert holiday_multiplier(10) == pytest.approx(1.4)

    def test_demand_multiplier_combines_both(self):
        """December = 1.05 seasonality x 1.4 holiday boost."""
        assert demand_multiplier(11) == pytest.approx(1.47)
        assert demand_multiplier(3) == pytest.approx(0.95)


@pytest.mark.unit
class TestRoundHalfUp:
    """Rounding used for currency and count fields."""

    def test_ties_round_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_nearest_integer(self):
        assert round_half_up(1.4) == 1
        assert round_half_up(1_079_999.6) == 1_080_000
        assert isinstance(round_half_up(3.0), int)
