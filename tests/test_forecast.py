"""
Tests for the forecast projector and horizon slicing.
"""
import pytest

from rpac.config.settings import settings
from rpac.modeling.forecast import (
    HorizonError,
    confidence_at,
    horizon_confidence,
    project,
    resolve_horizon,
    slice_horizon,
)


@pytest.mark.unit
class TestProject:
    """Projection of next year's revenue."""

    def test_december_scenario(self, flat_year):
        """Dec at 1,000,000 -> 1,080,000 with a +/-10% band and 0.63 confidence."""
        dec = project(flat_year)[11]
        assert dec.month == "Dec (F)"
        assert dec.projected_revenue == 1_080_000
        assert dec.upper_bound == 1_188_000
        assert dec.lower_bound == 972_000
        assert dec.confidence == pytest.approx(0.63)

    def test_aligned_with_history(self, seeded_history):
        points = project(seeded_history)
        assert len(points) == 12
        assert [p.month for p in points] == [f"{m} (F)" for m in settings.MONTHS]

    def test_bounds_bracket_projection(self, seeded_history):
        for p in project(seeded_history):
            assert p.lower_bound <= p.projected_revenue <= p.upper_bound

    def test_confidence_non_increasing_and_non_negative(self, seeded_history):
        conf = [p.confidence for p in project(seeded_history)]
        assert conf[0] == pytest.approx(0.85)
        assert all(a >= b for a, b in zip(conf, conf[1:]))
        assert all(c >= 0 for c in conf)

    def test_confidence_clamped_for_long_inputs(self, record_factory):
        """Beyond ~42 periods the decay would go negative; it stops at zero."""
        history = [record_factory("Jan", 1_000) for _ in range(60)]
        conf = [p.confidence for p in project(history)]
        assert all(a >= b for a, b in zip(conf, conf[1:]))
        assert conf[-1] == 0.0
        assert min(conf) == 0.0

    def test_deterministic(self, seeded_history):
        assert project(seeded_history) == project(seeded_history)

    def test_zero_revenue_month(self, record_factory):
        p = project([record_factory("Jan", 0)])[0]
        assert (p.lower_bound, p.projected_revenue, p.upper_bound) == (0, 0, 0)

    def test_empty_history(self):
        assert project([]) == []


@pytest.mark.unit
class TestConfidenceAt:
    def test_linear_decay(self):
        assert confidence_at(0) == pytest.approx(0.85)
        assert confidence_at(5) == pytest.approx(0.75)

    def test_floor_at_zero(self):
        assert confidence_at(100) == 0.0


@pytest.mark.unit
class TestHorizon:
    """Horizon selection is a read-only slice of the full projection."""

    @pytest.mark.parametrize("value", [6, 12, "6", "12"])
    def test_accepted_values(self, value):
        assert resolve_horizon(value) == int(value)

    @pytest.mark.parametrize("value", [0, 3, 7, 13, 24, -6])
    def test_rejects_out_of_set(self, value):
        with pytest.raises(HorizonError):
            resolve_horizon(value)

    def test_rejects_non_integer(self):
        with pytest.raises(HorizonError):
            resolve_horizon("twelve")

    @pytest.mark.parametrize("value", [6.5, 12.9, 5.99, "6.5", True, None])
    def test_rejects_fractional_and_non_numeric(self, value):
        """Fractions must not truncate into a valid horizon."""
        with pytest.raises(HorizonError):
            resolve_horizon(value)

    def test_integral_float_accepted(self):
        assert resolve_horizon(12.0) == 12

    def test_slice_takes_leading_points(self, seeded_history):
        points = project(seeded_history)
        six = slice_horizon(points, 6)
        assert six == points[:6]
        assert slice_horizon(points, 12) == points

    def test_slice_leaves_source_untouched(self, seeded_history):
        points = project(seeded_history)
        before = list(points)
        slice_horizon(points, 6)
        assert points == before

    def test_horizon_error_is_value_error(self):
        assert issubclass(HorizonError, ValueError)


@pytest.mark.unit
class TestHorizonConfidence:
    """Mean confidence shown on the dashboard card."""

    def test_mean_over_view(self, flat_year):
        points = project(flat_year)
        # 0.85 .. 0.75 over the first six months
        assert horizon_confidence(slice_horizon(points, 6)) == pytest.approx(0.80)
        assert horizon_confidence(points) == pytest.approx(0.74)

    def test_shorter_view_is_more_confident(self, seeded_history):
        points = project(seeded_history)
        assert horizon_confidence(points[:6]) > horizon_confidence(points)

    def test_empty_view(self):
        assert horizon_confidence([]) == 0.0
