"""
Shared fixtures for engine tests.
"""
import numpy as np
import pytest

from rpac.config.settings import settings
from rpac.ingest.generate_history import generate_historical
from rpac.schema.records import MonthlyRecord, TrafficBreakdown


def make_record(month="Jan", revenue=0, **overrides):
    """Build a MonthlyRecord where only the fields under test matter."""
    fields = dict(
        month=month,
        revenue=revenue,
        units=100,
        gross_margin=0.68,
        conversion_rate=0.034,
        avg_order_value=280,
        traffic=TrafficBreakdown(15_000, 8_000, 5_000, 4_000, 12_000),
    )
    fields.update(overrides)
    return MonthlyRecord(**fields)


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def seeded_history():
    """One synthetic year drawn from a fixed seed."""
    return generate_historical(np.random.default_rng(42))


@pytest.fixture
def flat_year():
    """Twelve months at exactly 1,000,000 revenue."""
    return [make_record(m, 1_000_000) for m in settings.MONTHS]
