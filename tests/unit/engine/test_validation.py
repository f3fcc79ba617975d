"""
Unit tests for metric range validation.
"""

import datetime

import pytest

from app.engine.validation import (
    available_metrics,
    is_valid_hrv,
    is_valid_rhr,
    is_valid_sleep,
    missing_metrics,
)
from app.models.metrics import DailyMetric


def _record(hrv=None, rhr=None, sleep=None) -> DailyMetric:
    return DailyMetric(
        date=datetime.date(2026, 3, 1),
        hrv=hrv, resting_heart_rate=rhr, sleep_hours=sleep,
    )


class TestRanges:

    @pytest.mark.parametrize("value,expected", [
        (None, False),
        (0.0, False),
        (9.9, False),
        (10.0, True),
        (55.0, True),
        (200.0, True),
        (200.1, False),
    ])
    def test_hrv(self, value, expected):
        assert is_valid_hrv(value) is expected

    @pytest.mark.parametrize("value,expected", [
        (None, False),
        (29.9, False),
        (30.0, True),
        (120.0, True),
        (120.5, False),
    ])
    def test_rhr(self, value, expected):
        assert is_valid_rhr(value) is expected

    @pytest.mark.parametrize("value,expected", [
        (None, False),
        (0.0, False),
        (0.1, True),
        (12.0, True),
        (12.1, False),
    ])
    def test_sleep(self, value, expected):
        assert is_valid_sleep(value) is expected


class TestAvailability:

    def test_all_present(self):
        record = _record(hrv=50, rhr=55, sleep=7.5)
        assert available_metrics(record) == ["HRV", "Resting Heart Rate", "Sleep Data"]
        assert missing_metrics(record) == []

    def test_out_of_range_counts_as_missing(self):
        record = _record(hrv=250, rhr=55)
        assert available_metrics(record) == ["Resting Heart Rate"]
        assert missing_metrics(record) == ["HRV", "Sleep Data"]

