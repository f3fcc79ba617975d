"""
Unit tests for readiness scoring.

Tests the deviation bands and their interpolation, the RHR and sleep
penalties, the undetermined sentinel and score clamping.
"""

import pytest

from app.engine.categories import ReadinessCategory
from app.engine.config import EngineConfig
from app.engine.scorer import (
    UNDETERMINED,
    band_score,
    build_score_record,
    deviation_percent,
    rhr_adjustment,
    score_readiness,
    sleep_adjustment,
)
from tests.fakes import NOW, TODAY

OPTIMAL = ReadinessCategory.OPTIMAL
MODERATE = ReadinessCategory.MODERATE
LOW = ReadinessCategory.LOW
FATIGUE = ReadinessCategory.FATIGUE


def _score(hrv, baseline=100.0, rhr=None, sleep=None, rhr_baseline=0.0, **config):
    return score_readiness(
        hrv=hrv, rhr=rhr, sleep_hours=sleep,
        hrv_baseline=baseline, rhr_baseline=rhr_baseline,
        config=EngineConfig(**config),
    )


# ======================================================================
# band_score
# ======================================================================


class TestBandScore:

    @pytest.mark.parametrize("deviation,expected_score,expected_category", [
        (-50.0, 0.0, FATIGUE),
        (-30.0, 0.0, FATIGUE),
        (-20.0, 14.5, FATIGUE),
        (-10.5, 28.275, FATIGUE),
        (-10.0, 30.0, LOW),
        (-8.5, 39.5, LOW),
        (-7.0, 50.0, MODERATE),
        (-5.0, 64.5, MODERATE),
        (-3.0, 80.0, OPTIMAL),
        (-1.5, 90.0, OPTIMAL),
        (0.0, 100.0, OPTIMAL),
        (1.5, 90.0, OPTIMAL),
        (3.0, 80.0, OPTIMAL),
        (6.5, 85.0, OPTIMAL),
        (10.0, 90.0, OPTIMAL),
        (15.0, 95.0, OPTIMAL),
        (20.0, 100.0, OPTIMAL),
        (40.0, 100.0, OPTIMAL),
    ])
    def test_bands(self, deviation, expected_score, expected_category):
        score, category = band_score(deviation)
        assert score == pytest.approx(expected_score)
        assert category is expected_category

    def test_monotonic_below_baseline(self):
        scores = [band_score(d / 10)[0] for d in range(-300, 1)]
        assert scores == sorted(scores)


# ======================================================================
# score_readiness
# ======================================================================


class TestScoreReadiness:

    @pytest.mark.parametrize("hrv,expected_score,expected_category", [
        (90.0, 30.0, LOW),
        (93.0, 50.0, MODERATE),
        (97.0, 80.0, OPTIMAL),
        (100.0, 100.0, OPTIMAL),
        (103.0, 80.0, OPTIMAL),
        (110.0, 90.0, OPTIMAL),
    ])
    def test_band_edges_against_baseline(self, hrv, expected_score, expected_category):
        result = _score(hrv)
        assert result.score == expected_score
        assert result.category is expected_category

    def test_float_noise_does_not_cross_band_edge(self):
        """27.9 vs 30 lands just below -7% in raw float arithmetic."""
        assert deviation_percent(27.9, 30.0) == -7.0
        result = _score(27.9, baseline=30.0)
        assert result.category is MODERATE
        assert result.score == 50.0

    def test_deviation_reported(self):
        result = _score(56.0, baseline=52.0)
        assert result.deviation_percent == 7.69
        assert result.score == 86.7

    def test_no_baseline_is_undetermined(self):
        assert _score(50.0, baseline=0.0) == UNDETERMINED

    @pytest.mark.parametrize("hrv", [None, 5.0, 250.0])
    def test_invalid_hrv_is_undetermined(self, hrv):
        result = _score(hrv)
        assert result.score == 0.0
        assert result.category is ReadinessCategory.UNKNOWN
        assert not result.is_determined

    def test_determined_score_never_zero(self):
        result = _score(70.0)
        assert result.band_score == 0.0
        assert result.score == 1.0
        assert result.category is FATIGUE

    def test_penalties_keep_category(self):
        result = _score(
            100.0, rhr=70.0, rhr_baseline=60.0, sleep=5.0,
            use_rhr_adjustment=True, use_sleep_adjustment=True,
        )
        assert result.score == 75.0
        assert result.category is OPTIMAL
        assert result.rhr_adjustment == -10.0
        assert result.sleep_adjustment == -15.0

    def test_penalties_clamped_to_minimum(self):
        result = _score(
            80.0, rhr=70.0, rhr_baseline=60.0, sleep=4.0,
            use_rhr_adjustment=True, use_sleep_adjustment=True,
        )
        assert result.score == 1.0
        assert result.category is FATIGUE

    def test_penalties_ignored_when_disabled(self):
        result = _score(100.0, rhr=80.0, rhr_baseline=60.0, sleep=3.0)
        assert result.score == 100.0


# ======================================================================
# Adjustments
# ======================================================================


class TestAdjustments:

    @pytest.mark.parametrize("rhr,expected", [
        (60.0, 0.0),
        (65.0, 0.0),
        (65.1, -10.0),
        (80.0, -10.0),
        (None, 0.0),
        (0.0, 0.0),
    ])
    def test_rhr(self, rhr, expected):
        assert rhr_adjustment(rhr, 60.0, enabled=True) == expected

    def test_rhr_without_baseline(self):
        assert rhr_adjustment(90.0, 0.0, enabled=True) == 0.0

    def test_rhr_disabled(self):
        assert rhr_adjustment(90.0, 60.0, enabled=False) == 0.0

    @pytest.mark.parametrize("sleep,expected", [
        (8.0, 0.0),
        (6.0, 0.0),
        (5.9, -15.0),
        (2.0, -15.0),
        (None, 0.0),
        (0.0, 0.0),
    ])
    def test_sleep(self, sleep, expected):
        assert sleep_adjustment(sleep, enabled=True) == expected

    def test_sleep_disabled(self):
        assert sleep_adjustment(3.0, enabled=False) == 0.0


# ======================================================================
# build_score_record
# ======================================================================


class TestBuildScoreRecord:

    def test_determined(self):
        config = EngineConfig(baseline_period_days=14, minimum_days_for_baseline=4)
        result = _score(56.0, baseline=52.0)
        record = build_score_record(TODAY, result, 52.0, 0.0, 0.0, config, NOW)

        assert record.date == TODAY
        assert record.score == 86.7
        assert record.category == "optimal"
        assert record.hrv_baseline == 52.0
        assert record.baseline_period_days == 14
        assert record.minimum_days_for_baseline == 4
        assert record.calculation_timestamp == NOW

    def test_undetermined_zeroes_baseline(self):
        """Unknown category, zero score and zero baseline go together."""
        record = build_score_record(TODAY, UNDETERMINED, 52.0, 0.0, 0.0, EngineConfig(), NOW)
        assert record.score == 0.0
        assert record.category == "unknown"
        assert record.hrv_baseline == 0.0
