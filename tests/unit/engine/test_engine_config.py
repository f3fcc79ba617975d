"""
Unit tests for engine configuration and change detection.
"""

import pytest
from pydantic import ValidationError

from app.engine.config import (
    DEFAULT_ENGINE_CONFIG,
    BaselinePeriod,
    EngineConfig,
    SettingChange,
    diff_configs,
)


class TestBaselinePeriod:

    @pytest.mark.parametrize("period,minimum", [
        (BaselinePeriod.SEVEN_DAYS, 3),
        (BaselinePeriod.FOURTEEN_DAYS, 5),
        (BaselinePeriod.THIRTY_DAYS, 7),
    ])
    def test_suggested_minimum(self, period, minimum):
        assert period.suggested_minimum_days == minimum

    def test_from_days_falls_back_to_seven(self):
        assert BaselinePeriod.from_days(14) is BaselinePeriod.FOURTEEN_DAYS
        assert BaselinePeriod.from_days(10) is BaselinePeriod.SEVEN_DAYS

    def test_description(self):
        assert BaselinePeriod.THIRTY_DAYS.description == "30 days"
        assert "30 days" in BaselinePeriod.THIRTY_DAYS.explanation


class TestEngineConfig:

    def test_defaults(self):
        assert DEFAULT_ENGINE_CONFIG.baseline_period_days == 7
        assert DEFAULT_ENGINE_CONFIG.minimum_days_for_baseline == 2
        assert DEFAULT_ENGINE_CONFIG.use_rhr_adjustment is False
        assert DEFAULT_ENGINE_CONFIG.use_sleep_adjustment is False
        assert DEFAULT_ENGINE_CONFIG.retention_days == 365

    def test_is_immutable(self):
        with pytest.raises(ValidationError):
            DEFAULT_ENGINE_CONFIG.minimum_days_for_baseline = 5

    def test_rejects_unsupported_period(self):
        with pytest.raises(ValidationError):
            EngineConfig(baseline_period_days=10)

    def test_rejects_zero_minimum(self):
        with pytest.raises(ValidationError):
            EngineConfig(minimum_days_for_baseline=0)


class TestDiffConfigs:

    def test_no_change(self):
        change = diff_configs(EngineConfig(), EngineConfig())
        assert change.is_empty
        assert not change.requires_historical_recalculation

    @pytest.mark.parametrize("field,value,expected", [
        ("baseline_period_days", 14, SettingChange.BASELINE_PERIOD),
        ("minimum_days_for_baseline", 3, SettingChange.MINIMUM_DAYS),
        ("use_rhr_adjustment", True, SettingChange.RHR_ADJUSTMENT),
        ("use_sleep_adjustment", True, SettingChange.SLEEP_ADJUSTMENT),
    ])
    def test_scoring_changes_require_recalculation(self, field, value, expected):
        change = diff_configs(EngineConfig(), EngineConfig(**{field: value}))
        assert change.changes == {expected}
        assert change.requires_historical_recalculation

    def test_retention_change_does_not_require_recalculation(self):
        change = diff_configs(EngineConfig(), EngineConfig(retention_days=90))
        assert change.changes == {SettingChange.RETENTION}
        assert not change.requires_historical_recalculation

    def test_multiple_changes(self):
        change = diff_configs(
            EngineConfig(),
            EngineConfig(baseline_period_days=30, retention_days=90),
        )
        assert change.changes == {SettingChange.BASELINE_PERIOD, SettingChange.RETENTION}
