"""
Unit tests for the settings service.
"""

import pytest
from pydantic import ValidationError

from app.engine.config import BaselinePeriod, SettingChange
from app.schemas.settings import EngineSettingsUpdate
from app.services.settings_service import SettingsService


class TestSettingsService:

    def test_seeds_defaults(self, session):
        config = SettingsService(session).get_config()

        assert config.baseline_period_days is BaselinePeriod.SEVEN_DAYS
        assert config.minimum_days_for_baseline == 2
        assert config.retention_days == 365

    def test_get_includes_explanation(self, session):
        response = SettingsService(session).get()
        assert "7 days" in response.baseline_period_explanation
        assert response.suggested_minimum_days_for_baseline == 3

    def test_update_detects_historical_change(self, session):
        service = SettingsService(session)

        response, change = service.update(EngineSettingsUpdate(
            baseline_period_days=BaselinePeriod.FOURTEEN_DAYS,
            minimum_days_for_baseline=5,
        ))

        assert response.baseline_period_days is BaselinePeriod.FOURTEEN_DAYS
        assert response.suggested_minimum_days_for_baseline == 5
        assert change.changes == {SettingChange.BASELINE_PERIOD, SettingChange.MINIMUM_DAYS}
        assert change.requires_historical_recalculation
        assert SettingsService(session).get_config().minimum_days_for_baseline == 5

    def test_retention_only(self, session):
        _, change = SettingsService(session).update(EngineSettingsUpdate(retention_days=90))

        assert change.changes == {SettingChange.RETENTION}
        assert not change.requires_historical_recalculation

    def test_same_values_are_no_change(self, session):
        _, change = SettingsService(session).update(EngineSettingsUpdate(
            baseline_period_days=BaselinePeriod.SEVEN_DAYS,
        ))
        assert change.is_empty

    def test_rejects_unsupported_period(self):
        with pytest.raises(ValidationError):
            EngineSettingsUpdate(baseline_period_days=10)
