"""
Engine settings service.

Owns the persisted configuration and acts as the engine's configuration
provider: :meth:`SettingsService.get_config` returns an immutable
:class:`EngineConfig` snapshot.
"""

import datetime
import logging

from sqlmodel import Session

from app.core.config import settings as app_settings
from app.db.repositories.settings import EngineSettingsRepository
from app.engine.config import (
    BaselinePeriod,
    EngineConfig,
    SettingsChange,
    diff_configs,
)
from app.models.settings import EngineSettings
from app.schemas.settings import EngineSettingsResponse, EngineSettingsUpdate

logger = logging.getLogger(__name__)


class SettingsService:
    """Service for readiness configuration."""

    def __init__(self, session: Session):
        self.repository = EngineSettingsRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_config(self) -> EngineConfig:
        """Snapshot of the current configuration."""
        return self._to_config(self._get_or_create())

    def get(self) -> EngineSettingsResponse:
        return self._to_response(self.get_config())

    def update(
        self, data: EngineSettingsUpdate,
    ) -> tuple[EngineSettingsResponse, SettingsChange]:
        """Apply ``data`` and report which settings changed.

        Returns:
            Tuple of (new settings, detected change).
        """
        entry = self._get_or_create()
        previous = self._to_config(entry)

        # Validate the merged result before touching the row.
        updates = data.model_dump(exclude_none=True)
        current = EngineConfig.model_validate({**previous.model_dump(), **updates})

        change = diff_configs(previous, current)
        if not change.is_empty:
            entry.baseline_period_days = int(current.baseline_period_days)
            entry.minimum_days_for_baseline = current.minimum_days_for_baseline
            entry.use_rhr_adjustment = current.use_rhr_adjustment
            entry.use_sleep_adjustment = current.use_sleep_adjustment
            entry.retention_days = current.retention_days
            entry.updated_at = datetime.datetime.now()
            self.repository.save(entry)
            logger.info(
                "Settings updated: %s",
                ", ".join(sorted(c.value for c in change.changes)),
            )

        return self._to_response(current), change

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_create(self) -> EngineSettings:
        entry = self.repository.get()
        if entry is None:
            entry = EngineSettings(
                baseline_period_days=BaselinePeriod.from_days(
                    app_settings.DEFAULT_BASELINE_PERIOD_DAYS,
                ).value,
                minimum_days_for_baseline=app_settings.DEFAULT_MINIMUM_DAYS_FOR_BASELINE,
                use_rhr_adjustment=app_settings.DEFAULT_USE_RHR_ADJUSTMENT,
                use_sleep_adjustment=app_settings.DEFAULT_USE_SLEEP_ADJUSTMENT,
                retention_days=app_settings.DEFAULT_RETENTION_DAYS,
            )
            entry = self.repository.save(entry)
        return entry

    @staticmethod
    def _to_config(entry: EngineSettings) -> EngineConfig:
        return EngineConfig(
            baseline_period_days=BaselinePeriod.from_days(entry.baseline_period_days),
            minimum_days_for_baseline=entry.minimum_days_for_baseline,
            use_rhr_adjustment=entry.use_rhr_adjustment,
            use_sleep_adjustment=entry.use_sleep_adjustment,
            retention_days=entry.retention_days,
        )

    @staticmethod
    def _to_response(config: EngineConfig) -> EngineSettingsResponse:
        return EngineSettingsResponse(
            baseline_period_days=config.baseline_period_days,
            baseline_period_explanation=config.baseline_period_days.explanation,
            suggested_minimum_days_for_baseline=config.baseline_period_days.suggested_minimum_days,
            minimum_days_for_baseline=config.minimum_days_for_baseline,
            use_rhr_adjustment=config.use_rhr_adjustment,
            use_sleep_adjustment=config.use_sleep_adjustment,
            retention_days=config.retention_days,
        )
