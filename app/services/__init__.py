"""Business logic services."""

from app.services.metrics_service import MetricService
from app.services.readiness_service import ReadinessService
from app.services.recalculation_runner import RecalculationRunner
from app.services.settings_service import SettingsService

__all__ = [
    "MetricService",
    "ReadinessService",
    "RecalculationRunner",
    "SettingsService",
]
