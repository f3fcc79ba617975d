"""Database repositories."""

from app.db.repositories.metrics import DailyMetricRepository
from app.db.repositories.readiness import ReadinessScoreRepository
from app.db.repositories.settings import EngineSettingsRepository

__all__ = [
    "DailyMetricRepository",
    "ReadinessScoreRepository",
    "EngineSettingsRepository",
]
