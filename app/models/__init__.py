"""SQLModel database models."""

from app.models.metrics import DailyMetric
from app.models.readiness import ReadinessScore
from app.models.settings import EngineSettings

__all__ = [
    "DailyMetric",
    "ReadinessScore",
    "EngineSettings",
]
