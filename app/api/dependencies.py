"""
Shared API dependencies.

Reusable FastAPI dependencies for services and background work.
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_db
from app.services.metrics_service import MetricService
from app.services.readiness_service import ReadinessService
from app.services.recalculation_runner import (
    RecalculationRunner,
    get_recalculation_runner,
)
from app.services.settings_service import SettingsService


def get_metric_service(db: Session = Depends(get_db)) -> MetricService:
    return MetricService(db)


def get_readiness_service(db: Session = Depends(get_db)) -> ReadinessService:
    return ReadinessService(db)


def get_settings_service(db: Session = Depends(get_db)) -> SettingsService:
    return SettingsService(db)


def get_runner() -> RecalculationRunner:
    """The process-wide recalculation runner."""
    return get_recalculation_runner()
