"""Pydantic schemas for request/response validation."""

from app.schemas.metrics import (
    DailyMetricCreate,
    DailyMetricImport,
    DailyMetricImportEntry,
    DailyMetricImportResponse,
    DailyMetricResponse,
)
from app.schemas.readiness import (
    BaselineResponse,
    BaselinesResponse,
    PurgeResponse,
    ReadinessScoreResponse,
    RecalculationRequest,
    RecalculationStatusResponse,
)
from app.schemas.settings import (
    EngineSettingsResponse,
    EngineSettingsUpdate,
    EngineSettingsUpdateResponse,
)

__all__ = [
    "DailyMetricCreate",
    "DailyMetricImport",
    "DailyMetricImportEntry",
    "DailyMetricImportResponse",
    "DailyMetricResponse",
    "BaselineResponse",
    "BaselinesResponse",
    "PurgeResponse",
    "ReadinessScoreResponse",
    "RecalculationRequest",
    "RecalculationStatusResponse",
    "EngineSettingsResponse",
    "EngineSettingsUpdate",
    "EngineSettingsUpdateResponse",
]
