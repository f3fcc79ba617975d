"""Readiness calculation engine: baselines, scoring, backfill and retention."""

from app.engine.config import DEFAULT_ENGINE_CONFIG, BaselinePeriod, EngineConfig
from app.engine.engine import ReadinessEngine
from app.engine.recalculation import (
    CancellationToken,
    RecalculationResult,
    RecalculationStatus,
)

__all__ = [
    "DEFAULT_ENGINE_CONFIG",
    "BaselinePeriod",
    "CancellationToken",
    "EngineConfig",
    "ReadinessEngine",
    "RecalculationResult",
    "RecalculationStatus",
]
