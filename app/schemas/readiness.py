"""
Readiness score schemas.

A readiness score compares a day's HRV to the personal baseline of the
preceding ``baseline_period_days`` days and maps the deviation onto a
0-100 scale:

    fatigue     0 - 29    HRV more than 10% below baseline
    low        30 - 49    7-10% below
    moderate   50 - 79    3-7% below
    optimal    80 - 100   within ±3%, or above baseline

A score of 0 with category ``unknown`` means readiness could not be
determined (no baseline yet, or an invalid HRV reading).
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.engine.baseline import Metric
from app.engine.categories import ReadinessCategory
from app.engine.recalculation import RecalculationStatus


class ReadinessScoreResponse(BaseModel):
    """Readiness score for one day."""

    date: datetime.date
    score: float = Field(
        ..., ge=0.0, le=100.0,
        description="Readiness 0-100 (0 = undetermined)",
    )
    category: ReadinessCategory
    description: str = Field(
        "", description="Human-readable interpretation of the category",
    )
    hrv_baseline: float = Field(
        ..., description="HRV baseline used (ms, 0 = undetermined)",
    )
    hrv_deviation_percent: float = Field(
        ..., description="HRV deviation from baseline (%)",
    )
    rhr_baseline: float = Field(0.0, description="RHR baseline used (bpm)")
    rhr_adjustment: float = Field(..., description="RHR penalty applied")
    sleep_baseline: float = Field(0.0, description="Sleep baseline (hours)")
    sleep_adjustment: float = Field(..., description="Sleep penalty applied")
    baseline_period_days: int
    minimum_days_for_baseline: int
    calculation_timestamp: datetime.datetime

    class Config:
        from_attributes = True


class BaselineResponse(BaseModel):
    """Current-mode baseline of one metric."""

    metric: Metric
    value: float = Field(..., description="Baseline (0 = undetermined)")
    sample_count: int = Field(..., description="Valid readings in the window")
    window_start: datetime.date
    window_end: datetime.date = Field(
        ..., description="Reference day (exclusive end of the window)",
    )
    stability: Optional[float] = Field(
        None,
        description="Coefficient of variation (lower = more stable)",
    )


class BaselinesResponse(BaseModel):
    """Current-mode baselines of all metrics."""

    as_of: datetime.date
    baseline_period_days: int
    hrv: BaselineResponse
    rhr: BaselineResponse
    sleep: BaselineResponse


class RecalculationRequest(BaseModel):
    limit_days: Optional[int] = Field(
        None, ge=1, le=3650,
        description="How many days back to recalculate (defaults to the configured limit)",
    )
    resume_from: Optional[datetime.date] = Field(
        None,
        description="Skip days before this one, to resume a partial run",
    )


class RecalculationStatusResponse(BaseModel):
    """Progress and outcome of the latest recalculation run."""

    status: RecalculationStatus
    completed: int = 0
    total: int = 0
    current_date: Optional[datetime.date] = None
    resume_from: Optional[datetime.date] = None
    error: Optional[str] = None
    started_at: Optional[datetime.datetime] = None
    finished_at: Optional[datetime.datetime] = None


class PurgeResponse(BaseModel):
    cutoff: datetime.date = Field(
        ..., description="Oldest day retained; older records were deleted",
    )
    metrics_deleted: int
    scores_deleted: int
