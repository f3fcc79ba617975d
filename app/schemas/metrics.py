"""
Daily metric API schemas.

Pydantic models for daily metric request/response validation.  Request
bounds are loose physical limits: a reading outside the engine's valid
range (e.g. HRV 250 ms) is accepted and stored, it is simply excluded from
baselines.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


# Shared properties
class DailyMetricBase(BaseModel):
    """Base daily metric schema with common fields."""

    hrv: Optional[float] = Field(
        None, ge=0.0, le=1000.0,
        description="Heart rate variability (ms)",
    )
    resting_heart_rate: Optional[float] = Field(
        None, ge=0.0, le=300.0,
        description="Resting heart rate (bpm)",
    )
    sleep_hours: Optional[float] = Field(
        None, ge=0.0, le=24.0,
        description="Total sleep duration (hours)",
    )
    sleep_quality: Optional[int] = Field(
        None, ge=0, le=100,
        description="Subjective or device sleep quality (0-100)",
    )


# Request schemas
class DailyMetricCreate(DailyMetricBase):
    """Schema for creating or replacing the metrics of a day."""
    pass


class DailyMetricImportEntry(DailyMetricBase):
    """One day of a bulk import."""

    date: datetime.date = Field(
        ...,
        description="Calendar date this entry belongs to (YYYY-MM-DD)",
    )


class DailyMetricImport(BaseModel):
    """Bulk import of historical daily metrics."""

    entries: list[DailyMetricImportEntry] = Field(
        ..., min_length=1,
        description="Days to import; later entries win on duplicate dates",
    )
    recalculate: bool = Field(
        True,
        description="Schedule a historical recalculation after the import",
    )


# Response schemas
class DailyMetricResponse(DailyMetricBase):
    """Schema for daily metric data in API responses."""

    id: int
    date: datetime.date
    available_metrics: list[str] = Field(
        default_factory=list,
        description="Metrics within their valid range",
    )
    missing_metrics: list[str] = Field(
        default_factory=list,
        description="Metrics absent or outside their valid range",
    )
    created_at: datetime.datetime
    updated_at: datetime.datetime


class DailyMetricImportResponse(BaseModel):
    created: int
    updated: int
    metrics_purged: int
    scores_purged: int
    recalculation_scheduled: bool
