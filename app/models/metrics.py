"""
Daily metric database model.

Defines the daily_metrics table holding one physiological reading set per
calendar day.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class DailyMetric(SQLModel, table=True):
    """
    Daily physiological metrics.

    Stores HRV, resting heart rate and sleep duration for one calendar day.
    One entry per day (enforced by the unique index on ``date``).  Readings
    outside their valid range are stored as-is; the engine decides whether
    they are usable.
    """
    __tablename__ = "daily_metrics"

    id: Optional[int] = Field(default=None, primary_key=True)
    date: datetime.date = Field(nullable=False, unique=True, index=True)

    # HRV (ms)
    hrv: Optional[float] = Field(default=None)

    # Resting heart rate (bpm)
    resting_heart_rate: Optional[float] = Field(default=None)

    # Sleep
    sleep_hours: Optional[float] = Field(default=None)
    sleep_quality: Optional[int] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.now)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.now)
