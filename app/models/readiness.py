"""
Readiness score database model.

Defines the readiness_scores table.  Rows are owned by the readiness engine
and overwritten whenever the score for a day is recomputed.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class ReadinessScore(SQLModel, table=True):
    """
    Daily readiness score.

    ``score == 0``, ``category == "unknown"`` and ``hrv_baseline == 0`` always
    occur together: they mark a day whose readiness could not be determined.
    """
    __tablename__ = "readiness_scores"

    id: Optional[int] = Field(default=None, primary_key=True)
    date: datetime.date = Field(nullable=False, unique=True, index=True)

    score: float = Field(default=0.0)
    category: str = Field(default="unknown", max_length=16)

    # HRV
    hrv_baseline: float = Field(default=0.0)
    hrv_deviation_percent: float = Field(default=0.0)

    # Adjustments
    rhr_baseline: float = Field(default=0.0)
    rhr_adjustment: float = Field(default=0.0)
    sleep_baseline: float = Field(default=0.0)
    sleep_adjustment: float = Field(default=0.0)

    # Configuration used for the calculation
    baseline_period_days: int = Field(default=7)
    minimum_days_for_baseline: int = Field(default=2)

    calculation_timestamp: datetime.datetime = Field(
        default_factory=datetime.datetime.now,
    )
