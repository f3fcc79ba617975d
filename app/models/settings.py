"""
Engine settings database model.

Single-row table persisting the user's readiness configuration.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class EngineSettings(SQLModel, table=True):
    """Persisted readiness engine configuration (a single row, id 1)."""
    __tablename__ = "engine_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    baseline_period_days: int = Field(default=7, nullable=False)
    minimum_days_for_baseline: int = Field(default=2, nullable=False)
    use_rhr_adjustment: bool = Field(default=False, nullable=False)
    use_sleep_adjustment: bool = Field(default=False, nullable=False)
    retention_days: int = Field(default=365, nullable=False)

    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.now)
