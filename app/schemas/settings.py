"""
Engine settings API schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.engine.config import BaselinePeriod, SettingChange


class EngineSettingsResponse(BaseModel):
    """Current readiness configuration."""

    baseline_period_days: BaselinePeriod
    baseline_period_explanation: str = ""
    suggested_minimum_days_for_baseline: int = Field(
        0, description="Minimum days suggested for the selected baseline period",
    )
    minimum_days_for_baseline: int
    use_rhr_adjustment: bool
    use_sleep_adjustment: bool
    retention_days: int


class EngineSettingsUpdate(BaseModel):
    """Schema for updating the configuration (all fields optional)."""

    baseline_period_days: Optional[BaselinePeriod] = Field(
        None, description="Baseline window: 7, 14 or 30 days",
    )
    minimum_days_for_baseline: Optional[int] = Field(
        None, ge=1, le=30,
        description="Valid prior days required for a historical baseline",
    )
    use_rhr_adjustment: Optional[bool] = None
    use_sleep_adjustment: Optional[bool] = None
    retention_days: Optional[int] = Field(
        None, ge=30, le=3650,
        description="Days of history to keep",
    )


class EngineSettingsUpdateResponse(BaseModel):
    settings: EngineSettingsResponse
    changes: list[SettingChange] = Field(default_factory=list)
    requires_historical_recalculation: bool = False
    recalculation_scheduled: bool = False
