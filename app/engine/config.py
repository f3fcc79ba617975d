"""
Engine configuration.

:class:`EngineConfig` is an immutable snapshot handed to every engine call.
The engine never reads settings from global state: callers resolve the
snapshot once (see :mod:`app.services.settings_service`) and pass it in, so a
recalculation run is reproducible in isolation.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


class BaselinePeriod(IntEnum):
    """Length of the trailing baseline window, in days."""

    SEVEN_DAYS = 7
    FOURTEEN_DAYS = 14
    THIRTY_DAYS = 30

    @property
    def description(self) -> str:
        return f"{self.value} days"

    @property
    def explanation(self) -> str:
        return _PERIOD_EXPLANATIONS[self]

    @property
    def suggested_minimum_days(self) -> int:
        """Minimum valid days suggested for a trustworthy baseline."""
        return _PERIOD_SUGGESTED_MINIMUM[self]

    @classmethod
    def from_days(cls, days: int) -> "BaselinePeriod":
        """Coerce any integer to a period, falling back to seven days."""
        try:
            return cls(days)
        except ValueError:
            return cls.SEVEN_DAYS


_PERIOD_EXPLANATIONS = {
    BaselinePeriod.SEVEN_DAYS: (
        "Uses the last 7 days of data to establish your baseline. "
        "Responds quickly to recent changes."
    ),
    BaselinePeriod.FOURTEEN_DAYS: (
        "Uses the last 14 days of data to establish your baseline. "
        "More stable, slower to respond to changes."
    ),
    BaselinePeriod.THIRTY_DAYS: (
        "Uses the last 30 days of data to establish your baseline. "
        "Most stable, slowest to adapt to changes in fitness."
    ),
}

_PERIOD_SUGGESTED_MINIMUM = {
    BaselinePeriod.SEVEN_DAYS: 3,
    BaselinePeriod.FOURTEEN_DAYS: 5,
    BaselinePeriod.THIRTY_DAYS: 7,
}


class EngineConfig(BaseModel):
    """Configuration snapshot read by the readiness engine."""

    model_config = ConfigDict(frozen=True)

    baseline_period_days: BaselinePeriod = Field(
        default=BaselinePeriod.SEVEN_DAYS,
        description="Trailing baseline window length (7, 14 or 30 days)",
    )
    minimum_days_for_baseline: int = Field(
        default=2, ge=1,
        description="Valid prior days required by the as-of baseline",
    )
    use_rhr_adjustment: bool = Field(
        default=False,
        description="Penalise days with resting heart rate above baseline",
    )
    use_sleep_adjustment: bool = Field(
        default=False,
        description="Penalise days with short sleep",
    )
    retention_days: int = Field(
        default=365, ge=1,
        description="Days of history kept before automatic deletion",
    )


DEFAULT_ENGINE_CONFIG = EngineConfig()


# ======================================================================
# Change detection
# ======================================================================


class SettingChange(str, Enum):
    BASELINE_PERIOD = "baseline_period"
    MINIMUM_DAYS = "minimum_days"
    RHR_ADJUSTMENT = "rhr_adjustment"
    SLEEP_ADJUSTMENT = "sleep_adjustment"
    RETENTION = "retention"


_FIELD_CHANGES: dict[str, SettingChange] = {
    "baseline_period_days": SettingChange.BASELINE_PERIOD,
    "minimum_days_for_baseline": SettingChange.MINIMUM_DAYS,
    "use_rhr_adjustment": SettingChange.RHR_ADJUSTMENT,
    "use_sleep_adjustment": SettingChange.SLEEP_ADJUSTMENT,
    "retention_days": SettingChange.RETENTION,
}

# Changes that alter the metric → score mapping of every past day.
_HISTORICAL_CHANGES = frozenset({
    SettingChange.BASELINE_PERIOD,
    SettingChange.MINIMUM_DAYS,
    SettingChange.RHR_ADJUSTMENT,
    SettingChange.SLEEP_ADJUSTMENT,
})


class SettingsChange(BaseModel):
    """Difference between two configuration snapshots."""

    previous: EngineConfig
    current: EngineConfig
    changes: frozenset[SettingChange] = Field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.changes

    @property
    def requires_historical_recalculation(self) -> bool:
        return bool(self.changes & _HISTORICAL_CHANGES)


def diff_configs(previous: EngineConfig, current: EngineConfig) -> SettingsChange:
    """Compute which settings differ between ``previous`` and ``current``."""
    changes = frozenset(
        change
        for field, change in _FIELD_CHANGES.items()
        if getattr(previous, field) != getattr(current, field)
    )
    return SettingsChange(previous=previous, current=current, changes=changes)
