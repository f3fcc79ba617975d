"""
Personal baselines.

A baseline is the arithmetic mean of a metric's valid readings over a
trailing window of ``baseline_period_days`` calendar days that ends just
before a reference day:

    window(D) = [D - period, D)

The reference day's own reading never enters its baseline, so a day's
score cannot be influenced by its own or future data.

Two modes share the same windowed mean:

    current   progressive, used for "today".  Any number of valid readings
              (one is enough) yields a baseline, so feedback appears as
              soon as any history exists.
    as-of     strict, used for historical re-derivation.  Fewer than
              ``minimum_days_for_baseline`` valid readings yields 0
              (undetermined), keeping low-confidence single-sample
              baselines out of the permanent record.

A baseline of 0 always means "undetermined".

Stability
---------
The coefficient of variation (population stddev / mean) of the window's
valid values is reported next to every baseline.  It is diagnostic only
and never gates or alters the baseline value.
"""

from __future__ import annotations

import datetime
import statistics
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.engine.config import EngineConfig
from app.engine.stores import MetricStore
from app.engine.validation import is_valid_hrv, is_valid_rhr, is_valid_sleep
from app.models.metrics import DailyMetric


class Metric(str, Enum):
    HRV = "hrv"
    RHR = "rhr"
    SLEEP = "sleep"


# Metric → (record attribute, validity predicate).
_METRIC_FIELDS = {
    Metric.HRV: ("hrv", is_valid_hrv),
    Metric.RHR: ("resting_heart_rate", is_valid_rhr),
    Metric.SLEEP: ("sleep_hours", is_valid_sleep),
}


class BaselineResult(BaseModel):
    """Baseline of one metric as seen from a reference day."""

    metric: Metric
    value: float = Field(
        ..., ge=0.0,
        description="Mean of valid readings in the window (0 = undetermined)",
    )
    sample_count: int = Field(
        ..., ge=0,
        description="Number of valid readings inside the window",
    )
    window_start: datetime.date = Field(
        ..., description="First day of the window (inclusive)",
    )
    window_end: datetime.date = Field(
        ..., description="Reference day, end of the window (exclusive)",
    )
    stability: Optional[float] = Field(
        None,
        description="Coefficient of variation of the window's valid values",
    )

    @property
    def is_determined(self) -> bool:
        return self.value > 0


# ======================================================================
# Pure helpers
# ======================================================================


def valid_values(records: list[DailyMetric], metric: Metric) -> list[float]:
    """Extract the range-valid readings of ``metric`` from ``records``."""
    attribute, is_valid = _METRIC_FIELDS[metric]
    values: list[float] = []
    for record in records:
        value = getattr(record, attribute)
        if is_valid(value):
            values.append(float(value))
    return values


def windowed_mean(values: list[float], minimum: int = 1) -> float:
    """Mean of ``values``, or 0 when fewer than ``minimum`` are available."""
    if not values or len(values) < minimum:
        return 0.0
    return sum(values) / len(values)


def coefficient_of_variation(values: list[float]) -> Optional[float]:
    """Population stddev divided by mean; ``None`` below two samples."""
    if len(values) < 2:
        return None
    mean = statistics.fmean(values)
    if mean == 0:
        return None
    return round(statistics.pstdev(values) / mean, 4)


def baseline_window(
    reference: datetime.date, period_days: int,
) -> tuple[datetime.date, datetime.date]:
    """``(start, end)`` of the window for ``reference``; ``end`` is exclusive."""
    return reference - datetime.timedelta(days=period_days), reference


# ======================================================================
# Calculator
# ======================================================================


class BaselineCalculator:
    """Computes current-mode and as-of baselines from a metric store."""

    def __init__(self, metric_store: MetricStore, config: EngineConfig):
        self.metric_store = metric_store
        self.config = config

    def current_baseline(
        self, metric: Metric, today: datetime.date,
    ) -> BaselineResult:
        """Progressive baseline for ``today`` (no minimum-days floor)."""
        return self.compute(metric, today, enforce_minimum=False)

    def as_of_baseline(
        self, metric: Metric, as_of: datetime.date,
    ) -> BaselineResult:
        """Strict baseline from data dated before ``as_of`` only."""
        return self.compute(metric, as_of, enforce_minimum=True)

    def compute(
        self,
        metric: Metric,
        reference: datetime.date,
        enforce_minimum: bool,
    ) -> BaselineResult:
        """Windowed mean of ``metric`` ending just before ``reference``.

        Args:
            metric: Which metric to average.
            reference: Day the baseline is for.  Its own reading is excluded.
            enforce_minimum: Apply ``minimum_days_for_baseline`` as a floor.

        Returns:
            :class:`BaselineResult`; ``value`` is 0 when undetermined.
        """
        start, end = baseline_window(
            reference, int(self.config.baseline_period_days),
        )
        records = [
            r for r in self.metric_store.get_range(start, end)
            if start <= r.date < end
        ]
        values = valid_values(records, metric)

        minimum = self.config.minimum_days_for_baseline if enforce_minimum else 1

        return BaselineResult(
            metric=metric,
            value=windowed_mean(values, minimum),
            sample_count=len(values),
            window_start=start,
            window_end=end,
            stability=coefficient_of_variation(values),
        )
