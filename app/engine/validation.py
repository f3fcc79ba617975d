"""
Metric validation.

Range predicates deciding whether a single day's reading is usable for
baseline computation.  A reading outside its range is still stored, it
just never enters a baseline mean.

Ranges
------
    HRV:                 10 ≤ hrv ≤ 200      (ms)
    Resting heart rate:  30 ≤ rhr ≤ 120      (bpm)
    Sleep duration:       0 < sleep ≤ 12     (hours)

Only the current-day HRV is range-gated when scoring.  Current-day RHR
and sleep are compared raw against their thresholds.
"""

from __future__ import annotations

from typing import Optional

from app.models.metrics import DailyMetric

HRV_MIN_MS = 10.0
HRV_MAX_MS = 200.0
RHR_MIN_BPM = 30.0
RHR_MAX_BPM = 120.0
SLEEP_MAX_HOURS = 12.0

METRIC_LABELS: dict[str, str] = {
    "hrv": "HRV",
    "resting_heart_rate": "Resting Heart Rate",
    "sleep_hours": "Sleep Data",
}


def is_valid_hrv(value: Optional[float]) -> bool:
    return value is not None and HRV_MIN_MS <= value <= HRV_MAX_MS


def is_valid_rhr(value: Optional[float]) -> bool:
    return value is not None and RHR_MIN_BPM <= value <= RHR_MAX_BPM


def is_valid_sleep(value: Optional[float]) -> bool:
    return value is not None and 0.0 < value <= SLEEP_MAX_HOURS


_VALIDATORS = {
    "hrv": is_valid_hrv,
    "resting_heart_rate": is_valid_rhr,
    "sleep_hours": is_valid_sleep,
}


def available_metrics(record: DailyMetric) -> list[str]:
    """Labels of the metrics of ``record`` that pass range validation."""
    return [
        METRIC_LABELS[field]
        for field, check in _VALIDATORS.items()
        if check(getattr(record, field))
    ]


def missing_metrics(record: DailyMetric) -> list[str]:
    """Labels of the metrics of ``record`` that are absent or out of range."""
    return [
        METRIC_LABELS[field]
        for field, check in _VALIDATORS.items()
        if not check(getattr(record, field))
    ]
