"""
Readiness scoring.

Maps today's HRV, relative to the personal baseline, onto a 0-100 score
and a category, then applies optional flat penalties for elevated resting
heart rate and short sleep.

Model
-----
The HRV deviation from baseline, in percent:

    deviation = (hrv - baseline) × 100 / baseline

falls into one of six bands.  Inside a band the score is a linear
interpolation of the deviation's position onto the band's score range:

    deviation            category    score
    < -10%               fatigue      0 - 29   (29 at -10%, floor at -30%)
    [-10%, -7%)          low         30 - 49
    [-7%, -3%)           moderate    50 - 79
    [-3%, +3%]           optimal     80 - 100  (100 at 0%)
    (+3%, +10%]          optimal     80 - 90   (elevated)
    > +10%               optimal     90 - 100  (supercompensation, 100 at +20%)

Adjustments
-----------
Both penalties are flat and only applied when enabled:

    RHR:    rhr > rhr_baseline + 5 bpm   →  -10
    sleep:  sleep < 6 h                  →  -15

A missing (None or 0) current RHR or sleep reading is skipped, not
penalised.  Adjustments move the score but never the category, which is
always the HRV band's.

The 0 score is reserved for "undetermined" (no baseline or invalid HRV), so
determined scores are clamped to [1, 100].
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.engine.categories import ReadinessCategory
from app.engine.config import EngineConfig
from app.engine.validation import is_valid_hrv
from app.models.readiness import ReadinessScore

# ======================================================================
# Configuration
# ======================================================================

RHR_ELEVATION_THRESHOLD_BPM = 5.0
RHR_PENALTY = -10.0
SLEEP_THRESHOLD_HOURS = 6.0
SLEEP_PENALTY = -15.0

# Deviation (%) at which the open-ended bands reach their extreme score.
_FATIGUE_FLOOR_DEVIATION = -30.0
_SUPERCOMPENSATION_PEAK_DEVIATION = 20.0

MIN_DETERMINED_SCORE = 1.0
MAX_SCORE = 100.0

# Deviations are normalised to this many decimals before banding, so that
# float noise never pushes a value across a band edge.
_DEVIATION_DECIMALS = 6


class ScoreResult(BaseModel):
    """Outcome of scoring a single day."""

    score: float = Field(
        ..., ge=0.0, le=100.0,
        description="Final readiness score (0 = undetermined)",
    )
    category: ReadinessCategory
    deviation_percent: float = Field(
        ..., description="HRV deviation from baseline (%)",
    )
    band_score: float = Field(
        ..., ge=0.0, le=100.0,
        description="Score from the HRV band alone, before adjustments",
    )
    rhr_adjustment: float = Field(0.0, le=0.0)
    sleep_adjustment: float = Field(0.0, le=0.0)

    @property
    def is_determined(self) -> bool:
        return self.category != ReadinessCategory.UNKNOWN


UNDETERMINED = ScoreResult(
    score=0.0,
    category=ReadinessCategory.UNKNOWN,
    deviation_percent=0.0,
    band_score=0.0,
    rhr_adjustment=0.0,
    sleep_adjustment=0.0,
)


# ======================================================================
# Band mapping
# ======================================================================


def _interpolate(
    value: float,
    low: float,
    high: float,
    score_at_low: float,
    score_at_high: float,
) -> float:
    """Linear map of ``value`` from ``[low, high]`` onto the score range."""
    position = (value - low) / (high - low)
    position = max(0.0, min(1.0, position))
    return score_at_low + position * (score_at_high - score_at_low)


def deviation_percent(hrv: float, baseline: float) -> float:
    return round((hrv - baseline) * 100.0 / baseline, _DEVIATION_DECIMALS)


def band_score(deviation: float) -> tuple[float, ReadinessCategory]:
    """Map an HRV deviation (%) to ``(score, category)`` before adjustments."""
    if deviation < -10.0:
        score = _interpolate(deviation, _FATIGUE_FLOOR_DEVIATION, -10.0, 0.0, 29.0)
        category = ReadinessCategory.FATIGUE
    elif deviation < -7.0:
        score = _interpolate(deviation, -10.0, -7.0, 30.0, 49.0)
        category = ReadinessCategory.LOW
    elif deviation < -3.0:
        score = _interpolate(deviation, -7.0, -3.0, 50.0, 79.0)
        category = ReadinessCategory.MODERATE
    elif deviation <= 3.0:
        # Peak at 0%, falling to 80 at either edge of the core band.
        score = _interpolate(abs(deviation), 0.0, 3.0, 100.0, 80.0)
        category = ReadinessCategory.OPTIMAL
    elif deviation <= 10.0:
        score = _interpolate(deviation, 3.0, 10.0, 80.0, 90.0)
        category = ReadinessCategory.OPTIMAL
    else:
        score = _interpolate(
            deviation, 10.0, _SUPERCOMPENSATION_PEAK_DEVIATION, 90.0, 100.0,
        )
        category = ReadinessCategory.OPTIMAL

    return max(0.0, min(MAX_SCORE, score)), category


# ======================================================================
# Adjustments
# ======================================================================


def rhr_adjustment(
    rhr: Optional[float], rhr_baseline: float, enabled: bool,
) -> float:
    """Flat penalty when the current RHR sits over 5 bpm above baseline."""
    if not enabled or not rhr or rhr_baseline <= 0:
        return 0.0
    if rhr > rhr_baseline + RHR_ELEVATION_THRESHOLD_BPM:
        return RHR_PENALTY
    return 0.0


def sleep_adjustment(sleep_hours: Optional[float], enabled: bool) -> float:
    """Flat penalty for less than six hours of sleep."""
    if not enabled or not sleep_hours or sleep_hours <= 0:
        return 0.0
    if sleep_hours < SLEEP_THRESHOLD_HOURS:
        return SLEEP_PENALTY
    return 0.0


# ======================================================================
# Main entry points
# ======================================================================


def score_readiness(
    hrv: Optional[float],
    rhr: Optional[float],
    sleep_hours: Optional[float],
    hrv_baseline: float,
    rhr_baseline: float,
    config: EngineConfig,
) -> ScoreResult:
    """Score one day.

    Args:
        hrv: The day's HRV reading (ms).
        rhr: The day's resting heart rate (bpm), raw.
        sleep_hours: The day's sleep duration (hours), raw.
        hrv_baseline: HRV baseline for the day (0 = undetermined).
        rhr_baseline: RHR baseline for the day (0 = undetermined).
        config: Adjustment toggles.

    Returns:
        :class:`ScoreResult`; :data:`UNDETERMINED` when the baseline is 0 or
        the HRV reading is out of range.
    """
    if hrv_baseline <= 0 or not is_valid_hrv(hrv):
        return UNDETERMINED

    deviation = deviation_percent(hrv, hrv_baseline)
    base, category = band_score(deviation)

    rhr_adj = rhr_adjustment(rhr, rhr_baseline, config.use_rhr_adjustment)
    sleep_adj = sleep_adjustment(sleep_hours, config.use_sleep_adjustment)

    final = max(MIN_DETERMINED_SCORE, min(MAX_SCORE, base + rhr_adj + sleep_adj))

    return ScoreResult(
        score=round(final, 1),
        category=category,
        deviation_percent=round(deviation, 2),
        band_score=round(base, 1),
        rhr_adjustment=rhr_adj,
        sleep_adjustment=sleep_adj,
    )


def build_score_record(
    date: datetime.date,
    result: ScoreResult,
    hrv_baseline: float,
    rhr_baseline: float,
    sleep_baseline: float,
    config: EngineConfig,
    timestamp: datetime.datetime,
) -> ReadinessScore:
    """Assemble the persisted record for ``date`` from a scoring result."""
    determined = result.is_determined
    return ReadinessScore(
        date=date,
        score=result.score,
        category=result.category.value,
        hrv_baseline=round(hrv_baseline, 3) if determined else 0.0,
        hrv_deviation_percent=result.deviation_percent,
        rhr_baseline=round(rhr_baseline, 3),
        rhr_adjustment=result.rhr_adjustment,
        sleep_baseline=round(sleep_baseline, 3),
        sleep_adjustment=result.sleep_adjustment,
        baseline_period_days=int(config.baseline_period_days),
        minimum_days_for_baseline=config.minimum_days_for_baseline,
        calculation_timestamp=timestamp,
    )
