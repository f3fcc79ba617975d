"""Readiness categories and their descriptions."""

from __future__ import annotations

from enum import Enum


class ReadinessCategory(str, Enum):
    """Interpretation of a readiness score.

    ``UNKNOWN`` is reserved for days without a determinable baseline or with
    an invalid HRV reading; its score is always the 0 sentinel.  The other
    categories come from the HRV deviation band (see
    :func:`app.engine.scorer.band_score`), not from the final score.
    """

    UNKNOWN = "unknown"
    OPTIMAL = "optimal"
    MODERATE = "moderate"
    LOW = "low"
    FATIGUE = "fatigue"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[ReadinessCategory, str] = {
    ReadinessCategory.UNKNOWN: "Not enough data to determine readiness.",
    ReadinessCategory.OPTIMAL: (
        "Your body is well-recovered and ready for high-intensity training."
    ),
    ReadinessCategory.MODERATE: (
        "Your body is moderately recovered. Consider moderate-intensity training."
    ),
    ReadinessCategory.LOW: (
        "Your body shows signs of fatigue. Consider light activity or active recovery."
    ),
    ReadinessCategory.FATIGUE: (
        "Your body needs rest. Focus on recovery and avoid intense training."
    ),
}
