"""
Readiness score repository.

Handles database operations for ReadinessScore model.  Implements the
engine's ``ScoreStore`` protocol: ``save`` upserts by date, so a score is
overwritten, never appended.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.readiness import ReadinessScore

_VALUE_FIELDS = (
    "score",
    "category",
    "hrv_baseline",
    "hrv_deviation_percent",
    "rhr_baseline",
    "rhr_adjustment",
    "sleep_baseline",
    "sleep_adjustment",
    "baseline_period_days",
    "minimum_days_for_baseline",
    "calculation_timestamp",
)


class ReadinessScoreRepository:
    """Repository for ReadinessScore database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, date: datetime.date) -> Optional[ReadinessScore]:
        statement = select(ReadinessScore).where(ReadinessScore.date == date)
        return self.session.exec(statement).first()

    def get_range(
        self, start: datetime.date, end: datetime.date,
    ) -> list[ReadinessScore]:
        """Get scores with ``start <= date < end``, oldest first."""
        statement = (
            select(ReadinessScore)
            .where(
                ReadinessScore.date >= start,
                ReadinessScore.date < end,
            )
            .order_by(ReadinessScore.date)
        )
        return list(self.session.exec(statement).all())

    def save(self, record: ReadinessScore) -> ReadinessScore:
        """Upsert ``record`` keyed by its date; one commit per call."""
        existing = self.get(record.date)
        if existing is None or existing is record:
            entry = record
        else:
            for field in _VALUE_FIELDS:
                setattr(existing, field, getattr(record, field))
            entry = existing

        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete_older_than(self, cutoff: datetime.date) -> int:
        """Delete scores dated before ``cutoff``; returns the count."""
        statement = select(ReadinessScore).where(ReadinessScore.date < cutoff)
        entries = list(self.session.exec(statement).all())
        for entry in entries:
            self.session.delete(entry)
        self.session.commit()
        return len(entries)
