"""
Daily metric repository.

Handles database operations for DailyMetric model.  Implements the
engine's ``MetricStore`` protocol.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.metrics import DailyMetric

_VALUE_FIELDS = ("hrv", "resting_heart_rate", "sleep_hours", "sleep_quality")


class DailyMetricRepository:
    """Repository for DailyMetric database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, date: datetime.date) -> Optional[DailyMetric]:
        """Get the entry for a calendar day."""
        statement = select(DailyMetric).where(DailyMetric.date == date)
        return self.session.exec(statement).first()

    def get_range(
        self, start: datetime.date, end: datetime.date,
    ) -> list[DailyMetric]:
        """Get entries with ``start <= date < end``, oldest first."""
        statement = (
            select(DailyMetric)
            .where(
                DailyMetric.date >= start,
                DailyMetric.date < end,
            )
            .order_by(DailyMetric.date)
        )
        return list(self.session.exec(statement).all())

    def get_all(self, skip: int = 0, limit: int = 100) -> list[DailyMetric]:
        """Get all entries with pagination, most recent first."""
        statement = (
            select(DailyMetric)
            .order_by(DailyMetric.date.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def save(self, record: DailyMetric) -> DailyMetric:
        """Insert ``record`` or overwrite the stored entry for its date."""
        existing = self.get(record.date)
        if existing is None or existing is record:
            entry = record
        else:
            for field in _VALUE_FIELDS:
                setattr(existing, field, getattr(record, field))
            existing.updated_at = datetime.datetime.now()
            entry = existing

        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, date: datetime.date) -> bool:
        entry = self.get(date)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False

    def delete_older_than(self, cutoff: datetime.date) -> int:
        """Delete entries dated before ``cutoff``; returns the count."""
        statement = select(DailyMetric).where(DailyMetric.date < cutoff)
        entries = list(self.session.exec(statement).all())
        for entry in entries:
            self.session.delete(entry)
        self.session.commit()
        return len(entries)
