"""
In-memory stores and a fixed clock for engine tests.

Both stores satisfy the engine's store protocols: ``get_range`` includes
``start``, excludes ``end`` and returns records oldest first.
"""

import datetime
from typing import Optional

from app.models.metrics import DailyMetric

TODAY = datetime.date(2026, 3, 1)
NOW = datetime.datetime(2026, 3, 1, 8, 0, 0)


def fixed_clock() -> datetime.datetime:
    return NOW


def days_ago(n: int) -> datetime.date:
    return TODAY - datetime.timedelta(days=n)


class InMemoryStore:
    """Date-keyed dictionary store; ``save`` overwrites by date."""

    def __init__(self):
        self.records: dict = {}

    def get(self, date: datetime.date):
        return self.records.get(date)

    def get_range(self, start: datetime.date, end: datetime.date) -> list:
        return [self.records[d] for d in sorted(self.records) if start <= d < end]

    def save(self, record):
        self.records[record.date] = record
        return record

    def delete_older_than(self, cutoff: datetime.date) -> int:
        old = [d for d in self.records if d < cutoff]
        for d in old:
            del self.records[d]
        return len(old)


class InMemoryMetricStore(InMemoryStore):
    def add(
        self,
        date: datetime.date,
        hrv: Optional[float] = None,
        rhr: Optional[float] = None,
        sleep: Optional[float] = None,
    ) -> DailyMetric:
        return self.save(DailyMetric(
            date=date, hrv=hrv, resting_heart_rate=rhr, sleep_hours=sleep,
        ))


class InMemoryScoreStore(InMemoryStore):
    pass
