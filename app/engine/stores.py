"""
Store protocols consumed by the readiness engine.

The engine never talks to a database directly.  Anything that satisfies
these protocols can back it: the SQLModel repositories in
:mod:`app.db.repositories` in production, plain dictionaries in tests.

Range convention: ``get_range(start, end)`` includes ``start``, excludes
``end`` and returns records ordered by date.  ``delete_older_than(cutoff)``
removes records dated strictly before ``cutoff`` and returns how many were
removed.
"""

from __future__ import annotations

import datetime
from typing import Callable, Optional, Protocol

from app.engine.config import EngineConfig
from app.models.metrics import DailyMetric
from app.models.readiness import ReadinessScore


class MetricStore(Protocol):
    def get(self, date: datetime.date) -> Optional[DailyMetric]: ...

    def get_range(
        self, start: datetime.date, end: datetime.date,
    ) -> list[DailyMetric]: ...

    def save(self, record: DailyMetric) -> DailyMetric: ...

    def delete_older_than(self, cutoff: datetime.date) -> int: ...


class ScoreStore(Protocol):
    def get(self, date: datetime.date) -> Optional[ReadinessScore]: ...

    def get_range(
        self, start: datetime.date, end: datetime.date,
    ) -> list[ReadinessScore]: ...

    def save(self, record: ReadinessScore) -> ReadinessScore: ...

    def delete_older_than(self, cutoff: datetime.date) -> int: ...


# Returns a fresh configuration snapshot; called once per calculation.
ConfigProvider = Callable[[], EngineConfig]

# Naive local time.  Metric days are local calendar days, so "today" and
# every stored timestamp share this basis.
Clock = Callable[[], datetime.datetime]
