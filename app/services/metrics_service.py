"""
Daily metric service.

Business logic for daily metric management: per-day upsert, queries and
bulk historical import.
"""

import datetime
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.metrics import DailyMetricRepository
from app.engine.validation import available_metrics, missing_metrics
from app.models.metrics import DailyMetric
from app.schemas.metrics import (
    DailyMetricCreate,
    DailyMetricImportEntry,
    DailyMetricResponse,
)

logger = logging.getLogger(__name__)


class MetricService:
    """Service for daily metric business logic."""

    def __init__(self, session: Session):
        self.repository = DailyMetricRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def upsert(
        self, date: datetime.date, data: DailyMetricCreate,
    ) -> tuple[DailyMetricResponse, bool]:
        """Create or replace the metrics for the given date.

        Returns:
            Tuple of (response, created) where created is True if new entry.
        """
        created = self.repository.get(date) is None
        entry = self.repository.save(DailyMetric(date=date, **data.model_dump()))
        return self._to_response(entry), created

    def import_entries(
        self, entries: list[DailyMetricImportEntry],
    ) -> tuple[int, int]:
        """Upsert a batch of days, oldest first.

        Returns:
            Tuple of (created, updated) counts.
        """
        created = updated = 0
        for item in sorted(entries, key=lambda e: e.date):
            if self.repository.get(item.date) is None:
                created += 1
            else:
                updated += 1
            self.repository.save(DailyMetric(**item.model_dump()))

        logger.info("Imported %d day(s): %d created, %d updated",
                    created + updated, created, updated)
        return created, updated

    def get_by_date(self, date: datetime.date) -> DailyMetricResponse:
        entry = self.repository.get(date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No metrics for {date}",
            )
        return self._to_response(entry)

    def get_range(
        self, start: datetime.date, end: datetime.date,
    ) -> list[DailyMetricResponse]:
        """Entries between ``start`` and ``end``, both inclusive."""
        entries = self.repository.get_range(
            start, end + datetime.timedelta(days=1),
        )
        return [self._to_response(e) for e in entries]

    def get_all(self, skip: int = 0, limit: int = 100) -> list[DailyMetricResponse]:
        entries = self.repository.get_all(skip, limit)
        return [self._to_response(e) for e in entries]

    def delete_by_date(self, date: datetime.date) -> None:
        if not self.repository.delete(date):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No metrics for {date}",
            )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_response(entry: DailyMetric) -> DailyMetricResponse:
        return DailyMetricResponse(
            id=entry.id,
            date=entry.date,
            hrv=entry.hrv,
            resting_heart_rate=entry.resting_heart_rate,
            sleep_hours=entry.sleep_hours,
            sleep_quality=entry.sleep_quality,
            available_metrics=available_metrics(entry),
            missing_metrics=missing_metrics(entry),
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )
