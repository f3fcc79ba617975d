"""
Readiness service.

Wires the readiness engine to the database: today's score, score history,
baseline diagnostics and retention.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.metrics import DailyMetricRepository
from app.db.repositories.readiness import ReadinessScoreRepository
from app.engine.baseline import BaselineResult, Metric
from app.engine.categories import ReadinessCategory
from app.engine.engine import ReadinessEngine
from app.engine.retention import PurgeResult
from app.engine.stores import Clock
from app.models.readiness import ReadinessScore
from app.schemas.readiness import (
    BaselineResponse,
    BaselinesResponse,
    PurgeResponse,
    ReadinessScoreResponse,
)
from app.services.settings_service import SettingsService


def build_engine(session: Session, clock: Optional[Clock] = None) -> ReadinessEngine:
    """Readiness engine backed by the repositories of ``session``."""
    return ReadinessEngine(
        metric_store=DailyMetricRepository(session),
        score_store=ReadinessScoreRepository(session),
        config_provider=SettingsService(session).get_config,
        clock=clock,
    )


class ReadinessService:
    """Service for readiness score business logic."""

    def __init__(self, session: Session, clock: Optional[Clock] = None):
        self.engine = build_engine(session, clock)
        self.scores = ReadinessScoreRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compute_today(self) -> ReadinessScoreResponse:
        """Score today with progressive baselines and store the result."""
        record = self.engine.compute_today_score()
        record = self.scores.save(record)
        return self._to_response(record)

    def get_by_date(self, date: datetime.date) -> ReadinessScoreResponse:
        record = self.scores.get(date)
        if not record:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No readiness score for {date}",
            )
        return self._to_response(record)

    def get_range(
        self, start: datetime.date, end: datetime.date,
    ) -> list[ReadinessScoreResponse]:
        """Scores between ``start`` and ``end``, both inclusive."""
        records = self.scores.get_range(start, end + datetime.timedelta(days=1))
        return [self._to_response(r) for r in records]

    def get_recent(self, days: int = 30) -> list[ReadinessScoreResponse]:
        today = self.engine.today()
        return self.get_range(today - datetime.timedelta(days=days - 1), today)

    def get_baselines(self) -> BaselinesResponse:
        today = self.engine.today()
        baselines = self.engine.current_baselines(today)
        hrv = baselines[Metric.HRV]
        return BaselinesResponse(
            as_of=today,
            baseline_period_days=(hrv.window_end - hrv.window_start).days,
            hrv=self._baseline_response(hrv),
            rhr=self._baseline_response(baselines[Metric.RHR]),
            sleep=self._baseline_response(baselines[Metric.SLEEP]),
        )

    def purge(self, retention_days: Optional[int] = None) -> PurgeResponse:
        result: PurgeResult = self.engine.purge_older_than(retention_days)
        return PurgeResponse(
            cutoff=result.cutoff,
            metrics_deleted=result.metrics_deleted,
            scores_deleted=result.scores_deleted,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _baseline_response(result: BaselineResult) -> BaselineResponse:
        return BaselineResponse(**result.model_dump())

    @staticmethod
    def _to_response(record: ReadinessScore) -> ReadinessScoreResponse:
        response = ReadinessScoreResponse.model_validate(record)
        category = ReadinessCategory(record.category)
        return response.model_copy(update={"description": category.description})
