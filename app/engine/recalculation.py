"""
Historical recalculation.

Re-derives the score of every day that has metrics in a date range, walking
the range oldest → newest.  Each day is scored against its *as-of* baseline
(data strictly before that day, minimum-days floor enforced), so a backfilled
history is exactly what would have been computed on each day with the
current configuration.

State machine
-------------
    IDLE → RUNNING → COMPLETED | CANCELLED | FAILED

Cancellation is cooperative: the token is checked once before each day.
Every per-day write is independent: nothing is rolled back on cancellation
or failure, and the result carries the first unprocessed day so a later run
can resume from it.
"""

from __future__ import annotations

import datetime
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from app.engine.baseline import BaselineCalculator, Metric
from app.engine.config import EngineConfig
from app.engine.scorer import build_score_record, score_readiness
from app.engine.stores import Clock, MetricStore, ScoreStore
from app.models.metrics import DailyMetric
from app.models.readiness import ReadinessScore

logger = logging.getLogger(__name__)

# on_progress(completed, total, date); ``completed`` counts scored days, from 1.
ProgressCallback = Callable[[int, int, datetime.date], None]


class RecalculationStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class CancellationToken:
    """Cooperative cancellation flag, safe to set from another thread."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()


@dataclass
class RecalculationResult:
    """Terminal outcome of a recalculation run."""

    status: RecalculationStatus
    completed: int
    total: int
    resume_from: Optional[datetime.date] = None
    error: Optional[BaseException] = None


def score_day(
    metrics: DailyMetric,
    calculator: BaselineCalculator,
    config: EngineConfig,
    timestamp: datetime.datetime,
    strict: bool = True,
) -> ReadinessScore:
    """Score the day of ``metrics`` from its baselines.

    ``strict`` selects as-of baselines (recalculation); otherwise the
    progressive current-mode baselines are used ("today").  RHR and sleep
    baselines are only computed when their adjustment is enabled.
    """
    day = metrics.date

    hrv_baseline = calculator.compute(Metric.HRV, day, enforce_minimum=strict).value

    rhr_baseline = 0.0
    if config.use_rhr_adjustment:
        rhr_baseline = calculator.compute(Metric.RHR, day, enforce_minimum=strict).value

    sleep_baseline = 0.0
    if config.use_sleep_adjustment:
        sleep_baseline = calculator.compute(Metric.SLEEP, day, enforce_minimum=strict).value

    result = score_readiness(
        hrv=metrics.hrv,
        rhr=metrics.resting_heart_rate,
        sleep_hours=metrics.sleep_hours,
        hrv_baseline=hrv_baseline,
        rhr_baseline=rhr_baseline,
        config=config,
    )

    return build_score_record(
        date=day,
        result=result,
        hrv_baseline=hrv_baseline,
        rhr_baseline=rhr_baseline,
        sleep_baseline=sleep_baseline,
        config=config,
        timestamp=timestamp,
    )


class HistoricalRecalculator:
    """Chronological as-of re-derivation of stored scores."""

    def __init__(
        self,
        metric_store: MetricStore,
        score_store: ScoreStore,
        config: EngineConfig,
        clock: Clock,
    ):
        self.metric_store = metric_store
        self.score_store = score_store
        self.config = config
        self.clock = clock
        self.calculator = BaselineCalculator(metric_store, config)
        self.status = RecalculationStatus.IDLE

    def dates_to_process(
        self,
        today: datetime.date,
        limit_days: int,
        resume_from: Optional[datetime.date] = None,
    ) -> list[datetime.date]:
        """Days with stored metrics in ``[today - limit_days, today]``, oldest first."""
        start = today - datetime.timedelta(days=limit_days)
        if resume_from is not None and resume_from > start:
            start = resume_from
        records = self.metric_store.get_range(
            start, today + datetime.timedelta(days=1),
        )
        return sorted({r.date for r in records if start <= r.date <= today})

    def run(
        self,
        today: datetime.date,
        limit_days: int,
        token: Optional[CancellationToken] = None,
        on_progress: Optional[ProgressCallback] = None,
        resume_from: Optional[datetime.date] = None,
    ) -> RecalculationResult:
        """Recalculate every stored day in the range.

        Args:
            today: Last day of the range (inclusive).
            limit_days: How far back the range reaches.
            token: Optional cancellation token, checked before each day.
            on_progress: Optional ``(completed, total, date)`` callback,
                called once per scored day.
            resume_from: Skip days before this one (resume a partial run).

        Returns:
            :class:`RecalculationResult`.  A store failure ends the run as
            ``FAILED`` with the original exception attached.
        """
        self.status = RecalculationStatus.RUNNING
        try:
            dates = self.dates_to_process(today, limit_days, resume_from)
        except Exception as exc:
            self.status = RecalculationStatus.FAILED
            logger.exception("Recalculation failed while listing days up to %s", today)
            return RecalculationResult(
                status=self.status, completed=0, total=0,
                resume_from=resume_from, error=exc,
            )

        total = len(dates)
        completed = 0

        logger.info(
            "Recalculating %d day(s) from %s to %s (period=%d, minimum=%d)",
            total, dates[0] if dates else None, today,
            int(self.config.baseline_period_days),
            self.config.minimum_days_for_baseline,
        )

        for day in dates:
            if token is not None and token.is_cancelled:
                self.status = RecalculationStatus.CANCELLED
                logger.info("Recalculation cancelled after %d/%d day(s)", completed, total)
                return RecalculationResult(
                    status=self.status, completed=completed, total=total,
                    resume_from=day,
                )

            try:
                metrics = self.metric_store.get(day)
                if metrics is None:
                    # Deleted since enumeration; nothing to score.
                    continue
                record = score_day(
                    metrics, self.calculator, self.config, self.clock(),
                    strict=True,
                )
                self.score_store.save(record)
            except Exception as exc:
                self.status = RecalculationStatus.FAILED
                logger.exception(
                    "Recalculation failed on %s after %d/%d day(s)",
                    day, completed, total,
                )
                return RecalculationResult(
                    status=self.status, completed=completed, total=total,
                    resume_from=day, error=exc,
                )

            completed += 1
            logger.debug(
                "Recalculated %s: score=%s category=%s baseline=%s",
                day, record.score, record.category, record.hrv_baseline,
            )
            if on_progress is not None:
                on_progress(completed, total, day)

        self.status = RecalculationStatus.COMPLETED
        logger.info("Recalculation completed: %d/%d day(s)", completed, total)
        return RecalculationResult(
            status=self.status, completed=completed, total=total,
        )
