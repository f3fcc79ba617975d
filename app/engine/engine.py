"""
Readiness engine facade.

Binds the stores, the configuration provider and the clock, and exposes the
three operations callers use:

    compute_today_score()   current-mode baselines + scorer, not persisted
    recalculate(...)        chronological as-of backfill of stored scores
    purge_older_than(...)   retention policy

The configuration provider is read once at the start of each operation;
changes made while an operation runs are not observed by it.  The clock
defaults to naive local time, the same basis as every stored timestamp.
"""

from __future__ import annotations

import datetime
from typing import Optional

from app.engine.baseline import BaselineCalculator, BaselineResult, Metric
from app.engine.recalculation import (
    CancellationToken,
    HistoricalRecalculator,
    ProgressCallback,
    RecalculationResult,
    score_day,
)
from app.engine.retention import PurgeResult, purge_older_than
from app.engine.scorer import UNDETERMINED, build_score_record
from app.engine.stores import Clock, ConfigProvider, MetricStore, ScoreStore
from app.models.readiness import ReadinessScore


class ReadinessEngine:
    """Entry point to the readiness calculation engine."""

    def __init__(
        self,
        metric_store: MetricStore,
        score_store: ScoreStore,
        config_provider: ConfigProvider,
        clock: Optional[Clock] = None,
    ):
        self.metric_store = metric_store
        self.score_store = score_store
        self.config_provider = config_provider
        self.clock = clock or datetime.datetime.now

    def today(self) -> datetime.date:
        return self.clock().date()

    def compute_today_score(
        self, today: Optional[datetime.date] = None,
    ) -> ReadinessScore:
        """Score ``today`` (defaults to the clock's date) with progressive baselines.

        The returned record is not persisted.  A day without stored metrics
        scores as undetermined.
        """
        config = self.config_provider()
        day = today or self.today()
        timestamp = self.clock()

        metrics = self.metric_store.get(day)
        if metrics is None:
            return build_score_record(
                date=day,
                result=UNDETERMINED,
                hrv_baseline=0.0,
                rhr_baseline=0.0,
                sleep_baseline=0.0,
                config=config,
                timestamp=timestamp,
            )

        calculator = BaselineCalculator(self.metric_store, config)
        return score_day(metrics, calculator, config, timestamp, strict=False)

    def current_baselines(
        self, today: Optional[datetime.date] = None,
    ) -> dict[Metric, BaselineResult]:
        """Current-mode baseline of every metric, with stability."""
        config = self.config_provider()
        day = today or self.today()
        calculator = BaselineCalculator(self.metric_store, config)
        return {
            metric: calculator.current_baseline(metric, day)
            for metric in Metric
        }

    def recalculate(
        self,
        limit_days: int,
        token: Optional[CancellationToken] = None,
        on_progress: Optional[ProgressCallback] = None,
        resume_from: Optional[datetime.date] = None,
    ) -> RecalculationResult:
        """Re-derive stored scores for ``[today - limit_days, today]``.

        The number of days (re)computed is ``result.completed``.
        """
        config = self.config_provider()
        recalculator = HistoricalRecalculator(
            self.metric_store, self.score_store, config, self.clock,
        )
        return recalculator.run(
            today=self.today(),
            limit_days=limit_days,
            token=token,
            on_progress=on_progress,
            resume_from=resume_from,
        )

    def purge_older_than(
        self, retention_days: Optional[int] = None,
    ) -> PurgeResult:
        """Apply the retention policy relative to the clock's date.

        Defaults to the configured ``retention_days``.
        """
        if retention_days is None:
            retention_days = self.config_provider().retention_days
        return purge_older_than(
            self.metric_store, self.score_store, retention_days, self.today(),
        )
