"""
Data retention.

Deletes metric and score records older than the retention horizon.  A
record dated exactly ``retention_days`` ago is kept; anything older goes.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass

from app.engine.stores import MetricStore, ScoreStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PurgeResult:
    cutoff: datetime.date
    metrics_deleted: int
    scores_deleted: int


def retention_cutoff(today: datetime.date, retention_days: int) -> datetime.date:
    """Oldest day still retained."""
    return today - datetime.timedelta(days=retention_days)


def purge_older_than(
    metric_store: MetricStore,
    score_store: ScoreStore,
    retention_days: int,
    today: datetime.date,
) -> PurgeResult:
    """Delete both record kinds dated before ``today - retention_days``."""
    cutoff = retention_cutoff(today, retention_days)
    metrics_deleted = metric_store.delete_older_than(cutoff)
    scores_deleted = score_store.delete_older_than(cutoff)

    if metrics_deleted or scores_deleted:
        logger.info(
            "Retention purge before %s: %d metric(s), %d score(s) deleted",
            cutoff, metrics_deleted, scores_deleted,
        )
    return PurgeResult(
        cutoff=cutoff,
        metrics_deleted=metrics_deleted,
        scores_deleted=scores_deleted,
    )
