"""What would the readiness engine have said over the last few weeks?

Builds a synthetic HRV / RHR / sleep history in an in-memory database,
backfills the scores with a historical recalculation and prints the
resulting readiness table, then the score "today" would get.

Usage:
    python scripts/simulate_history.py [--days 28] [--period 7] [--minimum 3]
"""

import argparse
import datetime
import math
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.core.logging import configure_logging
from app.db.repositories.metrics import DailyMetricRepository
from app.db.repositories.readiness import ReadinessScoreRepository
from app.engine import BaselinePeriod, EngineConfig, ReadinessEngine
from app.engine.categories import ReadinessCategory
from app.models.metrics import DailyMetric

TODAY = datetime.date(2026, 10, 19)


def synthetic_day(offset: int) -> dict:
    """Weekly HRV wave with a hard block (days 16-19) and a short night."""
    hrv = 55.0 + 4.0 * math.sin(offset * 2 * math.pi / 7)
    rhr = 52.0 + 1.5 * math.cos(offset * 2 * math.pi / 7)
    sleep = 7.4
    if 16 <= offset <= 19:
        hrv -= 9.0 + offset - 16
        rhr += 6.0
    if offset == 22:
        sleep = 5.2
    return {
        "hrv": round(hrv, 1),
        "resting_heart_rate": round(rhr, 1),
        "sleep_hours": sleep,
    }


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--days", type=int, default=28)
    parser.add_argument("--period", type=int, default=7, choices=[p.value for p in BaselinePeriod])
    parser.add_argument("--minimum", type=int, default=3)
    parser.add_argument("--adjust", action="store_true", help="Enable RHR and sleep adjustments")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    configure_logging(args.log_level)

    db = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(db)

    config = EngineConfig(
        baseline_period_days=BaselinePeriod(args.period),
        minimum_days_for_baseline=args.minimum,
        use_rhr_adjustment=args.adjust,
        use_sleep_adjustment=args.adjust,
    )
    now = datetime.datetime.combine(TODAY, datetime.time(7, 30))

    with Session(db) as session:
        metrics = DailyMetricRepository(session)
        scores = ReadinessScoreRepository(session)

        first_day = TODAY - datetime.timedelta(days=args.days - 1)
        for offset in range(args.days - 1):
            day = first_day + datetime.timedelta(days=offset)
            metrics.save(DailyMetric(date=day, **synthetic_day(offset)))

        engine = ReadinessEngine(metrics, scores, lambda: config, clock=lambda: now)
        result = engine.recalculate(limit_days=args.days)

        # ── PRINT HISTORY ───────────────────────────────────────────────
        print()
        print("=" * 72)
        print(f"  Readiness history ({config.baseline_period_days.description} baseline, "
              f"minimum {config.minimum_days_for_baseline} days)")
        print("=" * 72)
        print(f"  {'Date':<12} {'HRV':>6} {'Baseline':>9} {'Dev %':>7} {'Score':>6}  Category")
        print("  " + "-" * 68)
        for record in scores.get_range(first_day, TODAY):
            hrv = metrics.get(record.date).hrv
            print(
                f"  {record.date.isoformat():<12} {hrv:>6.1f} {record.hrv_baseline:>9.1f} "
                f"{record.hrv_deviation_percent:>7.2f} {record.score:>6.1f}  {record.category}"
            )
        print()
        print(f"  Recalculation: {result.status.value}, {result.completed}/{result.total} day(s)")

        # ── TODAY ───────────────────────────────────────────────────────
        metrics.save(DailyMetric(date=TODAY, **synthetic_day(args.days - 1)))
        today = engine.compute_today_score()
        category = ReadinessCategory(today.category)
        print()
        print("  " + "-" * 68)
        print(f"  TODAY {TODAY.strftime('%A %d %B %Y')}: {today.score:.1f} ({category.value})")
        print(f"  {category.description}")
        print()


if __name__ == "__main__":
    main()
