"""
Recalculation runner.

Runs historical recalculation outside the request path and guarantees that
at most one pass mutates the score history at a time.  Starting a new pass
cancels the in-flight one and waits for it to stop before starting, so two
passes never interleave writes over the same range.

Each run opens its own database session; every per-day score is committed
on its own, so a cancelled or failed run leaves the days it finished
committed and can be resumed from ``resume_from``.
"""

import datetime
import logging
import threading
from typing import Callable, Optional

from sqlmodel import Session

from app.core.config import settings
from app.engine.recalculation import (
    CancellationToken,
    RecalculationResult,
    RecalculationStatus,
)
from app.engine.stores import Clock
from app.schemas.readiness import RecalculationStatusResponse
from app.services.readiness_service import build_engine

logger = logging.getLogger(__name__)


class RecalculationRunner:
    """Single-flight executor for historical recalculation."""

    def __init__(
        self,
        session_factory: Callable[[], Session],
        clock: Optional[Clock] = None,
    ):
        self.session_factory = session_factory
        self.clock = clock
        self._run_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._token: Optional[CancellationToken] = None
        self._status = RecalculationStatusResponse(status=RecalculationStatus.IDLE)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def status(self) -> RecalculationStatusResponse:
        with self._state_lock:
            return self._status.model_copy()

    @property
    def is_running(self) -> bool:
        return self.status.status == RecalculationStatus.RUNNING

    def cancel(self) -> None:
        """Ask the in-flight run, if any, to stop before its next day."""
        with self._state_lock:
            if self._token is not None:
                self._token.cancel()

    def run(
        self,
        limit_days: Optional[int] = None,
        resume_from: Optional[datetime.date] = None,
    ) -> RecalculationResult:
        """Run a full recalculation pass, superseding any in-flight pass.

        Blocks until the pass finishes; call it from a worker thread (e.g.
        FastAPI ``BackgroundTasks``).
        """
        limit = limit_days or settings.RECALCULATION_LIMIT_DAYS
        token = CancellationToken()

        with self._state_lock:
            if self._token is not None:
                self._token.cancel()
            self._token = token

        try:
            with self._run_lock:
                # Superseded while waiting for the previous pass to stop.
                if token.is_cancelled:
                    return RecalculationResult(
                        status=RecalculationStatus.CANCELLED, completed=0, total=0,
                        resume_from=resume_from,
                    )

                self._set_status(
                    status=RecalculationStatus.RUNNING,
                    completed=0,
                    total=0,
                    current_date=None,
                    resume_from=None,
                    error=None,
                    started_at=self._now(),
                    finished_at=None,
                )

                try:
                    with self.session_factory() as session:
                        engine = build_engine(session, self.clock)
                        result = engine.recalculate(
                            limit_days=limit,
                            token=token,
                            on_progress=self._on_progress,
                            resume_from=resume_from,
                        )
                except Exception as exc:
                    self._set_status(
                        status=RecalculationStatus.FAILED,
                        error=str(exc),
                        finished_at=self._now(),
                    )
                    raise

                self._set_status(
                    status=result.status,
                    completed=result.completed,
                    total=result.total,
                    resume_from=result.resume_from,
                    error=str(result.error) if result.error is not None else None,
                    finished_at=self._now(),
                )
                return result
        finally:
            with self._state_lock:
                if self._token is token:
                    self._token = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _now(self) -> datetime.datetime:
        return (self.clock or datetime.datetime.now)()

    def _on_progress(self, completed: int, total: int, date: datetime.date) -> None:
        self._set_status(completed=completed, total=total, current_date=date)

    def _set_status(self, **fields) -> None:
        with self._state_lock:
            self._status = self._status.model_copy(update=fields)


_runner: Optional[RecalculationRunner] = None


def get_recalculation_runner() -> RecalculationRunner:
    """Process-wide runner bound to the application database."""
    global _runner
    if _runner is None:
        from app.db.session import engine

        _runner = RecalculationRunner(lambda: Session(engine))
    return _runner
