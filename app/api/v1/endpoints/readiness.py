"""
Readiness endpoints.

Today's score, score history, baselines, historical backfill and retention.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from app.api.dependencies import get_readiness_service, get_runner
from app.schemas.readiness import (
    BaselinesResponse,
    PurgeResponse,
    ReadinessScoreResponse,
    RecalculationRequest,
    RecalculationStatusResponse,
)
from app.services.readiness_service import ReadinessService
from app.services.recalculation_runner import RecalculationRunner

router = APIRouter()


@router.get(
    "/today",
    summary="Compute and store today's readiness score.",
    response_model=ReadinessScoreResponse,
)
def get_today(service: ReadinessService = Depends(get_readiness_service)):
    return service.compute_today()


@router.get(
    "/baselines",
    summary="Get current personal baselines and their stability.",
    response_model=BaselinesResponse,
)
def get_baselines(service: ReadinessService = Depends(get_readiness_service)):
    return service.get_baselines()


@router.post(
    "/recalculate",
    summary="Recalculate historical scores in the background.",
    response_model=RecalculationStatusResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
def recalculate(
    background_tasks: BackgroundTasks,
    data: Optional[RecalculationRequest] = None,
    runner: RecalculationRunner = Depends(get_runner),
):
    """Supersedes any recalculation already in progress."""
    data = data or RecalculationRequest()
    background_tasks.add_task(runner.run, data.limit_days, data.resume_from)
    return runner.status


@router.get(
    "/recalculate/status",
    summary="Get the progress of the latest recalculation.",
    response_model=RecalculationStatusResponse,
)
def recalculation_status(runner: RecalculationRunner = Depends(get_runner)):
    return runner.status


@router.post(
    "/recalculate/cancel",
    summary="Cancel the recalculation in progress.",
    response_model=RecalculationStatusResponse,
)
def cancel_recalculation(runner: RecalculationRunner = Depends(get_runner)):
    runner.cancel()
    return runner.status


@router.post(
    "/purge",
    summary="Delete records older than the retention horizon.",
    response_model=PurgeResponse,
)
def purge(
    retention_days: Optional[int] = Query(
        None, ge=1, description="Override the configured retention (days)"
    ),
    service: ReadinessService = Depends(get_readiness_service),
):
    return service.purge(retention_days)


@router.get(
    "",
    summary="List readiness scores.",
    response_model=list[ReadinessScoreResponse],
)
def list_scores(
    start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
    end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
    days: int = Query(30, ge=1, le=3650, description="Recent days when no range is given"),
    service: ReadinessService = Depends(get_readiness_service),
):
    if start and end:
        return service.get_range(start, end)
    return service.get_recent(days)


@router.get(
    "/{date}",
    summary="Get the readiness score for a specific date.",
    response_model=ReadinessScoreResponse,
)
def get_score(
    date: datetime.date,
    service: ReadinessService = Depends(get_readiness_service),
):
    return service.get_by_date(date)
