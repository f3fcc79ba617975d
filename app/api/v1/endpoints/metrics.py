"""
Daily metric endpoints.

Daily metric CRUD with date-based upsert, plus bulk historical import.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Response, status

from app.api.dependencies import (
    get_metric_service,
    get_readiness_service,
    get_runner,
)
from app.schemas.metrics import (
    DailyMetricCreate,
    DailyMetricImport,
    DailyMetricImportResponse,
    DailyMetricResponse,
)
from app.services.metrics_service import MetricService
from app.services.readiness_service import ReadinessService
from app.services.recalculation_runner import RecalculationRunner

router = APIRouter()


@router.post("/import", summary="Bulk import historical daily metrics.", response_model=DailyMetricImportResponse, )
def import_metrics(data: DailyMetricImport, background_tasks: BackgroundTasks,
                   service: MetricService = Depends(get_metric_service),
                   readiness: ReadinessService = Depends(get_readiness_service),
                   runner: RecalculationRunner = Depends(get_runner), ):
    """Upsert every entry, apply the retention policy, then backfill scores."""
    created, updated = service.import_entries(data.entries)
    purged = readiness.purge()
    if data.recalculate:
        background_tasks.add_task(runner.run)
    return DailyMetricImportResponse(created=created, updated=updated, metrics_purged=purged.metrics_deleted,
                                     scores_purged=purged.scores_deleted, recalculation_scheduled=data.recalculate, )


@router.put("/{date}", summary="Create or replace metrics for a date.", response_model=DailyMetricResponse, )
def upsert_metrics(date: datetime.date, data: DailyMetricCreate, response: Response,
                   service: MetricService = Depends(get_metric_service), ):
    """Upsert: creates the entry if it doesn't exist, replaces its values if it does."""
    entry, created = service.upsert(date, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("", summary="List daily metrics with optional filters.", response_model=list[DailyMetricResponse], )
def list_metrics(date: Optional[datetime.date] = Query(None, description="Exact date filter"),
                 start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                 end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                 skip: int = Query(0, ge=0, description="Records to skip"),
                 limit: int = Query(100, ge=1, le=500, description="Max records to return"),
                 service: MetricService = Depends(get_metric_service), ):
    """
    Query daily metrics. Filter precedence:
    - date: returns single entry for that date (as a list)
    - start + end: returns entries in range, oldest first
    - no filters: returns paginated list (most recent first)
    """
    if date:
        return [service.get_by_date(date)]

    if start and end:
        return service.get_range(start, end)

    return service.get_all(skip, limit)


@router.get("/{date}", summary="Get metrics for a specific date.", response_model=DailyMetricResponse, )
def get_metrics(date: datetime.date, service: MetricService = Depends(get_metric_service), ):
    return service.get_by_date(date)


@router.delete("/{date}", summary="Delete metrics for a specific date.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_metrics(date: datetime.date, service: MetricService = Depends(get_metric_service), ):
    service.delete_by_date(date)
