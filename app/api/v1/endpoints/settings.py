"""
Engine settings endpoints.

Changing a setting that affects how past scores are derived (baseline
period, minimum days, adjustment toggles) schedules a full historical
recalculation so the score history stays consistent with the configuration.
"""

from fastapi import APIRouter, BackgroundTasks, Depends

from app.api.dependencies import get_runner, get_settings_service
from app.schemas.settings import (
    EngineSettingsResponse,
    EngineSettingsUpdate,
    EngineSettingsUpdateResponse,
)
from app.services.recalculation_runner import RecalculationRunner
from app.services.settings_service import SettingsService

router = APIRouter()


@router.get("", summary="Get the readiness configuration.", response_model=EngineSettingsResponse, )
def get_settings(service: SettingsService = Depends(get_settings_service), ):
    return service.get()


@router.put("", summary="Update the readiness configuration.", response_model=EngineSettingsUpdateResponse, )
def update_settings(data: EngineSettingsUpdate, background_tasks: BackgroundTasks,
                    service: SettingsService = Depends(get_settings_service),
                    runner: RecalculationRunner = Depends(get_runner), ):
    settings, change = service.update(data)
    scheduled = change.requires_historical_recalculation
    if scheduled:
        background_tasks.add_task(runner.run)
    return EngineSettingsUpdateResponse(settings=settings, changes=sorted(change.changes, key=lambda c: c.value),
                                        requires_historical_recalculation=change.requires_historical_recalculation,
                                        recalculation_scheduled=scheduled, )
