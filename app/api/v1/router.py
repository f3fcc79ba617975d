"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import metrics, readiness, settings

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    metrics.router, prefix="/metrics", tags=["Daily metrics"]
)
api_router.include_router(
    readiness.router, prefix="/readiness", tags=["Readiness"]
)
api_router.include_router(
    settings.router, prefix="/settings", tags=["Settings"]
)
