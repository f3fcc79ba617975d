"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.metrics import DailyMetric  # noqa: F401
from app.models.readiness import ReadinessScore  # noqa: F401
from app.models.settings import EngineSettings  # noqa: F401
