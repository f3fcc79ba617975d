"""
Shared pytest fixtures.

Engine tests run against in-memory stores; database, service and API tests
run against a throwaway in-memory SQLite database.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.api.dependencies import get_runner
from app.db.session import get_db
from app.engine.config import EngineConfig
from app.main import app
from app.services.recalculation_runner import RecalculationRunner
from tests.fakes import InMemoryMetricStore, InMemoryScoreStore


@pytest.fixture
def metric_store() -> InMemoryMetricStore:
    return InMemoryMetricStore()


@pytest.fixture
def score_store() -> InMemoryScoreStore:
    return InMemoryScoreStore()


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def runner(db_engine) -> RecalculationRunner:
    return RecalculationRunner(lambda: Session(db_engine))


@pytest.fixture
def client(session, runner):
    """API client bound to the test database; lifespan startup is skipped."""
    app.dependency_overrides[get_db] = lambda: session
    app.dependency_overrides[get_runner] = lambda: runner
    yield TestClient(app)
    app.dependency_overrides.clear()
