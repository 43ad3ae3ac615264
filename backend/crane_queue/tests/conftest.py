"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database shared across sessions via
StaticPool, a manually driven clock, and services wired to both.
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from crane_queue.api.deps import get_clock, get_unit_of_work_factory
from crane_queue.application.queries.history_queries import HistoryQueries
from crane_queue.application.services.admission import AdmissionService
from crane_queue.application.services.archiver import HistoryArchiver
from crane_queue.application.services.booking_service import BookingService
from crane_queue.application.services.crane_service import CraneService
from crane_queue.application.services.queue_service import QueueService
from crane_queue.application.services.sweeper import CompletionSweeper
from crane_queue.application.services.work_log_service import WorkLogService
from crane_queue.core.clock import FixedClock
from crane_queue.core.config import Settings
from crane_queue.core.db import create_db_engine, init_db, make_session_factory
from crane_queue.infrastructure.database.unit_of_work import (
    UnitOfWorkFactory,
    make_unit_of_work_factory,
)
from crane_queue.main import app


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def file_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """A database file configured like production, for tests that need real locking."""
    test_engine = create_db_engine(
        f"sqlite:///{tmp_path / 'crane_queue.db'}",
        connect_args={"check_same_thread": False, "timeout": 15},
    )
    init_db(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def uow_factory(engine: Engine) -> UnitOfWorkFactory:
    return make_unit_of_work_factory(make_session_factory(engine))


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(1_000)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(BOOKING_ADMISSION_STATUS="pending")


@pytest.fixture
def archiver() -> HistoryArchiver:
    return HistoryArchiver()


@pytest.fixture
def admission(test_settings: Settings) -> AdmissionService:
    return AdmissionService(test_settings)


@pytest.fixture
def queue_service(
    uow_factory: UnitOfWorkFactory,
    clock: FixedClock,
    archiver: HistoryArchiver,
    admission: AdmissionService,
) -> QueueService:
    return QueueService(
        uow_factory,
        clock,
        archiver=archiver,
        sweeper=CompletionSweeper(archiver),
        admission=admission,
    )


@pytest.fixture
def booking_service(
    uow_factory: UnitOfWorkFactory, clock: FixedClock, admission: AdmissionService
) -> BookingService:
    return BookingService(uow_factory, clock, admission=admission)


@pytest.fixture
def crane_service(uow_factory: UnitOfWorkFactory, clock: FixedClock) -> CraneService:
    return CraneService(uow_factory, clock)


@pytest.fixture
def history_queries(uow_factory: UnitOfWorkFactory) -> HistoryQueries:
    return HistoryQueries(uow_factory)


@pytest.fixture
def work_log_service(uow_factory: UnitOfWorkFactory, clock: FixedClock) -> WorkLogService:
    return WorkLogService(uow_factory, clock)


@pytest.fixture
def cranes(crane_service: CraneService) -> list[str]:
    """Register TC1 and TC2."""
    return [crane_service.create_crane(name).id for name in ("TC1", "TC2")]


@pytest.fixture
def client(
    uow_factory: UnitOfWorkFactory, clock: FixedClock
) -> Generator[TestClient, None, None]:
    # No context manager: the lifespan would create tables in the default database
    app.dependency_overrides[get_unit_of_work_factory] = lambda: uow_factory
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()
