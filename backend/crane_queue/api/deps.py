"""
Dependency injection for FastAPI route handlers.

Services are built per request from the settings, the clock and a unit of
work factory. Tests replace ``get_unit_of_work_factory`` and ``get_clock``
through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from crane_queue.application.queries.history_queries import HistoryQueries
from crane_queue.application.queries.work_type_queries import WorkTypeQueries
from crane_queue.application.services.admission import AdmissionService
from crane_queue.application.services.archiver import HistoryArchiver
from crane_queue.application.services.booking_service import BookingService
from crane_queue.application.services.crane_service import CraneService
from crane_queue.application.services.queue_service import QueueService
from crane_queue.application.services.sweeper import CompletionSweeper
from crane_queue.application.services.work_log_service import WorkLogService
from crane_queue.core.clock import Clock, system_clock
from crane_queue.core.config import Settings, get_settings
from crane_queue.core.db import make_session_factory
from crane_queue.infrastructure.database.unit_of_work import (
    UnitOfWorkFactory,
    make_unit_of_work_factory,
)

_default_unit_of_work_factory = make_unit_of_work_factory(make_session_factory())


def get_clock() -> Clock:
    return system_clock


def get_unit_of_work_factory() -> UnitOfWorkFactory:
    return _default_unit_of_work_factory


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
ClockDep = Annotated[Clock, Depends(get_clock)]
UnitOfWorkFactoryDep = Annotated[UnitOfWorkFactory, Depends(get_unit_of_work_factory)]


def get_admission_service(settings: SettingsDep) -> AdmissionService:
    return AdmissionService(settings)


AdmissionServiceDep = Annotated[AdmissionService, Depends(get_admission_service)]


def get_queue_service(
    uow_factory: UnitOfWorkFactoryDep,
    clock: ClockDep,
    admission: AdmissionServiceDep,
) -> QueueService:
    """
    Get QueueService instance for dependency injection.

    The archiver is shared between Stop and the sweeper so both write history
    the same way.
    """
    archiver = HistoryArchiver()
    return QueueService(
        uow_factory,
        clock,
        archiver=archiver,
        sweeper=CompletionSweeper(archiver),
        admission=admission,
    )


def get_crane_service(uow_factory: UnitOfWorkFactoryDep, clock: ClockDep) -> CraneService:
    return CraneService(uow_factory, clock)


def get_booking_service(
    uow_factory: UnitOfWorkFactoryDep,
    clock: ClockDep,
    admission: AdmissionServiceDep,
    settings: SettingsDep,
) -> BookingService:
    return BookingService(
        uow_factory,
        clock,
        admission=admission,
        list_limit=settings.BOOKING_LIST_LIMIT,
    )


def get_history_queries(
    uow_factory: UnitOfWorkFactoryDep, settings: SettingsDep
) -> HistoryQueries:
    return HistoryQueries(uow_factory, limit=settings.HISTORY_LIST_LIMIT)


QueueServiceDep = Annotated[QueueService, Depends(get_queue_service)]
CraneServiceDep = Annotated[CraneService, Depends(get_crane_service)]
BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]
HistoryQueriesDep = Annotated[HistoryQueries, Depends(get_history_queries)]


def get_work_log_service(
    uow_factory: UnitOfWorkFactoryDep, clock: ClockDep, settings: SettingsDep
) -> WorkLogService:
    return WorkLogService(uow_factory, clock, list_limit=settings.WORK_LOG_LIST_LIMIT)


def get_work_type_queries(settings: SettingsDep) -> WorkTypeQueries:
    return WorkTypeQueries(settings.WORK_TYPES_FILE)


WorkLogServiceDep = Annotated[WorkLogService, Depends(get_work_log_service)]
WorkTypeQueriesDep = Annotated[WorkTypeQueries, Depends(get_work_type_queries)]
