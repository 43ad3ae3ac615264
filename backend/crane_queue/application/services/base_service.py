"""Shared plumbing for application services."""

from crane_queue.core.clock import Clock, system_clock
from crane_queue.infrastructure.database.unit_of_work import (
    UnitOfWorkFactory,
    UnitOfWorkInterface,
)


class ApplicationServiceBase:
    """
    Base class for application services.

    Holds the unit of work factory and the clock. Each public operation opens
    exactly one unit of work and reads "now" once.
    """

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory, clock: Clock | None = None):
        self._unit_of_work_factory = unit_of_work_factory
        self._clock = clock or system_clock

    def transaction(self) -> UnitOfWorkInterface:
        return self._unit_of_work_factory()

    def now(self) -> int:
        return self._clock.now_ms()
