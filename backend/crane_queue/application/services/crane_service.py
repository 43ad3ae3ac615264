"""Crane administration use cases."""

import logging

from crane_queue.domain.shared.exceptions import (
    BusinessRuleError,
    CraneNotFoundError,
    EntityAlreadyExistsError,
    ValidationError,
)
from crane_queue.infrastructure.database.models import Crane
from crane_queue.utils import normalize_crane_id

from .base_service import ApplicationServiceBase

logger = logging.getLogger(__name__)


class CraneService(ApplicationServiceBase):
    """Registers and removes cranes."""

    def create_crane(self, crane_id: str) -> Crane:
        """
        Register a crane under its normalized id.

        Raises:
            ValidationError: If the id is blank
            EntityAlreadyExistsError: If the crane already exists
        """
        normalized = normalize_crane_id(crane_id)
        if not normalized:
            raise ValidationError("id", crane_id, "crane id must not be blank")

        with self.transaction() as uow:
            if uow.cranes.get(normalized) is not None:
                raise EntityAlreadyExistsError("Crane", normalized)
            crane = uow.cranes.add(Crane(id=normalized))
            logger.info("Crane %s created", normalized)
            return crane

    def delete_crane(self, crane_id: str) -> None:
        """
        Remove a crane with an empty queue.

        Raises:
            CraneNotFoundError: If the crane does not exist
            BusinessRuleError: If the crane still has queued work or work logs
        """
        with self.transaction() as uow:
            crane = uow.cranes.lock(crane_id)
            if crane is None:
                raise CraneNotFoundError(crane_id)
            remaining = uow.queue.count_by_crane(crane_id)
            if remaining:
                raise BusinessRuleError(
                    f"Crane {crane_id} still has {remaining} queued items",
                    {"crane_id": crane_id, "queued": remaining},
                )
            logged = uow.work_logs.count_by_crane(crane_id)
            if logged:
                raise BusinessRuleError(
                    f"Crane {crane_id} has {logged} work logs",
                    {"crane_id": crane_id, "work_logs": logged},
                )
            uow.cranes.delete(crane)
            logger.info("Crane %s deleted", crane_id)
