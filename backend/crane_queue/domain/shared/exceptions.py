"""
Domain Exceptions

Discriminated error types for the crane queue engine. Guard violations on
state transitions are deliberately absent: an illegal transition is reported
as a zero-effect result, never raised. Everything here is a condition the
caller must be able to tell apart from "nothing to do".
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_CONFLICT = "resource_conflict"
    NOT_FOUND = "not_found"
    REPOSITORY = "repository"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when a request value is not acceptable to the engine."""

    def __init__(
        self,
        field_name: str,
        value: str | int | float | bool | None,
        message: str,
    ) -> None:
        self.field_name = field_name
        self.value = value
        details: dict[str, str | int | bool | None] = {
            "field": field_name,
            "value": str(value) if value is not None else None,
        }
        super().__init__(
            f"Validation failed for field '{field_name}': {message}",
            ErrorType.VALIDATION,
            details,
        )


class BusinessRuleError(DomainError):
    """Raised when a collaborator-level safety rule is violated."""

    def __init__(
        self, message: str, details: dict[str, str | int | bool | None] | None = None
    ) -> None:
        super().__init__(message, ErrorType.BUSINESS_RULE, details)


class EntityAlreadyExistsError(DomainError):
    """Raised when creating an entity whose key is already taken."""

    def __init__(self, entity_type: str, key: str) -> None:
        super().__init__(
            f"{entity_type} already exists: {key}",
            ErrorType.RESOURCE_CONFLICT,
            {"entity_type": entity_type, "key": key},
        )
        self.entity_type = entity_type
        self.key = key


# Not-found errors
class EntityNotFoundError(DomainError):
    """Base class for references that do not resolve."""

    def __init__(
        self, message: str, details: dict[str, str | int | bool | None] | None = None
    ) -> None:
        super().__init__(message, ErrorType.NOT_FOUND, details)


class CraneNotFoundError(EntityNotFoundError):
    """Raised when a crane is not found."""

    def __init__(self, crane_id: str) -> None:
        super().__init__(
            f"Crane not found: {crane_id}",
            {"crane_id": crane_id, "entity_type": "crane"},
        )
        self.crane_id = crane_id


class QueueItemNotFoundError(EntityNotFoundError):
    """Raised when a queue item is not found."""

    def __init__(self, crane_id: str, ord: int) -> None:
        super().__init__(
            f"Queue item not found: {crane_id} #{ord}",
            {"crane_id": crane_id, "ord": ord, "entity_type": "queue_item"},
        )
        self.crane_id = crane_id
        self.ord = ord


class BookingNotFoundError(EntityNotFoundError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            f"Booking not found: {booking_id}",
            {"booking_id": booking_id, "entity_type": "booking"},
        )
        self.booking_id = booking_id


class WorkLogNotFoundError(EntityNotFoundError):
    """Raised when a work log is not found."""

    def __init__(self, work_log_id: str) -> None:
        super().__init__(
            f"Work log not found: {work_log_id}",
            {"work_log_id": work_log_id, "entity_type": "work_log"},
        )
        self.work_log_id = work_log_id


class StorageFailure(DomainError):
    """
    Raised when the entity store cannot complete an operation.

    Always surfaced to the caller. The engine never retries; retry policy
    belongs to whoever issued the request.
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message, ErrorType.REPOSITORY, {"operation": operation})
        self.operation = operation
