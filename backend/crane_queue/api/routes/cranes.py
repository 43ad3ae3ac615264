"""
Crane and Queue API Routes.

Crane registration, queue reads and the operator actions Start, Stop,
Rollback, direct enqueue and removal. Transitions whose guard does not hold
answer 200 with ``updated: 0``.
"""

from fastapi import APIRouter, status

from crane_queue.api.deps import CraneServiceDep, QueueServiceDep
from crane_queue.application.dtos.queue_dtos import (
    CraneQueuePublic,
    CreateCraneRequest,
    EnqueueRequest,
    EnqueueResponse,
    TransitionResponse,
)
from crane_queue.utils import normalize_crane_id

router = APIRouter(prefix="/cranes", tags=["cranes"])


@router.get(
    "",
    summary="List cranes with their queues",
    response_model=list[CraneQueuePublic],
)
def list_cranes(service: QueueServiceDep) -> list[CraneQueuePublic]:
    """Every crane and its queue in ord order. Expired booked work is completed first."""
    return service.list_cranes()


@router.post(
    "",
    summary="Register a crane",
    status_code=status.HTTP_201_CREATED,
    response_model=CraneQueuePublic,
)
def create_crane(request: CreateCraneRequest, service: CraneServiceDep) -> CraneQueuePublic:
    crane = service.create_crane(request.id)
    return CraneQueuePublic(id=crane.id)


@router.get(
    "/{crane_id}",
    summary="Get one crane with its queue",
    response_model=CraneQueuePublic,
)
def get_crane(crane_id: str, service: QueueServiceDep) -> CraneQueuePublic:
    return service.get_crane(normalize_crane_id(crane_id))


@router.delete(
    "/{crane_id}",
    summary="Remove a crane with an empty queue",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_crane(crane_id: str, service: CraneServiceDep) -> None:
    service.delete_crane(normalize_crane_id(crane_id))


@router.post(
    "/{crane_id}/start/{ord}",
    summary="Start a pending item",
    response_model=TransitionResponse,
    response_model_exclude_none=True,
)
def start_item(crane_id: str, ord: int, service: QueueServiceDep) -> TransitionResponse:
    result = service.start(normalize_crane_id(crane_id), ord)
    return TransitionResponse(updated=result.updated)


@router.post(
    "/{crane_id}/stop/{ord}",
    summary="Finish a working item and archive it",
    response_model=TransitionResponse,
    response_model_exclude_none=True,
)
def stop_item(crane_id: str, ord: int, service: QueueServiceDep) -> TransitionResponse:
    result = service.stop(normalize_crane_id(crane_id), ord)
    return TransitionResponse(updated=result.updated)


@router.post(
    "/{crane_id}/rollback/{ord}",
    summary="Undo the last step of an item",
    response_model=TransitionResponse,
)
def rollback_item(
    crane_id: str, ord: int, service: QueueServiceDep
) -> TransitionResponse:
    result = service.rollback(normalize_crane_id(crane_id), ord)
    return TransitionResponse(
        updated=result.updated,
        to=result.new_status.value if result.applied else None,
    )


@router.post(
    "/{crane_id}/queue",
    summary="Queue work directly, without approval",
    status_code=status.HTTP_201_CREATED,
    response_model=EnqueueResponse,
)
def enqueue(
    crane_id: str, request: EnqueueRequest, service: QueueServiceDep
) -> EnqueueResponse:
    item = service.enqueue(normalize_crane_id(crane_id), request)
    return EnqueueResponse(crane_id=item.crane_id, ord=item.ord, status=item.status.value)


@router.delete(
    "/{crane_id}/queue/{ord}",
    summary="Remove a pending item",
    status_code=status.HTTP_204_NO_CONTENT,
)
def remove_item(crane_id: str, ord: int, service: QueueServiceDep) -> None:
    service.remove_item(normalize_crane_id(crane_id), ord)
