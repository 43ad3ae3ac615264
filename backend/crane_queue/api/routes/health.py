"""Health check route."""

from fastapi import APIRouter

from crane_queue.api.deps import ClockDep

router = APIRouter()


@router.get("/health", summary="Liveness check")
def get_health(clock: ClockDep) -> dict:
    """Report that the service is up, with the server time in epoch ms."""
    return {"ok": True, "time": clock.now_ms()}
