from fastapi import APIRouter

from crane_queue.api.routes import (
    bookings,
    cranes,
    health,
    history,
    work_logs,
    work_types,
)

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(cranes.router)
api_router.include_router(bookings.router)
api_router.include_router(history.router)
api_router.include_router(work_logs.router)
api_router.include_router(work_types.router)
