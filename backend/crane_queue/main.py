"""
FastAPI application for the crane queue.

Domain errors are translated to HTTP responses here and nowhere else; routes
and services only raise.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from crane_queue.api.main import api_router
from crane_queue.core.config import settings
from crane_queue.core.db import init_db
from crane_queue.core.observability import get_logger, setup_structured_logging
from crane_queue.domain.shared.exceptions import DomainError, ErrorType
from crane_queue.middleware.correlation import CorrelationIdMiddleware

logger = get_logger(__name__)

ERROR_STATUS_CODES: dict[ErrorType, int] = {
    ErrorType.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorType.BUSINESS_RULE: status.HTTP_409_CONFLICT,
    ErrorType.RESOURCE_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorType.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorType.REPOSITORY: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_structured_logging()
    init_db()
    logger.info("Crane queue started", environment=settings.ENVIRONMENT)
    yield


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = ERROR_STATUS_CODES.get(
        exc.error_type, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    if status_code >= 500:
        logger.error("Request failed", path=request.url.path, error=exc.message)
    else:
        logger.info(
            "Request rejected",
            path=request.url.path,
            error_type=exc.error_type.value,
            error=exc.message,
        )
    return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "type": ErrorType.VALIDATION.value,
                "message": "Request validation failed",
                "details": jsonable_encoder(exc.errors()),
            }
        },
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        lifespan=lifespan,
    )

    if settings.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(CorrelationIdMiddleware)

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router, prefix=settings.API_V1_STR)
    return app


app = create_app()
