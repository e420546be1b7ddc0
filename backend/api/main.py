"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.api.deps.dependencies import get_service_cache
from backend.boundary.db.connection import get_async_engine
from backend.boundary.db.create_tables import create_all_tables
from backend.configs import get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    cleanup_router,
    comment_router,
    health_router,
    screenshots_router,
    session_comments_router,
    sessions_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Starting annotation API",
        extra={"environment": settings.environment, "storage_backend": settings.storage.backend},
    )

    if settings.storage.backend.lower() == "sql":
        await create_all_tables()

    yield

    get_service_cache().clear()
    if settings.storage.backend.lower() == "sql":
        await get_async_engine().dispose()
    logger.info("Service cache cleared")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and parameters are client errors (400)."""
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "errors": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Pagepin Annotation API",
        description="Pin and area comments on live web pages, organised in sessions",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added runs outermost: the correlation ID is bound before request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")
    app.include_router(session_comments_router, prefix="/api/v1")
    app.include_router(comment_router, prefix="/api/v1")
    app.include_router(screenshots_router, prefix="/api/v1")
    app.include_router(cleanup_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "backend.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
