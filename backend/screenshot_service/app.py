"""
Screenshot microservice.

Routes: GET /health, POST /screenshot

Run with:
    uvicorn backend.screenshot_service.app:app --port 3001

Dependencies: fastapi, playwright, backend.core.url_guard
System role: Stand-alone page capture service called by the annotation API
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Awaitable, Callable

import uvicorn
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.configs import get_settings
from backend.configs.screenshot import ScreenshotSettings
from backend.core.exceptions import AccessRestrictedError, ValidationError
from backend.core.url_guard import validate_target_url
from backend.models.comment import Viewport
from backend.models.common import ErrorResponse
from backend.models.screenshot import ScreenshotRequest, ScreenshotResponse
from backend.observability.logger import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from backend.screenshot_service.capture import capture_screenshot

logger = logging.getLogger(__name__)

CaptureFn = Callable[[str, Viewport, ScreenshotSettings], Awaitable[ScreenshotResponse]]


def get_capture() -> CaptureFn:
    return capture_screenshot


def get_screenshot_settings() -> ScreenshotSettings:
    return get_settings().screenshot


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, details=details).model_dump(exclude_none=True),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().log_level)
    logger.info("Screenshot service starting")
    yield


app = FastAPI(title="Pagepin Screenshot Service", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CorrelationMiddleware)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body", str(exc.errors()))


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.post("/screenshot", response_model=ScreenshotResponse)
async def screenshot(
    request: ScreenshotRequest | None = None,
    capture: CaptureFn = Depends(get_capture),
    settings: ScreenshotSettings = Depends(get_screenshot_settings),
):
    """
    Capture a public page.

    Returns 400 for a missing or malformed targetUrl, 403 for local network
    targets and 500 with {error, details} when the capture fails.
    """
    request = request or ScreenshotRequest()
    try:
        url = validate_target_url(request.target_url, resolve_dns=settings.resolve_dns)
    except ValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, e.message)
    except AccessRestrictedError as e:
        logger.warning("Restricted target rejected", extra={"error": str(e)})
        return _error(status.HTTP_403_FORBIDDEN, e.message)

    try:
        return await capture(url, request.viewport, settings)
    except Exception as e:
        logger.exception(
            "Screenshot capture failed",
            extra={"target_url": url, "error": str(e)},
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to capture screenshot", str(e))


if __name__ == "__main__":
    uvicorn.run("backend.screenshot_service.app:app", host="0.0.0.0", port=3001)
