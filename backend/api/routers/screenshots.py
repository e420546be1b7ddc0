"""
Screenshot API endpoints.

Routes:
- POST /screenshots - Capture a page through the screenshot microservice
- POST /screenshots/upload - Presigned upload URL for a screenshot

Dependencies: backend.application.services.screenshot_service, backend.models
System role: Screenshot proxy HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.api.deps import get_screenshot_service
from backend.api.routers.router_utils import handle_annotation_errors
from backend.application.services.screenshot_service import ScreenshotService
from backend.models.screenshot import (
    ScreenshotRequest,
    ScreenshotResponse,
    UploadUrlRequest,
    UploadUrlResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/screenshots", tags=["screenshots"])


@router.post("", response_model=ScreenshotResponse)
@handle_annotation_errors
async def capture_screenshot(
    request: ScreenshotRequest | None = None,
    screenshot_service: ScreenshotService = Depends(get_screenshot_service),
) -> ScreenshotResponse:
    """
    Capture a screenshot of a public page.

    Raises:
        HTTPException(400): Missing or malformed targetUrl
        HTTPException(403): targetUrl points at a local network host
        HTTPException(500): Screenshot service not configured
        HTTPException(*): Upstream failure, with the upstream status
    """
    return await screenshot_service.capture(request or ScreenshotRequest())


@router.post("/upload", response_model=UploadUrlResponse)
@handle_annotation_errors
async def create_upload_url(
    request: UploadUrlRequest | None = None,
    screenshot_service: ScreenshotService = Depends(get_screenshot_service),
) -> UploadUrlResponse:
    """Issue a presigned PUT URL under {folder}/{uuid}.jpg."""
    return await screenshot_service.create_upload_url(request or UploadUrlRequest())
