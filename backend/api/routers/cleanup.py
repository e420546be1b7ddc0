"""
Retention sweep endpoint.

Routes: POST /cleanup

Dependencies: backend.application.services.cleanup_service
System role: Triggers deletion of sessions past the retention window
"""

from fastapi import APIRouter, Depends

from backend.api.deps import get_cleanup_service
from backend.api.routers.router_utils import handle_annotation_errors
from backend.application.services.cleanup_service import CleanupService
from backend.models.screenshot import CleanupResponse

router = APIRouter(prefix="/cleanup", tags=["cleanup"])


@router.post("", response_model=CleanupResponse)
@handle_annotation_errors
async def run_cleanup(
    cleanup_service: CleanupService = Depends(get_cleanup_service),
) -> CleanupResponse:
    return await cleanup_service.run()
