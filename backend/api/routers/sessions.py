"""
Session API endpoints.

Routes:
- POST /sessions - Create session for a target URL
- GET /sessions - List sessions
- GET /sessions/{id} - Get session
- PATCH /sessions/{id} - Update canvas height / screenshot URLs
- POST /sessions/{id}/canvas/extend - Grow the canvas by one increment
- DELETE /sessions/{id} - Delete session and its comments

Dependencies: backend.application.services.session_service, backend.models
System role: Session management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from backend.api.deps import get_session_service
from backend.api.routers.router_utils import handle_annotation_errors
from backend.application.services.session_service import SessionService
from backend.models.session import AnnotationSession, CreateSessionRequest, UpdateSessionRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=AnnotationSession, status_code=status.HTTP_201_CREATED)
@handle_annotation_errors
async def create_session(
    request: CreateSessionRequest | None = None,
    session_service: SessionService = Depends(get_session_service),
) -> AnnotationSession:
    """
    Create a session for a public http(s) URL.

    Raises:
        HTTPException(400): Missing or malformed targetUrl
        HTTPException(403): targetUrl points at a local network host
    """
    target_url = request.target_url if request else None
    return await session_service.create_session(target_url)


@router.get("", response_model=list[AnnotationSession])
@handle_annotation_errors
async def list_sessions(
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    session_service: SessionService = Depends(get_session_service),
) -> list[AnnotationSession]:
    """List sessions, newest first."""
    return await session_service.list_sessions(limit=limit, offset=offset)


@router.get("/{session_id}", response_model=AnnotationSession)
@handle_annotation_errors
async def get_session(
    session_id: UUID,
    session_service: SessionService = Depends(get_session_service),
) -> AnnotationSession:
    return await session_service.get_session(session_id)


@router.patch("/{session_id}", response_model=AnnotationSession)
@handle_annotation_errors
async def update_session(
    session_id: UUID,
    request: UpdateSessionRequest,
    session_service: SessionService = Depends(get_session_service),
) -> AnnotationSession:
    """Partially update a session; omitted fields are left untouched."""
    return await session_service.update_session(session_id, request)


@router.post("/{session_id}/canvas/extend", response_model=AnnotationSession)
@handle_annotation_errors
async def extend_canvas(
    session_id: UUID,
    session_service: SessionService = Depends(get_session_service),
) -> AnnotationSession:
    return await session_service.extend_canvas(session_id)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_annotation_errors
async def delete_session(
    session_id: UUID,
    session_service: SessionService = Depends(get_session_service),
) -> None:
    """
    Delete a session and all of its comments.

    Raises:
        HTTPException(404): Session not found
    """
    await session_service.delete_session(session_id)
