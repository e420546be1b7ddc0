"""
Comment API endpoints.

Routes:
- GET /sessions/{id}/comments - List comments (optional filters)
- POST /sessions/{id}/comments - Create pin or area comment
- PATCH /sessions/{id}/comments/{commentId} - Partial update
- GET /sessions/{id}/comments/export - Download as csv, markdown or json
- PATCH /comments/{commentId} - Partial update without session scope

Dependencies: backend.application.services.comment_service, backend.models
System role: Comment HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from backend.api.deps import get_comment_service
from backend.api.routers.router_utils import handle_annotation_errors
from backend.application.services.comment_service import CommentService
from backend.models.comment import (
    Comment,
    CommentCategory,
    CommentDraft,
    CommentFilterParams,
    CommentListResponse,
    CommentStatus,
    CommentUpdate,
    CompletionFilter,
    Viewport,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions/{session_id}/comments", tags=["comments"])
comment_router = APIRouter(prefix="/comments", tags=["comments"])

_EXTENSIONS = {"csv": "csv", "markdown": "md", "json": "json"}


def get_filter_params(
    viewport: Viewport | None = Query(default=None),
    category: CommentCategory | None = Query(default=None),
    status: CommentStatus | None = Query(default=None),
    completion: CompletionFilter = Query(default=CompletionFilter.ALL),
) -> CommentFilterParams:
    """Comment list filter from query parameters; all criteria are ANDed."""
    return CommentFilterParams(
        viewport=viewport,
        category=category,
        status=status,
        completion=completion,
    )


@router.get("", response_model=CommentListResponse)
@handle_annotation_errors
async def list_comments(
    session_id: UUID,
    filters: CommentFilterParams = Depends(get_filter_params),
    comment_service: CommentService = Depends(get_comment_service),
) -> CommentListResponse:
    """List a session's comments in creation order."""
    comments = await comment_service.list_comments(session_id, filters)
    return CommentListResponse(comments=comments)


@router.post("", response_model=Comment, status_code=status.HTTP_201_CREATED)
@handle_annotation_errors
async def create_comment(
    session_id: UUID,
    draft: CommentDraft,
    comment_service: CommentService = Depends(get_comment_service),
) -> Comment:
    """
    Create a pin (no size) or an area (width and height) comment.

    Raises:
        HTTPException(400): Missing message or position
        HTTPException(404): Session not found
    """
    return await comment_service.create_comment(session_id, draft)


@router.get("/export")
@handle_annotation_errors
async def export_comments(
    session_id: UUID,
    format: str = Query(default="markdown"),
    filters: CommentFilterParams = Depends(get_filter_params),
    comment_service: CommentService = Depends(get_comment_service),
) -> Response:
    """Download a session's comments as an attachment."""
    body, media_type = await comment_service.export_comments(session_id, format, filters)
    filename = f"comments-{session_id}.{_EXTENSIONS[format.lower()]}"
    return Response(
        content=body,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.patch("/{comment_id}", response_model=Comment)
@handle_annotation_errors
async def update_session_comment(
    session_id: UUID,
    comment_id: UUID,
    changes: CommentUpdate,
    comment_service: CommentService = Depends(get_comment_service),
) -> Comment:
    """
    Partially update a comment of this session.

    Raises:
        HTTPException(404): Comment missing or owned by another session
    """
    return await comment_service.update_comment(comment_id, changes, session_id=session_id)


@comment_router.patch("/{comment_id}", response_model=Comment)
@handle_annotation_errors
async def update_comment(
    comment_id: UUID,
    changes: CommentUpdate,
    comment_service: CommentService = Depends(get_comment_service),
) -> Comment:
    return await comment_service.update_comment(comment_id, changes)
