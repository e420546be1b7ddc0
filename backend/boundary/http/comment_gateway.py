"""
Comment gateway speaking to the annotation REST API.

Lets an annotation canvas run in a separate process from the backend.

Dependencies: httpx
System role: Remote CommentGateway implementation
"""

import uuid

import httpx

from backend.models.comment import Comment, CommentDraft, CommentListResponse, CommentUpdate


class HttpCommentGateway:
    """
    CommentGateway over /api/v1.

    Non-2xx answers raise httpx.HTTPStatusError; the canvas treats any
    exception as a failed commit.
    """

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None, timeout: float = 10.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_comments(self, session_id: uuid.UUID) -> list[Comment]:
        response = await self._client.get(f"{self._base_url}/sessions/{session_id}/comments")
        response.raise_for_status()
        return CommentListResponse.model_validate(response.json()).comments

    async def create_comment(self, session_id: uuid.UUID, draft: CommentDraft) -> Comment:
        response = await self._client.post(
            f"{self._base_url}/sessions/{session_id}/comments",
            json=draft.model_dump(mode="json", by_alias=True),
        )
        response.raise_for_status()
        return Comment.model_validate(response.json())

    async def update_comment(self, comment_id: uuid.UUID, changes: CommentUpdate) -> Comment:
        response = await self._client.patch(
            f"{self._base_url}/comments/{comment_id}",
            json=changes.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        response.raise_for_status()
        return Comment.model_validate(response.json())
