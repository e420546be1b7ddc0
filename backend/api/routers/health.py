"""
Health check API endpoints.

Routes: GET /health, GET /health/storage

Dependencies: backend.boundary.repositories
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from backend.api.deps import get_repositories_dependency
from backend.boundary.repositories import Repositories

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/storage", response_model=HealthResponse)
async def health_check_storage(
    repositories: Repositories = Depends(get_repositories_dependency),
) -> HealthResponse:
    """Storage backend health check: one cheap read through the session repository."""
    try:
        await repositories.sessions.list(limit=1)
    except Exception as e:
        logger.error("Storage health check failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Storage unavailable: {str(e)}",
        )
    return HealthResponse(status="healthy", message="Storage accessible")
