"""
Annotation error handling utilities.

Provides a decorator for consistent error handling across the annotation
API endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from backend.core.exceptions import (
    AccessRestrictedError,
    AnnotationException,
    CommentNotFoundError,
    ScreenshotServiceError,
    SessionNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_annotation_errors(func: F) -> F:
    """
    Decorator to transform domain exceptions into HTTPExceptions.

    This centralizes:
    - Logging of errors with their context
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except (SessionNotFoundError, CommentNotFoundError) as e:
            logger.warning("Resource not found", extra={"error": str(e), **e.details})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except AccessRestrictedError as e:
            logger.warning("Restricted target rejected", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)

        except ScreenshotServiceError as e:
            logger.error(
                "Screenshot service failure",
                extra={"status_code": e.status_code, "error": e.error},
            )
            raise HTTPException(
                status_code=e.status_code,
                detail={"error": e.error, "details": e.upstream_details},
            )

        except AnnotationException as e:
            logger.error("Annotation operation failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in annotation operation",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred: {str(e)}",
            )

    return wrapper  # type: ignore
