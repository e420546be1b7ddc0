"""
Exception hierarchy for the annotation backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class AnnotationException(Exception):
    """Base exception for all annotation application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(AnnotationException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class AccessRestrictedError(AnnotationException):
    """Raised when a target URL points at a loopback or private network host."""

    def __init__(self, hostname: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["hostname"] = hostname
        super().__init__("Access to local network is restricted", details)


class SessionNotFoundError(AnnotationException):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        super().__init__(f"Session not found: {session_id}", details)


class CommentNotFoundError(AnnotationException):
    """Raised when a comment cannot be found within its session."""

    def __init__(self, comment_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["comment_id"] = comment_id
        super().__init__(f"Comment not found: {comment_id}", details)


class ScreenshotServiceError(AnnotationException):
    """Raised when the screenshot microservice answers with an error."""

    def __init__(
        self,
        error: str,
        status_code: int = 500,
        upstream_details: str | None = None,
    ) -> None:
        """
        Initialize screenshot service error.

        Args:
            error: Error message reported by the service
            status_code: HTTP status the service answered with
            upstream_details: Diagnostic detail reported by the service
        """
        self.error = error
        self.status_code = status_code
        self.upstream_details = upstream_details
        details = {"status_code": status_code}
        if upstream_details:
            details["details"] = upstream_details
        super().__init__(error, details)


class ScreenshotServiceNotConfiguredError(AnnotationException):
    """Raised when no screenshot service URL is configured."""

    def __init__(self) -> None:
        super().__init__(
            "Screenshot service not configured. Please set SCREENSHOT_SERVICE_URL environment variable."
        )


class StorageError(AnnotationException):
    """Raised when a repository or object storage operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (create, update, delete, upload)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
