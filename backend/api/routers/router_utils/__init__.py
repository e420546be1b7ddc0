"""Shared helpers for API routers."""

from .error_handling import handle_annotation_errors

__all__ = ["handle_annotation_errors"]
