"""
HTTP clients for the annotation REST API.

Exports: HttpCommentGateway
"""

from .comment_gateway import HttpCommentGateway

__all__ = ["HttpCommentGateway"]
