"""
Application adapters.

Exports: ServiceCommentGateway
"""

from .comment_gateway import ServiceCommentGateway

__all__ = ["ServiceCommentGateway"]
