"""
Database models package.

Exports:
  - SessionModel: Annotation session ORM model
  - CommentModel: Comment ORM model

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from backend.boundary.db.models.session_model import SessionModel
from backend.boundary.db.models.comment_model import CommentModel

__all__ = [
    "SessionModel",
    "CommentModel",
]
