"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - SessionModel, CommentModel: Annotation entities
  - session_crud, comment_crud: CRUD operation singletons

Dependencies: sqlalchemy, backend.configs
System role: Database adapter behind the SQL repository
"""

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from backend.boundary.db.models import CommentModel, SessionModel
from backend.boundary.db.CRUD import (
    BaseCRUD,
    CommentCRUD,
    SessionCRUD,
    comment_crud,
    session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "SessionModel",
    "CommentModel",
    # CRUD
    "BaseCRUD",
    "SessionCRUD",
    "CommentCRUD",
    "session_crud",
    "comment_crud",
]
