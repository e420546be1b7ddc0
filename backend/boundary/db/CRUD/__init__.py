"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import session_crud, comment_crud

    session = await session_crud.get_by_id(db, session_id)
    comments = await comment_crud.list_by_session(db, session_id)
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from backend.boundary.db.CRUD.comment_crud import CommentCRUD, comment_crud

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "session_crud",
    "CommentCRUD",
    "comment_crud",
]
