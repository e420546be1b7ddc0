"""
Which comments are shown on the canvas and in the sidebar.

Dependencies: backend.models.comment
System role: Visibility and filtering rules
"""

from dataclasses import dataclass
from typing import Iterable

from backend.models.comment import (
    Comment,
    CommentCategory,
    CommentFilterParams,
    CommentStatus,
    CompletionFilter,
    Viewport,
)


def is_completed(comment: Comment) -> bool:
    return comment.status == CommentStatus.COMPLETED or comment.is_completed


def is_visible_on_canvas(comment: Comment, viewport: Viewport) -> bool:
    """Canvas shows open comments authored against the active viewport."""
    return comment.effective_viewport == viewport and not is_completed(comment)


def visible_comments(comments: Iterable[Comment], viewport: Viewport) -> list[Comment]:
    return [c for c in comments if is_visible_on_canvas(c, viewport)]


def split_pins_and_areas(comments: Iterable[Comment]) -> tuple[list[Comment], list[Comment]]:
    pins: list[Comment] = []
    areas: list[Comment] = []
    for comment in comments:
        (areas if comment.is_area else pins).append(comment)
    return pins, areas


@dataclass(frozen=True)
class SidebarFilter:
    """
    Conjunctive filter for the comment list.

    None on category, status or viewport means "any". The completion
    criterion defaults to open comments only; COMPLETED inverts it for
    reviewing finished work.
    """

    category: CommentCategory | None = None
    status: CommentStatus | None = None
    viewport: Viewport | None = None
    completion: CompletionFilter = CompletionFilter.OPEN

    def matches(self, comment: Comment) -> bool:
        done = is_completed(comment)
        if self.completion == CompletionFilter.OPEN and done:
            return False
        if self.completion == CompletionFilter.COMPLETED and not done:
            return False
        if self.category is not None and comment.category != self.category:
            return False
        if self.status is not None and comment.status != self.status:
            return False
        if self.viewport is not None and comment.effective_viewport != self.viewport:
            return False
        return True

    def apply(self, comments: Iterable[Comment]) -> list[Comment]:
        return [c for c in comments if self.matches(c)]

    @classmethod
    def from_params(cls, params: CommentFilterParams) -> "SidebarFilter":
        return cls(
            category=params.category,
            status=params.status,
            viewport=params.viewport,
            completion=params.completion,
        )
