"""
Annotation canvas interaction controller.

Owns the local view of a session's comments and turns pointer input into
comment placements, moves and resizes. Drag feedback is applied to a local
candidate frame immediately; the comment store only sees the final frame at
pointer-up. When that commit fails the candidate is dropped and the comment
falls back to its last confirmed frame.

Dependencies: backend.core.canvas, backend.models.comment
System role: Client-side annotation state machine
"""

import logging
import uuid
from typing import Callable

from backend.core.canvas.gateway import CommentGateway
from backend.core.canvas.geometry import Frame, PointerEvent, SurfaceRect, to_normalized
from backend.core.canvas.gestures import PIN_THRESHOLD, AddGesture, AddGestureState
from backend.core.canvas.move import MoveGesture
from backend.core.canvas.popover import PopoverPlacement, place_popover
from backend.core.canvas.resize import MIN_AREA_SIZE, ResizeGesture, ResizeHandle, is_valid_area
from backend.core.canvas.visibility import split_pins_and_areas, visible_comments
from backend.models.comment import (
    Comment,
    CommentCategory,
    CommentDraft,
    CommentStatus,
    CommentUpdate,
    Viewport,
)

logger = logging.getLogger(__name__)

SelectionListener = Callable[[uuid.UUID | None], None]
ViewportListener = Callable[[Viewport], None]
CanvasHeightListener = Callable[[int], None]
ErrorListener = Callable[[str, Exception], None]


class AnnotationCanvas:
    """
    Pointer-driven annotation controller for one session.

    Pointer handlers take the surface bounding rectangle as measured by the
    host UI at the time of the event.

    Attributes:
        session_id: Session whose comments are displayed
        viewport: Active viewport mode; only comments authored against it show
        pin_mode: Whether pointer input creates and edits comments
        active_comment_id: Comment whose detail popover is open
        canvas_height: Virtual canvas height in px
    """

    def __init__(
        self,
        session_id: uuid.UUID,
        gateway: CommentGateway,
        viewport: Viewport = Viewport.DESKTOP,
        canvas_height: int = 3000,
        canvas_height_increment: int = 500,
        pin_threshold: float = PIN_THRESHOLD,
        min_area_size: float = MIN_AREA_SIZE,
    ) -> None:
        self.session_id = session_id
        self.gateway = gateway
        self.viewport = viewport
        self.canvas_height = canvas_height
        self.canvas_height_increment = canvas_height_increment
        self.min_area_size = min_area_size
        self.pin_mode = False
        self.active_comment_id: uuid.UUID | None = None

        self._comments: dict[uuid.UUID, Comment] = {}
        self._candidates: dict[uuid.UUID, Frame] = {}
        self._add = AddGesture(threshold=pin_threshold)
        self._move: MoveGesture | None = None
        self._resize: ResizeGesture | None = None

        self._selection_listeners: list[SelectionListener] = []
        self._viewport_listeners: list[ViewportListener] = []
        self._height_listeners: list[CanvasHeightListener] = []
        self._error_listeners: list[ErrorListener] = []

    # Listeners

    def on_selection_change(self, listener: SelectionListener) -> None:
        self._selection_listeners.append(listener)

    def on_viewport_change(self, listener: ViewportListener) -> None:
        self._viewport_listeners.append(listener)

    def on_canvas_extend(self, listener: CanvasHeightListener) -> None:
        self._height_listeners.append(listener)

    def on_error(self, listener: ErrorListener) -> None:
        self._error_listeners.append(listener)

    def _notify_error(self, message: str, exc: Exception) -> None:
        for listener in self._error_listeners:
            listener(message, exc)

    # Data

    async def load(self) -> list[Comment]:
        """Replace the local view with the store's comments."""
        comments = await self.gateway.list_comments(self.session_id)
        self._comments = {c.id: c for c in comments}
        self._candidates.clear()
        logger.info(
            "Canvas comments loaded",
            extra={"session_id": str(self.session_id), "count": len(comments)},
        )
        return comments

    def frame_of(self, comment_id: uuid.UUID) -> Frame:
        """Displayed frame: the drag candidate if any, else the confirmed one."""
        if comment_id in self._candidates:
            return self._candidates[comment_id]
        return Frame.from_comment(self._comments[comment_id])

    def confirmed(self, comment_id: uuid.UUID) -> Comment:
        return self._comments[comment_id]

    @property
    def comments(self) -> list[Comment]:
        """All comments as displayed, candidate frames applied."""
        displayed = []
        for comment_id, comment in self._comments.items():
            candidate = self._candidates.get(comment_id)
            if candidate is not None:
                comment = comment.model_copy(update=candidate.as_fields())
            displayed.append(comment)
        return displayed

    def visible_comments(self) -> list[Comment]:
        return visible_comments(self.comments, self.viewport)

    def pins_and_areas(self) -> tuple[list[Comment], list[Comment]]:
        return split_pins_and_areas(self.visible_comments())

    # Modes and selection

    def set_pin_mode(self, enabled: bool) -> None:
        if not enabled:
            self._add.reset()
            self._move = None
            self._resize = None
            self._candidates.clear()
        self.pin_mode = enabled

    def select(self, comment_id: uuid.UUID | None) -> None:
        if comment_id is not None and comment_id not in self._comments:
            raise KeyError(comment_id)
        if comment_id == self.active_comment_id:
            return
        self.active_comment_id = comment_id
        for listener in self._selection_listeners:
            listener(comment_id)

    def toggle_selection(self, comment_id: uuid.UUID) -> None:
        self.select(None if self.active_comment_id == comment_id else comment_id)

    def request_viewport(self, viewport: Viewport) -> None:
        """Ask the host UI to switch viewport mode."""
        viewport = Viewport(viewport)
        for listener in self._viewport_listeners:
            listener(viewport)

    def set_viewport(self, viewport: Viewport) -> None:
        """Apply a viewport switch; in-flight gestures belong to the old mode."""
        viewport = Viewport(viewport)
        if viewport == self.viewport:
            return
        self._add.reset()
        self._move = None
        self._resize = None
        self._candidates.clear()
        if self.active_comment_id is not None:
            self.select(None)
        self.viewport = viewport

    def request_canvas_extension(self) -> int:
        """Ask the host UI to grow the canvas; returns the requested height."""
        requested = self.canvas_height + self.canvas_height_increment
        for listener in self._height_listeners:
            listener(requested)
        return requested

    def set_canvas_height(self, height: int) -> None:
        self.canvas_height = height

    # Add flow

    @property
    def add_state(self) -> AddGestureState:
        return self._add.state

    @property
    def pending_placement(self) -> Frame | None:
        return self._add.placement

    @property
    def drag_preview(self) -> Frame | None:
        return self._add.preview

    def pointer_down(self, event: PointerEvent, rect: SurfaceRect) -> bool:
        """
        Pointer pressed on the empty surface.

        Returns:
            bool: True when a placement drag started
        """
        if not self.pin_mode:
            return False
        if self.active_comment_id is not None:
            # First click only closes the open popover
            self.select(None)
            return False
        if self._add.state != AddGestureState.IDLE:
            return False
        self._add.begin(to_normalized(event, rect))
        return True

    def pointer_move(self, event: PointerEvent, rect: SurfaceRect) -> None:
        if self._add.state == AddGestureState.DRAGGING:
            self._add.update(to_normalized(event, rect))
        if self._move is not None:
            self._candidates[self._move.comment_id] = self._move.candidate(event)
        if self._resize is not None:
            self._candidates[self._resize.comment_id] = self._resize.candidate(event)

    async def pointer_up(self, event: PointerEvent, rect: SurfaceRect) -> Comment | Frame | None:
        """
        Pointer released anywhere over the surface.

        Returns:
            The pending placement when an add drag finished, the updated
            comment when a move or resize was committed, otherwise None
        """
        if self._add.state == AddGestureState.DRAGGING:
            self._add.update(to_normalized(event, rect))
            return self._add.finish()
        if self._move is not None:
            gesture, self._move = self._move, None
            return await self._commit_move(gesture.comment_id, gesture.candidate(event))
        if self._resize is not None:
            gesture, self._resize = self._resize, None
            return await self._commit_resize(gesture.comment_id, gesture.candidate(event))
        return None

    def cancel(self) -> None:
        """Discard the pending placement or drag and return to IDLE."""
        self._add.reset()
        for gesture in (self._move, self._resize):
            if gesture is not None:
                self._candidates.pop(gesture.comment_id, None)
        self._move = None
        self._resize = None

    async def save(
        self,
        message: str,
        author_name: str | None = None,
        category: CommentCategory = CommentCategory.CODING,
        status: CommentStatus = CommentStatus.PENDING,
    ) -> Comment | None:
        """
        Create a comment at the pending placement.

        Returns:
            Comment: The stored comment, appended to the local view; None when
            nothing is pending or the store rejected the request (the
            placement stays pending so the user can retry or cancel)

        Raises:
            pydantic.ValidationError: If the message is empty
        """
        if self._add.state != AddGestureState.PENDING_SAVE or self._add.placement is None:
            return None

        frame = self._add.placement.clamped()
        draft = CommentDraft(
            message=message,
            author_name=author_name or None,
            category=category,
            status=status,
            viewport=self.viewport,
            **frame.as_fields(),
        )
        try:
            created = await self.gateway.create_comment(self.session_id, draft)
        except Exception as e:
            logger.exception(
                "Failed to save comment",
                extra={"session_id": str(self.session_id), "error": str(e)},
            )
            self._notify_error("Failed to save comment", e)
            return None

        self._comments[created.id] = created
        self._add.reset()
        return created

    # Move / resize

    def begin_move(self, comment_id: uuid.UUID, event: PointerEvent, rect: SurfaceRect) -> bool:
        if not self.pin_mode or comment_id not in self._comments:
            return False
        self._move = MoveGesture.start(comment_id, self.frame_of(comment_id), event, rect)
        return True

    def begin_resize(
        self,
        comment_id: uuid.UUID,
        handle: ResizeHandle,
        event: PointerEvent,
        rect: SurfaceRect,
    ) -> bool:
        if not self.pin_mode or comment_id not in self._comments:
            return False
        frame = self.frame_of(comment_id)
        if not frame.is_area:
            return False
        self._resize = ResizeGesture.start(
            comment_id, handle, frame, event, rect, min_size=self.min_area_size
        )
        return True

    @property
    def moving_comment_id(self) -> uuid.UUID | None:
        return self._move.comment_id if self._move else None

    @property
    def resizing_comment_id(self) -> uuid.UUID | None:
        return self._resize.comment_id if self._resize else None

    async def _commit_move(self, comment_id: uuid.UUID, candidate: Frame) -> Comment | None:
        if candidate == Frame.from_comment(self._comments[comment_id]):
            self._candidates.pop(comment_id, None)
            return None

        frame = candidate.clamped_position()
        return await self._send_update(
            comment_id, frame, CommentUpdate(pos_x=frame.pos_x, pos_y=frame.pos_y)
        )

    async def _commit_resize(self, comment_id: uuid.UUID, candidate: Frame) -> Comment | None:
        if candidate == Frame.from_comment(self._comments[comment_id]):
            self._candidates.pop(comment_id, None)
            return None

        frame = candidate.clamped()
        if not is_valid_area(frame, self.min_area_size):
            logger.info(
                "Discarding resize squeezed below minimum size at the surface edge",
                extra={"comment_id": str(comment_id)},
            )
            self._candidates.pop(comment_id, None)
            return None
        return await self._send_update(comment_id, frame, CommentUpdate(**frame.as_fields()))

    async def _send_update(self, comment_id: uuid.UUID, frame: Frame, changes: CommentUpdate) -> Comment | None:
        self._candidates[comment_id] = frame
        try:
            updated = await self.gateway.update_comment(comment_id, changes)
        except Exception as e:
            logger.exception(
                "Failed to update comment position",
                extra={"comment_id": str(comment_id), "error": str(e)},
            )
            self._candidates.pop(comment_id, None)
            self._notify_error("Failed to update comment", e)
            return None

        self._comments[comment_id] = updated
        self._candidates.pop(comment_id, None)
        return updated

    # Layout

    def popover_placement(self, comment_id: uuid.UUID | None = None) -> PopoverPlacement | None:
        """Placement for a comment's popover, or for the pending composer."""
        if comment_id is None:
            if self._add.placement is None:
                return None
            return place_popover(self._add.placement)
        return place_popover(self.frame_of(comment_id))
