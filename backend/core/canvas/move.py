"""
Dragging an existing pin or area to a new position.

Dependencies: backend.core.canvas.geometry
System role: Move controller for existing comments
"""

import uuid
from dataclasses import dataclass

from backend.core.canvas.geometry import Frame, PointerEvent, SurfaceRect


@dataclass
class MoveGesture:
    """
    An in-flight move of one comment.

    The surface rectangle is measured once at gesture start and reused for
    every pointer-move of the gesture.
    """

    comment_id: uuid.UUID
    start_client: tuple[float, float]
    origin: Frame
    rect: SurfaceRect

    @classmethod
    def start(cls, comment_id: uuid.UUID, frame: Frame, event: PointerEvent, rect: SurfaceRect) -> "MoveGesture":
        return cls(comment_id, event.client_position, frame, rect)

    def delta(self, event: PointerEvent) -> tuple[float, float]:
        client_x, client_y = event.client_position
        return (
            (client_x - self.start_client[0]) / self.rect.width,
            (client_y - self.start_client[1]) / self.rect.height,
        )

    def candidate(self, event: PointerEvent) -> Frame:
        dx, dy = self.delta(event)
        return self.origin.moved_to(self.origin.pos_x + dx, self.origin.pos_y + dy)
