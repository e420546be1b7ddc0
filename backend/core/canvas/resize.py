"""
Resizing an area comment by one of its four corner handles.

Dependencies: backend.core.canvas.geometry
System role: Resize controller for area comments
"""

import enum
import uuid
from dataclasses import dataclass

from backend.core.canvas.geometry import Frame, PointerEvent, SurfaceRect

MIN_AREA_SIZE = 0.02


class ResizeHandle(str, enum.Enum):
    """Corner being dragged."""

    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"
    BOTTOM_LEFT = "bl"
    BOTTOM_RIGHT = "br"


def resize_frame(frame: Frame, handle: ResizeHandle, dx: float, dy: float) -> Frame:
    """
    Apply a corner drag to an area.

    The corner opposite to the handle stays fixed.

    Args:
        frame: Area frame at gesture start
        handle: Corner being dragged
        dx, dy: Pointer movement since gesture start, as surface fractions

    Returns:
        Frame: Resized frame (not validated)
    """
    if not frame.is_area:
        raise ValueError("Only area comments can be resized")

    pos_x, pos_y, width, height = frame.pos_x, frame.pos_y, frame.width, frame.height
    if handle == ResizeHandle.TOP_LEFT:
        pos_x, pos_y, width, height = pos_x + dx, pos_y + dy, width - dx, height - dy
    elif handle == ResizeHandle.TOP_RIGHT:
        pos_y, width, height = pos_y + dy, width + dx, height - dy
    elif handle == ResizeHandle.BOTTOM_LEFT:
        pos_x, width, height = pos_x + dx, width - dx, height + dy
    elif handle == ResizeHandle.BOTTOM_RIGHT:
        width, height = width + dx, height + dy
    return Frame(pos_x, pos_y, width, height)


def is_valid_area(frame: Frame, min_size: float = MIN_AREA_SIZE) -> bool:
    return frame.is_area and frame.width > min_size and frame.height > min_size


@dataclass
class ResizeGesture:
    """
    An in-flight resize of one area.

    last_valid only ever holds frames larger than min_size on both axes; a
    pointer position producing a smaller frame leaves it untouched.
    """

    comment_id: uuid.UUID
    handle: ResizeHandle
    start_client: tuple[float, float]
    origin: Frame
    rect: SurfaceRect
    last_valid: Frame
    min_size: float = MIN_AREA_SIZE

    @classmethod
    def start(
        cls,
        comment_id: uuid.UUID,
        handle: ResizeHandle,
        frame: Frame,
        event: PointerEvent,
        rect: SurfaceRect,
        min_size: float = MIN_AREA_SIZE,
    ) -> "ResizeGesture":
        if not frame.is_area:
            raise ValueError("Only area comments can be resized")
        return cls(comment_id, ResizeHandle(handle), event.client_position, frame, rect, frame, min_size)

    def candidate(self, event: PointerEvent) -> Frame:
        client_x, client_y = event.client_position
        dx = (client_x - self.start_client[0]) / self.rect.width
        dy = (client_y - self.start_client[1]) / self.rect.height
        resized = resize_frame(self.origin, self.handle, dx, dy)
        if is_valid_area(resized, self.min_size):
            self.last_valid = resized
        return self.last_valid
