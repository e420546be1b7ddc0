"""
Add-comment gesture: click places a pin, drag places an area.

State machine: IDLE -> DRAGGING -> PENDING_SAVE -> IDLE.

Dependencies: backend.core.canvas.geometry
System role: Gesture classifier for new comment placement
"""

import enum

from backend.core.canvas.geometry import Frame, NormalizedPoint

PIN_THRESHOLD = 0.01


class AddGestureState(str, enum.Enum):
    """Phases of placing a new comment."""

    IDLE = "idle"
    DRAGGING = "dragging"
    PENDING_SAVE = "pending_save"


def classify_placement(
    start: NormalizedPoint,
    end: NormalizedPoint,
    threshold: float = PIN_THRESHOLD,
) -> Frame:
    """
    Turn a press/release pair into a pin or an area.

    Args:
        start: Point where the pointer went down
        end: Point where the pointer was released
        threshold: Movement below this fraction on both axes counts as a click

    Returns:
        Frame: A pin at start, or an area anchored at the top-left corner of
        the dragged rectangle
    """
    width = abs(end.x - start.x)
    height = abs(end.y - start.y)
    if width < threshold and height < threshold:
        return Frame(start.x, start.y)
    return Frame(min(start.x, end.x), min(start.y, end.y), width, height)


class AddGesture:
    """Tracks one add-comment gesture from pointer-down until save or cancel."""

    def __init__(self, threshold: float = PIN_THRESHOLD) -> None:
        self.threshold = threshold
        self.state = AddGestureState.IDLE
        self.start: NormalizedPoint | None = None
        self.end: NormalizedPoint | None = None
        self.placement: Frame | None = None

    def begin(self, point: NormalizedPoint) -> None:
        if self.state != AddGestureState.IDLE:
            raise RuntimeError(f"Cannot start a new placement while {self.state.value}")
        self.state = AddGestureState.DRAGGING
        self.start = point
        self.end = point

    def update(self, point: NormalizedPoint) -> None:
        if self.state == AddGestureState.DRAGGING:
            self.end = point

    def finish(self) -> Frame | None:
        """Classify the drag and wait for the composer; None if not dragging."""
        if self.state != AddGestureState.DRAGGING or self.start is None or self.end is None:
            return None
        self.placement = classify_placement(self.start, self.end, self.threshold)
        self.state = AddGestureState.PENDING_SAVE
        self.start = None
        self.end = None
        return self.placement

    def reset(self) -> None:
        """Return to IDLE, discarding any pending placement."""
        self.state = AddGestureState.IDLE
        self.start = None
        self.end = None
        self.placement = None

    @property
    def preview(self) -> Frame | None:
        """Rectangle spanned by the drag so far, for live feedback."""
        if self.state != AddGestureState.DRAGGING or self.start is None or self.end is None:
            return None
        return Frame(
            min(self.start.x, self.end.x),
            min(self.start.y, self.end.y),
            abs(self.end.x - self.start.x),
            abs(self.end.y - self.start.y),
        )
