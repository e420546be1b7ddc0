"""
Coordinate mapping between pointer events and the annotation surface.

All comment geometry is stored as fractions of the surface size. Values are
not clamped here: a drag that leaves the surface produces coordinates outside
[0, 1] until the gesture is committed.

Dependencies: dataclasses (stdlib)
System role: Coordinate mapper for the annotation canvas
"""

from dataclasses import dataclass, replace

from backend.models.comment import Comment


@dataclass(frozen=True)
class TouchPoint:
    """One active touch contact, in client (viewport) pixels."""

    client_x: float
    client_y: float


@dataclass(frozen=True)
class PointerEvent:
    """
    Mouse or touch input in client pixels.

    For touch input the first entry of touches is the primary contact and
    wins over client_x/client_y.
    """

    client_x: float = 0.0
    client_y: float = 0.0
    touches: tuple[TouchPoint, ...] = ()

    @property
    def client_position(self) -> tuple[float, float]:
        if self.touches:
            primary = self.touches[0]
            return primary.client_x, primary.client_y
        return self.client_x, self.client_y


@dataclass(frozen=True)
class SurfaceRect:
    """Bounding rectangle of the annotation surface in client pixels."""

    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Annotation surface must have a positive size")


@dataclass(frozen=True)
class NormalizedPoint:
    """Point expressed as fractions of the surface width and height."""

    x: float
    y: float


def to_normalized(event: PointerEvent, rect: SurfaceRect) -> NormalizedPoint:
    """
    Map a pointer event onto the surface.

    Args:
        event: Mouse or touch event
        rect: Surface bounding rectangle

    Returns:
        NormalizedPoint: ((clientX - left) / width, (clientY - top) / height)
    """
    client_x, client_y = event.client_position
    return NormalizedPoint(
        x=(client_x - rect.left) / rect.width,
        y=(client_y - rect.top) / rect.height,
    )


def to_client(point: NormalizedPoint, rect: SurfaceRect) -> tuple[float, float]:
    """Inverse of to_normalized."""
    return rect.left + point.x * rect.width, rect.top + point.y * rect.height


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Frame:
    """
    Position and optional size of a comment.

    A frame with width and height is an area; without them it is a pin.
    """

    pos_x: float
    pos_y: float
    width: float | None = None
    height: float | None = None

    @property
    def is_area(self) -> bool:
        return self.width is not None and self.height is not None

    @classmethod
    def from_comment(cls, comment: Comment) -> "Frame":
        return cls(comment.pos_x, comment.pos_y, comment.width, comment.height)

    def moved_to(self, pos_x: float, pos_y: float) -> "Frame":
        return replace(self, pos_x=pos_x, pos_y=pos_y)

    def clamped(self) -> "Frame":
        """Keep the anchor on the surface and an area's far edges inside it."""
        pos_x = _clamp(self.pos_x)
        pos_y = _clamp(self.pos_y)
        if not self.is_area:
            return Frame(pos_x, pos_y)
        right = _clamp(self.pos_x + self.width)
        bottom = _clamp(self.pos_y + self.height)
        return Frame(pos_x, pos_y, right - pos_x, bottom - pos_y)

    def clamped_position(self) -> "Frame":
        """Shift the anchor so the whole frame lies on the surface; size is kept."""
        if not self.is_area:
            return self.moved_to(_clamp(self.pos_x), _clamp(self.pos_y))
        return self.moved_to(
            _clamp(self.pos_x, high=max(0.0, 1.0 - self.width)),
            _clamp(self.pos_y, high=max(0.0, 1.0 - self.height)),
        )

    def as_fields(self) -> dict:
        """Comment field values for this frame (pins omit width/height)."""
        fields = {"pos_x": self.pos_x, "pos_y": self.pos_y}
        if self.is_area:
            fields["width"] = self.width
            fields["height"] = self.height
        return fields
