"""
Placement of the detail popover next to a pin or area.

Pure layout policy: the popover opens to the right of its anchor unless the
anchor sits far enough right that it would overflow, in which case its right
edge is pinned to the anchor instead. Areas open the popover below the
rectangle.

Dependencies: backend.core.canvas.geometry
System role: Popover layout policy
"""

from dataclasses import dataclass

from backend.core.canvas.geometry import Frame

PIN_FLIP_THRESHOLD = 0.7
AREA_FLIP_THRESHOLD = 0.6


@dataclass(frozen=True)
class PopoverPlacement:
    """
    Popover offsets as surface fractions.

    Exactly one of left/right is set; right is measured from the right edge.
    """

    top: float
    left: float | None = None
    right: float | None = None
    below_area: bool = False

    def as_css(self) -> dict[str, str]:
        def pct(value: float) -> str:
            return f"{value * 100:g}%"

        style = {
            "top": pct(self.top),
            "left": pct(self.left) if self.left is not None else "auto",
            "right": pct(self.right) if self.right is not None else "auto",
        }
        if self.below_area:
            style["marginTop"] = "8px"
        return style


def place_popover(frame: Frame) -> PopoverPlacement:
    if frame.is_area:
        top = frame.pos_y + frame.height
        if frame.pos_x > AREA_FLIP_THRESHOLD:
            return PopoverPlacement(top=top, right=1 - frame.pos_x, below_area=True)
        return PopoverPlacement(top=top, left=frame.pos_x, below_area=True)

    if frame.pos_x > PIN_FLIP_THRESHOLD:
        return PopoverPlacement(top=frame.pos_y, right=1 - frame.pos_x)
    return PopoverPlacement(top=frame.pos_y, left=frame.pos_x)
