"""
Annotation canvas interaction model.

Exports:
  - AnnotationCanvas: pointer-driven controller for one session
  - CommentGateway: comment store contract consumed by the controller
  - PointerEvent, TouchPoint, SurfaceRect, Frame: geometry primitives
  - ResizeHandle, AddGestureState: gesture enums
"""

from backend.core.canvas.controller import AnnotationCanvas
from backend.core.canvas.gateway import CommentGateway
from backend.core.canvas.geometry import Frame, NormalizedPoint, PointerEvent, SurfaceRect, TouchPoint
from backend.core.canvas.gestures import AddGestureState
from backend.core.canvas.resize import ResizeHandle

__all__ = [
    "AnnotationCanvas",
    "CommentGateway",
    "Frame",
    "NormalizedPoint",
    "PointerEvent",
    "SurfaceRect",
    "TouchPoint",
    "AddGestureState",
    "ResizeHandle",
]
