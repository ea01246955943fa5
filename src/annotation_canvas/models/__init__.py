from annotation_canvas.models.page import PageElement, Rect
from annotation_canvas.models.pointer import PointerEvent
from annotation_canvas.models.stroke import Point, Stroke

__all__ = ["PageElement", "Point", "PointerEvent", "Rect", "Stroke"]
