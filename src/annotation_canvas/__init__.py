"""Annotation Canvas - freehand page annotation overlay."""

from annotation_canvas.canvas import AnnotationCanvas
from annotation_canvas.config import CanvasConfig
from annotation_canvas.exceptions import (
    AnnotationCanvasError,
    ConfigError,
    StrokeFileError,
)
from annotation_canvas.exporter import annotate, render_annotated_page
from annotation_canvas.stroke_file import dump_strokes, load_strokes

__version__ = "0.1.0"
__all__ = [
    "AnnotationCanvas",
    "AnnotationCanvasError",
    "CanvasConfig",
    "ConfigError",
    "StrokeFileError",
    "annotate",
    "dump_strokes",
    "load_strokes",
    "render_annotated_page",
]
