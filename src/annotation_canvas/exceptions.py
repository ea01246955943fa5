class AnnotationCanvasError(Exception):
    """Base exception for annotation-canvas."""

    pass


class StrokeFileError(AnnotationCanvasError):
    """Raised when a stroke file cannot be read."""

    pass


class ConfigError(AnnotationCanvasError):
    """Raised when canvas configuration is invalid."""

    pass
