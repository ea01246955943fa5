import pytest

from annotation_canvas.exceptions import (
    AnnotationCanvasError,
    ConfigError,
    StrokeFileError,
)


def test_stroke_file_error():
    with pytest.raises(StrokeFileError) as exc_info:
        raise StrokeFileError("invalid JSON")

    assert "invalid JSON" in str(exc_info.value)


def test_config_error():
    with pytest.raises(ConfigError) as exc_info:
        raise ConfigError("bad dpr")

    assert "bad dpr" in str(exc_info.value)


def test_exceptions_inherit_from_base():
    assert issubclass(StrokeFileError, AnnotationCanvasError)
    assert issubclass(ConfigError, AnnotationCanvasError)
    assert issubclass(AnnotationCanvasError, Exception)
