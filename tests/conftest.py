import io

import pytest
from PIL import Image

from annotation_canvas.models import PageElement, PointerEvent, Rect


@pytest.fixture
def page_image() -> PageElement:
    return PageElement(tag="img", rect=Rect(100.0, 50.0, 800.0, 600.0))


@pytest.fixture
def page_container(page_image) -> PageElement:
    container = PageElement(
        tag="div",
        rect=Rect(80.0, 30.0, 840.0, 640.0),
        attrs={"data-page": "1"},
    )
    container.append(page_image)
    return container


@pytest.fixture
def make_event():
    def _make(x: float, y: float, pointer_id: int = 1, pointer_type: str = "mouse"):
        return PointerEvent(
            pointer_id=pointer_id, client_x=x, client_y=y, pointer_type=pointer_type
        )

    return _make


@pytest.fixture
def white_png() -> bytes:
    img = Image.new("RGB", (100, 50), (255, 255, 255))
    img_bytes = io.BytesIO()
    img.save(img_bytes, format="PNG")
    return img_bytes.getvalue()
