import pytest

from annotation_canvas.models import PageElement, Point, Rect
from annotation_canvas.normalizer import CoordinateNormalizer, normalize, to_pixels


def test_normalize_inside_rect():
    rect = Rect(100.0, 50.0, 800.0, 600.0)

    point = normalize(500.0, 350.0, rect)

    assert point == Point(0.5, 0.5)


@pytest.mark.parametrize(
    "client_x, client_y",
    [(100.0, 50.0), (900.0, 650.0), (123.4, 567.8), (899.9, 50.1)],
)
def test_normalize_maps_back_to_pixels(client_x, client_y):
    """박스 안의 좌표는 [0,1]에 들어가고 다시 원래 픽셀로 복원됨."""
    rect = Rect(100.0, 50.0, 800.0, 600.0)

    point = normalize(client_x, client_y, rect)
    x, y = to_pixels(point, rect.width, rect.height)

    assert 0.0 <= point.x <= 1.0
    assert 0.0 <= point.y <= 1.0
    assert x + rect.left == pytest.approx(client_x)
    assert y + rect.top == pytest.approx(client_y)


@pytest.mark.parametrize(
    "client_x, client_y, expected",
    [
        (-500.0, 350.0, Point(0.0, 0.5)),
        (5000.0, 350.0, Point(1.0, 0.5)),
        (500.0, -1.0, Point(0.5, 0.0)),
        (500.0, 10_000.0, Point(0.5, 1.0)),
        (0.0, 9999.0, Point(0.0, 1.0)),
    ],
)
def test_normalize_clamps_outside_rect(client_x, client_y, expected):
    """박스 밖 좌표는 가까운 경계로 clamp (버리지 않음)."""
    rect = Rect(100.0, 50.0, 800.0, 600.0)

    assert normalize(client_x, client_y, rect) == expected


def test_normalize_zero_size_rect():
    """크기가 0인 rect는 (0, 0) 반환."""
    assert normalize(10.0, 10.0, Rect(0.0, 0.0, 0.0, 100.0)) == Point(0.0, 0.0)


def test_normalizer_without_target():
    assert CoordinateNormalizer().to_normalized(123.0, 456.0) == Point(0.0, 0.0)


def test_normalizer_follows_current_rect():
    """줌으로 bounding box가 바뀌면 바뀐 박스 기준으로 정규화."""
    target = PageElement(tag="img", rect=Rect(0.0, 0.0, 100.0, 100.0))
    normalizer = CoordinateNormalizer(target)

    assert normalizer.to_normalized(50.0, 50.0) == Point(0.5, 0.5)

    target.set_rect(Rect(0.0, 0.0, 200.0, 200.0))

    assert normalizer.to_normalized(50.0, 50.0) == Point(0.25, 0.25)
