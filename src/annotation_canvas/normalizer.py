from annotation_canvas.models import PageElement, Point, Rect


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def normalize(client_x: float, client_y: float, rect: Rect) -> Point:
    """뷰포트 좌표를 rect 기준 정규화 좌표 (0-1)로 변환.

    범위를 벗어난 좌표는 가장 가까운 경계로 clamp. 크기가 0인 rect는 (0, 0).
    """
    if rect.width <= 0 or rect.height <= 0:
        return Point(0.0, 0.0)

    x = (client_x - rect.left) / rect.width
    y = (client_y - rect.top) / rect.height
    return Point(_clamp(x), _clamp(y))


def to_pixels(point: Point, width: float, height: float) -> tuple[float, float]:
    """정규화 좌표를 CSS 픽셀 좌표로 변환."""
    return point.x * width, point.y * height


class CoordinateNormalizer:
    """마운트 시 해석된 타깃 노드의 현재 bounding box로 좌표를 정규화."""

    def __init__(self, target: PageElement | None = None):
        self.target = target

    def to_normalized(self, client_x: float, client_y: float) -> Point:
        if self.target is None:
            return Point(0.0, 0.0)
        return normalize(client_x, client_y, self.target.bounding_rect())
