import logging
from typing import Iterable

from PIL import Image, ImageColor, ImageDraw

from annotation_canvas.models import Stroke
from annotation_canvas.models.stroke import DEFAULT_COLOR, DEFAULT_WIDTH
from annotation_canvas.normalizer import to_pixels

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)


class RenderTarget:
    """canvas backing buffer. 내부 크기는 CSS 크기 × device pixel ratio."""

    def __init__(self):
        self.image: Image.Image | None = None
        self.css_width = 0.0
        self.css_height = 0.0
        self.device_pixel_ratio = 1.0
        self.allocations = 0

    @property
    def internal_size(self) -> tuple[int, int]:
        if self.image is None:
            return 0, 0
        return self.image.size

    @property
    def css_size(self) -> tuple[float, float]:
        return self.css_width, self.css_height

    def layout(self, css_width: float, css_height: float, dpr: float) -> bool:
        """CSS 크기에 맞춰 버퍼 배치. 내부 크기가 바뀐 경우에만 재할당.

        Returns:
            버퍼를 재할당했으면 True
        """
        self.css_width = css_width
        self.css_height = css_height
        self.device_pixel_ratio = dpr

        width = int(css_width * dpr)
        height = int(css_height * dpr)

        if width <= 0 or height <= 0:
            reallocated = self.image is not None
            self.image = None
            return reallocated

        if self.image is not None and self.image.size == (width, height):
            return False

        logger.debug(
            "resizing render target to %dx%d (css %.1fx%.1f, dpr %s)",
            width, height, css_width, css_height, dpr,
        )
        self.image = Image.new("RGBA", (width, height), TRANSPARENT)
        self.allocations += 1
        return True


class StrokeRenderer:
    def __init__(self, default_color: str = DEFAULT_COLOR, default_width: float = DEFAULT_WIDTH):
        self.default_color = default_color
        self.default_width = default_width

    def render(
        self,
        target: RenderTarget,
        strokes: Iterable[Stroke] | None,
        in_progress: Stroke | None = None,
    ) -> bool:
        """버퍼를 지우고 완료된 스트로크와 진행 중인 스트로크를 다시 그림.

        정규화 좌표는 매번 현재 CSS 크기로 픽셀 좌표로 변환되고,
        DPR 스케일 변환을 거쳐 버퍼 픽셀에 그려진다.

        Returns:
            그렸으면 True, 버퍼가 없어 건너뛰었으면 False
        """
        image = target.image
        if image is None:
            return False

        image.paste(TRANSPARENT, (0, 0) + image.size)
        draw = ImageDraw.Draw(image)
        scale = target.device_pixel_ratio

        for stroke in strokes or []:
            self._draw_stroke(draw, stroke, target.css_width, target.css_height, scale)

        if in_progress is not None:
            self._draw_stroke(draw, in_progress, target.css_width, target.css_height, scale)

        return True

    def _draw_stroke(
        self,
        draw: ImageDraw.ImageDraw,
        stroke: Stroke,
        css_width: float,
        css_height: float,
        scale: float,
    ) -> None:
        """스트로크 하나를 round join 폴리라인 + 양 끝 원형 cap으로 그림."""
        if not stroke.points:
            return

        fill = self._resolve_color(stroke.color)
        line_width = (stroke.width or self.default_width) * scale

        pixels = []
        for point in stroke.points:
            x, y = to_pixels(point, css_width, css_height)
            pixels.append((x * scale, y * scale))

        if len(pixels) > 1:
            draw.line(pixels, fill=fill, width=max(1, round(line_width)), joint="curve")

        radius = line_width / 2
        self._draw_cap(draw, pixels[0], radius, fill)
        if len(pixels) > 1:
            self._draw_cap(draw, pixels[-1], radius, fill)

    @staticmethod
    def _draw_cap(draw: ImageDraw.ImageDraw, center: tuple[float, float], radius: float, fill) -> None:
        x, y = center
        draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=fill)

    def _resolve_color(self, color: str | None) -> tuple[int, int, int, int]:
        """hex 색상을 RGBA로 변환. 해석할 수 없으면 기본 색상."""
        try:
            rgb = ImageColor.getrgb(color or self.default_color)
        except (ValueError, AttributeError, TypeError):
            logger.warning("invalid stroke color %r, using %s", color, self.default_color)
            rgb = ImageColor.getrgb(self.default_color)

        if len(rgb) == 3:
            return rgb + (255,)
        return rgb
