import io
import logging
from pathlib import Path

from PIL import Image

from annotation_canvas.models import Stroke
from annotation_canvas.render import RenderTarget, StrokeRenderer
from annotation_canvas.stroke_file import load_strokes

logger = logging.getLogger(__name__)


def render_annotated_page(
    page_image: bytes,
    strokes: list[Stroke] | None,
    *,
    scale: float = 1.0,
) -> bytes:
    """페이지 이미지 위에 스트로크를 합성해 PNG 바이트로 반환.

    Args:
        page_image: 페이지 이미지 데이터 (Pillow가 읽을 수 있는 포맷)
        strokes: 정규화 좌표 스트로크 목록
        scale: 출력 배율 (라이브 캔버스의 device pixel ratio와 동일하게 동작)
    """
    page = Image.open(io.BytesIO(page_image)).convert("RGBA")

    target = RenderTarget()
    target.layout(page.width, page.height, scale)
    if target.image is None:
        raise ValueError(f"Page image has no area: {page.size}")

    StrokeRenderer().render(target, strokes)

    if page.size != target.image.size:
        page = page.resize(target.image.size, Image.Resampling.LANCZOS)

    composed = Image.alpha_composite(page, target.image)

    out = io.BytesIO()
    composed.save(out, format="PNG")
    return out.getvalue()


def annotate(
    image_path: Path | str,
    strokes_path: Path | str,
    output_path: Path | str,
    *,
    stroke_color: str | None = None,
    stroke_width: float | None = None,
    scale: float = 1.0,
) -> None:
    """페이지 이미지와 스트로크 파일로 주석이 그려진 PNG 생성.

    Args:
        image_path: 페이지 이미지 경로
        strokes_path: 스트로크 JSON 경로
        output_path: 출력 PNG 경로
        stroke_color: 모든 스트로크에 적용할 색상 (기본: 저장된 색상)
        stroke_width: 모든 스트로크에 적용할 굵기 (기본: 저장된 굵기)
        scale: 출력 배율 (기본: 1.0)
    """
    image_path = Path(image_path)
    output_path = Path(output_path)

    if not image_path.exists():
        raise FileNotFoundError(f"File not found: {image_path}")

    strokes = load_strokes(strokes_path)

    if stroke_color is not None or stroke_width is not None:
        for stroke in strokes:
            if stroke_color is not None:
                stroke.color = stroke_color
            if stroke_width is not None:
                stroke.width = stroke_width

    png = render_annotated_page(image_path.read_bytes(), strokes, scale=scale)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(png)
    logger.info("wrote %s (%d strokes)", output_path, len(strokes))
