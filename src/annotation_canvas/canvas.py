import logging
from typing import Callable, Sequence

from PIL import Image

from annotation_canvas.config import CanvasConfig
from annotation_canvas.models import PageElement, PointerEvent, Stroke
from annotation_canvas.normalizer import CoordinateNormalizer
from annotation_canvas.observer import ResizeObserver
from annotation_canvas.recorder import StrokeRecorder
from annotation_canvas.render import RenderTarget, StrokeRenderer
from annotation_canvas.surface import resolve_target

logger = logging.getLogger(__name__)

_UNSET = object()


class AnnotationCanvas:
    """페이지 위에 겹쳐지는 주석 캔버스.

    부모가 넘긴 스트로크 컬렉션은 읽기만 하고, 완료된 스트로크는
    on_stroke_complete 콜백으로 부모에게 넘긴다. 부모 컬렉션에 같은 객체가
    들어올 때까지는 pending 목록에서 계속 그린다.
    """

    def __init__(
        self,
        page: PageElement | None = None,
        *,
        zoom_level: float = 1.0,
        strokes: Sequence[Stroke] | None = None,
        is_annotating: bool = False,
        on_stroke_complete: Callable[[Stroke], None] | None = None,
        config: CanvasConfig | None = None,
    ):
        self.config = config or CanvasConfig()
        self.page = page
        self.zoom_level = zoom_level
        self.strokes = strokes
        self.on_stroke_complete = on_stroke_complete

        self.target = RenderTarget()
        self.renderer = StrokeRenderer(
            default_color=self.config.default_color,
            default_width=self.config.default_width,
        )
        self.normalizer = CoordinateNormalizer()
        self.recorder = StrokeRecorder(
            self.normalizer,
            config=self.config,
            on_complete=self._handle_stroke_complete,
            on_change=self.repaint,
            is_annotating=is_annotating,
        )

        self._pending: list[Stroke] = []
        self._observer: ResizeObserver | None = None
        self._mounted = False

    @property
    def is_annotating(self) -> bool:
        return self.recorder.is_annotating

    @property
    def pointer_events(self) -> str:
        return "auto" if self.is_annotating else "none"

    @property
    def touch_action(self) -> str:
        return "none" if self.is_annotating else "auto"

    @property
    def buffer(self) -> Image.Image | None:
        return self.target.image

    @property
    def css_size(self) -> tuple[float, float]:
        return self.target.css_size

    @property
    def pending_strokes(self) -> list[Stroke]:
        return list(self._pending)

    @property
    def surface(self) -> PageElement | None:
        return self.normalizer.target

    def mount(self) -> None:
        self._mounted = True
        self._attach(self.page)

    def unmount(self) -> None:
        self._detach()
        self.normalizer.target = None
        self._mounted = False

    def set_page(self, page: PageElement | None) -> None:
        """페이지 참조 변경. 이전 관찰을 끊고 새 타깃에 다시 연결."""
        self.page = page
        self._prune_pending()
        if self._mounted:
            self._attach(page)

    def update(self, *, strokes=_UNSET, zoom_level=_UNSET, is_annotating=_UNSET) -> None:
        """prop 변경 반영. 스트로크나 줌이 바뀌면 다시 그림."""
        needs_repaint = False

        if strokes is not _UNSET and strokes is not self.strokes:
            self.strokes = strokes
            self._prune_pending()
            needs_repaint = True

        if zoom_level is not _UNSET and zoom_level != self.zoom_level:
            self.zoom_level = zoom_level
            needs_repaint = True

        if is_annotating is not _UNSET:
            self.recorder.set_annotating(is_annotating)

        if needs_repaint:
            self.repaint()

    def repaint(self) -> bool:
        """현재 타깃 크기로 버퍼를 배치하고 모든 스트로크를 다시 그림."""
        surface = self.normalizer.target
        if not self._mounted or surface is None:
            return False

        rect = surface.bounding_rect()
        self.target.layout(rect.width, rect.height, self.config.device_pixel_ratio)

        strokes = list(self.strokes or []) + self._pending
        return self.renderer.render(self.target, strokes, self.recorder.current_stroke)

    def pointer_down(self, event: PointerEvent) -> bool:
        return self.recorder.pointer_down(event)

    def pointer_move(self, event: PointerEvent) -> bool:
        return self.recorder.pointer_move(event)

    def pointer_up(self, event: PointerEvent) -> bool:
        return self.recorder.pointer_up(event)

    def pointer_cancel(self, event: PointerEvent) -> bool:
        return self.recorder.pointer_cancel(event)

    def _attach(self, page: PageElement | None) -> None:
        self._detach()
        surface = resolve_target(page)
        self.normalizer.target = surface
        if surface is None:
            return

        self.repaint()
        self._observer = ResizeObserver(self.repaint)
        self._observer.observe(surface)
        logger.debug("observing %s for resize", surface.tag)

    def _detach(self) -> None:
        if self._observer is not None:
            self._observer.disconnect()
            self._observer = None

    def _handle_stroke_complete(self, stroke: Stroke) -> None:
        self._pending.append(stroke)
        if self.on_stroke_complete is not None:
            self.on_stroke_complete(stroke)

    def _prune_pending(self) -> None:
        if not self.strokes:
            return
        self._pending = [
            pending
            for pending in self._pending
            if not any(s is pending for s in self.strokes)
        ]
