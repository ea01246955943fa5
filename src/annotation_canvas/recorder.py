import logging
import math
from enum import Enum
from typing import Callable

from annotation_canvas.capture import PointerCapture
from annotation_canvas.config import CanvasConfig
from annotation_canvas.models import Point, PointerEvent, Stroke
from annotation_canvas.normalizer import CoordinateNormalizer

logger = logging.getLogger(__name__)


class RecorderState(Enum):
    IDLE = "idle"
    DRAWING = "drawing"
    FINALIZING = "finalizing"


class StrokeRecorder:
    """pointer 이벤트로 진행 중인 스트로크를 기록하는 상태 머신.

    IDLE → DRAWING (pointer down) → FINALIZING → IDLE (pointer up)
    DRAWING → IDLE (pointer cancel, 콜백 없음)

    각 핸들러는 이벤트를 소비했으면 True, 아래 콘텐츠로 통과시켜야 하면 False 반환.
    주석 모드를 제스처 도중 끄면 pointer up과 동일하게 스트로크를 확정한다.
    """

    def __init__(
        self,
        normalizer: CoordinateNormalizer,
        *,
        config: CanvasConfig | None = None,
        on_complete: Callable[[Stroke], None] | None = None,
        on_change: Callable[[], None] | None = None,
        is_annotating: bool = False,
    ):
        self.normalizer = normalizer
        self.config = config or CanvasConfig()
        self.on_complete = on_complete
        self.on_change = on_change
        self.capture = PointerCapture()

        self._is_annotating = is_annotating
        self._state = RecorderState.IDLE
        self._current: Stroke | None = None
        self._primary_touch_id: int | None = None

    @property
    def state(self) -> RecorderState:
        return self._state

    @property
    def current_stroke(self) -> Stroke | None:
        return self._current

    @property
    def is_annotating(self) -> bool:
        return self._is_annotating

    def set_annotating(self, value: bool) -> None:
        """주석 모드 전환. 그리기 도중 꺼지면 진행 중인 스트로크를 확정."""
        self._is_annotating = value
        if not value and self._state is RecorderState.DRAWING:
            logger.debug("annotation mode turned off mid-gesture, finalizing stroke")
            self._finalize(self.capture.owner)

    def pointer_down(self, event: PointerEvent) -> bool:
        if not self._is_annotating:
            return False

        if event.is_touch:
            if self._primary_touch_id is None:
                self._primary_touch_id = event.pointer_id
            elif event.pointer_id != self._primary_touch_id:
                # 두 번째 손가락은 스크롤용으로 통과
                return False

        if self._state is RecorderState.DRAWING:
            logger.debug("new pointer down while drawing, discarding previous stroke")
            self.capture.release(self.capture.owner)

        self.capture.capture(event.pointer_id)
        self._current = Stroke(
            points=[self._normalize(event)],
            color=self.config.default_color,
            width=self.config.default_width,
        )
        self._state = RecorderState.DRAWING
        self._changed()
        return True

    def pointer_move(self, event: PointerEvent) -> bool:
        if not self._owns(event):
            return False

        point = self._normalize(event)
        last = self._current.points[-1]
        distance = math.hypot(point.x - last.x, point.y - last.y)
        if distance >= self.config.min_point_distance:
            self._current.points.append(point)
            self._changed()
        return True

    def pointer_up(self, event: PointerEvent) -> bool:
        if not self._owns(event):
            return False

        self._finalize(event.pointer_id)
        return True

    def pointer_cancel(self, event: PointerEvent) -> bool:
        if not self._owns(event):
            return False

        self.capture.release(event.pointer_id)
        self._current = None
        self._state = RecorderState.IDLE
        self._primary_touch_id = None
        logger.debug("gesture cancelled, stroke discarded")
        self._changed()
        return True

    def _owns(self, event: PointerEvent) -> bool:
        return self._state is RecorderState.DRAWING and self.capture.owns(
            event.pointer_id
        )

    def _normalize(self, event: PointerEvent) -> Point:
        return self.normalizer.to_normalized(event.client_x, event.client_y)

    def _finalize(self, pointer_id: int | None) -> None:
        if pointer_id is not None:
            self.capture.release(pointer_id)
        self._state = RecorderState.FINALIZING

        stroke = self._current
        try:
            if stroke is not None and stroke.points and self.on_complete is not None:
                logger.debug("stroke completed with %d points", len(stroke.points))
                self.on_complete(stroke)
        except Exception:
            logger.exception("stroke completion callback failed")
        finally:
            self._current = None
            self._primary_touch_id = None
            self._state = RecorderState.IDLE

        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
