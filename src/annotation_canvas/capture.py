import logging

logger = logging.getLogger(__name__)


class PointerCapture:
    """진행 중인 제스처의 입력 소유자 토큰.

    캡처된 포인터의 이벤트는 위치와 무관하게 소유자에게 전달된다 (hit test 없음).
    """

    def __init__(self):
        self._owner: int | None = None

    @property
    def owner(self) -> int | None:
        return self._owner

    def capture(self, pointer_id: int) -> None:
        logger.debug("pointer %s captured", pointer_id)
        self._owner = pointer_id

    def release(self, pointer_id: int) -> None:
        if self._owner != pointer_id:
            return
        logger.debug("pointer %s released", pointer_id)
        self._owner = None

    def owns(self, pointer_id: int) -> bool:
        return self._owner is not None and self._owner == pointer_id

    @property
    def is_captured(self) -> bool:
        return self._owner is not None
