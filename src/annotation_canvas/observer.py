import logging
from typing import Callable

from annotation_canvas.models import PageElement

logger = logging.getLogger(__name__)


class ResizeObserver:
    """PageElement 크기 변경 구독. 콜백은 payload 없이 호출된다."""

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self._elements: list[PageElement] = []

    def observe(self, element: PageElement) -> None:
        if element in self._elements:
            return
        element.add_resize_listener(self._notify)
        self._elements.append(element)

    def unobserve(self, element: PageElement) -> None:
        if element not in self._elements:
            return
        element.remove_resize_listener(self._notify)
        self._elements.remove(element)

    def disconnect(self) -> None:
        for element in self._elements:
            element.remove_resize_listener(self._notify)
        self._elements = []

    @property
    def observed(self) -> list[PageElement]:
        return list(self._elements)

    def _notify(self) -> None:
        self.callback()
