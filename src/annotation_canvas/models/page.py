from dataclasses import dataclass, field
from typing import Callable


@dataclass
class Rect:
    """CSS 픽셀 단위 bounding box."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def size(self) -> tuple[float, float]:
        return self.width, self.height


@dataclass(eq=False)
class PageElement:
    """뷰어 페이지 트리의 노드 (컨테이너, 이미지, PDF 페이지, canvas)."""

    tag: str
    rect: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 0.0, 0.0))
    attrs: dict[str, str] = field(default_factory=dict)
    children: list["PageElement"] = field(default_factory=list)
    _resize_listeners: list[Callable[[], None]] = field(
        default_factory=list, init=False, repr=False
    )

    def append(self, child: "PageElement") -> "PageElement":
        self.children.append(child)
        return child

    def find(self, predicate: Callable[["PageElement"], bool]) -> "PageElement | None":
        """자손 노드를 깊이 우선으로 탐색해 첫 번째 일치 노드 반환 (자신 제외)."""
        for child in self.children:
            if predicate(child):
                return child
            found = child.find(predicate)
            if found is not None:
                return found
        return None

    def bounding_rect(self) -> Rect:
        return self.rect

    def set_rect(self, rect: Rect) -> None:
        """bounding box 변경. 크기가 바뀐 경우에만 resize 리스너 호출."""
        size_changed = rect.size != self.rect.size
        self.rect = rect
        if size_changed:
            for listener in list(self._resize_listeners):
                listener()

    def add_resize_listener(self, listener: Callable[[], None]) -> None:
        self._resize_listeners.append(listener)

    def remove_resize_listener(self, listener: Callable[[], None]) -> None:
        if listener in self._resize_listeners:
            self._resize_listeners.remove(listener)
