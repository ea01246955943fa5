from dataclasses import dataclass

POINTER_MOUSE = "mouse"
POINTER_PEN = "pen"
POINTER_TOUCH = "touch"


@dataclass(frozen=True)
class PointerEvent:
    pointer_id: int
    client_x: float
    client_y: float
    pointer_type: str = POINTER_MOUSE

    @property
    def is_touch(self) -> bool:
        return self.pointer_type == POINTER_TOUCH
