from dataclasses import dataclass, fields
from typing import Any

from PIL import ImageColor

from annotation_canvas.exceptions import ConfigError
from annotation_canvas.models.stroke import DEFAULT_COLOR, DEFAULT_WIDTH

# pointer-move 지터 제거용 최소 거리 (정규화 좌표 기준)
JITTER_MIN_POINT_DISTANCE = 0.002


@dataclass(frozen=True)
class CanvasConfig:
    default_color: str = DEFAULT_COLOR
    default_width: float = DEFAULT_WIDTH
    device_pixel_ratio: float = 1.0
    min_point_distance: float = 0.0

    def __post_init__(self):
        if self.device_pixel_ratio <= 0:
            raise ConfigError(
                f"device_pixel_ratio must be positive: {self.device_pixel_ratio}"
            )
        if self.default_width < 0:
            raise ConfigError(f"default_width must not be negative: {self.default_width}")
        if self.min_point_distance < 0:
            raise ConfigError(
                f"min_point_distance must not be negative: {self.min_point_distance}"
            )
        try:
            ImageColor.getrgb(self.default_color)
        except ValueError:
            raise ConfigError(f"Invalid default_color: {self.default_color!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CanvasConfig":
        """딕셔너리에서 설정 생성. 알 수 없는 키는 무시."""
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        try:
            return cls(**kwargs)
        except TypeError as e:
            raise ConfigError(f"Invalid config value: {e}")
