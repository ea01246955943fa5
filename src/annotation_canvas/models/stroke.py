from dataclasses import dataclass, field

DEFAULT_COLOR = "#000000"
DEFAULT_WIDTH = 2.0


@dataclass
class Point:
    x: float
    y: float

    @classmethod
    def from_list(cls, data: list) -> "Point":
        return cls(x=float(data[0]), y=float(data[1]))

    @classmethod
    def from_dict(cls, data: dict) -> "Point":
        return cls(x=float(data["x"]), y=float(data["y"]))

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass
class Stroke:
    points: list[Point] = field(default_factory=list)
    color: str = DEFAULT_COLOR
    width: float = DEFAULT_WIDTH

    @classmethod
    def from_dict(cls, data: dict) -> "Stroke":
        """wire 포맷 딕셔너리에서 Stroke 생성.

        Args:
            data: {"color": str, "width": number, "points": [{"x", "y"}, ...]}

        Returns:
            Stroke. color/width가 없으면 기본값, points가 리스트가 아니면 빈 스트로크.

        Raises:
            TypeError: color가 문자열이 아닐 때
        """
        raw_points = data.get("points")
        points = []
        if isinstance(raw_points, list):
            for p in raw_points:
                if isinstance(p, dict):
                    points.append(Point.from_dict(p))
                else:
                    points.append(Point.from_list(p))

        color = data.get("color") or DEFAULT_COLOR
        if not isinstance(color, str):
            raise TypeError(f"color must be a string, got {type(color).__name__}")

        return cls(
            points=points,
            color=color,
            width=float(data.get("width") or DEFAULT_WIDTH),
        )

    def to_dict(self) -> dict:
        return {
            "color": self.color,
            "width": self.width,
            "points": [p.to_dict() for p in self.points],
        }

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0
