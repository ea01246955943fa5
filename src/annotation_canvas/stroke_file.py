import json
import logging
from pathlib import Path

from annotation_canvas.exceptions import StrokeFileError
from annotation_canvas.models import Stroke

logger = logging.getLogger(__name__)


def load_strokes(path: Path | str) -> list[Stroke]:
    """스트로크 JSON 파일 로드.

    최상위가 스트로크 배열이거나 {"strokes": [...]} 형태의 annotations 응답.

    Raises:
        FileNotFoundError: 파일이 없을 때
        StrokeFileError: JSON이 아니거나 구조가 맞지 않을 때
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise StrokeFileError(f"Failed to parse stroke file: {e}")

    return parse_strokes(data)


def parse_strokes(data) -> list[Stroke]:
    """디코딩된 JSON 값에서 스트로크 목록 생성."""
    if isinstance(data, dict):
        if "strokes" not in data:
            raise StrokeFileError("Object has no \"strokes\" key")
        data = data["strokes"]
        if data is None:
            return []

    if not isinstance(data, list):
        raise StrokeFileError(f"Expected a list of strokes, got {type(data).__name__}")

    strokes = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise StrokeFileError(f"Stroke {i} is not an object")
        try:
            strokes.append(Stroke.from_dict(item))
        except (KeyError, TypeError, ValueError, IndexError) as e:
            raise StrokeFileError(f"Invalid stroke {i}: {e}")

    logger.debug("parsed %d strokes", len(strokes))
    return strokes


def dump_strokes(strokes: list[Stroke], path: Path | str) -> None:
    """스트로크 목록을 wire 포맷 JSON으로 저장."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([s.to_dict() for s in strokes], f, ensure_ascii=False, indent=2)
