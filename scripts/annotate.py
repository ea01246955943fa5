#!/usr/bin/env python3
"""CLI for annotation-canvas."""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from annotation_canvas import StrokeFileError, annotate

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".webp"}


def main():
    parser = argparse.ArgumentParser(description="페이지 이미지에 주석 스트로크를 그려 PNG로 저장")
    parser.add_argument("input", help="입력 페이지 이미지 또는 디렉토리")
    parser.add_argument("strokes", help="스트로크 JSON 파일 (디렉토리 입력이면 무시)")
    parser.add_argument("output", help="출력 파일 또는 디렉토리")
    parser.add_argument("--stroke-color", help="스트로크 색상 (예: #000000)")
    parser.add_argument("--stroke-width", type=float, help="스트로크 굵기")
    parser.add_argument("--scale", type=float, default=1.0, help="출력 배율 (기본: 1.0)")
    parser.add_argument("-v", "--verbose", action="store_true", help="디버그 로그 출력")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    output_path = Path(args.output)

    try:
        if input_path.is_file():
            print(f"변환 중: {input_path.name}")
            annotate(
                input_path,
                args.strokes,
                output_path,
                stroke_color=args.stroke_color,
                stroke_width=args.stroke_width,
                scale=args.scale,
            )
            print(f"완료: {output_path}")
        elif input_path.is_dir():
            pairs = [
                (image, image.with_name(image.stem + ".strokes.json"))
                for image in sorted(input_path.iterdir())
                if image.suffix.lower() in IMAGE_SUFFIXES
            ]
            pairs = [(image, strokes) for image, strokes in pairs if strokes.exists()]
            if not pairs:
                print(f"오류: {input_path}에서 스트로크 파일이 있는 이미지를 찾을 수 없습니다.")
                sys.exit(1)

            output_path.mkdir(parents=True, exist_ok=True)

            for image, strokes in pairs:
                output_file = output_path / (image.stem + ".annotated.png")
                print(f"변환 중: {image.name} -> {output_file.name}")
                annotate(
                    image,
                    strokes,
                    output_file,
                    stroke_color=args.stroke_color,
                    stroke_width=args.stroke_width,
                    scale=args.scale,
                )

            print(f"\n총 {len(pairs)}개 파일 변환 완료!")
        else:
            print(f"오류: {input_path}를 찾을 수 없습니다.")
            sys.exit(1)
    except StrokeFileError as e:
        print(f"오류: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
