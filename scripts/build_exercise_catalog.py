"""운동 카탈로그 빌드 스크립트

입력: 번역 완료 JSON (운동별 1파일) + 최적화 미디어 (<id>.webp)
출력: data/exercises-pt-br.json + data/logs/load-report.json

사용법:
    PYTHONPATH=. python scripts/build_exercise_catalog.py
    PYTHONPATH=. python scripts/build_exercise_catalog.py --input data/translated/json
    PYTHONPATH=. python scripts/build_exercise_catalog.py --media-base-url https://cdn.example.com/ex
"""

import argparse
import sys
from pathlib import Path

from exercise_catalog.config import settings
from shared.utils import setup_logging
from exercise_catalog.repository.catalog_builder import (
    build_catalog,
    write_catalog,
    write_reports,
)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="운동 카탈로그 빌드")
    parser.add_argument(
        "--input",
        type=Path,
        default=settings.data_dir / "translated" / "json",
        help="번역 JSON 디렉토리",
    )
    parser.add_argument(
        "--media",
        type=Path,
        default=settings.data_dir / "optimized" / "media",
        help="최적화 미디어 디렉토리",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.catalog_path,
        help="카탈로그 JSON 출력 경로",
    )
    parser.add_argument(
        "--logs",
        type=Path,
        default=settings.data_dir / "logs",
        help="리포트 디렉토리",
    )
    parser.add_argument(
        "--media-base-url",
        default=settings.media_base_url,
        help="미디어 URL 접두사",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(settings.log_level)

    print(f"\n=== 카탈로그 빌드 ({args.input}) ===")
    try:
        records, stats = build_catalog(args.input, args.media, args.media_base_url)
    except FileNotFoundError as e:
        print(f"오류: {e}")
        return 1

    output = write_catalog(records, args.output)
    report = write_reports(stats, records, args.logs)

    print(f"  파일 처리:      {stats.total_files}")
    print(f"  신규:           {stats.loaded}")
    print(f"  덮어씀:         {stats.updated}")
    print(f"  오류:           {len(stats.errors)}")
    print(f"  미디어 없음:    {len(stats.incomplete)}")
    print(f"\n카탈로그: {output}")
    print(f"리포트:   {report}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
