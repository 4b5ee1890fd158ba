"""카탈로그 빌더

번역 완료된 운동 JSON(운동별 1파일)과 최적화 미디어(<id>.webp)를 교차 확인해
JsonExerciseRepository 가 읽는 카탈로그 JSON 을 만든다.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from shared.models import Exercise

logger = logging.getLogger(__name__)

DEFAULT_BODY_PART = "other"
DEFAULT_TARGET = "other"
DEFAULT_EQUIPMENT = "body weight"


@dataclass
class LoadStats:
    """카탈로그 빌드 통계"""

    total_files: int = 0
    loaded: int = 0
    updated: int = 0
    incomplete: List[str] = field(default_factory=list)
    errors: List[Dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalFiles": self.total_files,
            "loaded": self.loaded,
            "updated": self.updated,
            "incomplete": self.incomplete,
            "errors": self.errors,
        }


def _first(raw: Dict[str, Any], singular: str, plural: str) -> Optional[str]:
    """단수 필드 우선, 없으면 복수 필드 첫 값"""
    value = raw.get(singular)
    if value:
        return value
    values = raw.get(plural) or []
    return values[0] if values else None


def media_url_for(exercise_id: str, media_dir: Optional[Path], media_base_url: str) -> Optional[str]:
    """최적화 미디어가 있으면 URL, 없으면 None"""
    if media_dir is None:
        return None
    if (media_dir / f"{exercise_id}.webp").exists():
        return f"{media_base_url.rstrip('/')}/{exercise_id}.webp"
    return None


def build_record(
    raw: Dict[str, Any],
    media_dir: Optional[Path],
    media_base_url: str,
) -> Dict[str, Any]:
    """번역 JSON 1건 → 카탈로그 레코드 (PT-BR 우선, 없으면 EN)"""
    exercise_id = raw["exerciseId"]

    body_part_en = _first(raw, "bodyPart", "bodyParts") or DEFAULT_BODY_PART
    target_en = _first(raw, "target", "targetMuscles") or DEFAULT_TARGET
    equipment_en = _first(raw, "equipment", "equipments") or DEFAULT_EQUIPMENT

    secondary_en = raw.get("secondaryMuscles") or []
    secondary_pt = raw.get("secondaryMusclesPt") or []
    instructions_en = raw.get("instructions") or []
    instructions_pt = raw.get("instructionsPt") or []

    return {
        "id": exercise_id,
        "name": raw.get("namePt") or raw["name"],
        "nameEn": raw["name"],
        "bodyPart": _first(raw, "bodyPartPt", "bodyPartsPt") or body_part_en,
        "target": _first(raw, "targetPt", "targetMusclesPt") or target_en,
        "equipment": _first(raw, "equipmentPt", "equipmentsPt") or equipment_en,
        "gifUrl": media_url_for(exercise_id, media_dir, media_base_url),
        "imageUrl": raw.get("imageUrl") or None,
        "secondaryMuscles": [
            {
                "muscle": secondary_pt[i] if i < len(secondary_pt) and secondary_pt[i] else muscle,
                "muscleEn": muscle,
            }
            for i, muscle in enumerate(secondary_en)
        ],
        "instructions": [
            {
                "stepOrder": i + 1,
                "instruction": (
                    instructions_pt[i] if i < len(instructions_pt) and instructions_pt[i] else text
                ),
            }
            for i, text in enumerate(instructions_en)
        ],
    }


def build_catalog(
    input_dir: Path,
    media_dir: Optional[Path],
    media_base_url: str,
) -> Tuple[List[Dict[str, Any]], LoadStats]:
    """
    번역 JSON 디렉토리 → 카탈로그 레코드 목록

    같은 ID 가 여러 파일에 있으면 나중 파일이 덮어쓴다 (updated 로 집계).

    Returns:
        (ID 순 레코드 목록, 통계)
    """
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise FileNotFoundError(f"번역 JSON 디렉토리를 찾을 수 없습니다: {input_dir}")

    if media_dir is not None and not Path(media_dir).is_dir():
        logger.warning(f"미디어 디렉토리 없음: {media_dir} (미디어 없이 빌드)")
        media_dir = None

    stats = LoadStats()
    records: Dict[str, Dict[str, Any]] = {}

    json_files = sorted(input_dir.glob("*.json"))
    stats.total_files = len(json_files)

    for i, path in enumerate(json_files, start=1):
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            raw.setdefault("exerciseId", path.stem)

            record = build_record(raw, media_dir, media_base_url)
            Exercise.model_validate(record)
        except (
            OSError,
            json.JSONDecodeError,
            AttributeError,
            KeyError,
            TypeError,
            ValidationError,
        ) as e:
            stats.errors.append({"id": path.stem, "error": str(e)})
            continue

        if record["id"] in records:
            stats.updated += 1
        else:
            stats.loaded += 1
        records[record["id"]] = record

        if i % 100 == 0:
            logger.info(f"[{i}/{len(json_files)}] 처리 중...")

    stats.incomplete = sorted(rid for rid, rec in records.items() if not rec["gifUrl"])
    return [records[rid] for rid in sorted(records)], stats


def write_catalog(records: List[Dict[str, Any]], output_path: Path) -> Path:
    """카탈로그 JSON 저장"""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump({"exercises": records}, f, ensure_ascii=False, indent=2)
    return output_path


def write_reports(
    stats: LoadStats,
    records: List[Dict[str, Any]],
    logs_dir: Path,
) -> Path:
    """빌드 리포트 저장 (미디어 누락 목록, 오류 목록, 전체 리포트)

    Returns:
        load-report.json 경로
    """
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.utcnow().isoformat()

    if stats.incomplete:
        with open(logs_dir / "incomplete-exercises.json", "w", encoding="utf-8") as f:
            json.dump(
                {"timestamp": timestamp, "count": len(stats.incomplete), "ids": stats.incomplete},
                f,
                indent=2,
            )

    if stats.errors:
        with open(logs_dir / "load-errors.json", "w", encoding="utf-8") as f:
            json.dump(stats.errors, f, ensure_ascii=False, indent=2)

    report_path = logs_dir / "load-report.json"
    with open(report_path, "w", encoding="utf-8") as f:
        json.dump(
            {
                "timestamp": timestamp,
                "stats": stats.to_dict(),
                "catalog": {
                    "totalExercises": len(records),
                    "withMedia": sum(1 for rec in records if rec["gifUrl"] or rec["imageUrl"]),
                },
            },
            f,
            ensure_ascii=False,
            indent=2,
        )
    return report_path
