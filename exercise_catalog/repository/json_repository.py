"""JSON 카탈로그 기반 인메모리 운동 저장소

카탈로그 파일(scripts/build_exercise_catalog.py 산출물)을 한 번 읽어
조건 트리를 메모리에서 평가한다. 문자열 연산은 대소문자 무시, 악센트 구분 (ILIKE 와 동일).
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from shared.models import Exercise
from exercise_catalog.exceptions import CatalogLoadError
from exercise_catalog.repository.predicates import AllOf, AnyOf, Condition, Predicate

logger = logging.getLogger(__name__)


def _field_value(exercise: Exercise, field: str) -> Any:
    try:
        return getattr(exercise, field)
    except AttributeError:
        raise ValueError(f"알 수 없는 필드: {field}") from None


def _matches_condition(exercise: Exercise, condition: Condition) -> bool:
    value = _field_value(exercise, condition.field)

    if condition.op == "eq":
        return value == condition.value
    if condition.op == "in":
        return value in condition.value
    if condition.op == "not_null":
        return value is not None and value != ""

    if value is None:
        return False
    haystack = str(value).lower()
    needle = str(condition.value).lower()
    if condition.op == "contains":
        return needle in haystack
    return haystack.startswith(needle)


def matches(exercise: Exercise, predicate: Optional[Predicate]) -> bool:
    """조건 트리 평가"""
    if predicate is None:
        return True
    if isinstance(predicate, Condition):
        return _matches_condition(exercise, predicate)
    if isinstance(predicate, AllOf):
        return all(matches(exercise, item) for item in predicate.items)
    if isinstance(predicate, AnyOf):
        return any(matches(exercise, item) for item in predicate.items)
    raise TypeError(f"지원하지 않는 조건 타입: {type(predicate).__name__}")


class JsonExerciseRepository:
    """인메모리 운동 저장소

    사용 예시:
        repo = JsonExerciseRepository.from_file(settings.catalog_path)
        exercises = await repo.find_many(eq("body_part", "peito"), limit=20)
    """

    def __init__(self, exercises: Iterable[Exercise]):
        self._exercises: List[Exercise] = []
        self._by_id: Dict[str, Exercise] = {}
        for exercise in exercises:
            if exercise.id in self._by_id:
                logger.warning(f"중복 운동 ID 무시: {exercise.id}")
                continue
            ordered = sorted(exercise.instructions, key=lambda step: step.step_order)
            exercise = exercise.model_copy(update={"instructions": ordered})
            self._exercises.append(exercise)
            self._by_id[exercise.id] = exercise

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "JsonExerciseRepository":
        """dict 레코드 목록에서 생성 (camelCase / snake_case 모두 허용)"""
        return cls(Exercise.model_validate(record) for record in records)

    @classmethod
    def from_file(cls, path: Path) -> "JsonExerciseRepository":
        """카탈로그 JSON 파일 로드

        형식: 레코드 리스트 또는 {"exercises": 리스트 | {id: 레코드}}
        """
        path = Path(path)
        if not path.exists():
            raise CatalogLoadError(f"카탈로그 파일을 찾을 수 없습니다: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                raw_data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"카탈로그 JSON 형식 오류: {path} ({e})") from e

        if isinstance(raw_data, dict):
            raw_data = raw_data.get("exercises", raw_data)

        if isinstance(raw_data, dict):
            records = []
            for ex_id, ex_data in raw_data.items():
                if ex_id.startswith("_"):  # _metadata 등 제외
                    continue
                records.append({**ex_data, "id": ex_data.get("id", ex_id)})
        else:
            records = raw_data

        try:
            repo = cls.from_records(records)
        except ValidationError as e:
            raise CatalogLoadError(f"카탈로그 레코드 검증 실패: {path} ({e})") from e

        logger.info(f"카탈로그 로드 완료: {len(repo)}개 운동 ({path})")
        return repo

    def __len__(self) -> int:
        return len(self._exercises)

    def _select(self, predicate: Optional[Predicate]) -> List[Exercise]:
        return [ex for ex in self._exercises if matches(ex, predicate)]

    async def find_many(
        self,
        predicate: Optional[Predicate] = None,
        limit: Optional[int] = None,
        offset: int = 0,
        order_by: Optional[str] = "name",
    ) -> List[Exercise]:
        selected = self._select(predicate)
        if order_by:
            selected.sort(key=lambda ex: str(_field_value(ex, order_by) or "").lower())
        end = None if limit is None else offset + limit
        return selected[offset:end]

    async def count(self, predicate: Optional[Predicate] = None) -> int:
        return len(self._select(predicate))

    async def find_by_id(self, exercise_id: str) -> Optional[Exercise]:
        return self._by_id.get(exercise_id)

    async def list_ids(self, predicate: Optional[Predicate] = None) -> List[str]:
        return [ex.id for ex in self._select(predicate)]

    async def group_counts(self, field: str) -> Dict[str, int]:
        return dict(Counter(_field_value(ex, field) for ex in self._exercises))

    async def ping(self) -> None:
        return None
