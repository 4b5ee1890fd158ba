"""관련 운동 탐색 서비스

검색 결과가 적을 때 키워드 연관 인덱스로 대체 후보를 찾는다.
저장소에서 limit × 3 개를 가져와 로컬에서 재정렬한다.
"""

import logging
from typing import List, Optional

from langsmith import traceable

from shared.models import Exercise
from shared.utils import normalize_text
from exercise_catalog.config import settings
from exercise_catalog.repository import ExerciseRepository, any_of, contains
from exercise_catalog.services.keyword_index import KeywordIndex, keyword_index

logger = logging.getLogger(__name__)

STARTS_WITH_BONUS = 100
CONTAINS_BONUS = 50
MEDIA_BONUS = 30


class RelatedExerciseFinder:
    """키워드 연관 기반 관련 운동 탐색"""

    def __init__(
        self,
        repository: ExerciseRepository,
        index: Optional[KeywordIndex] = None,
        overfetch_factor: Optional[int] = None,
    ):
        """
        Args:
            repository: 운동 저장소
            index: 키워드 연관 인덱스 (기본값: 모듈 인덱스)
            overfetch_factor: 후보 over-fetch 배수 (기본값: 설정에서 로드)
        """
        self._repository = repository
        self._index = index or keyword_index
        self._overfetch = overfetch_factor or settings.related_overfetch_factor

    @staticmethod
    def score(exercise: Exercise, terms_norm: List[str]) -> int:
        """관련 키워드 누적 점수 + 미디어 보너스"""
        name_norm = normalize_text(exercise.name)
        total = 0
        for term in terms_norm:
            if name_norm.startswith(term):
                total += STARTS_WITH_BONUS
            elif term in name_norm:
                total += CONTAINS_BONUS
        if exercise.has_media:
            total += MEDIA_BONUS
        return total

    @traceable(name="find_related_exercises")
    async def find_related(self, query: str, limit: int = 10) -> List[Exercise]:
        """
        관련 운동 조회

        Args:
            query: 원래 검색어
            limit: 최대 반환 수

        Returns:
            관련도순 운동 목록 (관련 키워드가 없으면 저장소 조회 없이 빈 목록)
        """
        terms = self._index.related_terms(query)
        if not terms:
            return []

        conditions = []
        for term in terms:
            conditions.append(contains("name", term))
            conditions.append(contains("name", normalize_text(term)))

        candidates = await self._repository.find_many(
            any_of(*conditions),
            limit=limit * self._overfetch,
        )

        terms_norm = [normalize_text(term) for term in terms]
        scored = [(self.score(ex, terms_norm), ex) for ex in candidates]
        scored.sort(key=lambda pair: pair[0], reverse=True)

        logger.debug(f"관련 운동 후보 {len(candidates)}개 (키워드 {len(terms)}개): {query}")
        return [ex for _, ex in scored[:limit]]
