"""운동 검색 서비스

전체 흐름 (요청당 1회, 상태 없음):
1. 조건 트리 구성 (ID 목록이 있으면 다른 필터 무시)
2. 저장소 조회 (텍스트 검색이면 랭킹 후보 풀 제한)
3. 관련도 랭킹
4. 페이지네이션
5. 결과가 적으면 관련 운동 추천
"""

import asyncio
import logging
import random
from typing import List, Optional

from langsmith import traceable

from shared.models import Exercise
from shared.utils import normalize_text
from exercise_catalog.config import settings
from exercise_catalog.exceptions import ExerciseNotFoundError
from exercise_catalog.models import (
    ExercisePage,
    ExerciseSearchInput,
    PageMeta,
    SuggestionBlock,
    clamp_page,
    clamp_size,
)
from exercise_catalog.repository import (
    ExerciseRepository,
    Predicate,
    all_of,
    any_of,
    contains,
    eq,
    in_,
    startswith,
)
from exercise_catalog.services.keyword_index import KeywordIndex, keyword_index
from exercise_catalog.services.related_finder import RelatedExerciseFinder
from exercise_catalog.services.relevance import ranking_score

logger = logging.getLogger(__name__)

BROWSE_FIELDS = {"body_part", "equipment", "target"}


def build_text_predicate(query: str) -> Predicate:
    """
    자유 텍스트 조건

    - 한 단어: 이름/원어명 접두사·부분일치 OR (넓은 recall)
    - 여러 단어: 단어마다 (이름 | 정규화 단어 in 이름 | 원어명) 를 AND
    """
    words = query.strip().split()
    if len(words) == 1:
        word = words[0]
        word_norm = normalize_text(word)
        return any_of(
            startswith("name", word),
            startswith("name", word_norm),
            contains("name", word),
            contains("name", word_norm),
            startswith("name_en", word),
            contains("name_en", word),
        )

    return all_of(*[
        any_of(
            contains("name", word),
            contains("name", normalize_text(word)),
            contains("name_en", word),
        )
        for word in words
    ])


def build_search_predicate(search: ExerciseSearchInput) -> Optional[Predicate]:
    """검색 입력 → 조건 트리 (조건 없으면 None)"""
    if search.is_id_lookup:
        return in_("id", search.id_list)

    conditions = []
    if search.body_part:
        conditions.append(eq("body_part", search.body_part))
    if search.equipment:
        conditions.append(eq("equipment", search.equipment))
    if search.target:
        conditions.append(eq("target", search.target))
    if search.q:
        conditions.append(build_text_predicate(search.q))

    if not conditions:
        return None
    return all_of(*conditions)


class ExerciseSearchService:
    """운동 검색/조회 서비스

    사용 예시:
        service = ExerciseSearchService(repository)
        page = await service.search(ExerciseSearchInput(q="supino"))
    """

    def __init__(
        self,
        repository: ExerciseRepository,
        index: Optional[KeywordIndex] = None,
        related_finder: Optional[RelatedExerciseFinder] = None,
    ):
        """
        Args:
            repository: 운동 저장소
            index: 키워드 연관 인덱스 (기본값: 모듈 인덱스)
            related_finder: 관련 운동 탐색 (기본값: 같은 저장소/인덱스로 생성)
        """
        self._repository = repository
        self._index = index or keyword_index
        self._related = related_finder or RelatedExerciseFinder(repository, self._index)

    def _fetch_limit(self, search: ExerciseSearchInput) -> int:
        return min(settings.ranking_pool_limit, search.size * settings.ranking_pool_factor)

    @staticmethod
    def rank(candidates: List[Exercise], query_words: List[str]) -> List[Exercise]:
        """관련도 내림차순 정렬 (동점은 저장소 순서 유지)"""
        return sorted(
            candidates,
            key=lambda ex: ranking_score(ex.name, query_words, ex.has_media),
            reverse=True,
        )

    @traceable(name="exercise_text_search")
    async def search(self, search: ExerciseSearchInput) -> ExercisePage:
        """
        운동 검색

        Args:
            search: 검색 입력 (보정 완료)

        Returns:
            ExercisePage (조건 충족 시 suggestions 포함)
        """
        predicate = build_search_predicate(search)

        if search.has_text_query:
            # 후보 풀을 가져와 로컬 랭킹 후 슬라이스
            candidates, total = await asyncio.gather(
                self._repository.find_many(predicate, limit=self._fetch_limit(search)),
                self._repository.count(predicate),
            )
            ranked = self.rank(candidates, search.query_words)
            data = ranked[search.offset: search.offset + search.size]
        else:
            data, total = await asyncio.gather(
                self._repository.find_many(predicate, limit=search.size, offset=search.offset),
                self._repository.count(predicate),
            )

        page = ExercisePage(
            data=data,
            meta=PageMeta.build(total=total, page=search.page, size=search.size),
        )

        if search.has_text_query and total < settings.suggestion_threshold:
            page.suggestions = await self._build_suggestions(search.q, total)

        logger.info(
            f"검색 완료: q={search.q!r} ids={search.is_id_lookup} "
            f"total={total} page={search.page}/{page.meta.total_pages} "
            f"suggestions={page.has_suggestions}"
        )
        return page

    async def _build_suggestions(self, query: str, total: int) -> Optional[SuggestionBlock]:
        """관련 운동 추천 블록 (관련 운동이 하나도 없으면 None)"""
        exercises = await self._related.find_related(
            query, limit=settings.suggestion_exercise_limit
        )
        if not exercises:
            return None

        if total == 0:
            message = f'Não encontramos "{query}", mas você pode gostar de:'
        else:
            message = "Veja também exercícios relacionados:"

        keywords = self._index.related_terms(query)[: settings.suggestion_keyword_limit]
        logger.info(f"관련 운동 추천: {query!r} → {len(exercises)}개")
        return SuggestionBlock(message=message, keywords=keywords, exercises=exercises)

    async def get_exercise(self, exercise_id: str) -> Exercise:
        """ID 조회 (없으면 ExerciseNotFoundError)"""
        exercise = await self._repository.find_by_id(exercise_id)
        if exercise is None:
            logger.warning(f"운동 없음: {exercise_id}")
            raise ExerciseNotFoundError(exercise_id)
        return exercise

    async def get_exercises_by_ids(self, ids: List[str]) -> List[Exercise]:
        """ID 목록 조회 (요청 순서 유지, 없는 ID 제외)"""
        if not ids:
            return []
        found = await self._repository.find_many(in_("id", ids), order_by=None)
        by_id = {ex.id: ex for ex in found}
        return [by_id[exercise_id] for exercise_id in ids if exercise_id in by_id]

    async def list_by_field(
        self,
        field: str,
        value: str,
        page: int = 1,
        size: Optional[int] = None,
    ) -> ExercisePage:
        """
        부위/장비/타겟별 목록 (저장소 페이지네이션, 이름순)

        Args:
            field: body_part | equipment | target
            value: 필드 값 (정확히 일치)
        """
        if field not in BROWSE_FIELDS:
            raise ValueError(f"지원하지 않는 필드: {field}. 가능한 값: {sorted(BROWSE_FIELDS)}")

        page = clamp_page(page)
        size = clamp_size(size)
        predicate = eq(field, value)

        data, total = await asyncio.gather(
            self._repository.find_many(predicate, limit=size, offset=(page - 1) * size),
            self._repository.count(predicate),
        )
        return ExercisePage(data=data, meta=PageMeta.build(total=total, page=page, size=size))

    async def random_exercises(
        self,
        count: Optional[int] = None,
        body_part: Optional[str] = None,
        equipment: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> List[Exercise]:
        """
        랜덤 운동

        Args:
            count: 개수 (기본값: 설정, 최대 max_page_size)
            body_part: 부위 필터
            equipment: 장비 필터
            rng: 난수 생성기 (테스트용 주입)
        """
        count = clamp_size(count if count is not None else settings.random_default_count)
        conditions = []
        if body_part:
            conditions.append(eq("body_part", body_part))
        if equipment:
            conditions.append(eq("equipment", equipment))

        ids = await self._repository.list_ids(all_of(*conditions) if conditions else None)
        sampled = (rng or random).sample(ids, min(count, len(ids)))
        return await self.get_exercises_by_ids(sampled)
