"""운동 검색 서비스 테스트"""
import random

import pytest

from exercise_catalog.exceptions import ExerciseNotFoundError
from exercise_catalog.models import ExerciseSearchInput
from exercise_catalog.repository import AllOf, AnyOf, Condition
from exercise_catalog.services import (
    ExerciseSearchService,
    build_search_predicate,
    build_text_predicate,
)
from tests.conftest import NAME_ORDER, make_repository


class FailingRepository:
    async def find_many(self, *args, **kwargs):
        raise RuntimeError("storage down")

    async def count(self, *args, **kwargs):
        return 0

    async def find_by_id(self, exercise_id):
        raise RuntimeError("storage down")


def _ids(exercises):
    return [ex.id for ex in exercises]


class TestPredicates:
    def test_single_word(self):
        predicate = build_text_predicate("Flexão")
        assert isinstance(predicate, AnyOf)
        assert Condition("name", "contains", "flexao") in predicate.items
        assert Condition("name_en", "startswith", "Flexão") in predicate.items

    def test_multi_word_requires_every_word(self):
        predicate = build_text_predicate("rosca direta")
        assert isinstance(predicate, AllOf)
        assert len(predicate.items) == 2

    def test_ids_short_circuit_filters(self):
        search = ExerciseSearchInput(ids="0004, 0001,,", q="supino", body_part="pernas")
        assert build_search_predicate(search) == Condition("id", "in", ("0004", "0001"))

    def test_no_conditions(self):
        assert build_search_predicate(ExerciseSearchInput()) is None


class TestSearch:
    @pytest.mark.asyncio
    async def test_unfiltered_pagination(self, search_service):
        result = await search_service.search(ExerciseSearchInput(page=4, size=4))

        assert _ids(result.data) == NAME_ORDER[12:15]
        assert result.meta.total == 15
        assert result.meta.total_pages == 4
        assert result.suggestions is None

    @pytest.mark.asyncio
    async def test_page_beyond_end(self, search_service):
        result = await search_service.search(ExerciseSearchInput(page=9, size=4))
        assert result.data == []
        assert result.meta.total == 15

    @pytest.mark.asyncio
    async def test_size_and_page_are_clamped(self, search_service):
        result = await search_service.search(ExerciseSearchInput(page=0, size=500))
        assert result.meta.page == 1
        assert result.meta.size == 100
        assert len(result.data) == 15

    @pytest.mark.asyncio
    async def test_ranked_with_media_first(self, search_service):
        result = await search_service.search(ExerciseSearchInput(q="supino"))

        assert _ids(result.data) == ["0001", "0002"]
        assert result.meta.total == 2

    @pytest.mark.asyncio
    async def test_ranked_pagination(self, search_service):
        result = await search_service.search(ExerciseSearchInput(q="rosca", page=2, size=2))

        # 전부 9000점, 미디어 보유 0004 가 맨 앞, 나머지는 이름순
        assert _ids(result.data) == ["0008", "0009"]
        assert result.meta.total == 6
        assert result.meta.total_pages == 3

    @pytest.mark.asyncio
    async def test_ranking_pool_limit(self, spy_repository):
        service = ExerciseSearchService(spy_repository)
        await service.search(ExerciseSearchInput(q="rosca", size=3))
        await service.search(ExerciseSearchInput(q="rosca", size=100))

        limits = [call["limit"] for call in spy_repository.find_many_calls]
        assert limits == [30, 500]

    @pytest.mark.asyncio
    async def test_multi_word_query(self, search_service):
        result = await search_service.search(ExerciseSearchInput(q="rosca direta"))
        assert _ids(result.data) == ["0004"]

    @pytest.mark.asyncio
    async def test_matches_original_name(self, search_service):
        result = await search_service.search(ExerciseSearchInput(q="curl"))
        assert result.meta.total == 6
        assert result.data[0].id == "0004"

    @pytest.mark.asyncio
    async def test_filters_combine_with_query(self, search_service):
        result = await search_service.search(ExerciseSearchInput(q="rosca", equipment="halter"))
        assert _ids(result.data) == ["0006", "0008", "0005"]

    @pytest.mark.asyncio
    async def test_filter_without_query(self, search_service):
        result = await search_service.search(ExerciseSearchInput(body_part="pernas"))
        assert _ids(result.data) == ["0011", "0012"]
        assert result.suggestions is None

    @pytest.mark.asyncio
    async def test_filters_are_exact(self, search_service):
        result = await search_service.search(ExerciseSearchInput(body_part="Pernas"))
        assert result.meta.total == 0

    @pytest.mark.asyncio
    async def test_ids_ignore_other_filters(self, search_service):
        search = ExerciseSearchInput(ids=" 0004, 0001,,", q="supino", body_part="pernas")
        result = await search_service.search(search)

        assert _ids(result.data) == ["0004", "0001"]
        assert result.meta.total == 2
        assert result.suggestions is None

    @pytest.mark.asyncio
    async def test_ids_without_values_match_nothing(self, search_service):
        result = await search_service.search(ExerciseSearchInput(ids=",,", q="zzz"))
        assert result.data == []
        assert result.meta.total == 0
        assert result.suggestions is None

    @pytest.mark.asyncio
    async def test_storage_errors_propagate(self):
        service = ExerciseSearchService(FailingRepository())
        with pytest.raises(RuntimeError):
            await service.search(ExerciseSearchInput(q="supino"))


class TestSuggestions:
    @pytest.mark.asyncio
    async def test_few_results(self, search_service):
        result = await search_service.search(ExerciseSearchInput(q="supino"))

        assert result.suggestions.message == "Veja também exercícios relacionados:"
        assert result.suggestions.keywords == ["crucifixo", "crossover", "flexão", "peck deck", "fly"]
        assert _ids(result.suggestions.exercises) == ["0003", "0013", "0010"]

    @pytest.mark.asyncio
    async def test_no_results(self, search_service):
        result = await search_service.search(ExerciseSearchInput(q="supinoo"))

        assert result.data == []
        assert result.meta.total == 0
        assert result.suggestions.message == 'Não encontramos "supinoo", mas você pode gostar de:'
        assert result.suggestions.keywords[0] == "supino"
        assert len(result.suggestions.exercises) <= 6

    @pytest.mark.asyncio
    async def test_no_related_exercises(self, search_service):
        result = await search_service.search(ExerciseSearchInput(q="zumba"))
        assert result.meta.total == 0
        assert result.suggestions is None

    @pytest.mark.asyncio
    async def test_enough_results(self, search_service):
        result = await search_service.search(ExerciseSearchInput(q="rosca"))
        assert result.meta.total == 6
        assert result.suggestions is None

    @pytest.mark.asyncio
    async def test_threshold_boundary(self):
        names = ["Supino A", "Supino B", "Supino C", "Supino D", "Crucifixo Reto"]
        service = ExerciseSearchService(make_repository(names))

        result = await service.search(ExerciseSearchInput(q="supino"))
        assert result.meta.total == 4
        assert _ids(result.suggestions.exercises)[0] == "5"

        service = ExerciseSearchService(make_repository(names[:4] + ["Supino E"]))
        result = await service.search(ExerciseSearchInput(q="supino"))
        assert result.meta.total == 5
        assert result.suggestions is None

    @pytest.mark.asyncio
    async def test_without_related_terms(self):
        service = ExerciseSearchService(make_repository(["Zumba 1", "Zumba 2", "Zumba 3", "Zumba 4"]))
        result = await service.search(ExerciseSearchInput(q="zumba"))
        assert result.meta.total == 4
        assert result.suggestions is None


class TestLookups:
    @pytest.mark.asyncio
    async def test_get_exercise(self, search_service):
        exercise = await search_service.get_exercise("0004")
        assert exercise.name == "Rosca Direta com Barra"
        assert [step.step_order for step in exercise.instructions] == [1, 2]

    @pytest.mark.asyncio
    async def test_get_exercise_not_found(self, search_service):
        with pytest.raises(ExerciseNotFoundError, match="Exercício com ID nope não encontrado"):
            await search_service.get_exercise("nope")

    @pytest.mark.asyncio
    async def test_get_exercises_by_ids_keeps_order(self, search_service):
        exercises = await search_service.get_exercises_by_ids(["0010", "missing", "0001"])
        assert _ids(exercises) == ["0010", "0001"]

    @pytest.mark.asyncio
    async def test_list_by_field(self, search_service):
        result = await search_service.list_by_field("target", "bíceps", page=2, size=2)
        assert _ids(result.data) == ["0004", "0005"]
        assert result.meta.total == 5
        assert result.meta.total_pages == 3

    @pytest.mark.asyncio
    async def test_list_by_unknown_field(self, search_service):
        with pytest.raises(ValueError):
            await search_service.list_by_field("name", "Supino")

    @pytest.mark.asyncio
    async def test_random_exercises(self, search_service):
        exercises = await search_service.random_exercises(
            3, body_part="braços", rng=random.Random(7)
        )
        assert len(exercises) == 3
        assert len(set(_ids(exercises))) == 3
        assert all(ex.body_part == "braços" for ex in exercises)

    @pytest.mark.asyncio
    async def test_random_exercises_count_bounds(self, search_service):
        assert len(await search_service.random_exercises(50, body_part="pernas")) == 2
        assert len(await search_service.random_exercises(0)) == 1
