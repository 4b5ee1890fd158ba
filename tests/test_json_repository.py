"""JSON 저장소 테스트"""
import json

import pytest

from exercise_catalog.exceptions import CatalogLoadError
from exercise_catalog.repository import (
    Condition,
    JsonExerciseRepository,
    all_of,
    any_of,
    contains,
    eq,
    in_,
    not_null,
    startswith,
)


@pytest.mark.asyncio
async def test_string_ops_ignore_case_but_not_accents(repository):
    assert await repository.count(contains("name", "TRÍCEPS")) == 1
    assert await repository.count(contains("name", "triceps")) == 0
    assert await repository.count(startswith("name", "rosca")) == 6


@pytest.mark.asyncio
async def test_eq_and_in(repository):
    assert await repository.count(eq("equipment", "halter")) == 4
    assert await repository.list_ids(in_("id", ["0002", "0001", "9999"])) == ["0001", "0002"]


@pytest.mark.asyncio
async def test_empty_combinators(repository):
    assert await repository.count(all_of()) == 15
    assert await repository.count(any_of()) == 0


@pytest.mark.asyncio
async def test_not_null(repository):
    assert await repository.count(any_of(not_null("gif_url"), not_null("image_url"))) == 5


@pytest.mark.asyncio
async def test_find_many_orders_and_slices(repository):
    page = await repository.find_many(eq("body_part", "peito"), limit=2, offset=1)
    assert [ex.name for ex in page] == ["Flexão de Braço", "Supino Inclinado com Halteres"]


@pytest.mark.asyncio
async def test_unknown_field(repository):
    with pytest.raises(ValueError):
        await repository.count(eq("calories", 10))


def test_unknown_operator():
    with pytest.raises(ValueError):
        Condition("name", "regex", ".*")


@pytest.mark.asyncio
async def test_group_counts(repository):
    counts = await repository.group_counts("body_part")
    assert counts["braços"] == 7
    assert sum(counts.values()) == 15


def test_duplicate_ids_are_skipped(catalog_records):
    repo = JsonExerciseRepository.from_records(catalog_records + [catalog_records[0]])
    assert len(repo) == 15


@pytest.mark.asyncio
async def test_from_file_formats(tmp_path, catalog_records):
    as_list = tmp_path / "list.json"
    as_list.write_text(json.dumps(catalog_records), encoding="utf-8")
    assert len(JsonExerciseRepository.from_file(as_list)) == 15

    keyed = {"_metadata": {"version": 1}}
    for record in catalog_records[:3]:
        keyed[record["id"]] = {k: v for k, v in record.items() if k != "id"}
    as_dict = tmp_path / "dict.json"
    as_dict.write_text(json.dumps({"exercises": keyed}), encoding="utf-8")

    repo = JsonExerciseRepository.from_file(as_dict)
    assert len(repo) == 3
    assert (await repo.find_by_id("0002")).name == "Supino Inclinado com Halteres"


def test_from_file_errors(tmp_path):
    with pytest.raises(CatalogLoadError):
        JsonExerciseRepository.from_file(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        JsonExerciseRepository.from_file(broken)

    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps([{"id": "1"}]), encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        JsonExerciseRepository.from_file(invalid)
