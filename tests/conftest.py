"""
Shared fixtures: a small PT-BR catalog
"""
import pytest

from exercise_catalog.repository import JsonExerciseRepository
from exercise_catalog.services import ExerciseSearchService


def _exercise(ex_id, name, name_en, body_part, target, equipment, gif=False, image=False):
    return {
        "id": ex_id,
        "name": name,
        "nameEn": name_en,
        "bodyPart": body_part,
        "target": target,
        "equipment": equipment,
        "gifUrl": f"/media/exercises/{ex_id}.webp" if gif else None,
        "imageUrl": f"https://img.example.com/{ex_id}.png" if image else None,
        "secondaryMuscles": [{"muscle": "core", "muscleEn": "core"}],
        "instructions": [
            {"stepOrder": 2, "instruction": "Retorne à posição inicial."},
            {"stepOrder": 1, "instruction": "Posicione-se corretamente."},
        ],
    }


CATALOG = [
    _exercise("0001", "Supino Reto com Barra", "barbell bench press", "peito", "peitorais", "barra", gif=True),
    _exercise("0002", "Supino Inclinado com Halteres", "incline dumbbell press", "peito", "peitorais", "halter"),
    _exercise("0003", "Crucifixo no Crossover", "cable crossover fly", "peito", "peitorais", "polia", gif=True),
    _exercise("0004", "Rosca Direta com Barra", "barbell curl", "braços", "bíceps", "barra", gif=True),
    _exercise("0005", "Rosca Martelo com Halter", "dumbbell hammer curl", "braços", "bíceps", "halter"),
    _exercise("0006", "Rosca Alternada", "alternate dumbbell curl", "braços", "bíceps", "halter"),
    _exercise("0007", "Rosca Scott", "preacher curl", "braços", "bíceps", "barra"),
    _exercise("0008", "Rosca Concentrada", "concentration curl", "braços", "bíceps", "halter"),
    _exercise("0009", "Rosca Inversa", "reverse curl", "braços", "antebraços", "barra"),
    _exercise("0010", "Tríceps Testa com Barra", "lying triceps extension", "braços", "tríceps", "barra"),
    _exercise("0011", "Agachamento Livre", "barbell squat", "pernas", "quadríceps", "barra", gif=True),
    _exercise("0012", "Leg Press 45", "sled leg press", "pernas", "quadríceps", "máquina"),
    _exercise("0013", "Flexão de Braço", "push-up", "peito", "peitorais", "peso corporal", image=True),
    _exercise("0014", "Prancha Abdominal", "front plank", "abdômen", "abdominais", "peso corporal"),
    _exercise("0015", "Remada Curvada", "bent over row", "costas", "dorsais", "barra"),
]

# name ascending (case-insensitive)
NAME_ORDER = [
    "0011", "0003", "0013", "0012", "0014", "0015", "0006", "0008",
    "0004", "0009", "0005", "0007", "0002", "0001", "0010",
]


class SpyRepository:
    """Wraps a repository and records find_many calls"""

    def __init__(self, inner):
        self.inner = inner
        self.find_many_calls = []

    async def find_many(self, predicate=None, limit=None, offset=0, order_by="name"):
        self.find_many_calls.append({"predicate": predicate, "limit": limit, "offset": offset})
        return await self.inner.find_many(predicate, limit=limit, offset=offset, order_by=order_by)

    async def count(self, predicate=None):
        return await self.inner.count(predicate)

    async def find_by_id(self, exercise_id):
        return await self.inner.find_by_id(exercise_id)

    async def list_ids(self, predicate=None):
        return await self.inner.list_ids(predicate)

    async def group_counts(self, field):
        return await self.inner.group_counts(field)

    async def ping(self):
        return await self.inner.ping()


@pytest.fixture
def catalog_records():
    return [dict(record) for record in CATALOG]


@pytest.fixture
def repository(catalog_records):
    return JsonExerciseRepository.from_records(catalog_records)


@pytest.fixture
def spy_repository(repository):
    return SpyRepository(repository)


@pytest.fixture
def search_service(repository):
    return ExerciseSearchService(repository)


def make_repository(names):
    """Repository with bare exercises named as given (ids 1..n)"""
    return JsonExerciseRepository.from_records(
        {"id": str(i), "name": name} for i, name in enumerate(names, start=1)
    )
