"""키워드 연관 인덱스

근육군/분할/장비/목표/세부 근육 → 관련 운동명 조각의 정적 매핑.
키 → 값(정방향), 값 → 키 + 형제 값(역방향) 양방향으로 조회한다.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from shared.utils import normalize_text

MAX_RELATED_TERMS = 10

RELATED_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # 근육군
    "peito": ("supino", "crucifixo", "crossover", "flexão", "peck deck", "fly"),
    "costas": ("remada", "puxada", "pulldown", "barra fixa", "serrote", "levantamento terra"),
    "ombros": ("desenvolvimento", "elevação lateral", "elevação frontal", "face pull", "arnold"),
    "braços": ("rosca", "tríceps", "bíceps", "martelo", "francesa", "testa"),
    "pernas": ("agachamento", "leg press", "extensora", "flexora", "stiff", "afundo", "panturrilha"),
    "abdômen": ("abdominal", "prancha", "crunch", "elevação de pernas", "oblíquo"),

    # 분할 (push / pull / legs)
    "push": ("supino", "desenvolvimento", "tríceps", "flexão", "paralelas"),
    "pull": ("remada", "puxada", "rosca", "barra fixa", "face pull"),
    "legs": ("agachamento", "leg press", "stiff", "afundo", "extensora", "flexora"),

    # 장비
    "halter": ("rosca alternada", "supino", "desenvolvimento", "elevação lateral", "fly"),
    "barra": ("supino", "agachamento", "levantamento terra", "remada", "rosca direta"),
    "polia": ("crossover", "tríceps", "puxada", "face pull", "rosca"),
    "máquina": ("leg press", "extensora", "flexora", "peck deck", "smith"),
    "peso corporal": ("flexão", "barra fixa", "paralelas", "prancha", "abdominal"),

    # 목표
    "hipertrofia": ("supino", "agachamento", "remada", "desenvolvimento", "rosca"),
    "força": ("agachamento", "levantamento terra", "supino", "desenvolvimento"),
    "definição": ("crossover", "elevação lateral", "extensora", "abdominal"),
    "funcional": ("agachamento", "levantamento terra", "flexão", "prancha", "burpee"),

    # 세부 근육
    "bíceps": ("rosca direta", "rosca alternada", "rosca martelo", "rosca scott", "rosca concentrada"),
    "tríceps": ("tríceps testa", "tríceps corda", "tríceps francês", "mergulho", "paralelas"),
    "peitorais": ("supino reto", "supino inclinado", "crucifixo", "crossover", "flexão"),
    "dorsais": ("puxada", "remada", "pulldown", "barra fixa", "serrote"),
    "deltoides": ("desenvolvimento", "elevação lateral", "elevação frontal", "crucifixo inverso"),
    "quadríceps": ("agachamento", "leg press", "extensora", "afundo", "hack"),
    "glúteos": ("agachamento", "stiff", "hip thrust", "afundo", "elevação pélvica"),
    "posterior de coxa": ("stiff", "flexora", "levantamento terra romeno", "good morning"),
})


def _overlaps(a: str, b: str) -> bool:
    """같거나 한쪽이 다른 쪽을 포함"""
    return a == b or a in b or b in a


class KeywordIndex:
    """양방향 키워드 연관 인덱스

    사용 예시:
        index = KeywordIndex()
        index.related_terms("bíceps")  # ["rosca direta", "rosca alternada", ...]
    """

    def __init__(self, table: Mapping[str, Tuple[str, ...]] = RELATED_KEYWORDS):
        # (원문, 정규화) 쌍을 미리 계산
        self._entries: List[Tuple[str, str, Tuple[str, ...], Tuple[str, ...]]] = [
            (key, normalize_text(key), tuple(values), tuple(normalize_text(v) for v in values))
            for key, values in table.items()
        ]

    def related_terms(self, query: str, limit: int = MAX_RELATED_TERMS) -> List[str]:
        """
        검색어 관련 키워드

        Args:
            query: 사용자 검색어
            limit: 최대 개수

        Returns:
            삽입 순서 유지, 검색어 자신(원문/정규화)은 제외
        """
        query_norm = normalize_text(query)
        if not query_norm:
            return []

        related: Dict[str, None] = {}

        # 정방향: 키 매칭 → 값 전체
        for _, key_norm, values, _ in self._entries:
            if _overlaps(key_norm, query_norm):
                for value in values:
                    related.setdefault(value)

        # 역방향: 값 매칭 → 값 전체 + 키
        for key, _, values, values_norm in self._entries:
            if any(_overlaps(value_norm, query_norm) for value_norm in values_norm):
                for value in values:
                    related.setdefault(value)
                related.setdefault(key)

        terms = [
            term for term in related
            if term != query and normalize_text(term) != query_norm
        ]
        return terms[:limit]


keyword_index = KeywordIndex()


def related_terms(query: str, limit: int = MAX_RELATED_TERMS) -> List[str]:
    """모듈 기본 인덱스로 관련 키워드 조회"""
    return keyword_index.related_terms(query, limit)
