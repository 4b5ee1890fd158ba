"""텍스트 정규화 유틸리티 (공유)

검색어/운동 이름 비교용. 대소문자와 발음 구별 기호(acento)를 제거한다.
"""

import re
import unicodedata
from typing import List

_TOKEN_SPLIT = re.compile(r"[\s,()]+")
_FIRST_CLAUSE_SPLIT = re.compile(r"[,(]")


def normalize_text(text: str) -> str:
    """소문자 변환 + NFD 분해 + 결합 문자 제거 + 공백 정리

    예: "Flexão de Braço " -> "flexao de braco"
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.strip()


def tokenize(text: str) -> List[str]:
    """공백/쉼표/괄호 기준 토큰 분리 (빈 토큰 제외)"""
    return [token for token in _TOKEN_SPLIT.split(text) if token]


def first_clause(text: str) -> str:
    """쉼표 또는 여는 괄호 이전 부분"""
    return _FIRST_CLAUSE_SPLIT.split(text, maxsplit=1)[0].strip()


def split_query_words(query: str) -> List[str]:
    """검색어를 공백 기준 단어 목록으로 분리"""
    return query.strip().split()
