"""관련도 점수 계산

운동 이름과 검색어의 관련도를 정수 점수로 계산한다 (높을수록 관련).
점수는 같은 검색어의 후보끼리만 비교 가능하다.
"""

import re
from typing import List, Sequence

from shared.utils import first_clause, normalize_text, tokenize

# 단일 단어 점수 단계
EXACT_MATCH = 10000
STARTS_WITH_WORD = 9000
STARTS_WITH = 8500
CLAUSE_MATCH = 8000
CLAUSE_STARTS_WITH_WORD = 7500
CLAUSE_STARTS_WITH = 7000
TOKEN_MATCH = 6000
TOKEN_PREFIX = 5000
SUBSTRING_BASE = 4000
SUBSTRING_MAX_PENALTY = 3000
NO_MATCH = 100

# 다중 단어 점수
WORD_EXACT = 1000
WORD_FIRST_TOKEN_BONUS = 500
WORD_PREFIX = 500
WORD_SUBSTRING = 200
LENGTH_BONUS_BASE = 500
ORDER_BONUS = 300

# 정렬 보너스 (시각 자료 보유)
MEDIA_BONUS = 50


def score_single_term(name: str, query: str) -> int:
    """
    단일 검색어 점수 (가장 구체적인 단계 하나만 적용)

    Args:
        name: 후보 운동명
        query: 검색어

    Returns:
        100 ~ 10000
    """
    name_norm = normalize_text(name)
    query_norm = normalize_text(query)

    if name_norm == query_norm:
        return EXACT_MATCH
    if name_norm.startswith(query_norm + " "):
        return STARTS_WITH_WORD
    if name_norm.startswith(query_norm):
        return STARTS_WITH

    # 쉼표/괄호 이전 부분
    clause = first_clause(name_norm)
    if clause == query_norm:
        return CLAUSE_MATCH
    if clause.startswith(query_norm + " "):
        return CLAUSE_STARTS_WITH_WORD
    if clause.startswith(query_norm):
        return CLAUSE_STARTS_WITH

    words = tokenize(name_norm)
    if query_norm in words:
        return TOKEN_MATCH
    if any(word.startswith(query_norm) for word in words):
        return TOKEN_PREFIX

    idx = name_norm.find(query_norm)
    if idx != -1:
        # 앞쪽에 나올수록 높음, 최저 1000
        return SUBSTRING_BASE - min(idx * 10, SUBSTRING_MAX_PENALTY)

    return NO_MATCH


def score_multi_term(name: str, query_words: Sequence[str]) -> int:
    """
    다중 단어 점수 (모든 단어가 포함되어야 함)

    Args:
        name: 후보 운동명
        query_words: 공백 기준 검색어 단어 목록

    Returns:
        0 (어느 한 단어라도 없음) 또는 합산 점수
    """
    if not query_words:
        return 0
    if len(query_words) == 1:
        return score_single_term(name, query_words[0])

    name_norm = normalize_text(name)
    name_words = tokenize(name_norm)
    words_norm: List[str] = [normalize_text(word) for word in query_words]

    total = 0
    for word in words_norm:
        if word not in name_norm:
            return 0

        if word in name_words:
            total += WORD_EXACT
            if name_words and name_words[0] == word:
                total += WORD_FIRST_TOKEN_BONUS
        elif any(token.startswith(word) for token in name_words):
            total += WORD_PREFIX
        else:
            total += WORD_SUBSTRING

    # 짧은 이름일수록 구체적
    total += max(0, LENGTH_BONUS_BASE - len(name) * 2)

    # 검색어 순서대로 등장 (토큰 경계 무시)
    order_pattern = ".*".join(re.escape(word) for word in words_norm)
    if re.search(order_pattern, name_norm):
        total += ORDER_BONUS

    return total


def ranking_score(name: str, query_words: Sequence[str], has_media: bool) -> int:
    """검색 정렬용 점수 (관련도 + 미디어 보너스)"""
    return score_multi_term(name, query_words) + (MEDIA_BONUS if has_media else 0)
