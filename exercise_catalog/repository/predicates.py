"""저장소 조회 조건 트리

코어는 조건 트리를 만들기만 하고 실행은 저장소 구현이 담당한다.

사용 예시:
    where = all_of(
        eq("body_part", "peito"),
        any_of(startswith("name", "supino"), contains("name_en", "bench")),
    )
"""

from dataclasses import dataclass
from typing import Any, Tuple, Union

OPERATORS = ("eq", "in", "contains", "startswith", "not_null")


@dataclass(frozen=True)
class Condition:
    """단일 필드 조건"""

    field: str
    op: str
    value: Any = None

    def __post_init__(self):
        if self.op not in OPERATORS:
            raise ValueError(f"지원하지 않는 연산자: {self.op}")


@dataclass(frozen=True)
class AllOf:
    """AND 결합 (빈 경우 항상 참)"""

    items: Tuple["Predicate", ...]


@dataclass(frozen=True)
class AnyOf:
    """OR 결합 (빈 경우 항상 거짓)"""

    items: Tuple["Predicate", ...]


Predicate = Union[Condition, AllOf, AnyOf]


def eq(field: str, value: Any) -> Condition:
    return Condition(field, "eq", value)


def in_(field: str, values) -> Condition:
    return Condition(field, "in", tuple(values))


def contains(field: str, value: str) -> Condition:
    return Condition(field, "contains", value)


def startswith(field: str, value: str) -> Condition:
    return Condition(field, "startswith", value)


def not_null(field: str) -> Condition:
    return Condition(field, "not_null")


def all_of(*items: Predicate) -> AllOf:
    return AllOf(tuple(items))


def any_of(*items: Predicate) -> AnyOf:
    return AnyOf(tuple(items))
