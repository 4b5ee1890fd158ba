"""Exercise Catalog 저장소"""

from .base import ExerciseRepository
from .json_repository import JsonExerciseRepository, matches
from .predicates import (
    Predicate,
    Condition,
    AllOf,
    AnyOf,
    eq,
    in_,
    contains,
    startswith,
    not_null,
    all_of,
    any_of,
)

__all__ = [
    "ExerciseRepository",
    "JsonExerciseRepository",
    "matches",
    "Predicate",
    "Condition",
    "AllOf",
    "AnyOf",
    "eq",
    "in_",
    "contains",
    "startswith",
    "not_null",
    "all_of",
    "any_of",
]
