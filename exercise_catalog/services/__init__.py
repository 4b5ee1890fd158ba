"""Exercise Catalog Services"""

from .relevance import score_single_term, score_multi_term, ranking_score
from .keyword_index import KeywordIndex, RELATED_KEYWORDS, keyword_index, related_terms
from .related_finder import RelatedExerciseFinder
from .exercise_search import (
    ExerciseSearchService,
    build_search_predicate,
    build_text_predicate,
)
from .stats import ExerciseStatsService

__all__ = [
    "score_single_term",
    "score_multi_term",
    "ranking_score",
    "KeywordIndex",
    "RELATED_KEYWORDS",
    "keyword_index",
    "related_terms",
    "RelatedExerciseFinder",
    "ExerciseSearchService",
    "build_search_predicate",
    "build_text_predicate",
    "ExerciseStatsService",
]
