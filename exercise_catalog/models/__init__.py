"""Exercise Catalog Models"""

from .input import ExerciseSearchInput, clamp_page, clamp_size
from .output import PageMeta, SuggestionBlock, ExercisePage, CatalogStats

__all__ = [
    "ExerciseSearchInput",
    "clamp_page",
    "clamp_size",
    "PageMeta",
    "SuggestionBlock",
    "ExercisePage",
    "CatalogStats",
]
