"""Shared utilities"""

from .logging import get_logger, setup_logging
from .text import normalize_text, tokenize, first_clause, split_query_words
from .cache import AsyncTTLCache, LockCache

__all__ = [
    "get_logger",
    "setup_logging",
    "normalize_text",
    "tokenize",
    "first_clause",
    "split_query_words",
    "AsyncTTLCache",
    "LockCache",
]
