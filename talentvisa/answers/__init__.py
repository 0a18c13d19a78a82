"""
Static answers for the Global Talent Visa assistant.

Prepared answers for the guided questions and the keyword-selected
degraded-mode answers used when no model response is available.
"""

from .store import (
    DEFAULT_GUIDED_ANSWERS,
    DEFAULT_KEYWORD_RULES,
    KeywordRule,
    StaticAnswerStore,
)

__all__ = [
    "DEFAULT_GUIDED_ANSWERS",
    "DEFAULT_KEYWORD_RULES",
    "KeywordRule",
    "StaticAnswerStore",
]
