"""
Answer pipeline for the Global Talent Visa assistant.
"""

from .config import AssistantConfig
from .errors import ClientInputError
from .executor import ModelFallbackExecutor
from .prompt import PromptBuilder, SYSTEM_PROMPT
from .request import ChatRequest, answer_chat_request, parse_chat_request
from .resolver import AnswerResolver, create_resolver
from .types import (
    AnswerSource,
    AttemptOutcome,
    AttemptStatus,
    ExecutionResult,
    Prompt,
    ResolutionResult,
)

__all__ = [
    "AnswerResolver",
    "AnswerSource",
    "AssistantConfig",
    "AttemptOutcome",
    "AttemptStatus",
    "ChatRequest",
    "ClientInputError",
    "ExecutionResult",
    "ModelFallbackExecutor",
    "Prompt",
    "PromptBuilder",
    "ResolutionResult",
    "SYSTEM_PROMPT",
    "answer_chat_request",
    "create_resolver",
    "parse_chat_request",
]
