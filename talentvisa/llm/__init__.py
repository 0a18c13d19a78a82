"""
LLM client module for the Global Talent Visa assistant.
"""

from .client import LLMClient, LLMError, LLMResponse, LLMTimeoutError

__all__ = [
    "LLMClient",
    "LLMError",
    "LLMResponse",
    "LLMTimeoutError",
]
