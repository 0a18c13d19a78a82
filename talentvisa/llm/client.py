"""
Abstract LLM client interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class LLMError(Exception):
    """Raised when the completion service rejects or fails a request."""


class LLMTimeoutError(LLMError):
    """Raised when a completion request exceeds its deadline."""


@dataclass
class LLMResponse:
    """Response from an LLM."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int
    stop_reason: str | None = None

    @property
    def total_tokens(self) -> int:
        """Total tokens used."""
        return self.input_tokens + self.output_tokens

    @property
    def has_content(self) -> bool:
        """Whether the completion carries any non-whitespace text."""
        return bool(self.content and self.content.strip())


class LLMClient(ABC):
    """
    Abstract base class for LLM clients.

    A single client instance serves every model identifier on its endpoint,
    so the model is chosen per call rather than at construction.

    Implementations should handle:
    - API authentication
    - Request formatting
    - Response parsing
    - Translating provider errors into LLMError / LLMTimeoutError
    """

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Return the model used when a call does not name one."""
        pass

    @abstractmethod
    def generate(
        self,
        prompt: str,
        system: str | None = None,
        model: str | None = None,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        timeout: float | None = None,
    ) -> LLMResponse:
        """
        Generate a response from the LLM.

        Args:
            prompt: The user message.
            system: Optional system instruction.
            model: Model identifier; falls back to default_model.
            max_tokens: Maximum tokens in response.
            temperature: Sampling temperature (0-2).
            timeout: Request deadline in seconds.

        Returns:
            LLMResponse with generated content.

        Raises:
            LLMTimeoutError: The request exceeded its deadline.
            LLMError: The provider failed the request.
        """
        pass
