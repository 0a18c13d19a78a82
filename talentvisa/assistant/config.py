"""
Configuration for the answer pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from talentvisa.config.settings import DEFAULT_MODELS

if TYPE_CHECKING:
    from talentvisa.config import Settings


@dataclass
class AssistantConfig:
    """
    Configuration for the answer pipeline.

    Attributes:
        models: Model identifiers in fallback priority order (first = preferred).
        attempt_timeout_s: Deadline for one model attempt, in seconds.
        max_tokens: Maximum tokens for each completion.
        temperature: Sampling temperature for each completion.
        context_excerpt_chars: Resume characters embedded in the prompt.
    """

    models: list[str] = field(default_factory=lambda: list(DEFAULT_MODELS))
    attempt_timeout_s: float = 15.0
    max_tokens: int = 1000
    temperature: float = 0.7
    context_excerpt_chars: int = 1500

    def __post_init__(self) -> None:
        """Validate configuration."""
        self.models = list(self.models)
        if not self.models:
            raise ValueError("models must contain at least one model identifier")
        if self.attempt_timeout_s <= 0:
            raise ValueError(
                f"attempt_timeout_s must be > 0, got {self.attempt_timeout_s}"
            )
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be >= 1, got {self.max_tokens}")
        if not 0 <= self.temperature <= 2:
            raise ValueError(f"temperature must be 0-2, got {self.temperature}")
        if self.context_excerpt_chars < 0:
            raise ValueError(
                f"context_excerpt_chars must be >= 0, got {self.context_excerpt_chars}"
            )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "AssistantConfig":
        """Build a pipeline config from application settings."""
        return cls(
            models=list(settings.models),
            attempt_timeout_s=settings.attempt_timeout_s,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            context_excerpt_chars=settings.context_excerpt_chars,
        )
