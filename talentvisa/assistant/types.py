"""
Type definitions for the answer pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Prompt:
    """System instruction plus the user's message for one completion."""

    instruction: str
    user: str


class AttemptStatus(str, Enum):
    """Outcome of a single model attempt."""

    SUCCESS = "success"
    TIMEOUT = "timeout"
    FAILURE = "failure"
    EMPTY_RESPONSE = "empty_response"


@dataclass(frozen=True)
class AttemptOutcome:
    """Result of trying one model with one prompt."""

    model: str
    status: AttemptStatus
    content: str = ""
    error: str | None = None
    elapsed_ms: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.status is AttemptStatus.SUCCESS


@dataclass
class ExecutionResult:
    """Aggregate result of walking the model fallback chain."""

    succeeded: bool
    content: str = ""
    model: str | None = None
    attempts: list[AttemptOutcome] = field(default_factory=list)
    last_error: str | None = None

    @property
    def attempt_count(self) -> int:
        """Number of models actually tried."""
        return len(self.attempts)


class AnswerSource(str, Enum):
    """Which path produced a resolved answer."""

    PROBE = "probe"
    GUIDED = "guided"
    MODEL = "model"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ResolutionResult:
    """Final answer returned to the caller."""

    # The answer text; never empty
    response: str

    # Path that produced the answer
    source: AnswerSource

    # Model that answered, for MODEL results
    model: str | None = None

    @property
    def was_fallback(self) -> bool:
        return self.source is AnswerSource.FALLBACK

    def to_dict(self) -> dict[str, str]:
        """Boundary payload: only the response text crosses it."""
        return {"response": self.response}
