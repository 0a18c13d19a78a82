"""
Sequential model fallback with a per-attempt deadline.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import TYPE_CHECKING, Sequence

from talentvisa.llm import LLMTimeoutError

from .config import AssistantConfig
from .types import AttemptOutcome, AttemptStatus, ExecutionResult, Prompt

if TYPE_CHECKING:
    from talentvisa.llm import LLMClient, LLMResponse


logger = logging.getLogger(__name__)


class ModelFallbackExecutor:
    """
    Tries each model in priority order until one answers.

    Attempts are strictly sequential and each model is tried once. An
    attempt runs on a worker thread and the executor waits at most
    attempt_timeout_s for it; a late worker is abandoned and whatever it
    eventually returns is discarded. Timeouts, provider errors and empty
    completions all count as a failed attempt and move on to the next
    model. The first non-empty completion wins.

    Example:
        >>> executor = ModelFallbackExecutor(llm=OpenRouterClient())
        >>> result = executor.execute(Prompt(instruction="...", user="..."))
        >>> if result.succeeded:
        ...     print(result.model, result.content)
    """

    def __init__(
        self,
        llm: "LLMClient",
        config: AssistantConfig | None = None,
    ):
        """
        Initialize the executor.

        Args:
            llm: Completion client shared by every attempt.
            config: Pipeline configuration (model order, deadline, sampling).
        """
        self.llm = llm
        self.config = config or AssistantConfig()

    def execute(
        self,
        prompt: Prompt,
        models: Sequence[str] | None = None,
    ) -> ExecutionResult:
        """
        Walk the model chain for a prompt.

        Args:
            prompt: Instruction and user message sent to every model.
            models: Override for the configured model order.

        Returns:
            ExecutionResult; on exhaustion succeeded is False and
            last_error holds the last observed cause.
        """
        models = list(models) if models is not None else self.config.models
        attempts: list[AttemptOutcome] = []

        for model in models:
            outcome = self._attempt(model, prompt)
            attempts.append(outcome)

            if outcome.succeeded:
                logger.info(
                    f"Model {model} answered in {outcome.elapsed_ms:.0f}ms "
                    f"({len(outcome.content)} chars)"
                )
                return ExecutionResult(
                    succeeded=True,
                    content=outcome.content,
                    model=model,
                    attempts=attempts,
                )

            logger.warning(
                f"Model {model} failed ({outcome.status.value}): {outcome.error}"
            )

        last_error = attempts[-1].error if attempts else "no models configured"
        return ExecutionResult(
            succeeded=False,
            attempts=attempts,
            last_error=last_error,
        )

    def _attempt(self, model: str, prompt: Prompt) -> AttemptOutcome:
        """Run one completion against the deadline and classify the outcome."""
        timeout = self.config.attempt_timeout_s
        start_time = time.perf_counter()

        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"attempt-{model}")
        try:
            future = pool.submit(self._call, model, prompt, timeout)
            response = future.result(timeout=timeout)
        except (FuturesTimeoutError, LLMTimeoutError):
            return AttemptOutcome(
                model=model,
                status=AttemptStatus.TIMEOUT,
                error=f"Timeout after {timeout}s",
                elapsed_ms=self._elapsed_ms(start_time),
            )
        except Exception as e:
            return AttemptOutcome(
                model=model,
                status=AttemptStatus.FAILURE,
                error=f"{type(e).__name__}: {e}",
                elapsed_ms=self._elapsed_ms(start_time),
            )
        finally:
            pool.shutdown(wait=False)

        elapsed_ms = self._elapsed_ms(start_time)
        if not response.has_content:
            return AttemptOutcome(
                model=model,
                status=AttemptStatus.EMPTY_RESPONSE,
                error="Completion returned no content",
                elapsed_ms=elapsed_ms,
            )

        return AttemptOutcome(
            model=model,
            status=AttemptStatus.SUCCESS,
            content=response.content,
            elapsed_ms=elapsed_ms,
        )

    def _call(self, model: str, prompt: Prompt, timeout: float) -> "LLMResponse":
        return self.llm.generate(
            prompt=prompt.user,
            system=prompt.instruction,
            model=model,
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
            timeout=timeout,
        )

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return (time.perf_counter() - start_time) * 1000
