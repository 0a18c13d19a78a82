"""
Answer resolver for the Global Talent Visa assistant.

Classifies a question, answers from static content when possible, and
otherwise runs the model fallback chain, degrading to keyword-selected
answers when no model can respond.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from talentvisa.answers import StaticAnswerStore

from .config import AssistantConfig
from .executor import ModelFallbackExecutor
from .prompt import PromptBuilder
from .types import AnswerSource, ResolutionResult

if TYPE_CHECKING:
    from talentvisa.config import Settings
    from talentvisa.llm import LLMClient


logger = logging.getLogger(__name__)


class AnswerResolver:
    """
    Main entry point for answering a single question.

    Resolution order (first match wins):
    - Connectivity probe -> fixed acknowledgement
    - Guided question -> prepared answer, verbatim
    - Free-form question -> model fallback chain, or the keyword
      fallback when no client is available or every model fails

    resolve() never raises; every failure becomes a fallback answer.

    Example:
        >>> from talentvisa.llm.providers import OpenRouterClient
        >>> from talentvisa.assistant import AnswerResolver
        >>>
        >>> resolver = AnswerResolver(llm=OpenRouterClient())
        >>> result = resolver.resolve("我需要准备什么文件和证据？")
        >>> print(result.response)
    """

    def __init__(
        self,
        llm: "LLMClient | None" = None,
        store: StaticAnswerStore | None = None,
        config: AssistantConfig | None = None,
        prompt_builder: PromptBuilder | None = None,
        executor: ModelFallbackExecutor | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            llm: Completion client; None means model answers are unavailable.
            store: Static answers (probe, guided, keyword fallback).
            config: Pipeline configuration.
            prompt_builder: Override for the prompt builder.
            executor: Override for the model fallback executor.
        """
        self.llm = llm
        self.store = store or StaticAnswerStore()
        self.config = config or AssistantConfig()
        self.prompt_builder = prompt_builder or PromptBuilder(
            max_context_chars=self.config.context_excerpt_chars
        )
        if executor is None and llm is not None:
            executor = ModelFallbackExecutor(llm=llm, config=self.config)
        self.executor = executor

    @property
    def model_available(self) -> bool:
        """Whether free-form questions can reach a model."""
        return self.executor is not None

    def resolve(self, question: str, context: str | None = None) -> ResolutionResult:
        """
        Resolve a question to an answer.

        Args:
            question: The user's question.
            context: Optional resume text used to personalise model answers.

        Returns:
            ResolutionResult with non-empty response text.
        """
        if self.store.is_probe(question):
            return ResolutionResult(
                response=self.store.probe_answer,
                source=AnswerSource.PROBE,
            )

        guided = self.store.guided_answer(question)
        if guided is not None:
            logger.info(f"Guided question answered from prepared content: {question}")
            return ResolutionResult(response=guided, source=AnswerSource.GUIDED)

        if not question:
            logger.warning("Empty question reached the resolver; using fallback")
            return self._fallback(question)

        if not self.model_available:
            logger.warning("No completion client configured; using fallback")
            return self._fallback(question)

        self._log_request(question, context)

        try:
            prompt = self.prompt_builder.build(question, context)
            result = self.executor.execute(prompt)
        except Exception:
            logger.exception("Unexpected error while generating a model answer")
            return self._fallback(question)

        if not result.succeeded:
            logger.error(
                f"All {result.attempt_count} models failed; "
                f"last error: {result.last_error}"
            )
            return self._fallback(question)

        if context:
            logger.debug(
                f"Model response ({len(result.content)} chars): {result.content[:500]}"
            )

        return ResolutionResult(
            response=result.content,
            source=AnswerSource.MODEL,
            model=result.model,
        )

    def _fallback(self, question: str) -> ResolutionResult:
        rule = self.store.match_rule(question)
        logger.info(f"Fallback answer selected: {rule.name if rule else 'default'}")
        return ResolutionResult(
            response=self.store.fallback_answer(question),
            source=AnswerSource.FALLBACK,
        )

    def _log_request(self, question: str, context: str | None) -> None:
        logger.info(
            f"Free-form question: {question[:100]} "
            f"(resume: {len(context) if context else 0} chars)"
        )
        if context:
            logger.debug(f"Resume head: {context[:300]}")
            logger.debug(f"Resume tail: {context[-300:]}")


def create_resolver(
    settings: "Settings | None" = None,
    llm: "LLMClient | None" = None,
) -> AnswerResolver:
    """
    Factory function to create a resolver with default components.

    Args:
        settings: Application settings; loaded from the environment if omitted.
        llm: Completion client; built from settings if omitted.

    Returns:
        Configured AnswerResolver. Without an API key the resolver still
        answers probe, guided and fallback questions.
    """
    from talentvisa.config import get_settings
    from talentvisa.llm.providers import create_llm_client

    settings = settings or get_settings()
    if llm is None:
        llm = create_llm_client(settings)

    return AnswerResolver(
        llm=llm,
        config=AssistantConfig.from_settings(settings),
    )
