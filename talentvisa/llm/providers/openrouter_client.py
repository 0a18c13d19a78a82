"""
OpenRouter LLM client.

OpenRouter exposes an OpenAI-compatible API, so this client drives it through
the OpenAI Python SDK with a different base URL.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import openai
from openai import OpenAI

from ..client import LLMClient, LLMError, LLMResponse, LLMTimeoutError

if TYPE_CHECKING:
    from talentvisa.config import Settings


logger = logging.getLogger(__name__)


OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterClient(LLMClient):
    """
    OpenRouter client implementation.

    Uses the OpenAI Python SDK pointed at OpenRouter. SDK retries are
    disabled: each call is exactly one upstream attempt.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "openai/gpt-oss-20b:free",
        base_url: str = OPENROUTER_BASE_URL,
        app_url: str | None = None,
        app_title: str | None = None,
    ):
        """
        Initialize the OpenRouter client.

        Args:
            api_key: OpenRouter API key. If None, uses OPENROUTER_API_KEY env var.
            model: Default model identifier.
            base_url: OpenAI-compatible endpoint.
            app_url: Sent as HTTP-Referer for app attribution.
            app_title: Sent as X-Title for app attribution.
        """
        api_key = api_key or os.getenv("OPENROUTER_API_KEY")
        if not api_key:
            raise ValueError(
                "OpenRouter API key required. Set OPENROUTER_API_KEY env var or pass api_key."
            )

        headers = {}
        if app_url:
            headers["HTTP-Referer"] = app_url
        if app_title:
            headers["X-Title"] = app_title

        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            default_headers=headers or None,
            max_retries=0,
        )
        self._model = model

    @property
    def default_model(self) -> str:
        """Return the default model name."""
        return self._model

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
        Generate a response using OpenRouter.

        Args:
            prompt: The user message.
            system: Optional system instruction.
            model: Model identifier; falls back to default_model.
            max_tokens: Maximum tokens in response.
            temperature: Sampling temperature (0-2).
            timeout: Request deadline in seconds.

        Returns:
            LLMResponse with generated content.
        """
        model = model or self._model
        messages = []

        if system:
            messages.append({"role": "system", "content": system})

        messages.append({"role": "user", "content": prompt})

        kwargs = {
            "model": model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = self.client.chat.completions.create(**kwargs)
        except openai.APITimeoutError as e:
            raise LLMTimeoutError(f"{model} timed out after {timeout}s") from e
        except openai.OpenAIError as e:
            raise LLMError(f"{model} request failed: {e}") from e

        # Extract content from response
        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""

        return LLMResponse(
            content=content,
            model=response.model or model,
            input_tokens=response.usage.prompt_tokens if response.usage else 0,
            output_tokens=response.usage.completion_tokens if response.usage else 0,
            stop_reason=response.choices[0].finish_reason if response.choices else None,
        )


def create_llm_client(settings: "Settings") -> OpenRouterClient | None:
    """
    Build the completion client from settings.

    Returns None when no API key is configured or the client cannot be
    constructed; callers treat that as the capability being unavailable.
    """
    if not settings.has_api_key:
        logger.warning("No OpenRouter API key configured; model answers disabled")
        return None

    try:
        return OpenRouterClient(
            api_key=settings.openrouter_api_key,
            model=settings.models[0],
            base_url=settings.openrouter_base_url,
            app_url=settings.app_url,
            app_title=settings.app_title,
        )
    except (ValueError, openai.OpenAIError) as e:
        logger.warning(f"Could not construct OpenRouter client: {e}")
        return None
