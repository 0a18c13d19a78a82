"""
Unit tests for the OpenRouter client.
"""

import httpx
import openai
import pytest
from unittest.mock import Mock

from talentvisa.config import Settings
from talentvisa.llm import LLMError, LLMResponse, LLMTimeoutError
from talentvisa.llm.providers import OpenRouterClient, create_llm_client


def make_completion(content="• Answer", model="openai/gpt-oss-20b:free"):
    completion = Mock()
    completion.model = model
    completion.choices = [Mock()]
    completion.choices[0].message.content = content
    completion.choices[0].finish_reason = "stop"
    completion.usage.prompt_tokens = 120
    completion.usage.completion_tokens = 30
    return completion


@pytest.fixture
def client():
    """OpenRouter client with the SDK transport mocked out."""
    client = OpenRouterClient(api_key="test-key", app_title="Test App")
    client.client = Mock()
    client.client.chat.completions.create.return_value = make_completion()
    return client


class TestOpenRouterClient:
    """Tests for OpenRouterClient."""

    def test_requires_api_key(self, monkeypatch):
        monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)

        with pytest.raises(ValueError, match="OpenRouter API key required"):
            OpenRouterClient()

    def test_sdk_configuration(self):
        client = OpenRouterClient(
            api_key="test-key",
            app_url="https://example.com",
            app_title="Visa Assistant",
        )

        assert str(client.client.base_url).startswith("https://openrouter.ai/api/v1")
        assert client.client.max_retries == 0
        assert client.default_model == "openai/gpt-oss-20b:free"

    def test_request_shape(self, client):
        response = client.generate(
            prompt="How long does it take?",
            system="You are a visa expert.",
            model="google/gemini-2.0-flash-exp:free",
            max_tokens=1000,
            temperature=0.7,
            timeout=15.0,
        )

        client.client.chat.completions.create.assert_called_once_with(
            model="google/gemini-2.0-flash-exp:free",
            messages=[
                {"role": "system", "content": "You are a visa expert."},
                {"role": "user", "content": "How long does it take?"},
            ],
            max_tokens=1000,
            temperature=0.7,
            timeout=15.0,
        )
        assert isinstance(response, LLMResponse)
        assert response.content == "• Answer"
        assert response.total_tokens == 150
        assert response.stop_reason == "stop"

    def test_default_model_and_no_system(self, client):
        client.generate(prompt="Hi")

        kwargs = client.client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "openai/gpt-oss-20b:free"
        assert kwargs["messages"] == [{"role": "user", "content": "Hi"}]
        assert "timeout" not in kwargs

    def test_missing_content_is_empty_string(self, client):
        client.client.chat.completions.create.return_value = make_completion(content=None)

        response = client.generate(prompt="Hi")

        assert response.content == ""
        assert response.has_content is False

    def test_timeout_translated(self, client):
        request = httpx.Request("POST", "https://openrouter.ai/api/v1/chat/completions")
        client.client.chat.completions.create.side_effect = openai.APITimeoutError(
            request=request
        )

        with pytest.raises(LLMTimeoutError):
            client.generate(prompt="Hi", timeout=15.0)

    def test_api_error_translated(self, client):
        request = httpx.Request("POST", "https://openrouter.ai/api/v1/chat/completions")
        client.client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=request
        )

        with pytest.raises(LLMError) as exc_info:
            client.generate(prompt="Hi")

        assert not isinstance(exc_info.value, LLMTimeoutError)


class TestCreateLLMClient:
    """Tests for create_llm_client."""

    def test_no_key_is_unavailable(self):
        settings = Settings(openrouter_api_key="", _env_file=None)

        assert create_llm_client(settings) is None

    def test_whitespace_key_is_unavailable(self):
        settings = Settings(openrouter_api_key="   ", _env_file=None)

        assert create_llm_client(settings) is None

    def test_builds_client(self):
        settings = Settings(
            openrouter_api_key="test-key",
            models=["deepseek/deepseek-chat-v3.1:free"],
            _env_file=None,
        )

        client = create_llm_client(settings)

        assert isinstance(client, OpenRouterClient)
        assert client.default_model == "deepseek/deepseek-chat-v3.1:free"
