"""
Unit tests for settings and pipeline configuration.
"""

import pytest

from talentvisa.assistant import AssistantConfig
from talentvisa.config import DEFAULT_MODELS, Settings


class TestSettings:
    """Tests for environment-driven Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
        monkeypatch.delenv("TALENTVISA_OPENROUTER_API_KEY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.openrouter_api_key == ""
        assert settings.has_api_key is False
        assert settings.models == DEFAULT_MODELS
        assert settings.attempt_timeout_s == 15.0
        assert settings.max_tokens == 1000
        assert settings.temperature == 0.7
        assert settings.context_excerpt_chars == 1500

    def test_bare_openrouter_key(self, monkeypatch):
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-test")
        settings = Settings(_env_file=None)

        assert settings.openrouter_api_key == "sk-or-test"
        assert settings.has_api_key is True

    def test_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("TALENTVISA_MODELS", '["model-x", "model-y"]')
        monkeypatch.setenv("TALENTVISA_ATTEMPT_TIMEOUT_S", "7.5")
        settings = Settings(_env_file=None)

        assert settings.models == ["model-x", "model-y"]
        assert settings.attempt_timeout_s == 7.5

    def test_invalid_temperature(self):
        with pytest.raises(ValueError):
            Settings(temperature=3.0, _env_file=None)


class TestAssistantConfig:
    """Tests for AssistantConfig."""

    def test_default_config(self):
        config = AssistantConfig()

        assert config.models == DEFAULT_MODELS
        assert config.attempt_timeout_s == 15.0
        assert config.max_tokens == 1000
        assert config.temperature == 0.7
        assert config.context_excerpt_chars == 1500

    def test_default_models_not_shared(self):
        config = AssistantConfig()
        config.models.append("extra")

        assert AssistantConfig().models == DEFAULT_MODELS

    def test_empty_models(self):
        with pytest.raises(ValueError, match="models must contain at least one"):
            AssistantConfig(models=[])

    def test_invalid_timeout(self):
        with pytest.raises(ValueError, match="attempt_timeout_s must be > 0"):
            AssistantConfig(attempt_timeout_s=0)

    def test_invalid_max_tokens(self):
        with pytest.raises(ValueError, match="max_tokens must be >= 1"):
            AssistantConfig(max_tokens=0)

    def test_invalid_temperature(self):
        with pytest.raises(ValueError, match="temperature must be 0-2"):
            AssistantConfig(temperature=2.5)

    def test_invalid_excerpt(self):
        with pytest.raises(ValueError, match="context_excerpt_chars must be >= 0"):
            AssistantConfig(context_excerpt_chars=-1)

    def test_from_settings(self):
        settings = Settings(
            models=["m1"],
            attempt_timeout_s=3.0,
            max_tokens=200,
            temperature=0.2,
            context_excerpt_chars=500,
            _env_file=None,
        )

        config = AssistantConfig.from_settings(settings)

        assert config.models == ["m1"]
        assert config.attempt_timeout_s == 3.0
        assert config.max_tokens == 200
        assert config.temperature == 0.2
        assert config.context_excerpt_chars == 500
