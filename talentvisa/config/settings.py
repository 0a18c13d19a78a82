"""
Configuration settings for the Global Talent Visa assistant.

Uses pydantic-settings for type-safe configuration with environment variable support.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MODELS = [
    "openai/gpt-oss-20b:free",
    "google/gemini-2.0-flash-exp:free",
    "deepseek/deepseek-chat-v3.1:free",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TALENTVISA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # =========================================================================
    # API Keys
    # =========================================================================
    openrouter_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "TALENTVISA_OPENROUTER_API_KEY",
            "OPENROUTER_API_KEY",
        ),
        description="OpenRouter API key for chat completions",
    )

    # =========================================================================
    # OpenRouter Configuration
    # =========================================================================
    openrouter_base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        description="Base URL of the OpenAI-compatible OpenRouter endpoint",
    )
    app_url: str = Field(
        default="https://localhost:3000",
        description="Sent as HTTP-Referer for OpenRouter app attribution",
    )
    app_title: str = Field(
        default="UK Global Talent Visa Assistant - Chinese",
        description="Sent as X-Title for OpenRouter app attribution",
    )

    # =========================================================================
    # Generation Configuration
    # =========================================================================
    models: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MODELS),
        min_length=1,
        description="Model identifiers in fallback priority order",
    )
    attempt_timeout_s: float = Field(
        default=15.0,
        gt=0.0,
        description="Deadline for a single model attempt in seconds",
    )
    max_tokens: int = Field(
        default=1000,
        ge=1,
        description="Maximum tokens for LLM response",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Temperature for LLM generation",
    )
    context_excerpt_chars: int = Field(
        default=1500,
        ge=0,
        description="Number of resume characters embedded in the prompt",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Root log level used by the CLI and UI hosts",
    )

    @property
    def has_api_key(self) -> bool:
        """Whether an OpenRouter key is configured."""
        return bool(self.openrouter_api_key.strip())


# Global settings instance (lazy loaded)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global _settings
    _settings = Settings()
    return _settings
