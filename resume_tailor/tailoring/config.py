"""Configuration settings for the Tailoring module.

Provides settings for the LLM provider and the layout knobs of the tailoring
prompt.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TailoringConfig(BaseSettings):
    """Configuration for the tailoring system.

    Settings can be overridden via environment variables prefixed with TAILORING_.

    Example: TAILORING_LLM_MODEL=claude-3-5-sonnet-20241022
    """

    model_config = SettingsConfigDict(
        env_prefix="TAILORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM settings
    llm_provider: str = Field(
        default="anthropic",
        description="LLM provider (anthropic, openai, azure, etc.)",
    )
    llm_model: str = Field(
        default="claude-3-5-haiku-20241022",
        description="LLM model name",
    )
    llm_api_key: str | None = Field(
        default=None,
        description="API key for LLM provider",
    )
    llm_base_url: str | None = Field(
        default=None,
        description="Base URL for OpenAI-compatible endpoints or proxies",
    )
    llm_timeout: Annotated[float, Field(gt=0)] = Field(
        default=180.0,
        description="Timeout in seconds for LLM calls",
    )
    max_output_tokens: Annotated[int, Field(gt=0)] = Field(
        default=3000,
        description="Upper bound on generated tokens per tailoring run",
    )

    # Prompt layout settings
    new_entry_bullets: Annotated[int, Field(gt=0, le=10)] = Field(
        default=3,
        description="Number of top-level bullets for the inserted experience entry",
    )
    reference_entry: str | None = Field(
        default=None,
        description=(
            "Existing resume entry whose formatting the new entry copies "
            "(defaults to the most recent existing role)"
        ),
    )
    condensable_entry: str | None = Field(
        default=None,
        description=(
            "Existing resume entry whose sub-bullets may be trimmed for space "
            "(defaults to the longest existing role)"
        ),
    )


_tailoring_config: TailoringConfig | None = None


def get_tailoring_config() -> TailoringConfig:
    """Get the tailoring configuration singleton."""
    global _tailoring_config
    if _tailoring_config is None:
        _tailoring_config = TailoringConfig()
    return _tailoring_config


def reset_tailoring_config() -> None:
    """Reset the configuration singleton (useful for testing)."""
    global _tailoring_config
    _tailoring_config = None
