"""Configuration settings for source intake."""

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class IntakeConfig(BaseSettings):
    """Intake configuration settings.

    Overridable via environment variables with the INTAKE_ prefix or a .env file.

    Attributes:
        user_agent: Client identifier sent with every remote fetch.
        fetch_timeout: Timeout in seconds for a remote fetch.
        follow_redirects: Let the HTTP transport follow redirects.
    """

    model_config = SettingsConfigDict(
        env_prefix="INTAKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for remote job posting fetches",
    )
    fetch_timeout: Annotated[float, Field(gt=0)] = Field(
        default=20.0,
        description="Timeout in seconds for remote fetches",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow HTTP redirects when fetching a job posting",
    )


_intake_config: IntakeConfig | None = None


def get_intake_config() -> IntakeConfig:
    """Get the intake configuration singleton."""
    global _intake_config
    if _intake_config is None:
        _intake_config = IntakeConfig()
    return _intake_config


def reset_intake_config() -> None:
    """Reset the configuration singleton (useful for testing)."""
    global _intake_config
    _intake_config = None
