"""Configuration management for nyxsh."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from constants import DEFAULT_PROMPT
from logging_utils import configure_logging


class Settings(BaseSettings):
    """Shell settings, read from NYXSH_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="NYXSH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(default=DEFAULT_PROMPT, description="Prompt printed before each line")
    show_status: bool = Field(default=False, description="Prefix the prompt with a non-zero last status")
    log_level: str = Field(default="WARNING", description="Log level")
    path: Optional[str] = Field(None, description="Search path for executables, instead of $PATH")


def get_settings(**overrides) -> Settings:
    """Build settings and configure logging from them.

    Args:
        overrides: Values taking precedence over the environment

    Returns:
        Settings instance
    """
    settings = Settings(**{k: v for k, v in overrides.items() if v is not None})

    configure_logging(settings.log_level)

    return settings
