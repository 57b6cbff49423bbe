"""Configuration management for Chat Format."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output settings
    default_format: str = Field(
        default="terminal",
        alias="CHAT_FORMAT_OUTPUT",
    )
    html_wrapper_class: Optional[str] = Field(
        default=None,
        alias="CHAT_FORMAT_HTML_CLASS",
    )

    # Terminal preview settings
    code_style: str = Field(
        default="bold cyan",
        alias="CHAT_FORMAT_CODE_STYLE",
    )
    terminal_width: int = Field(
        default=88,
        alias="CHAT_FORMAT_WIDTH",
    )

    log_level: str = Field(
        default="WARNING",
        alias="CHAT_FORMAT_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
