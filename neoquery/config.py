"""Settings management for neoquery.

This module provides centralized configuration management using pydantic-settings.
All configuration is loaded from environment variables (prefixed with
``NEOQUERY_``) with sensible defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils import ParamStyle


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Attributes:
        log_level: Logging level.
        log_statements: Emit a debug event for every submitted statement.
        param_style: Placeholder syntax used in generated statements.
    """

    model_config = SettingsConfigDict(
        env_prefix="NEOQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_statements: bool = Field(
        default=False,
        description="Log every submitted statement at debug level",
    )

    # Statement settings
    param_style: ParamStyle = Field(
        default=ParamStyle.BRACES,
        description="Parameter placeholder syntax ({name} or $name)",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings.

    Uses lru_cache to ensure settings are loaded once and reused.

    Returns:
        The settings instance.
    """
    return Settings()


def resolve_param_style(param_style: ParamStyle | str | None = None) -> ParamStyle:
    """Return the given placeholder style, or the configured one when None."""
    if param_style is None:
        return get_settings().param_style
    return ParamStyle(param_style)
