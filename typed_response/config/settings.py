"""Settings entry point loaded from the environment."""

from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from typed_response.exceptions import ConfigurationError

from .core import ContentTypeSettings, DecodingSettings, LoggingSettings


__all__ = ["Settings", "get_settings"]


class Settings(BaseSettings):
    """
    Configuration settings for response transformation.

    Settings are loaded from environment variables and .env files using the
    ``TYPED_RESPONSE_`` prefix; nested fields use ``__`` as delimiter, e.g.
    ``TYPED_RESPONSE_DECODING__DEFAULT_CHARSET=latin-1``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPED_RESPONSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    decoding: DecodingSettings = Field(
        default_factory=DecodingSettings,
        description="Response body decoding configuration",
    )

    content_types: ContentTypeSettings = Field(
        default_factory=ContentTypeSettings,
        description="Content type resolution configuration",
    )

    @classmethod
    def load(cls, **overrides: Any) -> "Settings":
        """Build settings, reporting validation problems as ConfigurationError."""
        try:
            return cls(**overrides)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid typed_response configuration: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings.load()
