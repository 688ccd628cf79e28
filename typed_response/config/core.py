"""Core configuration settings - logging, body decoding and content types."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from typed_response.models.content_type import KNOWN_MIME_TYPES, ContentTypeId


# === Logging Configuration ===


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    format: str = Field(
        default="auto",
        description="Logging output format: 'console', 'json', or 'auto' (json when stderr is not a TTY)",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        upper_v = v.upper()
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @field_validator("format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate and normalize log format."""
        lower_v = v.lower()
        valid_formats = ["auto", "console", "json"]
        if lower_v not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return lower_v


# === Body Decoding Configuration ===


class DecodingSettings(BaseModel):
    """How response bodies are decoded before reaching a codec."""

    default_charset: str = Field(
        default="utf-8",
        description="Charset used when the content type carries no charset parameter",
    )

    @field_validator("default_charset")
    @classmethod
    def validate_charset(cls, v: str) -> str:
        """Reject charsets that are not text encodings."""
        try:
            b"".decode(v)
        except LookupError:
            raise ValueError(f"Unknown charset: {v}") from None
        return v.lower()


# === Content Type Configuration ===


class ContentTypeSettings(BaseModel):
    """Extra MIME strings recognized by the content type resolver."""

    aliases: dict[str, ContentTypeId] = Field(
        default_factory=dict,
        description="Additional MIME type -> content type mappings, e.g. "
        "{'application/problem+json': 'json'}. Built-in MIME types cannot be remapped",
    )

    @field_validator("aliases", mode="before")
    @classmethod
    def validate_aliases(cls, v: Any) -> Any:
        """Normalize alias keys and accept content type names or MIME values."""
        if not isinstance(v, dict):
            return v

        normalized: dict[str, ContentTypeId] = {}
        for mime, target in v.items():
            key = str(mime).strip().lower()
            if not key:
                raise ValueError("Content type alias cannot be empty")
            content_type = (
                target
                if isinstance(target, ContentTypeId)
                else ContentTypeId.from_name(str(target))
            )
            builtin = KNOWN_MIME_TYPES.get(key)
            if builtin is not None and builtin is not content_type:
                raise ValueError(
                    f"Alias '{key}' conflicts with built-in mapping to {builtin.name}"
                )
            normalized[key] = content_type
        return normalized
