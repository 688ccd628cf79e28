"""Configuration module for typed_response."""

from .core import ContentTypeSettings, DecodingSettings, LoggingSettings
from .settings import Settings, get_settings


__all__ = [
    "ContentTypeSettings",
    "DecodingSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
