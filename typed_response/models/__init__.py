"""Data models for typed responses."""

from .content_type import KNOWN_MIME_TYPES, ContentTypeId, MediaType
from .response import TypedResponse


__all__ = ["KNOWN_MIME_TYPES", "ContentTypeId", "MediaType", "TypedResponse"]
