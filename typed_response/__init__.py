"""Typed response transformation for HTTP clients."""

from ._version import __version__
from .exceptions import (
    BodyAlreadyConsumed,
    DeserializationFailed,
    NoCodecForContentType,
    TypedResponseError,
    UnrecognizedContentType,
)
from .models import ContentTypeId, MediaType, TypedResponse
from .services import CodecRegistry, ContentTypeResolver, ResponseTransformer


__all__ = [
    "__version__",
    "BodyAlreadyConsumed",
    "CodecRegistry",
    "ContentTypeId",
    "ContentTypeResolver",
    "DeserializationFailed",
    "MediaType",
    "NoCodecForContentType",
    "ResponseTransformer",
    "TypedResponse",
    "TypedResponseError",
    "UnrecognizedContentType",
]
