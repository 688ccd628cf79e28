"""Response transformation services."""

from .codec_registry import CodecRegistry
from .content_type_resolver import (
    ContentTypeResolver,
    content_type_header,
    parse_content_type,
    parse_media_type,
)
from .response_transformer import ResponseTransformer


__all__ = [
    "CodecRegistry",
    "ContentTypeResolver",
    "ResponseTransformer",
    "content_type_header",
    "parse_content_type",
    "parse_media_type",
]
