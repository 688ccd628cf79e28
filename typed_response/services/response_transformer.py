"""Response transformation service.

Turns raw transport responses into :class:`TypedResponse` objects by
resolving the wire content type, selecting a codec and deserializing the
body into the type requested by the caller.
"""

from collections.abc import Iterable
from typing import TypeVar

from typed_response.config.settings import Settings, get_settings
from typed_response.core.interfaces import Codec, RawResponse
from typed_response.core.logging import get_logger
from typed_response.exceptions import DeserializationFailed, TypedResponseError
from typed_response.models.content_type import ContentTypeId
from typed_response.models.response import TypedResponse

from .codec_registry import CodecRegistry
from .content_type_resolver import (
    ContentTypeResolver,
    content_type_header,
    parse_media_type,
)


logger = get_logger(__name__)

T = TypeVar("T")


class ResponseTransformer:
    """Transforms raw responses into typed responses.

    The transformer keeps no state between calls; the codec registry is shared
    read-only, so one instance can serve concurrent transformations.
    """

    def __init__(
        self,
        codecs: CodecRegistry | Iterable[Codec] = (),
        *,
        resolver: ContentTypeResolver | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the transformer.

        Args:
            codecs: Codecs in priority order, or a prebuilt registry
            resolver: Content type resolver; built from settings when omitted
            settings: Configuration; the process-wide settings when omitted
        """
        self.settings = settings or get_settings()
        self.registry = (
            codecs if isinstance(codecs, CodecRegistry) else CodecRegistry(codecs)
        )
        self.resolver = resolver or ContentTypeResolver(
            aliases=self.settings.content_types.aliases
        )

    def extract_content_type(self, raw: RawResponse) -> ContentTypeId:
        """Resolve the content type of ``raw`` without reading its body."""
        return self.resolver.resolve(raw)

    async def transform(
        self, raw: RawResponse, target_type: type[T]
    ) -> TypedResponse[T]:
        """Transform ``raw`` into a typed response.

        The body read is the only suspension point. Transport errors and
        cancellation raised while reading propagate unmodified.

        Args:
            raw: Response borrowed from the transport
            target_type: Type the body is deserialized into

        Returns:
            Typed response with the status code copied from ``raw``

        Raises:
            UnrecognizedContentType: If no known content type can be resolved
            NoCodecForContentType: If no registered codec handles the content type
            DeserializationFailed: If decoding or the codec conversion fails
        """
        try:
            content_type = self.resolver.resolve(raw)
            codec = self.registry.select(content_type)
        except TypedResponseError as e:
            logger.warning(
                "response_transform_failed",
                error_type=e.error_type,
                status_code=raw.status_code,
                details=e.details,
            )
            raise

        body = await raw.read()

        try:
            text = self._decode(raw, body)
            value = codec.deserialize(text, target_type)
        except Exception as e:
            logger.warning(
                "response_transform_failed",
                error_type="deserialization_failed",
                status_code=raw.status_code,
                content_type=content_type.name,
                codec_type=type(codec).__name__,
                error=str(e),
            )
            raise DeserializationFailed(
                e, content_type=content_type, target_type=target_type
            ) from e

        logger.debug(
            "response_transformed",
            status_code=raw.status_code,
            content_type=content_type.name,
            codec_type=type(codec).__name__,
            body_size=len(body),
        )
        return TypedResponse(status_code=raw.status_code, body=value)

    def _decode(self, raw: RawResponse, body: bytes) -> str:
        charset = self._charset_for(raw)
        try:
            return body.decode(charset)
        except LookupError as e:
            # Also raised for bytes-to-bytes codecs such as zlib or base64
            raise ValueError(f"Unknown text charset '{charset}'") from e

    def _charset_for(self, raw: RawResponse) -> str:
        """Charset from the declared content type, then the header, then the default."""
        for value in (raw.declared_content_type, content_type_header(raw)):
            if value and value.strip():
                charset = parse_media_type(value).charset
                if charset:
                    return charset
        return self.settings.decoding.default_charset


__all__ = ["ResponseTransformer"]
