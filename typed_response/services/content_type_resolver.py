"""Content type resolution for raw responses."""

from collections.abc import Mapping

from typed_response.core.interfaces import RawResponse
from typed_response.core.logging import get_logger
from typed_response.exceptions import UnrecognizedContentType
from typed_response.models.content_type import (
    KNOWN_MIME_TYPES,
    ContentTypeId,
    MediaType,
)
from typed_response.utils.headers import get_header


logger = get_logger(__name__)

CONTENT_TYPE_HEADER = "Content-Type"


def parse_media_type(value: str) -> MediaType:
    """Split a content type value into MIME type and parameters."""
    return MediaType.parse(value)


def parse_content_type(
    value: str, aliases: Mapping[str, ContentTypeId] | None = None
) -> ContentTypeId:
    """Map a content type string onto a :class:`ContentTypeId`.

    Parameters such as ``; charset=utf-8`` are ignored. Unknown MIME types are
    never coerced to a default.

    Args:
        value: Raw content type value
        aliases: Extra normalized MIME strings to recognize

    Returns:
        The matching content type

    Raises:
        UnrecognizedContentType: If the MIME type is not known
    """
    mime = parse_media_type(value).mime
    content_type = KNOWN_MIME_TYPES.get(mime)
    if content_type is None and aliases:
        content_type = aliases.get(mime)
    if content_type is None:
        raise UnrecognizedContentType(value)
    return content_type


def content_type_header(raw: RawResponse) -> str | None:
    """Return the ``Content-Type`` header of ``raw``, if any."""
    return get_header(raw.headers, CONTENT_TYPE_HEADER)


class ContentTypeResolver:
    """Attributes exactly one content type to a raw response.

    A content type declared by the body or transport takes precedence over the
    ``Content-Type`` header. An unrecognized declared value falls through to
    the header; resolution fails only when neither signal yields a known type.
    """

    def __init__(self, aliases: Mapping[str, ContentTypeId] | None = None) -> None:
        self._aliases: dict[str, ContentTypeId] = {
            key.strip().lower(): value for key, value in (aliases or {}).items()
        }

    @property
    def aliases(self) -> Mapping[str, ContentTypeId]:
        return dict(self._aliases)

    def resolve(self, raw: RawResponse) -> ContentTypeId:
        """Resolve the content type of ``raw``.

        Raises:
            UnrecognizedContentType: If neither the declared value nor the
                header is present and known. The error carries the declared
                value when one was given, otherwise the header value.
        """
        unresolved: str | None = None
        signals = (
            ("declared", raw.declared_content_type),
            ("header", content_type_header(raw)),
        )
        for source, value in signals:
            if not value or not value.strip():
                continue
            try:
                content_type = parse_content_type(value, self._aliases)
            except UnrecognizedContentType:
                logger.debug("content_type_unrecognized", source=source, value=value)
                if unresolved is None:
                    unresolved = value
                continue
            logger.debug(
                "content_type_resolved",
                content_type=content_type.name,
                source=source,
                value=value,
            )
            return content_type

        raise UnrecognizedContentType(unresolved)
