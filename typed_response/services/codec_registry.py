"""Ordered registry of response codecs."""

from collections.abc import Iterable, Iterator

from typed_response.core.interfaces import Codec
from typed_response.core.logging import get_logger
from typed_response.exceptions import NoCodecForContentType
from typed_response.models.content_type import ContentTypeId


logger = get_logger(__name__)


class CodecRegistry:
    """Read-only sequence of codecs selected by content type.

    Registration order is the only tie-break: when several codecs support the
    same content type, the one registered first is selected. Registries are
    never mutated after construction and can be shared between concurrent
    transformations.
    """

    def __init__(self, codecs: Iterable[Codec] = ()) -> None:
        self._codecs: tuple[Codec, ...] = tuple(codecs)
        for codec in self._codecs:
            if not isinstance(codec, Codec):
                raise TypeError(
                    f"Codec {codec!r} does not implement the Codec protocol"
                )

    def __iter__(self) -> Iterator[Codec]:
        return iter(self._codecs)

    def __len__(self) -> int:
        return len(self._codecs)

    def __repr__(self) -> str:
        names = ", ".join(type(codec).__name__ for codec in self._codecs)
        return f"CodecRegistry([{names}])"

    def find(self, content_type: ContentTypeId) -> Codec | None:
        """Return the first codec supporting ``content_type``, or None."""
        for codec in self._codecs:
            if content_type in codec.supported_content_types:
                return codec
        return None

    def select(self, content_type: ContentTypeId) -> Codec:
        """Return the first codec supporting ``content_type``.

        Raises:
            NoCodecForContentType: If no registered codec supports it
        """
        codec = self.find(content_type)
        if codec is None:
            raise NoCodecForContentType(content_type)

        logger.debug(
            "codec_selected",
            content_type=content_type.name,
            codec_type=type(codec).__name__,
        )
        return codec

    def supported_content_types(self) -> frozenset[ContentTypeId]:
        """Content types handled by at least one registered codec."""
        return frozenset(
            content_type
            for codec in self._codecs
            for content_type in codec.supported_content_types
        )

    def with_codec(self, codec: Codec) -> "CodecRegistry":
        """Return a new registry with ``codec`` appended."""
        return CodecRegistry((*self._codecs, codec))


__all__ = ["CodecRegistry"]
