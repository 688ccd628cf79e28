"""Core interfaces for response transformation.

This module defines the capability contracts consumed by the transformer:
the raw response supplied by a transport and the pluggable codecs that turn
response bodies into application types.
"""

from collections.abc import Collection, Mapping
from typing import Protocol, TypeVar, runtime_checkable

from typed_response.models.content_type import ContentTypeId


__all__ = [
    "Codec",
    "RawResponse",
]


T = TypeVar("T")


# === Transport Interfaces ===


@runtime_checkable
class RawResponse(Protocol):
    """Untyped HTTP response borrowed from a transport.

    The body is a single-use stream: ``read`` must be awaited at most once.
    Instances are not safe for concurrent consumption.
    """

    @property
    def status_code(self) -> int:
        """HTTP status code."""
        ...

    @property
    def headers(self) -> Mapping[str, str]:
        """Response headers; lookups are case-insensitive."""
        ...

    @property
    def declared_content_type(self) -> str | None:
        """Content type declared by the body or transport, if any."""
        ...

    async def read(self) -> bytes:
        """Read the whole body stream.

        Returns:
            The complete response body
        """
        ...


# === Codec Interfaces ===


@runtime_checkable
class Codec(Protocol):
    """Converts a response body into an instance of a target type."""

    @property
    def supported_content_types(self) -> Collection[ContentTypeId]:
        """Content types this codec can deserialize."""
        ...

    def deserialize(self, raw: str, target_type: type[T]) -> T:
        """Deserialize ``raw`` into ``target_type``.

        Args:
            raw: Decoded response body
            target_type: Type requested by the caller

        Returns:
            The deserialized value

        Raises:
            Exception: Any error raised is reported as a deserialization failure
        """
        ...
