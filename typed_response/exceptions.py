"""Custom exceptions for typed response transformation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from typed_response.models.content_type import ContentTypeId


class TypedResponseError(Exception):
    """Base exception for response transformation errors."""

    def __init__(
        self,
        message: str,
        error_type: str = "typed_response_error",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}


class UnrecognizedContentType(TypedResponseError):
    """Neither the declared content type nor the headers yield a known type."""

    def __init__(self, content_type: str | None) -> None:
        if content_type is None:
            message = "Response declares no content type in body or headers"
        else:
            message = f"Unrecognized content type '{content_type}'"
        super().__init__(
            message=message,
            error_type="unrecognized_content_type",
            details={"content_type": content_type},
        )
        self.content_type = content_type


class NoCodecForContentType(TypedResponseError):
    """The content type is known but no registered codec handles it."""

    def __init__(self, content_type: ContentTypeId) -> None:
        super().__init__(
            message=f"No codec registered for content type '{content_type.value}'",
            error_type="no_codec_for_content_type",
            details={"content_type": content_type.value},
        )
        self.content_type = content_type


class DeserializationFailed(TypedResponseError):
    """A codec was invoked but failed to convert the body."""

    def __init__(
        self,
        inner: BaseException,
        *,
        content_type: ContentTypeId | None = None,
        target_type: Any = None,
    ) -> None:
        target_name = getattr(target_type, "__name__", None) or repr(target_type)
        super().__init__(
            message=f"Failed to deserialize response body: {inner}",
            error_type="deserialization_failed",
            details={
                "content_type": content_type.value if content_type else None,
                "target_type": target_name if target_type is not None else None,
                "inner_error": type(inner).__name__,
            },
        )
        self.inner = inner
        self.content_type = content_type
        self.target_type = target_type


class BodyAlreadyConsumed(TypedResponseError):
    """The response body stream was read more than once."""

    def __init__(
        self, message: str = "Response body has already been consumed"
    ) -> None:
        super().__init__(message=message, error_type="body_already_consumed")


class ConfigurationError(TypedResponseError):
    """Raised when configuration loading or validation fails."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message, error_type="configuration_error", details=details
        )
