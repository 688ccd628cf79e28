"""Content type identifiers and media type parsing."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class ContentTypeId(str, Enum):
    """Normalized wire content types understood by the transformer.

    Member values are the canonical MIME strings.
    """

    JSON = "application/json"
    XML = "application/xml"
    HTML = "text/html"
    PLAIN_TEXT = "text/plain"

    @classmethod
    def from_name(cls, value: str) -> "ContentTypeId":
        """Look up a member by name (``"json"``) or canonical MIME string.

        Raises:
            ValueError: If ``value`` matches neither a member name nor a value
        """
        normalized = value.strip()
        try:
            return cls[normalized.upper()]
        except KeyError:
            pass
        try:
            return cls(normalized.lower())
        except ValueError:
            raise ValueError(f"Unknown content type: {value!r}") from None


# Normalized MIME string -> content type. Aliases supplied at runtime never
# replace entries from this table.
KNOWN_MIME_TYPES: dict[str, ContentTypeId] = {
    "application/json": ContentTypeId.JSON,
    "application/xml": ContentTypeId.XML,
    "text/xml": ContentTypeId.XML,
    "text/html": ContentTypeId.HTML,
    "text/plain": ContentTypeId.PLAIN_TEXT,
}


class MediaType(BaseModel):
    """A parsed ``Content-Type`` value."""

    model_config = ConfigDict(frozen=True)

    mime: Annotated[str, Field(description="Lower-cased type/subtype")]
    params: Annotated[
        dict[str, str], Field(default_factory=dict, description="Media type parameters")
    ]

    @property
    def charset(self) -> str | None:
        return self.params.get("charset")

    @classmethod
    def parse(cls, value: str) -> "MediaType":
        """Parse ``type/subtype; key=value`` into a media type.

        Parameter names are lower-cased and quoted values are unquoted.
        Malformed parameters without ``=`` are skipped.
        """
        mime, _, raw_params = value.partition(";")
        params: dict[str, str] = {}
        for item in raw_params.split(";"):
            key, sep, param_value = item.partition("=")
            if not sep:
                continue
            param_value = param_value.strip()
            if len(param_value) >= 2 and param_value[0] == param_value[-1] == '"':
                param_value = param_value[1:-1]
            params[key.strip().lower()] = param_value
        return cls(mime=mime.strip().lower(), params=params)
