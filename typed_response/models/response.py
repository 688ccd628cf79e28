"""Typed response model returned by the transformer."""

from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")


class TypedResponse(BaseModel, Generic[T]):
    """Status code paired with a deserialized payload.

    Instances are immutable once constructed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status_code: Annotated[
        int, Field(description="HTTP status code of the raw response")
    ]
    body: Annotated[T, Field(description="Deserialized response payload")]
