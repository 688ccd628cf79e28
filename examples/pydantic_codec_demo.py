#!/usr/bin/env python3
"""
Demo: deserialize httpx responses into pydantic models.

Shows how to plug a codec into ResponseTransformer and drive it with an
httpx client. A mock transport stands in for a real server.
"""

import asyncio
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter

from typed_response import ContentTypeId, ResponseTransformer
from typed_response.core.logging import get_logger, setup_logging
from typed_response.http import HttpxRawResponse


T = TypeVar("T")

logger = get_logger(__name__)


class PydanticJsonCodec:
    """JSON codec validating payloads with pydantic."""

    supported_content_types = frozenset({ContentTypeId.JSON})

    def deserialize(self, raw: str, target_type: type[T]) -> T:
        return TypeAdapter(target_type).validate_json(raw)


class Item(BaseModel):
    id: int
    name: str


def handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/items/1":
        return httpx.Response(
            200,
            headers={"Content-Type": "application/json; charset=utf-8"},
            json={"id": 1, "name": "widget"},
        )
    return httpx.Response(404, headers={"Content-Type": "text/plain"}, text="missing")


async def fetch(client: httpx.AsyncClient, transformer: ResponseTransformer, path: str) -> Any:
    async with client.stream("GET", path) as response:
        return await transformer.transform(HttpxRawResponse(response), Item)


async def main() -> None:
    setup_logging(json_logs=False, log_level_name="DEBUG")
    transformer = ResponseTransformer([PydanticJsonCodec()])

    async with httpx.AsyncClient(
        base_url="https://api.example.com", transport=httpx.MockTransport(handler)
    ) as client:
        result = await fetch(client, transformer, "/items/1")
        logger.info("item_fetched", status_code=result.status_code, item=result.body)

        try:
            await fetch(client, transformer, "/items/2")
        except Exception as e:
            logger.info("item_fetch_failed", error_type=type(e).__name__, error=str(e))


if __name__ == "__main__":
    asyncio.run(main())
