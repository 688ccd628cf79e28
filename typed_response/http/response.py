"""Raw response adapter for httpx."""

import httpx

from typed_response.core.logging import get_logger
from typed_response.exceptions import BodyAlreadyConsumed


logger = get_logger(__name__)


class HttpxRawResponse:
    """Exposes an :class:`httpx.Response` as a raw response.

    The wrapped response is borrowed: the adapter reads its body once and never
    closes the client that produced it.

    Example:
        async with httpx.AsyncClient() as client:
            async with client.stream("GET", url) as response:
                typed = await transformer.transform(HttpxRawResponse(response), dict)
    """

    def __init__(
        self, response: httpx.Response, declared_content_type: str | None = None
    ) -> None:
        """Wrap ``response``.

        Args:
            response: Response returned by an httpx client
            declared_content_type: Content type declared outside the headers,
                e.g. by an envelope in the body; takes precedence over headers
        """
        self._response = response
        self._declared_content_type = declared_content_type
        self._consumed = False

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def declared_content_type(self) -> str | None:
        return self._declared_content_type

    async def read(self) -> bytes:
        """Read the full body.

        Raises:
            BodyAlreadyConsumed: On a second call
            httpx.HTTPError: Transport failures while streaming the body
        """
        if self._consumed:
            raise BodyAlreadyConsumed()
        self._consumed = True

        body = await self._response.aread()
        logger.debug(
            "raw_response_body_read",
            status_code=self._response.status_code,
            body_size=len(body),
            url=str(self._response.request.url) if self._has_request() else None,
        )
        return body

    def _has_request(self) -> bool:
        try:
            self._response.request
        except RuntimeError:
            return False
        return True


__all__ = ["HttpxRawResponse"]
