"""Tests for content type resolution."""

import pytest

from tests.fixtures.responses import FakeRawResponse
from typed_response.exceptions import UnrecognizedContentType
from typed_response.models.content_type import ContentTypeId
from typed_response.services.content_type_resolver import (
    ContentTypeResolver,
    content_type_header,
    parse_content_type,
)


@pytest.mark.unit
class TestParseContentType:
    """Test the MIME string lookup table."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("application/json", ContentTypeId.JSON),
            ("application/xml", ContentTypeId.XML),
            ("text/xml", ContentTypeId.XML),
            ("text/html", ContentTypeId.HTML),
            ("text/plain", ContentTypeId.PLAIN_TEXT),
            ("Application/JSON", ContentTypeId.JSON),
            ("  text/html  ", ContentTypeId.HTML),
            ("application/json; charset=utf-8", ContentTypeId.JSON),
            ('text/plain;charset="iso-8859-1";format=flowed', ContentTypeId.PLAIN_TEXT),
        ],
    )
    def test_known_mime_types(self, value: str, expected: ContentTypeId) -> None:
        assert parse_content_type(value) is expected

    @pytest.mark.parametrize(
        "value",
        ["application/octet-stream", "image/png", "json", "", "application/json+x"],
    )
    def test_unknown_mime_types_fail(self, value: str) -> None:
        with pytest.raises(UnrecognizedContentType) as exc_info:
            parse_content_type(value)

        assert exc_info.value.content_type == value
        assert exc_info.value.error_type == "unrecognized_content_type"

    def test_aliases_extend_known_types(self) -> None:
        aliases = {"application/problem+json": ContentTypeId.JSON}
        assert (
            parse_content_type("application/problem+json; charset=utf-8", aliases)
            is ContentTypeId.JSON
        )


@pytest.mark.unit
class TestContentTypeResolver:
    """Test ContentTypeResolver precedence rules."""

    @pytest.fixture
    def resolver(self) -> ContentTypeResolver:
        return ContentTypeResolver()

    @pytest.mark.parametrize(
        ("header_value", "expected"),
        [
            ("application/json", ContentTypeId.JSON),
            ("application/xml", ContentTypeId.XML),
            ("text/html", ContentTypeId.HTML),
            ("text/plain", ContentTypeId.PLAIN_TEXT),
        ],
    )
    def test_resolves_from_headers(
        self, resolver: ContentTypeResolver, header_value: str, expected: ContentTypeId
    ) -> None:
        raw = FakeRawResponse(headers={"Content-Type": header_value})
        assert resolver.resolve(raw) is expected

    def test_resolves_from_declared_content_type(
        self, resolver: ContentTypeResolver
    ) -> None:
        raw = FakeRawResponse(declared_content_type="text/html")
        assert resolver.resolve(raw) is ContentTypeId.HTML

    def test_declared_content_type_wins_over_header(
        self, resolver: ContentTypeResolver
    ) -> None:
        raw = FakeRawResponse(
            declared_content_type="text/html",
            headers={"Content-Type": "text/plain"},
        )
        assert resolver.resolve(raw) is ContentTypeId.HTML

    def test_falls_back_to_header_when_declared_is_blank(
        self, resolver: ContentTypeResolver
    ) -> None:
        raw = FakeRawResponse(
            declared_content_type="   ",
            headers={"Content-Type": "text/plain"},
        )
        assert resolver.resolve(raw) is ContentTypeId.PLAIN_TEXT

    def test_unknown_declared_value_falls_back_to_header(
        self, resolver: ContentTypeResolver
    ) -> None:
        raw = FakeRawResponse(
            declared_content_type="application/octet-stream",
            headers={"Content-Type": "application/json"},
        )
        assert resolver.resolve(raw) is ContentTypeId.JSON

    def test_unknown_declared_and_header_fail_with_declared_value(
        self, resolver: ContentTypeResolver
    ) -> None:
        raw = FakeRawResponse(
            declared_content_type="application/octet-stream",
            headers={"Content-Type": "image/png"},
        )
        with pytest.raises(UnrecognizedContentType) as exc_info:
            resolver.resolve(raw)

        assert exc_info.value.content_type == "application/octet-stream"

    def test_unknown_declared_without_header_fails(
        self, resolver: ContentTypeResolver
    ) -> None:
        raw = FakeRawResponse(declared_content_type="application/octet-stream")
        with pytest.raises(UnrecognizedContentType) as exc_info:
            resolver.resolve(raw)

        assert exc_info.value.content_type == "application/octet-stream"

    def test_header_lookup_is_case_insensitive(
        self, resolver: ContentTypeResolver
    ) -> None:
        raw = FakeRawResponse(headers={"content-TYPE": "application/xml; charset=utf-8"})
        assert resolver.resolve(raw) is ContentTypeId.XML

    def test_last_header_value_wins(self) -> None:
        raw = FakeRawResponse(
            headers={"Content-Type": "text/plain", "content-type": "application/json"}
        )
        assert content_type_header(raw) == "application/json"
        assert ContentTypeResolver().resolve(raw) is ContentTypeId.JSON

    def test_no_signal_fails(self, resolver: ContentTypeResolver) -> None:
        with pytest.raises(UnrecognizedContentType) as exc_info:
            resolver.resolve(FakeRawResponse(headers={"X-Other": "1"}))

        assert exc_info.value.content_type is None
        assert "no content type" in str(exc_info.value)

    def test_unknown_header_fails(self, resolver: ContentTypeResolver) -> None:
        raw = FakeRawResponse(headers={"Content-Type": "image/png"})
        with pytest.raises(UnrecognizedContentType):
            resolver.resolve(raw)

    def test_aliases_are_normalized(self) -> None:
        resolver = ContentTypeResolver(
            aliases={" Application/Vnd.API+JSON ": ContentTypeId.JSON}
        )
        raw = FakeRawResponse(headers={"Content-Type": "application/vnd.api+json"})

        assert resolver.resolve(raw) is ContentTypeId.JSON
        assert resolver.aliases == {"application/vnd.api+json": ContentTypeId.JSON}

    def test_resolve_does_not_read_body(self, resolver: ContentTypeResolver) -> None:
        raw = FakeRawResponse(headers={"Content-Type": "text/plain"}, body=b"hi")
        resolver.resolve(raw)
        assert raw.read_calls == 0
