"""
Tests for the JSON request body decoder.

Requests are built directly from ASGI scopes; no server is started.
"""

import asyncio
import json

import pytest
from pydantic import BaseModel, ValidationError
from starlette.requests import Request

from bodyguard.domain.decoding.cause_chain import find_error_source
from bodyguard.domain.decoding.entities import DecodeFailure, DecodeSuccess, FailureReason
from bodyguard.domain.decoding.errors import BodyReadError, JsonSchemaError, JsonSyntaxError
from bodyguard.infrastructure.decoding.json_body_decoder import (
    decode_json_body,
    is_json_content_type,
    parse_json,
    validate_schema,
)


class Item(BaseModel):
    name: str
    quantity: int


def _request(body: bytes, content_type: str | None = "application/json") -> Request:
    headers = []
    if content_type is not None:
        headers.append((b"content-type", content_type.encode()))
    messages = [{"type": "http.request", "body": body, "more_body": False}]

    async def receive():
        return messages.pop(0) if messages else {"type": "http.disconnect"}

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/",
        "query_string": b"",
        "headers": headers,
    }
    return Request(scope, receive)


def _disconnected_request() -> Request:
    async def receive():
        return {"type": "http.disconnect"}

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/",
        "query_string": b"",
        "headers": [(b"content-type", b"application/json")],
    }
    return Request(scope, receive)


class TestContentType:
    """Tests for is_json_content_type."""

    @pytest.mark.parametrize(
        "value",
        [
            "application/json",
            "application/json; charset=utf-8",
            "Application/JSON",
            "application/problem+json",
            "application/vnd.api+json; charset=utf-8",
        ],
    )
    def test_json_types_accepted(self, value: str) -> None:
        """JSON and +json media types are accepted."""
        assert is_json_content_type(value)

    @pytest.mark.parametrize(
        "value", [None, "", "text/plain", "application/xml", "text/json", "application/jsonx"]
    )
    def test_other_types_rejected(self, value) -> None:
        """Missing and non-JSON media types are rejected."""
        assert not is_json_content_type(value)


class TestParseJson:
    """Tests for parse_json."""

    def test_valid_json(self) -> None:
        """Valid JSON decodes to its value."""
        outcome = parse_json(b'{"a": [1, 2]}')
        assert outcome == DecodeSuccess({"a": [1, 2]})

    def test_syntax_error_keeps_decoder_error_as_cause(self) -> None:
        """The decoder error stays reachable with its position."""
        outcome = parse_json(b'{\n  "a": 1,\n  "b" 2\n}')
        assert isinstance(outcome, DecodeFailure)
        assert outcome.reason is FailureReason.SYNTAX
        assert isinstance(outcome.error, JsonSyntaxError)
        located = find_error_source(outcome.error, json.JSONDecodeError)
        assert (located.lineno, located.colno) == (3, 7)

    def test_invalid_utf8_is_syntax_error(self) -> None:
        """Bytes that are not UTF-8 are a syntax failure."""
        outcome = parse_json(b'{"a": "\xff\xfe"}')
        assert isinstance(outcome, DecodeFailure)
        assert outcome.reason is FailureReason.SYNTAX

    def test_empty_body_is_syntax_error(self) -> None:
        """An empty body is a syntax failure."""
        outcome = parse_json(b"")
        assert outcome.reason is FailureReason.SYNTAX

    def test_deep_nesting_is_syntax_error(self) -> None:
        """Nesting beyond the parser recursion limit is a syntax failure."""
        outcome = parse_json(b"[" * 200_000)
        assert isinstance(outcome, DecodeFailure)
        assert outcome.reason is FailureReason.SYNTAX
        assert isinstance(outcome.error.__cause__, RecursionError)

    @pytest.mark.parametrize(
        "body", [b'{"a": NaN}', b"[Infinity]", b"-Infinity"]
    )
    def test_non_standard_constants_are_syntax_errors(self, body: bytes) -> None:
        """NaN and Infinity are not JSON and are never decoded."""
        outcome = parse_json(body)
        assert isinstance(outcome, DecodeFailure)
        assert outcome.reason is FailureReason.SYNTAX
        assert find_error_source(outcome.error, json.JSONDecodeError) is None


class TestValidateSchema:
    """Tests for validate_schema."""

    def test_matching_value_becomes_model(self) -> None:
        """A matching value becomes a model instance."""
        outcome = validate_schema({"name": "bolt", "quantity": 3}, Item)
        assert outcome == DecodeSuccess(Item(name="bolt", quantity=3))

    def test_mismatch_is_schema_failure(self) -> None:
        """A mismatch chains the pydantic ValidationError."""
        outcome = validate_schema({"name": "bolt"}, Item)
        assert outcome.reason is FailureReason.SCHEMA
        assert isinstance(outcome.error, JsonSchemaError)
        assert isinstance(outcome.error.__cause__, ValidationError)
        assert find_error_source(outcome.error, json.JSONDecodeError) is None


class TestDecodeJsonBody:
    """Tests for decode_json_body."""

    def test_success(self) -> None:
        """A JSON request decodes successfully."""
        outcome = asyncio.run(decode_json_body(_request(b'{"x": 1}')))
        assert outcome == DecodeSuccess({"x": 1})

    def test_success_with_schema(self) -> None:
        """A schema-checked request yields the model."""
        request = _request(b'{"name": "nut", "quantity": 10}')
        outcome = asyncio.run(decode_json_body(request, schema=Item))
        assert outcome == DecodeSuccess(Item(name="nut", quantity=10))

    def test_missing_content_type(self) -> None:
        """No content type is classified before reading the body."""
        outcome = asyncio.run(decode_json_body(_request(b"{}", content_type=None)))
        assert outcome == DecodeFailure(FailureReason.MISSING_CONTENT_TYPE)

    def test_wrong_content_type(self) -> None:
        """A non-JSON content type is classified as missing."""
        outcome = asyncio.run(decode_json_body(_request(b"{}", "text/plain")))
        assert outcome.reason is FailureReason.MISSING_CONTENT_TYPE

    def test_syntax_checked_before_schema(self) -> None:
        """Syntax errors win over schema errors."""
        outcome = asyncio.run(decode_json_body(_request(b"{oops"), schema=Item))
        assert outcome.reason is FailureReason.SYNTAX

    def test_schema_mismatch(self) -> None:
        """Wrong field types are a schema failure."""
        request = _request(b'{"name": "nut", "quantity": "many"}')
        outcome = asyncio.run(decode_json_body(request, schema=Item))
        assert outcome.reason is FailureReason.SCHEMA

    def test_client_disconnect_is_body_read_failure(self) -> None:
        """A client disconnect is a body-read failure."""
        outcome = asyncio.run(decode_json_body(_disconnected_request()))
        assert outcome.reason is FailureReason.BODY_READ
        assert isinstance(outcome.error, BodyReadError)

    def test_oversized_body_is_body_read_failure(self) -> None:
        """A body over the size limit is a body-read failure."""
        outcome = asyncio.run(decode_json_body(_request(b'{"x": 12345}'), max_size=4))
        assert outcome.reason is FailureReason.BODY_READ
