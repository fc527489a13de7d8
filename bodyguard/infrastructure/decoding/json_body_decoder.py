"""
JSON request body decoder.

This is where a decode is attempted and classified. Every path ends
in a DecodeOutcome; no decoding exception escapes this module.
"""

import json
import logging
from typing import Any, Optional, Type

from pydantic import BaseModel, ValidationError
from starlette.requests import ClientDisconnect, Request

from bodyguard.domain.decoding.entities import (
    DecodeFailure,
    DecodeOutcome,
    DecodeSuccess,
    FailureReason,
)
from bodyguard.domain.decoding.errors import (
    BodyReadError,
    JsonSchemaError,
    JsonSyntaxError,
)

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def is_json_content_type(content_type: Optional[str]) -> bool:
    """True for ``application/json`` and ``application/<x>+json``.

    Media type parameters such as ``charset`` are ignored.
    """
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == JSON_MEDIA_TYPE:
        return True
    main_type, _, subtype = media_type.partition("/")
    return main_type == "application" and subtype.endswith("+json")


class NonStandardConstantError(ValueError):
    """Raised for the NaN and Infinity literals, which are not JSON."""

    def __init__(self, literal: str) -> None:
        super().__init__(f"Non-standard JSON constant: {literal}")
        self.literal = literal


def _reject_constant(literal: str) -> Any:
    raise NonStandardConstantError(literal)


def parse_json(body: bytes) -> DecodeOutcome:
    """Parse raw bytes as strict JSON.

    Nesting too deep for the parser is a syntax failure, as are the
    ``NaN``, ``Infinity`` and ``-Infinity`` literals.
    """
    try:
        return DecodeSuccess(json.loads(body, parse_constant=_reject_constant))
    except (
        json.JSONDecodeError,
        UnicodeDecodeError,
        NonStandardConstantError,
        RecursionError,
    ) as exc:
        return DecodeFailure(FailureReason.SYNTAX, _wrap(JsonSyntaxError(), exc))


def validate_schema(value: Any, schema: Type[BaseModel]) -> DecodeOutcome:
    """Validate an already parsed JSON value against a pydantic model."""
    try:
        return DecodeSuccess(schema.model_validate(value))
    except ValidationError as exc:
        return DecodeFailure(
            FailureReason.SCHEMA, _wrap(JsonSchemaError(schema.__name__), exc)
        )


async def decode_json_body(
    request: Request,
    schema: Optional[Type[BaseModel]] = None,
    max_size: Optional[int] = None,
) -> DecodeOutcome:
    """Decode the body of ``request`` as JSON.

    Args:
        request: The incoming request.
        schema: Optional pydantic model the JSON must satisfy.
        max_size: Optional limit on the body size in bytes.

    Returns:
        DecodeSuccess with the parsed value (or model instance when a
        schema is given), otherwise a classified DecodeFailure.
    """
    if not is_json_content_type(request.headers.get("content-type")):
        return DecodeFailure(FailureReason.MISSING_CONTENT_TYPE)

    try:
        body = await request.body()
    except ClientDisconnect as exc:
        return DecodeFailure(
            FailureReason.BODY_READ, _wrap(BodyReadError("client disconnected"), exc)
        )
    except (OSError, RuntimeError) as exc:
        logger.warning("Could not read request body: %s", type(exc).__name__)
        return DecodeFailure(
            FailureReason.BODY_READ, _wrap(BodyReadError(type(exc).__name__), exc)
        )

    if max_size is not None and len(body) > max_size:
        return DecodeFailure(
            FailureReason.BODY_READ,
            BodyReadError(f"body exceeds {max_size} bytes"),
        )

    outcome = parse_json(body)
    if schema is None or isinstance(outcome, DecodeFailure):
        return outcome
    return validate_schema(outcome.value, schema)


def _wrap(error: BaseException, cause: BaseException) -> BaseException:
    """Chain ``cause`` under ``error`` as if raised with ``from``."""
    error.__cause__ = cause
    return error
