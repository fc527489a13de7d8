"""
Error normalizer for decode outcomes.

Maps every DecodeOutcome to either the decoded value or a
NormalizedError. Pure function: no IO, no shared state.
"""

import json

from bodyguard.domain.decoding.cause_chain import DEFAULT_MAX_DEPTH, find_error_source
from bodyguard.domain.decoding.entities import (
    DecodeFailure,
    DecodeOutcome,
    DecodeSuccess,
    FailureReason,
    Normalized,
    NormalizedError,
)

HTTP_400 = 400
HTTP_500 = 500

UNKNOWN_ERROR = "Unknown error"
MISSING_CONTENT_TYPE_MESSAGE = "Missing `Content-Type: application/json` header"
BODY_READ_MESSAGE = "Failed to buffer request body"


def normalize(
    outcome: DecodeOutcome, max_depth: int = DEFAULT_MAX_DEPTH
) -> Normalized:
    """Normalize a decode outcome.

    Args:
        outcome: Result of decoding a request body.
        max_depth: Maximum cause chain depth searched for a located error.

    Returns:
        The value unchanged on success, otherwise the normalized error.
    """
    if isinstance(outcome, DecodeSuccess):
        return Normalized(value=outcome.value)
    return Normalized(error=normalize_failure(outcome, max_depth))


def normalize_failure(
    failure: DecodeFailure, max_depth: int = DEFAULT_MAX_DEPTH
) -> NormalizedError:
    """Map a decode failure to a status code and message."""
    if failure.reason in (FailureReason.SYNTAX, FailureReason.SCHEMA):
        return _located_error(failure.error, max_depth)
    if failure.reason is FailureReason.MISSING_CONTENT_TYPE:
        return NormalizedError(HTTP_400, MISSING_CONTENT_TYPE_MESSAGE)
    if failure.reason is FailureReason.BODY_READ:
        return NormalizedError(HTTP_500, BODY_READ_MESSAGE)
    return NormalizedError(HTTP_500, UNKNOWN_ERROR)


def _located_error(error: BaseException | None, max_depth: int) -> NormalizedError:
    """Report the line and column of the innermost JSON decoder error."""
    if error is not None:
        located = find_error_source(error, json.JSONDecodeError, max_depth)
        if located is not None:
            return NormalizedError(
                HTTP_400,
                f"Invalid JSON at line {located.lineno} column {located.colno}",
            )
    return NormalizedError(HTTP_400, UNKNOWN_ERROR)
