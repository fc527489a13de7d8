"""
Domain entities for the decoding bounded context.

A decode attempt always ends in exactly one DecodeOutcome variant.
The failure reason is fixed at the decode site so that the normalizer
matches on a closed enumeration instead of inspecting exception types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class FailureReason(Enum):
    """Why a request body could not be decoded."""

    SYNTAX = "syntax"
    SCHEMA = "schema"
    MISSING_CONTENT_TYPE = "missing_content_type"
    BODY_READ = "body_read"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DecodeSuccess:
    """The body was decoded into ``value``."""

    value: Any


@dataclass(frozen=True)
class DecodeFailure:
    """The body could not be decoded.

    Attributes:
        reason: Classification made where the decode was attempted.
        error: The underlying exception, if one was raised.
    """

    reason: FailureReason
    error: Optional[BaseException] = None


DecodeOutcome = Union[DecodeSuccess, DecodeFailure]


@dataclass(frozen=True)
class NormalizedError:
    """The only externally observable error shape."""

    status_code: int
    message: str


@dataclass(frozen=True)
class Normalized:
    """Result of normalizing a decode outcome.

    Exactly one of ``value`` (on success) or ``error`` is meaningful.
    """

    value: Any = None
    error: Optional[NormalizedError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
