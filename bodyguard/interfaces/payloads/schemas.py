"""
Pydantic schemas for payload API requests and responses.

These schemas define the API contract.
No business logic belongs here.
"""

from typing import Any

from pydantic import BaseModel, Field


class PayloadEnvelope(BaseModel):
    """Typed payload accepted by POST /payloads/typed.

    Attributes:
        kind: Free-form payload kind label.
        data: Arbitrary JSON object.
    """

    kind: str = Field(..., min_length=1, max_length=64)
    data: dict[str, Any]


class PayloadResponse(BaseModel):
    """Echo of an accepted JSON payload."""

    payload: Any


class TypedPayloadResponse(BaseModel):
    """Echo of an accepted typed payload."""

    kind: str
    data: dict[str, Any]


class ErrorResponse(BaseModel):
    """Standard error response returned by every failing endpoint."""

    message: str


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    service: str
    version: str
