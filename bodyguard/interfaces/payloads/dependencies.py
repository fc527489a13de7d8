"""
Dependency injection for the decoding bounded context.

Provides FastAPI dependency functions that decode request bodies
into DecodeOutcome values and build the use case that normalizes them.
"""

from typing import Awaitable, Callable, Optional, Type

from fastapi import Request
from pydantic import BaseModel

from bodyguard.application.decoding.accept_payload import AcceptPayloadUseCase
from bodyguard.core.config import settings
from bodyguard.domain.decoding.entities import DecodeOutcome
from bodyguard.infrastructure.decoding.json_body_decoder import decode_json_body


def get_accept_payload_use_case() -> AcceptPayloadUseCase:
    """Provide the payload acceptance use case."""
    return AcceptPayloadUseCase(max_cause_depth=settings.max_cause_depth)


def json_body_outcome(
    schema: Optional[Type[BaseModel]] = None,
) -> Callable[[Request], Awaitable[DecodeOutcome]]:
    """Build a dependency that decodes the request body as JSON.

    Args:
        schema: Optional pydantic model the body must satisfy.

    Returns:
        An async dependency resolving to the DecodeOutcome.
    """

    async def dependency(request: Request) -> DecodeOutcome:
        return await decode_json_body(
            request,
            schema=schema,
            max_size=settings.max_request_size_bytes,
        )

    return dependency
