"""
FastAPI router for the decoding bounded context.

Bodies are decoded by a dependency into a DecodeOutcome and accepted
or rejected by the use case. Rejections are mapped to responses by
the centralized error handlers.
"""

from fastapi import APIRouter, Depends

from bodyguard.application.decoding.accept_payload import AcceptPayloadUseCase
from bodyguard.domain.decoding.entities import DecodeOutcome
from bodyguard.interfaces.payloads.dependencies import (
    get_accept_payload_use_case,
    json_body_outcome,
)
from bodyguard.interfaces.payloads.schemas import (
    ErrorResponse,
    PayloadEnvelope,
    PayloadResponse,
    TypedPayloadResponse,
)

router = APIRouter(prefix="/payloads", tags=["payloads"])

REJECTION_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=PayloadResponse,
    responses=REJECTION_RESPONSES,
    summary="Accept any JSON payload",
    description="Echo a JSON body back, or explain why it could not be decoded.",
)
def accept_payload(
    outcome: DecodeOutcome = Depends(json_body_outcome()),
    use_case: AcceptPayloadUseCase = Depends(get_accept_payload_use_case),
) -> PayloadResponse:
    """Echo an arbitrary JSON payload."""
    return PayloadResponse(payload=use_case.execute(outcome))


@router.post(
    "/typed",
    response_model=TypedPayloadResponse,
    responses=REJECTION_RESPONSES,
    summary="Accept a typed JSON payload",
    description="Echo a body that must match the PayloadEnvelope schema.",
)
def accept_typed_payload(
    outcome: DecodeOutcome = Depends(json_body_outcome(PayloadEnvelope)),
    use_case: AcceptPayloadUseCase = Depends(get_accept_payload_use_case),
) -> TypedPayloadResponse:
    """Echo a payload envelope."""
    envelope: PayloadEnvelope = use_case.execute(outcome)
    return TypedPayloadResponse(kind=envelope.kind, data=envelope.data)
