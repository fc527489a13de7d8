"""
FastAPI router for the accounts bounded context.

All routes delegate to use cases. No business logic here.
"""

from fastapi import APIRouter, Depends, status

from bodyguard.application.accounts.dtos import SignUpCommand
from bodyguard.application.accounts.sign_up import SignUpUseCase
from bodyguard.application.decoding.accept_payload import AcceptPayloadUseCase
from bodyguard.domain.decoding.entities import DecodeOutcome
from bodyguard.interfaces.accounts.schemas import (
    SignUpContent,
    SignUpRequest,
    SignUpResponse,
)
from bodyguard.interfaces.payloads.dependencies import (
    get_accept_payload_use_case,
    json_body_outcome,
)
from bodyguard.interfaces.payloads.schemas import ErrorResponse

router = APIRouter(prefix="/accounts", tags=["accounts"])


def get_sign_up_use_case() -> SignUpUseCase:
    """Provide the sign-up use case."""
    return SignUpUseCase()


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=SignUpResponse,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Sign up",
    description="Validate sign-up input and report every broken field rule.",
)
def sign_up(
    outcome: DecodeOutcome = Depends(json_body_outcome(SignUpRequest)),
    accept: AcceptPayloadUseCase = Depends(get_accept_payload_use_case),
    use_case: SignUpUseCase = Depends(get_sign_up_use_case),
) -> SignUpResponse:
    """Validate a sign-up submission."""
    request: SignUpRequest = accept.execute(outcome)
    result = use_case.execute(
        SignUpCommand(
            name=request.name,
            email=request.email,
            password=request.password,
            mobile=request.mobile,
        )
    )
    return SignUpResponse(
        success=True,
        content=SignUpContent(
            name=result.name, email=result.email, mobile=result.mobile
        ),
    )
