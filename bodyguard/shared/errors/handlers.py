"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema: {"message": str}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bodyguard.domain.accounts.errors import AccountDomainError, SignUpValidationError
from bodyguard.domain.decoding.errors import DecodingDomainError, PayloadRejectedError
from bodyguard.domain.files.errors import FileDomainError, StoredFileNotFoundError

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500

INTERNAL_ERROR = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"message": message})


def validation_message(exc: RequestValidationError) -> str:
    """Join every request validation failure into one message."""
    parts = []
    for error in exc.errors():
        location = error.get("loc") or ()
        field = location[-1] if location else "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return ", ".join(parts) or "Invalid data"


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report path and query parameter errors in the standard shape."""
        logger.warning("Request validation failed: %d error(s)", len(exc.errors()))
        return error_response(HTTP_422, validation_message(exc))

    @app.exception_handler(PayloadRejectedError)
    async def handle_payload_rejected(
        _request: Request, exc: PayloadRejectedError
    ) -> JSONResponse:
        """Return the normalized status and message of a rejected body."""
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(DecodingDomainError)
    async def handle_decoding_domain(
        _request: Request, exc: DecodingDomainError
    ) -> JSONResponse:
        """Catch-all for decoding errors that escaped normalization."""
        logger.error("Unhandled decoding domain error: %s", exc.message)
        return error_response(HTTP_500, INTERNAL_ERROR)

    @app.exception_handler(SignUpValidationError)
    async def handle_sign_up_validation(
        _request: Request, exc: SignUpValidationError
    ) -> JSONResponse:
        """Report every broken sign-up rule in one message."""
        logger.warning("Sign-up validation failed: %d rule(s)", len(exc.messages))
        return error_response(HTTP_422, exc.message)

    @app.exception_handler(AccountDomainError)
    async def handle_account_domain(
        _request: Request, exc: AccountDomainError
    ) -> JSONResponse:
        logger.error("Unhandled account domain error: %s", exc.message)
        return error_response(HTTP_500, INTERNAL_ERROR)

    @app.exception_handler(StoredFileNotFoundError)
    async def handle_file_not_found(
        _request: Request, exc: StoredFileNotFoundError
    ) -> JSONResponse:
        """Handle unknown file ids."""
        logger.warning("File not found: %s", exc.file_id)
        return error_response(HTTP_404, "File not found")

    @app.exception_handler(FileDomainError)
    async def handle_file_domain(
        _request: Request, exc: FileDomainError
    ) -> JSONResponse:
        logger.error("Unhandled file domain error: %s", exc.message)
        return error_response(HTTP_500, INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, INTERNAL_ERROR)
