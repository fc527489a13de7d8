"""
Domain-specific errors for the decoding bounded context.

All errors raised from the decoding domain must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from bodyguard.domain.decoding.entities import NormalizedError


class DecodingDomainError(Exception):
    """Base error for all decoding domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class JsonSyntaxError(DecodingDomainError):
    """Raised when the body is not syntactically valid JSON.

    The decoder error that triggered it is kept as ``__cause__``.
    """

    def __init__(self) -> None:
        super().__init__("Request body is not valid JSON")


class JsonSchemaError(DecodingDomainError):
    """Raised when valid JSON does not match the expected shape."""

    def __init__(self, schema_name: str) -> None:
        super().__init__(f"Request body does not match {schema_name}")
        self.schema_name = schema_name


class BodyReadError(DecodingDomainError):
    """Raised when the request body could not be buffered."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to read request body: {reason}")
        self.reason = reason


class PayloadRejectedError(DecodingDomainError):
    """Raised when a decode outcome normalized to an error."""

    def __init__(self, error: NormalizedError) -> None:
        super().__init__(error.message)
        self.status_code = error.status_code
