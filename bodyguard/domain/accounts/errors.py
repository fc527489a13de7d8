"""
Domain-specific errors for the accounts bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class AccountDomainError(Exception):
    """Base error for all accounts domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class SignUpValidationError(AccountDomainError):
    """Raised when sign-up input breaks one or more field rules.

    Every broken rule is reported, in field order.
    """

    def __init__(self, messages: list[str]) -> None:
        super().__init__(", ".join(messages) if messages else "Invalid data")
        self.messages = messages
