"""
Use case: Validate a sign-up submission.

Input: SignUpCommand
Output: SignUpResult
Side effects: None.
Failure cases: SignUpValidationError listing every broken field rule.
"""

import logging

from bodyguard.application.accounts.dtos import SignUpCommand, SignUpResult
from bodyguard.domain.accounts.entities import SignUpInput
from bodyguard.domain.accounts.errors import SignUpValidationError
from bodyguard.domain.accounts.rules import validate_sign_up

logger = logging.getLogger(__name__)


class SignUpUseCase:
    """Checks sign-up input against the account field rules."""

    def execute(self, command: SignUpCommand) -> SignUpResult:
        """Run the sign-up validation use case.

        Args:
            command: The submitted sign-up fields.

        Returns:
            The accepted account details, without the password.
        """
        data = SignUpInput(
            name=command.name,
            email=command.email,
            password=command.password,
            mobile=command.mobile,
        )
        messages = validate_sign_up(data)
        if messages:
            logger.info("Sign-up rejected: %d rule(s) failed", len(messages))
            raise SignUpValidationError(messages)

        logger.info("Sign-up accepted for name=%s", data.name)
        return SignUpResult(name=data.name, email=data.email, mobile=data.mobile)
