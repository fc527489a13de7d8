"""
Use case: Accept a decoded request body or reject it uniformly.

Input: DecodeOutcome
Output: The decoded value, unchanged.
Side effects: None.
Failure cases: PayloadRejectedError carrying the normalized status and message.
"""

import logging
from typing import Any

from bodyguard.domain.decoding.cause_chain import DEFAULT_MAX_DEPTH
from bodyguard.domain.decoding.entities import DecodeOutcome
from bodyguard.domain.decoding.errors import PayloadRejectedError
from bodyguard.domain.decoding.normalizer import normalize

logger = logging.getLogger(__name__)


class AcceptPayloadUseCase:
    """Runs a decode outcome through the error normalizer."""

    def __init__(self, max_cause_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._max_cause_depth = max_cause_depth

    def execute(self, outcome: DecodeOutcome) -> Any:
        """Return the decoded value or raise the normalized rejection.

        Args:
            outcome: Result of decoding the request body.

        Returns:
            The decoded value.

        Raises:
            PayloadRejectedError: If the body could not be decoded.
        """
        result = normalize(outcome, max_depth=self._max_cause_depth)
        if result.ok:
            return result.value

        logger.warning(
            "Rejected request body: status=%d, message=%s",
            result.error.status_code,
            result.error.message,
        )
        raise PayloadRejectedError(result.error)
