"""
Domain entities for the accounts bounded context.

They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SignUpInput:
    """Fields submitted by a new user."""

    name: str
    email: str
    password: str
    mobile: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"SignUpInput(name={self.name!r}, email={self.email!r}, "
            f"password='***', mobile={self.mobile!r})"
        )
