"""
Data Transfer Objects for the accounts application layer.

They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SignUpCommand:
    """Input DTO for a sign-up request.

    Attributes:
        name: Requested user name.
        email: Contact email address.
        password: Plain password. Never logged or returned.
        mobile: Optional mobile number.
    """

    name: str
    email: str
    password: str = field(repr=False)
    mobile: Optional[str] = None


@dataclass(frozen=True)
class SignUpResult:
    """Output DTO for an accepted sign-up."""

    name: str
    email: str
    mobile: Optional[str]
