"""
Pydantic schemas for the accounts API.

SignUpRequest only fixes field types; the field rules are domain
logic and run in the sign-up use case so that every broken rule is
reported together.
"""

from typing import Optional

from pydantic import BaseModel


class SignUpRequest(BaseModel):
    """Request schema for the sign-up endpoint."""

    name: str
    email: str
    password: str
    mobile: Optional[str] = None


class SignUpContent(BaseModel):
    """Accepted account details. The password is never returned."""

    name: str
    email: str
    mobile: Optional[str] = None


class SignUpResponse(BaseModel):
    """Envelope consumed by form clients."""

    success: bool
    content: SignUpContent
