"""
Field rules for sign-up input.

Each rule returns the messages of the checks it failed, or an empty
list. Rules for one field are evaluated together so that a value
breaking several constraints reports all of them.
"""

import re

from email_validator import EmailNotValidError, validate_email

from bodyguard.domain.accounts.entities import SignUpInput

NAME_MIN_LEN = 4
PASSWORD_MIN_LEN = 6
MOBILE_MIN_LEN = 10

_WORD_PATTERN = re.compile(r"^[^\W\d_]+$")
_MOBILE_PATTERN = re.compile(r"^\+?\d{10,15}$")


def is_word(value: str) -> bool:
    """True if ``value`` is a single word made of letters."""
    return bool(_WORD_PATTERN.match(value))


def is_email(value: str) -> bool:
    """True if ``value`` is a syntactically valid email address.

    Deliverability is not checked; no DNS lookups are made.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_mobile_number(value: str) -> bool:
    """True for 10 to 15 digits with an optional leading ``+``."""
    return bool(_MOBILE_PATTERN.match(value))


def check_name(name: str) -> list[str]:
    messages = []
    if len(name) < NAME_MIN_LEN:
        messages.append(f"Name must be at least {NAME_MIN_LEN} characters")
    if not is_word(name):
        messages.append("Name must be a single word")
    return messages


def check_email(email: str) -> list[str]:
    if not is_email(email):
        return ["enter a valid email"]
    return []


def check_password(password: str) -> list[str]:
    if len(password) < PASSWORD_MIN_LEN:
        return [f"Password must be at least {PASSWORD_MIN_LEN} characters"]
    return []


def check_mobile(mobile: str | None) -> list[str]:
    if mobile is None:
        return []
    messages = []
    if len(mobile) < MOBILE_MIN_LEN:
        messages.append("Minimum 10 digits")
    if not is_mobile_number(mobile):
        messages.append("Invalid mobile number")
    return messages


def validate_sign_up(data: SignUpInput) -> list[str]:
    """Run every field rule against ``data``.

    Args:
        data: The submitted sign-up input.

    Returns:
        All failure messages in field order. Empty when the input is valid.
    """
    return [
        *check_name(data.name),
        *check_email(data.email),
        *check_password(data.password),
        *check_mobile(data.mobile),
    ]
