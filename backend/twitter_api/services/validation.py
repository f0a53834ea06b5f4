"""Input rules shared by the services."""

import re
from typing import Optional

from twitter_api.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_email_valid(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def require_valid_email(email: Optional[str]) -> None:
    """Raise ValidationError unless `email` looks like an address (None is skipped)."""
    if email is not None and not is_email_valid(email):
        raise ValidationError(message="Invalid email format", field="email")


def is_blank(value: Optional[str]) -> bool:
    """Missing and whitespace-only strings both count as absent."""
    return value is None or not value.strip()
