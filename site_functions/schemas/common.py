"""Validation helpers shared by the request schemas."""

import re

# Permissive local@domain.tld shape; deliverability is not checked
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: str) -> bool:
    """Return True if ``value`` looks like an email address."""
    return bool(EMAIL_PATTERN.match(value))


def validate_email(value: str) -> str:
    """
    Pydantic validator body for email fields.

    Raises:
        ValueError: If the value does not look like an email address
    """
    if not is_valid_email(value):
        raise ValueError("Invalid email")
    return value
