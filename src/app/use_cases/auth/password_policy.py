"""Credential input rules shared by the account use cases."""

from typing import Optional

from src.libs.result import Error, Result, Return

MIN_PASSWORD_LENGTH = 6


def normalize_email(email: Optional[str]) -> str:
    """Emails are compared case-insensitively; store and look up the lower-cased form."""
    return (email or "").strip().lower()


def validate_password(password: str) -> Result[None]:
    """
    Validate password complexity.

    Args:
        password: Password to validate

    Returns:
        Result with None if valid, or Error if invalid
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        )

    return Return.ok(None)
