from datetime import UTC, datetime

from fastapi import Response

SESSION_COOKIE_NAME = "token"
COOKIE_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def set_session_cookie(response: Response, token: str, config) -> None:
    """Deliver a session token as an httpOnly cookie living as long as the token."""
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        path="/",
        httponly=True,
        expires=int(config.SESSION_TOKEN_TTL_HOURS) * 3600,
        samesite=config.COOKIE_SAMESITE,
        secure=config.COOKIE_SECURE,
    )


def clear_session_cookie(response: Response, config) -> None:
    """Overwrite the session cookie with an empty value that expired in the past."""
    response.set_cookie(
        SESSION_COOKIE_NAME,
        "",
        path="/",
        httponly=True,
        expires=COOKIE_EPOCH,
        samesite=config.COOKIE_SAMESITE,
        secure=config.COOKIE_SECURE,
    )
