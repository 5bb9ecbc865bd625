from datetime import UTC, datetime, timedelta
from typing import Callable, Optional
from uuid import UUID

from jose import JWTError, jwt

from src.app.services.token_service import ITokenService, TokenClaims

ALGORITHM = "HS256"


class JwtTokenService(ITokenService):
    """
    Session tokens as HS256 JWTs.

    Payload: {"user_id": str, "iat": float, "exp": float}; NumericDate keeps
    the fractional second so the lifetime is exact. Expiry is checked
    against the injected clock rather than by python-jose, so a token is
    rejected from the exact instant its lifetime ends.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = timedelta(hours=24),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self.secret = secret
        self.ttl = ttl
        self.clock = clock or (lambda: datetime.now(UTC))

    def issue(self, user_id: UUID) -> str:
        """
        Generate a signed session token

        Args:
            user_id: User UUID

        Returns:
            JWT token string (HS256, expires after ttl)
        """
        now = self.clock()
        payload = {
            "user_id": str(user_id),
            "iat": now.timestamp(),
            "exp": (now + self.ttl).timestamp(),
        }
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Optional[TokenClaims]:
        """
        Verify and decode a session token

        Args:
            token: JWT token string

        Returns:
            TokenClaims or None if the signature, payload or expiry is invalid
        """
        try:
            payload = jwt.decode(
                token, self.secret, algorithms=[ALGORITHM], options={"verify_exp": False}
            )
        except JWTError:
            return None

        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(issued_at, (int, float)) or not isinstance(expires_at, (int, float)):
            return None
        if self.clock().timestamp() >= expires_at:
            return None

        try:
            user_id = UUID(str(payload.get("user_id")))
        except ValueError:
            return None

        return TokenClaims(
            user_id=user_id,
            issued_at=datetime.fromtimestamp(issued_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )
