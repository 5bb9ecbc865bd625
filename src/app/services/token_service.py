from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class TokenClaims(BaseModel):
    """Verified content of a session token"""

    user_id: UUID
    issued_at: datetime
    expires_at: datetime


class ITokenService(ABC):
    """Session token issuer/verifier - application layer"""

    @abstractmethod
    def issue(self, user_id: UUID) -> str:
        """Issue a signed session token for the user"""
        pass

    @abstractmethod
    def verify(self, token: str) -> Optional[TokenClaims]:
        """Return the claims of a valid token, None if tampered, malformed or expired"""
        pass
