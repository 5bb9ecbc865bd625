from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import PasswordResetToken


class ResetTokenConflictError(Exception):
    """Another reset token for the same user was stored concurrently"""


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """
        Create a new password reset token

        Raises:
            ResetTokenConflictError: the user already has a stored token
        """
        pass

    @abstractmethod
    async def get_active_by_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[PasswordResetToken]:
        """Get a token matching the hash that expires after `now`"""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete every reset token of a user. Returns count of deleted tokens."""
        pass

    @abstractmethod
    async def delete(self, token: PasswordResetToken) -> None:
        """Delete a single reset token"""
        pass
