from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from src.adapter.repositories.base import SqlModelRepository
from src.app.repositories.password_reset_token_repository import (
    IPasswordResetTokenRepository,
    ResetTokenConflictError,
)
from src.domain.entities import PasswordResetToken


class PasswordResetTokenRepository(
    SqlModelRepository[PasswordResetToken], IPasswordResetTokenRepository
):
    """PasswordResetToken repository implementation using SQLModel"""

    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        user_id = token.user_id
        try:
            return await self._save(token)
        except IntegrityError as exc:
            raise ResetTokenConflictError(str(user_id)) from exc

    async def get_active_by_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[PasswordResetToken]:
        """Get password reset token by hash, ignoring expired ones"""
        stmt = select(PasswordResetToken).where(
            PasswordResetToken.token_hash == token_hash,
            PasswordResetToken.expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete all password reset tokens of a user"""
        stmt = delete(PasswordResetToken).where(PasswordResetToken.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete(self, token: PasswordResetToken) -> None:
        """Delete a password reset token"""
        await self._remove(token)
