"""
Confirm Password Reset Use Case

Redeems a password reset token and sets the new password.
"""

import logging
from datetime import datetime
from typing import Callable

from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.libs.result import Error, Result, Return
from .dtos import ConfirmPasswordResetResponse
from .password_policy import validate_password
from .reset_token import hash_reset_token

logger = logging.getLogger(__name__)

INVALID_TOKEN = Error("INVALID_TOKEN", "Invalid or expired reset token")


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is validated by hashing and comparing with stored hash
    - Only tokens whose expiry lies in the future match
    - Unknown, wrong, expired and already redeemed tokens all yield
      INVALID_TOKEN, so the caller cannot tell them apart
    - New password must be at least 6 characters
    - Token record is deleted after a successful reset (single-use)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.clock = clock

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (cleartext from email)
            new_password: New password to set

        Returns:
            Result with confirmation message, or Error

        Errors:
            - INVALID_PASSWORD: Password does not meet complexity requirements
            - INVALID_TOKEN: Token not found, expired or already used
        """
        password_validation = validate_password(new_password or "")
        if password_validation.is_err():
            return Return.err(password_validation.error)

        token_hash = hash_reset_token(token)

        async with self.uow:
            reset_token = await self.uow.password_reset_tokens.get_active_by_token_hash(
                token_hash, self.clock()
            )
            if reset_token is None:
                return Return.err(INVALID_TOKEN)

            user = await self.uow.users.get_by_id(reset_token.user_id)
            if user is None:
                return Return.err(INVALID_TOKEN)

            user.password_hash = await self.password_hasher.hash(new_password)
            user.updated_at = self.clock()
            await self.uow.users.update(user)

            await self.uow.password_reset_tokens.delete(reset_token)

            await self.uow.commit()

            logger.info(f"Password reset completed for user {user.id}")

            return Return.ok(
                ConfirmPasswordResetResponse(message="Password reset successful")
            )
