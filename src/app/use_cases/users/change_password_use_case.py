"""
Change Password Use Case

Replaces the password of the authenticated user after checking the old one.
"""

import logging
from datetime import datetime
from typing import Callable
from uuid import UUID

from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.password_policy import validate_password
from src.domain.base import utcnow
from src.libs.result import Error, Result, Return
from .dtos import ChangePasswordCommand, MessageResponse

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Business Rules:
    - User must still exist
    - Old and new password are both required
    - Old password must match the stored hash
    - New password must be at least 6 characters
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

    async def execute(self, user_id: UUID, command: ChangePasswordCommand) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not command.old_password or not command.password:
                return Return.err(
                    Error("VALIDATION_ERROR", "Please add old and new password")
                )

            old_password_valid = await self.password_hasher.verify(
                command.old_password, user.password_hash
            )
            if not old_password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Old password is not correct")
                )

            password_validation = validate_password(command.password)
            if password_validation.is_err():
                return Return.err(password_validation.error)

            user.password_hash = await self.password_hasher.hash(command.password)
            user.updated_at = self.clock()
            await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(f"Password changed for user {user.id}")

            return Return.ok(MessageResponse(message="Password changed successfully"))
