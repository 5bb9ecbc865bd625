"""
Update Profile Use Case

Partially updates name, photo, phone and bio of the authenticated user.
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserProfile
from src.domain.base import utcnow
from src.domain.entities.user import BIO_MAX_LENGTH
from src.libs.result import Error, Result, Return
from .dtos import UpdateProfileCommand


def merge_field(current: str, new: Optional[str]) -> str:
    """Absent (None) and blank values keep the current value."""
    if new is None or not new.strip():
        return current
    return new


class UpdateProfileUseCase:
    """
    Business Rules:
    - Email cannot be changed here
    - Absent, null or empty-string fields keep their stored value
    - Bio is limited to 250 characters
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: UUID, command: UpdateProfileCommand) -> Result[UserProfile]:
        if command.bio is not None and len(command.bio) > BIO_MAX_LENGTH:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Bio cannot exceed {BIO_MAX_LENGTH} characters",
                )
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.name = merge_field(user.name, command.name)
            user.photo = merge_field(user.photo, command.photo)
            user.phone = merge_field(user.phone, command.phone)
            user.bio = merge_field(user.bio, command.bio)
            user.updated_at = self.clock()

            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(UserProfile.from_user(user))
