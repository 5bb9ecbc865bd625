from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from src.adapter.repositories.base import SqlModelRepository
from src.app.repositories.user_repository import EmailAlreadyExistsError, IUserRepository
from src.domain.entities import User


class UserRepository(SqlModelRepository[User], IUserRepository):
    """User repository implementation using SQLModel"""

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.exec(select(User).where(User.email == email))
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        return await self.session.get(User, user_id)

    async def create(self, user: User) -> User:
        # The unique email index is the only constraint a fresh insert can break
        email = user.email
        try:
            return await self._save(user)
        except IntegrityError as exc:
            raise EmailAlreadyExistsError(email) from exc

    async def update(self, user: User) -> User:
        return await self._save(user)
