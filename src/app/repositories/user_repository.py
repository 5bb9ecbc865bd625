from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class EmailAlreadyExistsError(Exception):
    """The email is already registered to another user"""


class IUserRepository(ABC):
    """Credential store - application layer

    Emails are stored lower-cased and trimmed; callers pass them normalized.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a user

        Raises:
            EmailAlreadyExistsError: the store already holds this email
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist changed profile fields or password hash"""
        pass
