"""
Authenticate Use Case

Resolves a session token to the identity of an existing user.
Runs before every protected operation and never mutates state.
"""

from typing import Optional

from src.app.services.token_service import ITokenService
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .dtos import AuthenticatedUser

NOT_AUTHORIZED = Error("NOT_AUTHORIZED", "Not authorized, please log in")


class AuthenticateUseCase:
    """
    Business Rules:
    - Missing, tampered, malformed or expired tokens are rejected
    - Tokens of users that no longer exist are rejected
    - All rejections look the same to the caller
    """

    def __init__(self, uow: UnitOfWork, token_service: ITokenService):
        self.uow = uow
        self.token_service = token_service

    async def execute(self, token: Optional[str]) -> Result[AuthenticatedUser]:
        if not token:
            return Return.err(NOT_AUTHORIZED)

        claims = self.token_service.verify(token)
        if claims is None:
            return Return.err(NOT_AUTHORIZED)

        async with self.uow:
            user = await self.uow.users.get_by_id(claims.user_id)
            if user is None:
                return Return.err(NOT_AUTHORIZED)

            return Return.ok(
                AuthenticatedUser(id=user.id, name=user.name, email=user.email)
            )
