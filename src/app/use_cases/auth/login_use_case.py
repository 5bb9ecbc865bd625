"""
Login Use Case

Authenticates a user by email and password and issues a session token.
"""

from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_service import ITokenService
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .dtos import AuthResponse, UserProfile
from .password_policy import normalize_email


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown email and wrong password produce the same error
    - Password hashing work is performed even if the user is not found,
      so response time does not reveal whether the email exists
    - Session token is only issued after the password matched
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse containing profile and token, or Error
        """
        email = normalize_email(email)
        if not email or not password:
            return Return.err(
                Error("VALIDATION_ERROR", "Please add email and password")
            )

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                # Burn the same bcrypt work as a real comparison
                await self.password_hasher.hash(password)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            password_valid = await self.password_hasher.verify(
                password, user.password_hash
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            token = self.token_service.issue(user.id)
            profile = UserProfile.from_user(user)

            return Return.ok(AuthResponse(**profile.model_dump(), token=token))
