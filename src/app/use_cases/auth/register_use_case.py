"""
Register Use Case

Creates a user account and opens a session for it.
"""

import logging

from src.app.repositories.user_repository import EmailAlreadyExistsError
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_service import ITokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.libs.result import Error, Result, Return
from .dtos import AuthResponse, RegisterCommand, UserProfile
from .password_policy import normalize_email, validate_password

logger = logging.getLogger(__name__)

EMAIL_ALREADY_EXISTS = Error("EMAIL_ALREADY_EXISTS", "User email already in use")


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. name, email and password are required
    2. Password must be at least 6 characters
    3. Email must not already be registered (case-insensitive), including
       by a concurrent registration that inserts first
    4. Hash password with bcrypt (cost factor 10)
    5. Create User with default profile fields
    6. Issue a 24-hour session token
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

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with name, email, password

        Returns:
            Result[AuthResponse] with the profile and session token,
            or Error(VALIDATION_ERROR | INVALID_PASSWORD | EMAIL_ALREADY_EXISTS)
        """
        name = command.name.strip()
        email = normalize_email(command.email)
        if not name or not email or not command.password:
            return Return.err(
                Error("VALIDATION_ERROR", "Please fill in all required fields")
            )

        password_validation = validate_password(command.password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(EMAIL_ALREADY_EXISTS)

            password_hash = await self.password_hasher.hash(command.password)

            user = User(name=name, email=email, password_hash=password_hash)
            try:
                user = await self.uow.users.create(user)
            except EmailAlreadyExistsError:
                # A concurrent registration took the email after the check above
                await self.uow.rollback()
                return Return.err(EMAIL_ALREADY_EXISTS)

            await self.uow.commit()

            logger.info(f"User registered: {user.id}")

            token = self.token_service.issue(user.id)
            profile = UserProfile.from_user(user)

            return Return.ok(AuthResponse(**profile.model_dump(), token=token))
