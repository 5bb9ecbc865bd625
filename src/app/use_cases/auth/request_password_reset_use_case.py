"""
Request Password Reset Use Case

Handles generating and sending password reset tokens.
"""

import html
import logging
from datetime import datetime, timedelta
from typing import Callable
from uuid import UUID

from src.app.repositories.password_reset_token_repository import ResetTokenConflictError
from src.app.services.email_sender import EmailDeliveryError, IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken
from src.libs.result import Error, Result, Return
from .dtos import RequestPasswordResetResponse
from .password_policy import normalize_email
from .reset_token import generate_reset_token, hash_reset_token

logger = logging.getLogger(__name__)

RESET_EMAIL_SUBJECT = "Password reset request"
STORE_ATTEMPTS = 3


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Unknown email is reported as USER_NOT_FOUND and creates nothing
    - Any previous reset token of the user is deleted first, so at most
      one token per user is ever live; of two concurrent requests the
      later one wins
    - Token is 32 random bytes (hex) + user id; only its SHA-256 hash is stored
    - Token expires 30 minutes after creation
    - The token record is committed before the email is sent; a failed
      delivery is reported as EMAIL_NOT_SENT but the record stays
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: IEmailSender,
        frontend_url: str,
        token_ttl: timedelta = timedelta(minutes=30),
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.frontend_url = frontend_url
        self.token_ttl = token_ttl
        self.clock = clock

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with reset status, or Error
        """
        email = normalize_email(email)
        if not email:
            return Return.err(Error("VALIDATION_ERROR", "Please add an email"))

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user_id, user_name, user_email = user.id, user.name, user.email
            reset_token = generate_reset_token(user_id)

            stored = await self._replace_token(user_id, hash_reset_token(reset_token))
            if not stored:
                logger.error(f"Password reset token for user {user_id} could not be stored")
                return Return.err(
                    Error("RESET_TOKEN_CONFLICT", "Reset could not be started, please try again")
                )

        logger.info(f"Password reset requested for user {user_id}")

        reset_url = f"{self.frontend_url.rstrip('/')}/resetpassword/{reset_token}"
        message = self._render_message(user_name, reset_url)

        try:
            await self.email_sender.send(RESET_EMAIL_SUBJECT, message, user_email)
        except EmailDeliveryError as exc:
            logger.warning(f"Password reset email for user {user_id} not sent: {exc}")
            return Return.err(
                Error("EMAIL_NOT_SENT", "Email not sent, please try again")
            )

        return Return.ok(
            RequestPasswordResetResponse(success=True, message="Reset email sent")
        )

    async def _replace_token(self, user_id: UUID, token_hash: str) -> bool:
        """
        Delete the user's previous token and store the new one, then commit.

        A concurrent request for the same user can insert between our delete
        and insert; the transaction is then retried so the later request wins.
        """
        for _ in range(STORE_ATTEMPTS):
            await self.uow.password_reset_tokens.delete_by_user_id(user_id)

            now = self.clock()
            password_reset_token = PasswordResetToken(
                user_id=user_id,
                token_hash=token_hash,
                created_at=now,
                expires_at=now + self.token_ttl,
            )
            try:
                await self.uow.password_reset_tokens.create(password_reset_token)
            except ResetTokenConflictError:
                await self.uow.rollback()
                continue

            await self.uow.commit()
            return True

        return False

    def _render_message(self, name: str, reset_url: str) -> str:
        minutes = int(self.token_ttl.total_seconds() // 60)
        url = html.escape(reset_url, quote=True)
        return f"""
            <h2>Hello {html.escape(name)}</h2>
            <p>Please use the URL below to reset your password</p>
            <p>The link is valid only for {minutes} minutes</p>

            <a href="{url}" clicktracking="off">{url}</a>

            <p>Kind regards,</p>
            <p>M-ventory team</p>
        """
