"""
Contact Use Case

Relays a message from an authenticated user to the support mailbox.
"""

import html
import logging
from uuid import UUID

from pydantic import BaseModel

from src.app.services.email_sender import EmailDeliveryError, IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class ContactResponse(BaseModel):
    success: bool
    message: str


class ContactUseCase:
    """
    Business Rules:
    - Sender must be an existing user
    - Subject and message are required
    - Mail goes to the support address with Reply-To set to the user's email
    """

    def __init__(self, uow: UnitOfWork, email_sender: IEmailSender, support_email: str):
        self.uow = uow
        self.email_sender = email_sender
        self.support_email = support_email

    async def execute(self, user_id: UUID, subject: str, message: str) -> Result[ContactResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found, please sign up"))
            user_email = user.email

        if not (subject or "").strip() or not (message or "").strip():
            return Return.err(
                Error("VALIDATION_ERROR", "Please fill subject and message field")
            )

        try:
            await self.email_sender.send(
                subject,
                html.escape(message),
                self.support_email,
                reply_to=user_email,
            )
        except EmailDeliveryError as exc:
            logger.warning(f"Contact email from user {user_id} not sent: {exc}")
            return Return.err(
                Error("EMAIL_NOT_SENT", "Email not sent, please try again")
            )

        return Return.ok(ContactResponse(success=True, message="Mail sent successfully"))
