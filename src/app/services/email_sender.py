from abc import ABC, abstractmethod
from typing import Optional


class EmailDeliveryError(Exception):
    """Raised when an email could not be handed to the mail relay"""


class IEmailSender(ABC):
    """Outbound email - application layer"""

    @abstractmethod
    async def send(
        self,
        subject: str,
        html_body: str,
        send_to: str,
        sent_from: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> None:
        """
        Send an HTML email.

        Raises:
            EmailDeliveryError: mail relay rejected or was unreachable
        """
        pass
