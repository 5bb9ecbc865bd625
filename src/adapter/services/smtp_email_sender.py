import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from src.app.services.email_sender import EmailDeliveryError, IEmailSender

logger = logging.getLogger(__name__)


class SmtpEmailSender(IEmailSender):
    """Plain SMTP relay; the blocking smtplib calls run in a worker thread."""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str = "",
        password: str = "",
        default_from: str = "",
        use_tls: bool = True,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.default_from = default_from
        self.use_tls = use_tls

    async def send(
        self,
        subject: str,
        html_body: str,
        send_to: str,
        sent_from: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> None:
        if not self.host:
            raise EmailDeliveryError("Mail relay is not configured")

        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = sent_from or self.default_from
        msg["To"] = send_to
        if reply_to:
            msg["Reply-To"] = reply_to
        msg.set_content(html_body, subtype="html")

        try:
            await asyncio.to_thread(self._deliver, msg)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(f"SMTP delivery to {self.host}:{self.port} failed: {exc}")
            raise EmailDeliveryError(str(exc)) from exc

    def _deliver(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=30) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username and self.password:
                smtp.login(self.username, self.password)
            smtp.send_message(msg)
