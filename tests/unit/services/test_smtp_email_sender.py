from unittest.mock import MagicMock

import pytest

from src.adapter.services import smtp_email_sender
from src.adapter.services.smtp_email_sender import SmtpEmailSender
from src.app.services.email_sender import EmailDeliveryError


@pytest.fixture
def smtp(monkeypatch):
    client = MagicMock()
    factory = MagicMock()
    factory.return_value.__enter__.return_value = client
    monkeypatch.setattr(smtp_email_sender.smtplib, "SMTP", factory)
    return client


@pytest.mark.asyncio
async def test_send_builds_html_message(smtp):
    sender = SmtpEmailSender("smtp.example.com", username="u", password="p", default_from="noreply@example.com")

    await sender.send("Hello", "<p>Hi</p>", "jane@example.com", reply_to="bob@example.com")

    smtp.starttls.assert_called_once()
    smtp.login.assert_called_once_with("u", "p")
    msg = smtp.send_message.call_args.args[0]
    assert msg["Subject"] == "Hello"
    assert msg["From"] == "noreply@example.com"
    assert msg["To"] == "jane@example.com"
    assert msg["Reply-To"] == "bob@example.com"
    assert msg.get_content_subtype() == "html"


@pytest.mark.asyncio
async def test_send_without_relay_configured():
    with pytest.raises(EmailDeliveryError):
        await SmtpEmailSender("").send("Hello", "<p>Hi</p>", "jane@example.com")


@pytest.mark.asyncio
async def test_send_wraps_smtp_errors(smtp):
    smtp.send_message.side_effect = smtp_email_sender.smtplib.SMTPException("rejected")

    with pytest.raises(EmailDeliveryError):
        await SmtpEmailSender("smtp.example.com").send("Hello", "<p>Hi</p>", "jane@example.com")
