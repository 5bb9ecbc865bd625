from uuid import uuid4

import pytest

from src.app.services.email_sender import EmailDeliveryError
from src.app.use_cases.contact import ContactUseCase
from src.domain.entities import User


@pytest.fixture
def user(mock_uow):
    user = User(id=uuid4(), name="Jane", email="jane@example.com", password_hash="x")
    mock_uow.users.get_by_id.return_value = user
    return user


@pytest.mark.asyncio
async def test_contact_sends_to_support_with_reply_to(mock_uow, mock_email_sender, user):
    use_case = ContactUseCase(mock_uow, mock_email_sender, support_email="support@example.com")

    result = await use_case.execute(user.id, "Help", "Where is my <order>?")

    assert result.is_ok()
    assert result.value.message == "Mail sent successfully"
    mock_email_sender.send.assert_called_once_with(
        "Help",
        "Where is my &lt;order&gt;?",
        "support@example.com",
        reply_to="jane@example.com",
    )


@pytest.mark.asyncio
async def test_contact_requires_subject_and_message(mock_uow, mock_email_sender, user):
    use_case = ContactUseCase(mock_uow, mock_email_sender, support_email="support@example.com")

    result = await use_case.execute(user.id, "Help", " ")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_email_sender.send.assert_not_called()


@pytest.mark.asyncio
async def test_contact_delivery_failure(mock_uow, mock_email_sender, user):
    mock_email_sender.send.side_effect = EmailDeliveryError("relay down")
    use_case = ContactUseCase(mock_uow, mock_email_sender, support_email="support@example.com")

    result = await use_case.execute(user.id, "Help", "Message")

    assert result.is_err()
    assert result.error.code == "EMAIL_NOT_SENT"
