"""
Unit tests for ConfirmPasswordResetUseCase
"""
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.auth import ConfirmPasswordResetUseCase
from src.app.use_cases.auth.reset_token import generate_reset_token, hash_reset_token
from src.domain.entities import PasswordResetToken, User

NOW = datetime(2024, 5, 1, 12, 0, 0)


@pytest.fixture
def user():
    return User(id=uuid4(), name="Jane", email="jane@example.com", password_hash="hashed:old-password")


@pytest.fixture
def cleartext(user):
    return generate_reset_token(user.id)


@pytest.fixture
def reset_record(user, cleartext):
    return PasswordResetToken(
        user_id=user.id,
        token_hash=hash_reset_token(cleartext),
        created_at=NOW - timedelta(minutes=5),
        expires_at=NOW + timedelta(minutes=25),
    )


@pytest.mark.asyncio
async def test_confirm_reset_updates_password_and_consumes_token(
    mock_uow, mock_password_hasher, user, cleartext, reset_record
):
    mock_uow.password_reset_tokens.get_active_by_token_hash.return_value = reset_record
    mock_uow.users.get_by_id.return_value = user
    use_case = ConfirmPasswordResetUseCase(mock_uow, mock_password_hasher, clock=lambda: NOW)

    result = await use_case.execute(cleartext, "new-secret")

    assert result.is_ok()
    assert result.value.message == "Password reset successful"
    mock_uow.password_reset_tokens.get_active_by_token_hash.assert_called_once_with(
        hash_reset_token(cleartext), NOW
    )
    assert user.password_hash == "hashed:new-secret"
    mock_uow.password_reset_tokens.delete.assert_called_once_with(reset_record)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_confirm_reset_unknown_or_expired_token(mock_uow, mock_password_hasher):
    use_case = ConfirmPasswordResetUseCase(mock_uow, mock_password_hasher, clock=lambda: NOW)

    result = await use_case.execute("not-a-real-token", "new-secret")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_password_hasher.hash.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_reset_rejects_short_password(mock_uow, mock_password_hasher, cleartext, reset_record):
    mock_uow.password_reset_tokens.get_active_by_token_hash.return_value = reset_record
    use_case = ConfirmPasswordResetUseCase(mock_uow, mock_password_hasher, clock=lambda: NOW)

    result = await use_case.execute(cleartext, "123")

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"
    mock_uow.password_reset_tokens.delete.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_reset_user_gone(mock_uow, mock_password_hasher, cleartext, reset_record):
    mock_uow.password_reset_tokens.get_active_by_token_hash.return_value = reset_record
    use_case = ConfirmPasswordResetUseCase(mock_uow, mock_password_hasher, clock=lambda: NOW)

    result = await use_case.execute(cleartext, "new-secret")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
