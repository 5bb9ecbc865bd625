import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.password_reset_tokens.get_active_by_token_hash = AsyncMock(return_value=None)
    uow.password_reset_tokens.delete_by_user_id = AsyncMock(return_value=0)
    uow.password_reset_tokens.delete = AsyncMock()

    uow.products = MagicMock()
    uow.products.get_by_id = AsyncMock(return_value=None)
    uow.products.list_by_user_id = AsyncMock(return_value=[])
    uow.products.create = AsyncMock(side_effect=lambda product: product)
    uow.products.update = AsyncMock(side_effect=lambda product: product)
    uow.products.delete = AsyncMock()
    return uow


@pytest.fixture
def mock_password_hasher():
    hasher = MagicMock()
    hasher.hash = AsyncMock(side_effect=lambda password: f"hashed:{password}")
    hasher.verify = AsyncMock(
        side_effect=lambda password, password_hash: password_hash == f"hashed:{password}"
    )
    return hasher


@pytest.fixture
def mock_token_service():
    service = MagicMock()
    service.issue = MagicMock(return_value="session.jwt.token")
    service.verify = MagicMock(return_value=None)
    return service


@pytest.fixture
def mock_email_sender():
    sender = MagicMock()
    sender.send = AsyncMock()
    return sender
