import re
from typing import List, Optional

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401
from src.adapter.services.local_image_storage import LocalImageStorage
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.email_sender import EmailDeliveryError, IEmailSender
from src.depends import get_email_sender, get_image_storage, get_unit_of_work

RESET_LINK = re.compile(r"/resetpassword/([0-9a-f-]+)")


class FakeEmailSender(IEmailSender):
    """Records outgoing mail instead of talking to an SMTP server."""

    def __init__(self):
        self.sent: List[dict] = []
        self.fail = False

    async def send(
        self,
        subject: str,
        html_body: str,
        send_to: str,
        sent_from: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> None:
        if self.fail:
            raise EmailDeliveryError("SMTP unavailable")
        self.sent.append(
            {
                "subject": subject,
                "html_body": html_body,
                "send_to": send_to,
                "sent_from": sent_from,
                "reply_to": reply_to,
            }
        )

    def last_reset_token(self) -> str:
        return RESET_LINK.search(self.sent[-1]["html_body"]).group(1)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def email_sender():
    return FakeEmailSender()


@pytest_asyncio.fixture
async def client(db_session, email_sender, tmp_path):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    app.dependency_overrides[get_image_storage] = lambda: LocalImageStorage(str(tmp_path))

    transport = ASGITransport(app=app)
    # https so the Secure session cookie is sent back
    async with AsyncClient(transport=transport, base_url="https://test") as ac:
        yield ac


@pytest_asyncio.fixture
def register(client: AsyncClient):
    """Registers a user through the API; the session cookie lands in the client jar."""

    async def _register(
        name: str = "Jane Doe",
        email: str = "jane@example.com",
        password: str = "secret123",
    ):
        response = await client.post(
            "/api/users/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201
        return response.json()

    return _register
