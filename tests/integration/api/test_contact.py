import pytest
from httpx import AsyncClient

from config import ApplicationConfig


@pytest.mark.asyncio
async def test_contact_relays_to_support(client: AsyncClient, email_sender, register):
    await register()

    response = await client.post("/api/contact", json={"subject": "Help", "message": "Stock is off"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Mail sent successfully"}
    mail = email_sender.sent[-1]
    assert mail["send_to"] == ApplicationConfig.SUPPORT_EMAIL
    assert mail["reply_to"] == "jane@example.com"
    assert mail["subject"] == "Help"


@pytest.mark.asyncio
async def test_contact_requires_message(client: AsyncClient, email_sender, register):
    await register()

    response = await client.post("/api/contact", json={"subject": "Help", "message": ""})

    assert response.status_code == 400
    assert email_sender.sent == []


@pytest.mark.asyncio
async def test_contact_requires_session(client: AsyncClient):
    response = await client.post("/api/contact", json={"subject": "Help", "message": "Hi"})

    assert response.status_code == 401
